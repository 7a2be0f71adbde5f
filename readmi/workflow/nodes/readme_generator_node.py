from dataclasses import replace
from typing import Any, Optional

from langchain_openai import ChatOpenAI
from langchain_core.messages import SystemMessage, HumanMessage

from ...logging_config import get_logger
from ...project.schemas import ProjectInfo
from ...update import UpdateMode, diff, merge_with_provenance
from ..prompts import append_footer, build_readme_prompt, post_process_readme, strip_footer
from ..readme_state import ReadmeState
from ..utils.llm_backoff import invoke_with_retry

# LLM 또는 Mock을 사용하여 README를 생성하고, 업데이트 시 기존 README와 섹션 단위로 병합하는 노드

logger = get_logger("workflow.readme_generator")


def _content_to_text(content: Any) -> str:
    # LangChain 메시지 content가 list 형태일 수 있으므로 문자열로 변환
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        return "\n".join(
            c.get("text", "") if isinstance(c, dict) else str(c)
            for c in content
        )
    return str(content or "")


def build_mock_readme(project_info: ProjectInfo) -> str:
    """Mock 모드용 템플릿 README"""
    name = project_info.display_name or project_info.name or "Project"
    description = project_info.description or "Mock 모드로 생성된 README입니다."
    install_target = project_info.name or "."

    lines = [
        f"# {name}",
        "",
        description,
        "",
    ]
    if project_info.version:
        lines += [f"Version: {project_info.version}", ""]

    if project_info.detected_features:
        lines += ["## ✨ Features", ""]
        lines += [f"- {feature}" for feature in project_info.detected_features]
        lines.append("")

    lines += [
        "## 📦 Installation",
        "",
        "```bash",
        f"npm install {install_target}",
        "```",
        "",
        "## 🚀 Usage",
        "",
        "Mock 모드로 생성된 문서입니다.",
        "실제 OpenAI API를 사용하면 소스 코드 기반의 사용 예제가 제공됩니다.",
        "",
    ]

    if project_info.scripts:
        lines += ["## 🛠️ Scripts", ""]
        lines += [f"- `npm run {script}`" for script in project_info.scripts]
        lines.append("")

    lines += ["## 📄 License", "", project_info.license or "MIT"]
    return "\n".join(lines)


def readme_generator_node(
    state: ReadmeState,
    llm: Optional[ChatOpenAI] = None,
    use_mock: bool = False,
    max_retries: int = 3
) -> ReadmeState:
    """
    README 생성 노드

    역할:
        - version 모드: 모델 호출 없이 기존 README의 버전 표기만 치환
        - 그 외: 프롬프트 구성 -> LLM (또는 Mock 템플릿) -> 후처리
        - should_update 이면 merge_policy 로 기존 README와 병합

    출력:
        - generated_content: 후처리된 생성 결과 (version 모드는 None)
        - readme_content: 최종 README
        - merge_result / diff_summary
        - status: "saving"
    """
    try:
        project_info = state["project_info"]
        existing = state.get("existing_readme")
        existing_content = existing.content if existing is not None and existing.exists else ""
        policy = state.get("merge_policy")

        if state.get("should_update") and policy and policy.mode == UpdateMode.VERSION:
            logger.info(f"Patching README version to {policy.version}")
            result = merge_with_provenance(existing_content, "", policy)
            state["generated_content"] = None
            state["merge_result"] = result
            state["readme_content"] = result.content
            state["diff_summary"] = diff(existing_content, result.content)
            state["status"] = "saving"
            return state

        if use_mock:
            raw_content = build_mock_readme(project_info)
        else:
            if llm is None:
                raise ValueError("LLM is required for non-mock mode")

            system_prompt, user_prompt = build_readme_prompt(
                project_info,
                state.get("language", "en"),
                state.get("max_source_chars", 2000),
            )
            messages = [
                SystemMessage(content=system_prompt),
                HumanMessage(content=user_prompt)
            ]
            response = invoke_with_retry(llm, messages, max_retries=max_retries)
            raw_content = _content_to_text(response.content)

        if not raw_content.strip():
            raise ValueError("Generated content is empty")

        generated = post_process_readme(raw_content)
        state["generated_content"] = generated
        logger.info(f"Generated README content ({len(generated.splitlines())} lines)")

        if state.get("should_update"):
            # 푸터는 병합 후 문서 끝에 한 번만 붙임
            result = merge_with_provenance(strip_footer(existing_content), strip_footer(generated), policy)
            result = replace(result, content=append_footer(result.content))
            state["merge_result"] = result
            state["readme_content"] = result.content
            preserved = result.titles_from("custom")
            if preserved:
                logger.info(f"Preserved custom sections: {', '.join(preserved)}")
        else:
            state["merge_result"] = None
            state["readme_content"] = generated

        state["diff_summary"] = diff(existing_content, state["readme_content"])
        state["status"] = "saving"
        return state

    except Exception as e:
        logger.error(f"README generator failed: {e}", exc_info=True)
        state["error"] = f"README generator failed: {str(e)}"
        state["status"] = "error"
        return state
