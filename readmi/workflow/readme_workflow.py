from typing import Any, Dict, List, Optional
from functools import partial

from langchain_openai import ChatOpenAI
from langgraph.graph import StateGraph, END

from ..config import ReadmiSettings, load_settings
from ..logging_config import get_logger
from .readme_state import ReadmeState
from .nodes import (
    project_loader_node,
    readme_analyzer_node,
    update_decider_node,
    readme_generator_node,
    readme_saver_node,
)

logger = get_logger("workflow")


def _route_on_error(state: ReadmeState) -> str:
    return "error" if state.get("status") == "error" else "continue"


#LangGraph 워크플로우 메인 클래스
class ReadmeWorkflow:
    """
    README 자동 생성/업데이트 워크플로우

    5개 노드로 구성:
        1. project_loader: 프로젝트 스캔 + 기존 README 로드
        2. readme_analyzer: 최신성 검사
        3. update_decider: 신규 생성 vs 병합, 병합 정책 결정
        4. readme_generator: README 생성 및 병합
        5. readme_saver: 파일 저장

    어느 노드든 status 가 "error" 가 되면 바로 END 로 이동합니다.
    """

    def __init__(
        self,
        settings: Optional[ReadmiSettings] = None,
        use_mock: Optional[bool] = None,
        llm: Optional[Any] = None
    ):
        """
        Args:
            settings: 설정 (없으면 환경변수에서 로드)
            use_mock: True면 LLM 대신 Mock 템플릿 사용 (없으면 settings.use_mock)
            llm: 직접 주입할 채팅 모델 (테스트용, 주어지면 ChatOpenAI를 만들지 않음)
        """
        self.settings = settings or load_settings()
        self.use_mock = self.settings.use_mock if use_mock is None else use_mock

        # LLM 초기화
        if llm is not None:
            self.llm = llm
        elif not self.use_mock:
            if not self.settings.openai_api_key:
                raise ValueError("OPENAI_API_KEY is required (or use use_mock=True)")

            self.llm = ChatOpenAI(
                api_key=self.settings.openai_api_key,
                model=self.settings.model,
                temperature=self.settings.temperature
            )
        else:
            self.llm = None  # Mock 모드에서는 LLM 사용 안함

        # 워크플로우 빌드
        self.workflow = self._build_workflow()

    def _build_workflow(self):
        """LangGraph 워크플로우 구성"""
        workflow = StateGraph(ReadmeState)

        workflow.add_node("project_loader", project_loader_node)
        workflow.add_node("readme_analyzer", readme_analyzer_node)
        workflow.add_node("update_decider", update_decider_node)

        # partial을 사용하여 llm과 use_mock을 바인딩
        workflow.add_node(
            "readme_generator",
            partial(
                readme_generator_node,
                llm=self.llm,
                use_mock=self.use_mock,
                max_retries=self.settings.llm_max_retries
            )
        )

        workflow.add_node("readme_saver", readme_saver_node)

        # 워크플로우 연결 (에러 시 END)
        workflow.set_entry_point("project_loader")
        for current, following in [
            ("project_loader", "readme_analyzer"),
            ("readme_analyzer", "update_decider"),
            ("update_decider", "readme_generator"),
            ("readme_generator", "readme_saver"),
        ]:
            workflow.add_conditional_edges(
                current,
                _route_on_error,
                {"continue": following, "error": END}
            )
        workflow.add_edge("readme_saver", END)

        return workflow.compile()

    def process(
        self,
        project_root: str = ".",
        mode: Optional[str] = None,
        sections_to_update: Optional[List[str]] = None,
        language: Optional[str] = None,
        dry_run: bool = False,
        preserve_header: Optional[bool] = None
    ) -> Dict[str, Any]:
        """
        워크플로우 실행

        Args:
            project_root: 프로젝트 루트
            mode: None이면 신규 생성, "full" | "selective" | "version" 이면 기존 README 업데이트
            sections_to_update: selective 모드에서 재생성할 섹션 제목
            language: 언어 코드 (없으면 settings.language)
            dry_run: True면 파일을 쓰지 않음
            preserve_header: None이면 모드 기본값 (selective: 유지, full: 교체)

        Returns:
            {
                "success": True/False,
                "action": "created" | "updated" | "unchanged",
                "path": str,
                "content": str,
                "issues": List[Issue],
                "suggestions": List[SectionSuggestion],
                "diff": DiffSummary,
                "preserved_sections": List[str],
                "error": str  # 실패 시
            }
        """
        initial_state: ReadmeState = {
            "project_root": str(project_root),
            "update": mode is not None,
            "mode": mode or "full",
            "sections_to_update": list(sections_to_update or []),
            "language": language or self.settings.language,
            "dry_run": dry_run,
            "preserve_header": preserve_header,
            "max_source_chars": self.settings.max_source_chars,
            "status": "loading",
            "should_update": False,
        }

        result = self.workflow.invoke(initial_state)

        if result.get("status") == "completed":
            merge_result = result.get("merge_result")
            return {
                "success": True,
                "action": result.get("action"),
                "path": result.get("readme_path"),
                "content": result.get("readme_content"),
                "issues": result.get("issues", []),
                "suggestions": result.get("suggestions", []),
                "diff": result.get("diff_summary"),
                "preserved_sections": merge_result.titles_from("custom") if merge_result else [],
            }
        else:
            return {
                "success": False,
                "error": result.get("error", "Unknown error"),
                "issues": result.get("issues", []),
            }


def check_readme(project_root: str = ".", language: str = "en", max_source_chars: int = 2000) -> Dict[str, Any]:
    """
    생성 없이 최신성 검사만 수행 (LLM 불필요)

    Returns:
        {"success", "exists", "path", "issues", "suggestions", "error"}
    """
    state: ReadmeState = {
        "project_root": str(project_root),
        "language": language,
        "max_source_chars": max_source_chars,
        "status": "loading",
    }
    state = project_loader_node(state)
    if state.get("status") != "error":
        state = readme_analyzer_node(state)

    if state.get("status") == "error":
        return {"success": False, "error": state.get("error", "Unknown error")}

    return {
        "success": True,
        "exists": state["existing_readme"].exists,
        "path": state.get("readme_path"),
        "issues": state.get("issues", []),
        "suggestions": state.get("suggestions", []),
    }
