"""
② README 분석 노드

기존 README의 최신성을 검사하는 노드
"""
from ...logging_config import get_logger
from ...update import detect_issues, suggest_sections_to_review
from ..readme_state import ReadmeState

logger = get_logger("workflow.readme_analyzer")


def readme_analyzer_node(state: ReadmeState) -> ReadmeState:
    """
    README 분석 노드

    역할:
        - README 버전/스크립트/의존성 수 불일치 검사
        - 검토가 필요한 섹션 추천

    출력:
        - issues, suggestions (README가 없으면 둘 다 빈 리스트)
        - status: "deciding"
    """
    try:
        analysis = state["existing_readme"]
        project_info = state["project_info"]

        state["issues"] = detect_issues(analysis, project_info)
        state["suggestions"] = suggest_sections_to_review(analysis, project_info)

        for issue in state["issues"]:
            logger.info(f"[{issue.severity.value}] {issue.message}")

        state["status"] = "deciding"
        return state

    except Exception as e:
        logger.error(f"README analyzer failed: {e}", exc_info=True)
        state["error"] = f"README analyzer failed: {str(e)}"
        state["status"] = "error"
        return state
