"""
① 프로젝트 로더 노드

프로젝트 디렉토리를 분석하고 대상 README를 읽어오는 노드
"""
from pathlib import Path

from ...logging_config import get_logger
from ...project import analyze_project
from ...update import analyze_readme_file
from ..readme_state import ReadmeState

logger = get_logger("workflow.project_loader")


def readme_filename(language: str = "en") -> str:
    """영어는 README.md, 그 외 언어는 README.<lang>.md"""
    if not language or language == "en":
        return "README.md"
    return f"README.{language}.md"


def project_loader_node(state: ReadmeState) -> ReadmeState:
    """
    프로젝트 로더 노드

    입력:
        - project_root, language, max_source_chars

    출력:
        - project_info: ProjectInfo
        - readme_path: 대상 README 경로
        - existing_readme: DocumentAnalysis (없으면 exists=False)
        - status: "analyzing"
    """
    try:
        root = Path(state["project_root"])
        if not root.is_dir():
            raise ValueError(f"Project directory not found: {root}")

        state["project_info"] = analyze_project(root, state.get("max_source_chars", 2000))

        readme_path = root / readme_filename(state.get("language", "en"))
        state["readme_path"] = str(readme_path)
        state["existing_readme"] = analyze_readme_file(readme_path)

        logger.info(
            f"Loaded project {state['project_info'].display_name} "
            f"(README {'found' if state['existing_readme'].exists else 'missing'}: {readme_path.name})"
        )
        state["status"] = "analyzing"
        return state

    except Exception as e:
        logger.error(f"Project loader failed: {e}", exc_info=True)
        state["error"] = f"Project loader failed: {str(e)}"
        state["status"] = "error"
        return state
