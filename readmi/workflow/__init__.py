"""
README 워크플로우 모듈
LangGraph + LLM을 이용한 README 자동 생성/업데이트
"""
from .readme_state import ReadmeState
from .readme_workflow import ReadmeWorkflow, check_readme
from .prompts import build_readme_prompt, post_process_readme, get_language_name, LANGUAGE_NAMES
from .nodes import readme_filename

__all__ = [
    "ReadmeState",
    "ReadmeWorkflow",
    "check_readme",
    "build_readme_prompt",
    "post_process_readme",
    "get_language_name",
    "LANGUAGE_NAMES",
    "readme_filename",
]
