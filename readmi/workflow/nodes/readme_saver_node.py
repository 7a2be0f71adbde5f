from pathlib import Path

from ...logging_config import get_logger
from ..readme_state import ReadmeState

# 생성/업데이트된 README를 파일로 저장하는 노드

logger = get_logger("workflow.readme_saver")


def readme_saver_node(state: ReadmeState) -> ReadmeState:
    """
    README 저장 노드

    출력:
        - action: "created" (새 파일), "updated" (내용 변경), "unchanged" (동일)
        - status: "completed"

    dry_run 이면 action 만 계산하고 파일은 쓰지 않습니다.
    """
    try:
        path = Path(state["readme_path"])
        content = state.get("readme_content")
        if content is None:
            raise ValueError("No README content to save")

        existing = state.get("existing_readme")
        if existing is None or not existing.exists:
            action = "created"
        elif existing.content == content:
            action = "unchanged"
        else:
            action = "updated"

        if state.get("dry_run"):
            logger.info(f"Dry run: {path.name} would be {action}")
        elif action != "unchanged":
            path.write_text(content, encoding="utf-8")
            logger.info(f"{path.name} {action} ({len(content.splitlines())} lines)")
        else:
            logger.info(f"{path.name} is already up to date")

        state["action"] = action
        state["status"] = "completed"
        return state

    except Exception as e:
        logger.error(f"README saver failed: {e}", exc_info=True)
        state["error"] = f"README saver failed: {str(e)}"
        state["status"] = "error"
        return state
