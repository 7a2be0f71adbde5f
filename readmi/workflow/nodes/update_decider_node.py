"""
③ 업데이트 결정 노드

신규 생성 또는 기존 README 병합을 결정하고 병합 정책을 만드는 노드
"""
from ...logging_config import get_logger
from ...update import MergePolicy, UpdateMode, is_valid_version, normalize_version
from ..readme_state import ReadmeState

logger = get_logger("workflow.update_decider")


def update_decider_node(state: ReadmeState) -> ReadmeState:
    """
    업데이트 결정 노드

    로직:
        - update 요청이 없거나 기존 README가 없으면:
            * should_update = False (신규 생성)
        - update 요청 + README 존재:
            * should_update = True
            * mode 에 따라 MergePolicy 생성
              (version 은 프로젝트 버전, selective 는 섹션 목록이 필요)
    """
    try:
        existing = state.get("existing_readme")
        if not state.get("update") or existing is None or not existing.exists:
            if state.get("update"):
                logger.info("No existing README found, generating a new one")
            state["should_update"] = False
            state["merge_policy"] = None
            state["status"] = "generating"
            return state

        mode = UpdateMode(state.get("mode") or UpdateMode.FULL.value)
        preserve_header = state.get("preserve_header")

        if mode == UpdateMode.VERSION:
            version = normalize_version(state["project_info"].version or "")
            if not version:
                raise ValueError("Project version is not available for a version update")
            if not is_valid_version(version):
                raise ValueError(f"Project version is not a valid version: {version!r}")
            policy = MergePolicy.version_only(version)
        elif mode == UpdateMode.SELECTIVE:
            sections = [s for s in state.get("sections_to_update") or [] if s.strip()]
            if not sections:
                raise ValueError("No sections selected for a selective update")
            policy = MergePolicy.selective(
                sections,
                preserve_header=True if preserve_header is None else preserve_header,
            )
        else:
            policy = MergePolicy.full(preserve_header=bool(preserve_header))

        logger.info(f"Updating existing README ({mode.value} mode)")
        state["should_update"] = True
        state["merge_policy"] = policy
        state["status"] = "generating"
        return state

    except Exception as e:
        logger.error(f"Update decider failed: {e}")
        state["error"] = f"Update decider failed: {str(e)}"
        state["status"] = "error"
        return state
