"""
콘텐츠 병합 모듈

기존 README와 새로 생성된 README를 섹션 단위로 병합합니다.
문서는 병합 내내 Section 목록으로 다루고 마지막에 한 번만 직렬화합니다.
"""

from typing import Dict, List, Optional, Set, Tuple

from ..logging_config import get_logger
from .models import MergedSection, MergePolicy, MergeResult, Section, UpdateMode
from .section_classifier import is_custom_section
from .section_parser import normalize_title, parse_markdown_sections, render_sections
from .version_patcher import patch_version

logger = get_logger("content_merger")


# ============================================================
# 매칭 헬퍼
# ============================================================

def _match_key(section: Section, match_level: bool) -> Tuple[str, int]:
    """섹션 매칭 키 (기본: 정규화된 제목, match_level 이면 레벨 포함)"""
    return normalize_title(section.title), section.level if match_level else 0


def _index_sections(sections: Tuple[Section, ...], match_level: bool) -> Dict[Tuple[str, int], Section]:
    """매칭 키 -> 첫 번째 섹션 (중복 제목은 첫 번째만 매칭)"""
    index: Dict[Tuple[str, int], Section] = {}
    for section in sections:
        index.setdefault(_match_key(section, match_level), section)
    return index


def _should_keep_existing(normalized_title: str, policy: MergePolicy, update_keys: Set[str]) -> bool:
    """
    매칭된 섹션에서 기존 내용을 유지할지 결정

    - full: 항상 새 내용
    - selective: sections_to_update 에 없는 섹션만 기존 내용 유지
    """
    if policy.mode != UpdateMode.SELECTIVE:
        return False
    return normalized_title not in update_keys


# ============================================================
# 메인 병합 함수
# ============================================================

def merge_with_provenance(existing_content: str, new_content: str, policy: Optional[MergePolicy] = None) -> MergeResult:
    """
    기존 README와 새 README를 정책에 따라 병합하고 섹션별 출처를 기록

    처리 순서:
    1. 새 문서를 섹션으로 파싱
    2. 헤더 결정 (기본: 새 헤더, preserve_header 면 기존 헤더)
    3. 새 문서 순서대로 섹션 선택 (기존 유지 or 새 내용)
    4. 소비되지 않은 기존 커스텀 섹션을 끝에 추가
    5. 한 번에 직렬화
    """
    policy = policy or MergePolicy.full()

    if policy.mode == UpdateMode.VERSION:
        patched = patch_version(existing_content, policy.version or '')
        return MergeResult(content=patched.rstrip('\n') + '\n')

    existing = parse_markdown_sections(existing_content)
    new = parse_markdown_sections(new_content)

    header = existing.header if policy.preserve_header and existing.header else new.header

    existing_index = _index_sections(existing.sections, policy.match_level)
    update_keys = {normalize_title(name) for name in policy.sections_to_update}

    merged: List[MergedSection] = []
    consumed: Set[Tuple[str, int]] = set()

    for new_section in new.sections:
        key = _match_key(new_section, policy.match_level)
        match = existing_index.get(key)

        if match and _should_keep_existing(key[0], policy, update_keys):
            merged.append(MergedSection(match, 'existing'))
        else:
            merged.append(MergedSection(new_section, 'new'))
        consumed.add(key)

    if policy.preserve_custom_sections:
        # 같은 제목의 커스텀 섹션이 여러 개면 모두 보존
        for existing_section in existing.sections:
            key = _match_key(existing_section, policy.match_level)
            if key in consumed or not is_custom_section(existing_section):
                continue
            merged.append(MergedSection(existing_section, 'custom'))
            logger.debug(f"Preserving custom section: {existing_section.title}")

    content = render_sections(header, [m.section for m in merged])
    return MergeResult(content=content, header=header, sections=tuple(merged))


def merge(existing_content: str, new_content: str, policy: Optional[MergePolicy] = None) -> str:
    """병합된 마크다운 문자열 (항상 개행 1개로 끝남)"""
    return merge_with_provenance(existing_content, new_content, policy).content


def update_specific_sections(existing_content: str, new_content: str, sections_to_update: List[str]) -> str:
    """지정한 섹션만 재생성하고 나머지(헤더 포함)는 기존 내용 유지"""
    return merge(existing_content, new_content, MergePolicy.selective(sections_to_update))
