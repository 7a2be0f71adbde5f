"""
섹션 단위 변경 요약 모듈
"""

from typing import Dict, List

from .models import DiffSummary, Section
from .section_parser import extract_sections, normalize_title


def _first_by_title(sections) -> Dict[str, Section]:
    # 중복 제목은 첫 번째만 사용 (각 제목이 정확히 한 버킷에만 들어가도록)
    index: Dict[str, Section] = {}
    for section in sections:
        index.setdefault(normalize_title(section.title), section)
    return index


def create_diff_summary(old_content: str, new_content: str) -> DiffSummary:
    """
    두 문서의 섹션 비교

    - added: 새 문서에만 있는 섹션 (새 문서 순서)
    - removed: 기존 문서에만 있는 섹션 (기존 문서 순서)
    - modified / unchanged: 양쪽에 있고 본문이 다른지/같은지 (새 문서 순서)

    정규화 제목이 같은 섹션이 여러 개면 첫 번째만 비교하며, 뒤따르는 중복 섹션
    (예: Usage 다음의 Usage!) 의 원래 제목은 어느 목록에도 들어가지 않습니다.
    """
    old_index = _first_by_title(extract_sections(old_content))
    new_index = _first_by_title(extract_sections(new_content))

    summary = DiffSummary()
    for key, new_section in new_index.items():
        old_section = old_index.get(key)
        if old_section is None:
            summary.added.append(new_section.title)
        elif old_section.content.strip() != new_section.content.strip():
            summary.modified.append(new_section.title)
        else:
            summary.unchanged.append(new_section.title)

    for key, old_section in old_index.items():
        if key not in new_index:
            summary.removed.append(old_section.title)

    return summary


def diff(old_content: str, new_content: str) -> DiffSummary:
    return create_diff_summary(old_content, new_content)


def format_diff_summary(summary: DiffSummary) -> List[str]:
    """사용자 표시용 요약 라인"""
    lines = []
    if summary.added:
        lines.append(f"Added: {', '.join(summary.added)}")
    if summary.modified:
        lines.append(f"Modified: {', '.join(summary.modified)}")
    if summary.removed:
        lines.append(f"Removed: {', '.join(summary.removed)}")
    if not lines:
        lines.append("No section changes")
    return lines
