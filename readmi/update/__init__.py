"""
README 업데이트 모듈

기존 README 파싱, 최신성 검사, 섹션 단위 병합, 버전 패치 기능을 제공합니다.
모든 함수는 입력 문자열에 대한 순수 함수이며 파일 I/O는 analyze_readme_file 만 수행합니다.
"""

from .models import (
    Badge,
    DiffSummary,
    DocumentAnalysis,
    HeaderStyle,
    Issue,
    IssueKind,
    Link,
    MergedSection,
    MergePolicy,
    MergeResult,
    Metadata,
    Section,
    SectionSuggestion,
    Severity,
    StructureFlags,
    UpdateMode,
)

from .section_parser import (
    ParsedReadme,
    parse_markdown_sections,
    extract_sections,
    normalize_title,
    extract_header,
    render_sections,
)

from .section_classifier import (
    STANDARD_SECTIONS,
    is_standard_title,
    is_custom_title,
    is_custom_section,
    identify_custom_sections,
)

from .metadata_extractor import extract_metadata, analyze_structure

from .staleness_detector import detect_issues, suggest_sections_to_review

from .content_merger import merge, merge_with_provenance, update_specific_sections

from .diff_summary import diff, create_diff_summary, format_diff_summary

from .version_patcher import patch_version, find_version, is_valid_version, normalize_version

from .readme_analyzer import parse, analyze_readme_file

__all__ = [
    'Badge',
    'DiffSummary',
    'DocumentAnalysis',
    'HeaderStyle',
    'Issue',
    'IssueKind',
    'Link',
    'MergedSection',
    'MergePolicy',
    'MergeResult',
    'Metadata',
    'Section',
    'SectionSuggestion',
    'Severity',
    'StructureFlags',
    'UpdateMode',
    'ParsedReadme',
    'parse_markdown_sections',
    'extract_sections',
    'normalize_title',
    'extract_header',
    'render_sections',
    'STANDARD_SECTIONS',
    'is_standard_title',
    'is_custom_title',
    'is_custom_section',
    'identify_custom_sections',
    'extract_metadata',
    'analyze_structure',
    'detect_issues',
    'suggest_sections_to_review',
    'merge',
    'merge_with_provenance',
    'update_specific_sections',
    'diff',
    'create_diff_summary',
    'format_diff_summary',
    'patch_version',
    'find_version',
    'is_valid_version',
    'normalize_version',
    'parse',
    'analyze_readme_file',
]
