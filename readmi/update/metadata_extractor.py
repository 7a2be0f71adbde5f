"""
메타데이터 추출 모듈

README 원문에서 배지, 버전, 링크, 목차 여부와 문서 구조 특성을 추출합니다.
매칭 실패는 오류가 아니며 해당 필드는 비어 있는 값으로 남습니다.
"""

import re
from typing import List, Optional

from .models import Badge, HeaderStyle, Link, Metadata, Section, StructureFlags
from .section_parser import extract_sections, normalize_title
from .version_patcher import find_version


BADGE_PATTERN = re.compile(r'!\[([^\]]*)\]\(([^)]+)\)')
# 이미지가 아닌 링크 ([text](url "title") 형식 포함)
LINK_PATTERN = re.compile(r'(?<!!)\[([^\[\]]+)\]\(([^)\s]+)(?:\s+"[^"]*")?\)')
# 링크로 감싼 배지: [![alt](img)](href)
LINKED_BADGE_PATTERN = re.compile(r'\[!\[([^\]]*)\]\([^)]+\)\]\(([^)\s]+)\)')
URL_SCHEME_PATTERN = re.compile(r'^[A-Za-z][A-Za-z0-9+.-]*:')

TOC_TITLES = ('table of contents', 'contents')

HTML_HEADER_PREFIXES = ('<div', '<p', '<h1', '<img', '<picture')
EMOJI_PATTERN = re.compile('[\U0001F300-\U0001FAFF\u2600-\u27BF]')
TABLE_PATTERN = re.compile(r'\|.*\|.*\|')
H1_PATTERN = re.compile(r'^#[ \t]+\S')


def is_external_target(url: str) -> bool:
    """절대 URL 또는 문서 내 앵커만 링크로 인정"""
    return url.startswith('#') or bool(URL_SCHEME_PATTERN.match(url))


def extract_badges(content: str) -> List[Badge]:
    return [Badge(alt=m.group(1), url=m.group(2)) for m in BADGE_PATTERN.finditer(content)]


def extract_links(content: str) -> List[Link]:
    found = []
    for m in LINK_PATTERN.finditer(content):
        found.append((m.start(), Link(text=m.group(1), url=m.group(2))))
    for m in LINKED_BADGE_PATTERN.finditer(content):
        found.append((m.start(), Link(text=m.group(1), url=m.group(2))))

    found.sort(key=lambda item: item[0])
    return [link for _, link in found if is_external_target(link.url)]


def has_table_of_contents(sections: List[Section]) -> bool:
    return any(
        s.level <= 2 and normalize_title(s.title) in TOC_TITLES
        for s in sections
    )


def extract_metadata(content: str, sections: Optional[List[Section]] = None) -> Metadata:
    if sections is None:
        sections = list(extract_sections(content))
    return Metadata(
        badges=tuple(extract_badges(content)),
        version=find_version(content),
        links=tuple(extract_links(content)),
        has_table_of_contents=has_table_of_contents(sections),
    )


def analyze_structure(content: str) -> StructureFlags:
    """문서 구조 특성 분석"""
    stripped = content.lstrip().lower()
    header_style = HeaderStyle.HTML if stripped.startswith(HTML_HEADER_PREFIXES) else HeaderStyle.MARKDOWN
    fence_count = content.count('```')

    return StructureFlags(
        total_lines=len(content.split('\n')),
        has_header=bool(H1_PATTERN.match(content)),
        header_style=header_style,
        has_badges=bool(BADGE_PATTERN.search(content)),
        has_code_blocks=fence_count > 0,
        code_block_count=fence_count // 2,
        has_emojis=bool(EMOJI_PATTERN.search(content)),
        has_tables=bool(TABLE_PATTERN.search(content)),
    )
