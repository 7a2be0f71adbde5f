"""
마크다운 섹션 파싱 모듈

마크다운 문서를 헤더 블록과 섹션 목록으로 파싱하고 다시 직렬화하는 기능을 제공합니다.

알려진 제약:
    - ATX 헤딩(#, ## ...)만 인식하며 Setext(밑줄) 헤딩은 인식하지 않음
    - 코드 펜스 내부를 구분하지 않음 (펜스 안의 '# comment' 도 헤딩으로 취급)
"""

import re
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .models import Section


# 1~6개의 '#' + 공백 + 비어있지 않은 제목
HEADING_PATTERN = re.compile(r'^(#{1,6})[ \t]+(\S.*)$')


@dataclass(frozen=True)
class ParsedReadme:
    """파싱된 문서 구조"""
    header: str
    sections: Tuple[Section, ...]


def match_heading(line: str):
    """헤딩 라인이면 (level, title) 반환, 아니면 None"""
    m = HEADING_PATTERN.match(line)
    if not m:
        return None
    title = m.group(2).strip()
    if not title:
        return None
    return len(m.group(1)), title


def normalize_title(title: str) -> str:
    """섹션 제목을 비교용 키로 정규화 (소문자, 영숫자/공백 외 제거, 공백 축약)"""
    lowered = title.lower()
    cleaned = re.sub(r'[^a-z0-9\s]', '', lowered)
    return re.sub(r'\s+', ' ', cleaned).strip()


def _trim_blank_lines(lines: List[str]) -> str:
    start, end = 0, len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return '\n'.join(line.rstrip() for line in lines[start:end])


def parse_markdown_sections(content: str) -> ParsedReadme:
    """마크다운을 헤더 블록 + 섹션 목록으로 파싱 (모든 레벨의 헤딩이 섹션 경계)"""
    lines = content.split('\n')
    sections: List[Section] = []
    header_lines: List[str] = []

    current = None  # (level, title, raw_title, start_line)
    body: List[str] = []

    for i, line in enumerate(lines):
        heading = match_heading(line)

        if heading:
            # 이전 섹션 닫기
            if current:
                level, title, raw_title, start = current
                sections.append(Section(level, title, raw_title, _trim_blank_lines(body), start, i - 1))
            level, title = heading
            current = (level, title, line.rstrip(), i)
            body = []
        elif current:
            body.append(line)
        else:
            header_lines.append(line)

    # 마지막 섹션 닫기
    if current:
        level, title, raw_title, start = current
        sections.append(Section(level, title, raw_title, _trim_blank_lines(body), start, len(lines) - 1))

    return ParsedReadme(header='\n'.join(header_lines).strip(), sections=tuple(sections))


def extract_sections(content: str) -> Tuple[Section, ...]:
    return parse_markdown_sections(content).sections


def extract_header(content: str) -> str:
    """첫 헤딩 이전의 텍스트 (제목 블록, 배지, 소개문 등)"""
    return parse_markdown_sections(content).header


def render_section(section: Section) -> str:
    if section.content:
        return f"{section.raw_title}\n\n{section.content}"
    return section.raw_title


def render_sections(header: str, sections: Sequence[Section]) -> str:
    """헤더와 섹션을 하나의 문서로 직렬화 (끝에 개행 1개 보장)"""
    blocks: List[str] = []
    if header.strip():
        blocks.append(header.strip())
    for section in sections:
        blocks.append(render_section(section))
    return '\n\n'.join(blocks).strip() + '\n'
