"""
README 분석 모듈

README 원문을 파싱하여 DocumentAnalysis 를 만듭니다.
형식이 깨진 마크다운이나 빈 문서도 예외 없이 (비어 있을 수 있는) 분석 결과를 반환합니다.
"""

from pathlib import Path
from typing import Union

from ..logging_config import get_logger
from .metadata_extractor import analyze_structure, extract_metadata
from .models import DocumentAnalysis
from .section_classifier import identify_custom_sections
from .section_parser import parse_markdown_sections

logger = get_logger("readme_analyzer")


def parse(content: str) -> DocumentAnalysis:
    """README 원문 분석"""
    parsed = parse_markdown_sections(content)
    sections = list(parsed.sections)

    return DocumentAnalysis(
        exists=True,
        content=content,
        header=parsed.header,
        sections=parsed.sections,
        metadata=extract_metadata(content, sections),
        custom_sections=tuple(identify_custom_sections(sections)),
        structure=analyze_structure(content),
    )


def analyze_readme_file(path: Union[str, Path]) -> DocumentAnalysis:
    """파일이 없으면 exists=False 센티널 반환"""
    path = Path(path)
    if not path.is_file():
        logger.debug(f"README not found: {path}")
        return DocumentAnalysis.missing()

    content = path.read_text(encoding="utf-8")
    analysis = parse(content)
    logger.debug(f"Analyzed {path}: {len(analysis.sections)} sections, {len(analysis.custom_sections)} custom")
    return analysis
