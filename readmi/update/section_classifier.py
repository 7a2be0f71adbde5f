"""
섹션 분류 모듈

섹션 제목을 표준 섹션(설치, 사용법, 라이선스 등)과 사용자가 직접 작성한
커스텀 섹션으로 분류합니다. 양방향 부분 문자열 매칭을 사용하는 휴리스틱이므로
오분류가 있을 수 있지만 결과는 항상 결정적입니다.
"""

from typing import Iterable, List, Sequence

from .models import Section
from .section_parser import normalize_title


# 표준 섹션 어휘 (정규화된 형태, 순서 유지)
STANDARD_SECTIONS = (
    'installation',
    'install',
    'getting started',
    'usage',
    'features',
    'requirements',
    'prerequisites',
    'contributing',
    'license',
    'documentation',
    'examples',
    'api',
    'configuration',
    'testing',
    'deployment',
    'support',
    'changelog',
    'roadmap',
    'acknowledgments',
    'authors',
    'faq',
    'troubleshooting',
    'description',
    'about',
    'commands',
    'options',
    'how it works',
)

# 커스텀 섹션으로 보존 가능한 최대 헤딩 레벨
MAX_CUSTOM_LEVEL = 2


def is_standard_title(normalized_title: str, vocabulary: Sequence[str] = STANDARD_SECTIONS) -> bool:
    """
    정규화된 제목이 표준 섹션인지 판단

    "installation guide" 는 'installation' 을 포함하므로 표준,
    "install" 은 'installation' 에 포함되므로 역시 표준으로 판단합니다.
    """
    return any(std in normalized_title or normalized_title in std for std in vocabulary)


def is_custom_title(normalized_title: str, vocabulary: Sequence[str] = STANDARD_SECTIONS) -> bool:
    return not is_standard_title(normalized_title, vocabulary)


def is_custom_section(section: Section, vocabulary: Sequence[str] = STANDARD_SECTIONS) -> bool:
    """레벨 2 이하이면서 표준 어휘에 해당하지 않는 섹션"""
    if section.level > MAX_CUSTOM_LEVEL:
        return False
    return is_custom_title(normalize_title(section.title), vocabulary)


def identify_custom_sections(
    sections: Iterable[Section],
    vocabulary: Sequence[str] = STANDARD_SECTIONS
) -> List[Section]:
    return [s for s in sections if is_custom_section(s, vocabulary)]
