"""
버전 패치 모듈

README 본문의 버전 표기만 새 버전으로 치환합니다 (나머지 텍스트는 그대로 유지).

치환 대상:
    1. alt 텍스트에 'version' 이 들어간 배지 이미지 URL 안의 X.Y.Z
    2. 'version' 키워드 뒤의 버전 토큰 (Version: 1.2.0, version 1.2.0 ...)
    3. 단독 vX.Y.Z 토큰

같은 버전으로 두 번 적용해도 결과가 바뀌지 않습니다 (멱등).
"""

import re
from typing import List, Optional, Tuple

from ..logging_config import get_logger

logger = get_logger("version_patcher")


# X.Y.Z + 선택적 prerelease/build (semver), 새 버전 검증용
VERSION_TOKEN = r'\d+\.\d+\.\d+(?:-[0-9A-Za-z]+(?:\.[0-9A-Za-z]+)*)?(?:\+[0-9A-Za-z]+(?:\.[0-9A-Za-z]+)*)?'

# 본문에서는 흔한 prerelease 태그만 버전의 일부로 보고, 토큰이 단어 경계에서 끝날 때만 인정
# (1.2.0-compatible, 1.0.0.tar.gz 의 뒷부분은 주변 텍스트)
TEXT_PRERELEASE = r'-(?i:alpha|beta|rc|pre|preview|dev|next|canary|snapshot)(?:[.-]?\d+)*'
TEXT_BUILD = r'\+[0-9A-Za-z]+(?:\.[0-9A-Za-z]+)*'
TEXT_VERSION_TOKEN = (
    rf'\d+\.\d+\.\d+(?!\d)'
    rf'(?:(?:{TEXT_PRERELEASE})?(?:{TEXT_BUILD})?(?![0-9A-Za-z-]|\.[0-9A-Za-z]))?'
)

# 배지 URL 안에서는 '-' 가 구분자이므로 X.Y.Z 만 인식
BADGE_VERSION_TOKEN = r'\d+\.\d+\.\d+'

IMAGE_PATTERN = re.compile(r'!\[([^\]]*)\]\(([^)]+)\)')
KEYWORD_VERSION_PATTERN = re.compile(rf'\b(version[:\s]+)({TEXT_VERSION_TOKEN})', re.IGNORECASE)
BARE_VERSION_PATTERN = re.compile(rf'\b(v)({TEXT_VERSION_TOKEN})')
BADGE_VERSION_PATTERN = re.compile(BADGE_VERSION_TOKEN)
FULL_VERSION_PATTERN = re.compile(rf'^{VERSION_TOKEN}$')


def normalize_version(version: str) -> str:
    """앞의 'v' 접두사 제거 (v1.2.3 -> 1.2.3)"""
    version = version.strip()
    if len(version) > 1 and version[0] in 'vV' and version[1].isdigit():
        return version[1:]
    return version


def is_valid_version(version: str) -> bool:
    return bool(FULL_VERSION_PATTERN.match(normalize_version(version)))


def _already_patched(text: str, start: int, token: str, new_version: str) -> bool:
    # 토큰이 new_version 의 앞부분만 잡았더라도 텍스트가 new_version 으로 이어지면 이미 패치된 것
    if token == new_version:
        return True
    following = start + len(new_version)
    return (
        new_version.startswith(token)
        and text.startswith(new_version, start)
        and not text[following:following + 1].isdigit()
    )


def _replace_token(text: str, start: int, end: int, new_version: str) -> str:
    token = text[start:end]
    return token if _already_patched(text, start, token, new_version) else new_version


def _image_url_spans(content: str) -> List[Tuple[int, int]]:
    return [m.span(2) for m in IMAGE_PATTERN.finditer(content)]


def _in_spans(pos: int, spans: List[Tuple[int, int]]) -> bool:
    return any(start <= pos < end for start, end in spans)


def patch_badge_versions(content: str, new_version: str) -> str:
    """버전 배지 URL 안의 X.Y.Z 치환"""
    def _patch_image(m: re.Match) -> str:
        alt, url = m.group(1), m.group(2)
        if 'version' not in alt.lower():
            return m.group(0)
        patched = BADGE_VERSION_PATTERN.sub(
            lambda t: _replace_token(url, t.start(), t.end(), new_version),
            url
        )
        return f"![{alt}]({patched})"

    return IMAGE_PATTERN.sub(_patch_image, content)


def _patch_text_pattern(content: str, pattern: re.Pattern, new_version: str) -> str:
    # 이미지 URL 내부는 배지 단계에서만 처리
    spans = _image_url_spans(content)

    def _patch(m: re.Match) -> str:
        if _in_spans(m.start(), spans):
            return m.group(0)
        return m.group(1) + _replace_token(content, m.start(2), m.end(2), new_version)

    return pattern.sub(_patch, content)


def patch_version(content: str, new_version: str) -> str:
    """README 본문의 버전 표기를 new_version 으로 치환"""
    version = normalize_version(new_version or '')
    if not FULL_VERSION_PATTERN.match(version):
        logger.warning(f"Skipping version patch, not a version string: {new_version!r}")
        return content

    patched = patch_badge_versions(content, version)
    patched = _patch_text_pattern(patched, KEYWORD_VERSION_PATTERN, version)
    patched = _patch_text_pattern(patched, BARE_VERSION_PATTERN, version)

    if patched != content:
        logger.debug(f"Patched version tokens to {version}")
    return patched


def find_version(content: str) -> Optional[str]:
    """첫 번째 버전 표기 (version 키워드 우선, 없으면 vX.Y.Z), 없으면 None"""
    m = KEYWORD_VERSION_PATTERN.search(content) or BARE_VERSION_PATTERN.search(content)
    return m.group(2) if m else None
