"""
설정 모듈

.env / 환경변수에서 설정을 읽어 ReadmiSettings 값 객체로 만듭니다.
전역 설정 객체는 두지 않고, 필요한 곳에 명시적으로 전달합니다.
"""

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_LANGUAGE = "en"


@dataclass(frozen=True)
class ReadmiSettings:
    openai_api_key: Optional[str] = None
    model: str = DEFAULT_MODEL
    temperature: float = 0.3
    language: str = DEFAULT_LANGUAGE
    use_mock: bool = False
    llm_max_retries: int = 3
    max_source_chars: int = 2000
    log_level: str = "INFO"

    def with_overrides(self, **changes) -> "ReadmiSettings":
        """None 이 아닌 값만 덮어쓴 새 설정"""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, default))
    except ValueError:
        return default


def load_settings(env_file: Optional[Union[str, Path]] = None) -> ReadmiSettings:
    """
    환경변수 기반 설정 로드

    Args:
        env_file: 추가로 읽을 .env 경로 (없으면 현재 디렉토리 기준 기본 탐색)
    """
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    return ReadmiSettings(
        openai_api_key=os.getenv("OPENAI_API_KEY") or None,
        model=os.getenv("README_MODEL", DEFAULT_MODEL),
        temperature=_env_float("README_TEMPERATURE", 0.3),
        language=os.getenv("README_LANGUAGE", DEFAULT_LANGUAGE),
        use_mock=_env_bool("README_USE_MOCK"),
        llm_max_retries=max(1, _env_int("README_LLM_MAX_RETRIES", 3)),
        max_source_chars=_env_int("README_MAX_SOURCE_CHARS", 2000),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
