"""
로깅 설정 모듈

readmi 패키지 전체가 공유하는 'readmi' 로거 계층을 설정합니다.
각 모듈은 get_logger("<component>") 로 하위 로거를 얻어 사용합니다.
"""

import logging
import os
import sys
from typing import Optional

ROOT_LOGGER_NAME = "readmi"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = "INFO", fmt: str = DEFAULT_FORMAT, stream=None) -> logging.Logger:
    """readmi 루트 로거에 핸들러를 한 번만 등록"""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not logger.handlers:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)
    logger.propagate = False
    return logger


def setup_logging_from_env(default_level: str = "INFO") -> logging.Logger:
    """LOG_LEVEL 환경변수 기준으로 로깅 초기화"""
    level = os.getenv("LOG_LEVEL", default_level)
    return setup_logging(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
