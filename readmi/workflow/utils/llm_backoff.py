"""
LLM 호출 재시도 유틸

레이트리밋/일시적 네트워크 오류에 대비해 지수 백오프로 재시도합니다.
"""

import time
from typing import Any, List

from ...logging_config import get_logger

logger = get_logger("llm_backoff")


def invoke_with_retry(llm: Any, messages: List[Any], max_retries: int = 3, base_delay: float = 1.0, sleep=time.sleep) -> Any:
    """
    llm.invoke(messages) 를 최대 max_retries 회 시도

    모든 시도가 실패하면 마지막 예외를 그대로 다시 발생시킵니다.
    """
    attempts = max(1, max_retries)
    for attempt in range(1, attempts + 1):
        try:
            return llm.invoke(messages)
        except Exception as e:
            if attempt == attempts:
                logger.error(f"LLM call failed after {attempts} attempts: {e}")
                raise
            delay = base_delay * (2 ** (attempt - 1))
            logger.warning(f"LLM call failed (attempt {attempt}/{attempts}), retrying in {delay:.1f}s: {e}")
            sleep(delay)
