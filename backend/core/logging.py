# backend/core/logging.py
# 로깅 설정

import logging
from typing import Optional

from .config import CFG

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """루트 로거 설정 (여러 번 호출해도 안전)"""
    resolved = logging.getLevelName((level or CFG.LOG_LEVEL).upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO

    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger().setLevel(resolved)
