# backend/core/__init__.py
# 공통 설정 / 로깅

from .config import CFG
from .logging import setup_logging

__all__ = ["CFG", "setup_logging"]
