# backend/core/config.py
# 서비스 설정

import os


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        return default


def load_store_mode() -> str:
    """STORE_MODE 환경 변수 (replace | merge, 그 외 값은 저장소에서 replace로 처리)"""
    return os.getenv("STORE_MODE", "replace").strip().lower()


class CFG:
    """서비스 설정 (환경 변수는 시작 시 한 번만 읽음)"""

    # 서버
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = _int_env("PORT", 3000)
    SERVICE_NAME = os.getenv("SERVICE_NAME", "va-starter-track")
    VERSION = "1.0.0"

    # 로깅
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # 저장소: replace | merge
    STORE_MODE = load_store_mode()

    # 웹훅
    MAX_BODY_BYTES = _int_env("MAX_BODY_BYTES", 2 * 1024 * 1024)  # 2MB

    # 고정 값
    ROUTE_PREFIX = "/va-starter-track"
    DEFAULT_LAST_EVENT = "Profile update"
    LABEL_MAX_LENGTH = 120
