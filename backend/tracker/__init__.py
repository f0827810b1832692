# backend/tracker/__init__.py
# 네비게이션 비콘 모듈

from .api import router, load_embed_script

__all__ = ["router", "load_embed_script"]
