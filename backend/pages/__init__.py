# backend/pages/__init__.py
# 프로필 페이지 모듈

from .renderer import render_overview, render_section, render_not_found
from .sections import SECTIONS, get_section
from .api import router

__all__ = [
    "render_overview",
    "render_section",
    "render_not_found",
    "SECTIONS",
    "get_section",
    "router"
]
