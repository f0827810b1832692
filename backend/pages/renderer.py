# backend/pages/renderer.py
# 프로필 페이지 렌더러 (순수 함수, 캐시 없음)

from pathlib import Path
from typing import Dict, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from core.config import CFG
from integrations.avatar_codes import available_codes
from store.models import ProfileRecord

from .sections import grouped_sections

TEMPLATE_DIR = Path(__file__).parent / "templates"

# 레코드 값은 자동 이스케이프, 템플릿 마크업은 운영자 정적 콘텐츠로 취급
env = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def profile_context(identifier: str, record: Optional[ProfileRecord]) -> Dict:
    """템플릿용 값 (비어 있으면 기본 문구)"""
    context = {
        "identifier": identifier,
        "has_record": record is not None,
        "prefix": CFG.ROUTE_PREFIX,
        "avatar_codes": ", ".join(available_codes()),
        "nav_groups": grouped_sections(),
    }
    if record is None:
        return context

    name = record.display_name or " ".join(
        p for p in (record.first_name, record.last_name) if p
    )
    context.update({
        "name": name or "Unknown",
        "first_name": record.first_name or "",
        "last_name": record.last_name or "",
        "email": record.email or "N/A",
        "last_event": record.last_event or CFG.DEFAULT_LAST_EVENT,
        "last_updated": record.last_updated_at,
        "avatar_url": record.avatar_url or "",
        "avatar_code": record.avatar_code or "",
        "background_info": record.background_info or "N/A",
    })
    return context


def render_overview(identifier: str, record: Optional[ProfileRecord]) -> str:
    """개요 페이지 HTML"""
    template = env.get_template("overview.html")
    return template.render(**profile_context(identifier, record))


def render_section(identifier: str, record: Optional[ProfileRecord], section: Dict) -> str:
    """마이크로사이트 섹션 페이지 HTML"""
    template = env.get_template("section.html")
    return template.render(section=section, **profile_context(identifier, record))


def render_not_found(identifier: str, slug: str) -> str:
    template = env.get_template("not_found.html")
    return template.render(identifier=identifier, slug=slug, prefix=CFG.ROUTE_PREFIX)
