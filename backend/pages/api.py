# backend/pages/api.py
# 프로필 페이지 / 디버그 / 마이크로사이트 엔드포인트

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, PlainTextResponse

from core.config import CFG
from store import RecordStore, get_record_store

from .renderer import render_not_found, render_overview, render_section
from .sections import get_section

router = APIRouter(prefix=CFG.ROUTE_PREFIX, tags=["Profile Pages"])


# /p/... 라우트가 /{identifier}/overview 보다 먼저 매칭되어야 함
@router.get("/p/{identifier}", response_class=HTMLResponse)
@router.get("/p/{identifier}/{path:path}", response_class=HTMLResponse)
def microsite_page(identifier: str, path: str = "", store: RecordStore = Depends(get_record_store)):
    """
    마이크로사이트 페이지 (embed 스크립트 이동 대상)

    - 빈 경로 → 개요
    - 첫 번째 경로 세그먼트로 섹션 선택
    - 알 수 없는 섹션 → 404
    """
    uid = identifier.strip()
    if not uid:
        return PlainTextResponse("Missing uid", status_code=400)

    record = store.get(uid)
    slug = path.strip("/").split("/", 1)[0]
    if not slug:
        return HTMLResponse(render_overview(uid, record))

    section = get_section(slug)
    if section is None:
        return HTMLResponse(render_not_found(uid, slug), status_code=404)

    return HTMLResponse(render_section(uid, record, section))


@router.get("/{identifier}/overview", response_class=HTMLResponse)
def overview(identifier: str, store: RecordStore = Depends(get_record_store)):
    """
    개요 페이지

    레코드가 없어도 200 (안내 문구 + uid 표시)
    """
    uid = identifier.strip()
    if not uid:
        return PlainTextResponse("Missing uid", status_code=400)

    return HTMLResponse(render_overview(uid, store.get(uid)))


@router.get("/{identifier}/debug")
def debug(identifier: str, store: RecordStore = Depends(get_record_store)):
    """저장된 레코드 조회 (운영자 디버깅용)"""
    uid = identifier.strip()
    record = store.get(uid)
    return {
        "ok": True,
        "identifier": uid,
        "record": record.model_dump() if record else None
    }
