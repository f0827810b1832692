# backend/tracker/api.py
# 임베드 스크립트 + 조회/클릭 이벤트 엔드포인트

import json
import logging
from pathlib import Path

from fastapi import APIRouter, Request, Response

from core.config import CFG

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Tracker"])

EMBED_SCRIPT_PATH = Path(__file__).parent / "static" / "embed.js"
EMBED_PATHS = ("/embed.js", f"{CFG.ROUTE_PREFIX}/embed.js")


def load_embed_script() -> str:
    return EMBED_SCRIPT_PATH.read_text(encoding="utf-8")


def summarize_event(data) -> dict:
    """로그용 요약 (uid, 라벨, 경로만)"""
    if not isinstance(data, dict):
        return {}
    label = str(data.get("label") or "")[:CFG.LABEL_MAX_LENGTH]
    return {
        "uid": data.get("clientUID"),
        "label": label,
        "target": data.get("path") or data.get("url") or data.get("page"),
    }


def embed_script():
    """브라우저 임베드 스크립트"""
    return Response(
        content=load_embed_script(),
        media_type="application/javascript",
        headers={"Cache-Control": "no-cache"},
    )


for _path in EMBED_PATHS:
    router.add_api_route(_path, embed_script, methods=["GET"])


@router.post(f"{CFG.ROUTE_PREFIX}/e/{{event_name}}", status_code=204)
async def track_event(event_name: str, request: Request):
    """
    조회/클릭 이벤트 (fire-and-forget)

    저장 없음, 본문 오류는 무시하고 항상 204
    """
    try:
        data = json.loads(await request.body() or b"{}")
    except ValueError:
        data = {}

    logger.debug("Tracker event %s %s", event_name, summarize_event(data))
    return Response(status_code=204)
