# backend/webhooks/crm_webhook.py
# CRM 클라이언트 프로필 웹훅 처리

import json
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from core.config import CFG
from integrations.field_resolver import resolver
from store import ProfileRecord, RecordStore, get_record_store, utc_now_iso

logger = logging.getLogger(__name__)

router = APIRouter()

# 발신 측 설정 실수 대비 별칭 (모두 같은 핸들러)
WEBHOOK_PATHS = (
    "/webhook",
    "/payload",
    f"{CFG.ROUTE_PREFIX}/webhook",
    f"{CFG.ROUTE_PREFIX}/payload",
)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"ok": False, "error": message})


async def read_body_limited(request: Request, limit: int) -> Optional[bytes]:
    """본문 읽기 (제한 초과 시 None, 메모리에 limit 이상 쌓지 않음)"""
    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > limit:
        return None

    chunks = []
    total = 0
    async for chunk in request.stream():
        total += len(chunk)
        if total > limit:
            return None
        chunks.append(chunk)
    return b"".join(chunks)


def build_record(identifier: str, fields: dict, raw: dict) -> ProfileRecord:
    """정규화 결과 → 저장용 레코드 (처리 시각 기준 타임스탬프)"""
    return ProfileRecord(
        identifier=identifier,
        last_updated_at=utc_now_iso(),
        raw=raw,
        **fields
    )


async def crm_webhook(request: Request, store: RecordStore = Depends(get_record_store)):
    """
    CRM 웹훅 엔드포인트

    처리:
    1. JSON 본문 파싱
    2. 식별자/프로필 필드 정규화
    3. 식별자 없으면 400 (저장 안 함)
    4. 레코드 저장 (요청마다 1회, 중복 제거 없음)
    """
    body = await read_body_limited(request, CFG.MAX_BODY_BYTES)
    if body is None:
        return _error(413, "Payload too large")

    try:
        data = json.loads(body) if body.strip() else {}
    except (ValueError, UnicodeDecodeError):
        logger.info("Webhook rejected: invalid JSON body")
        return _error(400, "Invalid JSON body")

    try:
        resolved = resolver.resolve(data)
        if not resolved.has_identifier:
            logger.info("Webhook rejected: missing uid")
            return _error(400, "Missing uid")

        record = build_record(resolved.identifier, resolved.fields, data)
        stored = store.put(resolved.identifier, record)
    except Exception as e:
        logger.exception("Webhook processing failed")
        return _error(500, str(e) or "Server error")

    logger.info(
        "Webhook stored uid=%s avatar=%s event=%s",
        stored.identifier, bool(stored.avatar_url), stored.last_event,
    )

    return {
        "ok": True,
        "identifier": stored.identifier,
        "stored": {
            "avatarUrlPresent": bool(stored.avatar_url),
            "avatarCode": stored.avatar_code,
            "lastEvent": stored.last_event or CFG.DEFAULT_LAST_EVENT,
            "lastUpdatedAt": stored.last_updated_at
        }
    }


for _path in WEBHOOK_PATHS:
    router.add_api_route(_path, crm_webhook, methods=["POST"])
