# backend/webhooks/__init__.py
# CRM 웹훅 모듈

from .crm_webhook import router, crm_webhook, build_record, read_body_limited, WEBHOOK_PATHS

__all__ = ["router", "crm_webhook", "build_record", "read_body_limited", "WEBHOOK_PATHS"]
