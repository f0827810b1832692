# backend/integrations/__init__.py
# CRM 페이로드 정규화 모듈

from .field_resolver import FieldResolver, ResolvedPayload, resolver, resolve
from .avatar_codes import AVATAR_CODES, AVATAR_CUSTOM_FIELD_ID, available_codes

__all__ = [
    "FieldResolver",
    "ResolvedPayload",
    "resolver",
    "resolve",
    "AVATAR_CODES",
    "AVATAR_CUSTOM_FIELD_ID",
    "available_codes"
]
