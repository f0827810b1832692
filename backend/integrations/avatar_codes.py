# backend/integrations/avatar_codes.py
# 아바타 코드 → 이미지 URL 테이블

import re
from typing import Dict, Optional, Tuple

AVATAR_BASE_URL = "https://assets.lentax.co/va-starter-track/avatars"

# CRM 배경 정보에 적는 짧은 코드 (대문자 기준)
AVATAR_CODES: Dict[str, str] = {
    "ANA": f"{AVATAR_BASE_URL}/ana.jpg",
    "BEA": f"{AVATAR_BASE_URL}/bea.jpg",
    "DEN": f"{AVATAR_BASE_URL}/den.jpg",
    "JOY": f"{AVATAR_BASE_URL}/joy.jpg",
    "KAI": f"{AVATAR_BASE_URL}/kai.jpg",
    "LIA": f"{AVATAR_BASE_URL}/lia.jpg",
    "MEU": f"{AVATAR_BASE_URL}/meu.jpg",
    "NOE": f"{AVATAR_BASE_URL}/noe.jpg",
    "RIA": f"{AVATAR_BASE_URL}/ria.jpg",
    "TEO": f"{AVATAR_BASE_URL}/teo.jpg",
}

# 외부 CRM 프로젝트 커스텀 필드 ID (아바타 URL 저장용)
AVATAR_CUSTOM_FIELD_ID = "cf_64b7e2a91d"

_CODE_PATTERN = re.compile(
    r"\b(" + "|".join(sorted(AVATAR_CODES)) + r")\b",
    re.IGNORECASE,
)


def find_avatar_code(text: Optional[str]) -> Optional[str]:
    """텍스트에서 첫 번째 아바타 코드 검색 (대소문자 무시, 단어 단위)"""
    if not isinstance(text, str) or not text:
        return None
    match = _CODE_PATTERN.search(text)
    if not match:
        return None
    return match.group(1).upper()


def avatar_from_background(text: Optional[str]) -> Tuple[Optional[str], Optional[str]]:
    """배경 정보 → (코드, URL)"""
    code = find_avatar_code(text)
    if code is None:
        return None, None
    return code, AVATAR_CODES[code]


def available_codes() -> Tuple[str, ...]:
    """안내 문구용 코드 목록"""
    return tuple(sorted(AVATAR_CODES))
