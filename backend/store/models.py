# backend/store/models.py
# 프로필 레코드 모델

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

# merge 모드에서 덮어쓰기 대상 필드
PROFILE_FIELDS = (
    "display_name",
    "first_name",
    "last_name",
    "email",
    "background_info",
    "last_event",
)


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


class ProfileRecord(BaseModel):
    """식별자별 최신 프로필 레코드"""
    identifier: str
    display_name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    background_info: Optional[str] = None
    avatar_url: Optional[str] = None
    avatar_code: Optional[str] = None
    last_event: Optional[str] = None
    last_updated_at: str = Field(default_factory=utc_now_iso)
    raw: Dict[str, Any] = Field(default_factory=dict)

    def merged_onto(self, previous: "ProfileRecord") -> "ProfileRecord":
        """이전 레코드 위에 비어 있지 않은 필드만 덮어쓰기"""
        data = previous.model_dump()
        for name in PROFILE_FIELDS:
            value = getattr(self, name)
            if value:
                data[name] = value
        # 아바타 URL과 코드는 한 묶음 (코드가 None이어도 함께 교체)
        if self.avatar_url:
            data["avatar_url"] = self.avatar_url
            data["avatar_code"] = self.avatar_code
        data["last_updated_at"] = self.last_updated_at
        data["raw"] = self.raw
        return ProfileRecord(**data)
