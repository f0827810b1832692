# backend/integrations/field_resolver.py
# CRM 웹훅 페이로드 → 식별자 + 프로필 필드 정규화

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple

from .avatar_codes import AVATAR_CUSTOM_FIELD_ID, avatar_from_background

Accessor = Callable[[Any], Optional[str]]


def get_path(data: Any, path: str) -> Any:
    """점 표기 경로로 중첩 값 조회 (예: client.uid)"""
    value = data
    for part in path.split("."):
        if not isinstance(value, dict):
            return None
        value = value.get(part)
        if value is None:
            return None
    return value


def as_text(value: Any) -> Optional[str]:
    """문자열/숫자만 허용, 공백 제거 후 비어 있으면 None"""
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        return None
    text = str(value).strip()
    return text or None


def key(path: str) -> Accessor:
    """경로 하나에 대한 accessor"""
    def accessor(data: Any) -> Optional[str]:
        return as_text(get_path(data, path))
    accessor.__name__ = f"key({path})"
    return accessor


def keys(*paths: str) -> Tuple[Accessor, ...]:
    return tuple(key(p) for p in paths)


def first_non_empty(data: Any, accessors: Tuple[Accessor, ...]) -> Optional[str]:
    """accessor 순서대로 시도, 첫 번째 값 반환"""
    for accessor in accessors:
        value = accessor(data)
        if value:
            return value
    return None


def custom_field_avatar(data: Any) -> Optional[str]:
    """project_custom_fields[<필드 ID>] 값 (문자열만 허용)"""
    for path in ("project_custom_fields", "client.project_custom_fields"):
        fields = get_path(data, path)
        if not isinstance(fields, dict):
            continue
        value = fields.get(AVATAR_CUSTOM_FIELD_ID)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


@dataclass
class ResolvedPayload:
    """정규화 결과"""
    identifier: str = ""
    fields: Dict[str, Optional[str]] = field(default_factory=dict)

    @property
    def has_identifier(self) -> bool:
        return bool(self.identifier)


class FieldResolver:
    """
    CRM 페이로드 필드 정규화

    원칙:
    - 필드별 후보 키 목록을 순서대로 시도 (첫 번째 비어 있지 않은 값 사용)
    - 평면 페이로드(uid) / 중첩 페이로드(client.uid) 모두 지원
    - 예외 없음: 형태가 맞지 않으면 빈 값
    """

    IDENTIFIER = keys(
        "uid", "UID", "clientUID", "client_uid", "clientUid",
        "record_uid", "recordUID", "recordId",
        "client.uid", "client.UID", "client.id",
        "id",
    )

    FIELDS: Dict[str, Tuple[Accessor, ...]] = {
        "display_name": keys("name", "fullName", "full_name", "client.name", "client.full_name"),
        "first_name": keys("firstName", "first_name", "client.first_name", "client.firstName"),
        "last_name": keys("lastName", "last_name", "client.last_name", "client.lastName"),
        "email": keys("email", "primaryEmail", "client.email", "client.primary_email"),
        "background_info": keys(
            "backgroundInfo", "background_info", "background", "bio",
            "client.background_info", "client.backgroundInfo",
        ),
        "last_event": keys("event", "eventName", "event_type", "trigger", "action", "type"),
    }

    # 아바타: 직접 URL → 커스텀 필드 → 배경 정보 코드 순
    AVATAR_DIRECT = keys("avatarUrl", "avatar", "profilePic", "photoUrl")

    def resolve(self, payload: Any) -> ResolvedPayload:
        if not isinstance(payload, dict):
            return ResolvedPayload()

        identifier = first_non_empty(payload, self.IDENTIFIER) or ""

        fields = {
            name: first_non_empty(payload, accessors)
            for name, accessors in self.FIELDS.items()
        }

        if not fields["display_name"]:
            parts = [fields["first_name"], fields["last_name"]]
            fields["display_name"] = " ".join(p for p in parts if p) or None

        fields.update(self._resolve_avatar(payload, fields["background_info"]))

        return ResolvedPayload(identifier=identifier, fields=fields)

    def _resolve_avatar(self, payload: Dict, background_info: Optional[str]) -> Dict[str, Optional[str]]:
        url = first_non_empty(payload, self.AVATAR_DIRECT) or custom_field_avatar(payload)
        if url:
            return {"avatar_url": url, "avatar_code": None}

        code, url = avatar_from_background(background_info)
        return {"avatar_url": url, "avatar_code": code}


resolver = FieldResolver()


def resolve(payload: Any) -> ResolvedPayload:
    """모듈 레벨 단축 함수"""
    return resolver.resolve(payload)
