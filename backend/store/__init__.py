# backend/store/__init__.py
# 레코드 저장소 모듈

from core.config import CFG

from .models import ProfileRecord, utc_now_iso
from .record_store import RecordStore, InMemoryRecordStore


def create_record_store() -> InMemoryRecordStore:
    """CFG.STORE_MODE 기준 저장소 생성"""
    return InMemoryRecordStore(mode=CFG.STORE_MODE)


# 글로벌 인스턴스
record_store = create_record_store()


def get_record_store() -> RecordStore:
    """FastAPI 의존성 (테스트에서 dependency_overrides로 교체)"""
    return record_store


__all__ = [
    "ProfileRecord",
    "utc_now_iso",
    "RecordStore",
    "InMemoryRecordStore",
    "record_store",
    "create_record_store",
    "get_record_store"
]
