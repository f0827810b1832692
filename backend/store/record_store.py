# backend/store/record_store.py
# 식별자 → 프로필 레코드 저장소 (인메모리, 재시작 시 초기화)

import logging
import threading
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from .models import ProfileRecord

logger = logging.getLogger(__name__)

STORE_MODES = ("replace", "merge")


class RecordStore(ABC):
    """레코드 저장소 인터페이스 (핸들러는 이 인터페이스만 사용)"""

    @abstractmethod
    def get(self, identifier: str) -> Optional[ProfileRecord]:
        ...

    @abstractmethod
    def put(self, identifier: str, record: ProfileRecord) -> ProfileRecord:
        ...

    @abstractmethod
    def delete(self, identifier: str) -> bool:
        ...


class InMemoryRecordStore(RecordStore):
    """
    인메모리 레코드 저장소

    - replace: 마지막 쓰기가 이전 레코드를 완전히 대체
    - merge: 새 레코드의 비어 있지 않은 필드만 이전 레코드에 덮어쓰기
    - 만료/용량 제한 없음
    """

    def __init__(self, mode: str = "replace"):
        if mode not in STORE_MODES:
            logger.warning("Unknown store mode %r, falling back to 'replace'", mode)
            mode = "replace"
        self.mode = mode
        self._records: Dict[str, ProfileRecord] = {}
        self._lock = threading.Lock()

    def get(self, identifier: str) -> Optional[ProfileRecord]:
        with self._lock:
            return self._records.get(identifier)

    def put(self, identifier: str, record: ProfileRecord) -> ProfileRecord:
        with self._lock:
            previous = self._records.get(identifier)
            if self.mode == "merge" and previous is not None:
                record = record.merged_onto(previous)
            self._records[identifier] = record
            return record

    def delete(self, identifier: str) -> bool:
        with self._lock:
            return self._records.pop(identifier, None) is not None

    def identifiers(self) -> List[str]:
        with self._lock:
            return sorted(self._records)

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def clear(self) -> None:
        with self._lock:
            self._records.clear()
