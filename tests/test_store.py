# tests/test_store.py
# 레코드 저장소 테스트

import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'backend'))

from store import InMemoryRecordStore, ProfileRecord


def make_record(identifier="cl_1", **fields):
    return ProfileRecord(identifier=identifier, **fields)


class TestReplaceMode:
    """replace 모드 테스트"""

    def setup_method(self):
        self.store = InMemoryRecordStore(mode="replace")

    def test_initial_state(self):
        """초기 상태"""
        assert self.store.count() == 0
        assert self.store.get("cl_1") is None

    def test_put_get(self):
        """저장 / 조회"""
        record = make_record(email="a@example.com")
        stored = self.store.put("cl_1", record)

        assert stored is record
        assert self.store.get("cl_1").email == "a@example.com"
        assert self.store.count() == 1

    def test_last_write_wins(self):
        """마지막 쓰기가 완전히 대체"""
        self.store.put("cl_1", make_record(display_name="Old", email="old@example.com"))
        self.store.put("cl_1", make_record(email="new@example.com"))

        record = self.store.get("cl_1")
        assert record.email == "new@example.com"
        assert record.display_name is None
        assert self.store.count() == 1

    def test_delete(self):
        """삭제"""
        self.store.put("cl_1", make_record())
        assert self.store.delete("cl_1") is True
        assert self.store.delete("cl_1") is False
        assert self.store.get("cl_1") is None

    def test_identifiers_and_clear(self):
        """식별자 목록 / 초기화"""
        self.store.put("b", make_record("b"))
        self.store.put("a", make_record("a"))
        assert self.store.identifiers() == ["a", "b"]

        self.store.clear()
        assert self.store.count() == 0


class TestMergeMode:
    """merge 모드 테스트"""

    def setup_method(self):
        self.store = InMemoryRecordStore(mode="merge")

    def test_first_write(self):
        """첫 쓰기는 그대로 저장"""
        self.store.put("cl_1", make_record(email="a@example.com"))
        assert self.store.get("cl_1").email == "a@example.com"

    def test_keeps_previous_fields(self):
        """비어 있는 필드는 이전 값 유지"""
        self.store.put("cl_1", make_record(
            display_name="Maria", email="old@example.com", avatar_url="https://x/a.jpg",
            last_updated_at="2026-01-01T00:00:00Z", raw={"v": 1}
        ))
        merged = self.store.put("cl_1", make_record(
            email="new@example.com", last_updated_at="2026-01-02T00:00:00Z", raw={"v": 2}
        ))

        assert merged.display_name == "Maria"
        assert merged.email == "new@example.com"
        assert merged.avatar_url == "https://x/a.jpg"
        assert merged.last_updated_at == "2026-01-02T00:00:00Z"
        assert merged.raw == {"v": 2}
        assert self.store.get("cl_1") == merged


    def test_avatar_url_and_code_replaced_together(self):
        """새 아바타 URL → 이전 코드 제거"""
        self.store.put("cl_1", make_record(avatar_url="https://x/meu.jpg", avatar_code="MEU"))
        merged = self.store.put("cl_1", make_record(avatar_url="https://cdn.example.com/x.png"))

        assert merged.avatar_url == "https://cdn.example.com/x.png"
        assert merged.avatar_code is None

    def test_avatar_kept_when_absent(self):
        """아바타 없는 쓰기 → URL/코드 유지"""
        self.store.put("cl_1", make_record(avatar_url="https://x/meu.jpg", avatar_code="MEU"))
        merged = self.store.put("cl_1", make_record(email="a@example.com"))

        assert merged.avatar_url == "https://x/meu.jpg"
        assert merged.avatar_code == "MEU"


class TestStoreMode:
    """모드 설정 테스트"""

    def test_unknown_mode_falls_back(self):
        """알 수 없는 모드 → replace"""
        store = InMemoryRecordStore(mode="upsert")
        assert store.mode == "replace"

    def test_default_timestamp(self):
        """기본 타임스탬프 (UTC)"""
        record = make_record()
        assert record.last_updated_at.endswith("Z")

    @pytest.mark.parametrize("env_value, expected", [
        ("merge", "merge"),
        (" MERGE ", "merge"),
        ("replace", "replace"),
        ("bogus", "replace"),
    ])
    def test_store_mode_from_env(self, monkeypatch, env_value, expected):
        """STORE_MODE 환경 변수 → CFG → 저장소 모드"""
        from core.config import CFG, load_store_mode
        from store import create_record_store

        monkeypatch.setenv("STORE_MODE", env_value)
        monkeypatch.setattr(CFG, "STORE_MODE", load_store_mode())

        assert create_record_store().mode == expected

    def test_store_mode_default(self, monkeypatch):
        """STORE_MODE 미설정 → replace"""
        from core.config import load_store_mode

        monkeypatch.delenv("STORE_MODE", raising=False)
        assert load_store_mode() == "replace"
