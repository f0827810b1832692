# tests/conftest.py
# Pytest 공통 설정 및 Fixtures

import pytest
import sys
import os

# 백엔드 경로 추가
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'backend'))


@pytest.fixture
def record_store():
    """테스트별 빈 저장소 (replace 모드)"""
    from store import InMemoryRecordStore
    return InMemoryRecordStore(mode="replace")


@pytest.fixture
def client(record_store):
    """저장소를 교체한 TestClient"""
    from fastapi.testclient import TestClient
    from main import app
    from store import get_record_store

    app.dependency_overrides[get_record_store] = lambda: record_store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_flat_payload():
    """평면 페이로드 (uid + 배경 정보 코드)"""
    return {
        "uid": "cl_1001",
        "firstName": "Maria",
        "lastName": "Eugenia",
        "email": "maria@example.com",
        "backgroundInfo": "Bilingual VA, avatar meu, 5 years in ops",
        "event": "Client Profile Updated"
    }


@pytest.fixture
def sample_nested_payload():
    """중첩 페이로드 (client.uid + 프로젝트 커스텀 필드)"""
    from integrations.avatar_codes import AVATAR_CUSTOM_FIELD_ID
    return {
        "event_type": "project.updated",
        "client": {
            "uid": "cl_2002",
            "first_name": "Jonah",
            "last_name": "Reyes",
            "email": "jonah@example.com"
        },
        "project_custom_fields": {
            AVATAR_CUSTOM_FIELD_ID: "https://cdn.example.com/jonah.png",
            "cf_other": 42
        }
    }


@pytest.fixture
def sample_partial_payload():
    """일부 필드만 있는 페이로드"""
    return {
        "uid": "cl_1001",
        "email": "maria.new@example.com"
    }
