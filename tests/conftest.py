import pytest
import os
import sys

CURRENT_DIR = os.path.dirname(__file__)
SERVICE_ROOT = os.path.dirname(CURRENT_DIR)
if SERVICE_ROOT not in sys.path:
    sys.path.insert(0, SERVICE_ROOT)

from fastapi.testclient import TestClient
from users_service.infrastructure.store import UserStore
from users_service.main import create_app

@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Настройка тестового окружения"""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")

@pytest.fixture
def store():
    """Свежее хранилище на каждый тест"""
    return UserStore()

@pytest.fixture
def client(store):
    """Фикстура для тестового клиента"""
    app = create_app(store=store)
    with TestClient(app) as c:
        yield c
