# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from catalog.config import Settings
from catalog.database import ProductStore
from catalog.main import create_app

API_KEY = "test-secret"
AUTH = {"x-api-key": API_KEY}


@pytest.fixture
def settings():
    return Settings(api_key=API_KEY, api_key_header="x-api-key")


@pytest.fixture
def store():
    return ProductStore()


@pytest.fixture
def app(store, settings):
    return create_app(store=store, settings=settings)


@pytest.fixture
def client(app):
    return TestClient(app)
