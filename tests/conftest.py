import pytest
from fastapi.testclient import TestClient

from career_code.api.dependencies import get_database
from career_code.core.config import get_settings
from career_code.db.memory import InMemoryDatabase
from career_code.main import create_app

TEST_SECRET = "test-secret"


@pytest.fixture
def settings(monkeypatch):
    monkeypatch.setenv("USE_IN_MEMORY_STORE", "true")
    monkeypatch.setenv("JWT_ACCESS_SECRET", TEST_SECRET)
    monkeypatch.setenv("AUTH_STRATEGY", "session")
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


@pytest.fixture
def db():
    return InMemoryDatabase()


@pytest.fixture
def app(settings, db):
    app = create_app()
    app.dependency_overrides[get_database] = lambda: db
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def lenient_client(app):
    """Client that returns 500 responses instead of re-raising server errors."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def login(client):
    """Issue a session cookie for the given email on the shared client."""
    def _login(email):
        response = client.post("/jwt", json={"email": email})
        assert response.status_code == 200
        return response
    return _login
