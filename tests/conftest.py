"""Shared fixtures for Velo-Altitude tests.

Provides:
- db_session: in-memory SQLite session with the content tables
- backend: fake content backend served through httpx.MockTransport
- client: TestClient wired to the FastAPI app with both overridden
- make_* factories for content items
"""

import os
import tempfile

import httpx
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Set env vars before any app imports
_tmp_dir = tempfile.mkdtemp(prefix="velo_altitude_tests_")
os.environ.setdefault("DATABASE_URL", f"sqlite:///{_tmp_dir}/test.db")
os.environ.setdefault("CONTENT_API_BASE_URL", "http://backend.test/api")
os.environ.setdefault("FALLBACK_ON_FETCH_ERROR", "false")
os.environ.setdefault("API_KEY_ALICE", "alice-secret-key")

from velo_altitude.models.database import Base
from velo_altitude.models import content_item  # noqa: F401

BACKEND_URL = "http://backend.test/api"


# ---------------------------------------------------------------------------
# Database
# ---------------------------------------------------------------------------

@pytest.fixture
def db_session():
    """Fresh in-memory database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    Session = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = Session()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


# ---------------------------------------------------------------------------
# Fake content backend
# ---------------------------------------------------------------------------

class FakeBackend:
    """Serves canned JSON per URL path; unknown paths answer 404."""

    def __init__(self):
        self.routes = {}
        self.requests = []

    def set(self, path, payload=None, status_code=200):
        self.routes[path] = (status_code, payload)

    def fail(self, path):
        """Make a path raise a connection error."""
        self.routes[path] = (None, None)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"error": "not found"})
        status_code, payload = route
        if status_code is None:
            raise httpx.ConnectError("connection refused", request=request)
        if isinstance(payload, str):
            return httpx.Response(status_code, text=payload)
        return httpx.Response(status_code, json=payload)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def client(db_session, backend):
    """Sync test client with the database and content backend overridden."""
    from fastapi.testclient import TestClient

    from velo_altitude.data.fallback_data import ensure_fallback_catalog
    from velo_altitude.dependencies import get_content_client
    from velo_altitude.main import app
    from velo_altitude.models.database import get_db
    from velo_altitude.services.data_service import ContentClient

    ensure_fallback_catalog(db_session)
    http = httpx.AsyncClient(transport=backend.transport())

    def override_db():
        yield db_session

    app.dependency_overrides[get_db] = override_db
    app.dependency_overrides[get_content_client] = lambda: ContentClient(http, base_url=BACKEND_URL)

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Data factories
# ---------------------------------------------------------------------------

def make_col(index=0, **overrides):
    defaults = {
        "id": f"col-{index}",
        "slug": f"col-{index}",
        "name": {"fr": f"Col numéro {index}", "en": f"Pass number {index}"},
        "description": {"fr": "Un col des Alpes.", "en": "An Alpine pass."},
        "region": "alps",
        "altitude": 1500 + index,
        "length": 12.0,
        "gradient": 7.0,
        "difficulty": 3,
        "tags": [],
        "last_updated": "2024-01-01T00:00:00Z",
    }
    defaults.update(overrides)
    return defaults


def make_cols(count, **overrides):
    return [make_col(i, **overrides) for i in range(count)]


def make_program(index=0, **overrides):
    defaults = {
        "id": f"program-{index}",
        "slug": f"program-{index}",
        "name": {"fr": f"Programme {index}", "en": f"Program {index}"},
        "description": {"fr": "Programme d'entraînement.", "en": "Training program."},
        "level": 2,
        "duration": 8,
        "goal": ["endurance"],
        "createdAt": "2024-01-01T00:00:00Z",
    }
    defaults.update(overrides)
    return defaults
