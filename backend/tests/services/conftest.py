"""Service test fixtures — async DB, repository, service, and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - The client's app.state.post_service is wired over the test database
    - db_manager patched so readiness probes see the test database

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL-specific features not exercised here)
    - ASGITransport does not run the lifespan, so the fixture performs the
      wiring that main.lifespan does in production
"""

import pytest
from httpx import ASGITransport, AsyncClient

import blog_api.infrastructure.database as db_module
from blog_api.api.dependencies import build_post_service
from blog_api.infrastructure.database import DatabaseSessionManager
from blog_api.infrastructure.post_repository import SqlAlchemyPostRepository
from blog_api.main import app
from blog_api.services.post_mapper import PostMapper
from blog_api.services.post_service import PostService


@pytest.fixture
async def test_db():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await manager.create_schema()
    yield manager
    await manager.dispose()


@pytest.fixture
def repository(test_db):
    return SqlAlchemyPostRepository(test_db)


@pytest.fixture
def service(repository):
    return PostService(repository, PostMapper())


@pytest.fixture
async def client(test_db, monkeypatch):
    """FastAPI test client wired to the test database."""
    monkeypatch.setattr(db_module, "db_manager", test_db)
    app.state.post_service = build_post_service(test_db)

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    del app.state.post_service


@pytest.fixture
async def create_post(client):
    """POST a valid post and return the decoded response body."""
    async def _create(title="Hello World", content="Some valid content here"):
        res = await client.post("/posts", json={"title": title, "content": content})
        assert res.status_code == 200, res.text
        return res.json()
    return _create
