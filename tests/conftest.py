"""
Pytest configuration
Each test gets its own SQLite file, app instance and pinned clock.
"""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from readsync.core.config import Settings
from readsync.db import base  # noqa: F401
from readsync.db.session import Database
from readsync.main import create_app
from readsync.routers.deps import get_clock

# 2021-01-01T00:00:00Z
FIXED_NOW = 1609459200


# ==================== Database fixtures ====================

@pytest.fixture(scope="function")
def settings(tmp_path) -> Settings:
    return Settings(database_url=f"sqlite+aiosqlite:///{tmp_path / 'sync.sqlite'}", _env_file=None)


@pytest_asyncio.fixture(scope="function")
async def database(settings):
    """Opened database with tables created, disposed after the test."""
    database = Database(
        settings.database_url,
        timeout=settings.database_timeout,
        record_history=settings.record_history,
    )
    database.open()
    await database.create_tables()
    yield database
    await database.close()


@pytest_asyncio.fixture(scope="function")
async def db_session(database):
    async with database.session() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def history_session(tmp_path):
    """Session on a database created with the progress_history table."""
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'history.sqlite'}", record_history=True)
    database.open()
    await database.create_tables()
    async with database.session() as session:
        yield session
    await database.close()


# ==================== App fixtures ====================

@pytest.fixture(scope="function")
def access_log() -> list:
    return []


@pytest.fixture(scope="function")
def app(settings, access_log):
    app = create_app(settings, access_observer=lambda *entry: access_log.append(entry))
    app.dependency_overrides[get_clock] = lambda: (lambda: FIXED_NOW)
    return app


@pytest.fixture(scope="function")
def client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture(scope="function")
def alice(client):
    """Registered user alice/secret; returns her auth headers."""
    response = client.post("/users/create", json={"username": "alice", "password": "secret"})
    assert response.status_code == 201
    return {"X-Auth-User": "alice", "X-Auth-Key": "secret"}
