"""On-disk layout created at startup."""

import sqlite3

import pytest
from fastapi.testclient import TestClient

from readsync.core.config import Settings
from readsync.db.session import Database
from readsync.main import create_app


def table_names(path) -> list[str]:
    with sqlite3.connect(path) as conn:
        rows = conn.execute("SELECT name FROM sqlite_master WHERE type = 'table' ORDER BY name").fetchall()
    return [name for (name,) in rows if not name.startswith("sqlite_")]


class TestTableLayout:

    def test_default_layout_is_users_and_progress(self, tmp_path):
        db_file = tmp_path / "sync.sqlite"
        settings = Settings(database_url=f"sqlite+aiosqlite:///{db_file}", _env_file=None)
        with TestClient(create_app(settings)) as client:
            assert client.get("/healthcheck").status_code == 200

        assert table_names(db_file) == ["progress", "users"]

    def test_history_table_created_when_enabled(self, tmp_path):
        db_file = tmp_path / "sync.sqlite"
        settings = Settings(database_url=f"sqlite+aiosqlite:///{db_file}", record_history=True, _env_file=None)
        with TestClient(create_app(settings)) as client:
            assert client.get("/healthcheck").status_code == 200

        assert table_names(db_file) == ["progress", "progress_history", "users"]

    def test_users_name_is_unique(self, tmp_path):
        db_file = tmp_path / "sync.sqlite"
        settings = Settings(database_url=f"sqlite+aiosqlite:///{db_file}", _env_file=None)
        with TestClient(create_app(settings)):
            pass

        with sqlite3.connect(db_file) as conn:
            conn.execute("INSERT INTO users (name, password, salt) VALUES ('alice', 'x', 'y')")
            with pytest.raises(sqlite3.IntegrityError):
                conn.execute("INSERT INTO users (name, password, salt) VALUES ('alice', 'z', 'w')")


class TestDatabaseLifecycle:

    def test_session_before_open_fails(self):
        with pytest.raises(RuntimeError):
            Database("sqlite+aiosqlite:///unused.sqlite").session()

    def test_history_table_excluded_by_default(self):
        assert "progress_history" not in {t.name for t in Database("sqlite+aiosqlite://").tables()}
        assert "progress_history" in {t.name for t in Database("sqlite+aiosqlite://", record_history=True).tables()}
