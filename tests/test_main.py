"""Tests for server startup."""

import os

import pytest

import main
from core.config import ConfigError


class TestOpenDatabase:
    """Tests for open_database()."""

    def test_opens_configured_database(self, monkeypatch, tmp_path) -> None:
        db_path = tmp_path / "data" / "todos.db"
        monkeypatch.setenv("TODO_DB_PATH", str(db_path))

        db = main.open_database()
        try:
            assert db.all("SELECT * FROM todos") == []
        finally:
            db.close()
        assert os.path.exists(db_path)

    def test_missing_path_raises(self, monkeypatch) -> None:
        monkeypatch.delenv("TODO_DB_PATH", raising=False)

        with pytest.raises(ConfigError):
            main.open_database()


class TestMain:
    """Tests for main()."""

    def test_exits_when_unconfigured(self, monkeypatch) -> None:
        monkeypatch.delenv("TODO_DB_PATH", raising=False)

        with pytest.raises(SystemExit) as exc_info:
            main.main()

        assert exc_info.value.code == 1

    def test_closes_database_after_run(self, monkeypatch, tmp_path) -> None:
        monkeypatch.setenv("TODO_DB_PATH", str(tmp_path / "todos.db"))
        closed = []

        class FakeServer:
            def run(self) -> None:
                raise KeyboardInterrupt

        def fake_create_server(db):
            monkeypatch.setattr(db, "close", lambda: closed.append(True))
            return FakeServer()

        monkeypatch.setattr(main, "create_server", fake_create_server)

        main.main()

        assert closed == [True]
