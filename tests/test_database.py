"""Tests for the SQLite persistence wrapper and schema."""

import os

import pytest

from core.database import MEMORY_DB, DatabaseError, RunResult, create_connection
from core.schema import initialize_schema


class TestCreateConnection:
    """Tests for create_connection()."""

    def test_creates_database_file(self, tmp_path) -> None:
        """A file database should be created on disk."""
        db_path = str(tmp_path / "test-todos.db")
        db = create_connection(db_path)
        initialize_schema(db)
        db.close()

        assert os.path.exists(db_path)

    def test_creates_missing_parent_directory(self, tmp_path) -> None:
        """Missing parent directories should be created first."""
        db_path = str(tmp_path / "nested" / "dir" / "todos.db")
        db = create_connection(db_path)
        initialize_schema(db)
        db.close()

        assert os.path.isdir(tmp_path / "nested" / "dir")
        assert os.path.exists(db_path)

    def test_unusable_directory_raises(self, tmp_path) -> None:
        """A parent path that is a regular file can't become a directory."""
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("")

        with pytest.raises(DatabaseError, match="Failed to create database directory"):
            create_connection(str(blocker / "todos.db"))


class TestSchema:
    """Tests for initialize_schema()."""

    def test_todos_table_columns(self, db) -> None:
        """The todos table should have exactly the five documented columns."""
        columns = {col["name"]: col for col in db.all("PRAGMA table_info(todos)")}

        assert set(columns) == {"id", "title", "description", "completed", "created_at"}
        assert columns["id"]["pk"] == 1
        assert columns["title"]["notnull"] == 1
        assert columns["description"]["notnull"] == 0

    def test_default_values(self, db) -> None:
        """A title-only insert should get defaults for everything else."""
        db.run("INSERT INTO todos (title) VALUES (?)", ["Test Todo"])
        todo = db.get("SELECT * FROM todos WHERE id = 1")

        assert todo["completed"] == 0  # SQLite stores booleans as 0/1
        assert todo["created_at"] is not None
        assert todo["description"] is None

    def test_initialize_is_idempotent(self, db) -> None:
        """Running the schema twice should keep existing rows."""
        db.run("INSERT INTO todos (title) VALUES (?)", ["Keep me"])

        initialize_schema(db)

        assert len(db.all("SELECT * FROM todos")) == 1

    def test_blank_title_rejected_by_constraint(self, db) -> None:
        """The CHECK constraint should refuse whitespace-only titles."""
        with pytest.raises(DatabaseError, match="Database operation failed"):
            db.run("INSERT INTO todos (title) VALUES (?)", ["   "])

    def test_initialize_on_closed_database(self) -> None:
        """Schema failures should be reported with a schema-specific prefix."""
        db = create_connection(MEMORY_DB)
        db.close()

        with pytest.raises(DatabaseError, match="Failed to initialize database schema"):
            initialize_schema(db)


class TestPrimitives:
    """Tests for all(), get() and run()."""

    def test_basic_operations(self, db) -> None:
        """Insert, fetch one, and fetch all should round-trip."""
        result = db.run(
            "INSERT INTO todos (title, description) VALUES (?, ?)", ["Test", "Description"]
        )
        assert isinstance(result, RunResult)
        assert result.last_id > 0
        assert result.changes == 1

        todo = db.get("SELECT * FROM todos WHERE id = ?", [result.last_id])
        assert todo["title"] == "Test"

        assert len(db.all("SELECT * FROM todos")) == 1

    def test_get_missing_row_returns_none(self, db) -> None:
        assert db.get("SELECT * FROM todos WHERE id = ?", [42]) is None

    def test_delete_reports_change_count(self, db) -> None:
        db.run("INSERT INTO todos (title) VALUES (?)", ["A"])
        db.run("INSERT INTO todos (title) VALUES (?)", ["B"])

        assert db.run("DELETE FROM todos").changes == 2
        assert db.run("DELETE FROM todos").changes == 0

    def test_query_on_closed_database(self, db) -> None:
        """Reads on a closed connection should raise DatabaseError."""
        db.close()

        with pytest.raises(DatabaseError, match="Database query failed"):
            db.all("SELECT * FROM todos")
        with pytest.raises(DatabaseError, match="Database query failed"):
            db.get("SELECT * FROM todos")

    def test_run_on_closed_database(self, db) -> None:
        """Writes on a closed connection should raise DatabaseError."""
        db.close()

        with pytest.raises(DatabaseError, match="Database operation failed"):
            db.run("INSERT INTO todos (title) VALUES (?)", ["x"])

    def test_parameters_are_not_interpolated(self, db) -> None:
        """SQL in a value should be stored verbatim, not executed."""
        title = "'); DROP TABLE todos; --"
        result = db.run("INSERT INTO todos (title) VALUES (?)", [title])

        assert db.get("SELECT title FROM todos WHERE id = ?", [result.last_id])["title"] == title
