"""Pytest fixtures for the todo-manager tests."""

import pytest

from core.database import MEMORY_DB, Database, create_connection
from core.schema import initialize_schema


@pytest.fixture
def db() -> Database:
    """An in-memory database with the todos schema already created."""
    database = create_connection(MEMORY_DB)
    initialize_schema(database)
    yield database
    database.close()


@pytest.fixture
def insert_todo(db: Database):
    """Insert a todo row directly, bypassing the create_task handler."""

    def _insert(title: str, description=None, completed: int = 0, created_at=None) -> int:
        if created_at is None:
            result = db.run(
                "INSERT INTO todos (title, description, completed) VALUES (?, ?, ?)",
                [title, description, completed],
            )
        else:
            result = db.run(
                "INSERT INTO todos (title, description, completed, created_at) VALUES (?, ?, ?, ?)",
                [title, description, completed, created_at],
            )
        return result.last_id

    return _insert
