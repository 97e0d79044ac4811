# =============================================================================
# core/database.py  -  Persistence Wrapper (the only module that talks SQL)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Wraps a `sqlite3.Connection` behind three primitives:
#
#     all(sql, params)  → list of row dicts       ("query-many")
#     get(sql, params)  → one row dict, or None   ("query-one")
#     run(sql, params)  → RunResult(last_id, changes)   ("execute")
#
#   Handlers never touch `sqlite3` directly.  They pass a parameterized
#   statement and a positional parameter list, and get plain Python data
#   back.
#
# ERROR TRANSLATION:
#   Every `sqlite3.Error` is re-raised as `DatabaseError` with a readable
#   prefix ("Database query failed: ...").  Handlers catch exactly one
#   exception type and turn it into a {success: False} envelope.
#
# ALWAYS PARAMETERIZE:
#   Values go in `params`, never into the SQL string.  The `?` placeholders
#   let SQLite do the quoting, which is what keeps a title like
#   `'); DROP TABLE todos; --` a harmless (if odd) todo.
# =============================================================================

import logging
import os
import sqlite3
from dataclasses import dataclass
from typing import Any, Optional, Sequence

logger = logging.getLogger(__name__)

MEMORY_DB = ":memory:"


class DatabaseError(Exception):
    """Raised for any connection, IO, or engine failure."""


@dataclass(frozen=True)
class RunResult:
    """What an INSERT/UPDATE/DELETE reports back."""

    last_id: int        # Row id of the last inserted row (0 if none)
    changes: int        # Number of rows the statement modified


class Database:
    """Thin wrapper around a SQLite connection."""

    def __init__(self, conn: sqlite3.Connection):
        self._conn = conn
        # Rows come back as sqlite3.Row so we can key them by column name.
        self._conn.row_factory = sqlite3.Row

    def all(self, sql: str, params: Sequence[Any] = ()) -> list[dict[str, Any]]:
        """Execute a query and return every row."""
        try:
            rows = self._conn.execute(sql, tuple(params)).fetchall()
        except sqlite3.Error as e:
            raise DatabaseError(f"Database query failed: {e}") from e
        return [dict(row) for row in rows]

    def get(self, sql: str, params: Sequence[Any] = ()) -> Optional[dict[str, Any]]:
        """Execute a query and return the first row, or None."""
        try:
            row = self._conn.execute(sql, tuple(params)).fetchone()
        except sqlite3.Error as e:
            raise DatabaseError(f"Database query failed: {e}") from e
        return dict(row) if row is not None else None

    def run(self, sql: str, params: Sequence[Any] = ()) -> RunResult:
        """Execute a statement that doesn't return rows, and commit it."""
        try:
            cursor = self._conn.execute(sql, tuple(params))
            self._conn.commit()
        except sqlite3.Error as e:
            raise DatabaseError(f"Database operation failed: {e}") from e
        return RunResult(last_id=cursor.lastrowid or 0, changes=max(cursor.rowcount, 0))

    def close(self) -> None:
        """Close the underlying connection."""
        try:
            self._conn.close()
        except sqlite3.Error as e:
            raise DatabaseError(f"Failed to close database: {e}") from e


def create_connection(db_path: str) -> Database:
    """Open (creating if needed) the SQLite database at `db_path`.

    The parent directory is created first, so `TODO_DB_PATH=~/data/todos.db`
    works on a fresh machine.  `:memory:` skips that step.

    `check_same_thread=False` because the connection is opened before the
    server's event loop starts, and the loop may run on another thread.
    Tool calls still run one at a time on that loop.

    Raises:
        DatabaseError: If the directory can't be created or SQLite refuses
            to open the file.
    """
    if db_path != MEMORY_DB:
        directory = os.path.dirname(db_path)
        if directory:
            try:
                os.makedirs(directory, exist_ok=True)
            except OSError as e:
                raise DatabaseError(f"Failed to create database directory: {e}") from e

    try:
        conn = sqlite3.connect(db_path, check_same_thread=False)
    except sqlite3.Error as e:
        raise DatabaseError(f"Failed to connect to database: {e}") from e

    logger.info(f"Connected to database: {db_path}")
    return Database(conn)
