# =============================================================================
# core/schema.py  -  Database Schema
# =============================================================================
#
# One table, two indexes.  Everything uses IF NOT EXISTS, so this runs on
# every startup: a fresh database gets created, an existing one is left
# alone.
#
# NOTES ON THE COLUMNS:
#   - title has a CHECK constraint as a second line of defense.  The
#     create_task handler already rejects blank titles, but the database
#     refuses them too, in case someone inserts rows by hand.
#   - completed is declared BOOLEAN, but SQLite stores it as 0/1.
#     Todo.from_row() converts it back to a real bool.
#   - created_at defaults to LOCAL time, so a todo created at 9am shows
#     "09:00", not the UTC offset.
# =============================================================================

from core.database import Database, DatabaseError

SCHEMA_STATEMENTS = (
    """
    CREATE TABLE IF NOT EXISTS todos (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        title TEXT NOT NULL CHECK(length(trim(title)) > 0),
        description TEXT,
        completed BOOLEAN DEFAULT FALSE,
        created_at DATETIME DEFAULT (datetime('now', 'localtime'))
    )
    """,
    "CREATE INDEX IF NOT EXISTS idx_todos_completed ON todos(completed)",
    "CREATE INDEX IF NOT EXISTS idx_todos_created_at ON todos(created_at)",
)


def initialize_schema(db: Database) -> None:
    """Create the todos table and its indexes if they don't exist yet.

    Raises:
        DatabaseError: If any statement fails.
    """
    try:
        for statement in SCHEMA_STATEMENTS:
            db.run(statement)
    except DatabaseError as e:
        raise DatabaseError(f"Failed to initialize database schema: {e}") from e
