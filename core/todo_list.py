# =============================================================================
# core/todo_list.py  -  List Todos, Optionally Filtered by Completion
# =============================================================================
#
# READ-ONLY:
#   This handler never writes.  Calling it 100 times returns the same
#   result (until someone creates or removes a todo), so the agent can
#   retry it freely.
#
# THE FILTER:
#   completed=None   → every todo
#   completed=True   → only finished todos
#   completed=False  → only open ("active") todos
#
#   The WHERE clause is only added when a filter is given.  SQLite stores
#   booleans as 0/1, so we bind 1 or 0, not True/False.
#
# ORDERING:
#   Newest first.  created_at has one-second resolution, so two todos
#   created in the same second tie.  `id DESC` breaks the tie, newest
#   insert first.
# =============================================================================

import logging
from typing import Any, Optional

from pydantic import ValidationError

from core.database import Database, DatabaseError
from core.models import Todo, TodoListResult
from core.validation import TodoListInput, format_errors

logger = logging.getLogger(__name__)


def todo_list(db: Database, arguments: Optional[dict[str, Any]]) -> TodoListResult:
    """Return todos newest-first, optionally filtered by `completed`.

    Args:
        db: An open database with the schema initialized.
        arguments: The raw tool arguments, e.g. {} or {"completed": False}.

    Returns:
        A TodoListResult whose todos have `completed` as a real bool.
    """
    try:
        completed = TodoListInput.model_validate(arguments or {}).completed
    except ValidationError as e:
        return TodoListResult(success=False, message=f"Invalid completed filter: {format_errors(e)}")

    query = "SELECT * FROM todos"
    params: list[Any] = []
    if completed is not None:
        query += " WHERE completed = ?"
        params.append(1 if completed else 0)
    query += " ORDER BY created_at DESC, id DESC"

    try:
        rows = db.all(query, params)
    except DatabaseError as e:
        logger.error(f"List todos error: {e}")
        return TodoListResult(success=False, message=f"Database error: {e}")

    todos = [Todo.from_row(row) for row in rows]
    return TodoListResult(success=True, todos=todos, message=_summarize(len(todos), completed))


def _summarize(count: int, completed: Optional[bool]) -> str:
    """Build the human-readable message, e.g. "Found 2 active todos"."""
    if count == 0:
        return "No todos found"

    noun = "todo" if count == 1 else "todos"
    if completed is True:
        return f"Found {count} completed {noun}"
    if completed is False:
        return f"Found {count} active {noun}"
    return f"Found {count} {noun}"
