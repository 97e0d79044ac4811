# =============================================================================
# core/models.py  -  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the *shape* of every piece of information that
# flows out of the handlers.  The tools/ layer turns them into JSON
# with `to_dict()`.
#
# TWO KINDS OF MODEL LIVE HERE:
#   - Todo: the single entity stored in the database (one row of `todos`)
#   - *Result: the response ENVELOPE each handler returns
#
# THE ENVELOPE CONTRACT:
#   Every handler returns {success, message, ...}, also when validation
#   fails or the database raises.  The transport layer never sees an
#   exception from a handler, only a well-formed envelope.
#
# WIRE FORMAT:
#   `to_dict()` emits camelCase ("taskId") and omits fields that don't
#   apply (a failed create has no taskId).
# =============================================================================

from dataclasses import asdict, dataclass, field
from typing import Any, Optional


# -----------------------------------------------------------------------------
# Todo: one task record
# -----------------------------------------------------------------------------
# `id` and `created_at` are assigned by the database at insert time and are
# never changed afterwards.  `completed` is never mutated by any exposed
# tool (there is no update operation).
# -----------------------------------------------------------------------------
@dataclass
class Todo:
    """A single todo item as stored in the `todos` table."""

    id: int                            # Auto-assigned primary key
    title: str                         # Trimmed, 1–200 characters
    description: Optional[str]         # None when absent (never "")
    completed: bool                    # Real bool, not SQLite's 0/1
    created_at: str                    # "2024-01-01 10:00:00" (local time)

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Todo":
        """Build a Todo from a database row.

        SQLite has no native boolean type, so `completed` comes back as 0 or 1.
        """
        return cls(
            id=row["id"],
            title=row["title"],
            description=row["description"],
            completed=bool(row["completed"]),
            created_at=row["created_at"],
        )


# -----------------------------------------------------------------------------
# CreateTaskResult: output of create_task
# -----------------------------------------------------------------------------
@dataclass
class CreateTaskResult:
    """Outcome of a create_task call."""

    success: bool
    message: str
    task_id: Optional[int] = None      # Only set on success

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"success": self.success}
        if self.task_id is not None:
            result["taskId"] = self.task_id
        result["message"] = self.message
        return result


# -----------------------------------------------------------------------------
# RemoveTaskResult: output of remove_task
# -----------------------------------------------------------------------------
@dataclass
class RemoveTaskResult:
    """Outcome of a remove_task call."""

    success: bool
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {"success": self.success, "message": self.message}


# -----------------------------------------------------------------------------
# TodoListResult: output of todo_list
# -----------------------------------------------------------------------------
# On failure, `todos` and `count` are omitted entirely (not [] and 0) so a
# client can't mistake "the query failed" for "there are no todos".
# -----------------------------------------------------------------------------
@dataclass
class TodoListResult:
    """Outcome of a todo_list call."""

    success: bool
    message: str
    todos: Optional[list[Todo]] = field(default=None)

    @property
    def count(self) -> Optional[int]:
        return len(self.todos) if self.todos is not None else None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"success": self.success}
        if self.todos is not None:
            result["todos"] = [asdict(todo) for todo in self.todos]
            result["count"] = self.count
        result["message"] = self.message
        return result
