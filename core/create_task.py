# =============================================================================
# core/create_task.py  -  Create a Todo
# =============================================================================
#
# THE PIPELINE (same shape for all three handlers):
#   1. VALIDATE   CreateTaskInput trims the title, checks lengths,
#                   turns a blank description into None
#   2. EXECUTE    one INSERT
#   3. MAP        lastrowid → {success: True, taskId: ...}
#
#   Anything that goes wrong in 1 or 2 becomes {success: False, message}.
#   Nothing is raised to the caller.
#
# IDEMPOTENCY WARNING:
#   Unlike the read-only tools, this one is NOT idempotent.  Calling it
#   twice with the same title creates two todos.
# =============================================================================

import logging
from typing import Any, Optional

from pydantic import ValidationError

from core.database import Database, DatabaseError
from core.models import CreateTaskResult
from core.validation import CreateTaskInput, format_errors

logger = logging.getLogger(__name__)


def create_task(db: Database, arguments: Optional[dict[str, Any]]) -> CreateTaskResult:
    """Validate `arguments` and insert a new todo.

    Args:
        db: An open database with the schema initialized.
        arguments: The raw tool arguments, e.g. {"title": "Buy milk"}.

    Returns:
        A CreateTaskResult.  On success, `task_id` holds the new row id.
    """
    try:
        task = CreateTaskInput.model_validate(arguments or {})
    except ValidationError as e:
        return CreateTaskResult(success=False, message=f"Validation error: {format_errors(e)}")

    try:
        result = db.run(
            "INSERT INTO todos (title, description) VALUES (?, ?)",
            [task.title, task.description],
        )
    except DatabaseError as e:
        logger.error(f"Create task error: {e}")
        return CreateTaskResult(success=False, message=f"Database error: {e}")

    return CreateTaskResult(
        success=True,
        task_id=result.last_id,
        message=f"Task created successfully with ID {result.last_id}",
    )
