# =============================================================================
# core/remove_task.py  -  Delete a Todo by ID
# =============================================================================
#
# LOOKUP BEFORE DELETE:
#   The row is read first so a missing id gets "Task with ID 999 not found"
#   and a successful delete can echo the title back
#   ('Task "Buy milk" (ID: 3) removed successfully').
#
# THE CHANGE-COUNT CHECK:
#   If the row existed a moment ago but the DELETE reports 0 changes,
#   something else removed it in between.  That is reported as a failure.
# =============================================================================

import logging
from typing import Any, Optional

from pydantic import ValidationError

from core.database import Database, DatabaseError
from core.models import RemoveTaskResult
from core.validation import RemoveTaskInput, format_errors

logger = logging.getLogger(__name__)


def remove_task(db: Database, arguments: Optional[dict[str, Any]]) -> RemoveTaskResult:
    """Validate `arguments` and delete the todo with the given id.

    Args:
        db: An open database with the schema initialized.
        arguments: The raw tool arguments, e.g. {"id": 3}.

    Returns:
        A RemoveTaskResult.  `success` is False for invalid ids, unknown
        ids, and storage errors.
    """
    try:
        task_id = RemoveTaskInput.model_validate(arguments or {}).id
    except ValidationError as e:
        return RemoveTaskResult(success=False, message=f"Validation error: {format_errors(e)}")

    try:
        existing = db.get("SELECT id, title FROM todos WHERE id = ?", [task_id])
        if existing is None:
            return RemoveTaskResult(success=False, message=f"Task with ID {task_id} not found")

        result = db.run("DELETE FROM todos WHERE id = ?", [task_id])
    except DatabaseError as e:
        logger.error(f"Remove task error: {e}")
        return RemoveTaskResult(success=False, message=f"Database error: {e}")

    if result.changes == 0:
        return RemoveTaskResult(success=False, message=f"Failed to remove task with ID {task_id}")

    return RemoveTaskResult(
        success=True,
        message=f'Task "{existing["title"]}" (ID: {task_id}) removed successfully',
    )
