# =============================================================================
# core/validation.py  -  Input Schemas for the Three Tools
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Declares what a VALID argument payload looks like for each tool, as
#   pydantic models.  Handlers call `Model.model_validate(arguments)` and
#   either get clean, normalized data back or a `ValidationError`.
#
# FASTMCP VS. THESE MODELS:
#   FastMCP only checks JSON types ("title is a string").  Length limits,
#   blank titles and positive ids are checked here, for every caller of
#   the handlers.
#
# NORMALIZATION HAPPENS HERE TOO:
#   - title is trimmed ("  Buy milk  " → "Buy milk")
#   - a blank description becomes None, never ""
#
# ERROR MESSAGES:
#   The messages are part of the tool contract.  `PydanticCustomError` lets us use our
#   exact wording instead of pydantic's "Value error, ..." prefix.
# =============================================================================

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, StrictBool, StrictStr, ValidationError, field_validator
from pydantic_core import PydanticCustomError

MAX_TITLE_LENGTH = 200
MAX_DESCRIPTION_LENGTH = 1000

# Error types raised by our own validators.  Their messages already say
# which field is wrong, so `format_errors` doesn't prefix them.
_OWN_ERROR_TYPES = frozenset({
    "title_required",
    "title_too_long",
    "title_empty",
    "description_too_long",
    "task_id_type",
    "task_id_integer",
    "task_id_positive",
})


class CreateTaskInput(BaseModel):
    """Arguments for create_task."""

    model_config = ConfigDict(extra="ignore")

    title: StrictStr
    description: Optional[StrictStr] = None

    # Length limits are checked on the raw value, before trimming.
    @field_validator("title")
    @classmethod
    def _check_title(cls, value: str) -> str:
        if len(value) < 1:
            raise PydanticCustomError("title_required", "Title is required")
        if len(value) > MAX_TITLE_LENGTH:
            raise PydanticCustomError(
                "title_too_long", f"Title too long (max {MAX_TITLE_LENGTH} characters)"
            )
        value = value.strip()
        if not value:
            raise PydanticCustomError("title_empty", "Title cannot be empty")
        return value

    @field_validator("description")
    @classmethod
    def _check_description(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        if len(value) > MAX_DESCRIPTION_LENGTH:
            raise PydanticCustomError(
                "description_too_long",
                f"Description too long (max {MAX_DESCRIPTION_LENGTH} characters)",
            )
        return value.strip() or None


class RemoveTaskInput(BaseModel):
    """Arguments for remove_task."""

    model_config = ConfigDict(extra="ignore")

    id: int

    # mode="before" so we see the raw JSON value: pydantic's own int
    # coercion would happily turn "7" or True into a task id.
    @field_validator("id", mode="before")
    @classmethod
    def _check_id(cls, value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise PydanticCustomError("task_id_type", "Task ID must be a number")
        if isinstance(value, float) and not value.is_integer():
            raise PydanticCustomError("task_id_integer", "Task ID must be an integer")
        if value <= 0:
            raise PydanticCustomError("task_id_positive", "Task ID must be positive")
        return int(value)


class TodoListInput(BaseModel):
    """Arguments for todo_list."""

    model_config = ConfigDict(extra="ignore")

    # None means "no filter": return everything.
    completed: Optional[StrictBool] = None


def format_errors(exc: ValidationError) -> str:
    """Flatten a ValidationError into one human-readable line.

    >>> format_errors(err)   # doctest: +SKIP
    'Title too long (max 200 characters), Description too long (max 1000 characters)'
    """
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        if location and error["type"] not in _OWN_ERROR_TYPES:
            messages.append(f"{location}: {error['msg']}")
        else:
            messages.append(error["msg"])
    return ", ".join(messages)
