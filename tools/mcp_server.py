# =============================================================================
# tools/mcp_server.py  -  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds the MCP server and registers the three todo tools.  Each tool is
#   a thin wrapper around a core/ handler that adds logging and
#   serialization.
#
# HOW IT WORKS (the flow):
#   1. An MCP client (Claude Desktop, an ADK agent, ...) calls a tool by
#      name, e.g. "create_task" with {"title": "Buy milk"}
#   2. FastMCP finds the TodoTool with that name and hands it the arguments
#      exactly as the client sent them
#   3. The TodoTool passes them to the core/ handler, which validates them,
#      runs one SQL statement, and returns a result envelope
#   4. The envelope goes back as JSON text (and as structured content)
#
# RAW ARGUMENTS:
#   The input schemas below are ADVERTISED to the client but not enforced
#   by FastMCP.  A missing title or an id of "abc" reaches the handler,
#   which answers with {"success": false, "message": "Validation error: ..."}
#   like any other bad input.
#
# TOOL NAMING CONVENTIONS:
#   - create_* → Writes a new record (NOT idempotent: two calls, two todos)
#   - remove_* → Deletes a record (destructive, can't be undone)
#   - *_list   → Read-only retrieval (idempotent, safe to retry)
#
# THE ENVELOPE CONTRACT:
#   Handlers never raise.  Bad input and database errors both come back as
#   {"success": false, "message": "..."}, a NORMAL result the LLM can read.
#   Only an exception escaping a handler is flagged as an MCP error
#   (isError: true), and even then the text is a JSON envelope.
#
# RUNNING THIS SERVER:
#   main.py opens the database and calls create_server(db).run(), which
#   speaks MCP over stdio:
#       TODO_DB_PATH=~/todos.db python main.py
# =============================================================================

import json
import logging
import sys
from typing import Any, Callable

from fastmcp import FastMCP
from fastmcp.tools import Tool, ToolResult

# --- Import core logic ---
# Notice: we import from core/, and core/ never imports from here.
# The tools layer depends on core/ and nothing else.
from core.config import SERVER_NAME, SERVER_VERSION, get_log_level
from core.create_task import create_task
from core.database import Database
from core.remove_task import remove_task
from core.todo_list import todo_list
from core.validation import MAX_DESCRIPTION_LENGTH, MAX_TITLE_LENGTH
from tools.tool_docs import load_tool_description

# =============================================================================
# Logging Setup
# =============================================================================
# Logs go to STDERR: STDOUT is the MCP stdio transport, and a stray log
# line there would corrupt the JSON-RPC stream.
#
# Each tool call produces up to three lines:
#     CYAN    the call and its raw arguments
#     YELLOW  why the call failed, when it did
#     GREEN   the envelope sent back
# =============================================================================

_CALL_COLOR = "\033[36m"
_FAILURE_COLOR = "\033[33m"
_ENVELOPE_COLOR = "\033[32m"
_RESET = "\033[0m"

logging.basicConfig(
    level=get_log_level(),
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


def _log_call(tool_name: str, arguments: dict[str, Any]) -> None:
    """Log a tool call with the arguments the client sent."""
    logger.info(f"{_CALL_COLOR}{tool_name}({json.dumps(arguments, default=str)}){_RESET}")


def _log_failure(tool_name: str, message: str) -> None:
    """Log the message of a {success: false} envelope."""
    logger.info(f"{_FAILURE_COLOR}  → {tool_name} failed: {message}{_RESET}")


def _log_envelope(tool_name: str, envelope: dict[str, Any]) -> None:
    """Log the envelope as compact JSON."""
    logger.info(f"{_ENVELOPE_COLOR}  ← {tool_name}: {json.dumps(envelope, separators=(',', ':'))}{_RESET}")


# =============================================================================
# Tool registry
# =============================================================================
# Tool name → core/ handler.  Every handler has the same signature:
#     handler(db, arguments) -> result with .success, .message, .to_dict()
# =============================================================================
Handler = Callable[[Database, dict[str, Any]], Any]

HANDLERS: dict[str, Handler] = {
    "create_task": create_task,
    "remove_task": remove_task,
    "todo_list": todo_list,
}

# Input schemas advertised in tools/list.  Length and range hints mirror
# core/validation.py, which is where they are enforced.
INPUT_SCHEMAS: dict[str, dict[str, Any]] = {
    "create_task": {
        "type": "object",
        "properties": {
            "title": {
                "type": "string",
                "description": f"The title of the task (1-{MAX_TITLE_LENGTH} characters)",
                "minLength": 1,
                "maxLength": MAX_TITLE_LENGTH,
            },
            "description": {
                "type": "string",
                "description": f"Optional description of the task (max {MAX_DESCRIPTION_LENGTH} characters)",
                "maxLength": MAX_DESCRIPTION_LENGTH,
            },
        },
        "required": ["title"],
    },
    "remove_task": {
        "type": "object",
        "properties": {
            "id": {
                "type": "integer",
                "description": "The ID of the task to remove",
                "minimum": 1,
            },
        },
        "required": ["id"],
    },
    # `completed` is tri-state: true, false, or omitted (= all).
    "todo_list": {
        "type": "object",
        "properties": {
            "completed": {
                "type": "boolean",
                "description": "Filter by completion status: true for completed, false for active, omit for all",
            },
        },
    },
}


def _envelope_result(envelope: dict[str, Any], is_error: bool = False) -> ToolResult:
    """Wrap an envelope as pretty-printed JSON text plus structured content."""
    return ToolResult(
        content=json.dumps(envelope, indent=2),
        structured_content=envelope,
        is_error=is_error,
    )


class TodoTool(Tool):
    """An MCP tool that forwards its raw arguments to a core/ handler.

    The handler is looked up in HANDLERS by tool name on every call.
    """

    def __init__(self, db: Database, **kwargs: Any):
        super().__init__(**kwargs)
        self._db = db

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        _log_call(self.name, arguments)
        try:
            result = HANDLERS[self.name](self._db, arguments)
        except Exception as e:
            logger.exception(f"Tool execution error for {self.name}")
            envelope = {"success": False, "message": f"Tool execution failed: {e}"}
            _log_failure(self.name, envelope["message"])
            return _envelope_result(envelope, is_error=True)

        envelope = result.to_dict()
        if not result.success:
            _log_failure(self.name, result.message)
        _log_envelope(self.name, envelope)
        return _envelope_result(envelope)


# =============================================================================
# Server factory
# =============================================================================
# The tools close over a database handle, which only exists after main.py
# has read TODO_DB_PATH.  Tests build a server around an in-memory database.
# =============================================================================
def create_server(db: Database) -> FastMCP:
    """Create the todo-manager MCP server with all three tools registered.

    Args:
        db: An open database with the schema initialized.  The server keeps
            using it for its whole lifetime; closing it is the caller's job.

    Returns:
        A FastMCP server, ready for `.run()`.
    """
    mcp = FastMCP(SERVER_NAME, version=SERVER_VERSION)

    for name, schema in INPUT_SCHEMAS.items():
        mcp.add_tool(TodoTool(
            db,
            name=name,
            description=load_tool_description(name),
            parameters=schema,
        ))

    return mcp
