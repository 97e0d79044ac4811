# =============================================================================
# core/config.py  -  Runtime Configuration
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Reads the handful of settings the server needs from the environment.
#
# WHERE DO THE VALUES COME FROM?
#   main.py calls `load_dotenv()` before anything else, so a `.env` file in
#   the working directory works just as well as real environment variables.
#   An MCP host (Claude Desktop, an ADK agent, ...) usually sets them in its
#   server configuration block instead:
#
#     "env": { "TODO_DB_PATH": "~/todos.db" }
#
# TODO_DB_PATH IS REQUIRED:
#   There is no fallback location.
#
# READ AT CALL TIME:
#   The getters read the environment when called, not at import time.
# =============================================================================

import logging
import os

SERVER_NAME = "todo-manager"
SERVER_VERSION = "1.0.0"

DEFAULT_LOG_LEVEL = "INFO"


class ConfigError(Exception):
    """Raised when a required setting is missing or malformed."""


def expand_tilde(file_path: str) -> str:
    """Expand a leading `~/` to the user's home directory."""
    if file_path.startswith("~/"):
        return os.path.join(os.path.expanduser("~"), file_path[2:])
    return file_path


def get_database_path() -> str:
    """Return the SQLite database path from TODO_DB_PATH.

    Raises:
        ConfigError: If TODO_DB_PATH is unset or empty.
    """
    env_path = os.getenv("TODO_DB_PATH", "")
    if not env_path:
        raise ConfigError(
            "TODO_DB_PATH environment variable is required. "
            "Please set it in your MCP client configuration."
        )
    return expand_tilde(env_path)


def get_log_level() -> str:
    """Return the log level name from TODO_LOG_LEVEL (default INFO).

    An unknown name such as "VERBOSE" also falls back to INFO.
    """
    level = os.getenv("TODO_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    if level not in logging.getLevelNamesMapping():
        return DEFAULT_LOG_LEVEL
    return level
