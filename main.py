# =============================================================================
# main.py  -  Entry Point for the Todo Manager MCP Server
# =============================================================================
#
# HOW TO RUN:
#   TODO_DB_PATH=~/todos.db uv run python main.py
#
#   or, after `pip install -e .`:
#   TODO_DB_PATH=~/todos.db todo-manager
#
# WHAT HAPPENS:
#   1. Loads .env (so TODO_DB_PATH can live there instead of the shell)
#   2. Opens (or creates) the SQLite database and its schema
#   3. Builds the FastMCP server with the three todo tools
#   4. Serves MCP over stdio until the client disconnects or Ctrl+C
#   5. Closes the database
#
# CONNECTING FROM AN MCP CLIENT (e.g. Claude Desktop's config):
#
#   "todo-manager": {
#     "command": "uv",
#     "args": ["run", "python", "/path/to/main.py"],
#     "env": { "TODO_DB_PATH": "~/todos.db" }
#   }
#
# STARTUP FAILURES ARE FATAL:
#   If the database can't be opened there is nothing useful the server can
#   do, so we log the reason and exit with status 1.  The MCP client shows
#   the server as failed instead of talking to a server that errors on
#   every call.
# =============================================================================

import sys

from dotenv import load_dotenv

# Load environment variables from .env file (TODO_DB_PATH, TODO_LOG_LEVEL).
# This must happen BEFORE importing tools.mcp_server, because that module
# reads TODO_LOG_LEVEL when it configures logging.
load_dotenv()

import logging

from core.config import ConfigError, get_database_path
from core.database import Database, DatabaseError, create_connection
from core.schema import initialize_schema
from tools.mcp_server import create_server

logger = logging.getLogger(__name__)


def open_database() -> Database:
    """Open the configured database and make sure the schema exists.

    Raises:
        ConfigError: If TODO_DB_PATH is not set.
        DatabaseError: If the database can't be opened or initialized.
    """
    db_path = get_database_path()
    logger.info(f"Connecting to database: {db_path}")

    db = create_connection(db_path)
    try:
        initialize_schema(db)
    except DatabaseError:
        db.close()
        raise

    logger.info("Database initialized successfully")
    return db


def main() -> None:
    """Start the server; exit non-zero if startup fails."""
    try:
        db = open_database()
    except (ConfigError, DatabaseError) as e:
        logger.error(f"Failed to start server: {e}")
        sys.exit(1)

    try:
        server = create_server(db)
        logger.info("Todo Manager MCP Server started successfully")
        server.run()
    except KeyboardInterrupt:
        logger.info("Shutting down server...")
    except Exception:
        logger.exception("Fatal error")
        sys.exit(1)
    finally:
        db.close()
        logger.info("Database connection closed")


# =============================================================================
# Script entry point
# =============================================================================
if __name__ == "__main__":
    main()
