# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL the todo logic: validation, persistence, and the
# result envelopes the tools hand back.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or any other protocol framework.
#   Every handler is a plain function `handler(db, arguments) -> Result`
#   that you can call from a bare Python REPL against an in-memory database.
#
# The MCP server is just the wiring; the core is the engine.
# =============================================================================
