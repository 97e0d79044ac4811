# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP server and its tool wrappers.
#
# ARCHITECTURAL ROLE:
#   tools/ is the "translation layer" between the MCP protocol and the
#   core handlers.  For each tool it:
#     1. Declares the input schema the client sees in tools/list
#     2. Loads the LLM-facing description from tools/descriptions/*.md
#     3. Calls the matching core/ handler
#     4. Converts the handler's result envelope into a JSON-ready dict
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT validate field rules (that's core/validation.py)
#   - They do NOT touch SQL (that's core/database.py)
#
# TOOL CONTRACT QUALITY:
#   Each tool has a clear name, a description the LLM reads to decide WHEN
#   to call it, typed parameters so it knows WHAT to pass, and a documented
#   result so it knows what it'll GET back.
# =============================================================================
