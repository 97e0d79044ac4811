# =============================================================================
# tools/tool_docs.py  -  Tool Descriptions Loaded from Markdown
# =============================================================================
#
# WHERE DESCRIPTIONS LIVE:
#   Each tool's LLM-facing description is kept in
#   tools/descriptions/<name>.md, next to its parameter and return notes.
#
# FILE FORMAT:
#   Only the "## Description" section is sent to the client.  Everything
#   after the next "##" heading (Parameters, Returns, ...) is documentation
#   for humans.
#
#     # create_task
#
#     ## Description
#
#     Create a new todo item. ...      ← this part is the tool description
#
#     ## Parameters
#     ...
# =============================================================================

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DESCRIPTIONS_DIR = Path(__file__).parent / "descriptions"

_SECTION_HEADING = "## Description"


def _doc_path(tool_name: str) -> Path:
    return DESCRIPTIONS_DIR / f"{tool_name}.md"


def load_tool_description(tool_name: str) -> str:
    """Return the "## Description" section of `<tool_name>.md`.

    A missing file or section is not fatal: the server still starts, it
    just advertises a placeholder description (and logs a warning so the
    problem gets noticed).
    """
    try:
        content = _doc_path(tool_name).read_text(encoding="utf-8")
    except OSError as e:
        logger.warning(f"Could not load description for tool {tool_name}: {e}")
        return f"{tool_name} tool - description not available"

    lines = content.split("\n")
    try:
        start = next(i for i, line in enumerate(lines) if line.strip() == _SECTION_HEADING)
    except StopIteration:
        logger.warning(
            f"Could not load description for tool {tool_name}: "
            f"No {_SECTION_HEADING} section found in {tool_name}.md"
        )
        return f"{tool_name} tool - description not available"

    end = next(
        (i for i in range(start + 1, len(lines)) if lines[i].startswith("##")),
        len(lines),
    )
    return "\n".join(lines[start + 1:end]).strip()


def load_full_tool_doc(tool_name: str) -> str:
    """Return the whole markdown file, for debugging or reference."""
    try:
        return _doc_path(tool_name).read_text(encoding="utf-8")
    except OSError:
        return f"Documentation for {tool_name} not found"
