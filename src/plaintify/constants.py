#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the plaintify library.

Constants are organized by category:
1. Output Formatting - separators emitted by the plain text renderer
2. Markdown Parsing - parser plugin defaults
3. Dependencies - optional package requirements (the ``markdown`` extra)
4. Command Line - environment variable names and exit codes
"""

from __future__ import annotations

# =============================================================================
# Output Formatting
# =============================================================================

# Two newlines close every block-level construct
BLOCK_SEPARATOR = "\n\n"

# Prefix placed before each rendered list item
LIST_ITEM_PREFIX = "\n"

# Separator between a table header label and the cell value
TABLE_LABEL_SEPARATOR = ": "

# Separator between the label/value lines of one table row
TABLE_PAIR_SEPARATOR = "\n"

# HTML entity replacements applied to code blocks and raw HTML
HTML_ESCAPE_MAP: dict[str, str] = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
}

# =============================================================================
# Markdown Parsing
# =============================================================================

DEFAULT_PARSE_TABLES = True
DEFAULT_PARSE_STRIKETHROUGH = True
DEFAULT_PARSE_TASK_LISTS = True

# =============================================================================
# Dependencies
# =============================================================================

# (distribution_name, module_name, version_spec) of the optional Markdown tokenizer
MISTUNE_REQUIREMENT = ("mistune", "mistune", ">=3.0.0")

# =============================================================================
# Command Line
# =============================================================================

ENV_PREFIX = "PLAINTIFY_"
DEFAULT_LOG_LEVEL = "WARNING"

EXIT_SUCCESS = 0
EXIT_ERROR = 1
