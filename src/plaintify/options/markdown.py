#  Copyright (c) 2025 Tom Villani, Ph.D.
# plaintify/options/markdown.py
"""Configuration options for Markdown parsing.

This module defines which mistune plugins the Markdown adapter enables.
"""

from dataclasses import dataclass, field

from plaintify.constants import DEFAULT_PARSE_STRIKETHROUGH, DEFAULT_PARSE_TABLES, DEFAULT_PARSE_TASK_LISTS
from plaintify.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-node parsing.

    Parameters
    ----------
    parse_tables : bool, default True
        Recognize GFM pipe tables.
    parse_strikethrough : bool, default True
        Recognize ``~~strikethrough~~`` spans.
    parse_task_lists : bool, default True
        Recognize ``- [ ]`` / ``- [x]`` task list items.

    """

    parse_tables: bool = field(
        default=DEFAULT_PARSE_TABLES,
        metadata={"help": "Parse GFM tables", "cli_name": "no-tables", "importance": "core"},
    )
    parse_strikethrough: bool = field(
        default=DEFAULT_PARSE_STRIKETHROUGH,
        metadata={"help": "Parse ~~strikethrough~~", "cli_name": "no-strikethrough", "importance": "core"},
    )
    parse_task_lists: bool = field(
        default=DEFAULT_PARSE_TASK_LISTS,
        metadata={"help": "Parse task list checkboxes", "cli_name": "no-task-lists", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate options by calling parent validation."""
        super().__post_init__()
