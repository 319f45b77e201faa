#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/plaintify/ast/__init__.py
"""Node tree representation for parsed Markdown documents.

- nodes: the ``Node`` record and the closed ``NodeKind`` enumeration
- builder: factory helpers for constructing trees by hand

Examples
--------
    >>> from plaintify.ast import heading, paragraph, strong
    >>> from plaintify.renderers.plaintext import PlainTextRenderer
    >>> PlainTextRenderer().render_to_string([heading("Title"), paragraph("Hello ", strong("world"))])
    'Title\\n\\nHello world\\n\\n'

"""

from __future__ import annotations

from plaintify.ast.builder import (
    NodeLike,
    blockquote,
    checkbox,
    code_block,
    code_span,
    emphasis,
    heading,
    horizontal_rule,
    image,
    line_break,
    link,
    list_,
    list_item,
    paragraph,
    raw_html,
    space,
    strikethrough,
    strong,
    table,
    table_cell,
    table_row,
    text,
)
from plaintify.ast.nodes import INLINE_KINDS, Node, NodeKind, coerce_kind, get_node_children, iter_nodes

__all__ = [
    "INLINE_KINDS",
    "Node",
    "NodeKind",
    "NodeLike",
    "coerce_kind",
    "get_node_children",
    "iter_nodes",
    "blockquote",
    "checkbox",
    "code_block",
    "code_span",
    "emphasis",
    "heading",
    "horizontal_rule",
    "image",
    "line_break",
    "link",
    "list_",
    "list_item",
    "paragraph",
    "raw_html",
    "space",
    "strikethrough",
    "strong",
    "table",
    "table_cell",
    "table_row",
    "text",
]
