#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/plaintify/ast/builder.py
"""Helper functions for constructing node trees.

These factories mirror the shapes the Markdown parser adapter produces and
keep hand-built trees short. Wherever a node is expected a plain string may
be passed instead; it becomes a ``text`` node.

Examples
--------
    >>> from plaintify.ast.builder import heading, list_, list_item, paragraph, strong
    >>> tree = [
    ...     heading("Title"),
    ...     paragraph("Hello ", strong("world")),
    ...     list_(list_item("one"), list_item("two")),
    ... ]

"""

from __future__ import annotations

from typing import Optional, Sequence, Union

from plaintify.ast.nodes import Node, NodeKind

NodeLike = Union[Node, str]


def _as_node(value: NodeLike) -> Node:
    if isinstance(value, Node):
        return value
    return text(value)


def _as_nodes(values: Sequence[NodeLike]) -> tuple[Node, ...]:
    return tuple(_as_node(value) for value in values)


def text(content: str) -> Node:
    return Node(NodeKind.TEXT, raw_text=content)


def strong(*content: NodeLike) -> Node:
    return Node(NodeKind.STRONG, children=_as_nodes(content))


def emphasis(*content: NodeLike) -> Node:
    return Node(NodeKind.EMPHASIS, children=_as_nodes(content))


def strikethrough(*content: NodeLike) -> Node:
    return Node(NodeKind.STRIKETHROUGH, children=_as_nodes(content))


def code_span(code: str) -> Node:
    return Node(NodeKind.CODE_SPAN, raw_text=code)


def heading(*content: NodeLike, level: int = 1) -> Node:
    return Node(NodeKind.HEADING, children=_as_nodes(content), level=level)


def paragraph(*content: NodeLike) -> Node:
    return Node(NodeKind.PARAGRAPH, children=_as_nodes(content))


def link(*content: NodeLike, href: str, title: Optional[str] = None) -> Node:
    """Create a link whose visible label is ``content``."""
    return Node(NodeKind.LINK, children=_as_nodes(content), href=href, title=title)


def image(alt: str, href: str, title: Optional[str] = None) -> Node:
    """Create an image; ``alt`` is stored as the node's raw text."""
    return Node(NodeKind.IMAGE, raw_text=alt, href=href, title=title)


def code_block(code: str, language: Optional[str] = None) -> Node:
    return Node(NodeKind.CODE_BLOCK, raw_text=code, language=language)


def raw_html(markup: str) -> Node:
    return Node(NodeKind.RAW_HTML, raw_text=markup)


def blockquote(*children: NodeLike) -> Node:
    return Node(NodeKind.BLOCKQUOTE, children=_as_nodes(children))


def list_item(*children: NodeLike) -> Node:
    return Node(NodeKind.LIST_ITEM, children=_as_nodes(children))


def list_(*items: NodeLike, ordered: bool = False) -> Node:
    """Create a list from ``list_item`` nodes (strings become single-text items)."""
    return Node(
        NodeKind.LIST,
        items=tuple(item if isinstance(item, Node) else list_item(item) for item in items),
        ordered=ordered,
    )


def table_cell(*content: NodeLike, header: bool = False) -> Node:
    return Node(NodeKind.TABLE_CELL, children=_as_nodes(content), is_header_cell=header)


def table_row(*cells: NodeLike) -> Node:
    """Create a body row; strings become non-header cells."""
    return Node(
        NodeKind.TABLE_ROW,
        children=tuple(cell if isinstance(cell, Node) else table_cell(cell) for cell in cells),
    )


def table(header: Sequence[NodeLike], rows: Sequence[Union[Node, Sequence[NodeLike]]]) -> Node:
    """Create a table.

    Parameters
    ----------
    header : sequence of Node or str
        Header cells; strings become header cells
    rows : sequence
        Body rows, each a ``table_row`` node or a sequence of cells/strings

    """
    header_cells = tuple(cell if isinstance(cell, Node) else table_cell(cell, header=True) for cell in header)
    body = tuple(row if isinstance(row, Node) else table_row(*row) for row in rows)
    return Node(NodeKind.TABLE, header=header_cells, rows=body)


def horizontal_rule() -> Node:
    return Node(NodeKind.HORIZONTAL_RULE, raw_text="---")


def line_break() -> Node:
    return Node(NodeKind.LINE_BREAK, raw_text="\n")


def space() -> Node:
    return Node(NodeKind.SPACE, raw_text="\n")


def checkbox(checked: bool = False) -> Node:
    return Node(NodeKind.CHECKBOX, raw_text="[x]" if checked else "[ ]")


__all__ = [
    "NodeLike",
    "text",
    "strong",
    "emphasis",
    "strikethrough",
    "code_span",
    "heading",
    "paragraph",
    "link",
    "image",
    "code_block",
    "raw_html",
    "blockquote",
    "list_item",
    "list_",
    "table_cell",
    "table_row",
    "table",
    "horizontal_rule",
    "line_break",
    "space",
    "checkbox",
]
