#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/plaintify/ast/nodes.py
"""Node model for parsed Markdown documents.

This module defines the node representation consumed by the plain text
renderer. A node is a tagged record: its ``kind`` says which Markdown
construct it stands for, ``raw_text`` carries literal content and
``children`` holds nested nodes in document order. A handful of kind-specific
fields carry the extra shape some constructs need.

Node Kinds
----------
Inline kinds (``INLINE_KINDS``, rendered without a block separator):
    - text, strong, emphasis, code_span, strikethrough

All other kinds render as blocks, including those that appear inside
running text:
    - heading, paragraph, code_block, blockquote, raw_html
    - list, list_item, table, table_row, table_cell
    - horizontal_rule, space, line_break, checkbox
    - link, image (their trailing separator is dropped inside inline content)

Anything else is ``generic``.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence, Union


class NodeKind(str, Enum):
    """Closed set of node kinds a Markdown grammar can produce."""

    SPACE = "space"
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    TEXT = "text"
    STRONG = "strong"
    EMPHASIS = "emphasis"
    CODE_SPAN = "code_span"
    STRIKETHROUGH = "strikethrough"
    CODE_BLOCK = "code_block"
    LINK = "link"
    IMAGE = "image"
    LIST = "list"
    LIST_ITEM = "list_item"
    BLOCKQUOTE = "blockquote"
    TABLE = "table"
    TABLE_ROW = "table_row"
    TABLE_CELL = "table_cell"
    HORIZONTAL_RULE = "horizontal_rule"
    LINE_BREAK = "line_break"
    RAW_HTML = "raw_html"
    CHECKBOX = "checkbox"
    GENERIC = "generic"

    def __str__(self) -> str:
        return self.value


#: Kinds rendered without a trailing block separator.
INLINE_KINDS: frozenset[NodeKind] = frozenset(
    {
        NodeKind.TEXT,
        NodeKind.STRONG,
        NodeKind.EMPHASIS,
        NodeKind.CODE_SPAN,
        NodeKind.STRIKETHROUGH,
    }
)


def coerce_kind(kind: Union[NodeKind, str]) -> Union[NodeKind, str]:
    """Return the ``NodeKind`` member for ``kind``, or ``kind`` itself if unknown.

    Unknown kind names are kept as plain strings so that the renderer can
    fall back to its default handler for them.
    """
    if isinstance(kind, NodeKind):
        return kind
    try:
        return NodeKind(kind)
    except ValueError:
        return kind


@dataclass(frozen=True)
class Node:
    """A single node of a parsed Markdown tree.

    Nodes are immutable. Sequences passed for ``children``, ``items``,
    ``header`` and ``rows`` are frozen into tuples on construction.

    Parameters
    ----------
    kind : NodeKind or str
        Which Markdown construct this node represents
    raw_text : str, default = ""
        Literal text of the node (text content, code, HTML, image alt text)
    children : sequence of Node, default = ()
        Nested nodes in document order
    is_header_cell : bool, default = False
        For table cells: whether the cell belongs to the header row
    href : str or None, default = None
        For links and images: the target URL
    title : str or None, default = None
        For links and images: the optional title
    ordered : bool, default = False
        For lists: whether the list is numbered
    items : sequence of Node or None, default = None
        For lists: the list item nodes
    header : sequence of Node or None, default = None
        For tables: the header cells
    rows : sequence or None, default = None
        For tables: body rows, each a ``table_row`` node or a sequence of cells
    level : int or None, default = None
        For headings: heading level (1-6)
    language : str or None, default = None
        For code blocks: the info string language

    """

    kind: Union[NodeKind, str]
    raw_text: str = ""
    children: tuple[Node, ...] = ()
    is_header_cell: bool = False
    href: Optional[str] = None
    title: Optional[str] = None
    ordered: bool = False
    items: Optional[tuple[Node, ...]] = None
    header: Optional[tuple[Node, ...]] = None
    rows: Optional[tuple[Any, ...]] = None
    level: Optional[int] = None
    language: Optional[str] = None

    def __post_init__(self) -> None:
        """Normalize kind and freeze sequence fields."""
        object.__setattr__(self, "kind", coerce_kind(self.kind))
        if self.raw_text is None:
            object.__setattr__(self, "raw_text", "")
        object.__setattr__(self, "children", tuple(self.children or ()))
        if self.items is not None:
            object.__setattr__(self, "items", tuple(self.items))
        if self.header is not None:
            object.__setattr__(self, "header", tuple(self.header))
        if self.rows is not None:
            object.__setattr__(self, "rows", tuple(_freeze_row(row) for row in self.rows))
        if self.level is not None and not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")

    @property
    def is_inline(self) -> bool:
        """Whether this node renders through the inline path."""
        return self.kind in INLINE_KINDS

    @property
    def has_children(self) -> bool:
        return bool(self.children)


def _freeze_row(row: Union[Node, Sequence[Node]]) -> Union[Node, tuple[Node, ...]]:
    if isinstance(row, Node):
        return row
    return tuple(row)


def get_node_children(node: Node) -> list[Node]:
    """Get all child nodes from a node.

    Lists contribute their items, tables their header cells and the cells of
    every row, and all other nodes their ``children``.

    Parameters
    ----------
    node : Node
        The node to get children from

    Returns
    -------
    list of Node
        Child nodes in document order (empty list for leaf nodes)

    Examples
    --------
    >>> from plaintify.ast.builder import paragraph, strong
    >>> len(get_node_children(paragraph("Hello ", strong("world"))))
    2

    """
    if node.kind == NodeKind.LIST:
        return list(node.items or ())

    if node.kind == NodeKind.TABLE:
        children: list[Node] = list(node.header or ())
        for row in node.rows or ():
            if isinstance(row, Node):
                children.extend(row.children)
            else:
                children.extend(row)
        return children

    return list(node.children)


def iter_nodes(nodes: Sequence[Node]):
    """Yield every node in ``nodes`` and their descendants, depth-first."""
    for node in nodes:
        yield node
        yield from iter_nodes(get_node_children(node))
