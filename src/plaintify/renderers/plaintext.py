#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/plaintify/renderers/plaintext.py
"""Plain text rendering from a parsed Markdown tree.

This module provides the PlainTextRenderer class which turns a node tree
into plain, unformatted text. Markup is stripped while readable structure
survives:

- Block constructs are separated by one blank line
- List items go on their own lines, without bullets or numbers
- Table rows become ``label: value`` lines keyed by the header cells
- Links and images collapse to their visible text; targets are dropped
- Code blocks and raw HTML are kept literally, HTML-escaped

Rendering is table driven. Each node kind falls into exactly one behaviour
class (suppressed, inline passthrough, escaped block, custom structural or
default block) and the renderer builds its ``kind -> handler`` table from
that classification once, then applies caller overrides on top.

"""

from __future__ import annotations

import logging
import re
import time
from contextlib import contextmanager
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import IO, Iterator, Mapping, Sequence, Union

from plaintify.ast.nodes import INLINE_KINDS, Node, NodeKind
from plaintify.constants import (
    BLOCK_SEPARATOR,
    LIST_ITEM_PREFIX,
    TABLE_LABEL_SEPARATOR,
    TABLE_PAIR_SEPARATOR,
)
from plaintify.exceptions import MalformedNodeError, RenderingError
from plaintify.options.plaintext import Handler, PlainTextOptions
from plaintify.renderers.base import BaseRenderer, RenderInput
from plaintify.utils.escape import escape_html

logger = logging.getLogger(__name__)

_BLANK_LINES_RE = re.compile(r"\n{2,}")


class HandlerClass(Enum):
    """Behaviour classes a node kind can belong to."""

    SUPPRESSED = "suppressed"
    INLINE = "inline"
    ESCAPED_BLOCK = "escaped_block"
    STRUCTURAL = "structural"
    DEFAULT_BLOCK = "default_block"


SUPPRESSED_KINDS: frozenset[NodeKind] = frozenset(
    {NodeKind.SPACE, NodeKind.HORIZONTAL_RULE, NodeKind.CHECKBOX, NodeKind.LINE_BREAK}
)
ESCAPED_BLOCK_KINDS: frozenset[NodeKind] = frozenset({NodeKind.RAW_HTML, NodeKind.CODE_BLOCK})
STRUCTURAL_KINDS: frozenset[NodeKind] = frozenset(
    {
        NodeKind.LIST,
        NodeKind.LIST_ITEM,
        NodeKind.TABLE,
        NodeKind.TABLE_ROW,
        NodeKind.TABLE_CELL,
        NodeKind.LINK,
        NodeKind.IMAGE,
        NodeKind.PARAGRAPH,
    }
)

# Kinds whose children are inline content (rendered without block separators)
INLINE_CONTAINER_KINDS: frozenset[NodeKind] = frozenset(
    {NodeKind.HEADING, NodeKind.PARAGRAPH, NodeKind.TABLE_CELL, NodeKind.LINK, NodeKind.IMAGE}
)


def classify(kind: Union[NodeKind, str]) -> HandlerClass:
    """Return the behaviour class of a node kind.

    Kinds that are not classified otherwise, including unknown kind names,
    are default blocks.
    """
    if kind in SUPPRESSED_KINDS:
        return HandlerClass.SUPPRESSED
    if kind in INLINE_KINDS:
        return HandlerClass.INLINE
    if kind in ESCAPED_BLOCK_KINDS:
        return HandlerClass.ESCAPED_BLOCK
    if kind in STRUCTURAL_KINDS:
        return HandlerClass.STRUCTURAL
    return HandlerClass.DEFAULT_BLOCK


class RenderContext:
    """Mutable state for one top-level render call.

    The context owns a stack of table header label lists. Each table render
    pushes a fresh list for the duration of the table and pops it afterwards,
    so a table nested inside a cell never sees or changes the labels of the
    table around it. Handlers reach the rest of the renderer through
    ``render`` and ``render_children``.

    Parameters
    ----------
    renderer : PlainTextRenderer
        Renderer whose handler table is used for dispatch

    """

    def __init__(self, renderer: PlainTextRenderer):
        """Create an empty context bound to ``renderer``."""
        self._renderer = renderer
        self._header_stack: list[list[str]] = []

    @property
    def header_labels(self) -> list[str]:
        """Header labels of the innermost table being rendered.

        Outside of any table this is a throwaway empty list.
        """
        if not self._header_stack:
            return []
        return self._header_stack[-1]

    @property
    def table_depth(self) -> int:
        return len(self._header_stack)

    @contextmanager
    def table_scope(self) -> Iterator[list[str]]:
        """Push a fresh header label list for the duration of one table."""
        labels: list[str] = []
        self._header_stack.append(labels)
        try:
            yield labels
        finally:
            self._header_stack.pop()

    def render(self, node: Node) -> str:
        """Render a single node through the handler table."""
        return self._renderer.handler_for(node.kind)(node, self)

    def render_children(self, children: Sequence[Node], inline: bool = False) -> str:
        """Render child nodes and concatenate the results.

        Inline-kind children are rendered as they are. Block-kind children
        keep their trailing separator in block mode; when ``inline`` is set
        the separator is dropped so block output cannot leak blank lines into
        inline text.

        Parameters
        ----------
        children : sequence of Node
            Nodes to render, in document order
        inline : bool, default False
            Whether the caller is assembling inline content

        Returns
        -------
        str
            Concatenated output

        """
        parts = []
        for child in children:
            text = self.render(child)
            if inline and not child.is_inline:
                text = text.rstrip("\n")
            parts.append(text)
        return "".join(parts)


class PlainTextRenderer(BaseRenderer):
    """Render node trees to plain, unformatted text.

    Parameters
    ----------
    options : PlainTextOptions or None, default = None
        Plain text rendering options

    Examples
    --------
    Basic usage:

        >>> from plaintify.ast import heading, list_, list_item, paragraph, strong
        >>> renderer = PlainTextRenderer()
        >>> renderer.render_to_string([
        ...     heading("Title"),
        ...     paragraph("Hello ", strong("world")),
        ...     list_(list_item("one"), list_item("two")),
        ... ])
        'Title\\n\\nHello world\\n\\n\\none\\ntwo\\n\\n'

    Overriding a handler:

        >>> from plaintify.options import PlainTextOptions
        >>> options = PlainTextOptions(custom_handlers={"heading": lambda node, ctx: "# ignored\\n\\n"})
        >>> PlainTextRenderer(options).render_to_string(heading("Title"))
        '# ignored\\n\\n'

    """

    def __init__(self, options: PlainTextOptions | None = None):
        """Initialize the plain text renderer and build its handler table."""
        BaseRenderer._validate_options_type(options, PlainTextOptions, "plaintext")
        options = options or PlainTextOptions()
        BaseRenderer.__init__(self, options)
        self.options: PlainTextOptions = options
        self._handlers = self._build_handler_table(options.custom_handlers)

    # ------------------------------------------------------------------
    # Handler table
    # ------------------------------------------------------------------

    def _build_handler_table(self, overrides: Mapping[NodeKind, Handler]) -> dict[NodeKind, Handler]:
        """Build the complete ``kind -> handler`` table, then apply overrides.

        Raises
        ------
        RenderingError
            If some node kind ends up without a handler

        """
        class_handlers: dict[HandlerClass, Handler] = {
            HandlerClass.SUPPRESSED: self._render_suppressed,
            HandlerClass.INLINE: self._render_inline,
            HandlerClass.ESCAPED_BLOCK: self._render_escaped_block,
            HandlerClass.DEFAULT_BLOCK: self._render_default_block,
        }
        structural_handlers: dict[NodeKind, Handler] = {
            NodeKind.LIST: self._render_list,
            NodeKind.LIST_ITEM: self._render_list_item,
            NodeKind.TABLE: self._render_table,
            NodeKind.TABLE_ROW: self._render_table_row,
            NodeKind.TABLE_CELL: self._render_table_cell,
            NodeKind.LINK: self._render_link,
            NodeKind.IMAGE: self._render_image,
            NodeKind.PARAGRAPH: self._render_paragraph,
        }

        handlers: dict[NodeKind, Handler] = {}
        for kind in NodeKind:
            handler_class = classify(kind)
            if handler_class is HandlerClass.STRUCTURAL:
                handlers[kind] = structural_handlers[kind]
            else:
                handlers[kind] = class_handlers[handler_class]

        missing = [kind.value for kind in NodeKind if kind not in handlers]
        if missing:
            raise RenderingError(f"No render handler for node kinds: {', '.join(missing)}", rendering_stage="setup")

        for kind, handler in overrides.items():
            logger.debug("Overriding default render handler for '%s'", kind.value)
            handlers[kind] = handler

        return handlers

    @property
    def handlers(self) -> Mapping[NodeKind, Handler]:
        """Read-only view of the handler table."""
        return MappingProxyType(self._handlers)

    def handler_for(self, kind: Union[NodeKind, str]) -> Handler:
        """Return the handler for ``kind``, falling back to the default block handler."""
        handler = self._handlers.get(kind)  # type: ignore[call-overload]
        if handler is None:
            logger.debug("No handler for node kind %r, using default block rendering", kind)
            return self._render_default_block
        return handler

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def render_to_string(self, nodes: RenderInput) -> str:
        """Render a node or a sequence of top-level nodes to plain text.

        Parameters
        ----------
        nodes : Node or iterable of Node
            Root node or top-level nodes in document order

        Returns
        -------
        str
            Plain text output

        Raises
        ------
        MalformedNodeError
            If a structural node is missing part of its shape

        """
        node_list = self._as_node_list(nodes)
        context = RenderContext(self)
        started = time.perf_counter()
        text = "".join(context.render(node) for node in node_list)
        logger.debug(
            "Rendered %d top-level nodes to %d characters in %.1f ms",
            len(node_list),
            len(text),
            (time.perf_counter() - started) * 1000,
        )
        return text

    def render(self, nodes: RenderInput, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render to plain text and write to output.

        Parameters
        ----------
        nodes : Node or iterable of Node
            Root node or top-level nodes to render
        output : str, Path, IO[bytes], or IO[str]
            Output destination (file path or file-like object)

        """
        text = self.render_to_string(nodes)
        self.write_text_output(text, output)

    # ------------------------------------------------------------------
    # Behaviour class handlers
    # ------------------------------------------------------------------

    def _render_suppressed(self, node: Node, context: RenderContext) -> str:
        return ""

    def _render_inline(self, node: Node, context: RenderContext) -> str:
        if node.children:
            return context.render_children(node.children, inline=True)
        return node.raw_text

    def _render_escaped_block(self, node: Node, context: RenderContext) -> str:
        return escape_html(node.raw_text) + BLOCK_SEPARATOR

    def _render_default_block(self, node: Node, context: RenderContext) -> str:
        """Render headings, block quotes and unclassified kinds.

        Children are rendered when present, otherwise the raw text is used.
        Block content is trimmed so nested separators do not pile up.
        """
        if not node.children:
            return (node.raw_text or "") + BLOCK_SEPARATOR
        if node.kind in INLINE_CONTAINER_KINDS:
            return context.render_children(node.children, inline=True) + BLOCK_SEPARATOR
        return context.render_children(node.children).strip() + BLOCK_SEPARATOR

    # ------------------------------------------------------------------
    # Structural handlers
    # ------------------------------------------------------------------

    def _render_paragraph(self, node: Node, context: RenderContext) -> str:
        # A paragraph holding only a link or image collapses to that node's text
        if len(node.children) == 1 and node.children[0].kind in (NodeKind.LINK, NodeKind.IMAGE):
            return context.render(node.children[0])
        return context.render_children(node.children, inline=True) + BLOCK_SEPARATOR

    def _render_link(self, node: Node, context: RenderContext) -> str:
        _require(node, "href")
        if node.children:
            label = context.render_children(node.children, inline=True)
        else:
            label = node.raw_text
        return label + BLOCK_SEPARATOR

    def _render_image(self, node: Node, context: RenderContext) -> str:
        _require(node, "href")
        alt_text = node.raw_text
        if not alt_text and node.children:
            alt_text = context.render_children(node.children, inline=True)
        return alt_text + BLOCK_SEPARATOR

    def _render_list(self, node: Node, context: RenderContext) -> str:
        """Render list items one per line, without markers.

        Each item comes back as a leading newline plus its trimmed content;
        runs of blank lines inside an item collapse to a single newline.
        """
        items = _require(node, "items")
        if not items:
            return ""
        body = "".join(_BLANK_LINES_RE.sub("\n", context.render(item)) for item in items)
        return LIST_ITEM_PREFIX + body.strip() + BLOCK_SEPARATOR

    def _render_list_item(self, node: Node, context: RenderContext) -> str:
        return LIST_ITEM_PREFIX + context.render_children(node.children).strip()

    def _render_table(self, node: Node, context: RenderContext) -> str:
        """Linearize a table into ``label: value`` lines, one block per row.

        Header cells are rendered only to collect their labels; the header
        text never appears on its own. Labels live in a table scope on the
        context, so nested tables keep their own.
        """
        header = _require(node, "header")
        rows = _require(node, "rows")

        with context.table_scope():
            for cell in header:
                _require_cell(cell, NodeKind.TABLE.value, "header")
                context.render(cell)

            return "".join(context.render(_as_row(row)) for row in rows)

    def _render_table_row(self, node: Node, context: RenderContext) -> str:
        """Pair the row's cell texts positionally with the header labels.

        Pairing stops at the shorter of the two sequences and cells that
        render to nothing are skipped.
        """
        values = []
        for cell in node.children:
            _require_cell(cell, NodeKind.TABLE_ROW.value, "children")
            values.append(context.render(cell))

        # TODO: surface cells beyond the header width instead of dropping them
        pairs = [
            label + TABLE_LABEL_SEPARATOR + value for label, value in zip(context.header_labels, values) if value
        ]
        if not pairs:
            return ""
        return TABLE_PAIR_SEPARATOR.join(pairs) + BLOCK_SEPARATOR

    def _render_table_cell(self, node: Node, context: RenderContext) -> str:
        text = context.render_children(node.children, inline=True)
        if node.is_header_cell:
            context.header_labels.append(text)
        return text


def _require(node: Node, field_name: str):
    value = getattr(node, field_name)
    if value is None:
        raise MalformedNodeError(str(node.kind), field_name)
    return value


def _require_cell(cell: object, node_kind: str, field_name: str) -> None:
    if not isinstance(cell, Node) or cell.kind != NodeKind.TABLE_CELL:
        raise MalformedNodeError(
            node_kind,
            field_name,
            message=f"Malformed '{node_kind}' node: '{field_name}' must contain only table_cell nodes",
        )


def _as_row(row: Union[Node, Sequence[Node]]) -> Node:
    if isinstance(row, Node):
        if row.kind != NodeKind.TABLE_ROW:
            raise MalformedNodeError(
                NodeKind.TABLE.value, "rows", message="Malformed 'table' node: 'rows' must contain table_row nodes"
            )
        return row
    return Node(NodeKind.TABLE_ROW, children=tuple(row))


def render(nodes: RenderInput, options: PlainTextOptions | None = None) -> str:
    """Render a node or a sequence of top-level nodes to plain text.

    Parameters
    ----------
    nodes : Node or iterable of Node
        Root node or top-level nodes in document order
    options : PlainTextOptions or None, default = None
        Rendering options (custom handlers)

    Returns
    -------
    str
        Plain text output

    """
    return PlainTextRenderer(options).render_to_string(nodes)
