#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/plaintify/parsers/markdown.py
"""Markdown to node tree converter.

This module turns Markdown source into the node trees consumed by the plain
text renderer, using the mistune parser. Mistune produces a token AST of
plain dictionaries; each token type maps onto one ``NodeKind``. Token types
this module does not know become ``generic`` nodes carrying their raw text
and children, which the renderer handles with its default block rendering.

"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Optional

from plaintify.ast.nodes import Node, NodeKind, iter_nodes
from plaintify.constants import MISTUNE_REQUIREMENT
from plaintify.exceptions import ParsingError
from plaintify.options.markdown import MarkdownParserOptions
from plaintify.parsers.base import BaseParser, ParserInput
from plaintify.utils.dependencies import import_dependency
from plaintify.utils.io_utils import read_text

logger = logging.getLogger(__name__)

Token = dict[str, Any]


class MarkdownToNodeConverter(BaseParser):
    r"""Convert Markdown to a list of top-level nodes.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> converter = MarkdownToNodeConverter()
        >>> nodes = converter.parse("# Hello\\n\\nThis is **bold**.")
        >>> [node.kind.value for node in nodes]
        ['heading', 'paragraph']

    Without tables:

        >>> options = MarkdownParserOptions(parse_tables=False)
        >>> nodes = MarkdownToNodeConverter(options).parse(markdown_text)

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options
        self._token_handlers: dict[str, Callable[[Token], Optional[Node]]] = {
            "blank_line": self._process_blank_line,
            "heading": self._process_heading,
            "paragraph": self._process_paragraph,
            "block_text": self._process_paragraph,
            "block_code": self._process_code_block,
            "block_quote": self._process_block_quote,
            "block_html": self._process_html,
            "list": self._process_list,
            "list_item": self._process_list_item,
            "task_list_item": self._process_list_item,
            "table": self._process_table,
            "thematic_break": self._process_thematic_break,
            "text": self._handle_text_token,
            "strong": self._handle_container_token(NodeKind.STRONG),
            "emphasis": self._handle_container_token(NodeKind.EMPHASIS),
            "strikethrough": self._handle_container_token(NodeKind.STRIKETHROUGH),
            "codespan": self._handle_codespan_token,
            "link": self._handle_link_token,
            "image": self._handle_image_token,
            "linebreak": self._handle_break_token,
            "softbreak": self._handle_break_token,
            "inline_html": self._process_html,
        }

    def _plugins(self) -> list[str]:
        plugins = []
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")
        if self.options.parse_tables:
            plugins.append("table")
        if self.options.parse_task_lists:
            plugins.append("task_lists")
        return plugins

    def parse(self, input_data: ParserInput) -> list[Node]:
        """Parse Markdown input into top-level nodes.

        Parameters
        ----------
        input_data : str, Path, IO, or bytes
            Markdown input to parse. Can be:
            - File path (str or Path)
            - File-like object
            - Raw markdown bytes
            - Markdown string

        Returns
        -------
        list of Node
            Top-level nodes in document order

        Raises
        ------
        ParsingError
            If mistune does not return a token list
        DependencyError
            If mistune is missing or older than 3.0 (install the ``markdown`` extra)

        """
        mistune = import_dependency("markdown", MISTUNE_REQUIREMENT)
        markdown_content = read_text(input_data)

        plugins = self._plugins()
        logger.debug("Parsing markdown with plugins: %s", ", ".join(plugins) or "none")

        markdown = mistune.create_markdown(renderer=None, plugins=plugins)
        started = time.perf_counter()
        tokens, _state = markdown.parse(markdown_content)

        if not isinstance(tokens, list):
            raise ParsingError(f"Expected a token list from mistune, got {type(tokens).__name__}", "tokenize")

        nodes = self._process_tokens(tokens)
        logger.debug(
            "Parsed %d top-level nodes (%d total) in %.1f ms",
            len(nodes),
            sum(1 for _ in iter_nodes(nodes)),
            (time.perf_counter() - started) * 1000,
        )
        return nodes

    def _process_tokens(self, tokens: list[Token]) -> list[Node]:
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_token(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _process_token(self, token: Token) -> Optional[Node]:
        """Process a single mistune token into a node.

        Parameters
        ----------
        token : dict
            Mistune token dictionary with 'type' and other fields

        Returns
        -------
        Node or None
            Resulting node, or None when the token carries nothing

        """
        token_type = token.get("type", "")
        handler = self._token_handlers.get(token_type)
        if handler is None:
            logger.debug("Unknown markdown token type %r, keeping it as a generic node", token_type)
            return self._process_generic(token)
        return handler(token)

    def _children(self, token: Token) -> list[Node]:
        children = token.get("children", [])
        if not isinstance(children, list):
            return []
        return self._process_tokens(children)

    # Block-level tokens

    def _process_blank_line(self, token: Token) -> Node:
        return Node(NodeKind.SPACE, raw_text="\n")

    def _process_heading(self, token: Token) -> Node:
        attrs = token.get("attrs", {})
        level = attrs.get("level", 1) if isinstance(attrs, dict) else 1
        if not isinstance(level, int) or not 1 <= level <= 6:
            level = 1
        return Node(NodeKind.HEADING, children=self._children(token), level=level)

    def _process_paragraph(self, token: Token) -> Node:
        return Node(NodeKind.PARAGRAPH, children=self._children(token))

    def _process_code_block(self, token: Token) -> Node:
        attrs = token.get("attrs", {})
        info_string = (attrs.get("info") or "").strip() if isinstance(attrs, dict) else ""
        language = info_string.split(maxsplit=1)[0] if info_string else None
        return Node(NodeKind.CODE_BLOCK, raw_text=token.get("raw", "").rstrip("\n"), language=language)

    def _process_block_quote(self, token: Token) -> Node:
        return Node(NodeKind.BLOCKQUOTE, children=self._children(token))

    def _process_html(self, token: Token) -> Node:
        return Node(NodeKind.RAW_HTML, raw_text=token.get("raw", "").rstrip("\n"))

    def _process_thematic_break(self, token: Token) -> Node:
        return Node(NodeKind.HORIZONTAL_RULE, raw_text="---")

    def _process_list(self, token: Token) -> Node:
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        items = [self._process_list_item(child) for child in token.get("children", []) if isinstance(child, dict)]
        return Node(NodeKind.LIST, items=items, ordered=bool(attrs.get("ordered", False)))

    def _process_list_item(self, token: Token) -> Node:
        children = self._children(token)
        attrs = token.get("attrs", {})
        if token.get("type") == "task_list_item" and isinstance(attrs, dict):
            checked = bool(attrs.get("checked", False))
            children.insert(0, Node(NodeKind.CHECKBOX, raw_text="[x]" if checked else "[ ]"))
        return Node(NodeKind.LIST_ITEM, children=children)

    def _process_table(self, token: Token) -> Node:
        """Process table token.

        Mistune nests header cells directly under ``table_head`` and body
        cells under ``table_body`` -> ``table_row``.
        """
        header: list[Node] = []
        rows: list[Node] = []

        for section in token.get("children", []):
            section_type = section.get("type", "")
            if section_type == "table_head":
                header = [self._process_table_cell(cell, header=True) for cell in section.get("children", [])]
            elif section_type == "table_body":
                for row_token in section.get("children", []):
                    cells = [self._process_table_cell(cell, header=False) for cell in row_token.get("children", [])]
                    rows.append(Node(NodeKind.TABLE_ROW, children=cells))

        return Node(NodeKind.TABLE, header=header, rows=rows)

    def _process_table_cell(self, token: Token, header: bool) -> Node:
        return Node(NodeKind.TABLE_CELL, children=self._children(token), is_header_cell=header)

    def _process_generic(self, token: Token) -> Node:
        return Node(NodeKind.GENERIC, raw_text=token.get("raw", "") or "", children=self._children(token))

    # Inline tokens

    def _handle_text_token(self, token: Token) -> Node:
        return Node(NodeKind.TEXT, raw_text=token.get("raw", ""))

    def _handle_container_token(self, kind: NodeKind) -> Callable[[Token], Node]:
        def handle(token: Token) -> Node:
            return Node(kind, children=self._children(token))

        return handle

    def _handle_codespan_token(self, token: Token) -> Node:
        return Node(NodeKind.CODE_SPAN, raw_text=token.get("raw", ""))

    def _handle_link_token(self, token: Token) -> Node:
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        return Node(
            NodeKind.LINK,
            children=self._children(token),
            href=attrs.get("url", ""),
            title=attrs.get("title"),
        )

    def _handle_image_token(self, token: Token) -> Node:
        """Handle image token; alt text is in children, not attrs."""
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        return Node(
            NodeKind.IMAGE,
            raw_text=_flatten_text(token.get("children", [])),
            href=attrs.get("url", ""),
            title=attrs.get("title"),
        )

    def _handle_break_token(self, token: Token) -> Node:
        # Soft and hard breaks both join their lines with a space
        return Node(NodeKind.TEXT, raw_text=" ")


def _flatten_text(tokens: Any) -> str:
    if not isinstance(tokens, list):
        return ""
    parts = []
    for token in tokens:
        if not isinstance(token, dict):
            continue
        if "children" in token:
            parts.append(_flatten_text(token["children"]))
        else:
            parts.append(token.get("raw", ""))
    return "".join(parts)


def markdown_to_nodes(source: ParserInput, options: MarkdownParserOptions | None = None) -> list[Node]:
    """Parse Markdown source into top-level nodes."""
    return MarkdownToNodeConverter(options).parse(source)
