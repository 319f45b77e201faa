#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Parsers that produce node trees from source text."""

from plaintify.parsers.base import BaseParser, ParserInput
from plaintify.parsers.markdown import MarkdownToNodeConverter, markdown_to_nodes

__all__ = ["BaseParser", "MarkdownToNodeConverter", "ParserInput", "markdown_to_nodes"]
