#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the plaintify parser and renderer."""

from plaintify.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from plaintify.options.markdown import MarkdownParserOptions
from plaintify.options.plaintext import Handler, PlainTextOptions, normalize_handlers

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "Handler",
    "MarkdownParserOptions",
    "PlainTextOptions",
    "normalize_handlers",
]
