#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers that turn node trees into output text."""

from plaintify.renderers.base import BaseRenderer, RenderInput
from plaintify.renderers.plaintext import HandlerClass, PlainTextRenderer, RenderContext, classify, render

__all__ = [
    "BaseRenderer",
    "HandlerClass",
    "PlainTextRenderer",
    "RenderContext",
    "RenderInput",
    "classify",
    "render",
]
