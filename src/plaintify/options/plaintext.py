#  Copyright (c) 2025 Tom Villani, Ph.D.
# plaintify/options/plaintext.py
"""Configuration options for plain text rendering.

This module defines options for rendering node trees to plain text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Mapping, Union

from plaintify.ast.nodes import Node, NodeKind
from plaintify.exceptions import InvalidHandlerError
from plaintify.options.base import BaseRendererOptions

if TYPE_CHECKING:
    from plaintify.renderers.plaintext import RenderContext

#: A render handler turns one node into its plain text fragment.
Handler = Callable[[Node, "RenderContext"], str]


def normalize_handlers(handlers: Mapping[Union[NodeKind, str], Handler]) -> dict[NodeKind, Handler]:
    """Resolve handler keys to ``NodeKind`` members and check the values.

    Parameters
    ----------
    handlers : mapping
        Handlers keyed by ``NodeKind`` or by the kind's string value

    Returns
    -------
    dict
        Handlers keyed by ``NodeKind``, in registration order

    Raises
    ------
    InvalidHandlerError
        If a key names no known kind or a value is not callable

    """
    resolved: dict[NodeKind, Handler] = {}
    for key, handler in handlers.items():
        try:
            kind = key if isinstance(key, NodeKind) else NodeKind(key)
        except ValueError as e:
            raise InvalidHandlerError(key, original_error=e) from e
        if not callable(handler):
            raise InvalidHandlerError(key, message=f"Render handler for {kind.value!r} must be callable")
        resolved[kind] = handler
    return resolved


@dataclass(frozen=True)
class PlainTextOptions(BaseRendererOptions):
    """Configuration options for plain text rendering.

    Parameters
    ----------
    custom_handlers : mapping of NodeKind or str to callable, default empty
        Handlers that replace the built-in handler for a node kind. Each is
        called as ``handler(node, context)`` and returns the node's text.
        Keys may be ``NodeKind`` members or their string values. Custom
        handlers are applied after the defaults, so they always win.

    Examples
    --------
    Replacing the code block handler:
        >>> from plaintify.ast import code_block
        >>> from plaintify.renderers.plaintext import PlainTextRenderer
        >>> options = PlainTextOptions(custom_handlers={"code_block": lambda node, ctx: "[code]\\n\\n"})
        >>> PlainTextRenderer(options).render_to_string(code_block("print(1)"))
        '[code]\\n\\n'

    """

    custom_handlers: Mapping[Union[NodeKind, str], Handler] = field(
        default_factory=dict,
        metadata={"help": "Per-kind render handlers that replace the defaults", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate custom handlers and freeze them."""
        super().__post_init__()
        object.__setattr__(self, "custom_handlers", MappingProxyType(normalize_handlers(self.custom_handlers)))
