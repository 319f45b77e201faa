#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/plaintify/renderers/base.py
"""Base classes for node tree renderers.

This module defines the abstract base class renderers inherit from. The
BaseRenderer provides a consistent interface for turning a node tree into
output text, plus shared helpers for options validation and output writing.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from io import BytesIO
from pathlib import Path
from typing import IO, Iterable, Union

from plaintify.ast.nodes import Node
from plaintify.exceptions import InvalidOptionsError
from plaintify.options.base import BaseRendererOptions
from plaintify.utils.io_utils import write_content

#: A single root node or an ordered sequence of top-level nodes.
RenderInput = Union[Node, Iterable[Node]]


class BaseRenderer(ABC):
    """Abstract base class for node tree renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render(self, nodes: RenderInput, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the tree and write the result to ``output``.

        Parameters
        ----------
        nodes : Node or iterable of Node
            Root node or top-level nodes to render
        output : str, Path, IO[bytes], or IO[str]
            Output destination (file path or file-like object)

        """
        pass

    def render_to_string(self, nodes: RenderInput) -> str:
        """Render the tree to a string.

        Raises
        ------
        NotImplementedError
            If the renderer does not support string output

        """
        raise NotImplementedError(f"{self.__class__.__name__} does not support rendering to a string.")

    def render_to_bytes(self, nodes: RenderInput) -> bytes:
        """Render the tree to UTF-8 bytes via ``render()``."""
        buffer = BytesIO()
        self.render(nodes, buffer)
        return buffer.getvalue()

    @staticmethod
    def _as_node_list(nodes: RenderInput) -> list[Node]:
        if isinstance(nodes, Node):
            return [nodes]
        return list(nodes)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text output to a file path or an IO stream.

        Examples
        --------
            >>> from io import BytesIO
            >>> buffer = BytesIO()
            >>> BaseRenderer.write_text_output("Hello", buffer)
            >>> buffer.getvalue()
            b'Hello'

        """
        write_content(text, output)
