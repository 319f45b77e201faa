#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/plaintify/parsers/base.py
"""Base class for parsers that produce node trees.

Parsers turn source text into the node trees consumed by the renderers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from plaintify.ast.nodes import Node
from plaintify.exceptions import InvalidOptionsError
from plaintify.options.base import BaseParserOptions

#: Anything a parser accepts: a path, raw bytes, a stream, or literal text.
ParserInput = Union[str, Path, IO[bytes], IO[str], bytes]


class BaseParser(ABC):
    """Abstract base class for node tree parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: ParserInput) -> list[Node]:
        """Parse the input into a list of top-level nodes.

        Parameters
        ----------
        input_data : str, Path, IO, or bytes
            Source to parse

        Returns
        -------
        list of Node
            Top-level nodes in document order

        """
        pass
