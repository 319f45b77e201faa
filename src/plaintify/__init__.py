"""plaintify - render parsed Markdown trees as plain text.

plaintify strips Markdown markup while keeping the structure a reader needs:
paragraph breaks, list items on their own lines, tables linearized into
``label: value`` lines, and links and images reduced to their visible text.

The renderer works on a node tree and does not need mistune. Trees come
from the mistune adapter (``pip install "plaintify[markdown]"``) or are
built by hand with the helpers in ``plaintify.ast``.

Examples
--------
Rendering Markdown source:

    >>> from plaintify import markdown_to_plaintext
    >>> markdown_to_plaintext("# Title\\n\\nHello **world**")
    'Title\\n\\nHello world\\n\\n'

Rendering a hand-built tree:

    >>> from plaintify import render
    >>> from plaintify.ast import table
    >>> render(table(["Name", "Age"], [["Ann", "30"]]))
    'Name: Ann\\nAge: 30\\n\\n'

Overriding a handler:

    >>> from plaintify import PlainTextOptions
    >>> options = PlainTextOptions(custom_handlers={"code_block": lambda node, ctx: ""})

"""

from __future__ import annotations

from plaintify.ast.nodes import Node, NodeKind
from plaintify.exceptions import (
    DependencyError,
    InvalidHandlerError,
    InvalidOptionsError,
    MalformedNodeError,
    ParsingError,
    PlaintifyError,
    RenderingError,
    ValidationError,
)
from plaintify.options import MarkdownParserOptions, PlainTextOptions
from plaintify.parsers.base import ParserInput
from plaintify.parsers.markdown import MarkdownToNodeConverter
from plaintify.renderers.plaintext import PlainTextRenderer, RenderContext, render
from plaintify.utils.escape import escape_html

__version__ = "0.1.0"


def markdown_to_plaintext(
    source: ParserInput,
    parser_options: MarkdownParserOptions | None = None,
    options: PlainTextOptions | None = None,
) -> str:
    """Parse Markdown and render it as plain text.

    Parameters
    ----------
    source : str, Path, IO, or bytes
        Markdown text, a path to a Markdown file, or a stream
    parser_options : MarkdownParserOptions or None, default = None
        Options for the mistune adapter
    options : PlainTextOptions or None, default = None
        Options for the plain text renderer

    Returns
    -------
    str
        Plain text output

    Raises
    ------
    DependencyError
        If mistune (the ``markdown`` extra) is not installed

    """
    nodes = MarkdownToNodeConverter(parser_options).parse(source)
    return PlainTextRenderer(options).render_to_string(nodes)


__all__ = [
    "__version__",
    "DependencyError",
    "InvalidHandlerError",
    "InvalidOptionsError",
    "MalformedNodeError",
    "MarkdownParserOptions",
    "MarkdownToNodeConverter",
    "Node",
    "NodeKind",
    "ParsingError",
    "PlainTextOptions",
    "PlainTextRenderer",
    "PlaintifyError",
    "RenderContext",
    "RenderingError",
    "ValidationError",
    "escape_html",
    "markdown_to_plaintext",
    "render",
]
