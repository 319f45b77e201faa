#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_plaintext_options.py
"""Unit tests for parser and renderer options."""

from dataclasses import FrozenInstanceError

import pytest

from plaintify.ast import NodeKind
from plaintify.exceptions import InvalidHandlerError, InvalidOptionsError, ValidationError
from plaintify.options import MarkdownParserOptions, PlainTextOptions, normalize_handlers
from plaintify.parsers.markdown import MarkdownToNodeConverter
from plaintify.renderers.plaintext import PlainTextRenderer


def _noop(node, ctx):
    return ""


@pytest.mark.unit
class TestPlainTextOptions:
    """Tests for PlainTextOptions."""

    def test_default_has_no_handlers(self) -> None:
        assert dict(PlainTextOptions().custom_handlers) == {}

    def test_string_keys_normalized(self) -> None:
        options = PlainTextOptions(custom_handlers={"code_block": _noop})
        assert list(options.custom_handlers) == [NodeKind.CODE_BLOCK]
        assert isinstance(next(iter(options.custom_handlers)), NodeKind)

    def test_handlers_are_read_only(self) -> None:
        options = PlainTextOptions(custom_handlers={"text": _noop})
        with pytest.raises(TypeError):
            options.custom_handlers[NodeKind.TEXT] = _noop  # type: ignore[index]

    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(InvalidHandlerError) as exc_info:
            PlainTextOptions(custom_handlers={"footnote": _noop})
        assert exc_info.value.kind == "footnote"
        assert isinstance(exc_info.value.original_error, ValueError)
        assert isinstance(exc_info.value, ValidationError)

    def test_non_callable_rejected(self) -> None:
        with pytest.raises(InvalidHandlerError, match="must be callable"):
            PlainTextOptions(custom_handlers={NodeKind.TEXT: "not a function"})  # type: ignore[dict-item]

    def test_frozen(self) -> None:
        options = PlainTextOptions()
        with pytest.raises(FrozenInstanceError):
            options.custom_handlers = {}  # type: ignore[misc]

    def test_create_updated(self) -> None:
        options = PlainTextOptions()
        updated = options.create_updated(custom_handlers={"heading": _noop})
        assert NodeKind.HEADING in updated.custom_handlers
        assert NodeKind.HEADING not in options.custom_handlers

    def test_normalize_keeps_order(self) -> None:
        resolved = normalize_handlers({"list": _noop, NodeKind.TEXT: _noop, "image": _noop})
        assert list(resolved) == [NodeKind.LIST, NodeKind.TEXT, NodeKind.IMAGE]


@pytest.mark.unit
class TestMarkdownParserOptions:
    """Tests for MarkdownParserOptions."""

    def test_defaults(self) -> None:
        options = MarkdownParserOptions()
        assert options.parse_tables
        assert options.parse_strikethrough
        assert options.parse_task_lists

    def test_create_updated(self) -> None:
        options = MarkdownParserOptions().create_updated(parse_tables=False)
        assert not options.parse_tables
        assert options.parse_strikethrough


@pytest.mark.unit
class TestOptionsTypeValidation:
    """Passing the wrong options class is rejected."""

    def test_renderer_rejects_parser_options(self) -> None:
        with pytest.raises(InvalidOptionsError) as exc_info:
            PlainTextRenderer(MarkdownParserOptions())  # type: ignore[arg-type]
        assert exc_info.value.expected_type is PlainTextOptions
        assert exc_info.value.received_type is MarkdownParserOptions

    def test_parser_rejects_renderer_options(self) -> None:
        with pytest.raises(InvalidOptionsError):
            MarkdownToNodeConverter(PlainTextOptions())  # type: ignore[arg-type]
