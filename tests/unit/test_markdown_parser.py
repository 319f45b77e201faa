#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_markdown_parser.py
"""Unit tests for the mistune based Markdown adapter."""

import sys

import pytest

from plaintify.ast import NodeKind, table
from plaintify.constants import MISTUNE_REQUIREMENT
from plaintify.exceptions import DependencyError
from plaintify.options import MarkdownParserOptions
from plaintify.parsers.markdown import MarkdownToNodeConverter, markdown_to_nodes
from plaintify.renderers.plaintext import render
from plaintify.utils import dependencies


def _content_nodes(nodes):
    return [node for node in nodes if node.kind is not NodeKind.SPACE]


@pytest.mark.unit
class TestBlockTokens:
    """Block-level token mapping."""

    def test_heading_and_paragraph(self) -> None:
        nodes = _content_nodes(markdown_to_nodes("## Sub\n\nHello **world**"))
        assert [node.kind for node in nodes] == [NodeKind.HEADING, NodeKind.PARAGRAPH]
        assert nodes[0].level == 2
        assert [child.kind for child in nodes[1].children] == [NodeKind.TEXT, NodeKind.STRONG]

    def test_blank_lines_become_space(self) -> None:
        nodes = markdown_to_nodes("a\n\n\n\nb")
        assert NodeKind.SPACE in [node.kind for node in nodes]

    def test_fenced_code_block(self) -> None:
        nodes = markdown_to_nodes("```python\nprint('<hi>')\n```\n")
        assert nodes[0].kind is NodeKind.CODE_BLOCK
        assert nodes[0].raw_text == "print('<hi>')"
        assert nodes[0].language == "python"

    def test_code_block_without_language(self) -> None:
        nodes = markdown_to_nodes("```\nx\n```\n")
        assert nodes[0].language is None

    def test_block_quote(self) -> None:
        nodes = markdown_to_nodes("> quoted")
        assert nodes[0].kind is NodeKind.BLOCKQUOTE
        assert nodes[0].children[0].kind is NodeKind.PARAGRAPH

    def test_html_block(self) -> None:
        nodes = markdown_to_nodes("<div>hi</div>\n")
        assert nodes[0].kind is NodeKind.RAW_HTML
        assert nodes[0].raw_text == "<div>hi</div>"

    def test_thematic_break(self) -> None:
        nodes = _content_nodes(markdown_to_nodes("a\n\n---\n\nb"))
        assert nodes[1].kind is NodeKind.HORIZONTAL_RULE

    def test_unordered_list(self) -> None:
        node = markdown_to_nodes("- one\n- two\n")[0]
        assert node.kind is NodeKind.LIST
        assert not node.ordered
        assert [item.kind for item in node.items] == [NodeKind.LIST_ITEM, NodeKind.LIST_ITEM]

    def test_ordered_list(self) -> None:
        node = markdown_to_nodes("1. one\n2. two\n")[0]
        assert node.ordered

    def test_task_list_items_get_checkbox(self) -> None:
        node = markdown_to_nodes("- [x] done\n- [ ] todo\n")[0]
        first, second = node.items
        assert first.children[0].kind is NodeKind.CHECKBOX
        assert first.children[0].raw_text == "[x]"
        assert second.children[0].raw_text == "[ ]"

    def test_task_lists_disabled(self) -> None:
        options = MarkdownParserOptions(parse_task_lists=False)
        node = MarkdownToNodeConverter(options).parse("- [x] done\n")[0]
        assert node.items[0].children[0].kind is not NodeKind.CHECKBOX

    def test_table(self) -> None:
        node = markdown_to_nodes("|Name|Age|\n|---|---|\n|Ann|30|\n")[0]
        assert node.kind is NodeKind.TABLE
        assert len(node.header) == 2
        assert all(cell.is_header_cell for cell in node.header)
        assert len(node.rows) == 1
        assert node.rows[0].kind is NodeKind.TABLE_ROW
        assert not any(cell.is_header_cell for cell in node.rows[0].children)

    def test_tables_disabled(self) -> None:
        options = MarkdownParserOptions(parse_tables=False)
        nodes = MarkdownToNodeConverter(options).parse("|Name|Age|\n|---|---|\n|Ann|30|\n")
        assert NodeKind.TABLE not in [node.kind for node in nodes]


@pytest.mark.unit
class TestInlineTokens:
    """Inline token mapping."""

    def _inline(self, source: str):
        return markdown_to_nodes(source)[0].children

    def test_emphasis_and_code(self) -> None:
        kinds = [child.kind for child in self._inline("*a* `b`")]
        assert kinds == [NodeKind.EMPHASIS, NodeKind.TEXT, NodeKind.CODE_SPAN]

    def test_strikethrough(self) -> None:
        assert self._inline("~~gone~~")[0].kind is NodeKind.STRIKETHROUGH

    def test_strikethrough_disabled(self) -> None:
        options = MarkdownParserOptions(parse_strikethrough=False)
        children = MarkdownToNodeConverter(options).parse("~~gone~~")[0].children
        assert NodeKind.STRIKETHROUGH not in [child.kind for child in children]

    def test_link(self) -> None:
        node = self._inline('[Click](https://example.com "Home")')[0]
        assert node.kind is NodeKind.LINK
        assert node.href == "https://example.com"
        assert node.title == "Home"
        assert node.children[0].raw_text == "Click"

    def test_image_alt_text(self) -> None:
        node = self._inline("![A *cat*](cat.png)")[0]
        assert node.kind is NodeKind.IMAGE
        assert node.href == "cat.png"
        assert node.raw_text == "A cat"

    def test_soft_break_is_space(self) -> None:
        children = self._inline("one\ntwo")
        assert [child.raw_text for child in children] == ["one", " ", "two"]

    def test_hard_break_is_space(self) -> None:
        children = self._inline("one  \ntwo")
        assert NodeKind.LINE_BREAK not in [child.kind for child in children]
        assert "".join(child.raw_text for child in children).split(" ") == ["one", "two"]


@pytest.mark.unit
class TestParserInputs:
    """Input handling and fallbacks."""

    def test_bytes_input(self) -> None:
        nodes = MarkdownToNodeConverter().parse("# Café".encode("utf-8"))
        assert nodes[0].children[0].raw_text == "Café"

    def test_path_input(self, tmp_path) -> None:
        path = tmp_path / "doc.md"
        path.write_text("# From file", encoding="utf-8")
        assert markdown_to_nodes(path)[0].kind is NodeKind.HEADING
        assert markdown_to_nodes(str(path))[0].kind is NodeKind.HEADING

    def test_empty_input(self) -> None:
        assert _content_nodes(markdown_to_nodes("")) == []

    def test_unknown_token_becomes_generic(self) -> None:
        node = MarkdownToNodeConverter()._process_token({"type": "footnote_ref", "raw": "[^1]"})
        assert node.kind is NodeKind.GENERIC
        assert node.raw_text == "[^1]"


@pytest.mark.unit
class TestOptionalMistune:
    """mistune is an optional extra; its absence is reported, not crashed on."""

    def test_requirement(self) -> None:
        assert MISTUNE_REQUIREMENT == ("mistune", "mistune", ">=3.0.0")

    def test_parse_without_mistune(self, monkeypatch) -> None:
        monkeypatch.setitem(sys.modules, "mistune", None)
        with pytest.raises(DependencyError) as exc_info:
            MarkdownToNodeConverter().parse("x")
        assert exc_info.value.missing_packages == [("mistune", ">=3.0.0")]
        assert exc_info.value.install_command == "pip install 'mistune>=3.0.0'"
        assert isinstance(exc_info.value.original_import_error, ImportError)

    def test_renderer_works_without_mistune(self, monkeypatch) -> None:
        monkeypatch.setitem(sys.modules, "mistune", None)
        assert render(table(["A"], [["1"]])) == "A: 1\n\n"

    def test_outdated_mistune(self, monkeypatch) -> None:
        monkeypatch.setattr(dependencies, "installed_version", lambda distribution: "2.0.5")
        with pytest.raises(DependencyError, match="requires >=3.0.0, but 2.0.5 is installed") as exc_info:
            MarkdownToNodeConverter().parse("x")
        assert exc_info.value.version_mismatches == [("mistune", ">=3.0.0", "2.0.5")]


@pytest.mark.unit
class TestImportDependency:
    """Tests for import_dependency and its version helpers."""

    def test_returns_module(self) -> None:
        module = dependencies.import_dependency("versions", ("packaging", "packaging", ">=20"))
        assert module.__name__ == "packaging"

    def test_no_version_spec(self) -> None:
        assert dependencies.import_dependency("versions", ("packaging", "packaging", "")).__name__ == "packaging"

    def test_missing_module(self) -> None:
        with pytest.raises(DependencyError, match="MARKDOWN format requires"):
            dependencies.import_dependency("markdown", ("no-such-pkg", "no_such_pkg_for_plaintify", ">=1.0"))

    def test_installed_version_of_absent_distribution(self) -> None:
        assert dependencies.installed_version("no-such-distribution-for-plaintify") is None

    @pytest.mark.parametrize(
        "found,spec,expected",
        [
            ("3.0.2", ">=3.0.0", True),
            ("2.0.5", ">=3.0.0", False),
            ("3.1.0", ">=3.0.0,<4", True),
            ("anything", "", True),
            ("not-a-version", ">=3.0.0", False),
        ],
    )
    def test_satisfies(self, found: str, spec: str, expected: bool) -> None:
        assert dependencies.satisfies(found, spec) is expected
