#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_ast_nodes.py
"""Unit tests for the node model and the tree builder helpers."""

from dataclasses import FrozenInstanceError

import pytest

from plaintify.ast import (
    INLINE_KINDS,
    Node,
    NodeKind,
    checkbox,
    coerce_kind,
    get_node_children,
    heading,
    image,
    iter_nodes,
    link,
    list_,
    list_item,
    paragraph,
    strong,
    table,
    table_cell,
    table_row,
    text,
)


@pytest.mark.unit
class TestNodeKind:
    """Tests for the NodeKind enumeration."""

    def test_values_are_snake_case_names(self) -> None:
        assert NodeKind.CODE_BLOCK.value == "code_block"
        assert str(NodeKind.TABLE_CELL) == "table_cell"

    def test_compares_equal_to_string(self) -> None:
        assert NodeKind.HEADING == "heading"

    def test_coerce_known_string(self) -> None:
        assert coerce_kind("paragraph") is NodeKind.PARAGRAPH

    def test_coerce_unknown_string_kept(self) -> None:
        assert coerce_kind("footnote") == "footnote"
        assert not isinstance(coerce_kind("footnote"), NodeKind)

    def test_inline_kinds(self) -> None:
        assert INLINE_KINDS == {
            NodeKind.TEXT,
            NodeKind.STRONG,
            NodeKind.EMPHASIS,
            NodeKind.CODE_SPAN,
            NodeKind.STRIKETHROUGH,
        }


@pytest.mark.unit
class TestNode:
    """Tests for Node construction."""

    def test_defaults(self) -> None:
        node = Node(NodeKind.TEXT)
        assert node.raw_text == ""
        assert node.children == ()
        assert node.items is None
        assert node.header is None
        assert node.rows is None
        assert not node.is_header_cell

    def test_string_kind_is_coerced(self) -> None:
        assert Node("strong").kind is NodeKind.STRONG

    def test_none_raw_text_becomes_empty(self) -> None:
        assert Node(NodeKind.TEXT, raw_text=None).raw_text == ""  # type: ignore[arg-type]

    def test_sequences_are_frozen(self) -> None:
        children = [text("a")]
        node = Node(NodeKind.PARAGRAPH, children=children)
        children.append(text("b"))
        assert node.children == (text("a"),)

    def test_rows_frozen_to_tuples(self) -> None:
        node = Node(NodeKind.TABLE, header=[table_cell("A", header=True)], rows=[[table_cell("1")]])
        assert isinstance(node.header, tuple)
        assert node.rows == ((table_cell("1"),),)

    def test_immutable(self) -> None:
        node = text("a")
        with pytest.raises(FrozenInstanceError):
            node.raw_text = "b"  # type: ignore[misc]

    @pytest.mark.parametrize("level", [0, 7])
    def test_invalid_heading_level(self, level: int) -> None:
        with pytest.raises(ValueError, match="Heading level"):
            heading("x", level=level)

    def test_is_inline(self) -> None:
        assert text("a").is_inline
        assert strong("a").is_inline
        assert not paragraph("a").is_inline
        assert not link("a", href="x").is_inline
        assert not image("a", "a.png").is_inline
        assert not checkbox(True).is_inline
        assert not Node(NodeKind.LINE_BREAK).is_inline

    def test_has_children(self) -> None:
        assert paragraph("a").has_children
        assert not text("a").has_children
        assert not list_("a").has_children

    def test_equality(self) -> None:
        assert paragraph("a", strong("b")) == paragraph(text("a"), strong(text("b")))


@pytest.mark.unit
class TestBuilders:
    """Tests for the builder helpers."""

    def test_strings_become_text(self) -> None:
        node = paragraph("hello")
        assert node.children[0].kind is NodeKind.TEXT
        assert node.children[0].raw_text == "hello"

    def test_list_strings_become_items(self) -> None:
        node = list_("a", list_item("b"), ordered=True)
        assert node.ordered
        assert [item.kind for item in node.items] == [NodeKind.LIST_ITEM, NodeKind.LIST_ITEM]

    def test_table_shape(self) -> None:
        node = table(["A", "B"], [["1", "2"], table_row("3", "4")])
        assert all(cell.is_header_cell for cell in node.header)
        assert all(row.kind is NodeKind.TABLE_ROW for row in node.rows)
        assert not node.rows[0].children[0].is_header_cell

    def test_image_alt_in_raw_text(self) -> None:
        node = image("alt", "a.png", title="T")
        assert (node.raw_text, node.href, node.title) == ("alt", "a.png", "T")

    def test_checkbox_state(self) -> None:
        assert checkbox(True).raw_text == "[x]"
        assert checkbox().raw_text == "[ ]"


@pytest.mark.unit
class TestTraversal:
    """Tests for child access and tree iteration."""

    def test_list_children_are_items(self) -> None:
        node = list_("a", "b")
        assert get_node_children(node) == list(node.items)

    def test_table_children_are_cells(self) -> None:
        node = table(["A"], [["1"], ["2"]])
        assert [cell.children[0].raw_text for cell in get_node_children(node)] == ["A", "1", "2"]

    def test_iter_nodes_depth_first(self) -> None:
        tree = [heading("T"), paragraph("a", strong("b"))]
        kinds = [node.kind for node in iter_nodes(tree)]
        assert kinds == [
            NodeKind.HEADING,
            NodeKind.TEXT,
            NodeKind.PARAGRAPH,
            NodeKind.TEXT,
            NodeKind.STRONG,
            NodeKind.TEXT,
        ]
