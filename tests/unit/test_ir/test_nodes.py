"""
Unit tests for AST nodes.

This module tests the node classes defined in toyc.ir.nodes.
"""

import dataclasses

import pytest
from toyc.ir import Node, NodeType, make_leaf, make_node


class TestMakeLeaf:
    """Tests for leaf construction."""

    @pytest.mark.parametrize("node_type", [NodeType.IDENT, NodeType.INTEGER, NodeType.STRING])
    def test_leaf_kinds(self, node_type):
        leaf = make_leaf(node_type, "v")
        assert leaf.value == "v"
        assert leaf.left is None and leaf.right is None
        assert leaf.is_leaf

    def test_empty_string_is_a_value(self):
        assert make_leaf(NodeType.STRING, "").value == ""

    def test_rejects_internal_kind(self):
        with pytest.raises(ValueError, match="not a leaf kind"):
            make_leaf(NodeType.ADD, "1")

    def test_rejects_missing_value(self):
        with pytest.raises(ValueError, match="requires a value"):
            make_leaf(NodeType.IDENT, None)


class TestMakeNode:
    """Tests for internal node construction."""

    def test_children(self):
        left = make_leaf(NodeType.INTEGER, "1")
        right = make_leaf(NodeType.INTEGER, "2")
        node = make_node(NodeType.ADD, left, right)
        assert (node.left, node.right) == (left, right)
        assert node.value is None
        assert not node.is_leaf

    def test_absent_children(self):
        node = make_node(NodeType.SEQUENCE)
        assert node.left is None and node.right is None

    def test_rejects_leaf_kind(self):
        with pytest.raises(ValueError, match="is a leaf kind"):
            make_node(NodeType.INTEGER)

    def test_immutability(self):
        node = make_node(NodeType.NOT, make_leaf(NodeType.IDENT, "x"))
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.left = None

    def test_structural_equality(self):
        build = lambda: make_node(NodeType.NEGATE, make_leaf(NodeType.INTEGER, "5"))
        assert build() == build()
        assert build() != make_node(NodeType.NOT, make_leaf(NodeType.INTEGER, "5"))


class TestNodeType:
    """Tests for node kind names."""

    def test_dump_names(self):
        assert str(NodeType.IDENT) == "Identifier"
        assert str(NodeType.MUL) == "Multiply"
        assert str(NodeType.GEQ) == "GreaterEqual"

    def test_leaf_kinds(self):
        leaves = {t for t in NodeType if t.is_leaf}
        assert leaves == {NodeType.IDENT, NodeType.INTEGER, NodeType.STRING}

    def test_node_type_count(self):
        assert len(NodeType) == 25
        assert isinstance(Node(NodeType.SEQUENCE), Node)
