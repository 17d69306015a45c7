"""
Unit tests for the AST dump.
"""

from toyc.frontend import parse_source
from toyc.ir import NodeType, dump_ast, iter_ast_lines, make_leaf, make_node


class TestDumpAst:
    """Tests for the depth-first textual dump."""

    def test_empty_tree(self):
        assert dump_ast(None) == ";\n"

    def test_leaves(self):
        assert dump_ast(make_leaf(NodeType.IDENT, "count")) == "Identifier count\n"
        assert dump_ast(make_leaf(NodeType.INTEGER, "42")) == "Integer 42\n"
        assert dump_ast(make_leaf(NodeType.STRING, "hi there")) == 'String "hi there"\n'

    def test_node_then_left_then_right(self):
        tree = make_node(
            NodeType.SUB,
            make_node(NodeType.SUB, make_leaf(NodeType.INTEGER, "8"), make_leaf(NodeType.INTEGER, "4")),
            make_leaf(NodeType.INTEGER, "2"),
        )
        assert list(iter_ast_lines(tree)) == [
            "Subtract", "Subtract", "Integer 8", "Integer 4", "Integer 2",
        ]

    def test_absent_children_print_placeholder(self):
        tree = make_node(NodeType.PRTC, make_leaf(NodeType.INTEGER, "65"))
        assert dump_ast(tree) == "Prtc\nInteger 65\n;\n"

    def test_program_dump(self):
        tree = parse_source('if (1) putc(65); else print("no", x);')
        assert dump_ast(tree) == (
            "Sequence\n"
            ";\n"
            "If\n"
            "Integer 1\n"
            "If\n"
            "Prtc\n"
            "Integer 65\n"
            ";\n"
            "Sequence\n"
            "Sequence\n"
            ";\n"
            "Prts\n"
            'String "no"\n'
            ";\n"
            "Prti\n"
            "Identifier x\n"
            ";\n"
        )

    def test_count_program_dump(self, count_program):
        lines = dump_ast(parse_source(count_program)).splitlines()
        assert lines[:8] == [
            "Sequence",
            "Sequence",
            ";",
            "Assign",
            "Identifier count",
            "Integer 1",
            "While",
            "Less",
        ]
        assert lines.count("Prts") == 2
        assert lines.count("Prti") == 1

    def test_long_chain_does_not_recurse(self):
        tree = parse_source("x = 1;\n" * 5000)
        lines = list(iter_ast_lines(tree))
        assert lines.count("Sequence") == 5000
        assert lines[5000] == ";"
