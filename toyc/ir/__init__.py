"""
AST module for toyc.

This module defines the binary-tree AST produced by the parser and the
textual dump used to compare parse results.
"""

from .nodes import Node, NodeType, make_node, make_leaf
from .printer import dump_ast, iter_ast_lines

__all__ = [
    "Node",
    "NodeType",
    "make_node",
    "make_leaf",
    "dump_ast",
    "iter_ast_lines",
]
