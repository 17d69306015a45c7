"""
AST node definitions for toyc.

The tree is binary: every node has at most a ``left`` and a ``right`` child.
Only the three leaf kinds (Identifier, Integer, String) carry a ``value``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class NodeType(Enum):
    """AST node kinds. The value is the name used in AST dumps."""
    # Leaves
    IDENT = "Identifier"
    STRING = "String"
    INTEGER = "Integer"

    # Statements
    SEQUENCE = "Sequence"
    IF = "If"
    PRTC = "Prtc"
    PRTS = "Prts"
    PRTI = "Prti"
    WHILE = "While"
    ASSIGN = "Assign"

    # Unary operators
    NEGATE = "Negate"
    NOT = "Not"

    # Binary operators
    MUL = "Multiply"
    DIV = "Divide"
    MOD = "Mod"
    ADD = "Add"
    SUB = "Subtract"
    LSS = "Less"
    LEQ = "LessEqual"
    GTR = "Greater"
    GEQ = "GreaterEqual"
    EQL = "Equal"
    NEQ = "NotEqual"
    AND = "And"
    OR = "Or"

    @property
    def is_leaf(self) -> bool:
        return self in _LEAF_TYPES

    def __str__(self) -> str:
        return self.value


_LEAF_TYPES = frozenset({NodeType.IDENT, NodeType.STRING, NodeType.INTEGER})


@dataclass(frozen=True)
class Node:
    """A single AST node.

    Attributes:
        type: The node kind
        left: Left child, or None
        right: Right child, or None
        value: Leaf text (identifier name, decimal digits, string contents)
    """
    type: NodeType
    left: Optional["Node"] = None
    right: Optional["Node"] = None
    value: Optional[str] = None

    @property
    def is_leaf(self) -> bool:
        return self.type.is_leaf


def make_node(node_type: NodeType, left: Optional[Node] = None,
              right: Optional[Node] = None) -> Node:
    """Build an internal node.

    Raises:
        ValueError: If ``node_type`` is a leaf kind
    """
    if node_type.is_leaf:
        raise ValueError(f"{node_type} is a leaf kind, use make_leaf()")
    return Node(node_type, left, right)


def make_leaf(node_type: NodeType, value: str) -> Node:
    """Build a leaf node carrying ``value``.

    Raises:
        ValueError: If ``node_type`` is not a leaf kind or ``value`` is None
    """
    if not node_type.is_leaf:
        raise ValueError(f"{node_type} is not a leaf kind, use make_node()")
    if value is None:
        raise ValueError(f"{node_type} leaf requires a value")
    return Node(node_type, value=value)
