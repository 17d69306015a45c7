"""
Textual AST dump.

The dump is a depth-first walk (node, left subtree, right subtree) with one
node per line. Leaves print their kind and value, internal nodes print their
kind alone, and an absent child prints as ``;``.

Example:
    >>> from toyc.frontend import parse_source
    >>> print(dump_ast(parse_source("x = 1;")), end="")
    Sequence
    ;
    Assign
    Identifier x
    Integer 1
"""

from typing import Iterator, List, Optional

from .nodes import Node, NodeType


def _leaf_text(node: Node) -> str:
    if node.type is NodeType.STRING:
        return f'{node.type} "{node.value}"'
    return f"{node.type} {node.value}"


def iter_ast_lines(root: Optional[Node]) -> Iterator[str]:
    """Yield the dump lines of ``root`` without trailing newlines."""
    # Sequence chains grow on the left, so walk with an explicit stack
    stack: List[Optional[Node]] = [root]
    while stack:
        node = stack.pop()
        if node is None:
            yield ";"
        elif node.is_leaf:
            yield _leaf_text(node)
        else:
            yield str(node.type)
            stack.append(node.right)
            stack.append(node.left)


def dump_ast(root: Optional[Node]) -> str:
    """Render the whole tree, each line terminated by a newline."""
    return "".join(line + "\n" for line in iter_ast_lines(root))
