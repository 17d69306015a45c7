"""
toyc - front end for a toy imperative language

Converts program text into a token stream and then into a binary-tree AST.
The language has integers, identifiers, string and char literals,
arithmetic, relational and logical operators, if/else, while, print, putc,
blocks, assignment and comments.

Example:
    >>> from toyc import parse_source, dump_ast
    >>> print(dump_ast(parse_source("putc(65);")), end="")
    Sequence
    ;
    Prtc
    Integer 65
    ;

Version: 0.1.0
"""

__version__ = "0.1.0"
__author__ = "toyc Team"

from .errors import CompileError, LexerError, ParseError, TokenKindNotFoundError
from .frontend import Lexer, Parser, Token, TokenType, tokenize, parse, parse_source
from .ir import Node, NodeType, dump_ast
from .core import Frontend, FrontendResult

__all__ = [
    "__version__",
    "__author__",
    "CompileError",
    "LexerError",
    "ParseError",
    "TokenKindNotFoundError",
    "Lexer",
    "Parser",
    "Token",
    "TokenType",
    "tokenize",
    "parse",
    "parse_source",
    "Node",
    "NodeType",
    "dump_ast",
    "Frontend",
    "FrontendResult",
]
