"""
Frontend module for toyc.

This module provides the lexer and parser components along with the textual
token listing that sits between them.
"""

from ..errors import LexerError, ParseError, TokenKindNotFoundError
from .lexer import (
    Lexer, Token, TokenType, OperatorInfo, OPERATORS, KEYWORDS,
    SourceCursor, tokenize, tokenize_source,
)
from .parser import Parser, parse, parse_source
from .token_format import format_token, format_tokens, read_token, read_tokens, lookup_token_type

__all__ = [
    # Lexer components
    "Lexer",
    "Token",
    "TokenType",
    "OperatorInfo",
    "OPERATORS",
    "KEYWORDS",
    "SourceCursor",
    "tokenize",
    "tokenize_source",
    "LexerError",
    # Parser components
    "Parser",
    "parse",
    "parse_source",
    "ParseError",
    # Token listings
    "format_token",
    "format_tokens",
    "read_token",
    "read_tokens",
    "lookup_token_type",
    "TokenKindNotFoundError",
]
