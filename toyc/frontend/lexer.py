"""
Lexer module for toyc.

This module provides a hand-written scanner that converts source text into a
stream of tokens for the parser. Ambiguous characters are resolved with a
single character of lookahead:

- ``<``, ``>``, ``=`` and ``!`` become two-character operators when followed
  by ``=``; ``&&`` and ``||`` must be doubled.
- ``-`` followed by whitespace is subtraction, anything else is negation.
- ``/`` followed by whitespace, a letter or a digit is division; ``//`` starts
  a line comment; any other character starts a block comment that runs to the
  next ``/``.

These rules are positional, not grammatical: ``a -b`` lexes as an identifier
followed by a negation.
"""

import logging
import string
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterator, List, Mapping, NamedTuple, Optional

from ..errors import LexerError
from ..ir.nodes import NodeType

logger = logging.getLogger(__name__)


class TokenType(Enum):
    """Token kinds. The value is the name used in token listings."""
    END_OF_INPUT = "End_of_input"

    # Operators
    OP_MULTIPLY = "Op_multiply"
    OP_DIVIDE = "Op_divide"
    OP_MOD = "Op_mod"
    OP_ADD = "Op_add"
    OP_SUBTRACT = "Op_subtract"
    OP_NEGATE = "Op_negate"
    OP_NOT = "Op_not"
    OP_LESS = "Op_less"
    OP_LESSEQUAL = "Op_lessequal"
    OP_GREATER = "Op_greater"
    OP_GREATEREQUAL = "Op_greaterequal"
    OP_EQUAL = "Op_equal"
    OP_NOTEQUAL = "Op_notequal"
    OP_ASSIGN = "Op_assign"
    OP_AND = "Op_and"
    OP_OR = "Op_or"

    # Keywords
    KEYWORD_IF = "Keyword_if"
    KEYWORD_ELSE = "Keyword_else"
    KEYWORD_WHILE = "Keyword_while"
    KEYWORD_PRINT = "Keyword_print"
    KEYWORD_PUTC = "Keyword_putc"

    # Punctuation
    LEFT_PAREN = "LeftParen"
    RIGHT_PAREN = "RightParen"
    LEFT_BRACE = "LeftBrace"
    RIGHT_BRACE = "RightBrace"
    SEMICOLON = "Semicolon"
    COMMA = "Comma"

    # Names and literals
    IDENTIFIER = "Identifier"
    INTEGER = "Integer"
    STRING = "String"

    def __str__(self) -> str:
        return self.value

    @property
    def info(self) -> "OperatorInfo":
        """Operator metadata for this kind (see ``OPERATORS``)."""
        return OPERATORS.get(self, NO_OPERATOR)


class OperatorInfo(NamedTuple):
    """Fixed parsing metadata attached to an operator kind.

    Attributes:
        precedence: Binding strength, higher binds tighter (-1 for non-operators)
        right_assoc: Whether equal-precedence chains group to the right
        is_binary: Whether the kind is an infix operator
        is_unary: Whether the kind is a prefix operator
        node_type: AST node built when the operator is reduced
    """
    precedence: int
    right_assoc: bool
    is_binary: bool
    is_unary: bool
    node_type: Optional[NodeType]


NO_OPERATOR = OperatorInfo(-1, False, False, False, None)


def _binary(precedence: int, node_type: NodeType) -> OperatorInfo:
    return OperatorInfo(precedence, False, True, False, node_type)


def _unary(precedence: int, node_type: NodeType) -> OperatorInfo:
    return OperatorInfo(precedence, False, False, True, node_type)


OPERATORS: Mapping[TokenType, OperatorInfo] = MappingProxyType({
    TokenType.OP_NEGATE: _unary(14, NodeType.NEGATE),
    TokenType.OP_NOT: _unary(14, NodeType.NOT),
    TokenType.OP_MULTIPLY: _binary(13, NodeType.MUL),
    TokenType.OP_DIVIDE: _binary(13, NodeType.DIV),
    TokenType.OP_MOD: _binary(13, NodeType.MOD),
    TokenType.OP_ADD: _binary(12, NodeType.ADD),
    TokenType.OP_SUBTRACT: _binary(12, NodeType.SUB),
    TokenType.OP_LESS: _binary(10, NodeType.LSS),
    TokenType.OP_LESSEQUAL: _binary(10, NodeType.LEQ),
    TokenType.OP_GREATER: _binary(10, NodeType.GTR),
    TokenType.OP_GREATEREQUAL: _binary(10, NodeType.GEQ),
    TokenType.OP_EQUAL: _binary(9, NodeType.EQL),
    TokenType.OP_NOTEQUAL: _binary(9, NodeType.NEQ),
    TokenType.OP_AND: _binary(5, NodeType.AND),
    TokenType.OP_OR: _binary(4, NodeType.OR),
})

# Source spelling of every kind whose text is fixed
_SYMBOLS = {
    TokenType.OP_MULTIPLY: "*",
    TokenType.OP_DIVIDE: "/",
    TokenType.OP_MOD: "%",
    TokenType.OP_ADD: "+",
    TokenType.OP_SUBTRACT: "-",
    TokenType.OP_NEGATE: "-",
    TokenType.OP_NOT: "!",
    TokenType.OP_LESS: "<",
    TokenType.OP_LESSEQUAL: "<=",
    TokenType.OP_GREATER: ">",
    TokenType.OP_GREATEREQUAL: ">=",
    TokenType.OP_EQUAL: "==",
    TokenType.OP_NOTEQUAL: "!=",
    TokenType.OP_ASSIGN: "=",
    TokenType.OP_AND: "&&",
    TokenType.OP_OR: "||",
    TokenType.KEYWORD_IF: "if",
    TokenType.KEYWORD_ELSE: "else",
    TokenType.KEYWORD_WHILE: "while",
    TokenType.KEYWORD_PRINT: "print",
    TokenType.KEYWORD_PUTC: "putc",
    TokenType.LEFT_PAREN: "(",
    TokenType.RIGHT_PAREN: ")",
    TokenType.LEFT_BRACE: "{",
    TokenType.RIGHT_BRACE: "}",
    TokenType.SEMICOLON: ";",
    TokenType.COMMA: ",",
    TokenType.END_OF_INPUT: "",
}


@dataclass(frozen=True)
class Token:
    """Represents a token in the source code.

    Attributes:
        type: The token type
        value: Digits for Integer, the name for Identifier, the unquoted
            contents for String, the keyword text for keywords, else None
        lineno: Line number (1-indexed)
        col_offset: Column of the first character (1 for the start of a line)
    """
    type: TokenType
    value: Optional[str]
    lineno: int
    col_offset: int

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, line={self.lineno}, col={self.col_offset})"

    @property
    def lexeme(self) -> str:
        """Significant source text of the token."""
        if self.type is TokenType.STRING:
            return f'"{self.value}"'
        if self.value is not None:
            return self.value
        return _SYMBOLS[self.type]


KEYWORDS: Mapping[str, TokenType] = MappingProxyType({
    "if": TokenType.KEYWORD_IF,
    "else": TokenType.KEYWORD_ELSE,
    "while": TokenType.KEYWORD_WHILE,
    "print": TokenType.KEYWORD_PRINT,
    "putc": TokenType.KEYWORD_PUTC,
})

_WHITESPACE = frozenset(" \t\n\r\f\v")
_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)
_ALNUM = _LETTERS | _DIGITS


class SourceCursor:
    """Scan position over a source string.

    ``current_char`` is None once the end of input is reached. ``peek()``
    looks at the following character without consuming it, so a lookahead
    that does not match is simply left unread.
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1
        self.current_char: Optional[str] = text[0] if text else None

    def advance(self) -> None:
        """Move to the next character, tracking line and column."""
        if self.current_char is None:
            return
        if self.current_char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        self.pos += 1
        if self.pos < len(self.text):
            self.current_char = self.text[self.pos]
        else:
            self.current_char = None

    def peek(self) -> Optional[str]:
        """Look at the next character without consuming it."""
        next_pos = self.pos + 1
        if next_pos < len(self.text):
            return self.text[next_pos]
        return None


def _describe(ch: Optional[str]) -> str:
    if ch is None:
        return "end of input"
    return f"({ord(ch)}) {ch!r}"


class Lexer:
    """Lexer for tokenizing toyc source code.

    Example:
        >>> lexer = Lexer()
        >>> [t.type.name for t in lexer.tokenize("x = 1;")]
        ['IDENTIFIER', 'OP_ASSIGN', 'INTEGER', 'SEMICOLON', 'END_OF_INPUT']
    """

    _KEYWORDS = KEYWORDS

    _SINGLE_CHAR_MAP = {
        "(": TokenType.LEFT_PAREN,
        ")": TokenType.RIGHT_PAREN,
        "{": TokenType.LEFT_BRACE,
        "}": TokenType.RIGHT_BRACE,
        ";": TokenType.SEMICOLON,
        ",": TokenType.COMMA,
        "*": TokenType.OP_MULTIPLY,
        "%": TokenType.OP_MOD,
        "+": TokenType.OP_ADD,
    }

    # first char -> (second char, kind if it follows, kind otherwise)
    _FOLLOW_MAP = {
        "<": ("=", TokenType.OP_LESSEQUAL, TokenType.OP_LESS),
        ">": ("=", TokenType.OP_GREATEREQUAL, TokenType.OP_GREATER),
        "=": ("=", TokenType.OP_EQUAL, TokenType.OP_ASSIGN),
        "!": ("=", TokenType.OP_NOTEQUAL, TokenType.OP_NOT),
    }

    _DOUBLED_MAP = {
        "&": TokenType.OP_AND,
        "|": TokenType.OP_OR,
    }

    def tokenize(self, source: str) -> List[Token]:
        """Tokenize source code.

        Args:
            source: Program text

        Returns:
            List of Token objects ending with END_OF_INPUT

        Raises:
            LexerError: If the source contains an invalid character or an
                unterminated literal or comment
        """
        return list(self.tokenize_iter(source))

    def tokenize_iter(self, source: str) -> Iterator[Token]:
        """Tokenize source code lazily.

        Each call starts a fresh scan; the generator stops right after
        yielding the END_OF_INPUT token.
        """
        cursor = SourceCursor(source)
        count = 0
        while True:
            token = self._next_token(cursor)
            count += 1
            if token.type is TokenType.END_OF_INPUT:
                logger.debug(f"Scanned {count} tokens over {cursor.line} lines")
                yield token
                break
            yield token

    def _next_token(self, cursor: SourceCursor) -> Token:
        while True:
            while cursor.current_char is not None and cursor.current_char in _WHITESPACE:
                cursor.advance()

            line, col = cursor.line, cursor.column
            ch = cursor.current_char

            if ch is None:
                return Token(TokenType.END_OF_INPUT, None, line, col)

            if ch in self._SINGLE_CHAR_MAP:
                cursor.advance()
                return Token(self._SINGLE_CHAR_MAP[ch], None, line, col)

            if ch in self._FOLLOW_MAP:
                return self._follow(cursor, *self._FOLLOW_MAP[ch], line, col)

            if ch in self._DOUBLED_MAP:
                return self._doubled(cursor, line, col)

            if ch == "-":
                return self._negate_or_subtract(cursor, line, col)

            if ch == "/":
                token = self._divide_or_comment(cursor, line, col)
                if token is None:
                    continue  # comment discarded
                return token

            if ch == '"':
                return self._string_literal(cursor, line, col)

            if ch == "'":
                return self._char_literal(cursor, line, col)

            if ch in _LETTERS:
                return self._identifier(cursor, line, col)

            if ch in _DIGITS:
                return self._integer(cursor, line, col)

            raise LexerError(f"Unrecognized character: {_describe(ch)}", line, col)

    def _follow(self, cursor: SourceCursor, expect: str, if_yes: TokenType,
                if_no: TokenType, line: int, col: int) -> Token:
        if cursor.peek() == expect:
            cursor.advance()
            cursor.advance()
            return Token(if_yes, None, line, col)
        cursor.advance()
        return Token(if_no, None, line, col)

    def _doubled(self, cursor: SourceCursor, line: int, col: int) -> Token:
        ch = cursor.current_char
        following = cursor.peek()
        if following != ch:
            raise LexerError(
                f"Expecting '{ch}{ch}', found {_describe(following)} after '{ch}'",
                line, col
            )
        cursor.advance()
        cursor.advance()
        return Token(self._DOUBLED_MAP[ch], None, line, col)

    def _negate_or_subtract(self, cursor: SourceCursor, line: int, col: int) -> Token:
        following = cursor.peek()
        cursor.advance()
        if following is not None and following in _WHITESPACE:
            return Token(TokenType.OP_SUBTRACT, None, line, col)
        return Token(TokenType.OP_NEGATE, None, line, col)

    def _divide_or_comment(self, cursor: SourceCursor, line: int, col: int) -> Optional[Token]:
        """Scan a division operator, or skip a comment and return None."""
        following = cursor.peek()
        cursor.advance()
        if following is not None and (following in _WHITESPACE or following in _ALNUM):
            return Token(TokenType.OP_DIVIDE, None, line, col)

        if following == "/":
            while cursor.current_char is not None and cursor.current_char != "\n":
                cursor.advance()
            return None

        # Block comment: everything up to and including the next '/'
        while cursor.current_char != "/":
            if cursor.current_char is None:
                raise LexerError("Unterminated comment", line, col)
            cursor.advance()
        cursor.advance()
        return None

    def _string_literal(self, cursor: SourceCursor, line: int, col: int) -> Token:
        cursor.advance()  # opening quote
        chars = []
        while cursor.current_char != '"':
            if cursor.current_char is None:
                raise LexerError("Unterminated string literal", line, col)
            chars.append(cursor.current_char)
            cursor.advance()
        cursor.advance()  # closing quote
        return Token(TokenType.STRING, "".join(chars), line, col)

    def _char_literal(self, cursor: SourceCursor, line: int, col: int) -> Token:
        cursor.advance()  # opening quote
        ch = cursor.current_char
        if ch is None:
            raise LexerError("Unterminated character literal", line, col)
        cursor.advance()
        # The closing quote is consumed without being checked
        if cursor.current_char is None:
            raise LexerError("Unterminated character literal", line, col)
        cursor.advance()
        return Token(TokenType.INTEGER, str(ord(ch)), line, col)

    def _identifier(self, cursor: SourceCursor, line: int, col: int) -> Token:
        chars = []
        while cursor.current_char is not None and cursor.current_char in _ALNUM:
            chars.append(cursor.current_char)
            cursor.advance()
        text = "".join(chars)
        return Token(self._KEYWORDS.get(text, TokenType.IDENTIFIER), text, line, col)

    def _integer(self, cursor: SourceCursor, line: int, col: int) -> Token:
        chars = []
        while cursor.current_char is not None and cursor.current_char in _DIGITS:
            chars.append(cursor.current_char)
            cursor.advance()
        return Token(TokenType.INTEGER, "".join(chars), line, col)

    def is_keyword(self, name: str) -> bool:
        """Check if a name is a keyword.

        Args:
            name: Identifier to check

        Returns:
            True if name is a keyword
        """
        return name in self._KEYWORDS

    def get_keyword_tokens(self) -> List[str]:
        """Get list of valid keywords.

        Returns:
            List of keyword strings
        """
        return sorted(self._KEYWORDS)


def tokenize(source: str) -> Iterator[Token]:
    """Lazily tokenize ``source``; the last token is END_OF_INPUT."""
    return Lexer().tokenize_iter(source)


def tokenize_source(source: str) -> List[Token]:
    """Convenience function to tokenize source code.

    Args:
        source: Program text

    Returns:
        List of Token objects
    """
    return Lexer().tokenize(source)
