"""
Textual token listings.

A listing holds one token per line::

        1      1 Identifier      count
        1      7 Op_assign
        1      9 Integer             1
        1     10 Semicolon
        2      1 End_of_input

The fields are the line, the column, the kind name and, for Integer,
Identifier and String tokens only, the value. String values are written
between double quotes. ``read_tokens`` is the exact inverse of
``format_tokens`` for every string literal that does not contain a newline.
"""

from typing import Iterable, Iterator

from ..errors import ParseError, TokenKindNotFoundError
from .lexer import KEYWORDS, Token, TokenType

_VALUED_TYPES = frozenset({TokenType.INTEGER, TokenType.IDENTIFIER, TokenType.STRING})
_KEYWORD_TEXT = {token_type: text for text, token_type in KEYWORDS.items()}


def format_token(token: Token) -> str:
    """Render a single token as one listing line."""
    text = f"{token.lineno:5d}  {token.col_offset:5d} {str(token.type):<15s}"
    if token.type is TokenType.INTEGER:
        text += f"  {token.value:>4s}"
    elif token.type is TokenType.IDENTIFIER:
        text += f" {token.value}"
    elif token.type is TokenType.STRING:
        text += f' "{token.value}"'
    return text.rstrip()


def format_tokens(tokens: Iterable[Token]) -> str:
    """Render a token stream, one token per line."""
    return "\n".join(format_token(token) for token in tokens)


def lookup_token_type(name: str) -> TokenType:
    """Map a listing kind name back to its TokenType.

    Raises:
        TokenKindNotFoundError: If no kind has that exact name
    """
    try:
        return TokenType(name)
    except ValueError:
        raise TokenKindNotFoundError(f"Token not found: '{name}'")


def read_token(line: str) -> Token:
    """Parse one listing line back into a Token.

    Raises:
        TokenKindNotFoundError: If the kind name is unknown
        ParseError: If the line numbers are missing or malformed
    """
    fields = line.strip().split(None, 3)
    if len(fields) < 3:
        raise ParseError(f"Malformed token line: {line.strip()!r}")

    try:
        lineno = int(fields[0])
        col_offset = int(fields[1])
    except ValueError:
        raise ParseError(f"Malformed token position: {line.strip()!r}")

    token_type = lookup_token_type(fields[2])
    if token_type not in _VALUED_TYPES:
        # keywords keep their spelling, as the lexer emits them
        return Token(token_type, _KEYWORD_TEXT.get(token_type), lineno, col_offset)

    if len(fields) < 4:
        raise ParseError(f"Missing value for {token_type}", lineno, col_offset)
    value = fields[3]
    if token_type is TokenType.STRING:
        if len(value) < 2 or not (value.startswith('"') and value.endswith('"')):
            raise ParseError(f"String value must be quoted: {value!r}", lineno, col_offset)
        value = value[1:-1]
    return Token(token_type, value, lineno, col_offset)


def read_tokens(text: str) -> Iterator[Token]:
    """Lazily parse a listing, skipping blank lines.

    Lines break at newline characters only, so string values may hold form
    feeds and the other Unicode line separators.
    """
    for line in text.split("\n"):
        if line.strip():
            yield read_token(line)
