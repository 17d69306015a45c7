"""
Front-end orchestration for toyc.

This module provides the high-level Frontend class that runs the lexer and
parser over in-memory text and reports the outcome.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from ..errors import CompileError
from ..frontend.lexer import Lexer, Token
from ..frontend.parser import Parser
from ..frontend.token_format import format_tokens, read_tokens
from ..ir.nodes import Node
from ..ir.printer import dump_ast
from ..utils.settings import DEFAULT_SETTINGS, Settings

logger = logging.getLogger(__name__)


@dataclass
class FrontendResult:
    """Result of running the front end over one program.

    Attributes:
        success: Whether lexing and parsing both succeeded
        tokens: The full token stream (empty on failure)
        ast: The AST root (None on failure or for an empty program)
        error_message: Error message if the run failed
    """
    success: bool
    tokens: List[Token] = field(default_factory=list)
    ast: Optional[Node] = None
    error_message: Optional[str] = None


class Frontend:
    """Runs the lexer and parser in sequence.

    Example:
        >>> frontend = Frontend()
        >>> result = frontend.run('print("hi", 1 + 1);')
        >>> result.success
        True
    """

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize the front end.

        Args:
            settings: Front-end settings, DEFAULT_SETTINGS when omitted
        """
        self._settings = settings or DEFAULT_SETTINGS
        self._lexer = Lexer()
        self._parser = Parser(self._settings)

    def tokenize(self, source: str) -> List[Token]:
        """Tokenize program text.

        Raises:
            LexerError: If tokenization fails
        """
        return self._lexer.tokenize(source)

    def parse(self, tokens: Iterable[Token]) -> Optional[Node]:
        """Parse a token stream.

        Raises:
            ParseError: If parsing fails
        """
        return self._parser.parse(tokens)

    def parse_source(self, source: str) -> Optional[Node]:
        """Tokenize and parse program text.

        Raises:
            LexerError: If tokenization fails
            ParseError: If parsing fails
        """
        return self._parser.parse_source(source)

    def lex_listing(self, source: str) -> str:
        """Tokenize program text and render the token listing."""
        return format_tokens(self._lexer.tokenize_iter(source))

    def parse_listing(self, listing: str) -> str:
        """Read a token listing, parse it and render the AST dump.

        Raises:
            TokenKindNotFoundError: If the listing names an unknown kind
            ParseError: If the listing is malformed or parsing fails
        """
        return dump_ast(self._parser.parse(read_tokens(listing)))

    def run(self, source: str) -> FrontendResult:
        """Lex and parse program text, capturing the first error.

        Args:
            source: Program text

        Returns:
            FrontendResult: tokens and AST on success, only the error
            message on failure
        """
        try:
            tokens = self._lexer.tokenize(source)
            ast = self._parser.parse(tokens)
        except CompileError as e:
            logger.warning(f"Front end failed: {e}")
            return FrontendResult(
                success=False,
                error_message=str(e)
            )

        return FrontendResult(
            success=True,
            tokens=tokens,
            ast=ast
        )
