"""
Parser module for toyc.

This module provides a recursive descent parser over the lexer's token
stream. Statements are parsed by dispatching on the current token;
expressions use precedence climbing driven by the operator table in
``lexer.OPERATORS``. The result is a binary-tree AST (see ``toyc.ir``).
"""

import logging
from contextlib import contextmanager
from typing import Iterable, Iterator, Optional

from ..errors import ParseError
from ..ir.nodes import Node, NodeType, make_leaf, make_node
from ..utils.settings import DEFAULT_SETTINGS, Settings
from .lexer import Lexer, Token, TokenType

logger = logging.getLogger(__name__)

_UNARY_PRECEDENCE = TokenType.OP_NEGATE.info.precedence


class Parser:
    """Recursive descent parser for toyc.

    Consumes tokens lazily with a single token of lookahead and never
    backtracks. Any malformed input raises ParseError immediately.

    Example:
        >>> parser = Parser()
        >>> tree = parser.parse_source("x = 1 + 2;")
        >>> tree.right.type
        <NodeType.ASSIGN: 'Assign'>
    """

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize the parser.

        Args:
            settings: Front-end settings, DEFAULT_SETTINGS when omitted
        """
        self._settings = settings or DEFAULT_SETTINGS
        self._lexer = Lexer()
        self._tokens: Iterator[Token] = iter(())
        self._token: Optional[Token] = None
        self._depth: int = 0

    def parse(self, tokens: Iterable[Token]) -> Optional[Node]:
        """Parse a token stream into an AST.

        Args:
            tokens: Tokens ending with END_OF_INPUT, as produced by the lexer

        Returns:
            The root Sequence node, or None for an empty program

        Raises:
            ParseError: If the tokens do not form a valid program
        """
        self._tokens = iter(tokens)
        self._token = None
        self._depth = 0
        self._advance()

        tree = None
        count = 0
        while self._token.type is not TokenType.END_OF_INPUT:
            tree = make_node(NodeType.SEQUENCE, tree, self._stmt())
            count += 1

        logger.debug(f"Parsed {count} top-level statements")
        return tree

    def parse_source(self, source: str) -> Optional[Node]:
        """Tokenize and parse program text.

        Raises:
            LexerError: If tokenization fails
            ParseError: If parsing fails
        """
        return self.parse(self._lexer.tokenize_iter(source))

    # ---- token cursor ----

    def _advance(self) -> Token:
        """Move to the next token and return the one just consumed."""
        previous = self._token
        token = next(self._tokens, None)
        if token is None:
            lineno = previous.lineno if previous else 0
            col_offset = previous.col_offset if previous else 0
            raise ParseError(
                f"Token stream ended before '{TokenType.END_OF_INPUT}'",
                lineno, col_offset
            )
        self._token = token
        return previous

    def _match(self, token_type: TokenType) -> bool:
        return self._token.type is token_type

    def _expect(self, context: str, token_type: TokenType) -> Token:
        """Consume a token of the given type or fail."""
        if self._match(token_type):
            return self._advance()
        raise self._error(f"{context}: Expecting '{token_type}', found: '{self._token.type}'")

    def _error(self, message: str) -> ParseError:
        return ParseError(message, self._token.lineno, self._token.col_offset)

    @contextmanager
    def _nested(self):
        self._depth += 1
        try:
            if self._depth > self._settings.max_nesting_depth:
                raise self._error(
                    f"Nesting exceeds the limit of {self._settings.max_nesting_depth}"
                )
            yield
        finally:
            self._depth -= 1

    # ---- expressions ----

    def _paren_expr(self) -> Node:
        self._expect("Expression", TokenType.LEFT_PAREN)
        node = self._expr(0)
        self._expect("Expression", TokenType.RIGHT_PAREN)
        return node

    def _expr(self, min_precedence: int) -> Node:
        """Parse an expression whose operators bind at least ``min_precedence``."""
        with self._nested():
            result = self._primary()

            while True:
                op = self._token.type.info
                if not op.is_binary or op.precedence < min_precedence:
                    break
                self._advance()
                next_precedence = op.precedence if op.right_assoc else op.precedence + 1
                result = make_node(op.node_type, result, self._expr(next_precedence))

            return result

    def _primary(self) -> Node:
        token = self._token
        kind = token.type

        if kind is TokenType.LEFT_PAREN:
            return self._paren_expr()

        if kind in (TokenType.OP_SUBTRACT, TokenType.OP_NEGATE, TokenType.OP_ADD):
            self._advance()
            operand = self._expr(_UNARY_PRECEDENCE)
            if kind is TokenType.OP_ADD:
                return operand
            return make_node(NodeType.NEGATE, operand)

        if kind is TokenType.OP_NOT:
            self._advance()
            return make_node(NodeType.NOT, self._expr(_UNARY_PRECEDENCE))

        if kind is TokenType.IDENTIFIER:
            self._advance()
            return make_leaf(NodeType.IDENT, token.value)

        if kind is TokenType.INTEGER:
            self._advance()
            return make_leaf(NodeType.INTEGER, token.value)

        raise self._error(f"Expecting a primary expression, found: '{kind}'")

    # ---- statements ----

    def _stmt(self) -> Optional[Node]:
        """Parse one statement. ``;`` and end of input produce None."""
        with self._nested():
            kind = self._token.type

            if kind is TokenType.KEYWORD_IF:
                return self._if_stmt()
            elif kind is TokenType.KEYWORD_PUTC:
                self._advance()
                node = make_node(NodeType.PRTC, self._paren_expr())
                self._expect(str(TokenType.KEYWORD_PUTC), TokenType.SEMICOLON)
                return node
            elif kind is TokenType.KEYWORD_PRINT:
                return self._print_stmt()
            elif kind is TokenType.SEMICOLON:
                self._advance()
                return None
            elif kind is TokenType.IDENTIFIER:
                return self._assign_stmt()
            elif kind is TokenType.KEYWORD_WHILE:
                self._advance()
                condition = self._paren_expr()
                return make_node(NodeType.WHILE, condition, self._stmt())
            elif kind is TokenType.LEFT_BRACE:
                return self._block()
            elif kind is TokenType.END_OF_INPUT:
                return None

            raise self._error(f"Expecting start of statement, found: '{kind}'")

    def _if_stmt(self) -> Node:
        self._advance()
        condition = self._paren_expr()
        then_branch = self._stmt()
        else_branch = None
        if self._match(TokenType.KEYWORD_ELSE):
            self._advance()
            else_branch = self._stmt()
        return make_node(NodeType.IF, condition,
                         make_node(NodeType.IF, then_branch, else_branch))

    def _print_stmt(self) -> Node:
        context = str(TokenType.KEYWORD_PRINT)
        self._advance()
        self._expect(context, TokenType.LEFT_PAREN)

        tree = None
        while True:
            if self._match(TokenType.STRING):
                text = self._advance().value
                item = make_node(NodeType.PRTS, make_leaf(NodeType.STRING, text))
            else:
                item = make_node(NodeType.PRTI, self._expr(0))
            tree = make_node(NodeType.SEQUENCE, tree, item)

            if not self._match(TokenType.COMMA):
                break
            self._advance()

        self._expect(context, TokenType.RIGHT_PAREN)
        self._expect(context, TokenType.SEMICOLON)
        return tree

    def _assign_stmt(self) -> Node:
        context = str(TokenType.OP_ASSIGN)
        target = make_leaf(NodeType.IDENT, self._advance().value)
        self._expect(context, TokenType.OP_ASSIGN)
        value = self._expr(0)
        self._expect(context, TokenType.SEMICOLON)
        return make_node(NodeType.ASSIGN, target, value)

    def _block(self) -> Optional[Node]:
        self._advance()
        tree = None
        while not (self._match(TokenType.RIGHT_BRACE) or self._match(TokenType.END_OF_INPUT)):
            tree = make_node(NodeType.SEQUENCE, tree, self._stmt())
        self._expect(str(TokenType.LEFT_BRACE), TokenType.RIGHT_BRACE)
        return tree


def parse(tokens: Iterable[Token]) -> Optional[Node]:
    """Parse a token stream into an AST (None for an empty program)."""
    return Parser().parse(tokens)


def parse_source(source: str) -> Optional[Node]:
    """Convenience function to tokenize and parse program text."""
    return Parser().parse_source(source)
