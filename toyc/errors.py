"""
Exception types for toyc.

Every failure in the front end is fatal: the first error raised ends the run
and no partial token stream or AST is returned.
"""


class CompileError(Exception):
    """Base class for errors raised while lexing or parsing.

    Attributes:
        message: Human-readable description of the problem
        lineno: Line number (1-indexed), 0 when unknown
        col_offset: Column within the line, 0 when unknown
    """

    def __init__(self, message: str, lineno: int = 0, col_offset: int = 0):
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.lineno > 0 and self.col_offset > 0:
            return f"{self.message} in line {self.lineno}, pos {self.col_offset}"
        return self.message


class LexerError(CompileError):
    """Exception raised for lexical errors."""


class ParseError(CompileError):
    """Exception raised for parsing errors."""


class TokenKindNotFoundError(CompileError):
    """Raised when a token listing names a kind that does not exist."""
