"""
Configuration settings for toyc.

This module contains default configuration values used by the front end.
"""

from dataclasses import dataclass

# The parser spends up to three Python frames per nesting level, so this keeps
# the deepest accepted program well inside the interpreter's recursion limit.
MAX_NESTING_DEPTH = 250


@dataclass
class Settings:
    """Front-end settings.

    Attributes:
        max_nesting_depth: Deepest statement/expression nesting the parser
            accepts before reporting a parse error, at most
            ``MAX_NESTING_DEPTH``
    """
    max_nesting_depth: int = 200

    def __post_init__(self):
        if not 1 <= self.max_nesting_depth <= MAX_NESTING_DEPTH:
            raise ValueError(
                f"max_nesting_depth must be between 1 and {MAX_NESTING_DEPTH}, "
                f"got {self.max_nesting_depth}"
            )


# Global default settings instance
DEFAULT_SETTINGS = Settings()
