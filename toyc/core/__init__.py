"""
Core module for toyc.

This module contains the orchestration that runs the lexer and parser
together.
"""

from .frontend import Frontend, FrontendResult

__all__ = [
    "Frontend",
    "FrontendResult",
]
