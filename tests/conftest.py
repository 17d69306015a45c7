"""
Pytest configuration and fixtures for toyc tests.
"""

import pytest


@pytest.fixture
def lexer():
    """Provide a Lexer instance."""
    from toyc.frontend import Lexer
    return Lexer()


@pytest.fixture
def parser():
    """Provide a Parser instance."""
    from toyc.frontend import Parser
    return Parser()


@pytest.fixture
def frontend():
    """Provide a Frontend instance."""
    from toyc.core import Frontend
    return Frontend()


@pytest.fixture
def count_program():
    """A small loop program exercising most of the grammar."""
    return (
        "count = 1;\n"
        "while (count < 10) {\n"
        "    print(\"count is: \", count, \"\\n\");\n"
        "    count = count + 1;\n"
        "}\n"
    )
