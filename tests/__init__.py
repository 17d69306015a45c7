"""
Test suite for toyc.

This package contains unit tests for the lexer, the parser, the token
listing format, the AST dump and the front-end orchestrator.
"""
