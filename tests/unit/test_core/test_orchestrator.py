"""
Unit tests for the Frontend orchestrator.
"""

import pytest
from toyc.core import Frontend, FrontendResult
from toyc.errors import CompileError, LexerError, ParseError, TokenKindNotFoundError
from toyc.frontend import TokenType
from toyc.ir import NodeType
from toyc.utils import MAX_NESTING_DEPTH, Settings


class TestFrontendRun:
    """Tests for Frontend.run()."""

    def test_success(self, frontend):
        result = frontend.run('print("hi", 1 + 1);')
        assert isinstance(result, FrontendResult)
        assert result.success
        assert result.error_message is None
        assert result.tokens[-1].type == TokenType.END_OF_INPUT
        assert result.ast.right.type == NodeType.SEQUENCE

    def test_empty_program(self, frontend):
        result = frontend.run("")
        assert result.success
        assert result.ast is None
        assert len(result.tokens) == 1

    def test_lexer_failure(self, frontend):
        result = frontend.run("x = 1 & 2;")
        assert not result.success
        assert result.tokens == []
        assert result.ast is None
        assert result.error_message.endswith("in line 1, pos 7")

    def test_parse_failure(self, frontend):
        result = frontend.run("x = 1")
        assert not result.success
        assert result.tokens == []
        assert "Expecting 'Semicolon'" in result.error_message

    def test_settings_reach_parser(self):
        frontend = Frontend(Settings(max_nesting_depth=3))
        result = frontend.run("{{{{ x = 1; }}}}")
        assert not result.success
        assert "Nesting" in result.error_message

    @pytest.mark.parametrize("depth", [0, MAX_NESTING_DEPTH + 1, 10 ** 6])
    def test_nesting_depth_out_of_range(self, depth):
        with pytest.raises(ValueError, match="max_nesting_depth must be between"):
            Settings(max_nesting_depth=depth)

    def test_deepest_nesting_fails_cleanly(self):
        """Past the largest allowed limit the result is a parse failure."""
        frontend = Frontend(Settings(max_nesting_depth=MAX_NESTING_DEPTH))
        depth = MAX_NESTING_DEPTH + 50
        result = frontend.run("x = " + "(" * depth + "1" + ")" * depth + ";")
        assert not result.success
        assert f"limit of {MAX_NESTING_DEPTH}" in result.error_message


class TestFrontendListings:
    """Tests for the token listing and AST dump helpers."""

    def test_lex_listing(self, frontend):
        listing = frontend.lex_listing("putc(65);\n")
        assert listing.splitlines()[0] == "    1      1 Keyword_putc"
        assert listing.splitlines()[-1] == "    2      1 End_of_input"

    def test_listing_pipeline(self, frontend, count_program):
        listing = frontend.lex_listing(count_program)
        from toyc.ir import dump_ast
        assert frontend.parse_listing(listing) == dump_ast(frontend.parse_source(count_program))

    def test_listing_pipeline_with_line_separator(self, frontend):
        source = 'print("a\u2028b");'
        assert "a\u2028b" in frontend.parse_listing(frontend.lex_listing(source))

    def test_parse_listing_unknown_kind(self, frontend):
        with pytest.raises(TokenKindNotFoundError):
            frontend.parse_listing("    1      1 Keyword_for\n    1      4 End_of_input\n")

    def test_parse_listing_error(self, frontend):
        with pytest.raises(ParseError):
            frontend.parse_listing("    1      1 Semicolon\n")

    def test_tokenize_and_parse(self, frontend):
        tokens = frontend.tokenize("x = 2;")
        assert frontend.parse(tokens).right.left.value == "x"


class TestErrors:
    """Tests for error formatting."""

    def test_positional_message(self):
        error = LexerError("bad", 3, 4)
        assert str(error) == "bad in line 3, pos 4"

    @pytest.mark.parametrize("lineno,col", [(0, 0), (-1, -1), (3, 0)])
    def test_non_positional_message(self, lineno, col):
        assert str(ParseError("No args", lineno, col)) == "No args"

    def test_hierarchy(self):
        for cls in (LexerError, ParseError, TokenKindNotFoundError):
            assert issubclass(cls, CompileError)
