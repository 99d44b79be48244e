# Copyright 2026 dfd-behavior Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the behavior line lexer."""

import pytest

from dfdbehavior.parser.lexer import LexerError, Token, TokenType, tokenize

# ###############
# Test Helpers
# ###############


def _tokens_no_eol(line: str) -> list[Token]:
    """Return all tokens except the terminal EOL token."""
    result = tokenize(line)
    assert result[-1].type == TokenType.EOL
    return result[:-1]


def _types(line: str) -> list[TokenType]:
    return [tok.type for tok in _tokens_no_eol(line)]


def _values(line: str) -> list[str]:
    return [tok.value for tok in _tokens_no_eol(line)]


# ###############
# EOL Handling
# ###############


class TestEol:
    def test_empty_line_produces_eol(self) -> None:
        tokens = tokenize("")
        assert tokens == [Token(TokenType.EOL, "", 0)]

    def test_eol_column_is_line_length(self) -> None:
        tokens = tokenize("abc")
        assert tokens[-1].column == 3


# ###############
# Keywords and Names
# ###############


class TestKeywords:
    @pytest.mark.parametrize(
        ("source", "expected_type"),
        [
            ("Forwarding", TokenType.FORWARDING),
            ("Assignment", TokenType.ASSIGNMENT),
            ("TRUE", TokenType.TRUE),
            ("FALSE", TokenType.FALSE),
        ],
    )
    def test_keyword(self, source: str, expected_type: TokenType) -> None:
        assert _types(source) == [expected_type]

    def test_keyword_prefix_is_a_name(self) -> None:
        assert _types("TRUEX") == [TokenType.NAME]

    def test_keywords_are_case_sensitive(self) -> None:
        assert _types("true") == [TokenType.NAME]

    def test_name_with_digits_and_underscores(self) -> None:
        assert _values("in_1_") == ["in_1_"]
        assert _types("9lives") == [TokenType.NAME]


# ###############
# Symbols
# ###############


class TestSymbols:
    def test_single_character_symbols(self) -> None:
        assert _types("(){};,.!") == [
            TokenType.LPAREN,
            TokenType.RPAREN,
            TokenType.LBRACE,
            TokenType.RBRACE,
            TokenType.SEMICOLON,
            TokenType.COMMA,
            TokenType.DOT,
            TokenType.NOT,
        ]

    def test_double_pipe_is_or(self) -> None:
        assert _types("a||b") == [TokenType.NAME, TokenType.OR, TokenType.NAME]

    def test_single_pipe(self) -> None:
        assert _types("a|b") == [TokenType.NAME, TokenType.PIPE, TokenType.NAME]

    def test_triple_pipe_is_or_then_pipe(self) -> None:
        assert _types("|||") == [TokenType.OR, TokenType.PIPE]

    def test_double_ampersand_is_and(self) -> None:
        assert _types("&&") == [TokenType.AND]

    def test_single_ampersand_is_an_error(self) -> None:
        with pytest.raises(LexerError) as exc_info:
            tokenize("a & b")
        assert exc_info.value.column == 2

    def test_unexpected_character(self) -> None:
        with pytest.raises(LexerError) as exc_info:
            tokenize("a.b = c")
        assert exc_info.value.column == 4


# ###############
# Whitespace and Columns
# ###############


class TestColumns:
    def test_whitespace_is_kept_as_a_single_token(self) -> None:
        tokens = _tokens_no_eol("a \t b")
        assert [t.type for t in tokens] == [TokenType.NAME, TokenType.WHITESPACE, TokenType.NAME]
        assert tokens[1].value == " \t "

    def test_columns_are_zero_based(self) -> None:
        tokens = _tokens_no_eol("Forwarding({in})")
        assert [(t.value, t.column) for t in tokens] == [
            ("Forwarding", 0),
            ("(", 10),
            ("{", 11),
            ("in", 12),
            ("}", 14),
            (")", 15),
        ]

    def test_token_end(self) -> None:
        token = _tokens_no_eol("  name")[1]
        assert token.column == 2
        assert token.end == 6
