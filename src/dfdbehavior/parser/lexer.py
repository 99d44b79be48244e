# Copyright 2026 dfd-behavior Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for a single line of output port behavior text.

Converts one behavior line into a sequence of tokens that carry their exact
0-based column, so that diagnostics can underline the offending text.
"""

import enum
from dataclasses import dataclass

# ###############
# Public Interface
# ###############


class TokenType(enum.Enum):
    """All token types produced by the behavior lexer."""

    # Keywords
    FORWARDING = "Forwarding"
    ASSIGNMENT = "Assignment"
    TRUE = "TRUE"
    FALSE = "FALSE"

    # Symbols and operators
    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"
    SEMICOLON = ";"
    COMMA = ","
    DOT = "."
    NOT = "!"
    OR = "||"
    AND = "&&"
    PIPE = "|"

    # Names
    NAME = "NAME"

    # Runs of whitespace are kept: the statement grammars only allow them at
    # specific places.
    WHITESPACE = "WHITESPACE"

    # End of line
    EOL = "EOL"


@dataclass(frozen=True)
class Token:
    """A lexical token with its position in the line.

    Attributes:
        type: The kind of token.
        value: The raw text of the token.
        column: 0-based column of the first character.
    """

    type: TokenType
    value: str
    column: int

    @property
    def end(self) -> int:
        """0-based column one past the last character of the token."""
        return self.column + len(self.value)


class LexerError(Exception):
    """Raised when the scanner encounters a character outside the behavior alphabet.

    Attributes:
        column: 0-based column of the offending character.
    """

    def __init__(self, message: str, column: int) -> None:
        super().__init__(f"Column {column}: {message}")
        self.column = column


# Token types that may be used as a name, e.g. an input called "TRUE" or a
# label type called "Assignment".
NAME_TYPES: frozenset[TokenType] = frozenset(
    {
        TokenType.NAME,
        TokenType.FORWARDING,
        TokenType.ASSIGNMENT,
        TokenType.TRUE,
        TokenType.FALSE,
    }
)


def tokenize(line: str) -> list[Token]:
    """Tokenize one line of behavior text.

    Returns a list of tokens. The final token is always an EOL token.
    Whitespace is returned as WHITESPACE tokens rather than skipped.

    Args:
        line: A single line of behavior text (without the newline).

    Returns:
        A list of Token objects ending with a single EOL token.

    Raises:
        LexerError: On characters that cannot start any token, e.g. a single '&'.
    """
    return _Lexer(line).tokenize()


def is_name_char(ch: str) -> bool:
    """Return True if *ch* may appear in a label type or label value name."""
    return ch.isascii() and (ch.isalnum() or ch == "_")


# ################
# Implementation
# ################

_KEYWORDS: dict[str, TokenType] = {
    "Forwarding": TokenType.FORWARDING,
    "Assignment": TokenType.ASSIGNMENT,
    "TRUE": TokenType.TRUE,
    "FALSE": TokenType.FALSE,
}

_SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    ";": TokenType.SEMICOLON,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "!": TokenType.NOT,
}


class _Lexer:
    """Internal scanner state machine."""

    def __init__(self, line: str) -> None:
        self._line = line
        self._pos = 0
        self._tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        """Run the scanner and return all tokens including the terminal EOL."""
        while self._pos < len(self._line):
            self._scan_token()
        self._tokens.append(Token(TokenType.EOL, "", self._pos))
        return self._tokens

    def _current(self) -> str:
        """Return the character at the current position, or '' at end of line."""
        if self._pos < len(self._line):
            return self._line[self._pos]
        return ""

    def _peek(self) -> str:
        """Return the character one position ahead, or '' at end of line."""
        if self._pos + 1 < len(self._line):
            return self._line[self._pos + 1]
        return ""

    def _emit(self, token_type: TokenType, length: int) -> None:
        start = self._pos
        self._pos += length
        self._tokens.append(Token(token_type, self._line[start : self._pos], start))

    def _scan_token(self) -> None:
        """Dispatch to the appropriate handler based on the current character."""
        ch = self._current()

        if ch in _SINGLE_CHAR_TOKENS:
            self._emit(_SINGLE_CHAR_TOKENS[ch], 1)
        elif ch == "|":
            if self._peek() == "|":
                self._emit(TokenType.OR, 2)
            else:
                self._emit(TokenType.PIPE, 1)
        elif ch == "&":
            if self._peek() == "&":
                self._emit(TokenType.AND, 2)
            else:
                raise LexerError("Unexpected character: '&'", self._pos)
        elif ch.isspace():
            self._scan_whitespace()
        elif is_name_char(ch):
            self._scan_name_or_keyword()
        else:
            raise LexerError(f"Unexpected character: {ch!r}", self._pos)

    def _scan_whitespace(self) -> None:
        start = self._pos
        while self._pos < len(self._line) and self._current().isspace():
            self._pos += 1
        self._tokens.append(Token(TokenType.WHITESPACE, self._line[start : self._pos], start))

    def _scan_name_or_keyword(self) -> None:
        """Scan a name and map it to a keyword token type if applicable."""
        start = self._pos
        while self._pos < len(self._line) and is_name_char(self._current()):
            self._pos += 1
        value = self._line[start : self._pos]
        token_type = _KEYWORDS.get(value, TokenType.NAME)
        self._tokens.append(Token(token_type, value, start))
