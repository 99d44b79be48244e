# Copyright 2026 dfd-behavior Contributors
# SPDX-License-Identifier: Apache-2.0

"""Scanner for the boolean term of an assignment.

A term is a sequence of elements separated by optional whitespace::

    element := '!' | 'TRUE' | 'FALSE' | '||' | '&&' | '(' | ')' | label
    label   := NAME '.' NAME

The elements may come in any order; ``TRUE FALSE`` and ``&& TRUE`` are
accepted terms. Parenthesis balance is checked on the whole line before the
term is scanned.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from dfdbehavior.parser.lexer import NAME_TYPES, Token, TokenType

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class TermSymbol:
    """An operator, parenthesis or boolean constant of a term.

    Attributes:
        kind: The token type (NOT, TRUE, FALSE, OR, AND, LPAREN or RPAREN).
        value: The raw text of the symbol.
        column: 0-based column of the symbol in the line.
    """

    kind: TokenType
    value: str
    column: int


@dataclass(frozen=True)
class LabelAccess:
    """A ``Type.Value`` reference to a label of the label catalog.

    Attributes:
        label_type: Name of the label type.
        label_value: Text of the label value.
        column: 0-based column of the label type name in the line.
    """

    label_type: str
    label_value: str
    column: int

    @property
    def value_column(self) -> int:
        """0-based column of the label value name in the line."""
        return self.column + len(self.label_type) + 1


TermElement = TermSymbol | LabelAccess


@dataclass(frozen=True)
class Term:
    """A scanned term: its elements in source order."""

    elements: tuple[TermElement, ...]


class TermError(Exception):
    """Raised when a term contains something other than term elements.

    Attributes:
        column: 0-based column of the token where scanning failed.
    """

    def __init__(self, message: str, column: int) -> None:
        super().__init__(f"Column {column}: {message}")
        self.column = column


def parse_term(tokens: list[Token]) -> Term:
    """Scan the tokens of a term into a :class:`Term`.

    Args:
        tokens: The tokens of the term region. A trailing EOL token is
            optional; whitespace tokens are allowed.

    Returns:
        The scanned term.

    Raises:
        TermError: If the tokens hold no element, or hold a name that is not
            part of a ``Type.Value`` label access.
    """
    return _TermScanner(tokens).scan()


def iter_label_accesses(term: Term) -> Iterator[LabelAccess]:
    """Yield all label accesses of a term in source order."""
    for element in term.elements:
        if isinstance(element, LabelAccess):
            yield element


# ################
# Implementation
# ################

_SYMBOL_TYPES: frozenset[TokenType] = frozenset(
    {
        TokenType.NOT,
        TokenType.TRUE,
        TokenType.FALSE,
        TokenType.OR,
        TokenType.AND,
        TokenType.LPAREN,
        TokenType.RPAREN,
    }
)


class _TermScanner:
    """Walks the term tokens and groups ``NAME '.' NAME`` into label accesses."""

    def __init__(self, tokens: list[Token]) -> None:
        # Whitespace separates elements; adjacency inside a label access is
        # checked with the token columns instead.
        self._tokens = [t for t in tokens if t.type not in (TokenType.WHITESPACE, TokenType.EOL)]
        end = tokens[-1].end if tokens else 0
        self._tokens.append(Token(TokenType.EOL, "", end))
        self._pos = 0

    def scan(self) -> Term:
        elements: list[TermElement] = []
        while self._current().type != TokenType.EOL:
            elements.append(self._scan_element())
        if not elements:
            raise TermError("Empty term", self._current().column)
        return Term(tuple(elements))

    def _current(self) -> Token:
        return self._tokens[self._pos]

    def _peek(self) -> Token:
        idx = min(self._pos + 1, len(self._tokens) - 1)
        return self._tokens[idx]

    def _advance(self) -> Token:
        tok = self._tokens[self._pos]
        if self._pos < len(self._tokens) - 1:
            self._pos += 1
        return tok

    def _scan_element(self) -> TermElement:
        tok = self._current()
        # TRUE.x is a label access of a label type called TRUE.
        if tok.type in NAME_TYPES and self._peek().type == TokenType.DOT:
            return self._scan_label()
        if tok.type in _SYMBOL_TYPES:
            self._advance()
            return TermSymbol(tok.type, tok.value, tok.column)
        raise TermError(f"Unexpected token {tok.value!r} in term", tok.column)

    def _scan_label(self) -> LabelAccess:
        """Scan: NAME '.' NAME, written without any whitespace."""
        type_tok = self._advance()
        dot = self._advance()
        value_tok = self._current()
        if value_tok.type not in NAME_TYPES or dot.end != value_tok.column or type_tok.end != dot.column:
            raise TermError("Incomplete label access", dot.column)
        self._advance()
        if self._current().type == TokenType.DOT:
            raise TermError("Label access with more than two segments", self._current().column)
        return LabelAccess(type_tok.value, value_tok.value, type_tok.column)
