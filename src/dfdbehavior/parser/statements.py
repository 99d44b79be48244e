# Copyright 2026 dfd-behavior Contributors
# SPDX-License-Identifier: Apache-2.0

"""Statement classification and statement-level parsing of behavior lines.

Each line of a behavior text holds at most one statement::

    Forwarding({in1, in2})
    Assignment({in1};Sensitivity.Personal && !TRUE;{Sensitivity.Public})

The parsers here only check the statement structure. Whether the referenced
inputs and labels exist is decided by the validators in
:mod:`dfdbehavior.validation`.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import NoReturn

from dfdbehavior.parser.lexer import NAME_TYPES, LexerError, Token, TokenType, tokenize

# ###############
# Public Interface
# ###############

FORWARDING_TEMPLATE_MESSAGE = "invalid forwarding(Template:Forwarding({in_ports})"
ASSIGNMENT_TEMPLATE_MESSAGE = "invalid assignment(Template:Assignment({in_ports}; term; {out_label})"


class StatementKind(enum.Enum):
    """The kind of statement a line holds, decided from its prefix alone."""

    BLANK = "blank"
    COMMENT = "comment"
    FORWARDING = "forwarding"
    ASSIGNMENT = "assignment"
    UNKNOWN = "unknown"


class BehaviorSyntaxError(Exception):
    """Raised when a behavior line is structurally invalid.

    Structural errors end the validation of the line they occur in, so
    exactly one diagnostic is produced from it.

    Attributes:
        message: The diagnostic message.
        col_start: 0-based first column of the offending text, or None for
            the whole line.
        col_end: 0-based column one past the offending text, or None for the
            whole line.
    """

    def __init__(self, message: str, col_start: int | None = None, col_end: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.col_start = col_start
        self.col_end = col_end


@dataclass(frozen=True)
class InputRef:
    """An input name as written in an input list.

    Attributes:
        name: The trimmed input name. Empty for a missing element, e.g. the
            one after the trailing comma in ``{a,}``.
        column: 0-based column of the name (or of the gap for empty names).
    """

    name: str
    column: int


@dataclass(frozen=True)
class LabelRef:
    """A dotted label reference in the output list of an assignment.

    Attributes:
        segments: The dot-separated parts. Well-formed references have
            exactly two (type and value).
        column: 0-based column of the label type name.
    """

    segments: tuple[str, ...]
    column: int

    @property
    def label_type(self) -> str:
        return self.segments[0]

    @property
    def label_value(self) -> str:
        """The label value text, empty for a bare ``Type`` or ``Type.``."""
        return self.segments[1] if len(self.segments) > 1 else ""

    @property
    def text(self) -> str:
        return ".".join(self.segments)


@dataclass(frozen=True)
class BlankStatement:
    pass


@dataclass(frozen=True)
class CommentStatement:
    text: str


@dataclass(frozen=True)
class UnknownStatement:
    text: str


@dataclass(frozen=True)
class ForwardingStatement:
    """``Forwarding({in1, in2})``.

    Attributes:
        inputs: The list elements in order, including empty ones.
        commas: 0-based columns of the separating commas.
        list_start: Column just after the opening brace.
        list_end: Column of the closing brace.
    """

    inputs: tuple[InputRef, ...]
    commas: tuple[int, ...]
    list_start: int
    list_end: int


@dataclass(frozen=True)
class AssignmentStatement:
    """``Assignment({inputs};term;{outputs})``.

    The term is kept unparsed; see :func:`dfdbehavior.parser.term.parse_term`.

    Attributes:
        inputs: Input names of the input list (never empty strings).
        term_tokens: Tokens between the two semicolons.
        term_column: Column just after the first semicolon.
        term_text: The raw text between the two semicolons.
        outputs: The label references of the output list.
        inputs_start: Column just after the opening brace of the input list.
        inputs_end: Column of the closing brace of the input list.
    """

    inputs: tuple[InputRef, ...]
    term_tokens: tuple[Token, ...]
    term_column: int
    term_text: str
    outputs: tuple[LabelRef, ...]
    inputs_start: int
    inputs_end: int


Statement = (
    BlankStatement | CommentStatement | ForwardingStatement | AssignmentStatement | UnknownStatement
)


def classify_line(line: str) -> StatementKind:
    """Classify a line by its prefix. The line is not trimmed."""
    if line == "":
        return StatementKind.BLANK
    if line.startswith("#") or line.startswith("//"):
        return StatementKind.COMMENT
    if line.startswith("Forwarding"):
        return StatementKind.FORWARDING
    if line.startswith("Assignment"):
        return StatementKind.ASSIGNMENT
    return StatementKind.UNKNOWN


def parse_forwarding(line: str, *, min_input_name_length: int = 1) -> ForwardingStatement:
    """Parse ``Forwarding({ element (, element)* })``.

    Elements may be empty and may be surrounded by whitespace; empty elements
    are reported by the forwarding validator, not here.

    Raises:
        BehaviorSyntaxError: With the forwarding template message if the line
            does not have the structure of a forwarding statement.
    """
    return _StatementParser(line, FORWARDING_TEMPLATE_MESSAGE, min_input_name_length).parse_forwarding()


def parse_assignment(line: str, *, min_input_name_length: int = 1) -> AssignmentStatement:
    """Parse ``Assignment({InputList?};Term;{OutputList?})`` followed by one or more ``)``.

    Whitespace is only allowed after list commas and inside the term. The
    term region may only contain term tokens; it is not parsed here.

    Raises:
        BehaviorSyntaxError: With the assignment template message if the line
            does not have the structure of an assignment statement.
    """
    return _StatementParser(line, ASSIGNMENT_TEMPLATE_MESSAGE, min_input_name_length).parse_assignment()


def parse_statement(line: str, *, min_input_name_length: int = 1) -> Statement:
    """Classify *line* and parse it into a statement.

    Raises:
        BehaviorSyntaxError: If a forwarding or assignment line is structurally
            invalid.
    """
    kind = classify_line(line)
    if kind is StatementKind.BLANK:
        return BlankStatement()
    if kind is StatementKind.COMMENT:
        return CommentStatement(line)
    if kind is StatementKind.FORWARDING:
        return parse_forwarding(line, min_input_name_length=min_input_name_length)
    if kind is StatementKind.ASSIGNMENT:
        return parse_assignment(line, min_input_name_length=min_input_name_length)
    return UnknownStatement(line)


# ################
# Implementation
# ################

# Tokens that may appear between the two semicolons of an assignment.
_TERM_TOKEN_TYPES: frozenset[TokenType] = NAME_TYPES | {
    TokenType.DOT,
    TokenType.NOT,
    TokenType.OR,
    TokenType.AND,
    TokenType.LPAREN,
    TokenType.RPAREN,
    TokenType.WHITESPACE,
}

# Tokens that may continue an input identifier once it has started.
_IDENTIFIER_TOKEN_TYPES: frozenset[TokenType] = NAME_TYPES | {TokenType.PIPE, TokenType.OR}


class _StatementParser:
    """Recursive-descent parser for a single statement line."""

    def __init__(self, line: str, template_message: str, min_input_name_length: int) -> None:
        self._line = line
        self._template = template_message
        self._min_length = min_input_name_length
        try:
            self._tokens = tokenize(line)
        except LexerError:
            self._fail()
        self._pos = 0

    # ------------------------------------------------------------------
    # Token access helpers
    # ------------------------------------------------------------------

    def _fail(self) -> NoReturn:
        raise BehaviorSyntaxError(self._template)

    def _current(self) -> Token:
        return self._tokens[self._pos]

    def _check(self, *types: TokenType) -> bool:
        return self._current().type in types

    def _advance(self) -> Token:
        tok = self._tokens[self._pos]
        if self._pos < len(self._tokens) - 1:
            self._pos += 1
        return tok

    def _expect(self, *types: TokenType) -> Token:
        if not self._check(*types):
            self._fail()
        return self._advance()

    def _skip_whitespace(self) -> None:
        while self._check(TokenType.WHITESPACE):
            self._advance()

    # ------------------------------------------------------------------
    # Forwarding
    # ------------------------------------------------------------------

    def parse_forwarding(self) -> ForwardingStatement:
        self._expect(TokenType.FORWARDING)
        self._expect(TokenType.LPAREN)
        list_start = self._expect(TokenType.LBRACE).end

        inputs: list[InputRef] = []
        commas: list[int] = []
        while True:
            self._skip_whitespace()
            if self._check(*NAME_TYPES):
                inputs.append(self._parse_input())
            else:
                inputs.append(InputRef("", self._current().column))
            self._skip_whitespace()
            if not self._check(TokenType.COMMA):
                break
            commas.append(self._advance().column)

        list_end = self._expect(TokenType.RBRACE).column
        self._expect(TokenType.RPAREN)
        self._expect(TokenType.EOL)
        return ForwardingStatement(tuple(inputs), tuple(commas), list_start, list_end)

    # ------------------------------------------------------------------
    # Assignment
    # ------------------------------------------------------------------

    def parse_assignment(self) -> AssignmentStatement:
        self._expect(TokenType.ASSIGNMENT)
        self._expect(TokenType.LPAREN)
        inputs_start = self._expect(TokenType.LBRACE).end
        inputs = self._parse_input_list()
        inputs_end = self._expect(TokenType.RBRACE).column

        term_column = self._expect(TokenType.SEMICOLON).end
        term_tokens: list[Token] = []
        while not self._check(TokenType.SEMICOLON, TokenType.EOL):
            if not self._check(*_TERM_TOKEN_TYPES):
                self._fail()
            term_tokens.append(self._advance())
        term_end = self._expect(TokenType.SEMICOLON).column

        self._expect(TokenType.LBRACE)
        outputs = self._parse_output_list()
        self._expect(TokenType.RBRACE)
        self._expect(TokenType.RPAREN)
        while self._check(TokenType.RPAREN):
            self._advance()
        self._expect(TokenType.EOL)

        return AssignmentStatement(
            inputs=tuple(inputs),
            term_tokens=tuple(term_tokens),
            term_column=term_column,
            term_text=self._line[term_column:term_end],
            outputs=tuple(outputs),
            inputs_start=inputs_start,
            inputs_end=inputs_end,
        )

    def _parse_input_list(self) -> list[InputRef]:
        """Parse: [ input (',' WS* input)* ]"""
        if self._check(TokenType.RBRACE):
            return []
        inputs = [self._parse_input()]
        while self._check(TokenType.COMMA):
            self._advance()
            self._skip_whitespace()
            inputs.append(self._parse_input())
        return inputs

    def _parse_output_list(self) -> list[LabelRef]:
        """Parse: [ label (',' WS* label)* ]"""
        if self._check(TokenType.RBRACE):
            return []
        outputs = [self._parse_label_ref()]
        while self._check(TokenType.COMMA):
            self._advance()
            self._skip_whitespace()
            outputs.append(self._parse_label_ref())
        return outputs

    # ------------------------------------------------------------------
    # Names
    # ------------------------------------------------------------------

    def _parse_input(self) -> InputRef:
        """Parse an input identifier: a name followed by any names and pipes.

        Pipes are part of input names, so ``a||b`` is a single input here.
        """
        first = self._expect(*NAME_TYPES)
        end = first.end
        while self._check(*_IDENTIFIER_TOKEN_TYPES):
            end = self._advance().end
        name = self._line[first.column : end]
        if len(name) < self._min_length:
            self._fail()
        return InputRef(name, first.column)

    def _parse_label_ref(self) -> LabelRef:
        """Parse: NAME ('.' NAME?)*"""
        first = self._expect(*NAME_TYPES)
        segments = [first.value]
        while self._check(TokenType.DOT):
            self._advance()
            if self._check(*NAME_TYPES):
                segments.append(self._advance().value)
            else:
                segments.append("")
        return LabelRef(tuple(segments), first.column)
