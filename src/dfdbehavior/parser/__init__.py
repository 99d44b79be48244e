# Copyright 2026 dfd-behavior Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexer, statement parser, term parser and token locator for behavior text."""

from dfdbehavior.parser.lexer import LexerError, Token, TokenType, tokenize
from dfdbehavior.parser.locator import Boundary, locate_first, locate_token
from dfdbehavior.parser.statements import (
    AssignmentStatement,
    BehaviorSyntaxError,
    BlankStatement,
    CommentStatement,
    ForwardingStatement,
    InputRef,
    LabelRef,
    Statement,
    StatementKind,
    UnknownStatement,
    classify_line,
    parse_assignment,
    parse_forwarding,
    parse_statement,
)
from dfdbehavior.parser.term import (
    LabelAccess,
    Term,
    TermElement,
    TermError,
    TermSymbol,
    iter_label_accesses,
    parse_term,
)

__all__ = [
    # Lexer
    "LexerError",
    "Token",
    "TokenType",
    "tokenize",
    # Locator
    "Boundary",
    "locate_first",
    "locate_token",
    # Statements
    "AssignmentStatement",
    "BehaviorSyntaxError",
    "BlankStatement",
    "CommentStatement",
    "ForwardingStatement",
    "InputRef",
    "LabelRef",
    "Statement",
    "StatementKind",
    "UnknownStatement",
    "classify_line",
    "parse_assignment",
    "parse_forwarding",
    "parse_statement",
    # Terms
    "LabelAccess",
    "Term",
    "TermElement",
    "TermError",
    "TermSymbol",
    "iter_label_accesses",
    "parse_term",
]
