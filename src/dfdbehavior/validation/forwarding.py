# Copyright 2026 dfd-behavior Contributors
# SPDX-License-Identifier: Apache-2.0

"""Validation of ``Forwarding({...})`` statements."""

from __future__ import annotations

from dfdbehavior.parser.locator import Boundary, locate_first, locate_token
from dfdbehavior.parser.statements import BehaviorSyntaxError, ForwardingStatement, parse_forwarding
from dfdbehavior.validation.diagnostics import Diagnostic

# ###############
# Public Interface
# ###############


def validate_forwarding(
    line: str,
    line_number: int,
    available_inputs: list[str],
    *,
    min_input_name_length: int = 1,
) -> list[Diagnostic]:
    """Validate one forwarding line.

    Checks are applied as a cascade; the first check that fails decides the
    result of the line:

    1. The line has the structure ``Forwarding({in1, in2, ...})``.
    2. At least one input is listed.
    3. No element is empty (e.g. after a trailing comma).
    4. No input is listed twice. Every occurrence of a duplicated input is
       reported.
    5. Every input is one of *available_inputs*.

    Args:
        line: The line text.
        line_number: 0-based number of the line in the behavior text.
        available_inputs: Input names of the node owning the port.
        min_input_name_length: Shortest accepted input name.

    Returns:
        The diagnostics of the line; empty if the line is valid.
    """
    try:
        statement = parse_forwarding(line, min_input_name_length=min_input_name_length)
        _check_inputs_present(statement)
    except BehaviorSyntaxError as exc:
        return [Diagnostic(line_number, exc.message, exc.col_start, exc.col_end)]

    duplicates = _duplicate_inputs(line, line_number, statement)
    if duplicates:
        return duplicates
    return _unavailable_inputs(line, line_number, statement, available_inputs)


# ################
# Implementation
# ################


def _check_inputs_present(statement: ForwardingStatement) -> None:
    names = [ref.name for ref in statement.inputs]
    if all(name == "" for name in names):
        raise BehaviorSyntaxError("forward needs at least one input")

    empty_index = names.index("") if "" in names else -1
    if empty_index != -1:
        # A leading gap is blamed on the comma after it, any other gap on the
        # comma before it.
        comma = statement.commas[max(empty_index - 1, 0)]
        raise BehaviorSyntaxError("trailing comma without being followed by an input", comma, comma + 1)


def _duplicate_inputs(line: str, line_number: int, statement: ForwardingStatement) -> list[Diagnostic]:
    names = [ref.name for ref in statement.inputs]
    duplicated = [name for name in dict.fromkeys(names) if names.count(name) > 1]

    diagnostics: list[Diagnostic] = []
    for name in duplicated:
        for column in locate_token(line, name, Boundary.PLAIN, start=statement.list_start, end=statement.list_end):
            diagnostics.append(Diagnostic(line_number, f"duplicate input: {name}", column, column + len(name)))
    return diagnostics


def _unavailable_inputs(
    line: str,
    line_number: int,
    statement: ForwardingStatement,
    available_inputs: list[str],
) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for ref in statement.inputs:
        if ref.name in available_inputs:
            continue
        column = locate_first(line, ref.name, Boundary.PLAIN, start=statement.list_start, end=statement.list_end)
        if column is None:
            column = ref.column
        diagnostics.append(
            Diagnostic(line_number, f"invalid/unknown input: {ref.name}", column, column + len(ref.name))
        )
    return diagnostics
