# Copyright 2026 dfd-behavior Contributors
# SPDX-License-Identifier: Apache-2.0

"""Validation of ``Assignment({inputs};term;{outputs})`` statements.

Structural problems (unbalanced parentheses, a line that does not look like
an assignment, a missing or malformed term) end the validation of the line
with a single diagnostic. Reference problems (unknown inputs, label types
and label values) are all collected.
"""

from __future__ import annotations

from dfdbehavior.model.labels import LabelTypeRegistry
from dfdbehavior.parser.locator import Boundary, locate_token
from dfdbehavior.parser.statements import AssignmentStatement, BehaviorSyntaxError, LabelRef, parse_assignment
from dfdbehavior.parser.term import Term, TermError, iter_label_accesses, parse_term
from dfdbehavior.validation.diagnostics import Diagnostic

# ###############
# Public Interface
# ###############


def validate_assignment(
    line: str,
    line_number: int,
    available_inputs: list[str],
    label_type_registry: LabelTypeRegistry | None = None,
    *,
    min_input_name_length: int = 1,
) -> list[Diagnostic]:
    """Validate one assignment line.

    Args:
        line: The line text.
        line_number: 0-based number of the line in the behavior text.
        available_inputs: Input names of the node owning the port.
        label_type_registry: The label catalog. Without one, label types and
            label values are not checked.
        min_input_name_length: Shortest accepted input name.

    Returns:
        The diagnostics of the line; empty if the line is valid.
    """
    try:
        check_parentheses(line)
        statement = parse_assignment(line, min_input_name_length=min_input_name_length)
        term = _parse_term(statement)
    except BehaviorSyntaxError as exc:
        return [Diagnostic(line_number, exc.message, exc.col_start, exc.col_end)]

    labels: _LabelChecker | None = None
    if label_type_registry is not None:
        labels = _LabelChecker(line, line_number, label_type_registry, statement.outputs)

    diagnostics: list[Diagnostic] = []
    if labels is not None:
        for access in iter_label_accesses(term):
            diagnostics.extend(labels.check(access.label_type, access.label_value))
    diagnostics.extend(_check_inputs(line_number, statement, available_inputs))
    for output in statement.outputs:
        if labels is not None:
            diagnostics.extend(labels.check(output.label_type, output.label_value))
        if len(output.segments) > 2:
            diagnostics.append(Diagnostic(line_number, "invalid label definition"))
    return diagnostics


def check_parentheses(line: str) -> None:
    """Check that the parentheses of *line* are balanced.

    Raises:
        BehaviorSyntaxError: At the first ')' without a matching '(', or for
            the whole line if a '(' is never closed.
    """
    level = 0
    for column, ch in enumerate(line):
        if ch == "(":
            level += 1
        elif ch == ")":
            level -= 1
        if level < 0:
            raise BehaviorSyntaxError("invalid assignment: missing opening parenthesis", column, column + 1)
    if level != 0:
        raise BehaviorSyntaxError("invalid assignment: missing closing parenthesis")


# ################
# Implementation
# ################


def _parse_term(statement: AssignmentStatement) -> Term:
    if statement.term_text.strip() == "":
        raise BehaviorSyntaxError("invalid assignment: missing term")
    try:
        return parse_term(list(statement.term_tokens))
    except TermError:
        raise BehaviorSyntaxError("invalid term") from None


def _check_inputs(line_number: int, statement: AssignmentStatement, available_inputs: list[str]) -> list[Diagnostic]:
    return [
        Diagnostic(line_number, f"invalid/unknown input: {ref.name}", ref.column, ref.column + len(ref.name))
        for ref in statement.inputs
        if ref.name != "" and ref.name not in available_inputs
    ]


class _LabelChecker:
    """Checks label references of one line against the label catalog.

    An unknown label type is reported at every place it is written as a type
    in the line, an unknown value at every place it is written as a value.
    Each unknown type and each unknown type/value pair is spread over the line
    only once, so a reference written twice gives two diagnostics, not four.
    """

    def __init__(
        self,
        line: str,
        line_number: int,
        registry: LabelTypeRegistry,
        outputs: tuple[LabelRef, ...],
    ) -> None:
        self._line = line
        self._line_number = line_number
        self._registry = registry
        self._bare_type_columns: dict[str, list[int]] = {}
        for output in outputs:
            if len(output.segments) == 1:
                self._bare_type_columns.setdefault(output.label_type, []).append(output.column)
        self._reported_types: set[str] = set()
        self._reported_values: set[tuple[str, str]] = set()

    def check(self, type_name: str, value_name: str) -> list[Diagnostic]:
        """Check one ``Type.Value`` reference. An empty value is not checked."""
        label_type = self._registry.get_label_type(type_name)
        if label_type is None:
            return self._unknown_type(type_name)
        if value_name == "" or label_type.get_value(value_name) is not None:
            return []
        return self._unknown_value(type_name, value_name)

    def _unknown_type(self, type_name: str) -> list[Diagnostic]:
        if type_name in self._reported_types:
            return []
        self._reported_types.add(type_name)
        # A bare output type has no dotted occurrence; it is underlined where it stands.
        columns = set(locate_token(self._line, type_name, Boundary.DOTTED_TYPE))
        columns.update(self._bare_type_columns.get(type_name, []))
        return [
            Diagnostic(self._line_number, f"unknown label type: {type_name}", col, col + len(type_name))
            for col in sorted(columns)
        ]

    def _unknown_value(self, type_name: str, value_name: str) -> list[Diagnostic]:
        if (type_name, value_name) in self._reported_values:
            return []
        self._reported_values.add((type_name, value_name))
        return [
            Diagnostic(
                self._line_number,
                f"unknown label value of label type {type_name}: {value_name}",
                col,
                col + len(value_name),
            )
            for col in locate_token(self._line, value_name, Boundary.DOTTED_VALUE)
        ]
