# Copyright 2026 dfd-behavior Contributors
# SPDX-License-Identifier: Apache-2.0

"""Validation of the behavior text of a dataflow diagram output port."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field

from dfdbehavior.model.entities import DfdNode, DfdOutputPort
from dfdbehavior.model.labels import LabelTypeRegistry
from dfdbehavior.parser.statements import StatementKind, classify_line
from dfdbehavior.validation.assignment import validate_assignment
from dfdbehavior.validation.diagnostics import Diagnostic, aggregate
from dfdbehavior.validation.forwarding import validate_forwarding

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class PortContextError(Exception):
    """Raised when an output port is not attached to a DfdNode.

    This is a programming error of the caller, not a problem of the behavior text,
    so it is never reported as a diagnostic.
    """


class ValidatorSettings(BaseModel):
    """Tunable parts of the behavior grammar.

    Attributes:
        min_input_name_length: Shortest accepted input name in input lists.
            Set to 2 to reject single-character input names.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    min_input_name_length: int = Field(default=1, ge=1, alias="min-input-name-length")


class PortBehaviorValidator:
    """Validates the behavior text of output ports.

    The validator keeps no state between calls apart from the label catalog
    it was created with. Without a catalog, label types and label values are
    not checked; everything else still is.
    """

    def __init__(
        self,
        label_type_registry: LabelTypeRegistry | None = None,
        settings: ValidatorSettings | None = None,
    ) -> None:
        self._label_type_registry = label_type_registry
        self._settings = settings or ValidatorSettings()

    def validate(self, behavior_text: str, port: DfdOutputPort) -> list[Diagnostic]:
        """Validate the whole behavior text of a port.

        Args:
            behavior_text: The behavior text; lines are separated by ``\\n``.
            port: The port the text belongs to. Its parent node decides which
                inputs may be referenced.

        Returns:
            All diagnostics, ordered by line, with concrete columns. Empty if
            the text is valid.

        Raises:
            PortContextError: If the port's parent is not a DfdNode.
        """
        node = port.parent
        if not isinstance(node, DfdNode):
            raise PortContextError(f"Expected the parent of port '{port.name}' to be a DfdNode.")
        available_inputs = node.get_available_inputs()

        lines = behavior_text.split("\n")
        per_line: dict[int, list[Diagnostic]] = {}
        for number, line in enumerate(lines):
            line_diagnostics = self._validate_line(line, number, available_inputs)
            if line_diagnostics:
                per_line[number] = line_diagnostics

        diagnostics = aggregate(lines, per_line)
        logger.debug(
            "Validated %d line(s) of port '%s' on node '%s': %d diagnostic(s)",
            len(lines),
            port.name,
            node.name,
            len(diagnostics),
        )
        return diagnostics

    def _validate_line(self, line: str, line_number: int, available_inputs: list[str]) -> list[Diagnostic]:
        """Validate a single line and return its unresolved diagnostics."""
        kind = classify_line(line)
        if kind in (StatementKind.BLANK, StatementKind.COMMENT):
            return []
        if kind is StatementKind.FORWARDING:
            return validate_forwarding(
                line,
                line_number,
                available_inputs,
                min_input_name_length=self._settings.min_input_name_length,
            )
        if kind is StatementKind.ASSIGNMENT:
            return validate_assignment(
                line,
                line_number,
                available_inputs,
                self._label_type_registry,
                min_input_name_length=self._settings.min_input_name_length,
            )
        return [Diagnostic(line_number, "Unknown statement")]


def validate(
    behavior_text: str,
    port: DfdOutputPort,
    label_type_registry: LabelTypeRegistry | None = None,
    settings: ValidatorSettings | None = None,
) -> list[Diagnostic]:
    """Validate *behavior_text* of *port* with a one-off :class:`PortBehaviorValidator`."""
    return PortBehaviorValidator(label_type_registry, settings).validate(behavior_text, port)
