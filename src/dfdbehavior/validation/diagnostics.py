# Copyright 2026 dfd-behavior Contributors
# SPDX-License-Identifier: Apache-2.0

"""Diagnostics reported for behavior lines and their aggregation."""

from __future__ import annotations

from dataclasses import dataclass, replace

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class Diagnostic:
    """A validation finding for one line of a behavior text.

    Line and column numbers start at 0. Columns are offsets into the line,
    not into the whole text. A column left as None means "from the start" or
    "to the end" of the line and is filled in by :func:`aggregate`.

    Attributes:
        line: 0-based line number.
        message: Human-readable description of the problem.
        col_start: 0-based first column of the underlined text.
        col_end: 0-based column one past the underlined text.
    """

    line: int
    message: str
    col_start: int | None = None
    col_end: int | None = None

    def resolve(self, line_text: str) -> Diagnostic:
        """Return a copy with missing columns set to cover the whole line."""
        return replace(
            self,
            col_start=0 if self.col_start is None else self.col_start,
            col_end=len(line_text) if self.col_end is None else self.col_end,
        )

    def to_dict(self) -> dict[str, int | str | None]:
        """Render the diagnostic the way editor clients expect it."""
        return {
            "line": self.line,
            "message": self.message,
            "colStart": self.col_start,
            "colEnd": self.col_end,
        }


class DiagnosticCollector:
    """Collects the diagnostics of a whole behavior text line by line.

    Diagnostics are kept in the order they were added. Identical findings are
    all kept: every occurrence of an invalid reference is its own diagnostic.
    """

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    def add_line(self, line_text: str, diagnostics: list[Diagnostic]) -> None:
        """Resolve the columns of *diagnostics* against *line_text* and keep them."""
        self._diagnostics.extend(diagnostic.resolve(line_text) for diagnostic in diagnostics)

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return list(self._diagnostics)


def aggregate(lines: list[str], per_line: dict[int, list[Diagnostic]]) -> list[Diagnostic]:
    """Resolve and order the diagnostics of all lines.

    Args:
        lines: The lines of the behavior text.
        per_line: The unresolved diagnostics of each line, keyed by line number.

    Returns:
        All diagnostics ordered by line, with concrete columns.
    """
    collector = DiagnosticCollector()
    for number in sorted(per_line):
        collector.add_line(lines[number], per_line[number])
    return collector.diagnostics
