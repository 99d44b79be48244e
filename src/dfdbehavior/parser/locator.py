# Copyright 2026 dfd-behavior Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token-boundary aware search for names inside a behavior line.

A plain substring search would find the input ``te`` inside ``test``. The
functions here only accept occurrences that form a whole token in the given
context.
"""

import enum

# ###############
# Public Interface
# ###############


class Boundary(enum.Enum):
    """The context in which a token is searched for."""

    # A free-standing identifier, e.g. an input name in a list.
    PLAIN = "plain"
    # A label type name directly followed by a '.' and its value.
    DOTTED_TYPE = "dotted-type"
    # A label value name directly preceded by a '.'.
    DOTTED_VALUE = "dotted-value"


def locate_token(
    line: str,
    token: str,
    boundary: Boundary,
    *,
    start: int = 0,
    end: int | None = None,
) -> list[int]:
    """Return the start columns of all whole-token occurrences of *token* in *line*.

    Args:
        line: The behavior line to search.
        token: The name to look for.
        boundary: Which adjacency rules decide whether an occurrence is a
            whole token.
        start: First column of the search window.
        end: Column one past the end of the search window (defaults to the
            end of the line). Occurrences must lie completely inside the
            window, but neighbouring characters are read from the full line.

    Returns:
        The matching start columns in ascending order. Empty if *token* is
        empty or has no valid occurrence.
    """
    if not token:
        return []
    if end is None:
        end = len(line)

    positions: list[int] = []
    idx = line.find(token, start, end)
    while idx != -1:
        if _accepts(line, idx, idx + len(token), boundary):
            positions.append(idx)
        idx = line.find(token, idx + 1, end)
    return positions


def locate_first(line: str, token: str, boundary: Boundary, *, start: int = 0, end: int | None = None) -> int | None:
    """Return the first whole-token occurrence of *token*, or None."""
    positions = locate_token(line, token, boundary, start=start, end=end)
    return positions[0] if positions else None


# ################
# Implementation
# ################


def _is_identifier_char(ch: str) -> bool:
    """Characters that may continue an input identifier (pipes included)."""
    return ch != "" and ch.isascii() and (ch.isalnum() or ch in "_|")


def _is_label_char(ch: str) -> bool:
    return ch.isascii() and (ch.isalnum() or ch == "_")


def _accepts(line: str, begin: int, finish: int, boundary: Boundary) -> bool:
    before = line[begin - 1] if begin > 0 else ""
    after = line[finish] if finish < len(line) else ""

    if boundary is Boundary.PLAIN:
        return not _is_identifier_char(before) and not _is_identifier_char(after)
    if boundary is Boundary.DOTTED_TYPE:
        return after == "." and not _is_identifier_char(before)
    # DOTTED_VALUE: the end of the line counts as a boundary.
    return before == "." and not _is_label_char(after)
