"""Indentation measurement for source lines."""

from __future__ import annotations


def indent_level(line: str) -> int:
    """Return the number of leading tabs of ``line``.

    A line made only of tabs counts as not indented.
    """
    for position, char in enumerate(line):
        if char != "\t":
            return position
    return 0