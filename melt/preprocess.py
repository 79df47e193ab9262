"""Turn tab indentation into explicit indent and dedent markers."""

from __future__ import annotations

from melt.indent import indent_level

INDENT = "@@indent@@"
DEDENT = "@@dedent@@\n"


class PreprocessError(ValueError):
    """Raised when the source is indented inconsistently."""


def preprocess(source: str) -> str:
    """Return ``source`` with indentation replaced by markers.

    Blank lines and lines starting with ``#`` are dropped. A line may be
    indented at most one tab deeper than the line before it.
    """
    level = 0
    output: list[str] = []
    for number, line in enumerate(source.split("\n"), start=1):
        trimmed = line.strip(" ").rstrip("\t")
        if not trimmed or trimmed.startswith("#"):
            continue

        new_level = indent_level(trimmed)
        if new_level > level + 1:
            raise PreprocessError(f"line {number}: indented too much\n{line}")
        if new_level == level + 1:
            output.append(INDENT + line[new_level:])
            level += 1
        elif new_level == level:
            output.append(line[new_level:])
        else:
            output.append(DEDENT * (level - new_level) + line[new_level:])
            level = new_level
    output.append(DEDENT * level)
    return "\n".join(output) + "\n"