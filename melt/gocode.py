"""Rendering of types and small statements as Go source text."""

from __future__ import annotations

from typing import Optional

from melt.types import (
    Basic,
    Empty,
    ErrorKind,
    Function,
    Interface,
    Pointer,
    SliceBuiltin,
    Type,
)


class GoTypeError(ValueError):
    """Raised when a type has no Go counterpart."""


def _render_function(t: Function) -> str:
    if t.error == ErrorKind.MAYBE:
        raise GoTypeError(f"{t.to_string()} can't be ?")
    params = ", ".join(render_type(arg) for arg in t.args)
    results = [render_type(t.return_type)]
    if t.error == ErrorKind.FAIL:
        results.append("error")
    if len(results) == 1:
        return f"func({params}) {results[0]}"
    return f"func({params}) ({', '.join(results)})"


def render_type(t: Type) -> str:
    """Return the Go spelling of ``t``."""
    if isinstance(t, Basic):
        return t.label
    if isinstance(t, SliceBuiltin):
        return "[]" + render_type(t.element)
    if isinstance(t, Pointer):
        return "*" + render_type(t.object)
    if isinstance(t, Interface):
        return t.label
    if isinstance(t, Function):
        return _render_function(t)
    if isinstance(t, Empty):
        return "void"
    raise GoTypeError("unknown")


def basic_ident(t: Type) -> Optional[str]:
    """Return the identifier of a basic type, or None for any other type."""
    if isinstance(t, Basic):
        return t.label
    return None


def go_label(label: str) -> str:
    """Return ``label`` without a trailing ``?`` or ``!`` marker."""
    if not label:
        raise ValueError("empty label")
    if label[-1] in "?!":
        return label[:-1]
    return label


def escalate_statement() -> str:
    """Return the statement that passes a pending error up to the caller."""
    return "if err != nil {\n\treturn nil, err\n}"