"""Substitution of generic variables and error kinds inside types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from melt.types import (
    Basic,
    ErrorKind,
    Function,
    GenericVar,
    Interface,
    Method,
    Pointer,
    Record,
    SliceBuiltin,
    Type,
)


@dataclass
class GenericMap:
    """Concrete types for generic labels and error kinds for ``?`` functions.

    ``errors`` is consumed in order, one entry per nested ``?`` function met.
    """

    types: dict[str, Type] = field(default_factory=dict)
    errors: list[ErrorKind] = field(default_factory=list)


class _Replacer:
    def __init__(self, generic_map: GenericMap) -> None:
        self.generic_map = generic_map
        self.error_index = 0

    def _instance(self, generic_vars: list[GenericVar]) -> list[Optional[Type]]:
        return [self.generic_map.types.get(v.label) for v in generic_vars]

    def _methods(self, methods: list[Method]) -> list[Method]:
        return [Method(m.label, self.replace(m.function)) for m in methods]

    def replace(self, t: Type) -> Type:
        if isinstance(t, Basic):
            return self.generic_map.types.get(t.label, t)
        if isinstance(t, GenericVar):
            return self.generic_map.types.get(t.label, t)
        if isinstance(t, Function):
            error = t.error
            if t.error == ErrorKind.MAYBE:
                error = self.generic_map.errors[self.error_index]
                self.error_index += 1
            return Function(
                args=[self.replace(arg) for arg in t.args],
                return_type=self.replace(t.return_type),
                generic_vars=t.generic_vars,
                instance_vars=self._instance(t.generic_vars),
                error=error,
            )
        if isinstance(t, Pointer):
            return Pointer(self.replace(t.object))
        if isinstance(t, Record):
            fields = {name: self.replace(kind) for name, kind in t.fields.items()}
            methods = self._methods(t.methods())
            record = Record(
                t.label,
                fields=fields,
                generic_vars=t.generic_vars,
                instance_vars=self._instance(t.generic_vars),
            )
            record.replace_methods(methods)
            return record
        if isinstance(t, Interface):
            methods = self._methods(t.methods())
            interface = Interface(
                t.label,
                generic_vars=t.generic_vars,
                instance_vars=self._instance(t.generic_vars),
            )
            interface.extend(methods)
            return interface
        if isinstance(t, SliceBuiltin):
            methods = self._methods(t.methods())
            return SliceBuiltin(self.replace(t.element), methods)
        return t


def replace_generic_vars(t: Type, generic_map: GenericMap) -> Type:
    """Return ``t`` with generic variables and ``?`` error kinds resolved.

    A top-level ``?`` function becomes ``!`` when one of its ``?`` arguments
    resolves to ``!``, and plain otherwise.
    """
    replacer = _Replacer(generic_map)
    if isinstance(t, Function) and t.error == ErrorKind.MAYBE:
        error = ErrorKind.CORRECT
        args: list[Type] = []
        for arg in t.args:
            new_arg = replacer.replace(arg)
            args.append(new_arg)
            if (isinstance(arg, Function) and isinstance(new_arg, Function)
                    and arg.error == ErrorKind.MAYBE and new_arg.error == ErrorKind.FAIL):
                error = ErrorKind.FAIL
        return Function(
            args=args,
            return_type=replacer.replace(t.return_type),
            generic_vars=t.generic_vars,
            instance_vars=replacer._instance(t.generic_vars),
            error=error,
        )
    return replacer.replace(t)