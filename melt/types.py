"""Type model used by the checker and the code generator."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional, Sequence


class ErrorKind(enum.IntEnum):
    """How a function may fail."""

    FAIL = 1
    MAYBE = 2
    CORRECT = 3


def error_suffix(kind: ErrorKind) -> str:
    """Return the marker written after a function of the given error kind."""
    if kind == ErrorKind.FAIL:
        return "!"
    if kind == ErrorKind.MAYBE:
        return "?"
    return ""


class Type:
    """Base class of every type."""

    def accepts(self, other: "Type") -> bool:
        raise NotImplementedError

    def to_string(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.to_string()


class _Generic:
    """Marker for types that may carry generic variables."""

    def is_generic(self) -> bool:
        raise NotImplementedError

    def vars(self) -> list:
        raise NotImplementedError


@dataclass(frozen=True)
class Basic(Type):
    label: str

    def to_string(self) -> str:
        return self.label

    def accepts(self, other: Type) -> bool:
        return isinstance(other, Basic) and self.label == other.label


@dataclass(frozen=True)
class Empty(Type):
    def to_string(self) -> str:
        return "empty"

    def accepts(self, other: Type) -> bool:
        return False


@dataclass(frozen=True)
class ErrorType(Type):
    label: str = ""

    def to_string(self) -> str:
        return f"Error.{self.label}"

    def accepts(self, other: Type) -> bool:
        return False


@dataclass(frozen=True)
class NilType(Type):
    def to_string(self) -> str:
        return "nil"

    def accepts(self, other: Type) -> bool:
        return isinstance(other, NilType)


@dataclass(frozen=True)
class GenericVar(Type, _Generic):
    label: str
    actual: Optional[Type] = None

    def is_generic(self) -> bool:
        return True

    def to_string(self) -> str:
        return f"@{self.label}"

    def accepts(self, other: Type) -> bool:
        if isinstance(other, Basic):
            return True
        if isinstance(other, GenericVar):
            return self.label == other.label
        if isinstance(other, _Generic):
            return not other.is_generic()
        return True

    def vars(self) -> list[GenericVar]:
        return [self]


@dataclass
class Function(Type, _Generic):
    args: list[Type] = field(default_factory=list)
    return_type: Type = field(default_factory=Empty)
    generic_vars: list[GenericVar] = field(default_factory=list)
    instance_vars: list[Optional[Type]] = field(default_factory=list)
    error: ErrorKind = ErrorKind.CORRECT

    def to_string(self) -> str:
        args = ",".join(arg.to_string() for arg in self.args)
        return f"({args} -> {self.return_type.to_string()}){error_suffix(self.error)}"

    def accepts(self, other: Type) -> bool:
        if isinstance(other, Interface):
            return other.label == "Callable"
        if not isinstance(other, Function):
            return False
        if not self.return_type.accepts(other.return_type):
            return False
        if self.error in (ErrorKind.CORRECT, ErrorKind.FAIL) and other.error != self.error:
            return False
        if len(self.generic_vars) != len(other.generic_vars):
            return False
        if len(self.args) != len(other.args):
            return False
        # An argument that accepts its counterpart rejects the whole function.
        return not any(mine.accepts(theirs) for mine, theirs in zip(self.args, other.args))

    def is_generic(self) -> bool:
        return len(self.generic_vars) > 0

    def vars(self) -> list[GenericVar]:
        return self.generic_vars

    def instance_vars_list(self) -> list[Optional[Type]]:
        return self.instance_vars


@dataclass
class Method:
    label: str
    function: Function


def find_method(duck, label: str) -> Optional[Method]:
    """Return the first method of ``duck`` named ``label``, or None."""
    return next((m for m in duck.methods() if m.label == label), None)


class Interface(Type, _Generic):
    def __init__(
        self,
        label: str,
        methods: Optional[Sequence[Method]] = None,
        generic_vars: Optional[Sequence[GenericVar]] = None,
        instance_vars: Optional[Sequence[Optional[Type]]] = None,
    ) -> None:
        self.label = label
        self._methods = list(methods or [])
        self.generic_vars = list(generic_vars or [])
        self.instance_vars = list(instance_vars or [])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interface):
            return NotImplemented
        return (self.label, self._methods, self.generic_vars, self.instance_vars) == (
            other.label, other._methods, other.generic_vars, other.instance_vars)

    def __repr__(self) -> str:
        return (f"Interface(label={self.label!r}, methods={self._methods!r}, "
                f"generic_vars={self.generic_vars!r}, instance_vars={self.instance_vars!r})")

    def methods(self) -> list[Method]:
        return self._methods

    def extend(self, methods: Sequence[Method]) -> None:
        self._methods.extend(methods)

    def to_string(self) -> str:
        if not self.instance_vars:
            return self.label
        if any(v is None for v in self.instance_vars):
            raise ValueError(f"interface {self.label} is not instantiated")
        inner = ",".join(v.to_string() for v in self.instance_vars)
        return f"{self.label}<{inner}>"

    def accepts(self, other: Type) -> bool:
        if isinstance(other, Basic):
            return not self._methods
        if isinstance(other, Interface):
            return all(other.accepts_function(m.function) for m in self._methods)
        return False

    def accepts_function(self, function: Function) -> bool:
        return any(m.function.accepts(function) for m in self._methods)

    def is_generic(self) -> bool:
        return len(self.generic_vars) > 0

    def vars(self) -> list[GenericVar]:
        return self.generic_vars


class MapBuiltin(Type, _Generic):
    def __init__(self, key: Type, value: Type, methods: Optional[Sequence[Method]] = None) -> None:
        self.key = key
        self.value = value
        self._methods = list(methods or [])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MapBuiltin):
            return NotImplemented
        return (self.key, self.value, self._methods) == (other.key, other.value, other._methods)

    def __repr__(self) -> str:
        return f"MapBuiltin(key={self.key!r}, value={self.value!r})"

    def methods(self) -> list[Method]:
        return self._methods

    def is_generic(self) -> bool:
        return any(isinstance(t, _Generic) and t.is_generic() for t in (self.value, self.key))

    def vars(self) -> list[GenericVar]:
        value_vars = list(self.value.vars()) if isinstance(self.value, _Generic) else []
        result = list(value_vars)
        if isinstance(self.key, _Generic):
            seen = {v.label for v in value_vars}
            result.extend(v for v in self.key.vars() if v.label not in seen)
        return result

    def to_string(self) -> str:
        return f"map[{self.key.to_string()}]{self.value.to_string()}"

    def accepts(self, other: Type) -> bool:
        return (isinstance(other, MapBuiltin)
                and self.key.accepts(other.key)
                and self.value.accepts(other.value))


@dataclass(frozen=True)
class Pointer(Type):
    object: Type

    def to_string(self) -> str:
        return f"*{self.object.to_string()}"

    def accepts(self, other: Type) -> bool:
        return isinstance(other, Pointer) and self.object.accepts(other.object)


class Record(Type, _Generic):
    def __init__(
        self,
        label: str,
        fields: Optional[dict[str, Type]] = None,
        methods: Optional[Sequence[Method]] = None,
        generic_vars: Optional[Sequence[GenericVar]] = None,
        instance_vars: Optional[Sequence[Optional[Type]]] = None,
    ) -> None:
        self.label = label
        self.fields = dict(fields or {})
        self._methods = list(methods or [])
        self.generic_vars = list(generic_vars or [])
        self.instance_vars = list(instance_vars or [])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Record):
            return NotImplemented
        return (self.label, self.fields, self._methods, self.generic_vars, self.instance_vars) == (
            other.label, other.fields, other._methods, other.generic_vars, other.instance_vars)

    def __repr__(self) -> str:
        return f"Record(label={self.label!r}, fields={self.fields!r})"

    def methods(self) -> list[Method]:
        return self._methods

    def replace_methods(self, methods: Sequence[Method]) -> None:
        """Overwrite existing methods in place; the method count never changes."""
        count = min(len(self._methods), len(methods))
        self._methods[:count] = list(methods[:count])

    def to_string(self) -> str:
        inner = ",".join(f"{name}.{kind.to_string()}" for name, kind in self.fields.items())
        return f"#{self.label}{{{inner}}}"

    def accepts(self, other: Type) -> bool:
        return isinstance(other, Record) and self.label == other.label

    def is_generic(self) -> bool:
        return len(self.generic_vars) > 0

    def vars(self) -> list[GenericVar]:
        return self.generic_vars


class SliceBuiltin(Type, _Generic):
    def __init__(self, element: Type, methods: Optional[Sequence[Method]] = None) -> None:
        self.element = element
        self._methods = list(methods or [])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SliceBuiltin):
            return NotImplemented
        return (self.element, self._methods) == (other.element, other._methods)

    def __repr__(self) -> str:
        return f"SliceBuiltin(element={self.element!r})"

    def methods(self) -> list[Method]:
        return self._methods

    def extend(self, methods: Sequence[Method]) -> None:
        self._methods.extend(methods)

    def is_generic(self) -> bool:
        return isinstance(self.element, _Generic) and self.element.is_generic()

    def vars(self) -> list[GenericVar]:
        return list(self.element.vars()) if isinstance(self.element, _Generic) else []

    def to_string(self) -> str:
        return f"[]{self.element.to_string()}"

    def accepts(self, other: Type) -> bool:
        return isinstance(other, SliceBuiltin) and self.element.accepts(other.element)