# melt

Building blocks for a compiler of the melt language, an indentation-based
language with generics and error-marked functions (`!` may fail, `?` fails
only when a function passed to it does) that targets Go.

## Modules

- `melt.types`: the type model. `Basic`, `Empty`, `ErrorType`, `NilType`,
  `GenericVar`, `Function`, `Interface`, `Record`, `SliceBuiltin`,
  `MapBuiltin` and `Pointer` all derive from `Type` and provide
  `accepts(other)` and `to_string()`. `ErrorKind` (`FAIL`, `MAYBE`,
  `CORRECT`) marks how a function may fail, and `error_suffix` gives its
  marker. `Method` pairs a label with a `Function`; `find_method(duck, label)`
  returns the first method of that name or `None`. Generic-capable types offer
  `is_generic()` and `vars()`.
- `melt.indent`: `indent_level(line)` counts the leading tabs of a line.
- `melt.preprocess`: `preprocess(source)` drops blank and `#` comment lines
  and replaces tab indentation with `@@indent@@` / `@@dedent@@` markers. A
  line indented more than one tab deeper than the previous one raises
  `PreprocessError`.
- `melt.replace`: `replace_generic_vars(t, generic_map)` substitutes concrete
  types from a `GenericMap` for generic labels and resolves `?` functions to
  the error kinds listed in `GenericMap.errors`, consumed in order.
- `melt.gocode`: `render_type(t)` spells a type as Go source and raises
  `GoTypeError` for `?` functions and types with no Go form; `basic_ident`
  returns the name of a `Basic` type or `None`; `go_label` strips a trailing
  `?` or `!`; `escalate_statement()` returns the Go statement that passes a
  pending `err` up to the caller.

## Installation

```
pip install .
```

## Example

```python
from melt.types import Basic, Function, ErrorKind
from melt.gocode import render_type
from melt.preprocess import preprocess

double = Function(args=[Basic("int")], return_type=Basic("int"), error=ErrorKind.FAIL)
print(double.to_string())      # (int -> int)!
print(render_type(double))     # func(int) (int, error)

print(preprocess("fun f\n\treturn 1\n"))
```

## What it does not do

The package has no parser for melt source beyond the indentation
preprocessing, no type checker over a syntax tree, no generation of whole Go
files and no command-line program. It supplies the types, the preprocessing
step and the Go rendering of types and a few statements for such tools to
build on.

## Tests

```
pip install .[test]
pytest
```