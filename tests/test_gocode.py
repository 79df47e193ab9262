import pytest

from melt.gocode import GoTypeError, basic_ident, escalate_statement, go_label, render_type
from melt.types import (
    Basic,
    Empty,
    ErrorKind,
    Function,
    Interface,
    NilType,
    Pointer,
    SliceBuiltin,
)


def test_basic_renders_label():
    assert render_type(Basic("int")) == "int"


def test_slice_and_pointer_prefixes():
    inner = Basic("string")
    assert render_type(SliceBuiltin(inner)) == "[]" + render_type(inner)
    assert render_type(Pointer(inner)) == "*" + render_type(inner)
    assert render_type(Pointer(SliceBuiltin(inner))).startswith("*[]")


def test_interface_renders_label():
    assert render_type(Interface("Sequence")) == "Sequence"


def test_empty_renders_void():
    assert render_type(Empty()) == "void"


def test_plain_function():
    f = Function(args=[Basic("int")], return_type=Basic("int"))
    assert render_type(f) == "func(int) int"


def test_failing_function_adds_error_result():
    f = Function(args=[Basic("int"), Basic("bool")], return_type=Basic("int"), error=ErrorKind.FAIL)
    assert render_type(f) == "func(int, bool) (int, error)"


def test_maybe_function_rejected():
    f = Function(args=[Basic("int")], return_type=Basic("int"), error=ErrorKind.MAYBE)
    with pytest.raises(GoTypeError) as info:
        render_type(f)
    assert "can't be ?" in str(info.value)


def test_maybe_nested_in_slice_rejected():
    f = Function(return_type=Basic("int"), error=ErrorKind.MAYBE)
    with pytest.raises(GoTypeError):
        render_type(SliceBuiltin(f))


def test_unknown_type_rejected():
    with pytest.raises(GoTypeError, match="unknown"):
        render_type(NilType())


def test_basic_ident():
    assert basic_ident(Basic("float")) == "float"
    assert basic_ident(Pointer(Basic("float"))) is None


@pytest.mark.parametrize("label", ["map?", "map!", "map"])
def test_go_label_strips_marker(label):
    assert go_label(label) == "map"


def test_go_label_empty_raises():
    with pytest.raises(ValueError):
        go_label("")


def test_escalate_statement():
    text = escalate_statement()
    assert text.splitlines()[0] == "if err != nil {"
    assert "return nil, err" in text
    assert text.endswith("}")