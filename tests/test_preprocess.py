import pytest

from melt.preprocess import PreprocessError, preprocess


def test_flat_source_is_kept():
    assert preprocess("a\nb") == "a\nb\n\n"


def test_indent_and_dedent_markers():
    assert preprocess("f\n\tg\nh") == "f\n@@indent@@g\n@@dedent@@\nh\n\n"


def test_markers_are_balanced():
    source = "fun a\n\tx\n\tfor\n\t\ty\n\t\tz\nfun b\n\tw"
    result = preprocess(source)
    assert result.count("@@indent@@") == result.count("@@dedent@@")
    assert result.count("@@indent@@") == 3


def test_deep_dedent_emits_several_markers():
    result = preprocess("a\n\tb\n\t\tc\nd")
    head, _, tail = result.partition("@@indent@@c\n")
    assert tail.startswith("@@dedent@@\n@@dedent@@\nd")
    assert head.count("@@indent@@") == 1


def test_comments_and_blank_lines_are_dropped():
    result = preprocess("# note\n\na\n   \n# more\nb")
    assert "note" not in result
    assert "more" not in result
    assert result.split("\n")[:2] == ["a", "b"]


def test_too_deep_indentation_raises():
    with pytest.raises(PreprocessError) as info:
        preprocess("a\n\t\tb")
    assert str(info.value).startswith("line 2: indented too much")
    assert str(info.value).endswith("\t\tb")


def test_error_is_value_error():
    with pytest.raises(ValueError):
        preprocess("\tx\n\t\t\ty")


def test_unclosed_indentation_is_closed_at_end():
    result = preprocess("a\n\tb")
    assert result.endswith("@@dedent@@\n\n")