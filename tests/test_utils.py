import pytest

from lxml_selection.utils import (
    css_to_xpath,
    first_non_empty,
    split_names,
    squash_whitespace,
    trim_ascii_whitespace,
    unique,
)


@pytest.mark.parametrize(
    ("axis", "expected"),
    (
        ("descendant", "descendant::p"),
        ("descendant-or-self", "descendant-or-self::p"),
        ("self", "self::p"),
    ),
)
def test_css_to_xpath(axis, expected):
    assert css_to_xpath("p", axis) == expected


def test_css_to_xpath_with_invalid_axis():
    with pytest.raises(ValueError, match="ancestor"):
        css_to_xpath("p", "ancestor")


def test_first_non_empty():
    calls = []

    def candidate(value):
        def evaluate():
            calls.append(value)
            return value

        return evaluate

    assert first_non_empty(candidate(""), candidate(" \n"), candidate(" x ")) == "x"
    assert calls == ["", " \n", " x "]

    calls.clear()
    assert first_non_empty(candidate("a"), candidate("b")) == "a"
    assert calls == ["a"]

    assert first_non_empty() == ""
    assert first_non_empty(candidate("\t")) == ""


@pytest.mark.parametrize(
    ("names", "expected"),
    (
        (("foo",), ["foo"]),
        (("foo bar",), ["foo", "bar"]),
        (("\tfoo\r\n  bar ",), ["foo", "bar"]),
        (("foo", "bar baz"), ["foo", "bar", "baz"]),
        (("",), []),
        ((" \t ",), []),
        ((), []),
        (("a\u00a0b",), ["a\u00a0b"]),
    ),
)
def test_split_names(names, expected):
    assert split_names(*names) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    (
        ("", " "),
        ("  ", " "),
        ("a", " a "),
        ("a\t\nb  c", " a b c "),
        ("  a  ", " a "),
    ),
)
def test_squash_whitespace(value, expected):
    assert squash_whitespace(value) == expected


def test_trim_ascii_whitespace():
    assert trim_ascii_whitespace("\r\n a b \t") == "a b"
    assert trim_ascii_whitespace("\u00a0a\u00a0") == "\u00a0a\u00a0"


def test_unique():
    a, b = [1], [1]
    assert unique([a, b, a, b, a]) == [a, b]
    assert unique([a, b, a])[1] is b
    assert unique([]) == []
