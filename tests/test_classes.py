import pytest

from lxml_selection import Document, Selection


def classes_of(selection):
    return [x.get_attribute_or("class", None) for x in selection]


@pytest.mark.parametrize(
    ("names", "expected"),
    (
        (("c",), "a b c"),
        (("b",), "a b"),
        (("c d",), "a b c d"),
        (("c", "d"), "a b c d"),
        (("d c", "c"), "a b d c"),
        ((" c\td\n",), "a b c d"),
    ),
)
def test_add_class(names, expected):
    selection = Document('<p class="a b"/>').css_select("p")
    assert selection.add_class(*names) is selection
    assert classes_of(selection) == [expected]


def test_add_class_to_multiple_nodes():
    selection = Document('<p/><p class="x"/><p class="y x"/>').css_select("p")

    selection.add_class("x z")

    assert classes_of(selection) == ["x z", "x z", "y x z"]
    assert all(Selection([x]).has_class("z") for x in selection)


def test_add_class_without_names():
    selection = Document("<p/>").css_select("p")

    selection.add_class().add_class("").add_class("  ")

    assert "class" not in selection[0]


def test_add_then_remove_class_restores_state():
    selection = Document('<p class="a b"/><p/>').css_select("p")

    selection.add_class("c").remove_class("c")

    assert classes_of(selection) == ["a b", None]


def test_classes_with_other_whitespace():
    selection = Document('<p class="a\tb\n c"/>').css_select("p")
    assert selection.has_class("b")
    assert selection[0].classes == ["a", "b", "c"]


def test_has_class():
    selection = Document('<p class="foo-bar"/><p class="baz"/>').css_select("p")

    assert selection.has_class("baz")
    assert selection.has_class("foo-bar")
    assert not selection.has_class("foo")
    assert not selection.has_class("bar")
    assert not selection.first.has_class("baz")
    assert not Selection().has_class("baz")


def test_remove_class():
    selection = Document('<p class="a b c"/>').css_select("p")

    assert selection.remove_class("b") is selection
    assert classes_of(selection) == ["a c"]

    selection.remove_class("x a")
    assert classes_of(selection) == ["c"]

    selection.remove_class("c")
    assert classes_of(selection) == [None]


def test_remove_class_keeps_order_of_remaining():
    selection = Document('<p class="e d c b a"/>').css_select("p")
    selection.remove_class("d", "b")
    assert classes_of(selection) == ["e c a"]


def test_remove_class_without_names():
    selection = Document('<p class="a b" id="x"/><p/>').css_select("p")

    selection.remove_class()

    assert classes_of(selection) == [None, None]
    assert not selection.has_class("a")
    assert selection.attr("id") == ("x", True)

    selection.add_class("c")
    assert classes_of(selection) == ["c", "c"]


def test_remove_repeated_class():
    selection = Document('<p class="a a b a"/>').css_select("p")
    selection.remove_class("a")
    assert classes_of(selection) == ["b"]


def test_toggle_class():
    selection = Document('<p class="a b"/><p class="c"/>').css_select("p")

    assert selection.toggle_class("b c") is selection
    assert classes_of(selection) == ["a c", "b"]

    selection.toggle_class("b c")
    assert classes_of(selection) == ["a b", "c"]


def test_toggle_class_removes_empty_attribute():
    selection = Document('<p class="a"/>').css_select("p")

    selection.toggle_class("a")
    assert "class" not in selection[0]

    selection.toggle_class("a")
    assert classes_of(selection) == ["a"]
