import pytest

from lxml_selection import Document, Selection


def test_attr():
    selection = Document('<a href="/home" TITLE="Home">x</a>').css_select("a")

    assert selection.attr("href") == ("/home", True)
    assert selection.attr("title") == ("Home", True)
    assert selection.attr("Title") == ("Home", True)
    assert selection.attr("target") == ("", False)


def test_attr_considers_first_node_only():
    selection = Document('<p id="a"/><p id="b"/>').css_select("p")
    assert selection.attr("id") == ("a", True)
    assert selection.attr_or("id", "x") == "a"


def test_attr_of_empty_selection():
    selection = Selection()
    assert selection.attr("id") == ("", False)
    assert selection.attr_or("id", "default") == "default"


def test_attr_or():
    selection = Document('<input type="text" value="">').css_select("input")
    assert selection.attr_or("value", "x") == ""
    assert selection.attr_or("name", "x") == "x"


def test_attr_with_multiple_names():
    selection = Document('<p id="a" class="b"/>').css_select("p")
    with pytest.warns(UserWarning):
        assert selection.attr("class id") == ("b", True)


def test_find_remove_attr():
    document = Document(
        '<div style="color: red">'
        '<p style="margin: 0" id="a">x</p>'
        '<span onclick="f()"/>'
        "<em>y</em>"
        "</div>"
    )
    div = document.css_select("div")

    result = div.find_remove_attr("STYLE onclick")

    assert [x.local_name for x in result] == ["p", "span"]
    remaining = document.css_select("[style], [onclick]")
    assert [x.local_name for x in remaining] == ["div"]
    assert result.attr("id") == ("a", True)


def test_find_remove_attr_without_names():
    selection = Document('<div><p style="x"/></div>').css_select("div")
    assert selection.find_remove_attr("  ") is selection
    assert selection.find("p").attr("style") == ("x", True)


def test_remove_attr():
    document = Document('<p a="1" c="3">x</p><p b="2" c="3">y</p>')
    selection = document.css_select("p")

    assert selection.remove_attr("a  b") is selection
    assert [dict(x.attributes) for x in selection] == [{"c": "3"}, {"c": "3"}]

    selection.remove_attr("a b")
    assert [dict(x.attributes) for x in selection] == [{"c": "3"}, {"c": "3"}]

    selection.remove_attr("C")
    assert [dict(x.attributes) for x in selection] == [{}, {}]


def test_set_attr():
    selection = Document("<p/><p/>").css_select("p")

    assert selection.set_attr("data-x", "v") is selection

    assert selection.attr("data-x") == ("v", True)
    assert selection.attr("DATA-X") == ("v", True)
    assert all(x["data-x"] == "v" for x in selection)


def test_set_attr_keeps_position():
    selection = Document('<p a="1" b="2" c="3"/>').css_select("p")

    selection.set_attr("B", "two").set_attr("d", "4")

    assert list(selection[0].attributes.items()) == [
        ("a", "1"),
        ("b", "two"),
        ("c", "3"),
        ("d", "4"),
    ]


def test_set_attr_with_invalid_name():
    selection = Document("<p/>").css_select("p")

    with pytest.warns(UserWarning):
        selection.set_attr("a<b title", "x")

    assert dict(selection[0].attributes) == {"title": "x"}


def test_set_multiple_attrs():
    selection = Document("<input>").css_select("input")
    selection.set_attr("disabled readonly", "")
    assert selection.attr("disabled") == ("", True)
    assert selection.attr("readonly") == ("", True)


def test_find_remove_attr_with_non_css_names():
    document = Document('<div><a v-on:click="go()" href="#">x</a><b>y</b></div>')
    div = document.css_select("div")

    result = div.find_remove_attr("v-on:click")

    assert [x.local_name for x in result] == ["a"]
    assert dict(result[0].attributes) == {"href": "#"}
