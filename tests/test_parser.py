from lxml import html

from lxml_selection import Document, ParserOptions


def test_default_options():
    options = ParserOptions()
    assert options.encoding is None
    assert not options.remove_blank_text
    assert not options.remove_comments
    assert not options.remove_processing_instructions
    assert isinstance(options.make_parser(), html.HTMLParser)


def test_options_are_kept_by_document():
    options = ParserOptions(remove_comments=True)
    document = Document("<p>a<!-- b -->c</p>", options=options)
    assert document.options is options
    assert document.css_select("p").text() == "ac"
