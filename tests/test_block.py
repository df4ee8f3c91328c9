"""Tests for AsideBlock rendering, independent of Jinja."""

from asidetag.block import AsideBlock, capitalize_first


class ParagraphConverter:
    """Minimal converter that records its input and wraps it in <p>."""

    def __init__(self):
        self.calls = []

    def convert(self, content):
        self.calls.append(content)
        return f"<p>{content}</p>"


def test_capitalize_first_only_touches_first_character():
    """Only the first character is uppercased; the rest is left as-is."""

    assert capitalize_first("warning") == "Warning"
    assert capitalize_first("WARNING") == "WARNING"
    assert capitalize_first("wARNING") == "WARNING"
    assert capitalize_first("") == ""


def test_capitalize_first_does_not_title_case():
    """Multi-word types are not title-cased."""

    assert capitalize_first("side note") == "Side note"
    assert capitalize_first("warning-box") == "Warning-box"


def test_capitalize_first_unicode():
    """Non-ASCII first characters are uppercased too."""

    assert capitalize_first("émile") == "Émile"
    assert capitalize_first("1st") == "1st"


def test_render_wraps_converted_content():
    """Test the body is converted once and wrapped in the aside skeleton."""

    converter = ParagraphConverter()
    block = AsideBlock("warning")

    html = block.render(lambda: "Careful", converter)

    assert html == '<aside class="warning"><h1>Warning</h1><p>Careful</p></aside>'
    assert converter.calls == ["Careful"]


def test_render_empty_type():
    """An empty type is not an error: empty class and empty heading."""
    html = AsideBlock("").render(lambda: "x", ParagraphConverter())
    assert html == '<aside class=""><h1></h1><p>x</p></aside>'


def test_render_does_not_escape_type():
    """The type is interpolated raw into the class and the heading."""

    html = AsideBlock('a"b').render(lambda: "x", ParagraphConverter())
    assert html == '<aside class="a"b"><h1>A"b</h1><p>x</p></aside>'


def test_render_is_repeatable():
    """Rendering the same block twice gives identical output."""

    converter = ParagraphConverter()
    block = AsideBlock("note")

    first = block.render(lambda: "same", converter)
    second = block.render(lambda: "same", converter)

    assert first == second
    assert block.type == "note"
