from __future__ import annotations

from io import StringIO

import pytest

from rfcsmith.adapters.xml.utils import (
    escape_xml,
    escape_xml_attribute,
    strip_markup,
    strip_markup_inplace,
    write_escaped,
    write_stripped_markup,
)


SAMPLES = [
    "",
    "plain text",
    "A & B <C>",
    "before <b>bold</b> after",
    "<a href=\"x\">link</a> & more",
    "unterminated <tag and the rest",
    "stray > closing",
    "nested <<inner>> tags",
    "café <i>naïve</i> — done",
    "already &amp; encoded &lt;",
]


def test_escape_xml_replaces_markup_characters() -> None:
    assert escape_xml("A & B <C>") == "A &amp; B &lt;C&gt;"


def test_escape_xml_does_not_decode_existing_entities() -> None:
    assert escape_xml("&amp;") == "&amp;amp;"


def test_escape_xml_leaves_quotes_untouched() -> None:
    assert escape_xml("say \"hi\" 'there'") == "say \"hi\" 'there'"


def test_escape_xml_attribute_escapes_double_quotes() -> None:
    assert escape_xml_attribute('O"Brien & <co>') == "O&quot;Brien &amp; &lt;co&gt;"


@pytest.mark.parametrize("text", SAMPLES)
def test_escape_xml_never_shrinks(text: str) -> None:
    assert len(escape_xml(text)) >= len(text)


def test_write_escaped_appends_to_sink() -> None:
    out = StringIO()
    out.write("<organization>")
    write_escaped(out, "Smith & Sons")
    out.write("</organization>")
    assert out.getvalue() == "<organization>Smith &amp; Sons</organization>"


def test_strip_markup_removes_tags() -> None:
    assert strip_markup("before <b>bold</b> after") == "before bold after"


def test_strip_markup_drops_unterminated_tag() -> None:
    assert strip_markup("keep <lost forever") == "keep "


def test_strip_markup_drops_stray_closing_bracket() -> None:
    assert strip_markup("a > b") == "a  b"


def test_strip_markup_does_not_track_nesting() -> None:
    assert strip_markup("x<<y>z>w") == "xzw"


@pytest.mark.parametrize("text", SAMPLES)
def test_strip_markup_is_idempotent(text: str) -> None:
    once = strip_markup(text)
    assert strip_markup(once) == once


@pytest.mark.parametrize("text", SAMPLES)
def test_encoded_stripped_text_is_markup_free(text: str) -> None:
    encoded = escape_xml(strip_markup(text))
    assert "<" not in encoded
    assert ">" not in encoded
    residue = encoded.replace("&amp;", "").replace("&lt;", "").replace("&gt;", "")
    assert "&" not in residue


@pytest.mark.parametrize("text", SAMPLES)
def test_inplace_and_sink_flavors_agree(text: str) -> None:
    buffer = bytearray(text.encode("utf-8"))
    result = strip_markup_inplace(buffer)

    sink = StringIO()
    write_stripped_markup(sink, text)

    assert result is buffer
    assert bytes(buffer).decode("utf-8") == sink.getvalue()


def test_strip_markup_inplace_truncates_buffer() -> None:
    buffer = bytearray(b"<p>hi</p>")
    strip_markup_inplace(buffer)
    assert buffer == bytearray(b"hi")
