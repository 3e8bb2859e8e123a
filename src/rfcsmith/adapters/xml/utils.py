"""Utility helpers specific to xml2rfc serialization."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from io import StringIO
from typing import Protocol, TypeVar
from xml.sax.saxutils import escape


class TextSink(Protocol):
    """Anything accepting text fragments, e.g. ``io.StringIO`` or an open file."""

    def write(self, text: str, /) -> object: ...


_T = TypeVar("_T")

_OPEN_TAG = "<"
_CLOSE_TAG = ">"
_ATTRIBUTE_ENTITIES = {'"': "&quot;"}


def escape_xml(text: str) -> str:
    """Replace ``<``, ``>`` and ``&`` with their named entities.

    Existing entities are not recognised, so ``&amp;`` becomes ``&amp;amp;``.
    Quotes are left untouched; use :func:`escape_xml_attribute` for values
    placed between double quotes.
    """
    if not text:
        return text
    return escape(text)


def escape_xml_attribute(text: str) -> str:
    """Escape a value destined for a double-quoted attribute."""
    if not text:
        return text
    return escape(text, _ATTRIBUTE_ENTITIES)


def write_escaped(out: TextSink, text: str) -> None:
    """Write ``text`` to ``out`` with markup-significant characters escaped."""
    if text:
        out.write(escape(text))


def _outside_tags(payload: Sequence[_T], opening: _T, closing: _T) -> Iterator[_T]:
    in_tag = False
    for item in payload:
        if item == opening:
            in_tag = True
            continue
        if item == closing:
            in_tag = False
            continue
        if not in_tag:
            yield item


def strip_markup_inplace(buffer: bytearray) -> bytearray:
    """Strip ``<...>`` spans from a caller-owned buffer and truncate it.

    The buffer is compacted in place and returned for convenience. A ``<``
    without a matching ``>`` drops everything up to the end of the buffer.
    """
    position = 0
    for value in _outside_tags(buffer, ord(_OPEN_TAG), ord(_CLOSE_TAG)):
        buffer[position] = value
        position += 1
    del buffer[position:]
    return buffer


def write_stripped_markup(out: TextSink, text: str) -> None:
    """Write ``text`` to ``out`` without any ``<...>`` spans."""
    stripped = "".join(_outside_tags(text, _OPEN_TAG, _CLOSE_TAG))
    if stripped:
        out.write(stripped)


def strip_markup(text: str) -> str:
    """Return ``text`` with every tag-like span removed."""
    buffer = StringIO()
    write_stripped_markup(buffer, text)
    return buffer.getvalue()


__all__ = [
    "TextSink",
    "escape_xml",
    "escape_xml_attribute",
    "strip_markup",
    "strip_markup_inplace",
    "write_escaped",
    "write_stripped_markup",
]
