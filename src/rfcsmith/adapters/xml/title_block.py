"""Render front-matter metadata as xml2rfc title-block elements."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum
from typing import Any

from rfcsmith.core.diagnostics import DiagnosticEmitter, LoggingEmitter
from rfcsmith.core.exceptions import UnsupportedDialectError
from rfcsmith.core.metadata import Author, DocumentDate, ProcessInstructions

from .utils import TextSink, escape_xml_attribute, write_escaped


class TargetDialect(IntEnum):
    """Supported revisions of the xml2rfc vocabulary."""

    V2 = 2
    V3 = 3


# English names regardless of the active locale.
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Value used by xml2rfc when a yes/no instruction is left unset.
_YES_NO_DEFAULTS: dict[str, str] = {
    "toc": "yes",
    "symrefs": "yes",
    "sortrefs": "yes",
    "compact": "yes",
    "topblock": "yes",
    "comments": "no",
    "subcompact": "no",
    "private": "",
}
_LITERAL_INSTRUCTIONS = ("header", "footer")

PROCESS_INSTRUCTION_NAMES: tuple[str, ...] = (*_YES_NO_DEFAULTS, *_LITERAL_INSTRUCTIONS)


def yes_no(value: bool | None, default: str) -> str:
    """Return ``"yes"``/``"no"`` for a tri-state toggle, ``default`` when unset."""
    if value is None:
        return default
    return "yes" if value else "no"


class TitleBlockEmitter:
    """Write author, date, keyword and processing-instruction elements.

    Free text placed in element content goes through the entity encoder and
    attribute values additionally have double quotes escaped. Postal codes,
    phone numbers, e-mail addresses, URIs and keywords are written verbatim.
    """

    def __init__(
        self,
        version: int | TargetDialect = TargetDialect.V2,
        *,
        emitter: DiagnosticEmitter | None = None,
    ) -> None:
        try:
            self.dialect = TargetDialect(version)
        except ValueError as exc:
            raise UnsupportedDialectError(
                f"Unsupported xml2rfc version {version!r}; expected 2 or 3."
            ) from exc
        self._emitter = emitter or LoggingEmitter()

    @property
    def version(self) -> int:
        return int(self.dialect)

    def write_author(self, out: TextSink, author: Author) -> None:
        out.write("<author")
        out.write(f' initials="{escape_xml_attribute(author.initials)}"')
        out.write(f' surname="{escape_xml_attribute(author.surname)}"')
        out.write(f' fullname="{escape_xml_attribute(author.fullname)}">\n')

        abbrev = ""
        if author.organization_abbrev:
            abbrev = f' abbrev="{escape_xml_attribute(author.organization_abbrev)}"'
        out.write(f"<organization{abbrev}>")
        write_escaped(out, author.organization)
        out.write("</organization>\n")

        address = author.address
        postal = address.postal
        out.write("<address>\n")
        out.write("<postal>\n")
        # Multiline fields become one element per line.
        for street in postal.street.split("\n"):
            self._write_text_element(out, "street", street)
        for city in postal.city.split("\n"):
            self._write_text_element(out, "city", city)
        for code in postal.code.split("\n"):
            out.write(f"<code>{code}</code>\n")
        for country in postal.country.split("\n"):
            self._write_text_element(out, "country", country)
        out.write("</postal>\n")

        out.write(f"<phone>{address.phone}</phone>\n")
        out.write(f"<email>{address.email}</email>\n")
        out.write(f"<uri>{address.uri}</uri>\n")
        out.write("</address>\n")
        out.write("</author>\n")

    def write_date(self, out: TextSink, value: Any) -> None:
        """Write a ``<date/>`` element, omitting the parts that were not supplied.

        Values that cannot be read as a date are reported and rendered as an
        empty ``<date/>``.
        """
        try:
            document_date = DocumentDate.from_value(value)
        except (TypeError, ValueError) as exc:
            self._emitter.warning(f"Ignoring unsupported document date: {value!r}", exc)
            document_date = DocumentDate()
        year = ""
        if document_date.year is not None:
            year = f' year="{document_date.year}"'
        month = ""
        if document_date.month is not None:
            month = f' month="{MONTH_NAMES[document_date.month - 1]}"'
        day = ""
        if document_date.day is not None:
            day = f' day="{document_date.day}"'
        out.write(f"<date{year}{month}{day}/>\n\n")

    def write_keywords(self, out: TextSink, keywords: Iterable[str]) -> None:
        for keyword in keywords:
            out.write(f"<keyword>{keyword}</keyword>\n")

    def process_instruction(self, pi: ProcessInstructions, name: str) -> str:
        """Return the ``<?rfc ...?>`` line for ``name``.

        Version 3 documents carry these settings as ``<rfc>`` attributes, so
        nothing is produced for them here.
        """
        if self.dialect is not TargetDialect.V2:
            return ""
        if name in _YES_NO_DEFAULTS:
            value = yes_no(getattr(pi, name), _YES_NO_DEFAULTS[name])
            return f'<?rfc {name}="{value}"?>\n'
        if name in _LITERAL_INSTRUCTIONS:
            literal = getattr(pi, name)
            if literal is None:
                return ""
            return f'<?rfc {name}="{literal}"?>\n'
        self._emitter.warning(f"Unhandled or unknown processing instruction: {name}")
        return ""

    def write_process_instructions(
        self,
        out: TextSink,
        pi: ProcessInstructions,
        names: Iterable[str] | None = None,
    ) -> None:
        """Write the requested instructions, all known ones by default."""
        for name in PROCESS_INSTRUCTION_NAMES if names is None else names:
            line = self.process_instruction(pi, name)
            if line:
                out.write(line)

    def write_title_block(
        self,
        out: TextSink,
        *,
        authors: Iterable[Author],
        date: Any = None,
        keywords: Iterable[str] = (),
    ) -> None:
        """Write authors in declaration order, then the date and keywords."""
        for author in authors:
            self.write_author(out, author)
        self.write_date(out, date)
        self.write_keywords(out, keywords)

    @staticmethod
    def _write_text_element(out: TextSink, tag: str, text: str) -> None:
        out.write(f"<{tag}>")
        write_escaped(out, text)
        out.write(f"</{tag}>\n")


def write_author(out: TextSink, author: Author) -> None:
    TitleBlockEmitter().write_author(out, author)


def write_date(out: TextSink, value: Any, *, emitter: DiagnosticEmitter | None = None) -> None:
    TitleBlockEmitter(emitter=emitter).write_date(out, value)


def write_keywords(out: TextSink, keywords: Iterable[str]) -> None:
    TitleBlockEmitter().write_keywords(out, keywords)


def process_instruction(
    pi: ProcessInstructions,
    name: str,
    version: int | TargetDialect = TargetDialect.V2,
    *,
    emitter: DiagnosticEmitter | None = None,
) -> str:
    return TitleBlockEmitter(version, emitter=emitter).process_instruction(pi, name)


__all__ = [
    "MONTH_NAMES",
    "PROCESS_INSTRUCTION_NAMES",
    "TargetDialect",
    "TitleBlockEmitter",
    "process_instruction",
    "write_author",
    "write_date",
    "write_keywords",
    "yes_no",
]
