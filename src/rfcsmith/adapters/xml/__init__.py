"""xml2rfc serialization helpers."""

from __future__ import annotations

from .title_block import (
    MONTH_NAMES,
    PROCESS_INSTRUCTION_NAMES,
    TargetDialect,
    TitleBlockEmitter,
    process_instruction,
    write_author,
    write_date,
    write_keywords,
)
from .utils import (
    TextSink,
    escape_xml,
    escape_xml_attribute,
    strip_markup,
    strip_markup_inplace,
    write_escaped,
    write_stripped_markup,
)


__all__ = [
    "MONTH_NAMES",
    "PROCESS_INSTRUCTION_NAMES",
    "TargetDialect",
    "TextSink",
    "TitleBlockEmitter",
    "escape_xml",
    "escape_xml_attribute",
    "process_instruction",
    "strip_markup",
    "strip_markup_inplace",
    "write_author",
    "write_date",
    "write_escaped",
    "write_keywords",
    "write_stripped_markup",
]
