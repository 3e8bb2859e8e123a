"""Primary public API for rfcsmith."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as _pkg_version

from rfcsmith.adapters.xml import (
    TargetDialect,
    TitleBlockEmitter,
    escape_xml,
    escape_xml_attribute,
    process_instruction,
    strip_markup,
    strip_markup_inplace,
    write_author,
    write_date,
    write_escaped,
    write_keywords,
    write_stripped_markup,
)
from rfcsmith.core.citations import (
    Citation,
    CitationCatalog,
    CitationClass,
    CitationIssue,
    CitationResolver,
    CitationSummary,
    ReferenceKind,
    classify_citations,
    parse_citation,
    resolve_reference,
)
from rfcsmith.core.config import CitationSources, XmlConfig
from rfcsmith.core.diagnostics import DiagnosticEmitter, LoggingEmitter, NullEmitter
from rfcsmith.core.exceptions import (
    CitationSyntaxError,
    MetadataError,
    RfcRenderingError,
    UnsupportedDialectError,
)
from rfcsmith.core.metadata import (
    Address,
    Author,
    DocumentDate,
    PostalAddress,
    ProcessInstructions,
    load_author,
    load_process_instructions,
)


try:
    __version__ = _pkg_version("rfcsmith")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "Address",
    "Author",
    "Citation",
    "CitationCatalog",
    "CitationClass",
    "CitationIssue",
    "CitationResolver",
    "CitationSources",
    "CitationSummary",
    "CitationSyntaxError",
    "DiagnosticEmitter",
    "DocumentDate",
    "LoggingEmitter",
    "MetadataError",
    "NullEmitter",
    "PostalAddress",
    "ProcessInstructions",
    "ReferenceKind",
    "RfcRenderingError",
    "TargetDialect",
    "TitleBlockEmitter",
    "UnsupportedDialectError",
    "XmlConfig",
    "__version__",
    "classify_citations",
    "escape_xml",
    "escape_xml_attribute",
    "load_author",
    "load_process_instructions",
    "parse_citation",
    "process_instruction",
    "resolve_reference",
    "strip_markup",
    "strip_markup_inplace",
    "write_author",
    "write_date",
    "write_escaped",
    "write_keywords",
    "write_stripped_markup",
]
