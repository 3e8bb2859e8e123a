"""Custom exception hierarchy for the xml2rfc rendering helpers."""

from __future__ import annotations


class RfcRenderingError(RuntimeError):
    """Base exception for xml2rfc rendering failures."""


class UnsupportedDialectError(RfcRenderingError, ValueError):
    """Raised when a target dialect other than v2 or v3 is requested."""


class CitationSyntaxError(RfcRenderingError, ValueError):
    """Raised when a citation token carries no reference at all."""


class MetadataError(RfcRenderingError, ValueError):
    """Raised when title-block metadata fails validation."""


def exception_messages(exc: BaseException) -> list[str]:
    """Return the collected message chain for an exception and its causes."""
    messages: list[str] = []
    visited: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        text = str(current).strip()
        if text:
            first_line = text.splitlines()[0].strip()
            if first_line:
                messages.append(first_line)
        current = current.__cause__ or current.__context__
    return messages


def exception_hint(exc: BaseException) -> str | None:
    """Return the most specific message available for an exception chain."""
    messages = exception_messages(exc)
    return messages[-1] if messages else None


__all__ = [
    "CitationSyntaxError",
    "MetadataError",
    "RfcRenderingError",
    "UnsupportedDialectError",
    "exception_hint",
    "exception_messages",
]
