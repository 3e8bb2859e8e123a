"""Shared data structures for citation processing."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class CitationIssue:
    """Represents a problem encountered while cataloguing citations."""

    message: str
    key: str | None = None
    link: str | None = None
