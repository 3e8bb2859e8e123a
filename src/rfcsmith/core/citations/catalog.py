"""Aggregation utilities for the citations of a single document build."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import NamedTuple

from ..diagnostics import DiagnosticEmitter, LoggingEmitter
from .issues import CitationIssue
from .models import Citation, CitationClass, parse_citation
from .resolver import CitationResolver


class CitationSummary(NamedTuple):
    """Reference counts and the back-matter order of a citation mapping."""

    informative: int
    normative: int
    keys: list[str]


class ResolvedCitation(NamedTuple):
    key: str
    citation: Citation
    url: str


def classify_citations(citations: Mapping[str, Citation]) -> CitationSummary:
    """Count informative and normative references and sort the keys.

    Citations without a class are listed but counted in neither tally. Keys are
    ordered by code point so the rendered reference list is reproducible.
    """
    informative = 0
    normative = 0
    for citation in citations.values():
        if citation.citation_class is CitationClass.INFORMATIVE:
            informative += 1
        elif citation.citation_class is CitationClass.NORMATIVE:
            normative += 1
    return CitationSummary(informative, normative, sorted(citations))


class CitationCatalog:
    """Collect the citations of one document, keyed by their link."""

    def __init__(self, *, emitter: DiagnosticEmitter | None = None) -> None:
        self._citations: dict[str, Citation] = {}
        self._issues: list[CitationIssue] = []
        self._unresolved: set[str] = set()
        self._emitter = emitter or LoggingEmitter()

    @property
    def issues(self) -> Sequence[CitationIssue]:
        """Return the list of issues discovered while cataloguing citations."""
        return tuple(self._issues)

    def __len__(self) -> int:
        return len(self._citations)

    def __contains__(self, key: object) -> bool:
        return key in self._citations

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._citations))

    def add(self, citation: Citation, *, key: str | None = None) -> Citation:
        """Register ``citation`` and return the definition kept for its key.

        The first definition of a key wins. Identical repeats are ignored while
        conflicting ones are recorded as issues.
        """
        reference_key = key or citation.link
        existing = self._citations.get(reference_key)
        if existing is None:
            self._citations[reference_key] = citation
            return citation

        if existing != citation:
            self._issues.append(
                CitationIssue(
                    message=(
                        "Duplicate citation conflicts with an existing "
                        "reference; ignoring the newer definition."
                    ),
                    key=reference_key,
                    link=citation.link,
                )
            )
            self._emitter.event("citation_conflict", {"key": reference_key})
        return existing

    def add_token(self, token: str, citation_class: CitationClass | str | None = None) -> Citation:
        """Parse a citation token and register the result."""
        return self.add(parse_citation(token, citation_class))

    def extend(self, citations: Iterable[Citation]) -> None:
        for citation in citations:
            self.add(citation)

    def find(self, key: str) -> Citation | None:
        return self._citations.get(key)

    def to_dict(self) -> dict[str, Citation]:
        """Return a copy of the catalogued citations in insertion order."""
        return dict(self._citations)

    def classify(self) -> CitationSummary:
        return classify_citations(self._citations)

    def informative(self) -> list[str]:
        """Return the sorted keys of informative references."""
        return [key for key in self if self._citations[key].is_informative]

    def normative(self) -> list[str]:
        """Return the sorted keys of normative references."""
        return [key for key in self if self._citations[key].is_normative]

    def references(self, resolver: CitationResolver | None = None) -> list[ResolvedCitation]:
        """Resolve every citation in back-matter order.

        Citations that map to no bibliography file keep an empty URL and are
        reported once as issues.
        """
        resolver = resolver or CitationResolver()
        rows: list[ResolvedCitation] = []
        for key in self:
            citation = self._citations[key]
            url = resolver.resolve(citation)
            if not url and key not in self._unresolved:
                self._unresolved.add(key)
                self._issues.append(
                    CitationIssue(
                        message="Citation does not map to a bibliography file.",
                        key=key,
                        link=citation.link,
                    )
                )
                self._emitter.event("citation_unresolved", {"key": key, "link": citation.link})
            rows.append(ResolvedCitation(key, citation, url))
        return rows


__all__ = [
    "CitationCatalog",
    "CitationSummary",
    "ResolvedCitation",
    "classify_citations",
]
