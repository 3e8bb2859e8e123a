"""Map citations onto the files of the xml2rfc bibliography archives."""

from __future__ import annotations

from collections.abc import Mapping

from ...adapters.xml.utils import escape_xml_attribute
from ..config import CitationSources
from .models import Citation, ReferenceKind


_RFC_PREFIX = "reference.RFC."
_DRAFT_PREFIX = "reference.I-D.draft-"
_DRAFT_LATEST_PREFIX = "reference.I-D."
_EXTENSION = ".xml"


class CitationResolver:
    """Derive canonical bibliography URLs from citations.

    For ``I-D.ietf-dane-openpgpkey`` with revision 2 this yields
    ``<draft_base_url>reference.I-D.draft-ietf-dane-openpgpkey-02.xml``; without a
    revision the archive's latest copy is used instead:
    ``<draft_base_url>reference.I-D.ietf-dane-openpgpkey.xml``.
    """

    def __init__(self, sources: CitationSources | None = None) -> None:
        self._sources = sources or CitationSources()

    @property
    def sources(self) -> CitationSources:
        return self._sources

    def resolve(self, citation: Citation) -> str:
        """Return the bibliography URL for ``citation`` or ``""`` when unknown."""
        kind = citation.kind
        if kind is None:
            return ""
        identifier = citation.identifier
        match kind:
            case ReferenceKind.RFC:
                return f"{self._sources.rfc_base_url}{_RFC_PREFIX}{identifier}{_EXTENSION}"
            case ReferenceKind.INTERNET_DRAFT:
                base = self._sources.draft_base_url
                if citation.sequence is None:
                    return f"{base}{_DRAFT_LATEST_PREFIX}{identifier}{_EXTENSION}"
                return f"{base}{_DRAFT_PREFIX}{identifier}-{citation.sequence:02d}{_EXTENSION}"

    def resolve_many(self, citations: Mapping[str, Citation]) -> dict[str, str]:
        """Resolve every citation of a mapping, keeping its key order."""
        return {key: self.resolve(citation) for key, citation in citations.items()}

    def include_element(self, citation: Citation) -> str:
        """Return the ``xi:include`` element pulling the entry into the back matter."""
        url = self.resolve(citation)
        if not url:
            return ""
        return f'<xi:include href="{escape_xml_attribute(url)}"/>\n'


def resolve_reference(citation: Citation, sources: CitationSources | None = None) -> str:
    """Resolve a single citation against ``sources`` (defaults to the IETF archives)."""
    return CitationResolver(sources).resolve(citation)


__all__ = ["CitationResolver", "resolve_reference"]
