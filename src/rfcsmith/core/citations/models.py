"""Citation records and the parser for compact citation tokens."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from ..exceptions import CitationSyntaxError


class ReferenceKind(Enum):
    """Bibliography archives a citation can point into."""

    RFC = "RFC"
    INTERNET_DRAFT = "I-D"

    @property
    def identifier_offset(self) -> int:
        """Return the position where the identifier starts inside a link."""
        if self is ReferenceKind.RFC:
            return 3
        # Skip the separator following "I-D".
        return 4

    @classmethod
    def from_link(cls, link: str) -> ReferenceKind | None:
        """Classify a raw link, returning ``None`` for unresolvable tokens."""
        if len(link) < 4:
            return None
        for kind in cls:
            if link[:3] == kind.value:
                return kind
        return None


class CitationClass(Enum):
    """Role of a reference in the back matter."""

    INFORMATIVE = "informative"
    NORMATIVE = "normative"


_CLASS_ALIASES = {
    "i": CitationClass.INFORMATIVE,
    "?": CitationClass.INFORMATIVE,
    "n": CitationClass.NORMATIVE,
    "!": CitationClass.NORMATIVE,
}


class Citation(BaseModel):
    """A bibliographic reference encountered in the document body."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    link: str
    sequence: int | None = None
    citation_class: CitationClass | None = Field(default=None, alias="class")

    _kind: ReferenceKind | None = PrivateAttr(default=None)

    def model_post_init(self, context: Any, /) -> None:
        self._kind = ReferenceKind.from_link(self.link)

    @field_validator("sequence", mode="before")
    @classmethod
    def _normalise_sequence(cls, value: Any) -> int | None:
        if value is None:
            return None
        if isinstance(value, str):
            candidate = value.strip()
            if not candidate:
                return None
            if not (candidate.isascii() and candidate.removeprefix("-").isdigit()):
                raise ValueError(f"Revision '{value}' is not a whole number.")
            value = int(candidate)
        elif isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Revision must be a whole number, got {type(value).__name__}.")
        # Negative revisions are the legacy spelling of "latest".
        return value if value >= 0 else None

    @field_validator("citation_class", mode="before")
    @classmethod
    def _coerce_class(cls, value: Any) -> Any:
        if isinstance(value, str):
            candidate = value.strip().lower()
            if not candidate:
                return None
            return _CLASS_ALIASES.get(candidate, candidate)
        return value

    @property
    def kind(self) -> ReferenceKind | None:
        """Return the archive this citation resolves into, if any."""
        return self._kind

    @property
    def identifier(self) -> str:
        """Return the link without its kind tag."""
        kind = self.kind
        if kind is None:
            return ""
        return self.link[kind.identifier_offset :]

    @property
    def is_informative(self) -> bool:
        return self.citation_class is CitationClass.INFORMATIVE

    @property
    def is_normative(self) -> bool:
        return self.citation_class is CitationClass.NORMATIVE


def parse_citation(
    token: str,
    citation_class: CitationClass | str | None = None,
) -> Citation:
    """Parse a compact citation token such as ``@!I-D.ietf-dane-openpgpkey#02``.

    The optional ``?`` (informative) or ``!`` (normative) marker may follow the
    leading ``@``. A ``#`` suffix carries the draft revision; suffixes that are
    not numeric are discarded. An explicit ``citation_class`` takes precedence
    over the in-text marker.
    """
    candidate = token.strip()
    if candidate.startswith("[") and candidate.endswith("]"):
        candidate = candidate[1:-1].strip()
    candidate = candidate.removeprefix("@")

    marker: CitationClass | None = None
    if candidate[:1] in ("?", "!"):
        marker = _CLASS_ALIASES[candidate[0]]
        candidate = candidate[1:]

    link, separator, revision = candidate.partition("#")
    link = link.strip()
    if not link:
        raise CitationSyntaxError(f"Citation token '{token}' does not name a reference.")

    sequence: int | None = None
    revision = revision.strip()
    if separator and revision.isascii() and revision.isdigit():
        sequence = int(revision)

    return Citation(
        link=link,
        sequence=sequence,
        citation_class=citation_class if citation_class is not None else marker,
    )


__all__ = [
    "Citation",
    "CitationClass",
    "ReferenceKind",
    "parse_citation",
]
