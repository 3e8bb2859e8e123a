"""Configuration models used by the xml2rfc helpers.

CitationSources

`rfc_base_url` (`str`)
: Directory URL hosting `reference.RFC.*.xml` bibliography entries. A trailing
  slash is appended when missing.

`draft_base_url` (`str`)
: Directory URL hosting `reference.I-D.*.xml` bibliography entries for
  Internet-Drafts. A trailing slash is appended when missing.

XmlConfig

`version` (`int`)
: Target xml2rfc vocabulary, `2` or `3`. Processing instructions are only
  emitted for version 2.

`citations` (`CitationSources`)
: Bibliography locations handed to the citation resolver.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


if TYPE_CHECKING:  # pragma: no cover - typing only
    from rfcsmith.adapters.xml.title_block import TitleBlockEmitter
    from rfcsmith.core.citations.resolver import CitationResolver
    from rfcsmith.core.diagnostics import DiagnosticEmitter


# These have been known to change; current as of 2015-08-27.
DEFAULT_RFC_BASE_URL = "http://xml2rfc.ietf.org/public/rfc/bibxml/"
DEFAULT_DRAFT_BASE_URL = "http://xml2rfc.ietf.org/public/rfc/bibxml3/"


class CitationSources(BaseModel):
    """Base URLs of the remote bibliography archives."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    rfc_base_url: str = Field(default=DEFAULT_RFC_BASE_URL, description="RFC archive")
    draft_base_url: str = Field(default=DEFAULT_DRAFT_BASE_URL, description="I-D archive")

    @field_validator("rfc_base_url", "draft_base_url")
    @classmethod
    def _ensure_directory(cls, value: str) -> str:
        candidate = value.strip()
        if not candidate:
            raise ValueError("Bibliography base URL cannot be empty.")
        if not candidate.endswith("/"):
            candidate += "/"
        return candidate


class XmlConfig(BaseModel):
    """Settings shared by the citation resolver and the title-block emitter."""

    model_config = ConfigDict(extra="forbid")

    version: Literal[2, 3] = 2
    citations: CitationSources = Field(default_factory=CitationSources)

    def resolver(self) -> CitationResolver:
        """Return a citation resolver bound to the configured sources."""
        from rfcsmith.core.citations.resolver import CitationResolver

        return CitationResolver(self.citations)

    def title_block_emitter(
        self, emitter: DiagnosticEmitter | None = None
    ) -> TitleBlockEmitter:
        """Return a title-block emitter targeting the configured dialect."""
        from rfcsmith.adapters.xml.title_block import TitleBlockEmitter

        return TitleBlockEmitter(self.version, emitter=emitter)


__all__ = [
    "DEFAULT_DRAFT_BASE_URL",
    "DEFAULT_RFC_BASE_URL",
    "CitationSources",
    "XmlConfig",
]
