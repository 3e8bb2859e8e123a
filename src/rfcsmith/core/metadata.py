"""Validated title-block metadata: authors, document date and rendering toggles."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime
import re
from typing import Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
    model_validator,
)

from .exceptions import MetadataError


__all__ = [
    "Address",
    "Author",
    "DocumentDate",
    "PostalAddress",
    "ProcessInstructions",
    "load_author",
    "load_process_instructions",
]


def _coerce_text(value: Any) -> str:
    """Accept scalars or sequences of lines and return newline-joined text."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return "\n".join(str(item) for item in value)
    return str(value)


class _TextModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_strings(cls, value: Any, info: ValidationInfo) -> Any:
        if info.field_name is None or cls.model_fields[info.field_name].annotation is not str:
            return value
        return _coerce_text(value)


class PostalAddress(_TextModel):
    """Postal block; every field may span several lines."""

    street: str = ""
    city: str = ""
    code: str = ""
    country: str = ""


class Address(_TextModel):
    postal: PostalAddress = Field(default_factory=PostalAddress)
    phone: str = ""
    email: str = ""
    uri: str = Field(default="", validation_alias=AliasChoices("uri", "url"))


class Author(_TextModel):
    """An author declared in the document front matter."""

    initials: str = ""
    surname: str = ""
    fullname: str = ""
    organization: str = ""
    organization_abbrev: str = Field(
        default="",
        validation_alias=AliasChoices("organization_abbrev", "abbrev", "organizationabbrev"),
    )
    address: Address = Field(default_factory=Address)


_ISO_DATE_RE = re.compile(r"^(?P<year>\d{4})(?:-(?P<month>\d{1,2})(?:-(?P<day>\d{1,2}))?)?$")


class DocumentDate(BaseModel):
    """Calendar date whose parts may be individually absent."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int | None = None
    month: int | None = None
    day: int | None = None

    @field_validator("year", "month", "day", mode="before")
    @classmethod
    def _drop_unset(cls, value: Any) -> Any:
        if value is None or value == "":
            return None
        number = int(value)
        # Zero or negative means the part was not supplied.
        return number if number > 0 else None

    @model_validator(mode="after")
    def _check_ranges(self) -> DocumentDate:
        if self.month is not None and self.month > 12:
            raise ValueError(f"Month must be between 1 and 12, got {self.month}.")
        if self.day is not None and self.day > 31:
            raise ValueError(f"Day must be between 1 and 31, got {self.day}.")
        return self

    @classmethod
    def from_value(cls, value: Any) -> DocumentDate:
        """Build a date from ``date``/``datetime`` objects, mappings or ISO strings."""
        if value is None:
            return cls()
        if isinstance(value, DocumentDate):
            return value
        if isinstance(value, (date, datetime)):
            return cls(year=value.year, month=value.month, day=value.day)
        if isinstance(value, Mapping):
            return cls.model_validate(dict(value))
        if isinstance(value, str):
            candidate = value.strip()
            if not candidate:
                return cls()
            match = _ISO_DATE_RE.match(candidate)
            if match is not None:
                return cls.model_validate(match.groupdict())
            parts = _parse_date_string(candidate)
            if parts is None:
                raise ValueError(f"Unsupported date value '{value}'.")
            return cls(year=parts[0], month=parts[1], day=parts[2])
        raise TypeError(f"Unsupported date value of type {type(value).__name__}.")


_DAY_FORMATS = (
    "%Y/%m/%d",
    "%d/%m/%Y",
    "%d.%m.%Y",
    "%d %B %Y",
    "%d %b %Y",
    "%B %d, %Y",
    "%b %d, %Y",
)
_MONTH_FORMATS = ("%B %Y", "%b %Y")


def _parse_date_string(candidate: str) -> tuple[int, int | None, int | None] | None:
    """Parse ISO timestamps and a few common spellings into date parts."""
    timestamp = candidate
    if timestamp[-1:] in ("Z", "z"):
        # fromisoformat() only accepts the UTC designator from Python 3.11.
        timestamp = f"{timestamp[:-1]}+00:00"
    try:
        parsed = datetime.fromisoformat(timestamp)
    except ValueError:
        pass
    else:
        return parsed.year, parsed.month, parsed.day

    for fmt in _DAY_FORMATS:
        try:
            parsed = datetime.strptime(candidate, fmt)
        except ValueError:
            continue
        return parsed.year, parsed.month, parsed.day
    for fmt in _MONTH_FORMATS:
        try:
            parsed = datetime.strptime(candidate, fmt)
        except ValueError:
            continue
        return parsed.year, parsed.month, None
    return None


class ProcessInstructions(BaseModel):
    """Rendering toggles of the v2 vocabulary.

    ``None`` leaves the decision to the per-instruction default. ``header`` and
    ``footer`` are omitted entirely when unset.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    toc: bool | None = None
    symrefs: bool | None = None
    sortrefs: bool | None = None
    compact: bool | None = None
    topblock: bool | None = None
    comments: bool | None = None
    subcompact: bool | None = None
    private: bool | None = None
    header: str | None = None
    footer: str | None = None

    @field_validator(
        "toc",
        "symrefs",
        "sortrefs",
        "compact",
        "topblock",
        "comments",
        "subcompact",
        "private",
        mode="before",
    )
    @classmethod
    def _coerce_yes_no(cls, value: Any) -> Any:
        if isinstance(value, str):
            if value == "":
                return None
            # Only an explicit "yes" turns a toggle on.
            return value == "yes"
        return value


def load_author(payload: Mapping[str, Any]) -> Author:
    """Validate a front-matter author mapping."""
    try:
        return Author.model_validate(dict(payload))
    except ValidationError as exc:
        raise MetadataError("Invalid author metadata.") from exc


def load_process_instructions(payload: Mapping[str, Any] | None) -> ProcessInstructions:
    """Validate the processing-instruction table of the front matter."""
    try:
        return ProcessInstructions.model_validate(dict(payload or {}))
    except ValidationError as exc:
        raise MetadataError("Invalid processing instruction metadata.") from exc
