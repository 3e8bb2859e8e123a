from __future__ import annotations

from datetime import date, datetime

from pydantic import ValidationError
import pytest

from rfcsmith.core.exceptions import MetadataError
from rfcsmith.core.metadata import (
    Author,
    DocumentDate,
    ProcessInstructions,
    load_author,
    load_process_instructions,
)


def test_load_author_accepts_front_matter_shape() -> None:
    author = load_author(
        {
            "initials": "R.",
            "surname": "Gieben",
            "fullname": "R. (Miek) Gieben",
            "organization": "Google",
            "abbrev": "GOOG",
            "address": {
                "postal": {"street": ["1600 Amphitheatre Pkwy", "Building 43"]},
                "email": "miek@example.org",
                "url": "https://miek.nl",
            },
        }
    )

    assert author.organization_abbrev == "GOOG"
    assert author.address.postal.street == "1600 Amphitheatre Pkwy\nBuilding 43"
    assert author.address.uri == "https://miek.nl"
    assert author.address.postal.city == ""


def test_load_author_wraps_validation_errors() -> None:
    with pytest.raises(MetadataError) as excinfo:
        load_author({"surname": "Doe", "nickname": "JD"})
    assert isinstance(excinfo.value.__cause__, ValidationError)


def test_author_is_immutable() -> None:
    author = Author(surname="Doe")
    with pytest.raises(ValidationError):
        author.surname = "Roe"  # type: ignore[misc]


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, (None, None, None)),
        (date(1997, 4, 3), (1997, 4, 3)),
        (datetime(2015, 8, 27, 12, 30), (2015, 8, 27)),
        ("2015", (2015, None, None)),
        ("2015-08", (2015, 8, None)),
        ("2015-08-27", (2015, 8, 27)),
        ({"year": 1997, "month": 4, "day": 0}, (1997, 4, None)),
        ({"year": 0, "month": 0, "day": 0}, (None, None, None)),
        ("", (None, None, None)),
        ("2015-08-27T10:00:00Z", (2015, 8, 27)),
        ("2015-08-27T10:00:00+02:00", (2015, 8, 27)),
        ("2015-08-27 23:59", (2015, 8, 27)),
        ("27 Aug 2015", (2015, 8, 27)),
        ("August 27, 2015", (2015, 8, 27)),
        ("2015/08/27", (2015, 8, 27)),
        ("August 2015", (2015, 8, None)),
    ],
)
def test_document_date_from_value(value: object, expected: tuple[object, ...]) -> None:
    result = DocumentDate.from_value(value)
    assert (result.year, result.month, result.day) == expected


def test_document_date_rejects_invalid_month() -> None:
    with pytest.raises(ValidationError):
        DocumentDate(year=2015, month=13)


def test_document_date_rejects_unknown_strings() -> None:
    with pytest.raises(ValueError):
        DocumentDate.from_value("last tuesday")


def test_process_instructions_accept_yes_no_strings() -> None:
    pi = load_process_instructions(
        {"toc": "yes", "compact": "no", "private": "", "comments": True, "header": "Draft"}
    )

    assert pi.toc is True
    assert pi.compact is False
    assert pi.private is None
    assert pi.comments is True
    assert pi.header == "Draft"
    assert pi.footer is None


def test_process_instructions_non_yes_string_is_negative() -> None:
    assert ProcessInstructions(symrefs="maybe").symrefs is False


def test_load_process_instructions_rejects_unknown_names() -> None:
    with pytest.raises(MetadataError):
        load_process_instructions({"strict": "yes"})


def test_load_process_instructions_defaults_when_missing() -> None:
    assert load_process_instructions(None) == ProcessInstructions()
