from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any

import pytest

from rfcsmith.core.citations import (
    Citation,
    CitationCatalog,
    CitationClass,
    classify_citations,
)


INFORMATIVE = CitationClass.INFORMATIVE
NORMATIVE = CitationClass.NORMATIVE


class _RecordingEmitter:
    debug_enabled = False

    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, Any]]] = []

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        return

    def error(self, message: str, exc: BaseException | None = None) -> None:
        return

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        self.events.append((name, dict(payload)))


def _mapping() -> dict[str, Citation]:
    return {
        "RFC8174": Citation(link="RFC8174", citation_class=NORMATIVE),
        "I-D.ietf-dane-openpgpkey": Citation(
            link="I-D.ietf-dane-openpgpkey", sequence=2, citation_class=INFORMATIVE
        ),
        "RFC2119": Citation(link="RFC2119", citation_class=NORMATIVE),
        "RFC7049": Citation(link="RFC7049"),
    }


def test_classify_counts_and_sorts() -> None:
    informative, normative, keys = classify_citations(_mapping())

    assert informative == 1
    assert normative == 2
    assert keys == ["I-D.ietf-dane-openpgpkey", "RFC2119", "RFC7049", "RFC8174"]


def test_unclassified_citations_are_listed_but_not_counted() -> None:
    mapping = _mapping()
    summary = classify_citations(mapping)

    assert summary.informative + summary.normative < len(mapping)
    assert "RFC7049" in summary.keys
    assert len(summary.keys) == len(mapping)


def test_fully_classified_counts_match_size() -> None:
    mapping = _mapping()
    del mapping["RFC7049"]
    summary = classify_citations(mapping)
    assert summary.informative + summary.normative == len(mapping)


def test_sorting_is_code_point_order() -> None:
    mapping = {key: Citation(link=key) for key in ("rfc1", "RFC10", "RFC9", "I-D.b", "I-D.B")}
    assert classify_citations(mapping).keys == ["I-D.B", "I-D.b", "RFC10", "RFC9", "rfc1"]


def test_classify_does_not_mutate_input() -> None:
    mapping = _mapping()
    before = list(mapping.items())
    classify_citations(mapping)
    assert list(mapping.items()) == before


def test_classify_empty_mapping() -> None:
    assert classify_citations({}) == (0, 0, [])


def test_catalog_collects_tokens() -> None:
    catalog = CitationCatalog()
    catalog.add_token("@!RFC2119")
    catalog.add_token("@?I-D.ietf-dane-openpgpkey#02")
    catalog.add_token("RFC7049")

    assert len(catalog) == 3
    assert "RFC2119" in catalog
    assert list(catalog) == ["I-D.ietf-dane-openpgpkey", "RFC2119", "RFC7049"]
    assert catalog.normative() == ["RFC2119"]
    assert catalog.informative() == ["I-D.ietf-dane-openpgpkey"]
    assert catalog.classify() == (1, 1, ["I-D.ietf-dane-openpgpkey", "RFC2119", "RFC7049"])
    found = catalog.find("I-D.ietf-dane-openpgpkey")
    assert found is not None
    assert found.sequence == 2


def test_catalog_keeps_first_definition_and_reports_conflict() -> None:
    emitter = _RecordingEmitter()
    catalog = CitationCatalog(emitter=emitter)
    first = catalog.add(Citation(link="RFC2119", citation_class=NORMATIVE))
    kept = catalog.add(Citation(link="RFC2119", citation_class=INFORMATIVE))

    assert kept is first
    assert catalog.normative() == ["RFC2119"]
    assert len(catalog.issues) == 1
    issue = catalog.issues[0]
    assert issue.key == "RFC2119"
    assert "conflicts" in issue.message
    assert emitter.events == [("citation_conflict", {"key": "RFC2119"})]


def test_catalog_ignores_identical_repeats() -> None:
    catalog = CitationCatalog()
    catalog.add_token("@!RFC2119")
    catalog.add_token("@!RFC2119")
    assert len(catalog) == 1
    assert not catalog.issues


def test_catalog_references_resolve_in_sorted_order() -> None:
    emitter = _RecordingEmitter()
    catalog = CitationCatalog(emitter=emitter)
    catalog.extend([Citation(link="RFC8174"), Citation(link="XY"), Citation(link="RFC2119")])

    rows = catalog.references()
    assert [row.key for row in rows] == ["RFC2119", "RFC8174", "XY"]
    assert rows[0].url.endswith("reference.RFC.2119.xml")
    assert rows[2].url == ""

    # Unresolvable citations are reported once, even across calls.
    catalog.references()
    assert [issue.key for issue in catalog.issues] == ["XY"]
    assert emitter.events == [("citation_unresolved", {"key": "XY", "link": "XY"})]


def test_catalog_to_dict_is_a_copy() -> None:
    catalog = CitationCatalog()
    catalog.add_token("RFC2119")
    snapshot = catalog.to_dict()
    snapshot.clear()
    assert "RFC2119" in catalog


def test_catalog_logs_diagnostics_by_default(caplog: pytest.LogCaptureFixture) -> None:
    catalog = CitationCatalog()
    catalog.add_token("@!RFC2119")
    catalog.add_token("@?RFC2119")
    catalog.add_token("W3C.REC-xml")

    with caplog.at_level(logging.INFO):
        catalog.add_token("@?RFC2119")
        catalog.references()

    messages = [record.getMessage() for record in caplog.records]
    assert "Citation 'RFC2119' redefined with different attributes; keeping the first" in messages
    assert "Citation 'W3C.REC-xml' does not map to a bibliography file" in messages
