"""Citation facade exposed through the rfcsmith public API.

Architecture
: `Citation` is an immutable record whose `ReferenceKind` is derived from the
  raw link, so resolution never slices strings at call sites.
: `CitationResolver` owns the bibliography base URLs and turns a citation into
  the canonical `reference.*.xml` location. No network access happens here.
: `CitationCatalog` gathers the citations of one document build, keeps the first
  definition of every key, and lists them in a reproducible order for the back
  matter.

Usage Example

```pycon
>>> from rfcsmith.core.citations import CitationCatalog, CitationResolver
>>> catalog = CitationCatalog()
>>> _ = catalog.add_token("@!I-D.ietf-dane-openpgpkey#02")
>>> _ = catalog.add_token("@?RFC2119")
>>> catalog.classify()
CitationSummary(informative=1, normative=1, keys=['I-D.ietf-dane-openpgpkey', 'RFC2119'])
>>> CitationResolver().resolve(catalog.find("RFC2119"))
'http://xml2rfc.ietf.org/public/rfc/bibxml/reference.RFC.2119.xml'
```
"""

from __future__ import annotations

from .catalog import CitationCatalog, CitationSummary, ResolvedCitation, classify_citations
from .issues import CitationIssue
from .models import Citation, CitationClass, ReferenceKind, parse_citation
from .resolver import CitationResolver, resolve_reference


__all__ = [
    "Citation",
    "CitationCatalog",
    "CitationClass",
    "CitationIssue",
    "CitationResolver",
    "CitationSummary",
    "ReferenceKind",
    "ResolvedCitation",
    "classify_citations",
    "parse_citation",
    "resolve_reference",
]
