"""Implementation of the ``rfcsmith references`` command."""

from __future__ import annotations

from typing import Annotated

import typer

from rfcsmith.core.citations import CitationCatalog, CitationResolver, ResolvedCitation
from rfcsmith.core.config import CitationSources
from rfcsmith.core.exceptions import CitationSyntaxError

from .._options import (
    DEFAULT_DRAFT_BASE_URL,
    DEFAULT_RFC_BASE_URL,
    DraftBaseUrlOption,
    RfcBaseUrlOption,
    StrictOption,
)
from ..diagnostics import CliEmitter
from ..state import emit_error, get_cli_state


def _print_references(catalog: CitationCatalog, rows: list[ResolvedCitation]) -> None:
    from rich import box
    from rich.table import Table

    console = get_cli_state().console

    table = Table(title="References", box=box.SQUARE, header_style="bold cyan", show_edge=True)
    table.add_column("Key", no_wrap=True)
    table.add_column("Class", no_wrap=True)
    table.add_column("URL", overflow="fold")
    for row in rows:
        citation_class = row.citation.citation_class
        table.add_row(
            row.key,
            citation_class.value if citation_class is not None else "-",
            row.url or "[dim]unresolved[/]",
        )
    console.print(table)

    if catalog.issues:
        issue_table = Table(title="Warnings", box=box.SQUARE, header_style="bold cyan")
        issue_table.add_column("Key", style="yellow", no_wrap=True)
        issue_table.add_column("Message", style="yellow")
        for issue in catalog.issues:
            issue_table.add_row(issue.key or "-", issue.message)
        console.print(issue_table)

    summary = catalog.classify()
    summary_table = Table(title="Summary", box=box.SQUARE, header_style="bold cyan")
    summary_table.add_column("Category", style="bold")
    summary_table.add_column("Count", justify="right")
    summary_table.add_row("Informative", str(summary.informative))
    summary_table.add_row("Normative", str(summary.normative))
    summary_table.add_row("Total", str(len(summary.keys)))
    console.print(summary_table)


def references(
    tokens: Annotated[
        list[str],
        typer.Argument(
            metavar="CITATION...",
            help="Citation tokens such as '@!RFC2119' or 'I-D.ietf-dane-openpgpkey#02'.",
        ),
    ],
    rfc_base_url: RfcBaseUrlOption = DEFAULT_RFC_BASE_URL,
    draft_base_url: DraftBaseUrlOption = DEFAULT_DRAFT_BASE_URL,
    strict: StrictOption = False,
) -> None:
    """Resolve citations to bibliography files and list them in back-matter order."""
    state = get_cli_state()
    catalog = CitationCatalog(emitter=CliEmitter(state))
    for token in tokens:
        try:
            catalog.add_token(token)
        except CitationSyntaxError as exc:
            emit_error(str(exc), exception=exc)
            raise typer.Exit(code=1) from exc

    resolver = CitationResolver(
        CitationSources(rfc_base_url=rfc_base_url, draft_base_url=draft_base_url)
    )
    rows = catalog.references(resolver)
    _print_references(catalog, rows)

    if strict and any(not row.url for row in rows):
        emit_error("Some citations do not map to a bibliography file.")
        raise typer.Exit(code=1)


__all__ = ["references"]
