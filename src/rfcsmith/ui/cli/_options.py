"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from typing import Annotated

import typer

from rfcsmith.core.config import DEFAULT_DRAFT_BASE_URL, DEFAULT_RFC_BASE_URL


SOURCES_PANEL = "Bibliography Sources"
DIAGNOSTICS_PANEL = "Diagnostics"

RfcBaseUrlOption = Annotated[
    str,
    typer.Option(
        "--rfc-base-url",
        help="Directory URL hosting reference.RFC.*.xml entries.",
        rich_help_panel=SOURCES_PANEL,
    ),
]

DraftBaseUrlOption = Annotated[
    str,
    typer.Option(
        "--draft-base-url",
        help="Directory URL hosting reference.I-D.*.xml entries.",
        rich_help_panel=SOURCES_PANEL,
    ),
]

StrictOption = Annotated[
    bool,
    typer.Option(
        "--strict",
        help="Exit with an error when a citation does not map to a bibliography file.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

VerboseOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase CLI verbosity. Combine multiple times for additional diagnostics.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

DebugOption = Annotated[
    bool,
    typer.Option(
        "--debug",
        help="Show full tracebacks when an unexpected error occurs.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

__all__ = [
    "DEFAULT_DRAFT_BASE_URL",
    "DEFAULT_RFC_BASE_URL",
    "DIAGNOSTICS_PANEL",
    "SOURCES_PANEL",
    "DebugOption",
    "DraftBaseUrlOption",
    "RfcBaseUrlOption",
    "StrictOption",
    "VerboseOption",
]
