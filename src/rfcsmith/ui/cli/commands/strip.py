"""Implementation of the ``rfcsmith strip`` command."""

from __future__ import annotations

from typing import Annotated

import typer

from rfcsmith.adapters.xml.utils import escape_xml, strip_markup


def strip(
    text: Annotated[str, typer.Argument(help="Text containing embedded markup.")],
    raw: Annotated[
        bool,
        typer.Option("--raw", help="Print the stripped text without entity escaping."),
    ] = False,
) -> None:
    """Remove tag-like spans from TEXT and print the XML-safe result."""
    stripped = strip_markup(text)
    typer.echo(stripped if raw else escape_xml(stripped))


__all__ = ["strip"]
