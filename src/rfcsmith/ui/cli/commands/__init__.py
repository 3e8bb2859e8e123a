"""CLI command implementations."""

from __future__ import annotations

from .references import references
from .strip import strip


__all__ = ["references", "strip"]
