"""Localized text definitions."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(slots=True, eq=False)
class TextDef:
    """One row of a text table with the display string for the chosen language."""

    id: str
    raw: Dict[str, Any] = field(repr=False)
    text: str | None = None
