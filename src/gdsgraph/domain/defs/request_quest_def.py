"""Request quest definition structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from .item_def import ItemDef
from .map_def import MapDef
from .text_def import TextDef


@dataclass(slots=True, eq=False)
class RequestQuestDef:
    """A side request: who asks, where, and what it pays out."""

    id: str
    raw: Dict[str, Any] = field(repr=False)
    title: TextDef | None = None
    reward: ItemDef | None = None
    requester: TextDef | None = None
    map: MapDef | None = None
