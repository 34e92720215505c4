"""Character and enemy parameter structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List

from .text_def import TextDef

if TYPE_CHECKING:
    from .map_def import EnemyPlacementDef


@dataclass(slots=True, eq=False)
class CharaDef:
    id: str
    raw: Dict[str, Any] = field(repr=False)
    name: TextDef | None = None
    params: List["CharaParameterDef"] = field(default_factory=list, repr=False)


@dataclass(slots=True, eq=False)
class CharaParameterDef:
    """Battle parameters of an enemy, pointing back at its character row."""

    id: str
    raw: Dict[str, Any] = field(repr=False)
    chara: CharaDef | None = None
    enemies: List["EnemyPlacementDef"] = field(default_factory=list, repr=False)
