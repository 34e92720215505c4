"""Crafting recipe structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .item_def import ItemDef


@dataclass(slots=True, eq=False)
class RecipeItemInfoDef:
    """One ingredient of a recipe."""

    recipe: "RecipeDef" = field(repr=False)
    raw: Dict[str, Any] = field(repr=False)
    item: ItemDef | None = None


@dataclass(slots=True, eq=False)
class RecipeDef:
    id: str
    raw: Dict[str, Any] = field(repr=False)
    item: ItemDef | None = None
    item_list: List[RecipeItemInfoDef] = field(default_factory=list)
