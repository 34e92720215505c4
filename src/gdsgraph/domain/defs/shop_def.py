"""Shop definition structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List

from .item_def import ItemDef
from .text_def import TextDef

if TYPE_CHECKING:
    from .map_def import MapShopConfigInfoDef


@dataclass(slots=True, eq=False)
class ShopItemInfoDef:
    """Defines a stocked item."""

    shop: "ShopDef" = field(repr=False)
    raw: Dict[str, Any] = field(repr=False)
    item: ItemDef | None = None


@dataclass(slots=True, eq=False)
class ShopDef:
    id: str
    raw: Dict[str, Any] = field(repr=False)
    name: TextDef | None = None
    items: List[ShopItemInfoDef] = field(default_factory=list)
    maps: List["MapShopConfigInfoDef"] = field(default_factory=list, repr=False)
