"""Item definition structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List

from .text_def import TextDef

if TYPE_CHECKING:
    from .item_table_def import ItemTableDetailDef
    from .recipe_def import RecipeDef, RecipeItemInfoDef
    from .request_quest_def import RequestQuestDef
    from .shop_def import ShopItemInfoDef


@dataclass(slots=True, eq=False)
class ItemDef:
    """An item from one of the per-category item tables.

    The list fields are filled by later tables that point at this item:
    drop tables, recipe ingredients, recipe outputs, shop stock and quest
    rewards.
    """

    id: str
    raw: Dict[str, Any] = field(repr=False)
    category: str | None = None
    name: TextDef | None = None
    desc: TextDef | None = field(default=None, repr=False)
    tables: List["ItemTableDetailDef"] = field(default_factory=list, repr=False)
    material_for: List["RecipeItemInfoDef"] = field(default_factory=list, repr=False)
    created_by: List["RecipeDef"] = field(default_factory=list, repr=False)
    shops: List["ShopItemInfoDef"] = field(default_factory=list, repr=False)
    request_rewards: List["RequestQuestDef"] = field(default_factory=list, repr=False)
