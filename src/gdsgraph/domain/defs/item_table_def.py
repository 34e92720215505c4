"""Battle item table and item table group structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List

from .item_def import ItemDef

if TYPE_CHECKING:
    from .map_def import EnemyPlacementDef
    from .pick_param_def import CommonPickParamDef, VegetableParamDef


@dataclass(slots=True, eq=False)
class ItemTableDetailDef:
    """One weighted entry of an item table."""

    table: "ItemTableSettingDef" = field(repr=False)
    raw: Dict[str, Any] = field(repr=False)
    item: ItemDef | None = None


@dataclass(slots=True, eq=False)
class ItemTableSettingDef:
    id: str
    raw: Dict[str, Any] = field(repr=False)
    data: List[ItemTableDetailDef] = field(default_factory=list)
    groups: List["ItemTableGroupDataDef"] = field(default_factory=list, repr=False)


@dataclass(slots=True, eq=False)
class ItemTableGroupDataDef:
    """One member table of an item table group."""

    group: "ItemTableGroupSettingDef" = field(repr=False)
    raw: Dict[str, Any] = field(repr=False)
    table: ItemTableSettingDef | None = None


@dataclass(slots=True, eq=False)
class ItemTableGroupSettingDef:
    """A group of item tables used as a drop source.

    Gathering points, vegetable plots and enemy placements refer to groups
    rather than to individual tables.
    """

    id: str
    raw: Dict[str, Any] = field(repr=False)
    data: List[ItemTableGroupDataDef] = field(default_factory=list)
    pick_params: List["CommonPickParamDef"] = field(default_factory=list, repr=False)
    vegetable_params: List["VegetableParamDef"] = field(default_factory=list, repr=False)
    enemies: List["EnemyPlacementDef"] = field(default_factory=list, repr=False)
