"""Map definitions and the per-map sub-tables they own."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List

from .chara_def import CharaParameterDef
from .item_table_def import ItemTableGroupSettingDef
from .pick_param_def import PickPointGroupDef
from .shop_def import ShopDef
from .text_def import TextDef

if TYPE_CHECKING:
    from .request_quest_def import RequestQuestDef


@dataclass(slots=True, eq=False)
class MapPickPointDef:
    """A gathering point placed on a map."""

    id: str
    map: "MapDef" = field(repr=False)
    raw: Dict[str, Any] = field(repr=False)
    group: PickPointGroupDef | None = None


@dataclass(slots=True, eq=False)
class EnemyPlacementDef:
    """One enemy slot of an enemy group, with its stats and drop group."""

    group: "EnemyGroupConfigDef" = field(repr=False)
    raw: Dict[str, Any] = field(repr=False)
    param: CharaParameterDef | None = None
    drop: ItemTableGroupSettingDef | None = None


@dataclass(slots=True, eq=False)
class EnemyGroupConfigDef:
    id: str
    map: "MapDef" = field(repr=False)
    raw: Dict[str, Any] = field(repr=False)
    enemies: List[EnemyPlacementDef] = field(default_factory=list)


@dataclass(slots=True, eq=False)
class MapShopConfigInfoDef:
    config: "MapShopConfigDef" = field(repr=False)
    raw: Dict[str, Any] = field(repr=False)
    shop: ShopDef | None = None


@dataclass(slots=True, eq=False)
class MapShopConfigDef:
    """Shops that open on a map."""

    id: str
    map: "MapDef" = field(repr=False)
    raw: Dict[str, Any] = field(repr=False)
    info: List[MapShopConfigInfoDef] = field(default_factory=list)


@dataclass(slots=True, eq=False)
class MapDef:
    """A map row plus the sub-tables stored in the map's own directory.

    ``pick_points``, ``enemies`` and ``shops`` are keyed the same way as
    top-level tables and are empty when the map ships no such file.
    """

    id: str
    raw: Dict[str, Any] = field(repr=False)
    map_id: str | None = None
    name: TextDef | None = None
    pick_points: Dict[str, MapPickPointDef] = field(default_factory=dict, repr=False)
    enemies: Dict[str, EnemyGroupConfigDef] = field(default_factory=dict, repr=False)
    shops: Dict[str, MapShopConfigDef] = field(default_factory=dict, repr=False)
    requests: List["RequestQuestDef"] = field(default_factory=list, repr=False)
