"""Domain definition exports."""

from .chara_def import CharaDef, CharaParameterDef
from .item_def import ItemDef
from .item_table_def import (
    ItemTableDetailDef,
    ItemTableGroupDataDef,
    ItemTableGroupSettingDef,
    ItemTableSettingDef,
)
from .map_def import (
    EnemyGroupConfigDef,
    EnemyPlacementDef,
    MapDef,
    MapPickPointDef,
    MapShopConfigDef,
    MapShopConfigInfoDef,
)
from .pick_param_def import (
    CommonPickParamDef,
    PickParamDef,
    PickPointGroupDataDef,
    PickPointGroupDef,
    VegetableParamDef,
)
from .recipe_def import RecipeDef, RecipeItemInfoDef
from .request_quest_def import RequestQuestDef
from .shop_def import ShopDef, ShopItemInfoDef
from .text_def import TextDef

__all__ = [
    "CharaDef",
    "CharaParameterDef",
    "CommonPickParamDef",
    "EnemyGroupConfigDef",
    "EnemyPlacementDef",
    "ItemDef",
    "ItemTableDetailDef",
    "ItemTableGroupDataDef",
    "ItemTableGroupSettingDef",
    "ItemTableSettingDef",
    "MapDef",
    "MapPickPointDef",
    "MapShopConfigDef",
    "MapShopConfigInfoDef",
    "PickParamDef",
    "PickPointGroupDataDef",
    "PickPointGroupDef",
    "RecipeDef",
    "RecipeItemInfoDef",
    "RequestQuestDef",
    "ShopDef",
    "ShopItemInfoDef",
    "TextDef",
    "VegetableParamDef",
]
