"""Helpers for resolving table locations."""
from __future__ import annotations

from pathlib import Path

ITEM_CATEGORIES: tuple[str, ...] = (
    "Armor",
    "Consume",
    "Craft",
    "Important",
    "Kit",
    "LifeTools",
    "Material",
    "PowerUp",
    "Recipe",
    "Vehicle",
    "Weapon",
)

ITEM_NAMES_PATH = "GameData/Item/GDSItemText_Noun.json"
ITEM_DESCS_PATH = "GameData/Item/GDSItemText.json"
BATTLE_ITEM_TABLES_PATH = "GameData/Item/GDSBattleItemTableSetting.json"
BATTLE_ITEM_GROUPS_PATH = "GameData/Item/GDSBattleItemTableGroupSetting.json"
COMMON_PICK_PARAMS_PATH = "GameData/Map/GDSCommonPickParamData.json"
FISHING_PARAMS_PATH = "GameData/Map/GDSFishingParamData.json"
VEGETABLE_PARAMS_PATH = "GameData/Map/GDSVegetableParamData.json"
PICK_PARAMS_PATH = "GameData/Map/GDSPickParamData.json"
PICK_GROUPS_PATH = "GameData/Map/GDSPickPointGroup.json"
CHARA_NAMES_PATH = "GameData/Chara/GDSCharaText_Noun.json"
CHARA_DATA_PATH = "GameData/Chara/GDSCharaData.json"
ENEMY_PARAMS_PATH = "GameData/Chara/GDSCharaParameterEnemy.json"
MENU_TEXT_PATH = "GameData/Menu/GDSMenuText.json"
SHOP_DATA_PATH = "GameData/Shop/GDSShopData.json"
MAP_NAMES_PATH = "GameData/Map/GDSMapText_Noun.json"
MAP_DATA_PATH = "GameData/Map/GDSMapData.json"
RECIPE_DATA_PATH = "GameData/Recipe/GDSRecipeData.json"
QUEST_TEXT_PATH = "GameData/Quest/GDSQuestText.json"
REQUEST_QUESTS_PATH = "GameData/Quest/GDSRequestQuestConfig.json"


def get_repo_root() -> Path:
    """Return the repository root."""
    return Path(__file__).resolve().parents[3]


def get_game_data_root(base_path: Path | str | None = None) -> Path:
    """Return the directory that contains the ``GameData`` tree.

    Without ``base_path`` this is ``docs/`` beside ``src/`` in a source
    checkout. An installed package has no such directory, so the command line
    always passes an explicit root.
    """
    if base_path is not None:
        return Path(base_path)
    return get_repo_root() / "docs"


def item_category_path(category: str) -> str:
    return f"GameData/Item/GDSItem{category}Data.json"


def map_pick_point_path(map_id: str) -> str:
    return f"GameData/Map/{map_id}/{map_id}_GDSMapPickPoint.json"


def map_enemy_placement_path(map_id: str) -> str:
    return f"GameData/Map/{map_id}/{map_id}_GDSMapEnemyPlacementConfig.json"


def map_shop_config_path(map_id: str) -> str:
    return f"GameData/Shop/Map/{map_id}/{map_id}_GDSMapShopConfig.json"


