"""Entity table loader exports."""

from .charas_loader import CharaParametersLoader, CharasLoader
from .item_tables_loader import ItemTableGroupsLoader, ItemTableSettingsLoader
from .items_loader import ItemsLoader
from .maps_loader import EnemyGroupsLoader, MapPickPointsLoader, MapShopConfigsLoader, MapsLoader
from .pick_params_loader import (
    CommonPickParamsLoader,
    PickParamsLoader,
    PickPointGroupsLoader,
    VegetableParamsLoader,
)
from .recipes_loader import RecipesLoader
from .request_quests_loader import RequestQuestsLoader
from .shops_loader import ShopsLoader
from .text_loader import TextLoader

__all__ = [
    "CharaParametersLoader",
    "CharasLoader",
    "CommonPickParamsLoader",
    "EnemyGroupsLoader",
    "ItemTableGroupsLoader",
    "ItemTableSettingsLoader",
    "ItemsLoader",
    "MapPickPointsLoader",
    "MapShopConfigsLoader",
    "MapsLoader",
    "PickParamsLoader",
    "PickPointGroupsLoader",
    "RecipesLoader",
    "RequestQuestsLoader",
    "ShopsLoader",
    "TextLoader",
    "VegetableParamsLoader",
]
