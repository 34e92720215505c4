"""Top-level load sequence that builds the linked game data graph."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from typing import Awaitable, Callable, Dict, Iterable, Tuple

from gdsgraph.data import paths
from gdsgraph.data.loaders import (
    CharaParametersLoader,
    CharasLoader,
    CommonPickParamsLoader,
    ItemsLoader,
    ItemTableGroupsLoader,
    ItemTableSettingsLoader,
    MapsLoader,
    PickParamsLoader,
    PickPointGroupsLoader,
    RecipesLoader,
    RequestQuestsLoader,
    ShopsLoader,
    TextLoader,
    VegetableParamsLoader,
)
from gdsgraph.data.sources import TableSource
from gdsgraph.domain.defs import (
    CharaDef,
    CharaParameterDef,
    CommonPickParamDef,
    ItemDef,
    ItemTableGroupSettingDef,
    ItemTableSettingDef,
    MapDef,
    PickParamDef,
    PickPointGroupDef,
    RecipeDef,
    RequestQuestDef,
    ShopDef,
    TextDef,
    VegetableParamDef,
)

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"


@dataclass(slots=True)
class GameData:
    """Every loaded table, linked together.

    ``all_items`` merges the per-category item tables; when two categories
    share an id the later category wins. ``item_categories`` keeps each
    category's own mapping.
    """

    lang: str = DEFAULT_LANGUAGE
    item_names: Dict[str, TextDef] = field(default_factory=dict)
    item_descs: Dict[str, TextDef] = field(default_factory=dict)
    all_items: Dict[str, ItemDef] = field(default_factory=dict)
    item_categories: Dict[str, Dict[str, ItemDef]] = field(default_factory=dict)
    battle_item_tables: Dict[str, ItemTableSettingDef] = field(default_factory=dict)
    battle_item_groups: Dict[str, ItemTableGroupSettingDef] = field(default_factory=dict)
    common_pick_params: Dict[str, CommonPickParamDef] = field(default_factory=dict)
    fishing_params: Dict[str, CommonPickParamDef] = field(default_factory=dict)
    vegetable_params: Dict[str, VegetableParamDef] = field(default_factory=dict)
    pick_params: Dict[str, PickParamDef] = field(default_factory=dict)
    pick_groups: Dict[str, PickPointGroupDef] = field(default_factory=dict)
    chara_names: Dict[str, TextDef] = field(default_factory=dict)
    chara_data: Dict[str, CharaDef] = field(default_factory=dict)
    enemy_params: Dict[str, CharaParameterDef] = field(default_factory=dict)
    menu_text: Dict[str, TextDef] = field(default_factory=dict)
    shop_data: Dict[str, ShopDef] = field(default_factory=dict)
    map_names: Dict[str, TextDef] = field(default_factory=dict)
    map_data: Dict[str, MapDef] = field(default_factory=dict)
    recipe_data: Dict[str, RecipeDef] = field(default_factory=dict)
    quest_text: Dict[str, TextDef] = field(default_factory=dict)
    request_quests: Dict[str, RequestQuestDef] = field(default_factory=dict)

    def table_counts(self) -> Dict[str, int]:
        """Return row counts per table, in load order."""
        counts: Dict[str, int] = {}
        for table_field in fields(self):
            value = getattr(self, table_field.name)
            if isinstance(value, dict):
                counts[table_field.name] = len(value)
        return counts


StepRunner = Callable[[TableSource, GameData], Awaitable[None]]


@dataclass(frozen=True, slots=True)
class LoadStep:
    """A named load step and the steps whose output it reads."""

    name: str
    requires: Tuple[str, ...]
    run: StepRunner


def check_load_order(steps: Iterable[LoadStep]) -> None:
    """Raise ValueError if a step is declared before something it requires."""
    done: set[str] = set()
    for step in steps:
        if step.name in done:
            raise ValueError(f"Load step '{step.name}' is declared twice.")
        missing = [name for name in step.requires if name not in done]
        if missing:
            raise ValueError(f"Load step '{step.name}' runs before {sorted(missing)}.")
        done.add(step.name)


def _text_step(
    attr: str, path: str, text_field: str, lang_template: str
) -> StepRunner:
    async def run(source: TableSource, data: GameData) -> None:
        loader = TextLoader(
            source,
            path,
            text_field=text_field,
            lang_field=lang_template.format(lang=data.lang),
        )
        setattr(data, attr, await loader.load())

    return run


async def _load_items(source: TableSource, data: GameData) -> None:
    for category in paths.ITEM_CATEGORIES:
        items = await ItemsLoader(
            source,
            paths.item_category_path(category),
            names=data.item_names,
            descs=data.item_descs,
            category=category,
        ).load()
        data.all_items.update(items)
        data.item_categories[category] = items


async def _load_battle_item_tables(source: TableSource, data: GameData) -> None:
    data.battle_item_tables = await ItemTableSettingsLoader(
        source, paths.BATTLE_ITEM_TABLES_PATH, items=data.all_items
    ).load()


async def _load_battle_item_groups(source: TableSource, data: GameData) -> None:
    data.battle_item_groups = await ItemTableGroupsLoader(
        source, paths.BATTLE_ITEM_GROUPS_PATH, tables=data.battle_item_tables
    ).load()


async def _load_common_pick_params(source: TableSource, data: GameData) -> None:
    data.common_pick_params = await CommonPickParamsLoader(
        source, paths.COMMON_PICK_PARAMS_PATH, groups=data.battle_item_groups
    ).load()


async def _load_fishing_params(source: TableSource, data: GameData) -> None:
    data.fishing_params = await CommonPickParamsLoader(
        source, paths.FISHING_PARAMS_PATH, groups=data.battle_item_groups
    ).load()


async def _load_vegetable_params(source: TableSource, data: GameData) -> None:
    data.vegetable_params = await VegetableParamsLoader(
        source, paths.VEGETABLE_PARAMS_PATH, groups=data.battle_item_groups
    ).load()


async def _load_pick_params(source: TableSource, data: GameData) -> None:
    data.pick_params = await PickParamsLoader(
        source,
        paths.PICK_PARAMS_PATH,
        common_params=data.common_pick_params,
        fishing_params=data.fishing_params,
        vegetable_params=data.vegetable_params,
    ).load()


async def _load_pick_groups(source: TableSource, data: GameData) -> None:
    data.pick_groups = await PickPointGroupsLoader(
        source, paths.PICK_GROUPS_PATH, params=data.pick_params
    ).load()


async def _load_chara_data(source: TableSource, data: GameData) -> None:
    data.chara_data = await CharasLoader(
        source, paths.CHARA_DATA_PATH, names=data.chara_names
    ).load()


async def _load_enemy_params(source: TableSource, data: GameData) -> None:
    data.enemy_params = await CharaParametersLoader(
        source, paths.ENEMY_PARAMS_PATH, charas=data.chara_data
    ).load()


async def _load_shop_data(source: TableSource, data: GameData) -> None:
    data.shop_data = await ShopsLoader(
        source, paths.SHOP_DATA_PATH, names=data.menu_text, items=data.all_items
    ).load()


async def _load_map_data(source: TableSource, data: GameData) -> None:
    data.map_data = await MapsLoader(
        source,
        paths.MAP_DATA_PATH,
        names=data.map_names,
        pick_groups=data.pick_groups,
        enemy_params=data.enemy_params,
        drops=data.battle_item_groups,
        shops=data.shop_data,
    ).load()


async def _load_recipe_data(source: TableSource, data: GameData) -> None:
    data.recipe_data = await RecipesLoader(
        source, paths.RECIPE_DATA_PATH, items=data.all_items
    ).load()


async def _load_request_quests(source: TableSource, data: GameData) -> None:
    data.request_quests = await RequestQuestsLoader(
        source,
        paths.REQUEST_QUESTS_PATH,
        titles=data.quest_text,
        items=data.all_items,
        requesters=data.chara_names,
        maps=data.map_data,
    ).load()


LOAD_STEPS: Tuple[LoadStep, ...] = (
    LoadStep(
        "item_names",
        (),
        _text_step("item_names", paths.ITEM_NAMES_PATH, "textInfo", "nounSingularForm_{lang}"),
    ),
    LoadStep(
        "item_descs",
        (),
        _text_step("item_descs", paths.ITEM_DESCS_PATH, "textInfo", "text_{lang}"),
    ),
    LoadStep("items", ("item_names", "item_descs"), _load_items),
    LoadStep("battle_item_tables", ("items",), _load_battle_item_tables),
    LoadStep("battle_item_groups", ("battle_item_tables",), _load_battle_item_groups),
    LoadStep("common_pick_params", ("battle_item_groups",), _load_common_pick_params),
    LoadStep("fishing_params", ("battle_item_groups",), _load_fishing_params),
    LoadStep("vegetable_params", ("battle_item_groups",), _load_vegetable_params),
    LoadStep(
        "pick_params",
        ("common_pick_params", "fishing_params", "vegetable_params"),
        _load_pick_params,
    ),
    LoadStep("pick_groups", ("pick_params",), _load_pick_groups),
    LoadStep(
        "chara_names",
        (),
        _text_step("chara_names", paths.CHARA_NAMES_PATH, "textInfo", "nounSingularForm_{lang}"),
    ),
    LoadStep("chara_data", ("chara_names",), _load_chara_data),
    LoadStep("enemy_params", ("chara_data",), _load_enemy_params),
    LoadStep(
        "menu_text",
        (),
        _text_step("menu_text", paths.MENU_TEXT_PATH, "textInfo", "text_{lang}"),
    ),
    LoadStep("shop_data", ("menu_text", "items"), _load_shop_data),
    LoadStep(
        "map_names",
        (),
        _text_step("map_names", paths.MAP_NAMES_PATH, "nounInfo", "nounSingularForm_{lang}"),
    ),
    LoadStep(
        "map_data",
        ("map_names", "pick_groups", "enemy_params", "battle_item_groups", "shop_data"),
        _load_map_data,
    ),
    LoadStep("recipe_data", ("items",), _load_recipe_data),
    LoadStep(
        "quest_text",
        (),
        _text_step("quest_text", paths.QUEST_TEXT_PATH, "textInfo", "text_{lang}"),
    ),
    LoadStep(
        "request_quests",
        ("quest_text", "items", "chara_names", "map_data"),
        _load_request_quests,
    ),
)


async def load_game_data(
    source: TableSource,
    lang: str = DEFAULT_LANGUAGE,
    *,
    steps: Tuple[LoadStep, ...] = LOAD_STEPS,
) -> GameData:
    """Load and link every table from ``source``.

    Unavailable tables load as empty mappings and simply leave references
    into them unresolved. DataLoadError raised by the source aborts the load.
    """
    check_load_order(steps)
    data = GameData(lang=lang)
    logger.info("Loading game data (lang=%s)", lang)
    for step in steps:
        await step.run(source, data)
        logger.debug("Finished load step %s", step.name)
    logger.info(
        "Game data loaded: %d items, %d maps, %d recipes",
        len(data.all_items),
        len(data.map_data),
        len(data.recipe_data),
    )
    return data
