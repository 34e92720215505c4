from __future__ import annotations

import asyncio

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
    RecipesLoader,
    ShopsLoader,
    TextLoader,
    VegetableParamsLoader,
)
from gdsgraph.data.sources import MemoryTableSource
from gdsgraph.domain.defs import TextDef
from tests.helpers.game_tables import RecordingTableSource, keyed_table


def _text(key: str, value: str) -> TextDef:
    return TextDef(id=key, raw={}, text=value)


def test_text_loader_picks_language_field() -> None:
    source = MemoryTableSource(
        {
            "names.json": keyed_table(
                {
                    "TXT_1": {"textInfo": [{"text_en": "Herb", "text_ja": "薬草"}]},
                    "TXT_2": {"textInfo": []},
                    "TXT_3": {"textInfo": [{"text_ja": "only ja"}]},
                }
            )
        }
    )
    texts = asyncio.run(
        TextLoader(source, "names.json", text_field="textInfo", lang_field="text_en").load()
    )

    assert texts["TXT_1"].text == "Herb"
    assert texts["TXT_2"].text is None
    assert texts["TXT_3"].text is None
    assert texts["TXT_1"].raw == {"textInfo": [{"text_en": "Herb", "text_ja": "薬草"}]}


def test_items_loader_resolves_name_and_desc() -> None:
    names = {"TXT_5": _text("TXT_5", "Herb")}
    source = MemoryTableSource(
        {"items.json": keyed_table({"ITM_001": {"nameId": "TXT_5", "DescId": "None", "price": 4}})}
    )
    items = asyncio.run(
        ItemsLoader(source, "items.json", names=names, descs={}, category="Material").load()
    )

    item = items["ITM_001"]
    assert item.name is names["TXT_5"]
    assert item.desc is None
    assert item.category == "Material"
    assert item.raw["price"] == 4


def _load_items(source: MemoryTableSource, *ids: str):
    source.add("items.json", keyed_table({item_id: {"nameId": "None"} for item_id in ids}))
    return asyncio.run(ItemsLoader(source, "items.json", names={}, descs={}).load())


def test_item_tables_and_groups_link_back_references() -> None:
    source = MemoryTableSource(
        {
            "tables.json": keyed_table(
                {
                    "TBL_A": {"tableData": [{"ItemId": "ITM_1"}, {"ItemId": "ITM_X"}]},
                    "TBL_B": {"tableData": [{"ItemId": "ITM_1"}]},
                    "TBL_C": {},
                }
            ),
            "groups.json": keyed_table(
                {"GRP_A": {"tableData": [{"tableId": "TBL_B"}, {"tableId": "TBL_A"}, {"tableId": "None"}]}}
            ),
        }
    )
    items = _load_items(source, "ITM_1")
    tables = asyncio.run(ItemTableSettingsLoader(source, "tables.json", items=items).load())
    groups = asyncio.run(ItemTableGroupsLoader(source, "groups.json", tables=tables).load())

    detail_a, missing = tables["TBL_A"].data
    assert detail_a.table is tables["TBL_A"]
    assert detail_a.item is items["ITM_1"]
    assert missing.item is None
    assert tables["TBL_C"].data == []
    assert items["ITM_1"].tables == [detail_a, tables["TBL_B"].data[0]]

    group = groups["GRP_A"]
    assert [member.table for member in group.data] == [tables["TBL_B"], tables["TBL_A"], None]
    assert tables["TBL_A"].groups == [group.data[1]]
    assert tables["TBL_B"].groups == [group.data[0]]


def test_pick_params_reproduce_fishing_double_append() -> None:
    source = MemoryTableSource(
        {
            "groups.json": keyed_table({"GRP": {"tableData": []}}),
            "common.json": keyed_table({"CPK": {"Drop": {"tableGroupId": "GRP"}}, "NODROP": {}}),
            "fishing.json": keyed_table({"FSH": {"Drop": {"tableGroupId": "None"}}}),
            "veg.json": keyed_table({"VEG": {}}),
            "params.json": keyed_table(
                {
                    "P1": {
                        "commonPickDataId": "CPK",
                        "fishingParamDataId": "FSH",
                        "vegetableParamDataId": "VEG",
                    },
                    "P2": {
                        "commonPickDataId": "None",
                        "fishingParamDataId": "None",
                        "vegetableParamDataId": "VEG",
                    },
                }
            ),
        }
    )
    groups = asyncio.run(ItemTableGroupsLoader(source, "groups.json", tables={}).load())
    common = asyncio.run(CommonPickParamsLoader(source, "common.json", groups=groups).load())
    fishing = asyncio.run(CommonPickParamsLoader(source, "fishing.json", groups=groups).load())
    vegetable = asyncio.run(VegetableParamsLoader(source, "veg.json", groups=groups).load())
    params = asyncio.run(
        PickParamsLoader(
            source,
            "params.json",
            common_params=common,
            fishing_params=fishing,
            vegetable_params=vegetable,
        ).load()
    )

    assert common["CPK"].drop is groups["GRP"]
    assert common["NODROP"].drop is None
    assert groups["GRP"].pick_params == [common["CPK"]]
    assert groups["GRP"].vegetable_params == []

    p1, p2 = params["P1"], params["P2"]
    assert p1.common is common["CPK"]
    assert p1.fishing is fishing["FSH"]
    assert p1.vegetable is vegetable["VEG"]
    assert p2.vegetable is vegetable["VEG"]
    assert common["CPK"].params == [p1]
    assert fishing["FSH"].params == [p1, p1]
    assert vegetable["VEG"].params == []


def test_chara_parameters_link_to_characters() -> None:
    source = MemoryTableSource(
        {
            "charas.json": keyed_table({"CHR_1": {"nameId": "CHN_1"}}),
            "params.json": keyed_table(
                {"PRM_1": {"charaID": "CHR_1"}, "PRM_2": {"charaID": "CHR_9"}, "PRM_3": {"charaID": "CHR_1"}}
            ),
        }
    )
    names = {"CHN_1": _text("CHN_1", "Slime")}
    charas = asyncio.run(CharasLoader(source, "charas.json", names=names).load())
    params = asyncio.run(CharaParametersLoader(source, "params.json", charas=charas).load())

    assert charas["CHR_1"].name is names["CHN_1"]
    assert params["PRM_2"].chara is None
    assert charas["CHR_1"].params == [params["PRM_1"], params["PRM_3"]]


def test_shops_use_first_sign_name_and_link_stock() -> None:
    source = MemoryTableSource(
        {
            "shops.json": keyed_table(
                {
                    "SHP_1": {
                        "signInfo": {"buyShopNameIdArray": ["MNU_1", "MNU_2"]},
                        "itemInfoList": [{"ItemId": "ITM_1"}, {"ItemId": "ITM_404"}],
                    },
                    "SHP_2": {"signInfo": {"buyShopNameIdArray": []}},
                }
            )
        }
    )
    items = _load_items(source, "ITM_1")
    names = {"MNU_1": _text("MNU_1", "General Store"), "MNU_2": _text("MNU_2", "Other")}
    shops = asyncio.run(ShopsLoader(source, "shops.json", names=names, items=items).load())

    shop = shops["SHP_1"]
    assert shop.name is names["MNU_1"]
    assert [stock.item for stock in shop.items] == [items["ITM_1"], None]
    assert items["ITM_1"].shops == [shop.items[0]]
    assert shop.items[0].shop is shop
    assert shops["SHP_2"].name is None
    assert shops["SHP_2"].items == []


def test_recipes_link_product_and_ingredients() -> None:
    source = MemoryTableSource(
        {
            "recipes.json": keyed_table(
                {
                    "RCP_1": {"ItemId": "ITM_2", "itemList": [{"ItemId": "ITM_1"}, {"ItemId": "ITM_1"}]},
                    "RCP_2": {"ItemId": "None", "itemList": [{"ItemId": "ITM_1"}]},
                }
            )
        }
    )
    items = _load_items(source, "ITM_1", "ITM_2")
    recipes = asyncio.run(RecipesLoader(source, "recipes.json", items=items).load())

    assert recipes["RCP_1"].item is items["ITM_2"]
    assert items["ITM_2"].created_by == [recipes["RCP_1"]]
    assert recipes["RCP_2"].item is None
    assert items["ITM_1"].material_for == [
        recipes["RCP_1"].item_list[0],
        recipes["RCP_1"].item_list[1],
        recipes["RCP_2"].item_list[0],
    ]
    assert all(info.recipe is recipes["RCP_1"] for info in recipes["RCP_1"].item_list)


def test_maps_loader_fetches_sub_tables_per_map() -> None:
    source = RecordingTableSource(
        {
            "maps.json": keyed_table(
                {
                    "MAP_A": {"mapId": "A01", "mapName": "MPN_1"},
                    "MAP_B": {"mapId": "B02", "mapName": "None"},
                    "MAP_C": {"mapName": "MPN_1"},
                }
            ),
            paths.map_pick_point_path("A01"): keyed_table({"PP_1": {"GroupID": "PPG_9"}}),
            paths.map_enemy_placement_path("B02"): keyed_table(
                {
                    "ENG_1": {
                        "Enemy": [
                            {"paramId": {"Name": "PRM_1"}, "Drop": {"itemData": {"tableGroupId": "GRP"}}},
                            {"paramId": {"Name": "None"}},
                        ]
                    }
                }
            ),
            paths.map_shop_config_path("A01"): keyed_table(
                {"MSC_1": {"shopInfoArray": [{"shopId": "SHP_1"}, {"shopId": "SHP_X"}]}}
            ),
            "params.json": keyed_table({"PRM_1": {"charaID": "None"}}),
            "groups.json": keyed_table({"GRP": {}}),
            "shops.json": keyed_table({"SHP_1": {}}),
        }
    )
    params = asyncio.run(CharaParametersLoader(source, "params.json", charas={}).load())
    drops = asyncio.run(ItemTableGroupsLoader(source, "groups.json", tables={}).load())
    shops = asyncio.run(ShopsLoader(source, "shops.json", names={}, items={}).load())
    names = {"MPN_1": _text("MPN_1", "Meadow")}

    maps = asyncio.run(
        MapsLoader(
            source,
            "maps.json",
            names=names,
            pick_groups={},
            enemy_params=params,
            drops=drops,
            shops=shops,
        ).load()
    )

    map_a, map_b, map_c = maps["MAP_A"], maps["MAP_B"], maps["MAP_C"]
    assert map_a.name is names["MPN_1"]
    assert map_b.name is None
    assert map_a.map_id == "A01"

    assert list(map_a.pick_points) == ["PP_1"]
    assert map_a.pick_points["PP_1"].map is map_a
    assert map_a.pick_points["PP_1"].group is None
    assert map_a.enemies == {}

    config = map_a.shops["MSC_1"]
    assert config.map is map_a
    assert [info.shop for info in config.info] == [shops["SHP_1"], None]
    assert shops["SHP_1"].maps == [config.info[0]]

    group = map_b.enemies["ENG_1"]
    first, second = group.enemies
    assert group.map is map_b
    assert first.param is params["PRM_1"]
    assert first.drop is drops["GRP"]
    assert second.param is None
    assert second.drop is None
    assert params["PRM_1"].enemies == [first]
    assert drops["GRP"].enemies == [first]

    assert map_c.map_id is None
    assert map_c.pick_points == {} and map_c.enemies == {} and map_c.shops == {}

    templates = (paths.map_pick_point_path, paths.map_enemy_placement_path, paths.map_shop_config_path)
    expected = {template(map_id) for template in templates for map_id in ("A01", "B02")}
    assert expected.issubset(set(source.requested))
    assert not any("None" in path for path in source.requested)
