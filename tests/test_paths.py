from pathlib import Path

from gdsgraph.data import paths


def test_get_game_data_root_base_path(tmp_path: Path) -> None:
    assert paths.get_game_data_root(tmp_path) == tmp_path
    assert paths.get_game_data_root(str(tmp_path)) == tmp_path


def test_get_game_data_root_defaults_to_docs() -> None:
    root = paths.get_game_data_root()
    assert root.name == "docs"
    assert root.parent == paths.get_repo_root()


def test_per_map_path_templates() -> None:
    assert paths.map_pick_point_path("M01") == "GameData/Map/M01/M01_GDSMapPickPoint.json"
    assert (
        paths.map_enemy_placement_path("M01")
        == "GameData/Map/M01/M01_GDSMapEnemyPlacementConfig.json"
    )
    assert paths.map_shop_config_path("M01") == "GameData/Shop/Map/M01/M01_GDSMapShopConfig.json"


def test_item_category_paths() -> None:
    assert paths.item_category_path("LifeTools") == "GameData/Item/GDSItemLifeToolsData.json"
    assert len(paths.ITEM_CATEGORIES) == 11
