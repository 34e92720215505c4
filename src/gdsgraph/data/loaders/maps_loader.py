"""Loaders for maps and the sub-tables stored beside each map."""
from __future__ import annotations

import asyncio
import logging
from typing import Mapping

from gdsgraph.data import paths
from gdsgraph.data.keyed_table import KeyedTableLoader, RawRecord, child_records, nested, resolve
from gdsgraph.data.sources import TableSource
from gdsgraph.domain.defs import (
    CharaParameterDef,
    EnemyGroupConfigDef,
    EnemyPlacementDef,
    ItemTableGroupSettingDef,
    MapDef,
    MapPickPointDef,
    MapShopConfigDef,
    MapShopConfigInfoDef,
    PickPointGroupDef,
    ShopDef,
    TextDef,
)

logger = logging.getLogger(__name__)


class MapPickPointsLoader(KeyedTableLoader[MapPickPointDef]):
    def __init__(
        self,
        source: TableSource,
        path: str,
        *,
        map_def: MapDef,
        groups: Mapping[str, PickPointGroupDef],
    ) -> None:
        super().__init__(source, path)
        self._map = map_def
        self._groups = groups

    async def _build_row(self, key: str, record: RawRecord) -> MapPickPointDef:
        point = MapPickPointDef(id=key, map=self._map, raw=record)
        point.group = resolve(self._groups, record.get("GroupID"))
        if point.group is not None:
            point.group.maps.append(point)
        return point


class EnemyGroupsLoader(KeyedTableLoader[EnemyGroupConfigDef]):
    """Loads a map's enemy groups.

    Each placement names its parameter row through a structured key
    (``paramId.Name``) and its drop group through ``Drop.itemData``.
    """

    def __init__(
        self,
        source: TableSource,
        path: str,
        *,
        map_def: MapDef,
        params: Mapping[str, CharaParameterDef],
        drops: Mapping[str, ItemTableGroupSettingDef],
    ) -> None:
        super().__init__(source, path)
        self._map = map_def
        self._params = params
        self._drops = drops

    async def _build_row(self, key: str, record: RawRecord) -> EnemyGroupConfigDef:
        group = EnemyGroupConfigDef(id=key, map=self._map, raw=record)
        group.enemies = [self._build_placement(group, row) for row in child_records(record, "Enemy")]
        return group

    def _build_placement(self, group: EnemyGroupConfigDef, record: RawRecord) -> EnemyPlacementDef:
        placement = EnemyPlacementDef(group=group, raw=record)
        placement.param = resolve(self._params, nested(record, "paramId", "Name"))
        if placement.param is not None:
            placement.param.enemies.append(placement)
        placement.drop = resolve(self._drops, nested(record, "Drop", "itemData", "tableGroupId"))
        if placement.drop is not None:
            placement.drop.enemies.append(placement)
        return placement


class MapShopConfigsLoader(KeyedTableLoader[MapShopConfigDef]):
    def __init__(
        self,
        source: TableSource,
        path: str,
        *,
        map_def: MapDef,
        shops: Mapping[str, ShopDef],
    ) -> None:
        super().__init__(source, path)
        self._map = map_def
        self._shops = shops

    async def _build_row(self, key: str, record: RawRecord) -> MapShopConfigDef:
        config = MapShopConfigDef(id=key, map=self._map, raw=record)
        config.info = [self._build_info(config, row) for row in child_records(record, "shopInfoArray")]
        return config

    def _build_info(self, config: MapShopConfigDef, record: RawRecord) -> MapShopConfigInfoDef:
        info = MapShopConfigInfoDef(config=config, raw=record)
        info.shop = resolve(self._shops, record.get("shopId"))
        if info.shop is not None:
            info.shop.maps.append(info)
        return info


class MapsLoader(KeyedTableLoader[MapDef]):
    """Loads the map table and, for every map row, its three sub-tables.

    The sub-tables of one map fill disjoint back-reference lists, so they are
    fetched together. Map rows are still processed one after another, which
    keeps cross-map back-reference lists in map row order.
    """

    def __init__(
        self,
        source: TableSource,
        path: str,
        *,
        names: Mapping[str, TextDef],
        pick_groups: Mapping[str, PickPointGroupDef],
        enemy_params: Mapping[str, CharaParameterDef],
        drops: Mapping[str, ItemTableGroupSettingDef],
        shops: Mapping[str, ShopDef],
    ) -> None:
        super().__init__(source, path)
        self._names = names
        self._pick_groups = pick_groups
        self._enemy_params = enemy_params
        self._drops = drops
        self._shops = shops

    async def _build_row(self, key: str, record: RawRecord) -> MapDef:
        map_id = record.get("mapId")
        map_def = MapDef(id=key, raw=record, map_id=map_id if isinstance(map_id, str) else None)
        map_def.name = resolve(self._names, record.get("mapName"))
        if map_def.map_id is None:
            logger.debug("Map row %s has no mapId; skipping sub-tables", key)
            return map_def

        map_def.pick_points, map_def.enemies, map_def.shops = await asyncio.gather(
            MapPickPointsLoader(
                self._source,
                paths.map_pick_point_path(map_def.map_id),
                map_def=map_def,
                groups=self._pick_groups,
            ).load(),
            EnemyGroupsLoader(
                self._source,
                paths.map_enemy_placement_path(map_def.map_id),
                map_def=map_def,
                params=self._enemy_params,
                drops=self._drops,
            ).load(),
            MapShopConfigsLoader(
                self._source,
                paths.map_shop_config_path(map_def.map_id),
                map_def=map_def,
                shops=self._shops,
            ).load(),
        )
        return map_def
