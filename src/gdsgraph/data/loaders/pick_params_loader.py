"""Loaders for gathering parameters and pick point groups.

Load order matters: common and fishing parameters first, then vegetable
parameters, then the combined pick parameters that point at all three, and
finally the pick point groups.
"""
from __future__ import annotations

from typing import Mapping

from gdsgraph.data.keyed_table import KeyedTableLoader, RawRecord, child_records, nested, resolve
from gdsgraph.data.sources import TableSource
from gdsgraph.domain.defs import (
    CommonPickParamDef,
    ItemTableGroupSettingDef,
    PickParamDef,
    PickPointGroupDataDef,
    PickPointGroupDef,
    VegetableParamDef,
)


class CommonPickParamsLoader(KeyedTableLoader[CommonPickParamDef]):
    """Used for both the common gathering and the fishing parameter tables."""

    def __init__(
        self, source: TableSource, path: str, *, groups: Mapping[str, ItemTableGroupSettingDef]
    ) -> None:
        super().__init__(source, path)
        self._groups = groups

    async def _build_row(self, key: str, record: RawRecord) -> CommonPickParamDef:
        param = CommonPickParamDef(id=key, raw=record)
        param.drop = resolve(self._groups, nested(record, "Drop", "tableGroupId"))
        if param.drop is not None:
            param.drop.pick_params.append(param)
        return param


class VegetableParamsLoader(KeyedTableLoader[VegetableParamDef]):
    def __init__(
        self, source: TableSource, path: str, *, groups: Mapping[str, ItemTableGroupSettingDef]
    ) -> None:
        super().__init__(source, path)
        # TODO: link drop groups onto ItemTableGroupSettingDef.vegetable_params once the
        # vegetable drop field layout is mapped.
        self._groups = groups

    async def _build_row(self, key: str, record: RawRecord) -> VegetableParamDef:
        return VegetableParamDef(id=key, raw=record)


class PickParamsLoader(KeyedTableLoader[PickParamDef]):
    def __init__(
        self,
        source: TableSource,
        path: str,
        *,
        common_params: Mapping[str, CommonPickParamDef],
        fishing_params: Mapping[str, CommonPickParamDef],
        vegetable_params: Mapping[str, VegetableParamDef],
    ) -> None:
        super().__init__(source, path)
        self._common_params = common_params
        self._fishing_params = fishing_params
        self._vegetable_params = vegetable_params

    async def _build_row(self, key: str, record: RawRecord) -> PickParamDef:
        param = PickParamDef(id=key, raw=record)
        param.common = resolve(self._common_params, record.get("commonPickDataId"))
        if param.common is not None:
            param.common.params.append(param)
        param.fishing = resolve(self._fishing_params, record.get("fishingParamDataId"))
        if param.fishing is not None:
            param.fishing.params.append(param)
        param.vegetable = resolve(self._vegetable_params, record.get("vegetableParamDataId"))
        # Matches the exported site: the vegetable branch re-appends to the
        # fishing parameter and never fills vegetable.params.
        if param.fishing is not None:
            param.fishing.params.append(param)
        return param


class PickPointGroupsLoader(KeyedTableLoader[PickPointGroupDef]):
    def __init__(
        self, source: TableSource, path: str, *, params: Mapping[str, PickParamDef]
    ) -> None:
        super().__init__(source, path)
        self._params = params

    async def _build_row(self, key: str, record: RawRecord) -> PickPointGroupDef:
        group = PickPointGroupDef(id=key, raw=record)
        group.data = [self._build_member(group, row) for row in child_records(record, "groupData")]
        return group

    def _build_member(self, group: PickPointGroupDef, record: RawRecord) -> PickPointGroupDataDef:
        member = PickPointGroupDataDef(group=group, raw=record)
        member.param = resolve(self._params, record.get("paramId"))
        if member.param is not None:
            member.param.groups.append(member)
        return member
