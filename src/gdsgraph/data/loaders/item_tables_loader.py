"""Loaders for battle item tables and item table groups."""
from __future__ import annotations

from typing import Mapping

from gdsgraph.data.keyed_table import KeyedTableLoader, RawRecord, child_records, resolve
from gdsgraph.data.sources import TableSource
from gdsgraph.domain.defs import (
    ItemDef,
    ItemTableDetailDef,
    ItemTableGroupDataDef,
    ItemTableGroupSettingDef,
    ItemTableSettingDef,
)


class ItemTableSettingsLoader(KeyedTableLoader[ItemTableSettingDef]):
    """Loads item tables; each detail row is linked onto ``item.tables``."""

    def __init__(self, source: TableSource, path: str, *, items: Mapping[str, ItemDef]) -> None:
        super().__init__(source, path)
        self._items = items

    async def _build_row(self, key: str, record: RawRecord) -> ItemTableSettingDef:
        table = ItemTableSettingDef(id=key, raw=record)
        table.data = [self._build_detail(table, row) for row in child_records(record, "tableData")]
        return table

    def _build_detail(self, table: ItemTableSettingDef, record: RawRecord) -> ItemTableDetailDef:
        detail = ItemTableDetailDef(table=table, raw=record)
        detail.item = resolve(self._items, record.get("ItemId"))
        if detail.item is not None:
            detail.item.tables.append(detail)
        return detail


class ItemTableGroupsLoader(KeyedTableLoader[ItemTableGroupSettingDef]):
    """Loads item table groups; each member row is linked onto ``table.groups``."""

    def __init__(
        self, source: TableSource, path: str, *, tables: Mapping[str, ItemTableSettingDef]
    ) -> None:
        super().__init__(source, path)
        self._tables = tables

    async def _build_row(self, key: str, record: RawRecord) -> ItemTableGroupSettingDef:
        group = ItemTableGroupSettingDef(id=key, raw=record)
        group.data = [self._build_member(group, row) for row in child_records(record, "tableData")]
        return group

    def _build_member(
        self, group: ItemTableGroupSettingDef, record: RawRecord
    ) -> ItemTableGroupDataDef:
        member = ItemTableGroupDataDef(group=group, raw=record)
        member.table = resolve(self._tables, record.get("tableId"))
        if member.table is not None:
            member.table.groups.append(member)
        return member
