"""Loader for per-category item tables."""
from __future__ import annotations

from typing import Mapping

from gdsgraph.data.keyed_table import KeyedTableLoader, RawRecord, resolve
from gdsgraph.data.sources import TableSource
from gdsgraph.domain.defs import ItemDef, TextDef


class ItemsLoader(KeyedTableLoader[ItemDef]):
    def __init__(
        self,
        source: TableSource,
        path: str,
        *,
        names: Mapping[str, TextDef],
        descs: Mapping[str, TextDef],
        category: str | None = None,
    ) -> None:
        super().__init__(source, path)
        self._names = names
        self._descs = descs
        self._category = category

    async def _build_row(self, key: str, record: RawRecord) -> ItemDef:
        return ItemDef(
            id=key,
            raw=record,
            category=self._category,
            name=resolve(self._names, record.get("nameId")),
            desc=resolve(self._descs, record.get("DescId")),
        )
