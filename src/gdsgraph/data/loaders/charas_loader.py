"""Loaders for character rows and enemy parameters."""
from __future__ import annotations

from typing import Mapping

from gdsgraph.data.keyed_table import KeyedTableLoader, RawRecord, resolve
from gdsgraph.data.sources import TableSource
from gdsgraph.domain.defs import CharaDef, CharaParameterDef, TextDef


class CharasLoader(KeyedTableLoader[CharaDef]):
    def __init__(self, source: TableSource, path: str, *, names: Mapping[str, TextDef]) -> None:
        super().__init__(source, path)
        self._names = names

    async def _build_row(self, key: str, record: RawRecord) -> CharaDef:
        return CharaDef(id=key, raw=record, name=resolve(self._names, record.get("nameId")))


class CharaParametersLoader(KeyedTableLoader[CharaParameterDef]):
    def __init__(self, source: TableSource, path: str, *, charas: Mapping[str, CharaDef]) -> None:
        super().__init__(source, path)
        self._charas = charas

    async def _build_row(self, key: str, record: RawRecord) -> CharaParameterDef:
        param = CharaParameterDef(id=key, raw=record)
        param.chara = resolve(self._charas, record.get("charaID"))
        if param.chara is not None:
            param.chara.params.append(param)
        return param
