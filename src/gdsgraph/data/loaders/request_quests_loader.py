"""Request quest loader."""
from __future__ import annotations

from typing import Mapping

from gdsgraph.data.keyed_table import KeyedTableLoader, RawRecord, resolve
from gdsgraph.data.sources import TableSource
from gdsgraph.domain.defs import ItemDef, MapDef, RequestQuestDef, TextDef


class RequestQuestsLoader(KeyedTableLoader[RequestQuestDef]):
    def __init__(
        self,
        source: TableSource,
        path: str,
        *,
        titles: Mapping[str, TextDef],
        items: Mapping[str, ItemDef],
        requesters: Mapping[str, TextDef],
        maps: Mapping[str, MapDef],
    ) -> None:
        super().__init__(source, path)
        self._titles = titles
        self._items = items
        self._requesters = requesters
        self._maps = maps

    async def _build_row(self, key: str, record: RawRecord) -> RequestQuestDef:
        quest = RequestQuestDef(id=key, raw=record)
        quest.title = resolve(self._titles, record.get("titleId"))
        quest.requester = resolve(self._requesters, record.get("requesterId"))
        quest.reward = resolve(self._items, record.get("rewardItemId"))
        if quest.reward is not None:
            quest.reward.request_rewards.append(quest)
        quest.map = resolve(self._maps, record.get("mapId"))
        if quest.map is not None:
            quest.map.requests.append(quest)
        return quest
