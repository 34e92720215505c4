"""Shops loader."""
from __future__ import annotations

from typing import Mapping

from gdsgraph.data.keyed_table import KeyedTableLoader, RawRecord, child_records, nested, resolve
from gdsgraph.data.sources import TableSource
from gdsgraph.domain.defs import ItemDef, ShopDef, ShopItemInfoDef, TextDef


class ShopsLoader(KeyedTableLoader[ShopDef]):
    """Loads shops; the shop name is the first buy-sign text id."""

    def __init__(
        self,
        source: TableSource,
        path: str,
        *,
        names: Mapping[str, TextDef],
        items: Mapping[str, ItemDef],
    ) -> None:
        super().__init__(source, path)
        self._names = names
        self._items = items

    async def _build_row(self, key: str, record: RawRecord) -> ShopDef:
        shop = ShopDef(id=key, raw=record)
        shop.name = resolve(self._names, self._sign_name_id(record))
        shop.items = [self._build_stock(shop, row) for row in child_records(record, "itemInfoList")]
        return shop

    @staticmethod
    def _sign_name_id(record: RawRecord) -> object:
        name_ids = nested(record, "signInfo", "buyShopNameIdArray")
        if not isinstance(name_ids, list) or not name_ids:
            return None
        return name_ids[0]

    def _build_stock(self, shop: ShopDef, record: RawRecord) -> ShopItemInfoDef:
        stock = ShopItemInfoDef(shop=shop, raw=record)
        stock.item = resolve(self._items, record.get("ItemId"))
        if stock.item is not None:
            stock.item.shops.append(stock)
        return stock
