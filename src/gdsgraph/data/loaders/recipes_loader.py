"""Recipes loader."""
from __future__ import annotations

from typing import Mapping

from gdsgraph.data.keyed_table import KeyedTableLoader, RawRecord, child_records, resolve
from gdsgraph.data.sources import TableSource
from gdsgraph.domain.defs import ItemDef, RecipeDef, RecipeItemInfoDef


class RecipesLoader(KeyedTableLoader[RecipeDef]):
    """Links each recipe onto its product's ``created_by`` and each
    ingredient onto the ingredient item's ``material_for``."""

    def __init__(self, source: TableSource, path: str, *, items: Mapping[str, ItemDef]) -> None:
        super().__init__(source, path)
        self._items = items

    async def _build_row(self, key: str, record: RawRecord) -> RecipeDef:
        recipe = RecipeDef(id=key, raw=record)
        recipe.item = resolve(self._items, record.get("ItemId"))
        if recipe.item is not None:
            recipe.item.created_by.append(recipe)
        recipe.item_list = [
            self._build_ingredient(recipe, row) for row in child_records(record, "itemList")
        ]
        return recipe

    def _build_ingredient(self, recipe: RecipeDef, record: RawRecord) -> RecipeItemInfoDef:
        ingredient = RecipeItemInfoDef(recipe=recipe, raw=record)
        ingredient.item = resolve(self._items, record.get("ItemId"))
        if ingredient.item is not None:
            ingredient.item.material_for.append(ingredient)
        return ingredient
