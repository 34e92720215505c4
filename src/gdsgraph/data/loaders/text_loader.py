"""Loader for localized text tables."""
from __future__ import annotations

from gdsgraph.data.keyed_table import KeyedTableLoader, RawRecord
from gdsgraph.data.sources import TableSource
from gdsgraph.domain.defs import TextDef


class TextLoader(KeyedTableLoader[TextDef]):
    """Picks one language field out of each text row.

    Rows store their strings as ``{text_field: [{lang_field: "..."}]}``;
    only the first element of the list is used.
    """

    def __init__(self, source: TableSource, path: str, *, text_field: str, lang_field: str) -> None:
        super().__init__(source, path)
        self._text_field = text_field
        self._lang_field = lang_field

    async def _build_row(self, key: str, record: RawRecord) -> TextDef:
        return TextDef(id=key, raw=record, text=self._pick_text(record))

    def _pick_text(self, record: RawRecord) -> str | None:
        variants = record.get(self._text_field)
        if not isinstance(variants, list) or not variants:
            return None
        first = variants[0]
        if not isinstance(first, dict):
            return None
        text = first.get(self._lang_field)
        return text if isinstance(text, str) else None
