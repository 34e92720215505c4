"""Keyed table loading and reference resolution.

Every exported table is a JSON array whose first element carries
``Properties.m_dataMap``: an ordered list of ``{"Key": ..., "Value": ...}``
entries. Keys are either plain strings or objects with a ``Name`` field.
"""
from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Dict, Generic, Mapping, TypeVar

from .sources import TableSource

logger = logging.getLogger(__name__)

T = TypeVar("T")

NONE_KEY = "None"

RawRecord = Dict[str, Any]


def normalize_key(key: object) -> str | None:
    """Return the string form of an entry key."""
    if isinstance(key, str):
        return key
    if isinstance(key, dict):
        name = key.get("Name")
        if isinstance(name, str):
            return name
    return None


def extract_entries(document: object) -> list[object] | None:
    """Return the keyed entry list of a table document, or None if malformed."""
    if not isinstance(document, list) or not document:
        return None
    head = document[0]
    if not isinstance(head, dict):
        return None
    properties = head.get("Properties")
    if not isinstance(properties, dict):
        return None
    entries = properties.get("m_dataMap")
    if not isinstance(entries, list):
        return None
    return entries


async def load_keyed_table(
    source: TableSource,
    path: str,
    transform: Callable[[str, RawRecord], Awaitable[T]],
) -> Dict[str, T]:
    """Fetch ``path`` and build one entity per entry, in source order.

    An unavailable or malformed table yields an empty mapping.
    """
    result: Dict[str, T] = {}
    document = await source.fetch(path)
    if document is None:
        logger.debug("Table unavailable: %s", path)
        return result
    entries = extract_entries(document)
    if entries is None:
        logger.debug("Table has no keyed entries: %s", path)
        return result

    for entry in entries:
        if not isinstance(entry, dict):
            continue
        key = normalize_key(entry.get("Key"))
        if key is None:
            continue
        value = entry.get("Value")
        result[key] = await transform(key, value if isinstance(value, dict) else {})
    logger.debug("Loaded %d rows from %s", len(result), path)
    return result


def resolve(mapping: Mapping[str, T], key: object) -> T | None:
    """Look up a foreign key; the ``"None"`` sentinel and unknown keys give None."""
    if not isinstance(key, str) or key == NONE_KEY:
        return None
    return mapping.get(key)


def nested(record: Mapping[str, Any], *fields: str) -> Any:
    """Walk nested objects in a raw record, returning None on the first gap."""
    current: Any = record
    for name in fields:
        if not isinstance(current, dict):
            return None
        current = current.get(name)
    return current


def child_records(record: Mapping[str, Any], field: str) -> list[RawRecord]:
    """Return the list of child row records stored under ``field``."""
    rows = record.get(field)
    if not isinstance(rows, list):
        return []
    return [row if isinstance(row, dict) else {} for row in rows]


class KeyedTableLoader(Generic[T]):
    """Common loading behavior for entity tables.

    Subclasses receive their dependency mappings in ``__init__`` and build
    one entity per row in ``_build_row``. ``load`` runs once; later calls
    return the cached mapping so back-references are never appended twice.
    """

    def __init__(self, source: TableSource, path: str) -> None:
        self._source = source
        self._path = path
        self._rows: Dict[str, T] | None = None

    @property
    def path(self) -> str:
        return self._path

    async def load(self) -> Dict[str, T]:
        if self._rows is None:
            self._rows = await load_keyed_table(self._source, self._path, self._build_row)
        return self._rows

    async def _build_row(self, key: str, record: RawRecord) -> T:
        """Convert one raw row into an entity."""
        raise NotImplementedError
