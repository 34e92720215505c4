"""Linked object graph over exported GDS game data tables."""

from .data.errors import DataError, DataLoadError
from .data.game_data import DEFAULT_LANGUAGE, GameData, load_game_data
from .data.keyed_table import load_keyed_table, resolve
from .data.sources import FileTableSource, HttpTableSource, MemoryTableSource, TableSource

__all__ = [
    "DEFAULT_LANGUAGE",
    "DataError",
    "DataLoadError",
    "FileTableSource",
    "GameData",
    "HttpTableSource",
    "MemoryTableSource",
    "TableSource",
    "load_game_data",
    "load_keyed_table",
    "resolve",
]
