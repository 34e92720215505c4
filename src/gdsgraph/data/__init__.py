"""Data layer: table sources, keyed table loading and the load sequence."""

from .errors import DataError, DataLoadError, TableNotFoundError
from .paths import get_game_data_root, get_repo_root

__all__ = [
    "DataError",
    "DataLoadError",
    "TableNotFoundError",
    "get_game_data_root",
    "get_repo_root",
]
