"""Low-level JSON helpers for on-disk tables."""
from __future__ import annotations

import json
from pathlib import Path

from .errors import DataLoadError, TableNotFoundError


def load_json(path: Path) -> object:
    """Load JSON from disk and raise DataLoadError on failure."""
    try:
        text = path.read_text(encoding="utf-8-sig")
    except FileNotFoundError as exc:
        raise TableNotFoundError(f"Table file not found: {path}") from exc
    except OSError as exc:
        raise DataLoadError(f"Unable to read table file: {path}") from exc
    except UnicodeDecodeError as exc:
        raise DataLoadError(f"Unable to decode table file {path}: {exc}") from exc

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DataLoadError(f"Invalid JSON in {path}: {exc}") from exc
