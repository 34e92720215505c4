"""Configuration helpers for the loader command line."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict

_DEFAULT_LANGUAGE = "en"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "gdsgraph" / "config.json"
        return Path.home() / "gdsgraph" / "config.json"
    return Path.home() / ".config" / "gdsgraph" / "config.json"


def _normalize_language(value: object) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return _DEFAULT_LANGUAGE


def _normalize_data_root(value: object) -> str | None:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def default_config() -> Dict[str, str | None]:
    return {"language": _DEFAULT_LANGUAGE, "data_root": None}


def load_config(path: Path | None = None) -> Dict[str, str | None]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return default_config()
    if not isinstance(raw, dict):
        return default_config()
    return {
        "language": _normalize_language(raw.get("language")),
        "data_root": _normalize_data_root(raw.get("data_root")),
    }


def save_config(config: Dict[str, str | None], path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "language": _normalize_language(config.get("language")),
        "data_root": _normalize_data_root(config.get("data_root")),
    }
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
