from __future__ import annotations

from pathlib import Path

from gdsgraph.config import load_config, save_config


def test_load_config_missing_file_returns_defaults(tmp_path: Path) -> None:
    assert load_config(tmp_path / "missing.json") == {"language": "en", "data_root": None}


def test_load_config_invalid_content_returns_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("[1, 2]", encoding="utf-8")
    assert load_config(path) == {"language": "en", "data_root": None}

    path.write_text("{broken", encoding="utf-8")
    assert load_config(path) == {"language": "en", "data_root": None}


def test_config_round_trip_normalizes_values(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.json"
    save_config({"language": " ja ", "data_root": "/srv/wiki/docs"}, path)

    assert load_config(path) == {"language": "ja", "data_root": "/srv/wiki/docs"}

    save_config({"language": "", "data_root": ""}, path)
    assert load_config(path) == {"language": "en", "data_root": None}
