"""Entry-point for loading game data from the command line."""
from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path
from typing import Sequence

from .config import load_config, save_config
from .data import paths
from .data.errors import DataLoadError
from .data.game_data import GameData, load_game_data
from .data.sources import FileTableSource, HttpTableSource
from .logger import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gdsgraph",
        description="Load GDS game data tables and report what was linked.",
    )
    location = parser.add_mutually_exclusive_group()
    location.add_argument("--data-root", type=Path, help="Directory containing GameData/")
    location.add_argument("--url", help="Base URL serving GameData/")
    parser.add_argument("--lang", help="Language code for text fields (default from config, else 'en')")
    parser.add_argument("--config", type=Path, help="Path to a JSON config file")
    parser.add_argument(
        "--save-config",
        action="store_true",
        help="Store the chosen language and data root in the config file and exit",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


async def _load(args: argparse.Namespace, lang: str, data_root: str | None) -> GameData:
    if args.url:
        async with HttpTableSource(args.url) as source:
            return await load_game_data(source, lang)
    root = paths.get_game_data_root(data_root)
    return await load_game_data(FileTableSource(root), lang)


def format_summary(data: GameData) -> str:
    return "\n".join(f"{name}: {count}" for name, count in data.table_counts().items())


def main(argv: Sequence[str] | None = None) -> int:
    """Run a full load and print one row count per table."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.debug)
    config = load_config(args.config)
    lang = args.lang or config["language"] or "en"
    data_root = str(args.data_root.resolve()) if args.data_root else config["data_root"]

    if args.save_config:
        save_config({"language": lang, "data_root": data_root}, args.config)
        logger.info("Saved config (lang=%s, data_root=%s)", lang, data_root)
        return 0
    if not args.url and data_root is None:
        parser.error("no table location: pass --data-root or --url, or set data_root in the config")

    try:
        data = asyncio.run(_load(args, lang, data_root))
    except DataLoadError as exc:
        logger.error("Game data load failed: %s", exc)
        return 1
    print(format_summary(data))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
