#!/usr/bin/env python3
"""
Zwift Data CLI
==============

Prints the Zwift state found on disk.

Usage:
    zwift-data
    zwift-data --json
    zwift-data --matches
    zwift-data --log-path /path/to/Log.txt

Environment Variables:
    ZWIFT_LOG_LEVEL: Logging level (default INFO)
    ZWIFT_LOG_DIR: Directory for a rotating log file (optional)
    See zwift_data.config for path and override variables.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
from dataclasses import asdict
from logging.handlers import RotatingFileHandler
from pathlib import Path

from dotenv import load_dotenv

from .config import load_settings
from .patterns import LOG_PATTERNS
from .zwift_data import ZwiftData

logger = logging.getLogger(__name__)

MAX_SAMPLE = 20


def configure_logging() -> None:
    """Route path lookups and facts found to stderr (and ZWIFT_LOG_DIR/zwift-data.log)."""
    level_name = os.environ.get("ZWIFT_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler()]

    log_dir_raw = os.environ.get("ZWIFT_LOG_DIR")
    if log_dir_raw:
        log_dir = Path(log_dir_raw)
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                log_dir / "zwift-data.log",
                maxBytes=5_000_000,
                backupCount=3,
                encoding="utf-8",
            )
        )

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Read Zwift game state from files on disk",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment Variables:
  ZWIFT_APP_FOLDER      Zwift install folder (optional)
  ZWIFT_LOG_PATH        Path to Log.txt (optional)
  ZWIFT_PREFS_PATH      Path to prefs.xml (optional)
  ZWIFT_LOG_LEVEL       Logging level (default: INFO)
""",
    )
    parser.add_argument("--app-folder", default=None, help="Zwift install folder")
    parser.add_argument("--log-path", default=None, help="Path to Log.txt")
    parser.add_argument("--prefs-path", default=None, help="Path to prefs.xml")
    parser.add_argument("--json", action="store_true", help="Print state as JSON")
    parser.add_argument(
        "--matches",
        action="store_true",
        help="List every Log.txt match for each pattern instead of the state",
    )
    return parser.parse_args(argv)


async def dump_matches(zwift: ZwiftData) -> None:
    for name in LOG_PATTERNS:
        print(f"\n--- {name} ---")
        matches = await zwift.get_all_matches(name)
        if not matches:
            print(f"No matches found in Log.txt for pattern: {name}")
            continue

        print(f"Found {len(matches)} matches for pattern: {name}")
        for i, match in enumerate(matches[:MAX_SAMPLE]):
            print(f"{i + 1}: {match}")
        if len(matches) > MAX_SAMPLE:
            print(f"...and {len(matches) - MAX_SAMPLE} more")


async def run(args: argparse.Namespace) -> int:
    settings = load_settings()
    for key in ("app_folder", "log_path", "prefs_path"):
        value = getattr(args, key)
        if value:
            settings[key] = value

    zwift = ZwiftData(log=logger.debug, **settings)
    await zwift.initialize()
    try:
        if args.matches:
            await dump_matches(zwift)
            return 0

        state = asdict(await zwift.get_state())
        if args.json:
            print(json.dumps(state, indent=2))
        else:
            for key, value in state.items():
                print(f"{key}: {value if value is not None else '-'}")
        return 0
    finally:
        await zwift.close_process()


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    load_dotenv()
    configure_logging()
    return asyncio.run(run(parse_args(argv)))


if __name__ == "__main__":
    raise SystemExit(main())
