"""
Zwift Paths
===========

Locations of the files the Zwift client leaves on disk.

The install folder holds the version pointer file and the version manifests.
The documents folder holds the session log and the preferences file.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Callable, Mapping
from pathlib import Path

logger = logging.getLogger(__name__)

ZWIFT_VER_CUR_FILENAME = "Zwift_ver_cur_filename.txt"

# Relative to the user's documents folder
LOG_SUBPATH = ("Zwift", "Logs", "Log.txt")
PREFS_SUBPATH = ("Zwift", "prefs.xml")

DEFAULT_PROGRAM_FILES = "C:\\Program Files (x86)"


def default_app_folder(
    platform: str | None = None,
    environ: Mapping[str, str] | None = None,
    home: Callable[[], Path] | None = None,
    log: Callable[[str], None] | None = None,
) -> Path | None:
    """Best-effort default Zwift install folder for the current platform.

    Args:
        platform: Platform identifier (defaults to sys.platform)
        environ: Environment mapping (defaults to os.environ)
        home: Home directory resolver (defaults to Path.home)
        log: Diagnostic sink for lookup failures

    Returns:
        The install folder, or None on unsupported platforms or on failure
    """
    log = log or logger.debug
    platform = platform or sys.platform
    environ = os.environ if environ is None else environ
    home = home or Path.home

    try:
        if platform == "win32":
            program_files = (
                environ.get("ProgramFiles(x86)")
                or environ.get("ProgramFiles")
                or DEFAULT_PROGRAM_FILES
            )
            return Path(program_files) / "Zwift"
        if platform == "darwin":
            return Path(home()) / "Library" / "Applications" / "Zwift"
    except Exception as e:
        log(f"Caught error in finding Zwift app folder: {e!r}")
    return None


async def get_documents_path() -> Path:
    """Default documents folder resolver."""
    return Path.home() / "Documents"


def user_data_paths(documents: str | Path) -> tuple[Path, Path]:
    """Return (log_path, prefs_path) under a documents folder."""
    documents = Path(documents)
    return documents.joinpath(*LOG_SUBPATH), documents.joinpath(*PREFS_SUBPATH)
