"""
Environment configuration
=========================

Maps ZWIFT_* environment variables to ZwiftData keyword arguments.

Environment Variables:
    ZWIFT_APP_FOLDER: Zwift install folder
    ZWIFT_VER_CUR_FILENAME_PATH: Path to Zwift_ver_cur_filename.txt
    ZWIFT_LOG_PATH: Path to Log.txt
    ZWIFT_PREFS_PATH: Path to prefs.xml
    ZWIFT_VERSION: Version override
    ZWIFT_FLAG_ID, ZWIFT_PLAYER_ID, ZWIFT_JERSEY_ID, ZWIFT_BIKE_ID,
    ZWIFT_SPORT_ID, ZWIFT_WORLD_ID, ZWIFT_COURSE_ID: Integer overrides
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)

PATH_SETTINGS = {
    "ZWIFT_APP_FOLDER": "app_folder",
    "ZWIFT_VER_CUR_FILENAME_PATH": "ver_cur_filename_path",
    "ZWIFT_LOG_PATH": "log_path",
    "ZWIFT_PREFS_PATH": "prefs_path",
}

INT_OVERRIDES = {
    "ZWIFT_FLAG_ID": "flag_id",
    "ZWIFT_PLAYER_ID": "player_id",
    "ZWIFT_JERSEY_ID": "jersey_id",
    "ZWIFT_BIKE_ID": "bike_id",
    "ZWIFT_SPORT_ID": "sport_id",
    "ZWIFT_WORLD_ID": "world_id",
    "ZWIFT_COURSE_ID": "course_id",
}


def load_settings(environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Build ZwiftData keyword arguments from the environment.

    Unset or empty variables are left out. Integer overrides that do not
    parse are logged and ignored.
    """
    environ = os.environ if environ is None else environ
    settings: dict[str, Any] = {}

    for var, key in PATH_SETTINGS.items():
        value = environ.get(var)
        if value:
            settings[key] = value

    version = environ.get("ZWIFT_VERSION")
    if version:
        settings["version"] = version

    for var, key in INT_OVERRIDES.items():
        value = environ.get(var)
        if not value:
            continue
        try:
            settings[key] = int(value)
        except ValueError:
            logger.warning(f"Invalid {var}: {value}")

    return settings
