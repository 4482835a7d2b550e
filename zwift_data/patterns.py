"""
Zwift File Patterns
===================

Regular expressions for the Zwift log, manifest and prefs files.

Log lines look like:
    [7:54:19] Game Version: 1.83.0
    [7:54:19] NETCLIENT:[INFO] Player ID: 1234567
    [7:54:19] [Garage Last Selected] Player Profile Update set Jersey: 363655187, set Bike: 1029279076
    [17:53:29] [Garage Last Selected] Player Profile Update for Cycling Jersey set 872957794
    [12:46:00] DEBUG LEVEL: [Garage Last Selected] Jersey has been set 363655187
    [7:54:20] Setting sport to 0
    [7:54:21] Loading WAD file 'assets/Worlds/world1/data.wad'
"""

from __future__ import annotations

import re

# <Zwift version="1.0.139872" sversion="1.83.0 (139872)" gbranch="rc/1.83.0" ... />
SVERSION_RE = re.compile(r'sversion="((?:\d+)\.(?:\d+)\.(?:\d+))')

# <flag>208</flag>
FLAG_RE = re.compile(r"<flag>(\d*)</flag>")

VERSION_RE = re.compile(r"\[(?:[^\]]*)\]\s+Game Version: ((?:\d+)\.(?:\d+)\.(?:\d+))")
PLAYER_RE = re.compile(r"\[(?:[^\]]*)\]\s+(?:NETCLIENT:){0,1}\[INFO\] Player ID: (\d*)")
# Phrasing changed across game versions, the event did not
JERSEY_RE = re.compile(r"\[(?:[^\]]*)\]\s+.*(?:set Jersey: |Jersey (?:has been )?set )(\d+)")
BIKE_RE = re.compile(r"\[(?:[^\]]*)\]\s+.*(?:set Bike: )(\d+)")
SPORT_RE = re.compile(r"\[([^\]]*)\]\s+Setting sport to (\S+)")
WORLD_RE = re.compile(r"\[([^\]]*)\]\s+Loading WAD file 'assets/Worlds/world(\d*)/data.wad")

# name -> (pattern, capture group)
LOG_PATTERNS: dict[str, tuple[re.Pattern[str], int]] = {
    "Game Version": (VERSION_RE, 1),
    "Player ID": (PLAYER_RE, 1),
    "Jersey ID": (JERSEY_RE, 1),
    "Bike ID": (BIKE_RE, 1),
    "Sport ID": (SPORT_RE, 2),
    "World ID": (WORLD_RE, 2),
}

# World asset bundle -> course geometry
_WORLD_COURSES = {
    0: 6,  # default world
    1: 6,  # Watopia
    2: 2,  # Richmond
}


def course_for_world(world_id: int) -> int:
    """Map a world id to its course id."""
    return _WORLD_COURSES.get(world_id, world_id + 4)


def hex8(value: int) -> str:
    """Zero-padded 8 digit hex rendering used in diagnostics."""
    return f"{value & 0xFFFFFFFF:08x}"
