"""
Zwift Data
==========

Reads the state of a Zwift client from the files it writes: the version
pointer and manifest in the install folder, and Log.txt / prefs.xml in the
user's documents folder.

Nothing is held open between calls. Every accessor re-reads its file so the
latest state written by the game is always observed.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from pathlib import Path

from .log_scan import get_all, get_first, get_last, parse_int
from .paths import (
    ZWIFT_VER_CUR_FILENAME,
    default_app_folder,
    get_documents_path,
    user_data_paths,
)
from .patterns import (
    BIKE_RE,
    FLAG_RE,
    JERSEY_RE,
    LOG_PATTERNS,
    PLAYER_RE,
    SPORT_RE,
    SVERSION_RE,
    VERSION_RE,
    WORLD_RE,
    course_for_world,
    hex8,
)

logger = logging.getLogger(__name__)

DEFAULT_VERSION = "0.0.0"


@dataclass
class ZwiftState:
    """Snapshot of every fact at one point in time."""

    version: str
    flag_id: int | None
    player_id: int | None
    jersey_id: int | None
    bike_id: int | None
    sport_id: int
    world_id: int
    course_id: int


class ZwiftData:
    """Extracts Zwift game facts from files on disk."""

    VERSION_RE = VERSION_RE
    SVERSION_RE = SVERSION_RE
    FLAG_RE = FLAG_RE
    PLAYER_RE = PLAYER_RE
    JERSEY_RE = JERSEY_RE
    BIKE_RE = BIKE_RE
    SPORT_RE = SPORT_RE
    WORLD_RE = WORLD_RE

    def __init__(
        self,
        log: Callable[[str], None] | None = None,
        log_debug: Callable[[str], None] | None = None,
        app_folder: str | Path | None = None,
        ver_cur_filename_path: str | Path | None = None,
        log_path: str | Path | None = None,
        prefs_path: str | Path | None = None,
        version: str | None = None,
        flag_id: int | None = None,
        player_id: int | None = None,
        jersey_id: int | None = None,
        bike_id: int | None = None,
        sport_id: int | None = None,
        world_id: int | None = None,
        course_id: int | None = None,
        documents_resolver: Callable[[], Awaitable[str | Path]] | None = None,
        platform: str | None = None,
        environ: Mapping[str, str] | None = None,
        home: Callable[[], Path] | None = None,
    ):
        """Configure paths and optional overrides.

        Args:
            log: Diagnostic sink taking one message string
            log_debug: Verbose diagnostic sink (defaults to `log`)
            app_folder: Zwift install folder (platform default if omitted)
            ver_cur_filename_path: Path to Zwift_ver_cur_filename.txt
            log_path: Path to Log.txt (resolved in initialize() if omitted)
            prefs_path: Path to prefs.xml (resolved in initialize() if omitted)
            version, flag_id, player_id, jersey_id, bike_id, sport_id,
            world_id, course_id: Overrides returned verbatim instead of
                reading files. None means not provided; 0 is a real value.
            documents_resolver: Async callable returning the documents folder
            platform, environ, home: Passed to default_app_folder()
        """
        self.log = log or logger.debug
        self.log_debug = log_debug or self.log

        self.app_folder = Path(app_folder) if app_folder else None
        self.ver_cur_filename_path = Path(ver_cur_filename_path) if ver_cur_filename_path else None
        self.log_path = Path(log_path) if log_path else None
        self.prefs_path = Path(prefs_path) if prefs_path else None
        self._documents_resolver = documents_resolver or get_documents_path

        self._version = version
        self._flag_id = flag_id
        self._player_id = player_id
        self._jersey_id = jersey_id
        self._bike_id = bike_id
        self._sport_id = sport_id
        self._world_id = world_id
        self._course_id = course_id

        if self.app_folder is None:
            self.app_folder = default_app_folder(
                platform=platform, environ=environ, home=home, log=self.log
            )
        if self.ver_cur_filename_path is None and self.app_folder is not None:
            self.ver_cur_filename_path = self.app_folder / ZWIFT_VER_CUR_FILENAME

        self.log_debug(f"app_folder: {self.app_folder}")
        self.log_debug(f"ver_cur_filename_path: {self.ver_cur_filename_path}")
        self.log_debug(f"log_path: {self.log_path}")
        self.log_debug(f"prefs_path: {self.prefs_path}")
        self.log_debug(
            f"overrides: version={version} flag_id={flag_id} player_id={player_id} "
            f"jersey_id={jersey_id} bike_id={bike_id} sport_id={sport_id} "
            f"world_id={world_id} course_id={course_id}"
        )

    async def initialize(self) -> bool:
        """Fill in Log.txt / prefs.xml paths from the documents folder.

        Only calls the documents resolver when one of the paths is still
        unset. Errors from the resolver propagate to the caller.

        Returns:
            True once paths are resolved
        """
        if self.log_path is not None and self.prefs_path is not None:
            return True

        documents = await self._documents_resolver()
        log_path, prefs_path = user_data_paths(documents)
        if self.log_path is None:
            self.log_path = log_path
        if self.prefs_path is None:
            self.prefs_path = prefs_path
        return True

    async def get_game_version(self) -> str:
        """Return the game version as "X.Y.Z".

        Order: override, then the installed manifest, then the last
        "Game Version" line in Log.txt, then "0.0.0".
        """
        if self._version is not None:
            return self._version

        version = self._read_manifest_version()
        if version:
            self.log(f"Zwift seems to be version: {version}")
            return version

        version = self._last(VERSION_RE, 1) or DEFAULT_VERSION
        self.log(f"Zwift seems to be version: {version}")
        return version

    def _read_manifest_version(self) -> str | None:
        """Follow the version pointer file to the manifest's sversion."""
        pointer = self.ver_cur_filename_path
        if pointer is None or self.app_folder is None:
            return None

        try:
            if not pointer.is_file():
                return None
            self.log_debug(f"Zwift version filename file: {pointer}")
            # The pointer file can be a null-padded fixed-width record
            filename = pointer.read_text(encoding="utf-8", errors="replace")
            filename = filename.strip().replace("\0", "").strip()
            manifest = self.app_folder / filename
            self.log_debug(f"Zwift version file: {manifest}")
            xml = manifest.read_text(encoding="utf-8", errors="replace")
        except (OSError, ValueError) as e:
            self.log(f"Caught error reading Zwift version file: {e!r}")
            return None

        match = SVERSION_RE.search(xml)
        if not match:
            self.log(f"No sversion attribute in {manifest}")
            return None
        return match.group(1)

    async def get_flag_id(self) -> int | None:
        """Return the country flag id from prefs.xml."""
        if self._flag_id is not None:
            return self._flag_id

        self.log_debug(f"Zwift prefs.xml file: {self.prefs_path}")
        # prefs.xml holds a single current value, so the first match wins
        flag_id = parse_int(get_first(self.prefs_path, FLAG_RE, 1, self.log))
        if flag_id is not None:
            self.log(f"Zwift seems to run with flag ID: {flag_id} = {hex8(flag_id)}")
        return flag_id

    async def get_player_id(self) -> int | None:
        if self._player_id is not None:
            return self._player_id

        player_id = parse_int(self._last(PLAYER_RE, 1))
        if player_id is not None:
            self.log(f"Zwift seems to run with player ID: {player_id} = {hex8(player_id)}")
        return player_id

    async def get_jersey_id(self) -> int | None:
        if self._jersey_id is not None:
            return self._jersey_id

        jersey_id = parse_int(self._last(JERSEY_RE, 1))
        if jersey_id is not None:
            self.log(f"Zwift seems to run with jersey ID: {jersey_id} = {hex8(jersey_id)}")
        return jersey_id

    async def get_bike_id(self) -> int | None:
        if self._bike_id is not None:
            return self._bike_id

        bike_id = parse_int(self._last(BIKE_RE, 1))
        if bike_id is not None:
            self.log(f"Zwift seems to run with bike ID: {bike_id} = {hex8(bike_id)}")
        return bike_id

    async def get_sport_id(self) -> int:
        """Return the sport id, 0 when unknown or logged as a named token."""
        if self._sport_id is not None:
            return self._sport_id

        sport_id = parse_int(self._last(SPORT_RE, 2), default=0)
        self.log(f"Zwift seems to run with sport ID: {sport_id} = {hex8(sport_id)}")
        return sport_id

    async def get_world_id(self) -> int:
        if self._world_id is not None:
            return self._world_id

        world_id = parse_int(self._last(WORLD_RE, 2), default=0)
        self.log(f"Zwift seems to run in world ID: {world_id} = {hex8(world_id)}")
        return world_id

    async def get_course_id(self) -> int:
        """Return the course id derived from the current world id."""
        if self._course_id is not None:
            return self._course_id

        course_id = course_for_world(await self.get_world_id())
        self.log(f"Zwift seems to run on course ID: {course_id} = {hex8(course_id)}")
        return course_id

    async def get_all_matches(self, name: str) -> list[str]:
        """Return every capture in Log.txt for one of the LOG_PATTERNS names.

        Raises:
            KeyError: If `name` is not a known pattern
        """
        pattern, group = LOG_PATTERNS[name]
        return get_all(self.log_path, pattern, group, self.log)

    async def get_state(self) -> ZwiftState:
        """Read every fact once."""
        return ZwiftState(
            version=await self.get_game_version(),
            flag_id=await self.get_flag_id(),
            player_id=await self.get_player_id(),
            jersey_id=await self.get_jersey_id(),
            bike_id=await self.get_bike_id(),
            sport_id=await self.get_sport_id(),
            world_id=await self.get_world_id(),
            course_id=await self.get_course_id(),
        )

    async def close_process(self) -> None:
        """No-op: process handles are not managed here."""

    def _last(self, pattern, group: int) -> str | None:
        return get_last(self.log_path, pattern, group, self.log)
