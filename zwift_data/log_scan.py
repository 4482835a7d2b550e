from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterator
from pathlib import Path

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*(\d+)")


def read_text(path: str | Path | None, log: Callable[[str], None] | None = None) -> str | None:
    """Read a whole file into memory.

    The target files are written by another process at its own pace, so a
    missing file is normal and returns None without complaint. Undecodable
    bytes are replaced rather than raised.

    Args:
        path: File to read (None is treated as missing)
        log: Diagnostic sink for read errors

    Returns:
        File contents, or None if missing or unreadable
    """
    if not path:
        return None
    path = Path(path)
    try:
        if not path.is_file():
            return None
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        (log or logger.debug)(f"Caught error reading {path}: {e!r}")
        return None


def iter_matches(text: str, pattern: re.Pattern[str]) -> Iterator[re.Match[str]]:
    """Lazily yield non-overlapping matches in file order."""
    yield from pattern.finditer(text)


def get_last(
    path: str | Path | None,
    pattern: re.Pattern[str],
    group: int,
    log: Callable[[str], None] | None = None,
) -> str | None:
    """Return capture `group` of the last match of `pattern` in a file.

    The session log is append-only, so the latest mention of an event wins.
    """
    text = read_text(path, log)
    if text is None:
        return None

    last = None
    for match in iter_matches(text, pattern):
        last = match
    if last is None:
        return None
    return last.group(group)


def get_first(
    path: str | Path | None,
    pattern: re.Pattern[str],
    group: int,
    log: Callable[[str], None] | None = None,
) -> str | None:
    """Return capture `group` of the first match of `pattern` in a file."""
    text = read_text(path, log)
    if text is None:
        return None

    for match in iter_matches(text, pattern):
        return match.group(group)
    return None


def get_all(
    path: str | Path | None,
    pattern: re.Pattern[str],
    group: int,
    log: Callable[[str], None] | None = None,
) -> list[str]:
    """Return capture `group` of every match, in file order."""
    text = read_text(path, log)
    if text is None:
        return []
    return [match.group(group) for match in iter_matches(text, pattern)]


def parse_int(token: str | None, default: int | None = None) -> int | None:
    """Parse the leading integer of a token.

    Named tokens (e.g. "CYCLING") and empty captures return `default`.
    """
    if not token:
        return default
    match = _LEADING_INT.match(token)
    if not match:
        return default
    return int(match.group(1))
