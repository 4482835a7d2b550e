import json

import pytest

from zwift_data import cli
from zwift_data.config import INT_OVERRIDES, PATH_SETTINGS

LOG = (
    "[10:00:00] Game Version: 1.83.0\n"
    "[10:00:01] NETCLIENT:[INFO] Player ID: 1234567\n"
    "[10:00:02] Setting sport to 0\n"
    "[10:00:03] Loading WAD file 'assets/Worlds/world1/data.wad'\n"
    "[10:00:04] Game Version: 1.84.0\n"
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Keep real ZWIFT_* variables and .env files out of CLI runs."""
    for var in [*PATH_SETTINGS, *INT_OVERRIDES, "ZWIFT_VERSION", "ZWIFT_LOG_DIR"]:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def cli_args(log_file, prefs_file, tmp_path):
    log_file.write_text(LOG, encoding="utf-8")
    prefs_file.write_text("<flag>208</flag>", encoding="utf-8")
    return [
        "--app-folder",
        str(tmp_path / "no-install"),
        "--log-path",
        str(log_file),
        "--prefs-path",
        str(prefs_file),
    ]


def test_prints_state(capsys, cli_args) -> None:
    assert cli.main(cli_args) == 0

    out = capsys.readouterr().out
    assert "version: 1.84.0" in out
    assert "flag_id: 208" in out
    assert "player_id: 1234567" in out
    assert "jersey_id: -" in out
    assert "course_id: 6" in out


def test_prints_json(capsys, cli_args) -> None:
    assert cli.main([*cli_args, "--json"]) == 0

    state = json.loads(capsys.readouterr().out)
    assert state["version"] == "1.84.0"
    assert state["world_id"] == 1
    assert state["bike_id"] is None


def test_environment_override(capsys, cli_args, monkeypatch) -> None:
    monkeypatch.setenv("ZWIFT_WORLD_ID", "2")

    assert cli.main([*cli_args, "--json"]) == 0

    state = json.loads(capsys.readouterr().out)
    assert state["world_id"] == 2
    assert state["course_id"] == 2


def test_dumps_matches(capsys, cli_args) -> None:
    assert cli.main([*cli_args, "--matches"]) == 0

    out = capsys.readouterr().out
    assert "Found 2 matches for pattern: Game Version" in out
    assert "1: 1.83.0" in out
    assert "2: 1.84.0" in out
    assert "No matches found in Log.txt for pattern: Jersey ID" in out
