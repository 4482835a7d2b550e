from zwift_data.config import load_settings


def test_empty_environment() -> None:
    assert load_settings({}) == {}


def test_paths_and_overrides() -> None:
    settings = load_settings(
        {
            "ZWIFT_APP_FOLDER": "/opt/zwift",
            "ZWIFT_LOG_PATH": "/tmp/Log.txt",
            "ZWIFT_PREFS_PATH": "",
            "ZWIFT_VERSION": "1.83.0",
            "ZWIFT_WORLD_ID": "0",
            "ZWIFT_PLAYER_ID": "42",
        }
    )

    assert settings == {
        "app_folder": "/opt/zwift",
        "log_path": "/tmp/Log.txt",
        "version": "1.83.0",
        "world_id": 0,
        "player_id": 42,
    }


def test_invalid_integer_is_ignored(caplog) -> None:
    settings = load_settings({"ZWIFT_SPORT_ID": "cycling"})

    assert "sport_id" not in settings
    assert "Invalid ZWIFT_SPORT_ID" in caplog.text
