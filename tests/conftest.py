"""Pytest configuration and shared fixtures for Zwift data tests."""

import os
import sys

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

MANIFEST_XML = (
    '<Zwift version="1.0.139872" sversion="1.83.0 (139872)" gbranch="rc/1.83.0" '
    'gcommit="298e0a13bf6c23cfedb09968ae9490965c9e369c" '
    'manifest="Zwift_1.0.139872_34608a9e_manifest.xml"/>\n'
)


@pytest.fixture
def documents(tmp_path):
    """A documents folder containing Zwift/Logs and Zwift/prefs.xml parents."""
    docs = tmp_path / "Documents"
    (docs / "Zwift" / "Logs").mkdir(parents=True)
    return docs


@pytest.fixture
def log_file(documents):
    return documents / "Zwift" / "Logs" / "Log.txt"


@pytest.fixture
def prefs_file(documents):
    return documents / "Zwift" / "prefs.xml"


@pytest.fixture
def app_folder(tmp_path):
    folder = tmp_path / "Zwift"
    folder.mkdir()
    return folder


@pytest.fixture
def installed_manifest(app_folder):
    """Install folder with a null-padded version pointer and its manifest."""
    (app_folder / "Zwift_ver_cur.139872.xml").write_text(MANIFEST_XML, encoding="utf-8")
    (app_folder / "Zwift_ver_cur_filename.txt").write_bytes(
        b"Zwift_ver_cur.139872.xml" + b"\0" * 40
    )
    return app_folder


@pytest.fixture
def messages():
    """Collects diagnostic sink output."""
    return []
