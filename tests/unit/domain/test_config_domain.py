from __future__ import annotations

"""
Unit tests for configuration persistence.

The autouse 'isolated_user_dir' fixture redirects the user data directory
to a temporary folder, so these tests never touch the real home.
"""

import json
from pathlib import Path

from fsvisitor.domain.config import (
    get_config_path,
    get_default_config,
    load_config,
    save_config,
)


def test_default_config_values() -> None:
    assert get_default_config() == {
        "exporter": "human",
        "preview_length": 30,
        "xml_close_tags": False,
        "output_path": "",
        "log_level": "INFO",
        "log_file": "",
    }


def test_config_path_lives_in_user_dir(isolated_user_dir: Path) -> None:
    assert get_config_path().startswith(str(isolated_user_dir))


def test_load_missing_file_returns_defaults(tmp_path: Path) -> None:
    assert load_config(str(tmp_path / "missing.json")) == get_default_config()


def test_save_then_load_merges_over_defaults(tmp_path: Path) -> None:
    path = tmp_path / "cfg" / "config.json"
    assert save_config({"exporter": "xml"}, str(path)) is True

    stored = json.loads(path.read_text(encoding="utf-8"))
    assert stored["version"]

    loaded = load_config(str(path))
    assert loaded["exporter"] == "xml"
    assert loaded["preview_length"] == 30
    assert "version" not in loaded


def test_load_corrupted_file_returns_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_config(str(path)) == get_default_config()

    path.write_text("[1, 2]", encoding="utf-8")
    assert load_config(str(path)) == get_default_config()


def test_default_location_round_trip() -> None:
    save_config({"preview_length": 10})
    assert load_config()["preview_length"] == 10
