from __future__ import annotations

"""
Unit tests for the Configuration Validator.

Verifies:
1. Default injection.
2. Coercion of strings/numbers in lenient mode.
3. Strict mode rejections.
"""

import pytest

from fsvisitor.core.services.validator import validate_config


def test_validate_none_returns_defaults() -> None:
    cfg, warnings = validate_config(None)

    assert cfg["exporter"] == "human"
    assert cfg["preview_length"] == 30
    assert cfg["xml_close_tags"] is False
    assert len(warnings) == 1


def test_validate_empty_dict_has_no_warnings() -> None:
    cfg, warnings = validate_config({})
    assert cfg["log_level"] == "INFO"
    assert cfg["log_file"] == ""
    assert warnings == []


def test_validate_normalizes_exporter_key() -> None:
    cfg, warnings = validate_config({"exporter": "  XML "})
    assert cfg["exporter"] == "xml"
    assert warnings == []


def test_validate_unknown_exporter_falls_back() -> None:
    cfg, warnings = validate_config({"exporter": "yaml"})
    assert cfg["exporter"] == "human"
    assert any("Unknown exporter" in w for w in warnings)


def test_validate_coerces_lenient_values() -> None:
    cfg, warnings = validate_config({"xml_close_tags": "yes", "preview_length": "12", "log_level": "debug"})

    assert cfg["xml_close_tags"] is True
    assert cfg["preview_length"] == 12
    assert cfg["log_level"] == "DEBUG"
    assert len(warnings) == 2


@pytest.mark.parametrize("value", [0, -3, "abc", 2.5, True])
def test_validate_invalid_preview_length_uses_fallback(value) -> None:
    cfg, warnings = validate_config({"preview_length": value})
    assert cfg["preview_length"] == 30
    assert len(warnings) == 1


def test_strict_mode_raises() -> None:
    with pytest.raises(TypeError):
        validate_config("not a dict", strict=True)
    with pytest.raises(ValueError):
        validate_config({"exporter": "yaml"}, strict=True)
    with pytest.raises(ValueError):
        validate_config({"preview_length": 0}, strict=True)
    with pytest.raises(TypeError):
        validate_config({"xml_close_tags": "yes"}, strict=True)
