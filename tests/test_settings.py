"""Tests for QSettings-backed export settings."""

from __future__ import annotations

from pathlib import Path

from PySide6.QtCore import QSettings

from themetokens.config.settings import ExportSettings, normalize_namespace


def _settings(tmp_path: Path) -> ExportSettings:
    qs = QSettings(str(tmp_path / "settings.ini"), QSettings.Format.IniFormat)
    qs.setValue("paths/app_data_dir", str(tmp_path / "data"))
    return ExportSettings(qs)


def test_defaults(tmp_path: Path) -> None:
    settings = _settings(tmp_path)
    assert settings.namespace == "spky"
    assert settings.color_format == "hex"
    assert settings.lowercase_names is True


def test_values_persist(tmp_path: Path) -> None:
    settings = _settings(tmp_path)
    settings.namespace = "DS"
    settings.color_format = "HSL"
    settings.lowercase_names = False

    assert settings.namespace == "ds"
    assert settings.color_format == "hsl"
    assert settings.lowercase_names is False


def test_invalid_values_fall_back(tmp_path: Path) -> None:
    settings = _settings(tmp_path)
    settings.color_format = "cmyk"
    assert settings.color_format == "hex"
    assert normalize_namespace("has space") == "spky"
    assert normalize_namespace(None) == "spky"


def test_log_dir_is_created_under_app_data(tmp_path: Path) -> None:
    settings = _settings(tmp_path)
    assert settings.log_dir == tmp_path / "data" / "logs"
    assert settings.log_dir.is_dir()
