"""Export settings via QSettings."""

from __future__ import annotations

import os
from pathlib import Path

from PySide6.QtCore import QSettings

from themetokens.core.color import COLOR_FORMATS
from themetokens.theme.constants import DEFAULT_COLOR_FORMAT, DEFAULT_NAMESPACE

_NAMESPACE_CHARS = set("abcdefghijklmnopqrstuvwxyz0123456789-_")


class ExportSettings:
    """Wraps QSettings for persistent export configuration."""

    def __init__(self, qsettings: QSettings | None = None) -> None:
        self._qs = qsettings if qsettings is not None else QSettings("ThemeTokens", "ThemeTokens")

    # -- declarations --

    @property
    def namespace(self) -> str:
        raw = self._qs.value("export/namespace", DEFAULT_NAMESPACE, type=str)
        return normalize_namespace(raw)

    @namespace.setter
    def namespace(self, value: str) -> None:
        self._qs.setValue("export/namespace", normalize_namespace(value))

    @property
    def color_format(self) -> str:
        raw = self._qs.value("export/color_format", DEFAULT_COLOR_FORMAT, type=str)
        value = (raw or "").strip().lower()
        if value in COLOR_FORMATS:
            return value
        return DEFAULT_COLOR_FORMAT

    @color_format.setter
    def color_format(self, value: str) -> None:
        cleaned = (value or "").strip().lower()
        if cleaned not in COLOR_FORMATS:
            cleaned = DEFAULT_COLOR_FORMAT
        self._qs.setValue("export/color_format", cleaned)

    @property
    def lowercase_names(self) -> bool:
        return self._qs.value("export/lowercase_names", True, type=bool)

    @lowercase_names.setter
    def lowercase_names(self, value: bool) -> None:
        self._qs.setValue("export/lowercase_names", bool(value))

    # -- helpers --

    @property
    def app_data_dir(self) -> Path:
        path = self._app_data_dir()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def log_dir(self) -> Path:
        path = self.app_data_dir / "logs"
        path.mkdir(parents=True, exist_ok=True)
        return path

    def _app_data_dir(self) -> Path:
        override = self._qs.value("paths/app_data_dir", "", type=str)
        if override:
            return Path(override)
        base = Path(os.environ.get("APPDATA", Path.home() / ".config"))
        return base / "themetokens"


def clean_namespace(value: str | None) -> str | None:
    """Lowercase a declaration namespace; None when empty or not a valid CSS name part."""
    cleaned = (value or "").strip().lower()
    if not cleaned or any(ch not in _NAMESPACE_CHARS for ch in cleaned):
        return None
    return cleaned


def normalize_namespace(value: str | None) -> str:
    """Lowercase and validate a declaration namespace, falling back to the default."""
    return clean_namespace(value) or DEFAULT_NAMESPACE
