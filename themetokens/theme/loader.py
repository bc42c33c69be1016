"""Theme JSON parsing."""

from __future__ import annotations

import json
import logging
from typing import Mapping

from themetokens.errors import ThemeParseError
from themetokens.theme.constants import DEFAULT_FONT_STYLE, TEXT_SPEC_KEYS, THEME_SECTIONS
from themetokens.theme.models import TextSpec, Theme

logger = logging.getLogger(__name__)


def parse_theme(content: str) -> Theme:
    """Parse theme JSON text into a :class:`Theme`.

    Raises ThemeParseError when the text is not a JSON object. Malformed
    entries inside a section are skipped with a warning.
    """
    try:
        data = json.loads(content)
    except (json.JSONDecodeError, TypeError) as exc:
        raise ThemeParseError(details={"error": str(exc)}) from exc
    if not isinstance(data, dict):
        raise ThemeParseError(
            message="Expected a JSON object at the top level of the theme.",
            details={"type": type(data).__name__},
        )

    unknown = sorted(key for key in data if key not in THEME_SECTIONS)
    if unknown:
        logger.info("ignoring theme sections: %s", ", ".join(unknown))

    return Theme(
        fonts=_parse_fonts(data.get("fonts")),
        text=_parse_text(data.get("text")),
        colors=_parse_colors(data.get("colors")),
    )


def _parse_fonts(raw: object) -> dict[str, str]:
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        logger.warning("theme 'fonts' must be an object, got %s", type(raw).__name__)
        return {}
    fonts: dict[str, str] = {}
    for alias, family in raw.items():
        if not isinstance(family, str) or not family.strip():
            logger.warning("skipping font %r: family must be a non-empty string", alias)
            continue
        fonts[str(alias)] = family.strip()
    return fonts


def _parse_text(raw: object) -> dict[str, TextSpec]:
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        logger.warning("theme 'text' must be an object, got %s", type(raw).__name__)
        return {}
    text: dict[str, TextSpec] = {}
    for name, entry in raw.items():
        if not isinstance(entry, Mapping):
            logger.warning("skipping text style %r: expected an object", name)
            continue
        unknown = sorted(str(key) for key in entry if key not in TEXT_SPEC_KEYS)
        if unknown:
            logger.warning("text style %r: ignoring unsupported keys: %s", name, ", ".join(unknown))
        family = entry.get("fontFamily")
        size = entry.get("fontSize")
        if not isinstance(family, str) or not family:
            logger.warning("skipping text style %r: missing fontFamily", name)
            continue
        if isinstance(size, bool) or not isinstance(size, (int, float)):
            logger.warning("skipping text style %r: fontSize must be a number", name)
            continue
        text[str(name)] = TextSpec(
            font_family=family,
            font_size=size,
            font_style=entry.get("fontStyle") or DEFAULT_FONT_STYLE,
            letter_spacing=entry.get("letterSpacing"),
            line_height=entry.get("lineHeight"),
            text_transform=entry.get("textTransform"),
            text_decoration=entry.get("textDecoration"),
        )
    return text


def _parse_colors(raw: object) -> dict | None:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        logger.warning("theme 'colors' must be an object, got %s", type(raw).__name__)
        return None
    return raw
