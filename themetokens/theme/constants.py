"""Theme framework constants."""

from __future__ import annotations

DEFAULT_NAMESPACE = "spky"
DEFAULT_COLOR_FORMAT = "hex"
DEFAULT_FONT_STYLE = "Regular"

THEME_SECTIONS: tuple[str, ...] = (
    "fonts",
    "text",
    "colors",
)

TEXT_SPEC_KEYS: tuple[str, ...] = (
    "fontFamily",
    "fontStyle",
    "fontSize",
    "letterSpacing",
    "lineHeight",
    "textTransform",
    "textDecoration",
)
