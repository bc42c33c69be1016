"""Theme input exports."""

from themetokens.theme.constants import DEFAULT_NAMESPACE
from themetokens.theme.loader import parse_theme
from themetokens.theme.models import TextSpec, Theme

__all__ = [
    "DEFAULT_NAMESPACE",
    "TextSpec",
    "Theme",
    "parse_theme",
]
