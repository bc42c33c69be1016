"""Theme framework models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from themetokens.core.tree import ThemeTree
from themetokens.host.models import FontName
from themetokens.theme.constants import DEFAULT_FONT_STYLE


@dataclass(frozen=True, slots=True)
class TextSpec:
    """One entry of the theme's ``text`` section."""

    font_family: str
    font_size: float
    font_style: str = DEFAULT_FONT_STYLE
    letter_spacing: Any = None
    line_height: Any = None
    text_transform: Any = None
    text_decoration: Any = None


@dataclass(frozen=True, slots=True)
class Theme:
    """A parsed theme with its optional sections made explicit."""

    fonts: dict[str, str] = field(default_factory=dict)
    text: dict[str, TextSpec] = field(default_factory=dict)
    colors: ThemeTree | None = None

    def resolve_family(self, alias: str) -> str:
        """Resolve a font alias through ``fonts``; unknown aliases name a family directly."""
        return self.fonts.get(alias, alias)

    def font_name_for(self, spec: TextSpec) -> FontName:
        return FontName(family=self.resolve_family(spec.font_family), style=spec.font_style)
