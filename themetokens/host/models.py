"""Style records and paints exchanged with the host registry."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class StyleKind(Enum):
    TEXT = "text"
    PAINT = "paint"


@dataclass(frozen=True, slots=True)
class FontName:
    """A font family plus style, e.g. ``Inter`` / ``Bold``."""

    family: str
    style: str = "Regular"


@dataclass(frozen=True, slots=True)
class SolidPaint:
    """Solid fill with host-scale (0..1) channels."""

    color: tuple[float, float, float]
    opacity: float = 1.0


@dataclass(frozen=True, slots=True)
class GradientPaint:
    """Gradient fill; carried through but never exported."""

    kind: str = "GRADIENT_LINEAR"


Paint = SolidPaint | GradientPaint

# Attribute keys understood on host records.
TEXT_ATTRIBUTES: tuple[str, ...] = (
    "font_name",
    "font_size",
    "letter_spacing",
    "line_height",
    "text_case",
    "text_decoration",
)
PAINT_ATTRIBUTES: tuple[str, ...] = ("paints",)


@dataclass(eq=False)
class StyleRecord:
    """A named style owned by the host registry.

    Identity is held by the host; the core only writes ``name`` and
    ``attributes`` on records the host hands out.
    """

    id: str
    kind: StyleKind
    name: str = ""
    attributes: dict[str, Any] = field(default_factory=dict)

    @property
    def font_name(self) -> FontName | None:
        return self.attributes.get("font_name")

    @property
    def font_size(self) -> float | None:
        return self.attributes.get("font_size")

    @property
    def paints(self) -> list[Paint]:
        return list(self.attributes.get("paints", ()))


@dataclass(frozen=True, slots=True)
class IncomingStyle:
    """A requested style: name, kind and the attributes to write."""

    name: str
    kind: StyleKind
    attributes: dict[str, Any] = field(default_factory=dict)
