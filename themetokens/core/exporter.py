"""Assemble CSS custom-property declarations from styles or themes."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Iterable

from themetokens.core.color import ColorValue, from_host_rgb, normalize, render
from themetokens.core.index import CategoricalIndex, font_family_index, font_size_index
from themetokens.core.tree import enumerate_leaves, join_path
from themetokens.errors import InvalidColorFormat, ValueNotIndexed, format_error_for_log
from themetokens.host.models import SolidPaint, StyleRecord
from themetokens.theme.constants import DEFAULT_COLOR_FORMAT, DEFAULT_NAMESPACE
from themetokens.theme.models import Theme

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True, slots=True)
class Declaration:
    """One ``--<namespace>-<category>-<key>: <value>;`` line."""

    namespace: str
    category: str
    key: str
    value: str

    @property
    def property_name(self) -> str:
        return f"--{self.namespace}-{self.category}-{self.key}"

    def __str__(self) -> str:
        return f"{self.property_name}: {self.value};"


@dataclass(frozen=True, slots=True)
class FontToken:
    """A text style with its size replaced by the font-size ordinal."""

    name: str
    font_family: str
    font_weight: str
    font_size: int
    letter_spacing: Any = None
    line_height: Any = None
    text_case: Any = None
    text_decoration: Any = None


@dataclass(frozen=True)
class ExportResult:
    font_sizes: tuple[Declaration, ...] = ()
    font_families: tuple[Declaration, ...] = ()
    colors: tuple[Declaration, ...] = ()
    text_variants: dict[str, FontToken] = field(default_factory=dict)
    size_index: CategoricalIndex = field(default_factory=lambda: CategoricalIndex(()))

    @property
    def declarations(self) -> tuple[Declaration, ...]:
        return self.font_sizes + self.font_families + self.colors

    @property
    def text(self) -> str:
        return "\n".join(str(declaration) for declaration in self.declarations)

    def as_theme(self) -> dict[str, Any]:
        """Return the export as a theme-shaped mapping."""
        return {
            "fontSizes": [str(line) for line in self.font_sizes],
            "fonts": [str(line) for line in self.font_families],
            "text": dict(self.text_variants),
            "colors": [str(line) for line in self.colors],
        }


@dataclass(frozen=True, slots=True)
class _TextSource:
    name: str
    family: str
    style: str
    size: float
    letter_spacing: Any = None
    line_height: Any = None
    text_case: Any = None
    text_decoration: Any = None


def export_styles(
    text_styles: Iterable[StyleRecord],
    paint_styles: Iterable[StyleRecord],
    namespace: str = DEFAULT_NAMESPACE,
    color_format: str = DEFAULT_COLOR_FORMAT,
    *,
    lowercase_names: bool = True,
) -> ExportResult:
    """Export live host styles as declarations."""
    texts: list[_TextSource] = []
    for record in text_styles:
        font = record.font_name
        size = record.font_size
        if font is None or size is None:
            logger.warning("skipping text style %r: font or size not set", record.name)
            continue
        attrs = record.attributes
        texts.append(
            _TextSource(
                name=record.name,
                family=font.family,
                style=font.style,
                size=size,
                letter_spacing=attrs.get("letter_spacing"),
                line_height=attrs.get("line_height"),
                text_case=attrs.get("text_case"),
                text_decoration=attrs.get("text_decoration"),
            )
        )

    colors: list[tuple[str, ColorValue]] = []
    for record in paint_styles:
        name = record.name.lower() if lowercase_names else record.name
        name = join_path((name,))
        for paint in record.paints:
            # gradients have no single color value
            if not isinstance(paint, SolidPaint):
                continue
            try:
                value = from_host_rgb(paint.color, paint.opacity)
            except InvalidColorFormat as exc:
                logger.error("skipping paint for %r: %s", record.name, format_error_for_log(exc))
                continue
            colors.append((name, value))

    return _assemble(texts, colors, namespace, color_format)


def export_theme(
    theme: Theme,
    namespace: str = DEFAULT_NAMESPACE,
    color_format: str = DEFAULT_COLOR_FORMAT,
    *,
    lowercase_names: bool = True,
) -> ExportResult:
    """Export a parsed theme directly, without going through a host."""
    texts = [
        _TextSource(
            name=name,
            family=theme.resolve_family(spec.font_family),
            style=spec.font_style,
            size=spec.font_size,
            letter_spacing=spec.letter_spacing,
            line_height=spec.line_height,
            text_case=spec.text_transform,
            text_decoration=spec.text_decoration,
        )
        for name, spec in theme.text.items()
    ]

    colors: list[tuple[str, ColorValue]] = []
    for entry in enumerate_leaves(theme.colors or {}):
        name = entry.name.lower() if lowercase_names else entry.name
        try:
            colors.append((name, normalize(entry.value)))
        except InvalidColorFormat as exc:
            logger.error("skipping color %r: %s", entry.name, format_error_for_log(exc))

    return _assemble(texts, colors, namespace, color_format)


def _assemble(
    texts: list[_TextSource],
    colors: list[tuple[str, ColorValue]],
    namespace: str,
    color_format: str,
) -> ExportResult:
    sizes = font_size_index(text.size for text in texts)
    families = font_family_index(text.family for text in texts)

    size_lines = tuple(
        Declaration(namespace, "font-sizes", str(ordinal), f"{size:g}px")
        for ordinal, size in enumerate(sizes)
    )
    family_lines = tuple(
        Declaration(namespace, "font-family", _family_key(family), family) for family in families
    )
    color_lines = tuple(
        Declaration(namespace, "colors", name, render(value, color_format)) for name, value in colors
    )

    variants: dict[str, FontToken] = {}
    for text in texts:
        try:
            ordinal = sizes.lookup(text.size)
        except ValueNotIndexed as exc:
            logger.error("dropping font token %r: %s", text.name, format_error_for_log(exc))
            continue
        variants[text.name.replace("/", ".").lower()] = FontToken(
            name=text.name,
            font_family=text.family.lower(),
            font_weight=text.style,
            font_size=ordinal,
            letter_spacing=text.letter_spacing,
            line_height=text.line_height,
            text_case=text.text_case,
            text_decoration=text.text_decoration,
        )

    return ExportResult(
        font_sizes=size_lines,
        font_families=family_lines,
        colors=color_lines,
        text_variants=variants,
        size_index=sizes,
    )


def _family_key(family: str) -> str:
    return _WHITESPACE_RE.sub("-", family.strip().lower())
