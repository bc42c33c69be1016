"""Tests for declaration export."""

from __future__ import annotations

import json

from themetokens.core.exporter import Declaration, export_styles, export_theme
from themetokens.host import FontName, GradientPaint, SolidPaint, StyleKind, StyleRecord
from themetokens.theme import parse_theme


def _text(name: str, family: str, size: float, style: str = "Regular") -> StyleRecord:
    return StyleRecord(
        id=f"T:{name}",
        kind=StyleKind.TEXT,
        name=name,
        attributes={
            "font_name": FontName(family, style),
            "font_size": size,
            "text_case": "ORIGINAL",
        },
    )


def _paint(name: str, *paints: object) -> StyleRecord:
    return StyleRecord(id=f"P:{name}", kind=StyleKind.PAINT, name=name, attributes={"paints": list(paints)})


def test_declaration_text() -> None:
    line = Declaration("spky", "colors", "brand-primary", "#ff0000")
    assert str(line) == "--spky-colors-brand-primary: #ff0000;"


def test_export_styles_sections_in_fixed_order() -> None:
    texts = [
        _text("Heading/H1", "Inter", 32, "Bold"),
        _text("Body", "Arial", 16),
        _text("Caption", "Inter", 12),
        _text("Body/Small", "Arial", 12),
    ]
    paints = [
        _paint("Brand/Primary", SolidPaint((1.0, 0.0, 0.0), 1.0)),
        _paint("Gradient", GradientPaint()),
        _paint("Overlay", SolidPaint((0.0, 0.0, 0.0), 0.5)),
    ]

    result = export_styles(texts, paints, namespace="spky", color_format="hex")

    assert result.text.splitlines() == [
        "--spky-font-sizes-0: 12px;",
        "--spky-font-sizes-1: 16px;",
        "--spky-font-sizes-2: 32px;",
        "--spky-font-family-arial: Arial;",
        "--spky-font-family-inter: Inter;",
        "--spky-colors-brand-primary: #ff0000;",
        "--spky-colors-overlay: #00000080;",
    ]


def test_export_styles_rgba_and_case_preserving_names() -> None:
    paints = [_paint("Brand/Accent", SolidPaint((0.0, 0.5, 1.0), 0.25))]

    result = export_styles([], paints, namespace="ds", color_format="rgba", lowercase_names=False)

    assert [str(line) for line in result.colors] == ["--ds-colors-Brand-Accent: rgba(0, 128, 255, 0.25);"]


def test_text_variants_reference_font_size_ordinal() -> None:
    result = export_styles(
        [_text("Heading/H1", "Inter", 32, "Bold"), _text("Body", "Inter", 16)],
        [],
    )

    token = result.text_variants["heading.h1"]
    assert token.font_size == 1
    assert token.font_family == "inter"
    assert token.font_weight == "Bold"
    assert token.text_case == "ORIGINAL"
    assert result.size_index.values[token.font_size] == 32


def test_text_styles_without_font_are_skipped() -> None:
    broken = StyleRecord(id="T:x", kind=StyleKind.TEXT, name="broken")
    result = export_styles([broken, _text("Body", "Inter", 16)], [])
    assert list(result.text_variants) == ["body"]


def test_family_with_spaces_gets_dashed_key() -> None:
    result = export_styles([_text("Body", "Open Sans", 16)], [])
    assert str(result.font_families[0]) == "--spky-font-family-open-sans: Open Sans;"


def test_as_theme_shape() -> None:
    result = export_styles([_text("Body", "Inter", 16)], [_paint("Red", SolidPaint((1.0, 0.0, 0.0)))])
    theme = result.as_theme()
    assert set(theme) == {"fontSizes", "fonts", "text", "colors"}
    assert theme["colors"] == ["--spky-colors-red: #ff0000;"]


def test_export_theme_from_json() -> None:
    theme = parse_theme(
        json.dumps(
            {
                "fonts": {"body": "Inter", "display": "Playfair"},
                "text": {
                    "heading": {"fontFamily": "display", "fontSize": 40},
                    "body": {"fontFamily": "body", "fontSize": 16},
                },
                "colors": {
                    "brand": {"primary": "#ff0000", "secondary": {"light": "#fff", "dark": "#000"}},
                    "broken": "definitely-not-a-color",
                },
            }
        )
    )

    result = export_theme(theme, namespace="t", color_format="hsl")

    assert result.text.splitlines() == [
        "--t-font-sizes-0: 16px;",
        "--t-font-sizes-1: 40px;",
        "--t-font-family-inter: Inter;",
        "--t-font-family-playfair: Playfair;",
        "--t-colors-brand-primary: hsl(0, 100%, 50%);",
        "--t-colors-brand-secondary-light: hsl(0, 0%, 100%);",
        "--t-colors-brand-secondary-dark: hsl(0, 0%, 0%);",
    ]


def test_empty_export() -> None:
    result = export_styles([], [])
    assert result.text == ""
    assert result.declarations == ()
