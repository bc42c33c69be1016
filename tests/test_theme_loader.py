"""Tests for theme JSON parsing."""

from __future__ import annotations

import json
import logging

import pytest

from themetokens.errors import ErrorCode, ThemeParseError
from themetokens.host import FontName
from themetokens.theme import TextSpec, parse_theme


def test_parse_full_theme() -> None:
    theme = parse_theme(
        json.dumps(
            {
                "fonts": {"body": "Inter"},
                "text": {
                    "body": {
                        "fontFamily": "body",
                        "fontStyle": "Medium",
                        "fontSize": 16,
                        "letterSpacing": {"value": 0, "unit": "PIXELS"},
                        "textTransform": "UPPER",
                    }
                },
                "colors": {"brand": {"primary": "#f00"}},
            }
        )
    )

    spec = theme.text["body"]
    assert spec == TextSpec(
        font_family="body",
        font_size=16,
        font_style="Medium",
        letter_spacing={"value": 0, "unit": "PIXELS"},
        text_transform="UPPER",
    )
    assert theme.font_name_for(spec) == FontName("Inter", "Medium")
    assert theme.colors == {"brand": {"primary": "#f00"}}


def test_missing_sections_are_empty() -> None:
    theme = parse_theme("{}")
    assert theme.fonts == {}
    assert theme.text == {}
    assert theme.colors is None


def test_font_style_defaults_to_regular_and_alias_falls_back() -> None:
    theme = parse_theme(json.dumps({"text": {"body": {"fontFamily": "Roboto", "fontSize": 14}}}))
    assert theme.font_name_for(theme.text["body"]) == FontName("Roboto", "Regular")


@pytest.mark.parametrize("content", ["{not json", "", "[1, 2]", "null"])
def test_malformed_json_raises_parse_error(content: str) -> None:
    with pytest.raises(ThemeParseError) as excinfo:
        parse_theme(content)
    assert excinfo.value.code is ErrorCode.THEME_PARSE_FAILED


def test_malformed_entries_are_skipped(caplog: pytest.LogCaptureFixture) -> None:
    content = json.dumps(
        {
            "fonts": {"body": "Inter", "bad": 3},
            "text": {
                "ok": {"fontFamily": "body", "fontSize": 12},
                "no_size": {"fontFamily": "body"},
                "not_object": "x",
            },
            "colors": ["#fff"],
        }
    )
    with caplog.at_level(logging.WARNING):
        theme = parse_theme(content)

    assert theme.fonts == {"body": "Inter"}
    assert list(theme.text) == ["ok"]
    assert theme.colors is None
    assert any("no_size" in record.getMessage() for record in caplog.records)


def test_unsupported_text_keys_are_reported(caplog: pytest.LogCaptureFixture) -> None:
    content = json.dumps({"text": {"body": {"fontFamily": "Inter", "fontSize": 12, "shadow": "1px"}}})
    with caplog.at_level(logging.WARNING):
        theme = parse_theme(content)

    assert list(theme.text) == ["body"]
    assert any("shadow" in record.getMessage() for record in caplog.records)
