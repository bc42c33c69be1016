"""Color normalization and rendering backed by QColor."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Mapping, Sequence, Union

from PySide6.QtGui import QColor

from themetokens.errors import InvalidColorFormat

COLOR_FORMATS: tuple[str, ...] = ("hex", "rgba", "hsl")

_HEX_COLOR_RE = re.compile(r"^#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_RGB_FUNC_RE = re.compile(r"^rgba?\s*\(([^)]*)\)$", re.IGNORECASE)
_HSL_FUNC_RE = re.compile(r"^hsla?\s*\(([^)]*)\)$", re.IGNORECASE)
_NUMBER_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(%?)$")


@dataclass(frozen=True, slots=True)
class ColorValue:
    """Canonical color: integer channels 0..255 plus alpha 0..1."""

    r: int
    g: int
    b: int
    a: float = 1.0

    def to_qcolor(self) -> QColor:
        return QColor.fromRgb(self.r, self.g, self.b, round(self.a * 255))


ColorLike = Union[ColorValue, str, Mapping[str, float], Sequence[float]]


def normalize(value: ColorLike) -> ColorValue:
    """Convert any supported color representation into a ColorValue.

    Supported inputs are hex strings, ``rgb()``/``rgba()`` and
    ``hsl()``/``hsla()`` functions, CSS color names, and channel objects
    (``{"r", "g", "b", "a"}`` mappings or tuples) on the 0..255 scale.
    """
    if isinstance(value, ColorValue):
        return value
    if isinstance(value, str):
        return _normalize_text(value)
    if isinstance(value, Mapping):
        try:
            channels = [value["r"], value["g"], value["b"], value.get("a", 1.0)]
        except KeyError as exc:
            raise InvalidColorFormat(details={"value": dict(value), "missing": str(exc)}) from exc
        return _from_channels(channels, original=value)
    if isinstance(value, Sequence) and len(value) in (3, 4):
        channels = list(value)
        if len(channels) == 3:
            channels.append(1.0)
        return _from_channels(channels, original=value)
    raise InvalidColorFormat(details={"value": value})


def render(value: ColorValue, fmt: str = "hex") -> str:
    """Render a ColorValue as hex, rgb(a) or hsl(a) text.

    Hex gains an alpha byte (``#rrggbbaa``) only for translucent colors.
    Unknown formats render hex."""
    alpha = _format_alpha(value.a)
    if fmt == "rgba":
        if value.a == 1:
            return f"rgb({value.r}, {value.g}, {value.b})"
        return f"rgba({value.r}, {value.g}, {value.b}, {alpha})"
    if fmt == "hsl":
        color = value.to_qcolor()
        hue = color.hslHueF()
        h = round(max(hue, 0.0) * 360)
        s = round(color.hslSaturationF() * 100)
        light = round(color.lightnessF() * 100)
        if value.a == 1:
            return f"hsl({h}, {s}%, {light}%)"
        return f"hsla({h}, {s}%, {light}%, {alpha})"
    if value.a == 1:
        return f"#{value.r:02x}{value.g:02x}{value.b:02x}"
    return f"#{value.r:02x}{value.g:02x}{value.b:02x}{round(value.a * 255):02x}"


def from_host_rgb(color: Mapping[str, float] | Sequence[float], opacity: float = 1.0) -> ColorValue:
    """Rescale a host paint color (0..1 floats) to a ColorValue.

    Channels are multiplied by 255 and rounded; opacity passes through as alpha.
    """
    if isinstance(color, Mapping):
        r, g, b = color["r"], color["g"], color["b"]
    else:
        r, g, b = color[0], color[1], color[2]
    return _from_channels([r * 255, g * 255, b * 255, opacity], original=color)


def to_host_rgb(value: ColorValue) -> tuple[tuple[float, float, float], float]:
    """Return ``((r, g, b), opacity)`` on the host's 0..1 float scale."""
    return (value.r / 255, value.g / 255, value.b / 255), value.a


def _normalize_text(text: str) -> ColorValue:
    cleaned = text.strip()
    if not cleaned:
        raise InvalidColorFormat(details={"value": text})
    if cleaned.startswith("#"):
        return _from_hex(cleaned)
    match = _RGB_FUNC_RE.match(cleaned)
    if match:
        return _from_rgb_args(match.group(1), original=text)
    match = _HSL_FUNC_RE.match(cleaned)
    if match:
        return _from_hsl_args(match.group(1), original=text)
    color = QColor(cleaned)
    if color.isValid():
        return ColorValue(color.red(), color.green(), color.blue(), color.alphaF())
    raise InvalidColorFormat(details={"value": text})


def _from_hex(text: str) -> ColorValue:
    if not _HEX_COLOR_RE.match(text):
        raise InvalidColorFormat(details={"value": text})
    digits = text[1:]
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    alpha = "ff"
    if len(digits) == 8:
        digits, alpha = digits[:6], digits[6:]
    # QColor reads eight digit hex as #AARRGGBB
    color = QColor(f"#{alpha}{digits}")
    if not color.isValid():
        raise InvalidColorFormat(details={"value": text})
    return ColorValue(color.red(), color.green(), color.blue(), color.alphaF())


def _from_rgb_args(args: str, *, original: str) -> ColorValue:
    parts = _split_args(args, original=original)
    channels: list[float] = []
    for index, part in enumerate(parts):
        number, is_percent = _parse_number(part, original=original)
        if index < 3 and is_percent:
            number = number * 255 / 100
        elif index == 3 and is_percent:
            number = number / 100
        channels.append(number)
    if len(channels) == 3:
        channels.append(1.0)
    return _from_channels(channels, original=original)


def _from_hsl_args(args: str, *, original: str) -> ColorValue:
    parts = _split_args(args, original=original)
    hue, _ = _parse_number(parts[0].removesuffix("deg"), original=original)
    saturation, _ = _parse_number(parts[1], original=original)
    lightness, _ = _parse_number(parts[2], original=original)
    alpha = 1.0
    if len(parts) == 4:
        alpha, is_percent = _parse_number(parts[3], original=original)
        if is_percent:
            alpha = alpha / 100
    if not (0 <= saturation <= 100 and 0 <= lightness <= 100 and 0 <= alpha <= 1):
        raise InvalidColorFormat(details={"value": original})
    color = QColor.fromHslF((hue % 360) / 360, saturation / 100, lightness / 100, alpha)
    if not color.isValid():
        raise InvalidColorFormat(details={"value": original})
    return ColorValue(
        round(color.redF() * 255),
        round(color.greenF() * 255),
        round(color.blueF() * 255),
        alpha,
    )


def _split_args(args: str, *, original: str) -> list[str]:
    parts = [part.strip() for part in re.split(r"[,\s/]+", args.strip()) if part.strip()]
    if len(parts) not in (3, 4):
        raise InvalidColorFormat(details={"value": original})
    return parts


def _parse_number(text: str, *, original: str) -> tuple[float, bool]:
    match = _NUMBER_RE.match(text)
    if not match:
        raise InvalidColorFormat(details={"value": original})
    is_percent = bool(match.group(1))
    return float(text.rstrip("%")), is_percent


def _from_channels(channels: list, *, original: object) -> ColorValue:
    try:
        r, g, b = (round(float(channel)) for channel in channels[:3])
        a = float(channels[3])
    except (TypeError, ValueError) as exc:
        raise InvalidColorFormat(details={"value": original}) from exc
    if not all(0 <= channel <= 255 for channel in (r, g, b)) or not 0 <= a <= 1:
        raise InvalidColorFormat(
            message="Color channels are out of range.",
            details={"value": original},
        )
    return ColorValue(r, g, b, a)


def _format_alpha(alpha: float) -> str:
    return f"{round(alpha, 2):g}"
