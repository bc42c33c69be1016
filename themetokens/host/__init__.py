"""Host style registry exports."""

from themetokens.host.models import (
    FontName,
    GradientPaint,
    IncomingStyle,
    SolidPaint,
    StyleKind,
    StyleRecord,
)
from themetokens.host.registry import FontLoadError, MemoryStyleHost, StyleHost

__all__ = [
    "FontLoadError",
    "FontName",
    "GradientPaint",
    "IncomingStyle",
    "MemoryStyleHost",
    "SolidPaint",
    "StyleHost",
    "StyleKind",
    "StyleRecord",
]
