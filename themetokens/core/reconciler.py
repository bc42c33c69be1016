"""Apply incoming styles onto the host registry by name."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Iterable

from themetokens.errors import FontAcquisitionFailure, format_error_for_log
from themetokens.host.models import (
    PAINT_ATTRIBUTES,
    TEXT_ATTRIBUTES,
    FontName,
    IncomingStyle,
    StyleKind,
    StyleRecord,
)
from themetokens.host.registry import StyleHost

logger = logging.getLogger(__name__)


@dataclass
class ReconcileReport:
    """Outcome of one reconciliation pass."""

    created: list[str] = field(default_factory=list)
    updated: list[str] = field(default_factory=list)
    failed: dict[str, FontAcquisitionFailure] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed


async def reconcile(host: StyleHost, incoming: Iterable[IncomingStyle]) -> ReconcileReport:
    """Update same-named host styles in place, creating the missing ones.

    Fonts for text styles are loaded first, all at once. Entries whose font
    fails to load are reported and skipped; nothing already written is undone.
    """
    entries = list(incoming)
    failures = await _load_fonts(host, entries)

    existing: dict[tuple[StyleKind, str], StyleRecord] = {}
    for record in [*host.text_styles(), *host.paint_styles()]:
        existing.setdefault((record.kind, record.name), record)

    report = ReconcileReport()
    for entry in entries:
        font = entry.attributes.get("font_name") if entry.kind is StyleKind.TEXT else None
        if font is not None and font in failures:
            failure = failures[font]
            report.failed[entry.name] = failure
            logger.warning("skipping style %r: %s", entry.name, format_error_for_log(failure))
            continue

        record = existing.get((entry.kind, entry.name))
        if record is None:
            record = _create(host, entry.kind)
            existing[(entry.kind, entry.name)] = record
            report.created.append(entry.name)
        else:
            report.updated.append(entry.name)
        record.name = entry.name
        record.attributes.update(_writable_attributes(entry))

    logger.info(
        "reconciled styles created=%d updated=%d failed=%d",
        len(report.created),
        len(report.updated),
        len(report.failed),
    )
    return report


async def _load_fonts(
    host: StyleHost, entries: list[IncomingStyle]
) -> dict[FontName, FontAcquisitionFailure]:
    fonts: list[FontName] = []
    for entry in entries:
        font = entry.attributes.get("font_name") if entry.kind is StyleKind.TEXT else None
        if font is not None and font not in fonts:
            fonts.append(font)
    if not fonts:
        return {}

    results = await asyncio.gather(*(host.load_font(font) for font in fonts), return_exceptions=True)
    failures: dict[FontName, FontAcquisitionFailure] = {}
    for font, result in zip(fonts, results):
        if not isinstance(result, BaseException):
            continue
        if not isinstance(result, Exception):
            raise result
        failures[font] = FontAcquisitionFailure(
            message=f"Could not load font {font.family} {font.style}",
            details={"family": font.family, "style": font.style, "error": str(result)},
        )
    return failures


def _writable_attributes(entry: IncomingStyle) -> dict[str, Any]:
    allowed = TEXT_ATTRIBUTES if entry.kind is StyleKind.TEXT else PAINT_ATTRIBUTES
    unknown = sorted(key for key in entry.attributes if key not in allowed)
    if unknown:
        logger.warning(
            "style %r: dropping unsupported %s attributes: %s",
            entry.name,
            entry.kind.value,
            ", ".join(unknown),
        )
    return {key: value for key, value in entry.attributes.items() if key in allowed}


def _create(host: StyleHost, kind: StyleKind) -> StyleRecord:
    if kind is StyleKind.TEXT:
        return host.create_text_style()
    return host.create_paint_style()
