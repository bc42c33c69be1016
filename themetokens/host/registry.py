"""Host style registry boundary and an in-memory implementation."""

from __future__ import annotations

import asyncio
import itertools
import logging
from typing import Iterable, Protocol

from themetokens.host.models import FontName, StyleKind, StyleRecord

logger = logging.getLogger(__name__)


class FontLoadError(RuntimeError):
    """Raised by a host when a font resource cannot be acquired."""


class StyleHost(Protocol):
    """What the core needs from the design tool hosting the styles."""

    def text_styles(self) -> list[StyleRecord]: ...

    def paint_styles(self) -> list[StyleRecord]: ...

    def create_text_style(self) -> StyleRecord: ...

    def create_paint_style(self) -> StyleRecord: ...

    async def load_font(self, font: FontName) -> None: ...


class MemoryStyleHost:
    """Style registry kept in memory.

    ``available_fonts`` limits which fonts load successfully; ``None`` means
    every font loads.
    """

    def __init__(
        self,
        styles: Iterable[StyleRecord] = (),
        *,
        available_fonts: Iterable[FontName] | None = None,
        font_load_delay: float = 0.0,
    ) -> None:
        self._styles: list[StyleRecord] = list(styles)
        self._available_fonts = set(available_fonts) if available_fonts is not None else None
        self._font_load_delay = font_load_delay
        self._ids = itertools.count(len(self._styles) + 1)
        self.loaded_fonts: list[FontName] = []
        self.created: list[StyleRecord] = []

    def text_styles(self) -> list[StyleRecord]:
        return [style for style in self._styles if style.kind is StyleKind.TEXT]

    def paint_styles(self) -> list[StyleRecord]:
        return [style for style in self._styles if style.kind is StyleKind.PAINT]

    def create_text_style(self) -> StyleRecord:
        return self._create(StyleKind.TEXT)

    def create_paint_style(self) -> StyleRecord:
        return self._create(StyleKind.PAINT)

    async def load_font(self, font: FontName) -> None:
        if self._font_load_delay:
            await asyncio.sleep(self._font_load_delay)
        if self._available_fonts is not None and font not in self._available_fonts:
            raise FontLoadError(f"Font not installed: {font.family} {font.style}")
        self.loaded_fonts.append(font)

    def _create(self, kind: StyleKind) -> StyleRecord:
        record = StyleRecord(id=f"S:{next(self._ids)}", kind=kind)
        self._styles.append(record)
        self.created.append(record)
        logger.debug("created %s style %s", kind.value, record.id)
        return record
