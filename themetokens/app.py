"""Request handling for the generate and copy messages."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from typing import Any, Callable, Mapping

from themetokens.config.settings import ExportSettings, clean_namespace
from themetokens.core.color import normalize, to_host_rgb
from themetokens.core.exporter import ExportResult, export_styles
from themetokens.core.reconciler import ReconcileReport, reconcile
from themetokens.core.tree import enumerate_leaves
from themetokens.errors import InvalidColorFormat, ThemeParseError, format_error_for_log
from themetokens.host.models import IncomingStyle, SolidPaint, StyleKind
from themetokens.host.registry import StyleHost
from themetokens.theme.loader import parse_theme
from themetokens.theme.models import Theme

logger = logging.getLogger(__name__)


def configure_logger(settings: ExportSettings) -> logging.Logger:
    logger = logging.getLogger("themetokens")
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    handler = RotatingFileHandler(
        settings.log_dir / "themetokens.log",
        maxBytes=512_000,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logger.addHandler(handler)
    return logger


class PluginController:
    """Dispatch inbound messages against a host style registry.

    ``post_message`` receives the declaration text produced by ``copy``.
    """

    def __init__(
        self,
        host: StyleHost,
        settings: ExportSettings,
        post_message: Callable[[str], None],
    ) -> None:
        self._host = host
        self._settings = settings
        self._post_message = post_message

    @classmethod
    def create(
        cls,
        host: StyleHost,
        post_message: Callable[[str], None],
        settings: ExportSettings | None = None,
    ) -> PluginController:
        """Build a controller with persistent settings and file logging installed."""
        settings = settings if settings is not None else ExportSettings()
        startup = configure_logger(settings)
        startup.info(
            "controller ready namespace=%s color_format=%s",
            settings.namespace,
            settings.color_format,
        )
        return cls(host, settings, post_message)

    async def handle_message(self, msg: Mapping[str, Any]) -> ReconcileReport | ExportResult | None:
        kind = msg.get("type")
        if kind == "generate":
            return await self.generate(msg.get("theme", ""))
        if kind == "copy":
            return self.copy(msg.get("namespace"))
        logger.warning("ignoring message with unknown type %r", kind)
        return None

    async def generate(self, theme_json: str) -> ReconcileReport | None:
        try:
            theme = parse_theme(theme_json)
        except ThemeParseError as exc:
            logger.error("theme parse failed: %s", format_error_for_log(exc))
            return None

        incoming = [*_text_styles(theme), *_paint_styles(theme)]
        return await reconcile(self._host, incoming)

    def copy(self, namespace: str | None = None) -> ExportResult:
        requested = clean_namespace(namespace)
        if namespace and requested is None:
            logger.warning(
                "ignoring invalid namespace %r; using %r",
                namespace,
                self._settings.namespace,
            )
        result = export_styles(
            self._host.text_styles(),
            self._host.paint_styles(),
            namespace=requested or self._settings.namespace,
            color_format=self._settings.color_format,
            lowercase_names=self._settings.lowercase_names,
        )
        self._post_message(result.text)
        return result


def _text_styles(theme: Theme) -> list[IncomingStyle]:
    styles: list[IncomingStyle] = []
    for name, spec in theme.text.items():
        attributes: dict[str, Any] = {
            "font_name": theme.font_name_for(spec),
            "font_size": spec.font_size,
        }
        optional = {
            "letter_spacing": spec.letter_spacing,
            "line_height": spec.line_height,
            "text_case": spec.text_transform,
            "text_decoration": spec.text_decoration,
        }
        attributes.update({key: value for key, value in optional.items() if value is not None})
        styles.append(IncomingStyle(name=name, kind=StyleKind.TEXT, attributes=attributes))
    return styles


def _paint_styles(theme: Theme) -> list[IncomingStyle]:
    styles: list[IncomingStyle] = []
    for entry in enumerate_leaves(theme.colors or {}, separator="/"):
        try:
            color = normalize(entry.value)
        except InvalidColorFormat as exc:
            logger.error("skipping color %r: %s", entry.name, format_error_for_log(exc))
            continue
        channels, opacity = to_host_rgb(color)
        paint = SolidPaint(color=channels, opacity=opacity)
        styles.append(IncomingStyle(name=entry.name, kind=StyleKind.PAINT, attributes={"paints": [paint]}))
    return styles
