"""Error codes and error handling utilities for themetokens."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes for theme token operations."""

    # Input errors
    THEME_PARSE_FAILED = auto()
    COLOR_FORMAT_INVALID = auto()

    # Internal consistency errors
    VALUE_NOT_INDEXED = auto()

    # Host errors
    FONT_LOAD_FAILED = auto()


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.THEME_PARSE_FAILED: "The theme JSON could not be parsed.",
    ErrorCode.COLOR_FORMAT_INVALID: "The color value is not in a supported format.",
    ErrorCode.VALUE_NOT_INDEXED: "The value is missing from the index built for this export.",
    ErrorCode.FONT_LOAD_FAILED: "The font could not be loaded by the host.",
}


@dataclass
class ThemeTokensError(Exception):
    """Base exception with error code and context."""

    code: ErrorCode
    message: str = ""
    details: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.message:
            self.message = ERROR_MESSAGES.get(self.code, "An unexpected error occurred.")

    def __str__(self) -> str:
        parts = [self.message]
        if self.details:
            details_str = " | ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f" ({details_str})")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging or posting back to the UI."""
        return {
            "code": self.code.name,
            "message": self.message,
            "details": self.details,
        }


@dataclass
class ThemeParseError(ThemeTokensError):
    """Raised when theme JSON is malformed; aborts the whole request."""

    code: ErrorCode = ErrorCode.THEME_PARSE_FAILED


@dataclass
class InvalidColorFormat(ThemeTokensError, ValueError):
    """Raised when a color matches none of the supported representations."""

    code: ErrorCode = ErrorCode.COLOR_FORMAT_INVALID


@dataclass
class ValueNotIndexed(ThemeTokensError, LookupError):
    """Raised when a categorical lookup misses the index."""

    code: ErrorCode = ErrorCode.VALUE_NOT_INDEXED


@dataclass
class FontAcquisitionFailure(ThemeTokensError):
    """Raised when the host fails to load a font for a text style."""

    code: ErrorCode = ErrorCode.FONT_LOAD_FAILED


def format_error_for_log(error: ThemeTokensError | Exception) -> str:
    """Format an error as a single log line."""
    if isinstance(error, ThemeTokensError):
        return f"[{error.code.name}] {error}"
    return f"[UNEXPECTED] {type(error).__name__}: {error}"
