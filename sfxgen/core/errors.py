"""
sfxgen exception hierarchy.

Provides a base exception class with user-facing messages and debug context,
plus specialized subclasses for tone parameters and catalog content.
Filesystem failures are not wrapped here; OSError propagates as-is.
"""

from typing import Any, Dict, Optional


class SfxGenError(Exception):
    """Base exception for sfxgen errors.

    Attributes:
        user_message: Safe, user-facing error message.
        context: Dictionary of debug information.
    """

    def __init__(
        self,
        message: str,
        *,
        user_message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.user_message = user_message or message
        self.context = context or {}


class ToneSpecError(SfxGenError):
    """Invalid tone parameters (frequency, duration, volume, delay, waveform)."""

    pass


class CatalogError(SfxGenError):
    """Invalid catalog content or unknown effect names."""

    pass


class CatalogParseError(CatalogError):
    """Raised when a catalog YAML file cannot be parsed or has invalid structure.

    Attributes:
        line: Line number (1-indexed) if available from YAML parser.
              None for structural/schema errors (e.g., missing 'effects' key).
        column: Column number (1-indexed) if available from YAML parser.
    """

    def __init__(
        self, message: str, line: Optional[int] = None, column: Optional[int] = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)

    def __str__(self) -> str:
        if self.line is not None:
            loc = f"line {self.line}"
            if self.column is not None:
                loc += f", column {self.column}"
            return f"{super().__str__()} ({loc})"
        return super().__str__()
