"""Custom exceptions used across appsettings."""

from __future__ import annotations

from pathlib import Path


class SettingsError(Exception):
    """Base error for the library."""


class ConfigError(SettingsError):
    """Runtime configuration related error."""


class UnknownFormatError(ConfigError):
    """Raised when a serialization format name is not registered."""


class RecordTypeError(SettingsError):
    """Raised when a record type has no usable default value."""


class DecodeError(SettingsError):
    """Raised when document content does not convert to the record type."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class NoWritableLocation(SettingsError):
    """Raised when no write target can be determined for a document."""
