"""Configuration-style documents stored in the platform's config directories.

Calls share one DocumentStore per format and active configuration;
``format`` selects the serialization format (defaults to the configured one,
YAML unless ``APPSETTINGS_FORMAT`` says otherwise).
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, TypeVar

from appsettings.core.flags import DocFlags
from appsettings.stores.document_store import DocumentStore, shared_store
from appsettings.utils.paths import Category

T = TypeVar("T")

DEFAULT_FILENAME = "settings"


def _store(format: str | None) -> DocumentStore:
    return shared_store(Category.CONFIG, format)


def get_settings_paths(
    name: str,
    subdir: str = "",
    filename: str = DEFAULT_FILENAME,
    writable: bool = False,
    flags: DocFlags | None = None,
    *,
    format: str | None = None,
) -> Iterator[Path]:
    """Return candidate settings paths; existing files only unless ``writable``."""

    return _store(format).get_paths(name, subdir, filename, writable=writable, flags=flags)


def load_settings(
    record_type: type[T],
    name: str,
    flags: DocFlags | None = None,
    filename: str = DEFAULT_FILENAME,
    subdir: str = "",
    *,
    format: str | None = None,
) -> T:
    """Load settings, searching system-wide dirs, the user dir and the working dir.

    The first file found wins. Without one, the default settings are returned
    and written to the user's config dir unless ``dont_write_nonexistent``.
    """

    return _store(format).load(record_type, name, flags, filename, subdir)


def load_subdir_settings(
    record_type: type[T],
    name: str,
    subdir: str,
    *,
    format: str | None = None,
) -> Iterator[T]:
    """Lazily load every settings file below ``name/subdir``."""

    return _store(format).load_subdir(record_type, name, subdir)


def save_settings(
    record: object,
    name: str,
    flags: DocFlags | None = None,
    filename: str = DEFAULT_FILENAME,
    subdir: str = "",
    *,
    format: str | None = None,
) -> Path:
    """Save settings to the user's config dir (or the working dir when portable)."""

    return _store(format).save(record, name, flags, filename, subdir)


def delete_settings(
    name: str,
    flags: DocFlags | None = None,
    filename: str = DEFAULT_FILENAME,
    subdir: str = "",
    *,
    format: str | None = None,
) -> list[Path]:
    """Delete the settings file and its directory when left empty."""

    return _store(format).delete(name, flags, filename, subdir)


__all__ = [
    "DEFAULT_FILENAME",
    "delete_settings",
    "get_settings_paths",
    "load_settings",
    "load_subdir_settings",
    "save_settings",
]
