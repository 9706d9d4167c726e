"""Program state stored in the platform's data directories."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, TypeVar

from appsettings.core.flags import DocFlags
from appsettings.stores.document_store import DocumentStore, shared_store
from appsettings.utils.paths import Category

T = TypeVar("T")

DEFAULT_FILENAME = "data"

DataFlags = DocFlags


def _store(format: str | None) -> DocumentStore:
    return shared_store(Category.DATA, format)


def get_data_paths(
    name: str,
    subdir: str = "",
    filename: str = DEFAULT_FILENAME,
    writable: bool = False,
    flags: DataFlags | None = None,
    *,
    format: str | None = None,
) -> Iterator[Path]:
    return _store(format).get_paths(name, subdir, filename, writable=writable, flags=flags)


def load_data(
    record_type: type[T],
    name: str,
    flags: DataFlags | None = None,
    filename: str = DEFAULT_FILENAME,
    subdir: str = "",
    *,
    format: str | None = None,
) -> T:
    """Load program state; creates the file with defaults when none is found."""

    return _store(format).load(record_type, name, flags, filename, subdir)


def load_subdir_data(
    record_type: type[T],
    name: str,
    subdir: str,
    *,
    format: str | None = None,
) -> Iterator[T]:
    return _store(format).load_subdir(record_type, name, subdir)


def save_data(
    record: object,
    name: str,
    flags: DataFlags | None = None,
    filename: str = DEFAULT_FILENAME,
    subdir: str = "",
    *,
    format: str | None = None,
) -> Path:
    return _store(format).save(record, name, flags, filename, subdir)


def delete_data(
    name: str,
    flags: DataFlags | None = None,
    filename: str = DEFAULT_FILENAME,
    subdir: str = "",
    *,
    format: str | None = None,
) -> list[Path]:
    return _store(format).delete(name, flags, filename, subdir)


__all__ = [
    "DEFAULT_FILENAME",
    "DataFlags",
    "delete_data",
    "get_data_paths",
    "load_data",
    "load_subdir_data",
    "save_data",
]
