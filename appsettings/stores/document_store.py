"""
RESPONSIBILITIES
- Orchestrate load/save/delete of one document and bulk loads of a subdir.
- Bind a category, a serialization format and a directory provider once per store.
PROCESS OVERVIEW
1. load -> first existing read candidate is decoded permissively; when none
   exists the default record is returned and, unless dont_write_nonexistent,
   saved first.
2. save -> encode (sparse with write_minimal) and safe_write() to the first
   write candidate.
3. load_subdir -> lazily decode every matching file below each standard dir.
4. delete -> remove every existing write candidate and prune its parent dir
   when it became empty.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Iterator, TypeVar

from appsettings.codecs import Codec, default_record, get_codec
from appsettings.config import StoreConfig, resolve_config
from appsettings.core.errors import DecodeError, NoWritableLocation
from appsettings.core.flags import DocFlags, coerce_flags
from appsettings.core.logger import get_logger
from appsettings.stores.path_resolver import WORKING_DIR, relative_path, resolve_paths
from appsettings.utils.atomic import safe_write
from appsettings.utils.paths import Category, DirectoryProvider, PlatformDirectoryProvider

T = TypeVar("T")

DEFAULT_FILENAMES: dict[Category, str] = {
    Category.CONFIG: "settings",
    Category.DATA: "data",
}


class DocumentStore:
    """Load, save and delete per-application documents for one category."""

    def __init__(
        self,
        category: Category | str,
        *,
        format: str | None = None,
        codec: Codec | None = None,
        provider: DirectoryProvider | None = None,
        default_filename: str | None = None,
        config: StoreConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.category = Category(category)
        self.config = config or resolve_config()
        if codec is None:
            codec = get_codec(format or self.config.format)
        self.codec = codec
        self.provider = provider or PlatformDirectoryProvider(self.config.home)
        self.default_filename = default_filename or DEFAULT_FILENAMES[self.category]
        base_logger = get_logger(self.config.log_dir, level=self.config.log_level)
        self.logger = logger or base_logger.getChild("store")

    # ------------------------------------------------------------------
    def get_paths(
        self,
        name: str,
        subdir: str = "",
        filename: str | None = None,
        *,
        writable: bool = False,
        flags: DocFlags | None = None,
    ) -> Iterator[Path]:
        """Return the lazy candidate path sequence for a document."""

        return resolve_paths(
            self.provider,
            self.codec,
            self.category,
            name,
            subdir,
            filename or self.default_filename,
            writable=writable,
            flags=flags,
        )

    def load(
        self,
        record_type: type[T],
        name: str,
        flags: DocFlags | None = None,
        filename: str | None = None,
        subdir: str = "",
    ) -> T:
        """Load the first document found, falling back to the default record.

        Raises:
            DecodeError: If the found file does not decode to ``record_type``.
        """

        flags = coerce_flags(flags)
        filename = filename or self.default_filename
        found = next(self.get_paths(name, subdir, filename, writable=False, flags=flags), None)
        if found is not None:
            self.logger.debug("store.load path=%s", found)
            return self._read(found, record_type)

        default = default_record(record_type)
        if flags.dont_write_nonexistent:
            self.logger.info("store.load_default name=%s filename=%s persisted=False", name, filename)
            return default
        self.logger.info("store.load_default name=%s filename=%s persisted=True", name, filename)
        self.save(default, name, flags, filename, subdir)
        return default

    def load_subdir(self, record_type: type[T], name: str, subdir: str) -> Iterator[T]:
        """Lazily decode every document of the active format below ``name/subdir``.

        Decoding happens while the iterator is consumed; a DecodeError stops
        the iteration at the offending file.
        """

        rel_path = relative_path(name, subdir)
        for base in self.provider.standard_dirs(self.category, rel_path):
            for extension in self.codec.extensions:
                if not base.exists():
                    continue
                for path in _walk_depth_first(base, extension):
                    self.logger.debug("store.load_subdir path=%s", path)
                    yield self._read(path, record_type)

    def save(
        self,
        record: object,
        name: str,
        flags: DocFlags | None = None,
        filename: str | None = None,
        subdir: str = "",
    ) -> Path:
        """Write ``record`` to the first write candidate and return that path.

        Raises:
            NoWritableLocation: If no write target could be resolved.
            OSError: If the write fails; the previous file is left intact.
        """

        flags = coerce_flags(flags)
        filename = filename or self.default_filename
        target = next(self.get_paths(name, subdir, filename, writable=True, flags=flags), None)
        if target is None:
            raise NoWritableLocation(f"No writable location for {name}/{subdir}/{filename}")
        text = self.codec.encode(record, omit_defaults=flags.write_minimal)
        self.logger.info("store.save path=%s minimal=%s", target, flags.write_minimal)
        return safe_write(target, text)

    def delete(
        self,
        name: str,
        flags: DocFlags | None = None,
        filename: str | None = None,
        subdir: str = "",
    ) -> list[Path]:
        """Remove the document at every write candidate and prune emptied parents.

        Targets are resolved exactly like save(); the writable directory is not
        created when missing. Returns the removed files.
        """

        flags = coerce_flags(flags)
        filename = filename or self.default_filename
        removed: list[Path] = []
        candidates = resolve_paths(
            self.provider,
            self.codec,
            self.category,
            name,
            subdir,
            filename,
            writable=True,
            flags=flags,
            create_missing=False,
        )
        for path in candidates:
            if not path.is_file():
                continue
            self.logger.info("store.delete path=%s", path)
            path.unlink()
            removed.append(path)
            parent = path.parent
            if _is_working_dir(parent):
                continue
            if not any(parent.iterdir()):
                self.logger.info("store.prune_dir path=%s", parent)
                parent.rmdir()
        return removed

    # ------------------------------------------------------------------
    def _read(self, path: Path, record_type: type[T]) -> T:
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise DecodeError(f"{path}: not valid UTF-8 text: {exc}", path=path) from exc
        try:
            return self.codec.decode(text, record_type, permissive=True)
        except DecodeError as exc:
            raise DecodeError(f"{path}: {exc}", path=path) from exc


def shared_store(category: Category | str, format: str | None = None) -> DocumentStore:
    """Return the store for ``category`` under the active configuration.

    Stores are reused while the resolved configuration stays the same, so the
    environment is read once per call but the logger is configured only when
    a new store is built.
    """

    fmt = format.lower() if format else None
    return _cached_store(Category(category), fmt, resolve_config())


@lru_cache(maxsize=32)
def _cached_store(category: Category, format: str | None, config: StoreConfig) -> DocumentStore:
    return DocumentStore(category, format=format, config=config)


def _walk_depth_first(base: Path, extension: str) -> Iterator[Path]:
    for root, _dirs, files in os.walk(base, topdown=False):
        for entry in files:
            if entry.endswith(extension):
                yield Path(root) / entry


def _is_working_dir(path: Path) -> bool:
    if path == WORKING_DIR:
        return True
    return path.resolve() == Path.cwd().resolve()


__all__ = ["DEFAULT_FILENAMES", "DocumentStore", "shared_store"]
