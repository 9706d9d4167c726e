"""
RESPONSIBILITIES
- Build the ordered candidate file paths for one document.
- Apply the read/write search policy, including the portable-write flag.
PROCESS OVERVIEW
1. rel_path = name/subdir.
2. Read mode: every standard dir for the category. Write mode: the writable
   dir, or nothing when writing portably.
3. The working directory is appended as the universal fallback.
4. Each base dir is paired with every codec extension, in preference order.
5. Read mode keeps only existing files; write mode yields everything and the
   first entry is the write target.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from appsettings.codecs import Codec
from appsettings.core.flags import DocFlags, coerce_flags
from appsettings.core.logger import get_child_logger
from appsettings.utils.paths import Category, DirectoryProvider

WORKING_DIR = Path(".")


def relative_path(name: str, subdir: str = "") -> Path:
    """Return the namespace path ``name/subdir`` (``name`` alone for an empty subdir)."""

    return Path(name) / subdir if subdir else Path(name)


def base_dirs(
    provider: DirectoryProvider,
    category: Category,
    name: str,
    subdir: str,
    *,
    writable: bool,
    flags: DocFlags | None = None,
    create_missing: bool = True,
) -> list[Path]:
    """Return the base directories searched for a document, working directory last."""

    flags = coerce_flags(flags)
    rel_path = relative_path(name, subdir)
    if writable:
        if flags.write_portable:
            bases: list[Path] = []
        else:
            bases = [provider.writable_dir(category, rel_path, create_missing)]
    else:
        bases = list(provider.standard_dirs(category, rel_path))
    bases.append(WORKING_DIR)
    return bases


def resolve_paths(
    provider: DirectoryProvider,
    codec: Codec,
    category: Category,
    name: str,
    subdir: str,
    filename: str,
    *,
    writable: bool,
    flags: DocFlags | None = None,
    create_missing: bool = True,
) -> Iterator[Path]:
    """Lazily yield candidate paths for ``filename`` in search order.

    Args:
        provider: Source of standard and writable directories.
        codec: Active format; its extensions are tried in order.
        category: Config or data storage.
        name: Application namespace directory.
        subdir: Nested namespace, possibly empty.
        filename: Document name without extension.
        writable: Yield write targets (unfiltered) instead of existing files.
        flags: Behaviour flags; only ``write_portable`` matters here.
        create_missing: Create the writable directory when it is missing.
    """

    logger = get_child_logger("resolver")
    bases = base_dirs(
        provider,
        category,
        name,
        subdir,
        writable=writable,
        flags=flags,
        create_missing=create_missing,
    )
    logger.debug(
        "resolver.search category=%s writable=%s bases=%s extensions=%s",
        Category(category).value,
        writable,
        bases,
        codec.extensions,
    )
    for base in bases:
        for extension in codec.extensions:
            candidate = base / f"{filename}{extension}"
            if writable or candidate.exists():
                yield candidate


__all__ = ["WORKING_DIR", "base_dirs", "relative_path", "resolve_paths"]
