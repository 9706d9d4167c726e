"""Crash-safe text writes.

The new content goes to a sibling ``.tmp`` file first and is moved over the
destination only after the write completed, so the destination holds either
its previous content or the full new content.
"""

from __future__ import annotations

import os
from pathlib import Path

from appsettings.core.logger import get_child_logger

TMP_SUFFIX = ".tmp"


def tmp_path_for(path: Path) -> Path:
    return path.with_suffix(TMP_SUFFIX)


def safe_write(path: str | os.PathLike[str], content: str) -> Path:
    """Write ``content`` to ``path`` atomically and return the destination.

    Raises:
        OSError: If writing or committing fails. The destination is left
            untouched and the temporary file is removed.
    """

    target = Path(path)
    tmp = tmp_path_for(target)
    logger = get_child_logger("atomic")
    try:
        tmp.write_text(content, encoding="utf-8")
        os.replace(tmp, target)
    finally:
        if tmp.exists():
            logger.debug("atomic.cleanup tmp=%s", tmp)
            tmp.unlink()
    return target


__all__ = ["TMP_SUFFIX", "safe_write", "tmp_path_for"]
