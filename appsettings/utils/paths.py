"""
RESPONSIBILITIES
- Name the standard directory categories (config vs data).
- Enumerate the platform's standard directories for a category via platformdirs.
- Create the per-user writable directory on demand.
PROCESS OVERVIEW
1. standard_dirs() -> system-wide dirs followed by the user dir, each joined with rel_path.
2. writable_dir() -> the user dir joined with rel_path, created when requested.
3. A configured home redirects both to <home>/<category>/<rel_path>.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Protocol

import platformdirs

from appsettings.core.logger import get_child_logger


class Category(str, Enum):
    """Standard-directory class used for lookup."""

    CONFIG = "config"
    DATA = "data"


class DirectoryProvider(Protocol):
    """Source of candidate base directories for a category."""

    def standard_dirs(self, category: Category, rel_path: str | os.PathLike[str]) -> list[Path]:
        """Return read-mode candidates in search order; they need not exist."""

    def writable_dir(
        self, category: Category, rel_path: str | os.PathLike[str], create: bool = True
    ) -> Path:
        """Return the single write target directory, creating it when requested."""


class PlatformDirectoryProvider:
    """Directory provider following the host platform's conventions."""

    def __init__(self, home: str | os.PathLike[str] | None = None) -> None:
        self.home = Path(home).expanduser() if home is not None else None
        self.logger = get_child_logger("paths")

    def standard_dirs(self, category: Category, rel_path: str | os.PathLike[str]) -> list[Path]:
        category = Category(category)
        if self.home is not None:
            return [self.home / category.value / rel_path]
        if category is Category.CONFIG:
            site = platformdirs.site_config_dir(multipath=True)
            user = platformdirs.user_config_dir()
        else:
            site = platformdirs.site_data_dir(multipath=True)
            user = platformdirs.user_data_dir()
        bases = [entry for entry in site.split(os.pathsep) if entry]
        bases.append(user)
        resolved: list[Path] = []
        for base in bases:
            candidate = Path(base) / rel_path
            if candidate not in resolved:
                resolved.append(candidate)
        self.logger.debug("paths.standard_dirs category=%s dirs=%s", category.value, resolved)
        return resolved

    def writable_dir(
        self, category: Category, rel_path: str | os.PathLike[str], create: bool = True
    ) -> Path:
        category = Category(category)
        if self.home is not None:
            base = self.home / category.value
        elif category is Category.CONFIG:
            base = Path(platformdirs.user_config_dir())
        else:
            base = Path(platformdirs.user_data_dir())
        target = base / rel_path
        if create and not target.exists():
            self.logger.info("paths.create_writable_dir path=%s", target)
            target.mkdir(parents=True, exist_ok=True)
        return target


__all__ = ["Category", "DirectoryProvider", "PlatformDirectoryProvider"]
