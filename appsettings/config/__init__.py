"""Runtime configuration for appsettings.

Settings are read from the process environment, optionally pre-populated
from a ``.env`` file found in the working directory. Values already present
in the environment always win over the ``.env`` file.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from dotenv import find_dotenv, load_dotenv

from appsettings.codecs import available_formats
from appsettings.core.errors import ConfigError, UnknownFormatError


FORMAT_ENV = "APPSETTINGS_FORMAT"
HOME_ENV = "APPSETTINGS_HOME"
LOG_DIR_ENV = "APPSETTINGS_LOG_DIR"
LOG_LEVEL_ENV = "APPSETTINGS_LOG_LEVEL"

DEFAULT_FORMAT = "yaml"
_LOADED_DOTENV: set[str] = set()


@dataclass(frozen=True, slots=True)
class StoreConfig:
    """Resolved configuration for document stores."""

    format: str = DEFAULT_FORMAT
    home: Path | None = None
    log_dir: Path | None = None
    log_level: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "StoreConfig":
        """Create a configuration instance from a mapping of environment-style keys."""

        if not data:
            return cls()
        fmt = _clean(data.get(FORMAT_ENV)) or DEFAULT_FORMAT
        fmt = fmt.lower()
        if fmt not in available_formats():
            raise UnknownFormatError(
                f"{FORMAT_ENV} must be one of {', '.join(available_formats())}, got {fmt!r}"
            )
        level = _clean(data.get(LOG_LEVEL_ENV)).upper() or None
        if level is not None and not isinstance(logging.getLevelName(level), int):
            raise ConfigError(f"Unknown log level in {LOG_LEVEL_ENV}: {level}")
        return cls(
            format=fmt,
            home=_optional_path(data.get(HOME_ENV)),
            log_dir=_optional_path(data.get(LOG_DIR_ENV)),
            log_level=level,
        )


def resolve_config(env: Mapping[str, Any] | None = None) -> StoreConfig:
    """Return the active configuration.

    Args:
        env: Explicit mapping to read from. When omitted, a ``.env`` file in
            the working directory is loaded (without overriding) and
            ``os.environ`` is used.

    Raises:
        ConfigError: If a value is invalid.
    """

    if env is None:
        dotenv_path = find_dotenv(usecwd=True)
        if dotenv_path and dotenv_path not in _LOADED_DOTENV:
            load_dotenv(dotenv_path, override=False)
            _LOADED_DOTENV.add(dotenv_path)
        env = os.environ
    return StoreConfig.from_mapping(env)


def _clean(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _optional_path(value: Any) -> Path | None:
    text = _clean(value)
    if not text:
        return None
    return Path(os.path.expandvars(text)).expanduser()


__all__ = [
    "DEFAULT_FORMAT",
    "FORMAT_ENV",
    "HOME_ENV",
    "LOG_DIR_ENV",
    "LOG_LEVEL_ENV",
    "StoreConfig",
    "resolve_config",
]
