from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from appsettings.config import FORMAT_ENV, HOME_ENV, LOG_DIR_ENV, LOG_LEVEL_ENV, StoreConfig
from appsettings.core.logger import reset_logger
from appsettings.utils.paths import Category, PlatformDirectoryProvider


@dataclass
class Sandbox:
    """Isolated home (standard dirs) plus working directory for one test."""

    home: Path
    work: Path
    provider: PlatformDirectoryProvider
    config: StoreConfig

    def config_dir(self, *parts: str) -> Path:
        return self.home / Category.CONFIG.value / Path(*parts)

    def data_dir(self, *parts: str) -> Path:
        return self.home / Category.DATA.value / Path(*parts)


@pytest.fixture(autouse=True)
def _isolated_logging():
    reset_logger()
    yield
    reset_logger()


@pytest.fixture()
def sandbox(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Sandbox:
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.chdir(work)
    monkeypatch.setenv(HOME_ENV, str(home))
    for key in (FORMAT_ENV, LOG_DIR_ENV, LOG_LEVEL_ENV):
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    return Sandbox(
        home=home,
        work=work,
        provider=PlatformDirectoryProvider(home),
        config=StoreConfig(home=home),
    )
