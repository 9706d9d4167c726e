"""End-to-end checks of the settings/data functions against a sandboxed home."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import pytest

import appsettings
from appsettings import (
    DataFlags,
    DocFlags,
    delete_data,
    delete_settings,
    get_data_paths,
    get_settings_paths,
    load_data,
    load_settings,
    load_subdir_settings,
    save_data,
    save_settings,
)
from appsettings.config import FORMAT_ENV


@dataclass
class Settings:
    blah: bool = False
    text: str = ""
    texts: list[str] = field(default_factory=list)


@dataclass
class Counter:
    a: int = 0


@dataclass
class State:
    launches: int = 0
    recent: list[str] = field(default_factory=list)


def test_settings_paths_portable_and_standard(sandbox) -> None:  # noqa: ANN001
    portable = next(get_settings_paths("test", "", "settings", True, DocFlags(write_portable=True)))
    assert portable == Path(".") / "settings.yaml"

    standard = next(get_settings_paths("test", "", "settings", True, DocFlags()))
    assert standard != Path(".") / "settings.yaml"
    assert standard == sandbox.config_dir("test") / "settings.yaml"

    assert list(get_settings_paths("test", "", "settings", False, DocFlags())) == []


def test_data_paths_portable_and_standard(sandbox) -> None:  # noqa: ANN001
    assert next(get_data_paths("test", "", "data", True, DataFlags(write_portable=True))) == Path("data.yaml")
    assert next(get_data_paths("test", "", "data", True)) == sandbox.data_dir("test") / "data.yaml"
    assert list(get_data_paths("test", "", "data", False)) == []


def test_settings_round_trip(sandbox) -> None:  # noqa: ANN001
    settings = load_settings(Settings, "testapp", DocFlags(), "settings", "subdir")
    settings.texts = ["a", "b", "c"]
    save_settings(settings, "testapp", DocFlags(), "settings", "subdir")

    reloaded = load_settings(Settings, "testapp", DocFlags(), "settings", "subdir")
    assert reloaded == settings
    assert reloaded.texts == ["a", "b", "c"]


def test_settings_minimal_write(sandbox) -> None:  # noqa: ANN001
    save_settings(Settings(True, "some words", ["c", "b", "a"]), "testapp", subdir="subdir")
    assert load_settings(Settings, "testapp", subdir="subdir") == Settings(True, "some words", ["c", "b", "a"])

    save_settings(Settings(), "testapp", DocFlags(write_minimal=True), subdir="subdir")
    assert load_settings(Settings, "testapp", subdir="subdir") == Settings()


def test_subdir_settings_contain_both_records(sandbox) -> None:  # noqa: ANN001
    save_settings(Counter(1), "testapp", DocFlags(), "1", "mysubdir")
    save_settings(Counter(2), "testapp", DocFlags(), "2", "mysubdir")

    loaded = list(load_subdir_settings(Counter, "testapp", "mysubdir"))
    assert Counter(1) in loaded
    assert Counter(2) in loaded


def test_delete_settings_cleans_up(sandbox) -> None:  # noqa: ANN001
    save_settings(Settings(), "testapp", subdir="subdir")
    save_settings(Settings(), "testapp")

    delete_settings("testapp", DocFlags(), "settings", "subdir")
    delete_settings("testapp", DocFlags(), "settings", "mysubdir")
    delete_settings("testapp", DocFlags(), "settings", "")

    assert not sandbox.config_dir("testapp").exists()


def test_data_store_round_trip(sandbox) -> None:  # noqa: ANN001
    state = load_data(State, "testapp")
    assert state == State()
    assert (sandbox.data_dir("testapp") / "data.yaml").is_file()

    state.launches += 1
    state.recent.append("report.xlsx")
    save_data(state, "testapp")
    assert load_data(State, "testapp") == State(launches=1, recent=["report.xlsx"])

    delete_data("testapp")
    assert not sandbox.data_dir("testapp").exists()


def test_data_without_persisting_default(sandbox) -> None:  # noqa: ANN001
    assert load_data(State, "testapp", DataFlags(dont_write_nonexistent=True)) == State()
    assert not sandbox.data_dir("testapp").exists()


def test_explicit_json_format(sandbox) -> None:  # noqa: ANN001
    path = save_settings(Counter(5), "testapp", format="json")
    assert path == sandbox.config_dir("testapp") / "settings.json"
    assert load_settings(Counter, "testapp", format="json") == Counter(5)
    # the YAML search does not see the JSON document
    assert list(get_settings_paths("testapp")) == []


def test_format_from_environment(sandbox, monkeypatch: pytest.MonkeyPatch) -> None:  # noqa: ANN001
    monkeypatch.setenv(FORMAT_ENV, "json")
    path = save_settings(Counter(9), "testapp")
    assert path.suffix == ".json"
    assert load_settings(Counter, "testapp") == Counter(9)


def test_unknown_format_rejected(sandbox) -> None:  # noqa: ANN001
    with pytest.raises(appsettings.UnknownFormatError):
        save_settings(Counter(), "testapp", format="ini")


def test_decode_error_surfaces(sandbox) -> None:  # noqa: ANN001
    folder = sandbox.config_dir("testapp")
    folder.mkdir(parents=True)
    (folder / "settings.yaml").write_text("a: [broken\n", encoding="utf-8")
    with pytest.raises(appsettings.DecodeError):
        load_settings(Counter, "testapp")


def test_repeated_calls_share_one_store(sandbox) -> None:  # noqa: ANN001
    from appsettings import data, settings

    assert settings._store(None) is settings._store(None)
    assert settings._store("yaml") is not settings._store(None)
    assert data._store(None) is not settings._store(None)
    assert settings._store(None).provider.home == sandbox.home
