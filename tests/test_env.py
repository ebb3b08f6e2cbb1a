"""Tests for environment-driven configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from smarthub.device import Light
from smarthub.utils import (
    get_config_dir,
    get_env_bool,
    get_env_float,
    get_env_int,
    get_store_path,
)


def test_config_dir_override_is_created(isolated_config_dir: Path) -> None:
    assert get_config_dir() == isolated_config_dir
    assert isolated_config_dir.is_dir()


def test_store_path_defaults_to_config_dir(isolated_config_dir: Path) -> None:
    assert get_store_path() == isolated_config_dir / "smart_home.txt"


def test_store_path_override(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    target = tmp_path / "elsewhere" / "hub.txt"
    monkeypatch.setenv("SMART_HUB_STORE_PATH", str(target))
    assert get_store_path() == target


def test_env_float_and_int(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SMART_HUB_TEST_FLOAT", "0.25")
    monkeypatch.setenv("SMART_HUB_TEST_INT", "8080")
    assert get_env_float("SMART_HUB_TEST_FLOAT", 1.0) == 0.25
    assert get_env_int("SMART_HUB_TEST_INT", 8000) == 8080

    monkeypatch.setenv("SMART_HUB_TEST_FLOAT", "fast")
    monkeypatch.setenv("SMART_HUB_TEST_INT", "eighty")
    assert get_env_float("SMART_HUB_TEST_FLOAT", 1.0) == 1.0
    assert get_env_int("SMART_HUB_TEST_INT", 8000) == 8000


@pytest.mark.parametrize(
    "raw, expected",
    [("1", True), ("yes", True), ("off", False), ("", False), ("2", True), ("maybe", False)],
)
def test_env_bool(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("SMART_HUB_TEST_BOOL", raw)
    assert get_env_bool("SMART_HUB_TEST_BOOL", False) is expected


def test_timer_tick_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SMART_HUB_TIMER_TICK", "0.05")
    assert Light("Lamp").timer.tick == 0.05
    monkeypatch.delenv("SMART_HUB_TIMER_TICK")
    assert Light("Lamp").timer.tick == 1.0
