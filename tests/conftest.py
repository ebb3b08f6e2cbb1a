"""Test configuration ensuring the src package is importable."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


class FakeClock:
    """Manually advanced clock for energy accounting tests."""

    def __init__(self, start: float = 1_700_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep every test away from the real ~/.smart-hub directory."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("SMART_HUB_CONFIG_DIR", str(config_dir))
    monkeypatch.delenv("SMART_HUB_STORE_PATH", raising=False)
    monkeypatch.delenv("SMART_HUB_TIMER_TICK", raising=False)
    return config_dir


@pytest.fixture()
def store_path(tmp_path: Path) -> Path:
    return tmp_path / "smart_home.txt"


@pytest.fixture()
def store(store_path: Path):
    from smarthub.storage import FlatFileStore

    return FlatFileStore(store_path)


@pytest.fixture()
def registry(store):
    from smarthub.registry import DeviceRegistry

    return DeviceRegistry(store)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()
