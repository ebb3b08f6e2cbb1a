"""Hub service: registry lifecycle and the operations callers invoke."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

from .constants import DeviceKind
from .device import BaseDevice
from .errors import DeviceNotFoundError
from .registry import DeviceRegistry
from .session import DeviceSession
from .storage import FlatFileStore
from .utils import get_store_path, now_iso

logger = logging.getLogger(__name__)


def device_summary(device: BaseDevice) -> Dict[str, Any]:
    """Serialize a device's headline state for API responses."""
    return {
        "name": device.name,
        "kind": device.device_kind.value,
        "label": device.device_label,
        "is_on": device.is_on,
        "timer_running": device.timer_running,
        "timer_remaining": device.timer_remaining,
        "quick_view": device.quick_view(),
    }


class HubService:
    """Owns the device registry for one process.

    ``start`` loads the store; ``stop`` stops every timer task, waits for them
    and then saves the registry exactly once.
    """

    def __init__(self, store_path: Path | str | None = None) -> None:
        """Initialize the service.

        Args:
            store_path: Store file location; defaults to ``get_store_path()``
        """
        self._store = FlatFileStore(store_path if store_path is not None else get_store_path())
        self._registry = DeviceRegistry(self._store)
        self._started = False
        self._stopped = False
        self.started_at: str | None = None
        logger.info("Device store: %s", self._store.path)

    @property
    def registry(self) -> DeviceRegistry:
        return self._registry

    async def start(self) -> None:
        """Load persisted devices (once)."""
        if self._started:
            return
        self._registry.load()
        self._started = True
        self.started_at = now_iso()

    async def stop(self) -> None:
        """Stop all timers and persist the registry (once)."""
        if self._stopped:
            return
        self._stopped = True
        await self._registry.stop_all_timers()
        self._registry.save()

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def list_quick_views(self) -> list[str]:
        return self._registry.list_quick_views()

    def list_devices(self) -> list[Dict[str, Any]]:
        return [device_summary(device) for device in self._registry]

    def sort_by_name(self) -> None:
        self._registry.sort_by_name()
        logger.info("Devices sorted by name")

    def sort_by_type(self) -> None:
        self._registry.sort_by_type()
        logger.info("Devices sorted by type and name")

    def add_device(self, kind: DeviceKind | str, name: str) -> BaseDevice:
        return self._registry.add(kind, name)

    def remove_device(self, name: str) -> None:
        """Remove a device by name.

        Raises:
            DeviceNotFoundError: No device matches
        """
        if not self._registry.remove(name):
            raise DeviceNotFoundError(name)

    def one_click_action(self, name: str) -> str:
        return self._registry.one_click_action(name)

    def open_session(self, name: str) -> DeviceSession:
        """Open a control session for the named device.

        Raises:
            DeviceNotFoundError: No device matches
        """
        return DeviceSession(self._registry, self._registry.get(name))


__all__ = ["HubService", "device_summary"]
