"""Interactive control session for a single device."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from .device import BaseDevice, ChoiceResult, MenuOption, SessionAction
from .registry import DeviceRegistry

logger = logging.getLogger(__name__)


class DeviceSession:
    """Drives one device's control menu until the caller leaves it.

    The session borrows the device from the registry. Going back, renaming
    the device or deleting it closes the session; deleting also removes the
    device from the registry.
    """

    def __init__(self, registry: DeviceRegistry, device: BaseDevice) -> None:
        self._registry = registry
        self._device = device
        self.closed = False

    @property
    def device(self) -> BaseDevice:
        return self._device

    @property
    def title(self) -> str:
        return f"{self._device.menu_title} for {self._device.name}"

    def describe_options(self) -> list[MenuOption]:
        return self._device.describe_options()

    def apply_choice(self, choice: int, args: Mapping[str, Any] | None = None) -> ChoiceResult:
        """Apply a menu choice to the device and handle session-level follow-ups."""
        if self.closed:
            return ChoiceResult(ok=False, message="Session is closed.")

        result = self._device.apply_choice(choice, args)
        if result.action is SessionAction.DELETE:
            self._registry.discard(self._device)
            self.closed = True
        elif result.action in (SessionAction.RENAME, SessionAction.BACK):
            self.closed = True

        if self.closed:
            logger.debug("Session for %s closed (%s)", self._device.name, result.action.value)
        return result


__all__ = ["DeviceSession"]
