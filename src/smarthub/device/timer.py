"""Countdown sleep timer shared by every device kind.

Each device owns one ``DeviceTimer``. A running timer is backed by a single
asyncio task that decrements the remaining seconds once per tick and turns the
device off when it reaches zero. Starting a new countdown cancels the task of
the previous one, so a device never has two tasks decrementing its counter.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Optional

from ..constants import TIMER_TICK_SECONDS
from ..errors import DeviceOffError, ErrorCode, HubError, OutOfRangeError
from ..utils.env import get_env_float

if TYPE_CHECKING:
    from .base_device import BaseDevice

TIMER_TICK_ENV = "SMART_HUB_TIMER_TICK"

logger = logging.getLogger(__name__)


class DeviceTimer:
    """Idle -> Running -> Expired | stopped externally | stopped by power off."""

    def __init__(self, owner: "BaseDevice", tick: Optional[float] = None) -> None:
        self._owner = owner
        self.tick = tick if tick is not None else get_env_float(TIMER_TICK_ENV, TIMER_TICK_SECONDS)
        self.remaining = 0
        self.running = False
        self._task: asyncio.Task | None = None

    def start(self, seconds: int) -> None:
        """Start (or overwrite) the countdown.

        Raises:
            DeviceOffError: The owning device is off
            OutOfRangeError: ``seconds`` is not positive
            HubError: No event loop is running in this thread
        """
        if not self._owner.is_on:
            raise DeviceOffError(self._owner.name, "set a timer")
        if seconds <= 0:
            raise OutOfRangeError(
                "Timer duration must be a positive number of seconds",
                details={"seconds": seconds},
            )

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError as exc:
            raise HubError(
                ErrorCode.TIMER_UNAVAILABLE,
                "Timers need a running event loop",
                details={"name": self._owner.name},
                cause=exc,
            ) from exc

        if self._task is not None and not self._task.done():
            logger.debug("%s: replacing running timer (%ss left)", self._owner.name, self.remaining)
            self._task.cancel()

        self.remaining = seconds
        self.running = True
        self._task = loop.create_task(
            self._countdown(), name=f"timer:{self._owner.name}"
        )
        logger.info("Timer started for %s: %s seconds", self._owner.name, seconds)

    def stop(self) -> None:
        """Mark the timer stopped; the task notices on its next tick."""
        self.running = False

    async def shutdown(self) -> None:
        """Stop the timer and wait for its task to finish."""
        self.running = False
        task, self._task = self._task, None
        if task is None or task.done():
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

    @property
    def pending(self) -> bool:
        """True while a countdown task exists that has not finished."""
        return self._task is not None and not self._task.done()

    async def _countdown(self) -> None:
        owner = self._owner
        while self.remaining > 0:
            await asyncio.sleep(self.tick)
            if not self.running:
                logger.debug("%s: timer stopped", owner.name)
                return
            if not owner.is_on:
                self.running = False
                logger.info("Timer for %s stopped as the device was turned OFF", owner.name)
                return
            self.remaining -= 1
            logger.debug("%s: %s seconds remaining", owner.name, self.remaining)

        if self.running and owner.is_on:
            self.running = False
            logger.info("Timer for %s has finished. Turning off the device.", owner.name)
            owner.on_timer_expired()
