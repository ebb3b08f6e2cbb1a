"""Energy accrual accounting for plugs and sensors."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable

from ..constants import ENERGY_PER_SECOND
from ..utils.time import format_timestamp

Clock = Callable[[], float]


@dataclass(slots=True)
class EnergyReading:
    """Energy added by one accounting recomputation."""

    energy_used: float
    timestamp: float

    def describe(self) -> str:
        return f"Energy Used: {self.energy_used:.2f} kWh, Timestamp: {format_timestamp(self.timestamp)}"


@dataclass(slots=True)
class SensorReading:
    """A simulated temperature/humidity sample."""

    temperature: float
    humidity: float
    timestamp: float

    def describe(self) -> str:
        return (
            f"Temperature: {self.temperature:.1f}C, Humidity: {self.humidity:.1f}%, "
            f"Timestamp: {format_timestamp(self.timestamp)}"
        )


class EnergyMeter:
    """Accumulates energy while the owning device is on.

    Energy is only ever added, at ``ENERGY_PER_SECOND`` per elapsed second
    between recomputations. The clock is injectable so tests can drive time.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self.clock = clock or time.time
        self.total_energy = 0.0
        self.last_update_time = self.clock()
        self.history: list[EnergyReading] = []

    def reset(self) -> None:
        """Restart accounting from now, discarding the interval since the last update."""
        self.last_update_time = self.clock()

    def update(self, is_on: bool) -> EnergyReading | None:
        """Recompute accrued energy and log one reading if any time elapsed while on."""
        now = self.clock()
        elapsed = now - self.last_update_time
        if not is_on or elapsed <= 0:
            return None

        energy_used = ENERGY_PER_SECOND * elapsed
        self.total_energy += energy_used
        reading = EnergyReading(energy_used=energy_used, timestamp=now)
        self.history.append(reading)
        self.last_update_time = now
        return reading


__all__ = ["Clock", "EnergyMeter", "EnergyReading", "SensorReading"]
