"""Simulated temperature and humidity sensor."""

from __future__ import annotations

import random
from typing import Any, ClassVar, Mapping, Sequence

from ..constants import SENSOR_HUMIDITY_RANGE, SENSOR_TEMPERATURE_RANGE, DeviceKind
from .base_device import BaseDevice, ChoiceResult, MenuOption
from .energy import Clock, EnergyMeter, EnergyReading, SensorReading


class TempHumiditySensor(BaseDevice):
    """Sensor that logs simulated readings and accrues energy while on."""

    device_kind: ClassVar[DeviceKind] = DeviceKind.TEMPHUMIDITY
    device_label: ClassVar[str] = "TempHumidity Sensor"
    menu_title: ClassVar[str] = "Temperature & Humidity Sensor Controls"

    def __init__(
        self,
        name: str = "",
        *,
        clock: Clock | None = None,
        rng: random.Random | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, **kwargs)
        self.meter = EnergyMeter(clock)
        self._rng = rng or random.Random()
        self.historic_data: list[SensorReading] = []

    @property
    def total_energy(self) -> float:
        return self.meter.total_energy

    @property
    def historic_usage(self) -> list[EnergyReading]:
        return self.meter.history

    def update_energy_usage(self) -> EnergyReading | None:
        return self.meter.update(self.is_on)

    def update_sensor_readings(self) -> SensorReading:
        """Draw a new simulated reading, log it and recompute energy usage."""
        reading = SensorReading(
            temperature=self._rng.uniform(*SENSOR_TEMPERATURE_RANGE),
            humidity=self._rng.uniform(*SENSOR_HUMIDITY_RANGE),
            timestamp=self.meter.clock(),
        )
        self.historic_data.append(reading)
        self.update_energy_usage()
        return reading

    def quick_view(self) -> str:
        return f"{self.name}: {self._power_label()} | Total Energy: {self.total_energy:.2f} kWh"

    def one_click_action(self) -> str:
        if self.is_on:
            self.update_energy_usage()
            self._set_power(False)
        else:
            self._set_power(True)
            self.meter.reset()
        return f"{self.name} is now {'ON' if self.is_on else 'OFF'}."

    def on_timer_expired(self) -> None:
        self.update_energy_usage()
        super().on_timer_expired()

    def describe_options(self) -> list[MenuOption]:
        return [
            MenuOption(choice=1, label=f"Toggle On/Off (Currently {self._power_label()})"),
            MenuOption(choice=2, label="Update Sensor Readings"),
            MenuOption(choice=3, label="View Historic Temperature/Humidity Data"),
            MenuOption(choice=4, label="View Total Energy Usage"),
            MenuOption(choice=5, label="Edit Device Name"),
            MenuOption(choice=6, label="Delete Device"),
            MenuOption(choice=9, label="Back to Main Menu"),
        ]

    def _handle_choice(self, choice: int, args: Mapping[str, Any]) -> ChoiceResult:
        if choice == 1:
            return ChoiceResult(message=self.one_click_action())
        if choice == 2:
            reading = self.update_sensor_readings()
            return ChoiceResult(
                message="Updated Sensor Reading:",
                lines=[
                    f"Temperature: {reading.temperature:.1f}C",
                    f"Humidity: {reading.humidity:.1f}%",
                ],
            )
        if choice == 3:
            if not self.historic_data:
                return ChoiceResult(message="No sensor readings recorded yet.")
            return ChoiceResult(
                message="Historic Sensor Readings:",
                lines=[reading.describe() for reading in self.historic_data],
            )
        if choice == 4:
            self.update_energy_usage()
            message = f"Total Energy Usage: {self.total_energy:.2f} kWh"
            if not self.historic_usage:
                return ChoiceResult(message=message, lines=["No energy usage recorded yet."])
            return ChoiceResult(
                message=message,
                lines=[reading.describe() for reading in self.historic_usage],
            )
        if choice == 5:
            return self._rename_choice(args)
        if choice == 6:
            return self._delete_choice(args)
        return self._back_choice()

    def _encode_extra(self) -> Sequence[Any]:
        return (repr(self.meter.total_energy),)

    def _decode_extra(self, fields: Sequence[str]) -> None:
        if fields:
            try:
                self.meter.total_energy = float(fields[0])
            except ValueError:
                self._logger.debug("%s: ignoring energy field %r", self.name, fields[0])
