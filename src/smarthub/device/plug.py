"""Smart plug with energy metering and an ON/OFF schedule."""

from __future__ import annotations

from typing import Any, ClassVar, Mapping, Sequence

from ..constants import DeviceKind
from .base_device import ChoiceResult, MenuOption
from .energy import Clock, EnergyMeter, EnergyReading
from .schedule import ScheduledDevice


class Plug(ScheduledDevice):
    """Switchable plug that accrues energy while on."""

    device_kind: ClassVar[DeviceKind] = DeviceKind.PLUG
    device_label: ClassVar[str] = "Smart Plug"
    menu_title: ClassVar[str] = "Smart Plug Controls"

    def __init__(self, name: str = "", *, clock: Clock | None = None, **kwargs: Any) -> None:
        super().__init__(name, **kwargs)
        self.meter = EnergyMeter(clock)

    @property
    def total_energy(self) -> float:
        return self.meter.total_energy

    @property
    def historic_usage(self) -> list[EnergyReading]:
        return self.meter.history

    def update_historic_data(self) -> EnergyReading | None:
        """Recompute energy used since the last update."""
        return self.meter.update(self.is_on)

    def quick_view(self) -> str:
        return (
            f"{self.name}: {self._power_label()} ({self.total_energy:.2f} kWh total usage)"
            f"{self._timer_suffix()}"
        )

    def one_click_action(self) -> str:
        if self.is_on:
            self.update_historic_data()
            self._set_power(False)
            return f"{self.name} turned OFF. Timer stopped."
        self._set_power(True)
        self.meter.reset()
        return f"{self.name} turned ON."

    def on_timer_expired(self) -> None:
        self.update_historic_data()
        super().on_timer_expired()

    def describe_options(self) -> list[MenuOption]:
        return [
            MenuOption(choice=1, label=f"Toggle On/Off (Currently {self._power_label()})"),
            MenuOption(choice=2, label="Set Sleep Timer"),
            MenuOption(choice=3, label=f"View Total Energy Usage ({self.total_energy:.2f} kWh)"),
            MenuOption(choice=4, label="View Historic Power Usage"),
            MenuOption(choice=5, label="Edit Device Name"),
            MenuOption(choice=6, label="View Schedule"),
            MenuOption(choice=7, label="Delete Schedule"),
            MenuOption(choice=8, label="Manage Schedule"),
            MenuOption(choice=0, label="Delete Device"),
            MenuOption(choice=9, label="Back to Main Menu"),
        ]

    def _handle_choice(self, choice: int, args: Mapping[str, Any]) -> ChoiceResult:
        if choice == 1:
            return ChoiceResult(message=self.one_click_action())
        if choice == 2:
            return self._timer_choice(args)
        if choice == 3:
            self.update_historic_data()
            return ChoiceResult(message=f"Total Energy Usage: {self.total_energy:.2f} kWh")
        if choice == 4:
            return ChoiceResult(
                message="Historic Power Usage:",
                lines=[reading.describe() for reading in self.historic_usage],
            )
        if choice == 5:
            return self._rename_choice(args)
        if choice == 6:
            return self._view_schedule_choice()
        if choice == 7:
            return self._delete_schedule_choice(args)
        if choice == 8:
            return self._add_schedule_choice(args)
        if choice == 0:
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
