"""Heating controls: thermostats and radiator valves.

Both kinds carry only a power flag and a schedule; they differ in their
record tag and labels.
"""

from __future__ import annotations

from typing import Any, ClassVar, Mapping

from ..constants import DeviceKind
from .base_device import ChoiceResult, MenuOption
from .schedule import ScheduledDevice


class HeatingDevice(ScheduledDevice):
    """Shared behaviour of schedule-driven heating controls."""

    def quick_view(self) -> str:
        return f"{self.name}: {'Heating On' if self.is_on else 'Heating Off'}"

    def one_click_action(self) -> str:
        self._set_power(not self.is_on)
        return f"{self.name} is now {'ON' if self.is_on else 'OFF'}."

    def describe_options(self) -> list[MenuOption]:
        return [
            MenuOption(choice=1, label=f"Toggle On/Off (Currently {self._power_label()})"),
            MenuOption(choice=2, label="Manage Schedule"),
            MenuOption(choice=3, label="View Schedule"),
            MenuOption(choice=4, label="Delete Schedule"),
            MenuOption(choice=5, label="Edit Device Name"),
            MenuOption(choice=6, label="Delete Device"),
            MenuOption(choice=9, label="Back to Main Menu"),
        ]

    def _handle_choice(self, choice: int, args: Mapping[str, Any]) -> ChoiceResult:
        if choice == 1:
            return ChoiceResult(message=self.one_click_action())
        if choice == 2:
            return self._add_schedule_choice(args)
        if choice == 3:
            return self._view_schedule_choice()
        if choice == 4:
            return self._delete_schedule_choice(args)
        if choice == 5:
            return self._rename_choice(args)
        if choice == 6:
            return self._delete_choice(args)
        return self._back_choice()


class Thermostat(HeatingDevice):
    """Whole-house thermostat."""

    device_kind: ClassVar[DeviceKind] = DeviceKind.THERMOSTAT
    device_label: ClassVar[str] = "Thermostat"
    menu_title: ClassVar[str] = "Thermostat Controls"


class RadiatorValve(HeatingDevice):
    """Per-room radiator valve."""

    device_kind: ClassVar[DeviceKind] = DeviceKind.RADIATOR
    device_label: ClassVar[str] = "Radiator Valve"
    menu_title: ClassVar[str] = "Heating Controls"
