"""Dimmable smart light."""

from __future__ import annotations

from typing import Any, ClassVar, Mapping, Sequence

from ..constants import DEFAULT_BRIGHTNESS, DeviceKind
from .base_device import BaseDevice, ChoiceResult, MenuOption, clamp_level, int_arg


class Light(BaseDevice):
    """Light with a 0-100 brightness level and a sleep timer."""

    device_kind: ClassVar[DeviceKind] = DeviceKind.LIGHT
    device_label: ClassVar[str] = "Smart Light"
    menu_title: ClassVar[str] = "Light Controls"

    def __init__(self, name: str = "", **kwargs: Any) -> None:
        super().__init__(name, **kwargs)
        self._brightness = DEFAULT_BRIGHTNESS

    @property
    def brightness(self) -> int:
        return self._brightness

    def set_brightness(self, value: int) -> int:
        """Store ``value`` clamped to [0, 100] and return the stored level."""
        self._brightness = clamp_level(value)
        return self._brightness

    def quick_view(self) -> str:
        if self.is_on:
            state = f"{self._brightness}% Brightness [switch off]"
        else:
            state = "off [switch on]"
        return f"{self.name}: {state}{self._timer_suffix()}"

    def one_click_action(self) -> str:
        self._set_power(not self.is_on)
        return f"{self.name} is now {'ON' if self.is_on else 'OFF'}."

    def describe_options(self) -> list[MenuOption]:
        return [
            MenuOption(choice=1, label=f"Toggle On/Off (Currently {self._power_label()})"),
            MenuOption(choice=2, label=f"Adjust Brightness (Currently {self._brightness}%)"),
            MenuOption(choice=3, label="Set Sleep Timer (Countdown Timer)"),
            MenuOption(choice=5, label="Edit Device Name"),
            MenuOption(choice=6, label="Delete Device"),
            MenuOption(choice=9, label="Back to Main Menu"),
        ]

    def _handle_choice(self, choice: int, args: Mapping[str, Any]) -> ChoiceResult:
        if choice == 1:
            return ChoiceResult(message=self.one_click_action())
        if choice == 2:
            level = self.set_brightness(int_arg(args, "value"))
            return ChoiceResult(message=f"Brightness set to {level}%")
        if choice == 3:
            return self._timer_choice(args)
        if choice == 5:
            return self._rename_choice(args)
        if choice == 6:
            return self._delete_choice(args)
        return self._back_choice()

    def _encode_extra(self) -> Sequence[Any]:
        return (self._brightness,)

    def _decode_extra(self, fields: Sequence[str]) -> None:
        if fields:
            try:
                self._brightness = clamp_level(int(fields[0]))
            except ValueError:
                self._logger.debug("%s: ignoring brightness field %r", self.name, fields[0])
