"""Smart speaker with playback and volume control."""

from __future__ import annotations

from typing import Any, ClassVar, Mapping, Sequence

from ..constants import DEFAULT_VOLUME, DeviceKind
from .base_device import (
    BaseDevice,
    ChoiceResult,
    MenuOption,
    clamp_level,
    decode_flag,
    encode_flag,
    int_arg,
)


class Speaker(BaseDevice):
    """Speaker whose primary action is play/stop.

    Playback is independent of the power flag: ``is_playing`` and ``is_on``
    are separate booleans and the one-click action only flips playback.
    """

    device_kind: ClassVar[DeviceKind] = DeviceKind.SPEAKER
    device_label: ClassVar[str] = "Speaker"
    menu_title: ClassVar[str] = "Speaker Controls"

    def __init__(self, name: str = "", **kwargs: Any) -> None:
        super().__init__(name, **kwargs)
        self._volume = DEFAULT_VOLUME
        self.is_playing = False

    @property
    def volume(self) -> int:
        return self._volume

    def set_volume(self, value: int) -> int:
        """Store ``value`` clamped to [0, 100] and return the stored level."""
        self._volume = clamp_level(value)
        return self._volume

    def quick_view(self) -> str:
        state = "Playing" if self.is_playing else "Stopped"
        hint = "stop" if self.is_playing else "play"
        return f"{self.name}: {state} (Vol: {self._volume}%) [{hint}]"

    def one_click_action(self) -> str:
        self.is_playing = not self.is_playing
        self._logger.info("%s %s", self.name, "playing" if self.is_playing else "stopped")
        return f"{self.name} is now {'playing' if self.is_playing else 'stopped'}."

    def describe_options(self) -> list[MenuOption]:
        playback = "Playing" if self.is_playing else "Stopped"
        return [
            MenuOption(choice=1, label=f"Play/Stop (Currently {playback})"),
            MenuOption(choice=2, label=f"Adjust Volume (Currently {self._volume}%)"),
            MenuOption(choice=3, label="Delete Device"),
            MenuOption(choice=5, label="Edit Device Name"),
            MenuOption(choice=9, label="Back to Main Menu"),
        ]

    def _handle_choice(self, choice: int, args: Mapping[str, Any]) -> ChoiceResult:
        if choice == 1:
            return ChoiceResult(message=self.one_click_action())
        if choice == 2:
            level = self.set_volume(int_arg(args, "value"))
            return ChoiceResult(message=f"Volume set to {level}%")
        if choice == 3:
            return self._delete_choice(args)
        if choice == 5:
            return self._rename_choice(args)
        return self._back_choice()

    def _encode_extra(self) -> Sequence[Any]:
        return (self._volume, encode_flag(self.is_playing))

    def _decode_extra(self, fields: Sequence[str]) -> None:
        if fields:
            try:
                self._volume = clamp_level(int(fields[0]))
            except ValueError:
                self._logger.debug("%s: ignoring volume field %r", self.name, fields[0])
        if len(fields) > 1:
            self.is_playing = decode_flag(fields[1])
