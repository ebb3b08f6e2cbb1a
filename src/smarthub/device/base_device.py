"""Abstract device contract shared by every smart device kind."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, Mapping, Sequence

from pydantic import BaseModel, Field

from ..constants import LEVEL_MAX, LEVEL_MIN, RECORD_SEPARATOR, DeviceKind
from ..errors import ErrorCode, HubError, OutOfRangeError
from .timer import DeviceTimer

if TYPE_CHECKING:
    from ..storage.flat_file import FlatFileStore


class SessionAction(str, Enum):
    """Follow-up a menu choice asks of the surrounding session."""

    NONE = "none"
    RENAME = "rename"
    DELETE = "delete"
    BACK = "back"


class MenuOption(BaseModel):
    """One numbered entry of a device control menu."""

    choice: int
    label: str


class ChoiceResult(BaseModel):
    """Outcome of applying a menu choice to a device."""

    ok: bool = True
    message: str = ""
    lines: list[str] = Field(default_factory=list)
    action: SessionAction = SessionAction.NONE
    error: dict[str, Any] | None = None

    @classmethod
    def failure(cls, exc: HubError) -> "ChoiceResult":
        """Build a failed result from a hub error."""
        return cls(ok=False, message=exc.message, error=exc.to_dict())


def split_record(text: str) -> list[str]:
    """Split a persisted line into its pipe-delimited fields."""
    return text.rstrip("\r\n").split(RECORD_SEPARATOR)


def join_record(*fields: Any) -> str:
    """Join fields into one pipe-delimited persisted line."""
    return RECORD_SEPARATOR.join(str(field) for field in fields)


def encode_flag(value: bool) -> str:
    return "1" if value else "0"


def decode_flag(field: str) -> bool:
    return field.strip() == "1"


def clamp_level(value: int) -> int:
    """Clamp a brightness/volume level into [0, 100]."""
    return max(LEVEL_MIN, min(LEVEL_MAX, value))


def check_device_name(name: str) -> str:
    """Return ``name`` stripped, rejecting names a record line cannot hold.

    Raises:
        HubError: ``name`` is blank or contains the record separator or a line break
    """
    name = name.strip()
    if not name:
        raise HubError(ErrorCode.INVALID_ARGUMENTS, "Device name cannot be empty")
    if RECORD_SEPARATOR in name or "\n" in name or "\r" in name:
        raise HubError(
            ErrorCode.INVALID_ARGUMENTS,
            f"Device name cannot contain '{RECORD_SEPARATOR}' or line breaks",
            details={"name": name},
        )
    return name


def int_arg(args: Mapping[str, Any], key: str) -> int:
    """Read a required integer menu argument.

    Raises:
        HubError: The argument is missing or not an integer
    """
    if key not in args:
        raise HubError(ErrorCode.INVALID_ARGUMENTS, f"Missing argument: {key}")
    value = args[key]
    if isinstance(value, bool):
        raise HubError(ErrorCode.INVALID_ARGUMENTS, f"Argument {key} must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise HubError(
            ErrorCode.INVALID_ARGUMENTS,
            f"Argument {key} must be an integer",
            details={key: value},
            cause=exc,
        ) from exc


class BaseDevice(ABC):
    """Base class for every smart device kind.

    Subclasses declare their discriminator tag and display label, render a
    quick view, implement the primary one-click action, describe their
    numbered control menu and encode their type-specific record fields.
    """

    device_kind: ClassVar[DeviceKind]
    device_label: ClassVar[str]
    menu_title: ClassVar[str]

    def __init__(self, name: str = "", *, store: "FlatFileStore | None" = None) -> None:
        self._name = name
        self.is_on = False
        self._store = store
        self.timer = DeviceTimer(self)
        self._logger = logging.getLogger(f"{__name__}.{type(self).__name__}")

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self._name!r} is_on={self.is_on}>"

    @property
    def name(self) -> str:
        """Return the device name."""
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value

    # ------------------------------------------------------------------
    # Primary contract
    # ------------------------------------------------------------------

    @abstractmethod
    def quick_view(self) -> str:
        """Return a one-line status summary."""

    @abstractmethod
    def one_click_action(self) -> str:
        """Perform the primary toggle and return a status message."""

    @abstractmethod
    def describe_options(self) -> list[MenuOption]:
        """Return the numbered control menu for the current state."""

    @abstractmethod
    def _handle_choice(self, choice: int, args: Mapping[str, Any]) -> ChoiceResult:
        """Perform a choice already known to be on the menu."""

    def apply_choice(self, choice: int, args: Mapping[str, Any] | None = None) -> ChoiceResult:
        """Apply a numbered menu choice.

        Choices that are not on the menu and invalid arguments are reported in
        the result; the device state is left unchanged.
        """
        valid = {option.choice for option in self.describe_options()}
        if choice not in valid:
            return ChoiceResult.failure(
                OutOfRangeError(f"Invalid choice: {choice}", details={"choice": choice})
            )
        try:
            return self._handle_choice(choice, dict(args or {}))
        except HubError as exc:
            self._logger.info("%s: choice %s rejected: %s", self._name, choice, exc.message)
            return ChoiceResult.failure(exc)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def encode(self) -> str:
        """Encode the device as one ``TAG|name|isOn[|extra...]`` record."""
        return join_record(
            self.device_kind.value,
            self._name,
            encode_flag(self.is_on),
            *self._encode_extra(),
        )

    def decode(self, text: str) -> None:
        """Restore state from a record.

        Best effort: fields that are missing or unparseable keep their
        current values.
        """
        fields = split_record(text)
        if len(fields) > 1:
            self._name = fields[1]
        if len(fields) > 2:
            self.is_on = decode_flag(fields[2])
        self._decode_extra(fields[3:])

    def _encode_extra(self) -> Sequence[Any]:
        return ()

    def _decode_extra(self, fields: Sequence[str]) -> None:
        return None

    # ------------------------------------------------------------------
    # Timer control
    # ------------------------------------------------------------------

    def start_timer(self, seconds: int) -> None:
        """Start a sleep timer; see ``DeviceTimer.start``."""
        self.timer.start(seconds)

    def stop_timer(self) -> None:
        self.timer.stop()

    @property
    def timer_running(self) -> bool:
        return self.timer.running

    @property
    def timer_remaining(self) -> int:
        return self.timer.remaining

    def on_timer_expired(self) -> None:
        """Called by the timer task when the countdown reaches zero."""
        self.is_on = False

    def _timer_suffix(self) -> str:
        if self.timer.running:
            return f" [Timer: {self.timer.remaining} seconds remaining]"
        return ""

    # ------------------------------------------------------------------
    # Helpers for subclasses
    # ------------------------------------------------------------------

    def _set_power(self, on: bool) -> None:
        self.is_on = on
        if not on:
            self.timer.stop()
        self._logger.info("%s is now %s", self._name, "ON" if on else "OFF")

    def _power_label(self) -> str:
        return "On" if self.is_on else "Off"

    def _timer_choice(self, args: Mapping[str, Any]) -> ChoiceResult:
        seconds = int_arg(args, "seconds")
        self.start_timer(seconds)
        return ChoiceResult(message=f"Timer started for {self._name}!")

    def rename(self, new_name: str) -> str:
        """Rename the device and return the previous name.

        Raises:
            HubError: ``new_name`` is blank or holds a separator
        """
        new_name = check_device_name(new_name)
        old_name = self._name
        self._name = new_name
        self._on_renamed(old_name)
        return old_name

    def _rename_choice(self, args: Mapping[str, Any]) -> ChoiceResult:
        self.rename(str(args.get("name", "")))
        return ChoiceResult(
            message=f"Device name updated to: {self._name}",
            action=SessionAction.RENAME,
        )

    def _on_renamed(self, old_name: str) -> None:
        return None

    def _delete_choice(self, args: Mapping[str, Any]) -> ChoiceResult:
        if not args.get("confirm"):
            return ChoiceResult(message="Deletion cancelled.")
        return ChoiceResult(
            message=f'Device "{self._name}" is being deleted.',
            action=SessionAction.DELETE,
        )

    def _back_choice(self) -> ChoiceResult:
        return ChoiceResult(action=SessionAction.BACK)


__all__ = [
    "BaseDevice",
    "ChoiceResult",
    "MenuOption",
    "SessionAction",
    "check_device_name",
    "clamp_level",
    "decode_flag",
    "encode_flag",
    "int_arg",
    "join_record",
    "split_record",
]
