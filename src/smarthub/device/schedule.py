"""Time-of-day ON/OFF schedules attached to plugs and heating devices.

Schedules are inert records: they are listed, added and deleted, but reaching
a scheduled time never changes a device's state. Every successful change is
written through to the store immediately.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, Mapping, Sequence

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..constants import SCHEDULE_RECORD_FIELDS, ScheduleState
from ..errors import ErrorCode, HubError, MalformedRecordError, OutOfRangeError
from ..utils.time import format_hhmm
from .base_device import BaseDevice, ChoiceResult, int_arg, join_record


class ScheduleEntry(BaseModel):
    """A single scheduled switch time."""

    hour: int = Field(ge=0, le=23)
    minute: int = Field(ge=0, le=59)
    state: ScheduleState

    model_config = ConfigDict(extra="forbid", frozen=True)

    def as_time(self) -> str:
        """Return the entry time formatted as HH:MM."""
        return format_hhmm(self.hour, self.minute)

    def describe(self) -> str:
        return f"{self.as_time()} -> {self.state.value}"

    def to_record(self, device_name: str) -> str:
        """Encode as a ``deviceName|hour|minute|state`` line."""
        return join_record(device_name, self.hour, self.minute, self.state.value)

    @classmethod
    def from_fields(cls, fields: Sequence[str]) -> "ScheduleEntry":
        """Build an entry from the last three fields of a schedule record.

        Raises:
            MalformedRecordError: The fields do not describe a valid entry
        """
        line = "|".join(fields)
        if len(fields) != SCHEDULE_RECORD_FIELDS:
            raise MalformedRecordError(line, "schedule records have exactly four fields")
        try:
            return cls(
                hour=int(fields[1].strip()),
                minute=int(fields[2].strip()),
                state=fields[3].strip().upper(),
            )
        except (ValueError, ValidationError) as exc:
            raise MalformedRecordError(line, "invalid schedule entry", cause=exc) from exc


def parse_schedule_state(value: Any) -> ScheduleState:
    """Coerce ``"ON"``/``"OFF"`` (any case) or a ``ScheduleState``."""
    if isinstance(value, ScheduleState):
        return value
    try:
        return ScheduleState(str(value).strip().upper())
    except ValueError as exc:
        raise HubError(
            ErrorCode.INVALID_ARGUMENTS,
            "Schedule state must be ON or OFF",
            details={"state": value},
            cause=exc,
        ) from exc


class DeviceSchedule:
    """Insertion-ordered list of schedule entries owned by one device."""

    def __init__(self, owner: "ScheduledDevice") -> None:
        self._owner = owner
        self._entries: list[ScheduleEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ScheduleEntry]:
        return iter(self._entries)

    def entries(self) -> list[ScheduleEntry]:
        """Return a copy of the entries in insertion order."""
        return list(self._entries)

    def add(self, hour: int, minute: int, state: ScheduleState | str) -> ScheduleEntry:
        """Append an entry and write the schedule through to the store.

        Raises:
            OutOfRangeError: ``hour`` is outside 0-23 or ``minute`` outside 0-59
        """
        if not (0 <= hour <= 23 and 0 <= minute <= 59):
            raise OutOfRangeError(
                "Invalid time. Please enter a valid time in 24-hour format.",
                details={"hour": hour, "minute": minute},
            )
        entry = ScheduleEntry(hour=hour, minute=minute, state=parse_schedule_state(state))
        self._entries.append(entry)
        self.persist()
        return entry

    def remove_at(self, index: int) -> ScheduleEntry:
        """Remove the entry at a 1-based position and write through.

        Raises:
            OutOfRangeError: ``index`` is outside [1, count]
        """
        if not 1 <= index <= len(self._entries):
            raise OutOfRangeError(
                "Invalid schedule number.",
                details={"index": index, "count": len(self._entries)},
            )
        entry = self._entries.pop(index - 1)
        self.persist()
        return entry

    def restore(self, entry: ScheduleEntry) -> None:
        """Append an entry read back from the store without writing through."""
        self._entries.append(entry)

    def records(self, device_name: str | None = None) -> list[str]:
        name = self._owner.name if device_name is None else device_name
        return [entry.to_record(name) for entry in self._entries]

    def persist(self) -> None:
        self._owner.persist_schedule_records(self._owner.name)


class ScheduledDevice(BaseDevice):
    """Device kind that carries an ON/OFF schedule.

    Schedule lines carry only the device name, so every registered device
    sharing a name owns that name's lines together. The registry sets
    ``schedule_peers`` to list those devices in registry order.
    """

    def __init__(self, name: str = "", **kwargs: Any) -> None:
        super().__init__(name, **kwargs)
        self.schedule = DeviceSchedule(self)
        self.schedule_peers: Callable[[str], list["ScheduledDevice"]] | None = None

    def persist_schedule_records(self, name: str) -> None:
        """Rewrite the store's schedule lines for ``name`` from every device holding it."""
        if self._store is None:
            return
        owners = self.schedule_peers(name) if self.schedule_peers is not None else []
        if not owners and self.name == name:
            owners = [self]
        records = [record for owner in owners for record in owner.schedule.records(name)]
        self._store.replace_schedule_records(name, records)

    def _add_schedule_choice(self, args: Mapping[str, Any]) -> ChoiceResult:
        entry = self.schedule.add(
            int_arg(args, "hour"),
            int_arg(args, "minute"),
            args.get("state", ScheduleState.ON),
        )
        return ChoiceResult(message=f"Schedule added: {entry.describe()}")

    def _view_schedule_choice(self) -> ChoiceResult:
        if not len(self.schedule):
            return ChoiceResult(message="No schedules set.")
        lines = [f"{idx}: {entry.describe()}" for idx, entry in enumerate(self.schedule, start=1)]
        return ChoiceResult(message="Scheduled Times:", lines=lines)

    def _delete_schedule_choice(self, args: Mapping[str, Any]) -> ChoiceResult:
        if not len(self.schedule):
            return ChoiceResult(ok=False, message="No schedules to delete.")
        entry = self.schedule.remove_at(int_arg(args, "index"))
        return ChoiceResult(message=f"Schedule deleted: {entry.describe()}")

    def _on_renamed(self, old_name: str) -> None:
        self.persist_schedule_records(old_name)
        self.persist_schedule_records(self.name)


__all__ = [
    "DeviceSchedule",
    "ScheduleEntry",
    "ScheduledDevice",
    "parse_schedule_state",
]
