"""Tests for ON/OFF schedules and their write-through persistence."""

from __future__ import annotations

import pytest

from smarthub.constants import ScheduleState
from smarthub.device import Plug, ScheduleEntry, Thermostat
from smarthub.errors import MalformedRecordError, OutOfRangeError


def test_entry_record_and_description() -> None:
    entry = ScheduleEntry(hour=7, minute=5, state=ScheduleState.ON)
    assert entry.describe() == "07:05 -> ON"
    assert entry.to_record("Fridge") == "Fridge|7|5|ON"


def test_entry_from_fields() -> None:
    entry = ScheduleEntry.from_fields(["Hall", "22", "30", "off"])
    assert entry.hour == 22
    assert entry.minute == 30
    assert entry.state is ScheduleState.OFF


@pytest.mark.parametrize(
    "fields",
    [
        ["Hall", "24", "00", "ON"],
        ["Hall", "7", "60", "ON"],
        ["Hall", "seven", "0", "ON"],
        ["Hall", "7", "0", "MAYBE"],
        ["Hall", "7", "0"],
    ],
)
def test_entry_from_invalid_fields(fields) -> None:
    with pytest.raises(MalformedRecordError):
        ScheduleEntry.from_fields(fields)


def test_add_rejects_invalid_time(store) -> None:
    plug = Plug("Fridge", store=store)
    with pytest.raises(OutOfRangeError):
        plug.schedule.add(24, 0, "ON")
    with pytest.raises(OutOfRangeError):
        plug.schedule.add(-1, 0, "ON")
    assert len(plug.schedule) == 0
    assert not store.exists()


def test_add_writes_through(store) -> None:
    plug = Plug("Fridge", store=store)
    plug.schedule.add(7, 30, "ON")
    plug.schedule.add(22, 0, ScheduleState.OFF)
    assert store.read_lines() == ["Fridge|7|30|ON", "Fridge|22|0|OFF"]


def test_write_through_does_not_duplicate(store) -> None:
    store.write_lines(["PLUG|Fridge|0|0.0", "Hall|6|0|ON"])
    plug = Plug("Fridge", store=store)
    plug.schedule.add(7, 30, "ON")
    plug.schedule.add(8, 0, "OFF")
    plug.schedule.remove_at(1)
    assert store.read_lines() == ["PLUG|Fridge|0|0.0", "Hall|6|0|ON", "Fridge|8|0|OFF"]


def test_remove_at_validates_index(store) -> None:
    heating = Thermostat("Hall", store=store)
    heating.schedule.add(6, 0, "ON")
    with pytest.raises(OutOfRangeError):
        heating.schedule.remove_at(0)
    with pytest.raises(OutOfRangeError):
        heating.schedule.remove_at(2)
    assert len(heating.schedule) == 1


def test_schedule_menu_choices(store) -> None:
    heating = Thermostat("Hall", store=store)
    assert heating.apply_choice(3).message == "No schedules set."

    added = heating.apply_choice(2, {"hour": 6, "minute": 45, "state": "on"})
    assert added.ok is True
    assert added.message == "Schedule added: 06:45 -> ON"

    listed = heating.apply_choice(3)
    assert listed.lines == ["1: 06:45 -> ON"]

    bad = heating.apply_choice(2, {"hour": 25, "minute": 0, "state": "ON"})
    assert bad.ok is False
    assert bad.message == "Invalid time. Please enter a valid time in 24-hour format."

    deleted = heating.apply_choice(4, {"index": 1})
    assert deleted.ok is True
    assert len(heating.schedule) == 0
    assert store.read_lines() == []


def test_delete_with_empty_schedule(store) -> None:
    plug = Plug("Fridge", store=store)
    result = plug.apply_choice(7, {"index": 1})
    assert result.ok is False
    assert result.message == "No schedules to delete."


def test_rename_moves_schedule_records(store) -> None:
    plug = Plug("Fridge", store=store)
    plug.schedule.add(7, 0, "ON")
    plug.rename("Freezer")
    assert store.read_lines() == ["Freezer|7|0|ON"]
