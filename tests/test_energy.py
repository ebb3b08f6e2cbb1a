"""Tests for energy accrual on plugs and sensors."""

from __future__ import annotations

import pytest

from smarthub.device import EnergyMeter, Plug, TempHumiditySensor


def test_meter_accrues_half_unit_per_second(clock) -> None:
    meter = EnergyMeter(clock)
    clock.advance(10)
    reading = meter.update(True)
    assert reading is not None
    assert reading.energy_used == pytest.approx(5.0)
    assert meter.total_energy == pytest.approx(5.0)
    assert meter.history == [reading]


def test_meter_ignores_off_and_zero_elapsed(clock) -> None:
    meter = EnergyMeter(clock)
    clock.advance(10)
    assert meter.update(False) is None
    assert meter.total_energy == 0.0

    meter.reset()
    assert meter.update(True) is None
    assert meter.history == []


def test_plug_energy_is_finalized_when_switched_off(clock) -> None:
    plug = Plug("Fridge", clock=clock)
    plug.one_click_action()
    clock.advance(4)
    message = plug.one_click_action()
    assert message == "Fridge turned OFF. Timer stopped."
    assert plug.total_energy == pytest.approx(2.0)
    assert plug.quick_view() == "Fridge: Off (2.00 kWh total usage)"


def test_plug_energy_never_decreases(clock) -> None:
    plug = Plug("Fridge", clock=clock)
    plug.one_click_action()
    totals = []
    for step in (1, 0, 3, 2):
        clock.advance(step)
        plug.update_historic_data()
        totals.append(plug.total_energy)
    assert totals == sorted(totals)
    assert totals[-1] == pytest.approx(3.0)


def test_switching_on_restarts_accounting(clock) -> None:
    plug = Plug("Fridge", clock=clock)
    clock.advance(100)
    plug.one_click_action()
    clock.advance(2)
    plug.update_historic_data()
    assert plug.total_energy == pytest.approx(1.0)


def test_plug_energy_choices(clock) -> None:
    plug = Plug("Fridge", clock=clock)
    plug.one_click_action()
    clock.advance(6)
    total = plug.apply_choice(3)
    assert total.message == "Total Energy Usage: 3.00 kWh"

    history = plug.apply_choice(4)
    assert len(history.lines) == 1
    assert history.lines[0].startswith("Energy Used: 3.00 kWh")


def test_sensor_reading_updates_energy(clock) -> None:
    sensor = TempHumiditySensor("Attic", clock=clock)
    sensor.one_click_action()
    clock.advance(8)
    reading = sensor.update_sensor_readings()
    assert reading.timestamp == clock.now
    assert sensor.total_energy == pytest.approx(4.0)
    assert sensor.quick_view() == "Attic: On | Total Energy: 4.00 kWh"


def test_sensor_energy_view_without_history(clock) -> None:
    sensor = TempHumiditySensor("Attic", clock=clock)
    result = sensor.apply_choice(4)
    assert result.message == "Total Energy Usage: 0.00 kWh"
    assert result.lines == ["No energy usage recorded yet."]


def test_sensor_energy_query_recomputes(clock) -> None:
    sensor = TempHumiditySensor("Attic", clock=clock)
    sensor.one_click_action()
    clock.advance(10)
    result = sensor.apply_choice(4)
    assert sensor.total_energy == pytest.approx(5.0)
    assert result.message == "Total Energy Usage: 5.00 kWh"
    assert len(result.lines) == 1
