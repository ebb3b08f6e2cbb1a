"""Tests for the FastAPI endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from smarthub import service as service_mod
from smarthub.hub_service import HubService
from smarthub.service import app


@pytest.fixture()
def test_client(store_path, monkeypatch: pytest.MonkeyPatch):
    """Provide a TestClient whose hub uses a temporary store."""
    monkeypatch.setattr(service_mod, "_service_instance", HubService(store_path))
    with TestClient(app) as client:
        yield client


def test_health(test_client: TestClient) -> None:
    response = test_client.get("/api/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["devices"] == 0


def test_add_list_and_remove(test_client: TestClient) -> None:
    created = test_client.post("/api/devices", json={"kind": "LIGHT", "name": "Lamp"})
    assert created.status_code == 201
    assert created.json()["quick_view"] == "Lamp: off [switch on]"

    listed = test_client.get("/api/devices").json()
    assert [(entry["name"], entry["kind"]) for entry in listed] == [("Lamp", "LIGHT")]

    assert test_client.delete("/api/devices/lamp").status_code == 200
    assert test_client.delete("/api/devices/lamp").status_code == 404


def test_add_unknown_kind(test_client: TestClient) -> None:
    response = test_client.post("/api/devices", json={"kind": "FRIDGE", "name": "Cold"})
    assert response.status_code == 422
    assert response.json()["detail"]["code"] == "unknown_device_kind"


def test_sort_devices(test_client: TestClient) -> None:
    test_client.post("/api/devices", json={"kind": "PLUG", "name": "kettle"})
    test_client.post("/api/devices", json={"kind": "LIGHT", "name": "Porch"})
    test_client.post("/api/devices", json={"kind": "PLUG", "name": "Fridge"})

    by_name = test_client.post("/api/devices/sort", params={"by": "name"}).json()
    assert [entry["name"] for entry in by_name] == ["Fridge", "kettle", "Porch"]

    by_type = test_client.post("/api/devices/sort", params={"by": "type"}).json()
    assert [entry["name"] for entry in by_type] == ["Porch", "Fridge", "kettle"]

    assert test_client.post("/api/devices/sort", params={"by": "size"}).status_code == 422


def test_toggle(test_client: TestClient) -> None:
    test_client.post("/api/devices", json={"kind": "SPEAKER", "name": "Radio"})
    response = test_client.post("/api/devices/radio/toggle")
    assert response.status_code == 200
    assert response.json()["device"]["quick_view"] == "Radio: Playing (Vol: 50%) [stop]"
    assert test_client.post("/api/devices/ghost/toggle").status_code == 404


def test_options_and_choices(test_client: TestClient) -> None:
    test_client.post("/api/devices", json={"kind": "LIGHT", "name": "Lamp"})

    options = test_client.get("/api/devices/Lamp/options").json()
    assert options["title"] == "Light Controls for Lamp"
    assert [option["choice"] for option in options["options"]] == [1, 2, 3, 5, 6, 9]

    applied = test_client.post("/api/devices/Lamp/options/2", json={"args": {"value": 120}})
    assert applied.status_code == 200
    assert applied.json()["message"] == "Brightness set to 100%"

    invalid = test_client.post("/api/devices/Lamp/options/4")
    assert invalid.status_code == 422
    assert invalid.json()["detail"]["code"] == "out_of_range"

    off = test_client.post("/api/devices/Lamp/options/3", json={"args": {"seconds": 10}})
    assert off.status_code == 422
    assert off.json()["detail"]["code"] == "device_off"

    assert test_client.get("/api/devices/Ghost/options").status_code == 404


def test_timer_choice_over_http(test_client: TestClient) -> None:
    test_client.post("/api/devices", json={"kind": "LIGHT", "name": "Lamp"})
    test_client.post("/api/devices/Lamp/toggle")
    response = test_client.post("/api/devices/Lamp/options/3", json={"args": {"seconds": 60}})
    assert response.status_code == 200
    assert response.json()["message"] == "Timer started for Lamp!"

    listed = test_client.get("/api/devices").json()
    assert listed[0]["timer_running"] is True


def test_delete_choice_removes_device(test_client: TestClient) -> None:
    test_client.post("/api/devices", json={"kind": "THERMOSTAT", "name": "Hall"})
    response = test_client.post("/api/devices/Hall/options/6", json={"args": {"confirm": True}})
    assert response.status_code == 200
    assert response.json()["action"] == "delete"
    assert test_client.get("/api/devices").json() == []


def test_shutdown_persists_registry(store_path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(service_mod, "_service_instance", HubService(store_path))
    with TestClient(app) as client:
        client.post("/api/devices", json={"kind": "PLUG", "name": "Fridge"})
        client.post("/api/devices/Fridge/options/8", json={"args": {"hour": 7, "minute": 0}})
    assert store_path.read_text(encoding="utf-8").splitlines() == [
        "PLUG|Fridge|0|0.0",
        "Fridge|7|0|ON",
    ]


def test_add_blank_name(test_client: TestClient) -> None:
    response = test_client.post("/api/devices", json={"kind": "LIGHT", "name": "   "})
    assert response.status_code == 422
    assert test_client.get("/api/devices").json() == []
