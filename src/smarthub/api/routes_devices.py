"""Device API routes (list, add, remove, sort, toggle, control menu)."""

from __future__ import annotations

import logging
from typing import Any, Dict, Literal

from fastapi import APIRouter, Request
from pydantic import BaseModel, ConfigDict, Field

from ..errors import HubError
from ..hub_service import device_summary
from .exceptions import choice_rejected, hub_error_to_http, invalid_request

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["devices"])


class AddDeviceRequest(BaseModel):
    """Body for creating a device."""

    model_config = ConfigDict(extra="forbid")

    kind: str
    name: str = Field(min_length=1)


class ChoiceRequest(BaseModel):
    """Body for applying a control menu choice."""

    model_config = ConfigDict(extra="forbid")

    args: Dict[str, Any] = Field(default_factory=dict)


@router.get("/devices")
async def list_devices(request: Request) -> list[Dict[str, Any]]:
    """Return every device in registry order."""
    service = request.app.state.service
    return service.list_devices()


@router.post("/devices", status_code=201)
async def add_device(request: Request, payload: AddDeviceRequest) -> Dict[str, Any]:
    """Create a device of the requested kind."""
    service = request.app.state.service
    name = payload.name.strip()
    if not name:
        raise invalid_request("device name cannot be blank")
    try:
        device = service.add_device(payload.kind, name)
    except HubError as e:
        raise hub_error_to_http(e) from e
    return device_summary(device)


@router.post("/devices/sort")
async def sort_devices(
    request: Request, by: Literal["name", "type"] = "name"
) -> list[Dict[str, Any]]:
    """Sort the registry by name or by type and return the new order."""
    service = request.app.state.service
    if by == "type":
        service.sort_by_type()
    else:
        service.sort_by_name()
    return service.list_devices()


@router.delete("/devices/{name}")
async def remove_device(request: Request, name: str) -> Dict[str, Any]:
    """Remove a device by name."""
    service = request.app.state.service
    try:
        service.remove_device(name)
    except HubError as e:
        raise hub_error_to_http(e) from e
    return {"removed": name}


@router.post("/devices/{name}/toggle")
async def toggle_device(request: Request, name: str) -> Dict[str, Any]:
    """Run the device's one-click action."""
    service = request.app.state.service
    try:
        message = service.one_click_action(name)
        device = service.registry.get(name)
    except HubError as e:
        raise hub_error_to_http(e) from e
    return {"message": message, "device": device_summary(device)}


@router.get("/devices/{name}/options")
async def get_options(request: Request, name: str) -> Dict[str, Any]:
    """Return the device's control menu for its current state."""
    service = request.app.state.service
    try:
        session = service.open_session(name)
    except HubError as e:
        raise hub_error_to_http(e) from e
    return {
        "title": session.title,
        "options": [option.model_dump() for option in session.describe_options()],
    }


@router.post("/devices/{name}/options/{choice}")
async def apply_option(
    request: Request, name: str, choice: int, payload: ChoiceRequest | None = None
) -> Dict[str, Any]:
    """Apply one control menu choice to the device."""
    service = request.app.state.service
    try:
        session = service.open_session(name)
    except HubError as e:
        raise hub_error_to_http(e) from e

    result = session.apply_choice(choice, payload.args if payload else None)
    if not result.ok:
        logger.info(f"Choice {choice} rejected for {name}: {result.message}")
        raise choice_rejected(result.error or {"message": result.message})
    return result.model_dump(mode="json")
