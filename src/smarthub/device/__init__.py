"""Module defining the smart device kinds."""

import inspect
import sys
from typing import Any, Type

from ..constants import DeviceKind
from ..errors import UnknownDeviceKindError
from .base_device import BaseDevice, ChoiceResult, MenuOption, SessionAction
from .energy import EnergyMeter, EnergyReading, SensorReading
from .heating import HeatingDevice, RadiatorValve, Thermostat
from .light import Light
from .plug import Plug
from .schedule import DeviceSchedule, ScheduledDevice, ScheduleEntry
from .sensor import TempHumiditySensor
from .speaker import Speaker
from .timer import DeviceTimer

TAG2MODEL: dict[str, Type[BaseDevice]] = {}
for name, obj in inspect.getmembers(sys.modules[__name__]):
    if inspect.isclass(obj) and issubclass(obj, BaseDevice) and "device_kind" in vars(obj):
        TAG2MODEL[obj.device_kind.value] = obj


def get_model_class_from_tag(tag: str) -> Type[BaseDevice] | None:
    """Return the device class for a record tag, or None if the tag is unknown."""
    return TAG2MODEL.get(tag.strip().upper())


def create_device(kind: DeviceKind | str, name: str, **kwargs: Any) -> BaseDevice:
    """Construct a device of the requested kind.

    Raises:
        UnknownDeviceKindError: ``kind`` is not a known tag
    """
    tag = kind.value if isinstance(kind, DeviceKind) else str(kind)
    model_class = get_model_class_from_tag(tag)
    if model_class is None:
        raise UnknownDeviceKindError(tag)
    return model_class(name, **kwargs)


__all__ = [
    "BaseDevice",
    "ChoiceResult",
    "DeviceSchedule",
    "DeviceTimer",
    "EnergyMeter",
    "EnergyReading",
    "HeatingDevice",
    "Light",
    "MenuOption",
    "Plug",
    "RadiatorValve",
    "ScheduleEntry",
    "ScheduledDevice",
    "SensorReading",
    "SessionAction",
    "Speaker",
    "TAG2MODEL",
    "TempHumiditySensor",
    "Thermostat",
    "create_device",
    "get_model_class_from_tag",
]
