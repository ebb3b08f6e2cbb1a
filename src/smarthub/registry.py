"""Device registry: the in-memory collection plus load/save/lookup operations."""

from __future__ import annotations

import asyncio
import logging
from typing import Iterator

from .constants import DeviceKind
from .device import BaseDevice, ScheduledDevice, ScheduleEntry, create_device, get_model_class_from_tag
from .device.base_device import check_device_name, split_record
from .errors import DeviceNotFoundError, MalformedRecordError
from .storage import FlatFileStore, is_device_record, is_schedule_record

logger = logging.getLogger(__name__)


def _name_key(name: str) -> str:
    return name.lower()


class DeviceRegistry:
    """Ordered collection of devices backed by a flat-file store.

    Names are expected to be unique case-insensitively but duplicates are not
    rejected; lookups return the first match.
    """

    def __init__(self, store: FlatFileStore) -> None:
        self._store = store
        self._devices: list[BaseDevice] = []
        self._retired: list[BaseDevice] = []

    def __len__(self) -> int:
        return len(self._devices)

    def __iter__(self) -> Iterator[BaseDevice]:
        return iter(self._devices)

    @property
    def store(self) -> FlatFileStore:
        return self._store

    @property
    def devices(self) -> list[BaseDevice]:
        """Return a copy of the devices in registry order."""
        return list(self._devices)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def load(self) -> int:
        """Append every device persisted in the store to the registry.

        Device records are decoded into the variant named by their tag.
        Schedule records are attached afterwards, by exact name, to the
        schedule-capable devices loaded here; when several share the name the
        first one takes the record. Anything else is skipped.

        Returns:
            Number of devices loaded
        """
        loaded: list[BaseDevice] = []
        schedule_rows: list[list[str]] = []

        for line in self._store.read_lines():
            fields = split_record(line)
            if is_device_record(fields):
                model_class = get_model_class_from_tag(fields[0])
                if model_class is None:
                    continue
                device = model_class(store=self._store)
                device.decode(line)
                loaded.append(device)
            elif is_schedule_record(fields):
                schedule_rows.append(fields)
            else:
                logger.debug("Skipping unrecognised record %r", line)

        for fields in schedule_rows:
            try:
                entry = ScheduleEntry.from_fields(fields)
            except MalformedRecordError as exc:
                logger.debug(exc.message)
                continue
            owner = next(
                (
                    device
                    for device in loaded
                    if isinstance(device, ScheduledDevice) and device.name == fields[0]
                ),
                None,
            )
            if owner is not None:
                owner.schedule.restore(entry)

        for device in loaded:
            self._attach(device)
        self._devices.extend(loaded)
        logger.info("Loaded %d device(s) from %s", len(loaded), self._store.path)
        return len(loaded)

    def save(self) -> None:
        """Overwrite the store with every device followed by its schedule records."""
        lines = [device.encode() for device in self._devices]
        for device in self._devices:
            if isinstance(device, ScheduledDevice):
                lines.extend(device.schedule.records())
        self._store.write_lines(lines)
        logger.info("Saved %d device(s) to %s", len(self._devices), self._store.path)

    # ------------------------------------------------------------------
    # Lookup and mutation
    # ------------------------------------------------------------------

    def _attach(self, device: BaseDevice) -> None:
        if isinstance(device, ScheduledDevice):
            device.schedule_peers = self._scheduled_named

    def _scheduled_named(self, name: str) -> list[ScheduledDevice]:
        return [
            device
            for device in self._devices
            if isinstance(device, ScheduledDevice) and device.name == name
        ]

    def find_by_name(self, name: str) -> BaseDevice | None:
        """Return the first device whose name matches case-insensitively."""
        key = _name_key(name)
        for device in self._devices:
            if _name_key(device.name) == key:
                return device
        return None

    def get(self, name: str) -> BaseDevice:
        """Return a device by name.

        Raises:
            DeviceNotFoundError: No device matches
        """
        device = self.find_by_name(name)
        if device is None:
            raise DeviceNotFoundError(name)
        return device

    def add(self, kind: DeviceKind | str, name: str) -> BaseDevice:
        """Create a device of ``kind`` and append it.

        Raises:
            UnknownDeviceKindError: ``kind`` is not a known tag
            HubError: ``name`` is blank or holds a separator
        """
        device = create_device(kind, check_device_name(name), store=self._store)
        self._attach(device)
        self._devices.append(device)
        logger.info("Added %s %r", device.device_label, name)
        return device

    def remove(self, name: str) -> bool:
        """Remove the first device matching ``name``.

        Returns:
            True if a device was removed, False if none matched
        """
        device = self.find_by_name(name)
        if device is None:
            logger.info('Device "%s" not found in the system', name)
            return False
        return self.discard(device)

    def discard(self, device: BaseDevice) -> bool:
        """Remove this exact device object; False if it is not registered."""
        if device not in self._devices:
            return False
        self._devices.remove(device)
        device.stop_timer()
        if device.timer.pending:
            self._retired.append(device)
        logger.info('Device "%s" deleted', device.name)
        return True

    def rename(self, name: str, new_name: str) -> BaseDevice:
        """Rename the device matching ``name``.

        Raises:
            DeviceNotFoundError: No device matches
            HubError: ``new_name`` is blank
        """
        device = self.get(name)
        device.rename(new_name)
        return device

    def sort_by_name(self) -> None:
        """Order devices by name, ignoring case."""
        self._devices.sort(key=lambda device: _name_key(device.name))

    def sort_by_type(self) -> None:
        """Order devices by display label, then name, ignoring case."""
        self._devices.sort(
            key=lambda device: (device.device_label.lower(), _name_key(device.name))
        )

    def list_quick_views(self) -> list[str]:
        return [device.quick_view() for device in self._devices]

    def one_click_action(self, name: str) -> str:
        """Run the primary action of the named device.

        Raises:
            DeviceNotFoundError: No device matches
        """
        return self.get(name).one_click_action()

    async def stop_all_timers(self) -> None:
        """Stop every timer task, including those of removed devices, and wait for them."""
        devices = [*self._devices, *self._retired]
        self._retired.clear()
        await asyncio.gather(*(device.timer.shutdown() for device in devices))


__all__ = ["DeviceRegistry"]
