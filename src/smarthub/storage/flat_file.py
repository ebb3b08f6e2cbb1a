"""Flat pipe-delimited store shared by device and schedule records.

The store file holds two record shapes, one per line:

- device records: ``TAG|name|isOn[|extra...]`` where TAG is a ``DeviceKind``
- schedule records: ``deviceName|hour|minute|state``

The shapes are told apart only by the first field: a line whose first field is
a known tag is a device record, otherwise a four-field line is a schedule
record. A device literally named after a tag therefore cannot keep schedules.
Names holding the separator or a line break would split a record, so they
are rejected when a device is added or renamed.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Sequence

from ..constants import RECORD_SEPARATOR, SCHEDULE_RECORD_FIELDS, DeviceKind
from ..errors import ErrorCode, HubError

logger = logging.getLogger(__name__)

KNOWN_TAGS = frozenset(kind.value for kind in DeviceKind)


def is_device_record(fields: Sequence[str]) -> bool:
    """Return True if the fields start with a known device tag."""
    return bool(fields) and fields[0] in KNOWN_TAGS


def is_schedule_record(fields: Sequence[str]) -> bool:
    """Return True if the fields have the ``name|hour|minute|state`` shape."""
    return len(fields) == SCHEDULE_RECORD_FIELDS and fields[0] not in KNOWN_TAGS


class FlatFileStore:
    """Line-oriented persistence for the device registry."""

    def __init__(self, path: Path | str) -> None:
        """Initialize the store.

        Args:
            path: Location of the store file; parent directories are created on write
        """
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def read_lines(self) -> list[str]:
        """Return every non-blank line of the store, or [] if it does not exist."""
        if not self._path.exists():
            return []
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.error(f"Could not read store file {self._path}: {exc}")
            return []
        return [line for line in raw.splitlines() if line.strip()]

    def write_lines(self, lines: Iterable[str]) -> None:
        """Overwrite the store atomically with ``lines``.

        Raises:
            HubError: The file could not be written
        """
        content = "".join(f"{line}\n" for line in lines)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_file = self._path.with_suffix(".tmp")
            tmp_file.write_text(content, encoding="utf-8")
            tmp_file.replace(self._path)
        except OSError as exc:
            raise HubError(
                ErrorCode.STORE_WRITE_ERROR,
                f"Could not write store file {self._path}: {exc}",
                details={"path": str(self._path)},
                cause=exc,
            ) from exc

    def replace_schedule_records(self, device_name: str, records: Sequence[str]) -> None:
        """Replace every schedule line of ``device_name`` with ``records``.

        Device records and other devices' schedules are kept in place; the new
        records are appended at the end.
        """
        kept = []
        for line in self.read_lines():
            fields = line.split(RECORD_SEPARATOR)
            if is_schedule_record(fields) and fields[0] == device_name:
                continue
            kept.append(line)
        self.write_lines([*kept, *records])
        logger.debug(f"Wrote {len(records)} schedule record(s) for {device_name}")


__all__ = ["FlatFileStore", "KNOWN_TAGS", "is_device_record", "is_schedule_record"]
