"""Storage package for registry persistence.

Provides the flat-file store that device and schedule records share.
"""

from .flat_file import KNOWN_TAGS, FlatFileStore, is_device_record, is_schedule_record

__all__ = [
    "FlatFileStore",
    "KNOWN_TAGS",
    "is_device_record",
    "is_schedule_record",
]
