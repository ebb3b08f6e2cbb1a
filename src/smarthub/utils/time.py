"""Time helpers for timestamps shown in device logs and schedules."""

from datetime import datetime


def now_iso() -> str:
    """Get current timestamp in the local timezone.

    Returns:
        ISO 8601 timestamp string with timezone offset
        (e.g., "2025-10-12T14:30:00-07:00")
    """
    return datetime.now().astimezone().replace(microsecond=0).isoformat()


def format_timestamp(epoch_seconds: float) -> str:
    """Render an epoch timestamp the same way as ``now_iso``."""
    return datetime.fromtimestamp(epoch_seconds).astimezone().replace(microsecond=0).isoformat()


def format_hhmm(hour: int, minute: int) -> str:
    """Return a zero-padded HH:MM string."""
    return f"{hour:02d}:{minute:02d}"
