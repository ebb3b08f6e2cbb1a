"""Error types and constants for consistent error handling across the hub."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    """Standardized error codes for consistent error handling."""

    # Device-related errors
    DEVICE_NOT_FOUND = "device_not_found"
    DEVICE_OFF = "device_off"
    TIMER_UNAVAILABLE = "timer_unavailable"
    UNKNOWN_DEVICE_KIND = "unknown_device_kind"

    # Input validation errors
    OUT_OF_RANGE = "out_of_range"
    INVALID_ARGUMENTS = "invalid_arguments"

    # Persistence errors
    MALFORMED_RECORD = "malformed_record"
    STORE_WRITE_ERROR = "store_write_error"

    # Generic errors
    INTERNAL_ERROR = "internal_error"


class HubError(Exception):
    """Base exception class for smart hub errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        """Initialize the hub error.

        Args:
            code: Error code identifier
            message: Human-readable error message
            details: Additional error context and data
            cause: Original exception that caused this error
        """
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for API responses."""
        return {
            "code": self.code.value,
            "message": self.message,
            "details": self.details,
        }


class DeviceNotFoundError(HubError):
    """Raised when no registered device matches a name."""

    def __init__(self, name: str, details: Optional[Dict[str, Any]] = None):
        """Initialize device not found error.

        Args:
            name: Device name that was looked up
            details: Additional error context
        """
        super().__init__(
            ErrorCode.DEVICE_NOT_FOUND,
            f'Device "{name}" not found',
            details={"name": name, **(details or {})},
        )


class OutOfRangeError(HubError):
    """Raised when a choice, index, time or level falls outside its valid range."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(ErrorCode.OUT_OF_RANGE, message, details)


class DeviceOffError(HubError):
    """Raised when an operation needs the device to be switched on."""

    def __init__(self, name: str, action: str, details: Optional[Dict[str, Any]] = None):
        """Initialize device off error.

        Args:
            name: Device name
            action: What was attempted (e.g. "set a timer")
            details: Additional error context
        """
        super().__init__(
            ErrorCode.DEVICE_OFF,
            f"Cannot {action} because {name} is OFF. Turn it ON first.",
            details={"name": name, "action": action, **(details or {})},
        )


class UnknownDeviceKindError(HubError):
    """Raised when a device kind tag has no matching model."""

    def __init__(self, kind: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            ErrorCode.UNKNOWN_DEVICE_KIND,
            f"Unknown device kind: {kind}",
            details={"kind": kind, **(details or {})},
        )


class MalformedRecordError(HubError):
    """Raised when a persisted line cannot be interpreted."""

    def __init__(
        self,
        line: str,
        reason: str,
        cause: Optional[Exception] = None,
    ):
        """Initialize malformed record error.

        Args:
            line: The raw persisted line
            reason: Why the line was rejected
            cause: Original parsing exception, if any
        """
        super().__init__(
            ErrorCode.MALFORMED_RECORD,
            f"Malformed record {line!r}: {reason}",
            details={"line": line, "reason": reason},
            cause=cause,
        )
