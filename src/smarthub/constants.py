"""Application constants including record tags, accrual and timing definitions.

Centralized constants to ensure consistency across device, storage and API layers.
"""

from __future__ import annotations

from enum import Enum

# ============================================================================
# Persisted Record Constants
# ============================================================================

STORE_FILE_NAME = "smart_home.txt"
RECORD_SEPARATOR = "|"
SCHEDULE_RECORD_FIELDS = 4


class DeviceKind(str, Enum):
    """Discriminator tag written as the first field of every device record."""

    LIGHT = "LIGHT"
    PLUG = "PLUG"
    SPEAKER = "SPEAKER"
    THERMOSTAT = "THERMOSTAT"
    RADIATOR = "RADIATOR"
    TEMPHUMIDITY = "TEMPHUMIDITY"


class ScheduleState(str, Enum):
    """Target state stored with a schedule entry."""

    ON = "ON"
    OFF = "OFF"


# ============================================================================
# Device Behaviour Constants
# ============================================================================

ENERGY_PER_SECOND = 0.5  # Energy units accrued per second while a device is on

LEVEL_MIN = 0
LEVEL_MAX = 100
DEFAULT_BRIGHTNESS = 100
DEFAULT_VOLUME = 50

SENSOR_TEMPERATURE_RANGE = (18.0, 30.0)
SENSOR_HUMIDITY_RANGE = (30.0, 70.0)

# ============================================================================
# Timing Constants
# ============================================================================

TIMER_TICK_SECONDS = 1.0  # Countdown step for device sleep timers
