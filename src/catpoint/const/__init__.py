"""Constants for the security system."""

from .defaults import CAT_CONFIDENCE_THRESHOLD, DEFAULT_CONFIG_FILE
from .states import (
    ALARM_STATUS,
    ARMING_STATUS,
    AlarmStatus,
    ArmingStatus,
    SensorType,
)

__all__ = [
    "AlarmStatus",
    "ArmingStatus",
    "SensorType",
    "ALARM_STATUS",
    "ARMING_STATUS",
    "CAT_CONFIDENCE_THRESHOLD",
    "DEFAULT_CONFIG_FILE",
]
