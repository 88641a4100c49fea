"""State definitions for the security system."""

from enum import Enum


class AlarmStatus(str, Enum):
    """Alarm states, ordered from calm to triggered."""

    NO_ALARM = "NO_ALARM"
    PENDING_ALARM = "PENDING_ALARM"
    ALARM = "ALARM"

    @property
    def description(self) -> str:
        """Human-readable text for display."""
        return ALARM_STATUS[self]


class ArmingStatus(str, Enum):
    """Arming modes selected by the operator."""

    DISARMED = "DISARMED"
    ARMED_HOME = "ARMED_HOME"
    ARMED_AWAY = "ARMED_AWAY"

    @property
    def description(self) -> str:
        """Human-readable text for display."""
        return ARMING_STATUS[self]


class SensorType(str, Enum):
    """Sensor types."""

    DOOR = "DOOR"
    WINDOW = "WINDOW"
    MOTION = "MOTION"


ALARM_STATUS: dict[AlarmStatus, str] = {
    AlarmStatus.NO_ALARM: "Cool and Good",
    AlarmStatus.PENDING_ALARM: "I'm in Danger...",
    AlarmStatus.ALARM: "Awooga!",
}

ARMING_STATUS: dict[ArmingStatus, str] = {
    ArmingStatus.DISARMED: "Disarmed",
    ArmingStatus.ARMED_HOME: "Armed - At Home",
    ArmingStatus.ARMED_AWAY: "Armed - Away",
}
