"""Repository contract for sensors and system state."""

import logging
from abc import ABC, abstractmethod

from .const.states import AlarmStatus, ArmingStatus
from .sensor import Sensor

_LOGGER = logging.getLogger(__name__)


class SecurityRepository(ABC):
    """Durable store of sensors, alarm status and arming status.

    The security service treats every call as synchronous and authoritative;
    it never caches values read from here.
    """

    @abstractmethod
    def add_sensor(self, sensor: Sensor) -> None:
        """Register a sensor."""

    @abstractmethod
    def remove_sensor(self, sensor: Sensor) -> None:
        """Remove a sensor."""

    @abstractmethod
    def update_sensor(self, sensor: Sensor) -> None:
        """Store the current state of a sensor."""

    @abstractmethod
    def get_sensors(self) -> set[Sensor]:
        """Return all known sensors."""

    @abstractmethod
    def get_alarm_status(self) -> AlarmStatus:
        """Return the current alarm status."""

    @abstractmethod
    def set_alarm_status(self, alarm_status: AlarmStatus) -> None:
        """Store the alarm status."""

    @abstractmethod
    def get_arming_status(self) -> ArmingStatus:
        """Return the current arming status."""

    @abstractmethod
    def set_arming_status(self, arming_status: ArmingStatus) -> None:
        """Store the arming status."""


class InMemorySecurityRepository(SecurityRepository):
    """Process-local repository, used by the simulator and in tests."""

    def __init__(
        self,
        sensors: list[Sensor] | None = None,
        alarm_status: AlarmStatus = AlarmStatus.NO_ALARM,
        arming_status: ArmingStatus = ArmingStatus.DISARMED,
    ):
        """Initialize repository.

        Args:
            sensors: Initial sensors
            alarm_status: Initial alarm status (default: NO_ALARM)
            arming_status: Initial arming status (default: DISARMED)
        """
        self._sensors: dict[str, Sensor] = {}
        self._alarm_status = AlarmStatus(alarm_status)
        self._arming_status = ArmingStatus(arming_status)

        for sensor in sensors or []:
            self._sensors[sensor.sensor_id] = sensor

    def add_sensor(self, sensor: Sensor) -> None:
        self._sensors[sensor.sensor_id] = sensor

    def remove_sensor(self, sensor: Sensor) -> None:
        self._sensors.pop(sensor.sensor_id, None)

    def update_sensor(self, sensor: Sensor) -> None:
        # Replaces the stored record wholesale
        self._sensors[sensor.sensor_id] = sensor

    def get_sensors(self) -> set[Sensor]:
        return set(self._sensors.values())

    def get_sensor_by_name(self, name: str) -> Sensor:
        """Look up a sensor by display name.

        Raises:
            KeyError: If no sensor has that name
        """
        for sensor in self._sensors.values():
            if sensor.name == name:
                return sensor
        raise KeyError(f"Sensor {name!r} not found")

    def get_alarm_status(self) -> AlarmStatus:
        return self._alarm_status

    def set_alarm_status(self, alarm_status: AlarmStatus) -> None:
        self._alarm_status = alarm_status

    def get_arming_status(self) -> ArmingStatus:
        return self._arming_status

    def set_arming_status(self, arming_status: ArmingStatus) -> None:
        self._arming_status = arming_status

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"<InMemorySecurityRepository {self._arming_status.value}/"
            f"{self._alarm_status.value}, {len(self._sensors)} sensors>"
        )
