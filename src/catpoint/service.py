"""Security service: the alarm decision engine."""

import logging
import threading
from typing import Any

from .const.defaults import CAT_CONFIDENCE_THRESHOLD
from .const.states import AlarmStatus, ArmingStatus
from .image import CatDetector
from .listener import ListenerRegistry, StatusListener
from .repository import SecurityRepository
from .sensor import Sensor

_LOGGER = logging.getLogger(__name__)


class SecurityService:
    """Receives changes to the security system and decides the alarm status.

    Every state change is written through the repository and then broadcast
    to the registered status listeners. Each public entry point holds an
    instance lock for its whole read-decide-write sequence.
    """

    def __init__(
        self,
        repository: SecurityRepository,
        cat_detector: CatDetector,
        listeners: ListenerRegistry | None = None,
        confidence_threshold: float = CAT_CONFIDENCE_THRESHOLD,
    ):
        """Initialize service.

        Args:
            repository: Store for sensors and system state
            cat_detector: Image classifier used by process_image
            listeners: Listener registry (default: new empty registry)
            confidence_threshold: Confidence passed to the detector (default: 50.0)
        """
        self._repository = repository
        self._cat_detector = cat_detector
        self._listeners = listeners if listeners is not None else ListenerRegistry()
        self._confidence_threshold = float(confidence_threshold)
        self._cat_detection = False
        self._lock = threading.RLock()

        _LOGGER.debug("Security service initialized")

    @property
    def cat_detected(self) -> bool:
        """Result of the most recently processed image."""
        return self._cat_detection

    def add_status_listener(self, listener: StatusListener) -> None:
        """Register a listener for alarm system updates."""
        self._listeners.add(listener)

    def remove_status_listener(self, listener: StatusListener) -> None:
        self._listeners.remove(listener)

    def set_arming_status(self, arming_status: ArmingStatus) -> None:
        """Set the arming status.

        Arming home while a cat is in view raises the alarm. Disarming clears
        it. Arming in either mode resets every sensor to inactive through the
        normal sensor path, so the reset still follows the alarm rules.

        Args:
            arming_status: New arming status
        """
        arming_status = ArmingStatus(arming_status)
        with self._lock:
            _LOGGER.info(f"Arming status change requested: {arming_status.value}")

            if self._cat_detection and arming_status == ArmingStatus.ARMED_HOME:
                self.set_alarm_status(AlarmStatus.ALARM)

            if arming_status == ArmingStatus.DISARMED:
                self.set_alarm_status(AlarmStatus.NO_ALARM)
            else:
                for sensor in sorted(self.get_sensors()):
                    self.change_sensor_activation_status(sensor, False)

            self._repository.set_arming_status(arming_status)
            self._listeners.sensor_status_changed()

    def set_alarm_status(self, alarm_status: AlarmStatus) -> None:
        """Store the alarm status and notify all listeners.

        Args:
            alarm_status: New alarm status
        """
        alarm_status = AlarmStatus(alarm_status)
        with self._lock:
            self._repository.set_alarm_status(alarm_status)
            _LOGGER.info(f"Alarm status set: {alarm_status.value}")
            self._listeners.alarm_status_changed(alarm_status)

    def change_sensor_activation_status(self, sensor: Sensor, active: bool | None = None) -> None:
        """Change a sensor's activation state and update the alarm if needed.

        With ``active`` given, the sensor is driven to that state. Without
        it, the caller has already set ``sensor.active`` and the service only
        reacts to the current alarm and arming status.

        Args:
            sensor: Sensor that changed
            active: Target activation state (optional)
        """
        with self._lock:
            if active is None:
                self._react_to_sensor(sensor)
            else:
                self._drive_sensor(sensor, bool(active))

    def _drive_sensor(self, sensor: Sensor, active: bool) -> None:
        alarm_status = self._repository.get_alarm_status()
        _LOGGER.debug(
            f"Sensor {sensor.name}: {sensor.active} -> {active} (alarm={alarm_status.value})"
        )

        if alarm_status != AlarmStatus.ALARM:
            if active:
                self._handle_sensor_activated()
            elif sensor.active:
                self._handle_sensor_deactivated()

        sensor.active = active
        self._repository.update_sensor(sensor)

    def _react_to_sensor(self, sensor: Sensor) -> None:
        alarm_status = self._repository.get_alarm_status()
        arming_status = self._repository.get_arming_status()

        if alarm_status == AlarmStatus.PENDING_ALARM and not sensor.active:
            self._handle_sensor_deactivated()
        elif alarm_status == AlarmStatus.ALARM and arming_status == ArmingStatus.DISARMED:
            self._handle_sensor_deactivated()

        self._repository.update_sensor(sensor)

    def _handle_sensor_activated(self) -> None:
        if self._repository.get_arming_status() == ArmingStatus.DISARMED:
            return

        alarm_status = self._repository.get_alarm_status()
        if alarm_status == AlarmStatus.NO_ALARM:
            self.set_alarm_status(AlarmStatus.PENDING_ALARM)
        elif alarm_status == AlarmStatus.PENDING_ALARM:
            self.set_alarm_status(AlarmStatus.ALARM)
        else:
            self.set_alarm_status(AlarmStatus.NO_ALARM)

    def _handle_sensor_deactivated(self) -> None:
        alarm_status = self._repository.get_alarm_status()
        if alarm_status == AlarmStatus.PENDING_ALARM:
            self.set_alarm_status(AlarmStatus.NO_ALARM)
        elif alarm_status == AlarmStatus.ALARM:
            self.set_alarm_status(AlarmStatus.PENDING_ALARM)
        else:
            # TODO: deactivating at NO_ALARM escalates; confirm with product
            # whether this should be a no-op instead
            self.set_alarm_status(AlarmStatus.ALARM)

    def process_image(self, image: Any) -> None:
        """Run an image through the cat detector and update the alarm status.

        Args:
            image: Current camera frame
        """
        with self._lock:
            is_cat = self._cat_detector.contains_cat(image, self._confidence_threshold)
            self._cat_detected(is_cat)

    def _cat_detected(self, is_cat: bool) -> None:
        self._cat_detection = is_cat
        _LOGGER.debug(f"Cat detected: {is_cat}")

        if is_cat and self._repository.get_arming_status() == ArmingStatus.ARMED_HOME:
            self.set_alarm_status(AlarmStatus.ALARM)
        elif not is_cat and self._all_sensors_inactive():
            self.set_alarm_status(AlarmStatus.NO_ALARM)

        self._listeners.cat_detected(is_cat)

    def _all_sensors_inactive(self) -> bool:
        return all(not sensor.active for sensor in self.get_sensors())

    def get_alarm_status(self) -> AlarmStatus:
        return self._repository.get_alarm_status()

    def get_arming_status(self) -> ArmingStatus:
        return self._repository.get_arming_status()

    def get_sensors(self) -> set[Sensor]:
        return self._repository.get_sensors()

    def add_sensor(self, sensor: Sensor) -> None:
        with self._lock:
            self._repository.add_sensor(sensor)

    def remove_sensor(self, sensor: Sensor) -> None:
        with self._lock:
            self._repository.remove_sensor(sensor)

    def __repr__(self) -> str:
        """String representation."""
        return f"<SecurityService {len(self._listeners)} listeners, cat={self._cat_detection}>"
