"""Replay a scenario through a security service."""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from .config import EVENT_ARM, EVENT_IMAGE, EVENT_SENSOR, Scenario, ScenarioEvent
from .const.states import AlarmStatus
from .image import ScriptedCatDetector
from .listener import StatusListener
from .repository import InMemorySecurityRepository
from .service import SecurityService

_LOGGER = logging.getLogger(__name__)


@dataclass
class Notification:
    """A single listener callback, as recorded by RecordingListener."""

    kind: str
    value: Any = None

    def to_dict(self) -> dict[str, Any]:
        value = self.value.value if isinstance(self.value, AlarmStatus) else self.value
        return {"kind": self.kind, "value": value}


class RecordingListener(StatusListener):
    """Listener that keeps every notification it receives."""

    def __init__(self, callback: Optional[Callable[[Notification], None]] = None):
        self.notifications: list[Notification] = []
        self._callback = callback

    def _record(self, notification: Notification) -> None:
        self.notifications.append(notification)
        if self._callback:
            self._callback(notification)

    def on_alarm_status_changed(self, alarm_status: AlarmStatus) -> None:
        self._record(Notification("alarm", alarm_status))

    def on_sensor_status_changed(self) -> None:
        self._record(Notification("sensors"))

    def on_cat_detected(self, is_cat: bool) -> None:
        self._record(Notification("cat", is_cat))


@dataclass
class SimulationResult:
    """Final state after replaying a scenario."""

    service: SecurityService
    repository: InMemorySecurityRepository
    notifications: list[Notification] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "arming_status": self.repository.get_arming_status().value,
            "alarm_status": self.repository.get_alarm_status().value,
            "cat_detected": self.service.cat_detected,
            "sensors": [s.to_dict() for s in sorted(self.repository.get_sensors())],
            "notifications": [n.to_dict() for n in self.notifications],
        }


def build_service(scenario: Scenario) -> tuple[SecurityService, InMemorySecurityRepository]:
    """Create a service wired to an in-memory repository and scripted detector."""
    repository = InMemorySecurityRepository(
        sensors=scenario.sensors,
        alarm_status=scenario.alarm_status,
        arming_status=scenario.arming_status,
    )
    detector = ScriptedCatDetector(scenario.detector_answers)
    service = SecurityService(
        repository, detector, confidence_threshold=scenario.confidence_threshold
    )
    return service, repository


def apply_event(
    service: SecurityService, repository: InMemorySecurityRepository, event: ScenarioEvent
) -> None:
    """Feed one scenario event into the service."""
    _LOGGER.debug(f"Applying event: {event}")
    if event.kind == EVENT_ARM:
        service.set_arming_status(event.target)
    elif event.kind == EVENT_SENSOR:
        sensor = repository.get_sensor_by_name(event.target)
        service.change_sensor_activation_status(sensor, event.active)
    elif event.kind == EVENT_IMAGE:
        # Scripted detector already holds the answer; the frame is a placeholder
        service.process_image(None)
    else:
        raise ValueError(f"Unknown event kind: {event.kind}")


def run_scenario(
    scenario: Scenario, on_notification: Optional[Callable[[Notification], None]] = None
) -> SimulationResult:
    """Replay every event of a scenario.

    Args:
        scenario: Scenario to replay
        on_notification: Called for each listener notification as it happens

    Returns:
        Final repository state and all recorded notifications
    """
    service, repository = build_service(scenario)
    recorder = RecordingListener(on_notification)
    service.add_status_listener(recorder)

    for event in scenario.events:
        apply_event(service, repository, event)

    _LOGGER.info(
        f"Scenario finished: {repository.get_arming_status().value}/"
        f"{repository.get_alarm_status().value} after {len(scenario.events)} events"
    )
    return SimulationResult(service, repository, recorder.notifications)
