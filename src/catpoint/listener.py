"""Status listener capability and registry."""

import logging
from typing import Callable

from .const.states import AlarmStatus

_LOGGER = logging.getLogger(__name__)


class StatusListener:
    """Receives notifications from the security service.

    All methods default to no-ops; override the ones you care about.
    """

    def on_alarm_status_changed(self, alarm_status: AlarmStatus) -> None:
        """Called after the alarm status is stored."""

    def on_sensor_status_changed(self) -> None:
        """Called after the arming status changes.

        Listeners can re-read sensors and statuses from the service.
        """

    def on_cat_detected(self, is_cat: bool) -> None:
        """Called with the result of every processed image."""


class ListenerRegistry:
    """Ordered set of status listeners.

    Adding a listener twice keeps one registration; removing an unknown
    listener does nothing.
    """

    def __init__(self) -> None:
        # Keyed by id() so unhashable listeners can register
        self._listeners: dict[int, StatusListener] = {}

    def add(self, listener: StatusListener) -> None:
        """Register a listener."""
        self._listeners[id(listener)] = listener
        _LOGGER.debug(f"Listener registered: {listener!r} ({len(self._listeners)} total)")

    def remove(self, listener: StatusListener) -> None:
        """Unregister a listener."""
        if self._listeners.pop(id(listener), None) is not None:
            _LOGGER.debug(f"Listener removed: {listener!r}")

    def broadcast(self, notify: Callable[[StatusListener], None]) -> None:
        """Call ``notify`` once for each registered listener.

        Iterates a snapshot, so listeners may register or unregister others
        from inside a callback. Listener exceptions propagate.
        """
        for listener in list(self._listeners.values()):
            notify(listener)

    def alarm_status_changed(self, alarm_status: AlarmStatus) -> None:
        self.broadcast(lambda sl: sl.on_alarm_status_changed(alarm_status))

    def sensor_status_changed(self) -> None:
        self.broadcast(lambda sl: sl.on_sensor_status_changed())

    def cat_detected(self, is_cat: bool) -> None:
        self.broadcast(lambda sl: sl.on_cat_detected(is_cat))

    def __contains__(self, listener: object) -> bool:
        return id(listener) in self._listeners

    def __len__(self) -> int:
        return len(self._listeners)
