"""Tests for the listener registry."""

from dataclasses import dataclass, field
from unittest.mock import Mock

from catpoint.const.states import AlarmStatus
from catpoint.listener import ListenerRegistry, StatusListener


class TestListenerRegistry:
    """Test listener registration and broadcast."""

    def test_add_is_idempotent(self):
        """Adding the same listener twice keeps one registration."""
        registry = ListenerRegistry()
        listener = Mock(spec=StatusListener)
        registry.add(listener)
        registry.add(listener)
        assert len(registry) == 1

        registry.cat_detected(True)
        listener.on_cat_detected.assert_called_once_with(True)

    def test_remove_unknown_is_noop(self):
        """Removing a listener that was never added does not fail."""
        registry = ListenerRegistry()
        registry.remove(Mock(spec=StatusListener))
        assert len(registry) == 0

    def test_remove(self):
        """Removed listeners stop receiving events."""
        registry = ListenerRegistry()
        listener = Mock(spec=StatusListener)
        registry.add(listener)
        registry.remove(listener)
        assert listener not in registry

        registry.sensor_status_changed()
        listener.on_sensor_status_changed.assert_not_called()

    def test_broadcast_in_registration_order(self):
        """Listeners are called in the order they registered."""
        registry = ListenerRegistry()
        order = []

        class Named(StatusListener):
            def __init__(self, name):
                self.name = name

            def on_alarm_status_changed(self, alarm_status):
                order.append((self.name, alarm_status))

        for name in ("a", "b", "c"):
            registry.add(Named(name))

        registry.alarm_status_changed(AlarmStatus.ALARM)
        assert order == [
            ("a", AlarmStatus.ALARM),
            ("b", AlarmStatus.ALARM),
            ("c", AlarmStatus.ALARM),
        ]

    def test_listener_may_unregister_during_broadcast(self):
        """Broadcast iterates a snapshot of the registry."""
        registry = ListenerRegistry()
        late = Mock(spec=StatusListener)

        class OneShot(StatusListener):
            def on_cat_detected(self, is_cat):
                registry.remove(self)
                registry.add(late)

        first = OneShot()
        registry.add(first)

        registry.cat_detected(False)
        assert first not in registry
        late.on_cat_detected.assert_not_called()

        registry.cat_detected(True)
        late.on_cat_detected.assert_called_once_with(True)

    def test_base_listener_methods_are_noops(self):
        """The base class accepts every notification."""
        listener = StatusListener()
        listener.on_alarm_status_changed(AlarmStatus.NO_ALARM)
        listener.on_sensor_status_changed()
        listener.on_cat_detected(True)

    def test_unhashable_listener(self):
        """Listeners that define __eq__ without __hash__ can register."""

        @dataclass
        class Display(StatusListener):
            name: str
            seen: list = field(default_factory=list)

            def on_cat_detected(self, is_cat):
                self.seen.append(is_cat)

        registry = ListenerRegistry()
        panel = Display("panel")
        twin = Display("panel")
        registry.add(panel)
        registry.add(panel)
        registry.add(twin)
        assert len(registry) == 2

        registry.cat_detected(True)
        assert panel.seen == [True]
        assert twin.seen == [True]

        registry.remove(panel)
        assert panel not in registry
        assert twin in registry
