"""Tests for the sensor entity."""

import pytest

from catpoint.const.states import SensorType
from catpoint.sensor import Sensor


def test_defaults():
    sensor = Sensor("Front Door", SensorType.DOOR)
    assert sensor.active is False
    assert sensor.is_active is False
    assert sensor.sensor_id


def test_type_from_name():
    sensor = Sensor("Hall", "MOTION")
    assert sensor.sensor_type is SensorType.MOTION


def test_invalid_type():
    with pytest.raises(ValueError):
        Sensor("Hall", "LASER")


def test_identity_is_the_id():
    a = Sensor("Door", SensorType.DOOR, sensor_id="s1")
    b = Sensor("Renamed", SensorType.WINDOW, active=True, sensor_id="s1")
    c = Sensor("Door", SensorType.DOOR, sensor_id="s2")
    assert a == b
    assert a != c
    assert len({a, b, c}) == 2


def test_sort_by_name_then_type():
    window = Sensor("Back", SensorType.WINDOW)
    door = Sensor("Back", SensorType.DOOR)
    front = Sensor("Front", SensorType.DOOR)
    assert sorted([front, window, door]) == [door, window, front]


def test_dict_view():
    sensor = Sensor("Garage", SensorType.DOOR, active=True, sensor_id="g1")
    assert sensor.to_dict() == {"id": "g1", "name": "Garage", "type": "DOOR", "active": True}

    restored = Sensor.from_dict({"name": "Attic", "type": "window"})
    assert restored.sensor_type is SensorType.WINDOW
    assert restored.active is False


def test_repr():
    assert repr(Sensor("Hall", SensorType.MOTION, active=True)) == "<Sensor Hall [MOTION] (active)>"


@pytest.mark.parametrize("sensor_id, expected", [(0, "0"), ("", ""), (42, "42")])
def test_explicit_id_is_kept(sensor_id, expected):
    sensor = Sensor("Door", SensorType.DOOR, sensor_id=sensor_id)
    assert sensor.sensor_id == expected


def test_int_and_str_ids_sort_together():
    a = Sensor("Door", SensorType.DOOR, sensor_id=2)
    b = Sensor("Door", SensorType.DOOR, sensor_id="1")
    assert sorted([a, b]) == [b, a]


@pytest.mark.parametrize("active", ["false", "no", 1])
def test_from_dict_rejects_non_bool_active(active):
    with pytest.raises(ValueError, match="active must be true or false"):
        Sensor.from_dict({"name": "Door", "active": active})
