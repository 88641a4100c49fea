"""Scenario file loading for the simulator."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from .const.defaults import CAT_CONFIDENCE_THRESHOLD
from .const.states import AlarmStatus, ArmingStatus, SensorType
from .exceptions import CatpointConfigError
from .sensor import Sensor

_LOGGER = logging.getLogger(__name__)

EVENT_ARM = "arm"
EVENT_SENSOR = "sensor"
EVENT_IMAGE = "image"


@dataclass
class ScenarioEvent:
    """One scripted input to the security service.

    ``kind`` is "arm", "sensor" or "image". For "arm" the target is an
    ArmingStatus, for "sensor" a sensor name, for "image" the detector's
    answer. ``active`` is only used by sensor events; None selects the
    variant that reacts to the sensor's existing state.
    """

    kind: str
    target: Any
    active: Optional[bool] = None


@dataclass
class Scenario:
    """Initial system state plus the events to replay."""

    arming_status: ArmingStatus = ArmingStatus.DISARMED
    alarm_status: AlarmStatus = AlarmStatus.NO_ALARM
    confidence_threshold: float = CAT_CONFIDENCE_THRESHOLD
    sensors: list[Sensor] = field(default_factory=list)
    events: list[ScenarioEvent] = field(default_factory=list)

    @property
    def detector_answers(self) -> list[bool]:
        """Answers the scripted detector must give, in order."""
        return [bool(e.target) for e in self.events if e.kind == EVENT_IMAGE]


def load_config(config_path: Path) -> Scenario:
    """Load a scenario from a YAML file.

    Args:
        config_path: Path to scenario file

    Returns:
        Parsed scenario

    Raises:
        CatpointConfigError: If the file is missing or malformed
    """
    try:
        with open(config_path) as f:
            raw = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise CatpointConfigError(f"Config file not found: {config_path}") from e
    except yaml.YAMLError as e:
        raise CatpointConfigError(f"Error parsing config: {e}") from e

    scenario = parse_config(raw)
    _LOGGER.debug(
        f"Loaded {config_path}: {len(scenario.sensors)} sensors, {len(scenario.events)} events"
    )
    return scenario


def parse_config(raw: Any) -> Scenario:
    """Build a Scenario from already-decoded YAML data.

    Raises:
        CatpointConfigError: If the data has an unknown shape or bad values
    """
    cfg = _normalize_config(raw)
    if cfg is None:
        raise CatpointConfigError(
            "Invalid config. Expected mapping with 'system', 'sensors' and 'events', e.g.\n"
            "system:\n  arming_status: DISARMED\n"
            "sensors:\n  - name: Front Door\n    type: DOOR\n"
            "events:\n  - arm: ARMED_HOME"
        )

    system = cfg["system"]
    try:
        sensors = [_parse_sensor(s) for s in cfg["sensors"]]
        scenario = Scenario(
            arming_status=_parse_enum(ArmingStatus, system.get("arming_status", "DISARMED")),
            alarm_status=_parse_enum(AlarmStatus, system.get("alarm_status", "NO_ALARM")),
            confidence_threshold=float(
                system.get("confidence_threshold", CAT_CONFIDENCE_THRESHOLD)
            ),
            sensors=sensors,
            events=[_parse_event(e) for e in cfg["events"]],
        )
    except (KeyError, TypeError, ValueError) as e:
        raise CatpointConfigError(f"Invalid config: {e}") from e

    names = [s.name for s in sensors]
    if len(set(names)) != len(names):
        raise CatpointConfigError("Sensor names must be unique")
    for event in scenario.events:
        if event.kind == EVENT_SENSOR and event.target not in names:
            raise CatpointConfigError(f"Event refers to unknown sensor: {event.target}")

    return scenario


def _normalize_config(raw: Any) -> dict | None:
    """Normalize YAML into a dict with 'system', 'sensors' and 'events'.

    Accepts these shapes:
    - {system: {...}, sensors: [...], events: [...]} (every key optional)
    - [{...}] (list with a single mapping)
    - [{arm: ...}, {image: ...}] (bare event list)
    Returns None if unknown.
    """
    if raw is None:
        return {"system": {}, "sensors": [], "events": []}
    data = raw
    if isinstance(raw, list):
        if len(raw) == 1 and isinstance(raw[0], dict) and _is_scenario_mapping(raw[0]):
            data = raw[0]
        else:
            data = {"events": raw}
    if not isinstance(data, dict) or not _is_scenario_mapping(data):
        return None

    system = data.get("system") or {}
    sensors = data.get("sensors") or []
    events = data.get("events") or []
    if not isinstance(system, dict) or not isinstance(sensors, list) or not isinstance(events, list):
        return None
    return {"system": system, "sensors": sensors, "events": events}


def _is_scenario_mapping(data: dict) -> bool:
    return bool(data) and set(data.keys()) <= {"system", "sensors", "events"}


def _parse_enum(enum_cls: Any, value: Any) -> Any:
    return enum_cls(str(value).strip().upper())


def _parse_bool(value: Any, key: str) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"{key} must be true or false, got {value!r}")
    return value


def _parse_sensor(data: Any) -> Sensor:
    if isinstance(data, str):
        data = {"name": data}
    if not isinstance(data, dict) or "name" not in data:
        raise ValueError(f"sensor entry needs a name: {data!r}")
    sensor_type = _parse_enum(SensorType, data.get("type", SensorType.DOOR.value))
    return Sensor.from_dict({**data, "type": sensor_type.value})


def _parse_event(data: Any) -> ScenarioEvent:
    if not isinstance(data, dict):
        raise ValueError(f"event must be a mapping: {data!r}")
    if EVENT_ARM in data:
        return ScenarioEvent(EVENT_ARM, _parse_enum(ArmingStatus, data[EVENT_ARM]))
    if EVENT_SENSOR in data:
        active = data.get("active")
        if active is not None:
            active = _parse_bool(active, "active")
        return ScenarioEvent(EVENT_SENSOR, str(data[EVENT_SENSOR]), active)
    if EVENT_IMAGE in data:
        return ScenarioEvent(EVENT_IMAGE, _parse_bool(data[EVENT_IMAGE], EVENT_IMAGE))
    raise ValueError(f"unknown event: {data!r}")
