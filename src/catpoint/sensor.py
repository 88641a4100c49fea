"""Sensor entity."""

import logging
import uuid
from typing import Any

from .const.states import SensorType

_LOGGER = logging.getLogger(__name__)


class Sensor:
    """A binary activity source (door, window, motion) tracked by identity."""

    def __init__(
        self,
        name: str,
        sensor_type: SensorType | str,
        active: bool = False,
        sensor_id: str | int | None = None,
    ):
        """Initialize sensor.

        Args:
            name: Display name
            sensor_type: Sensor type (enum member or its name)
            active: Initial activation state (default: False)
            sensor_id: Unique key (default: random UUID)
        """
        self.sensor_id = str(sensor_id) if sensor_id is not None else str(uuid.uuid4())
        self.name = name
        self.sensor_type = SensorType(sensor_type)
        self.active = bool(active)

        _LOGGER.debug(f"Sensor {self.sensor_id} initialized: {name} ({self.sensor_type.value})")

    @property
    def is_active(self) -> bool:
        """Check if sensor is active."""
        return self.active

    def to_dict(self) -> dict[str, Any]:
        """Return a plain-dict view of the sensor."""
        return {
            "id": self.sensor_id,
            "name": self.name,
            "type": self.sensor_type.value,
            "active": self.active,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Sensor":
        """Build a sensor from a mapping with name/type/active/id keys.

        Raises:
            ValueError: If "active" is present but not a bool
        """
        active = data.get("active", False)
        if not isinstance(active, bool):
            raise ValueError(f"active must be true or false, got {active!r}")
        return cls(
            name=str(data["name"]),
            sensor_type=str(data.get("type", SensorType.DOOR.value)).upper(),
            active=active,
            sensor_id=data.get("id"),
        )

    def _sort_key(self) -> tuple[str, str, str]:
        return (self.name, self.sensor_type.value, self.sensor_id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sensor):
            return NotImplemented
        return self.sensor_id == other.sensor_id

    def __hash__(self) -> int:
        return hash(self.sensor_id)

    def __lt__(self, other: "Sensor") -> bool:
        return self._sort_key() < other._sort_key()

    def __repr__(self) -> str:
        """String representation."""
        state = "active" if self.active else "inactive"
        return f"<Sensor {self.name} [{self.sensor_type.value}] ({state})>"
