"""catpoint - alarm decision engine for a home security controller.

Decides the alarm status from sensor activity, the arming mode and camera
cat detection, and notifies status listeners of every change. Storage and
image classification are injected collaborators.

Example:
    >>> from catpoint import (
    ...     ArmingStatus, InMemorySecurityRepository, FakeCatDetector,
    ...     SecurityService, Sensor, SensorType,
    ... )
    >>>
    >>> repository = InMemorySecurityRepository()
    >>> service = SecurityService(repository, FakeCatDetector(seed=1))
    >>> door = Sensor("Front Door", SensorType.DOOR)
    >>> service.add_sensor(door)
    >>> service.set_arming_status(ArmingStatus.ARMED_AWAY)
    >>> service.change_sensor_activation_status(door, True)
    >>> service.get_alarm_status()
    <AlarmStatus.PENDING_ALARM: 'PENDING_ALARM'>
"""

from . import const, exceptions
from .const.states import AlarmStatus, ArmingStatus, SensorType
from .image import CatDetector, FakeCatDetector, ScriptedCatDetector
from .listener import ListenerRegistry, StatusListener
from .repository import InMemorySecurityRepository, SecurityRepository
from .sensor import Sensor
from .service import SecurityService

__version__ = "0.1.0"

__all__ = [
    # Core
    "SecurityService",
    # Entities and states
    "Sensor",
    "AlarmStatus",
    "ArmingStatus",
    "SensorType",
    # Collaborator contracts
    "SecurityRepository",
    "CatDetector",
    "StatusListener",
    "ListenerRegistry",
    # Reference implementations
    "InMemorySecurityRepository",
    "FakeCatDetector",
    "ScriptedCatDetector",
    # Submodules
    "const",
    "exceptions",
    # Version
    "__version__",
]
