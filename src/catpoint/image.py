"""Cat detector contract and simple detectors."""

import logging
import random
from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Iterable

from .exceptions import CatpointDetectorError

_LOGGER = logging.getLogger(__name__)


class CatDetector(ABC):
    """Image classifier that answers "is there a cat in this picture?"."""

    @abstractmethod
    def contains_cat(self, image: Any, confidence_threshold: float) -> bool:
        """Check whether the image contains a cat.

        Args:
            image: Camera frame in whatever form the detector understands
            confidence_threshold: Minimum confidence (percent) for a match

        Returns:
            True if a cat is present with at least the given confidence
        """


class FakeCatDetector(CatDetector):
    """Detector that answers at random.

    Stands in for a real classifier during demos. Pass a seed for a
    repeatable sequence.
    """

    def __init__(self, seed: int | None = None):
        self._random = random.Random(seed)

    def contains_cat(self, image: Any, confidence_threshold: float) -> bool:
        result = self._random.random() < 0.5
        _LOGGER.debug(f"Fake detector answered {result} (threshold={confidence_threshold})")
        return result


class ScriptedCatDetector(CatDetector):
    """Detector that replays a fixed sequence of answers."""

    def __init__(self, answers: Iterable[bool] = ()):
        self._answers: deque[bool] = deque(bool(a) for a in answers)
        self.calls: list[tuple[Any, float]] = []

    def queue(self, answer: bool) -> None:
        """Append an answer to the script."""
        self._answers.append(bool(answer))

    @property
    def remaining(self) -> int:
        """Number of answers left."""
        return len(self._answers)

    def contains_cat(self, image: Any, confidence_threshold: float) -> bool:
        self.calls.append((image, confidence_threshold))
        if not self._answers:
            raise CatpointDetectorError("No scripted detector answers left")
        return self._answers.popleft()
