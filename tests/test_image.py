"""Tests for the bundled cat detectors."""

import pytest

from catpoint.exceptions import CatpointDetectorError
from catpoint.image import CatDetector, FakeCatDetector, ScriptedCatDetector


def test_abstract_contract():
    with pytest.raises(TypeError):
        CatDetector()


def test_fake_detector_is_repeatable_with_seed():
    a = FakeCatDetector(seed=7)
    b = FakeCatDetector(seed=7)
    answers_a = [a.contains_cat(None, 50.0) for _ in range(20)]
    answers_b = [b.contains_cat(None, 50.0) for _ in range(20)]
    assert answers_a == answers_b
    assert all(isinstance(x, bool) for x in answers_a)


def test_scripted_detector_replays_answers():
    detector = ScriptedCatDetector([True, False])
    detector.queue(True)
    assert detector.remaining == 3
    assert [detector.contains_cat(i, 50.0) for i in range(3)] == [True, False, True]
    assert detector.calls == [(0, 50.0), (1, 50.0), (2, 50.0)]


def test_scripted_detector_exhausted():
    detector = ScriptedCatDetector()
    with pytest.raises(CatpointDetectorError):
        detector.contains_cat("frame", 50.0)
