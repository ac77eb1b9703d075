"""Tests for per-axis oscillation detection."""

import math

import pytest

from drawgame.motion.oscillation import DisabledOscillationDetector, OscillationDetector


def test_no_event_before_any_sample():
    detector = OscillationDetector(5.0)
    assert detector.last_event_time() is None
    assert detector.event_count == 0


def test_alternating_crossings_record_one_event_each():
    """A sine sampled past the threshold N times in alternating sign gives N events."""
    detector = OscillationDetector(5.0, axis=0)
    flips = []
    previous_sign = 0
    for t in range(0, 2000, 10):
        value = 9.0 * math.sin(2 * math.pi * t / 400.0)
        detector.observe(value, t)
        if abs(value) > 5.0:
            sign = 1 if value > 0 else -1
            if sign != previous_sign:
                flips.append(t)
                previous_sign = sign

    assert len(flips) == 10
    assert detector.event_count == len(flips)
    assert detector.last_event_time() == flips[-1]


def test_event_timestamp_is_the_flip_sample():
    detector = OscillationDetector(5.0)
    detector.observe(6.0, 100)
    detector.observe(7.0, 110)
    detector.observe(2.0, 120)
    detector.observe(-6.0, 130)
    detector.observe(-8.0, 140)

    assert detector.event_count == 2
    assert detector.last_event_time() == 130
    assert detector.last_direction == -1


def test_steady_signal_past_threshold_fires_once():
    detector = OscillationDetector(5.0)
    for t in range(0, 1000, 20):
        detector.observe(9.8, t)

    assert detector.event_count == 1
    assert detector.last_event_time() == 0


def test_samples_at_or_below_threshold_are_ignored():
    detector = OscillationDetector(5.0)
    for t, value in enumerate([5.0, -5.0, 4.9, -0.1, 0.0]):
        detector.observe(value, t)

    assert detector.last_event_time() is None
    assert detector.last_direction == 0


def test_nan_never_fires():
    detector = OscillationDetector(5.0)
    detector.observe(float("nan"), 10)
    assert detector.last_event_time() is None

    detector.observe(6.0, 20)
    detector.observe(float("nan"), 30)
    assert detector.last_event_time() == 20


@pytest.mark.parametrize("threshold", [-1.0, float("nan")])
def test_invalid_threshold_rejected(threshold):
    with pytest.raises(ValueError):
        OscillationDetector(threshold)


def test_invalid_axis_rejected():
    with pytest.raises(ValueError):
        OscillationDetector(5.0, axis=3)


def test_disabled_detector_never_reports():
    detector = DisabledOscillationDetector(axis=1)
    detector.observe(100.0, 1)
    detector.observe(-100.0, 2)

    assert detector.last_event_time() is None
    assert not detector.enabled
