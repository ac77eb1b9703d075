"""
Oscillation detection on a single accelerometer axis.

An oscillation event is a reversal of the signal's direction where the new
sample is past the threshold. A device held steadily past the threshold
fires once, a shake fires on every swing:

        +---+   +---+
        |   |   |   |
    ----+   |   |   |   +---
            |   |   |   |
            +---+   +---+
"""

import math
from typing import Optional

AXIS_NAMES = {0: 'x', 1: 'y', 2: 'z'}


def _sign(value: float) -> int:
    return 1 if value > 0 else -1 if value < 0 else 0


class OscillationDetector:
    """Reports the time of the most recent direction reversal on one axis."""

    def __init__(self, threshold: float, axis: int = 0):
        if threshold < 0 or math.isnan(threshold):
            raise ValueError(f"threshold must be non-negative, got {threshold}")
        if axis not in AXIS_NAMES:
            raise ValueError(f"axis must be one of {sorted(AXIS_NAMES)}, got {axis}")
        self.threshold = threshold
        self.axis = axis
        self.last_direction = 0
        self._last_event_time: Optional[int] = None
        self.event_count = 0

    @property
    def enabled(self) -> bool:
        return True

    def observe(self, axis_value: float, now: int):
        """Feed one sample taken at `now` (milliseconds)."""
        # NaN fails the comparison, so it never fires.
        if not abs(axis_value) > self.threshold:
            return
        direction = _sign(axis_value)
        if direction == self.last_direction:
            return
        self.last_direction = direction
        self._last_event_time = now
        self.event_count += 1

    def last_event_time(self) -> Optional[int]:
        return self._last_event_time

    def __repr__(self):
        return (f"OscillationDetector(axis={AXIS_NAMES[self.axis]}, "
                f"threshold={self.threshold}, events={self.event_count})")


class DisabledOscillationDetector:
    """Stands in for an axis with no sensor behind it. Never reports an event."""

    axis = 0
    threshold = float('inf')
    last_direction = 0
    event_count = 0

    def __init__(self, axis: int = 0):
        self.axis = axis

    @property
    def enabled(self) -> bool:
        return False

    def observe(self, axis_value: float, now: int):
        pass

    def last_event_time(self) -> Optional[int]:
        return None

    def __repr__(self):
        return f"DisabledOscillationDetector(axis={AXIS_NAMES.get(self.axis, self.axis)})"
