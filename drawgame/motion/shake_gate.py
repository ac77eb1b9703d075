"""
Shake gate: decides once per tick whether the shake-erase effect is active.
"""

import logging
from typing import Optional, Protocol

from .oscillation import DisabledOscillationDetector

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_MS = 500


class AudioCue(Protocol):
    def play(self) -> None: ...

    def pause(self) -> None: ...


class AxisDetector(Protocol):
    def last_event_time(self) -> Optional[int]: ...


class ShakeGate:
    """Combines X and Y oscillation detectors with the face-down flag."""

    def __init__(self, detector_x: AxisDetector, detector_y: AxisDetector,
                 window_ms: int = DEFAULT_WINDOW_MS, sound: Optional[AudioCue] = None):
        if window_ms < 0:
            raise ValueError(f"window_ms must be non-negative, got {window_ms}")
        self.detector_x = detector_x
        self.detector_y = detector_y
        self.window_ms = window_ms
        self.sound = sound
        self.shaking = False

    @classmethod
    def disabled(cls, sound: Optional[AudioCue] = None) -> 'ShakeGate':
        """A gate with no sensors behind it; always reports not shaking."""
        return cls(DisabledOscillationDetector(0), DisabledOscillationDetector(1), sound=sound)

    @property
    def enabled(self) -> bool:
        return getattr(self.detector_x, 'enabled', True) or getattr(self.detector_y, 'enabled', True)

    def _recent(self, detector: AxisDetector, now: int) -> bool:
        last = detector.last_event_time()
        return last is not None and now - last <= self.window_ms

    def is_shaking(self, now: int, face_down: bool) -> bool:
        """Evaluate the gate at `now` (milliseconds) and drive the shake sound."""
        shaking = face_down and (self._recent(self.detector_x, now) or
                                 self._recent(self.detector_y, now))

        if shaking != self.shaking:
            logger.debug(f"Shake {'started' if shaking else 'stopped'} at {now}ms")
        self.shaking = shaking

        if self.sound is not None:
            if shaking:
                self.sound.play()
            else:
                self.sound.pause()
        return shaking
