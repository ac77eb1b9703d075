"""
Device-motion effects: oscillation detection, face-down tracking and the
shake gate that decides when shaking erases the drawing.
"""

from .oscillation import OscillationDetector, DisabledOscillationDetector
from .orientation import FaceDownSensor
from .shake_gate import ShakeGate

__all__ = [
    'OscillationDetector',
    'DisabledOscillationDetector',
    'FaceDownSensor',
    'ShakeGate',
]
