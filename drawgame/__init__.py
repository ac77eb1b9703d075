"""
Drawgame Package
A multi-touch crayon drawing toy with shake-to-erase.
"""

from .core.tracker import PointerTracker, PointerAction, PointerSample, RawPointerEvent
from .drawing.surface import DrawingSurface
from .drawing.raster import Raster
from .motion.oscillation import OscillationDetector
from .motion.shake_gate import ShakeGate

__version__ = "1.0.0"
__all__ = [
    "PointerTracker",
    "PointerAction",
    "PointerSample",
    "RawPointerEvent",
    "DrawingSurface",
    "Raster",
    "OscillationDetector",
    "ShakeGate",
]
