"""
Utilities package for geometry and session logging.
"""

from .gesture_utils import (
    Point,
    GeometryUtils,
)
from .logger import SessionLogger

__all__ = [
    'Point',
    'GeometryUtils',
    'SessionLogger',
]
