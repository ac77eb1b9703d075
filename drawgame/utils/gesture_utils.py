"""
Shared geometry helpers for pointer tracking and stroke drawing.
"""

import math
from typing import List, Tuple


class Point:
    """Represents a 2D point in surface-local pixels."""

    __slots__ = ('x', 'y')

    def __init__(self, x: float, y: float):
        self.x = float(x)
        self.y = float(y)

    def __repr__(self):
        return f"Point({self.x:.1f}, {self.y:.1f})"

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return abs(self.x - other.x) < 1e-10 and abs(self.y - other.y) < 1e-10

    def as_int_tuple(self) -> Tuple[int, int]:
        """Pixel coordinates for the rasterizer."""
        return int(round(self.x)), int(round(self.y))

    def distance_to(self, other: 'Point') -> float:
        """Calculate Euclidean distance to another point."""
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)


class GeometryUtils:
    """Utility class for geometric calculations."""

    @staticmethod
    def clamp_left(point: Point, min_x: float) -> Point:
        """Push a point right so that it never lies left of min_x."""
        return Point(max(point.x, min_x), point.y)

    @staticmethod
    def calculate_path_length(points: List[Point]) -> float:
        """Calculate total path length."""
        if len(points) < 2:
            return 0.0

        length = 0.0
        for i in range(1, len(points)):
            length += points[i - 1].distance_to(points[i])
        return length
