"""
Raster canvas: the persistent pygame surface crayon strokes and shake blots land on.
"""

import pygame

from ..utils.gesture_utils import Point


class Raster:
    """Persistent off-screen canvas that strokes are composited into."""

    def __init__(self, width: int, height: int, background=(255, 255, 255)) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"raster size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.background = background
        self._surface = pygame.Surface((width, height))
        self.clear()

    def draw_segment(self, start: Point, end: Point, color, width: float) -> None:
        thickness = max(1, int(round(width)))
        p1 = start.as_int_tuple()
        p2 = end.as_int_tuple()
        pygame.draw.line(self._surface, color, p1, p2, thickness)
        if thickness > 2:
            # Round caps so consecutive wide segments join without notches.
            radius = thickness // 2
            pygame.draw.circle(self._surface, color, p1, radius)
            pygame.draw.circle(self._surface, color, p2, radius)

    def erase_disc(self, center: Point, radius: int) -> None:
        pygame.draw.circle(self._surface, self.background, center.as_int_tuple(), max(0, int(radius)))

    def clear(self) -> None:
        self._surface.fill(self.background)

    def present(self, target: pygame.Surface) -> None:
        target.blit(self._surface, (0, 0))

    def get_pixel(self, x: int, y: int):
        return tuple(self._surface.get_at((x, y)))[:3]

    def get_surface(self) -> pygame.Surface:
        return self._surface
