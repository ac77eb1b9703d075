"""
Drawing surface, persistent raster and crayon palette rendering.
"""

from .raster import Raster
from .surface import DrawingSurface, Stroke
from .palette import draw_tool_strip

__all__ = [
    'Raster',
    'DrawingSurface',
    'Stroke',
    'draw_tool_strip',
]
