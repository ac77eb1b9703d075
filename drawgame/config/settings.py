"""
Configuration settings for the drawing game.
"""

from dataclasses import dataclass
from typing import List, Tuple

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class Tool:
    """One entry of the crayon palette."""
    name: str
    color: Color
    width: float
    is_eraser: bool = False


class DrawConfig:
    """Configuration constants for drawing, tool selection and shake erase."""

    # Canvas
    WINDOW_WIDTH = 1280
    WINDOW_HEIGHT = 800
    BACKGROUND_COLOR = (255, 255, 255)
    GUTTER_LINE_COLOR = (0, 0, 0)
    GUTTER_LINE_WIDTH = 2

    # Crayon gutter (in pixels)
    GUTTER_WIDTH = 96
    TOOL_HEIGHT = 56
    CRAYON_IMAGE_TOP_OFFSET = 100
    CRAYON_UNSELECTED_INDENT = 15

    # Palette: eight crayons, black, then the eraser
    CRAYON_WIDTH = 8.0
    ERASER_WIDTH = 64.0
    CRAYONS = [
        ('red', (255, 0, 0)),
        ('orange', (255, 102, 0)),
        ('yellow', (255, 255, 0)),
        ('green', (0, 255, 0)),
        ('blue', (0, 0, 255)),
        ('indigo', (57, 100, 195)),
        ('purple', (102, 51, 153)),
        ('pink', (229, 119, 196)),
        ('black', (0, 0, 0)),
    ]
    ERASER_SWATCH_COLOR = (229, 119, 196)

    # Shake detection
    OSCILLATION_THRESHOLD = 5.0  # m/s^2
    SHAKE_WINDOW_MS = 500
    TICK_HZ = 30  # at least 20 to catch short shakes
    STANDARD_GRAVITY = 9.80665

    # Sounds (directories scanned for .ogg/.wav files)
    SQUEAK_SOUND_DIR = 'sounds/squeak'
    SHAKE_SOUND_DIR = 'sounds/shake'

    # Session debug log
    DEBUG_LOG_FILE = 'drawgame_debug.log'

    def tools(self) -> List[Tool]:
        """Build the ordered palette, eraser last."""
        palette = [Tool(name, color, self.CRAYON_WIDTH) for name, color in self.CRAYONS]
        palette.append(Tool('eraser', self.BACKGROUND_COLOR, self.ERASER_WIDTH, is_eraser=True))
        return palette
