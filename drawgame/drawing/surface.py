"""
Drawing surface: turns gesture callbacks into crayon strokes and tool picks.

Drags inside the left gutter pick a crayon from the palette; drags elsewhere
extend the dragging pointer's stroke and rasterize the new segment with the
crayon selected at that moment. Shaking erases random blots via
`erase_region`.
"""

import logging
import math
import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..config.settings import DrawConfig, Tool
from ..utils.gesture_utils import GeometryUtils, Point
from ..utils.logger import SessionLogger
from .raster import Raster

logger = logging.getLogger(__name__)


@dataclass
class Stroke:
    """Path owned by one pointer for as long as it touches."""
    pointer_id: int
    points: List[Point] = field(default_factory=list)

    @property
    def last_point(self) -> Optional[Point]:
        return self.points[-1] if self.points else None

    def extend(self, point: Point) -> Optional[Point]:
        """Append a point, returning the previous end of the path."""
        previous = self.last_point
        self.points.append(point)
        return previous


class DrawingSurface:
    """Gesture handler that draws strokes and picks tools."""

    def __init__(self, raster: Raster, config: Optional[DrawConfig] = None,
                 tools: Optional[List[Tool]] = None, squeak=None,
                 rng: Optional[random.Random] = None,
                 session_logger: Optional[SessionLogger] = None,
                 gutter_width: Optional[float] = None,
                 tool_height: Optional[float] = None,
                 top_offset: Optional[float] = None):
        self.config = config or DrawConfig()
        self.raster = raster
        self.tools = tools if tools is not None else self.config.tools()
        if not self.tools:
            raise ValueError("at least one tool is required")
        self.squeak = squeak
        self.rng = rng or random.Random()
        self.session_logger = session_logger

        self.gutter_width = self.config.GUTTER_WIDTH if gutter_width is None else gutter_width
        self.tool_height = self.config.TOOL_HEIGHT if tool_height is None else tool_height
        self.top_offset = self.config.CRAYON_IMAGE_TOP_OFFSET if top_offset is None else top_offset
        if self.gutter_width <= 0:
            logger.warning(f"Gutter width {self.gutter_width} leaves no tool strip; the whole canvas draws")
        if self.tool_height <= 0:
            logger.warning(f"Tool height {self.tool_height} is not positive; every pick selects tool 0")

        self.selected_index = 0
        self.strokes: Dict[int, Stroke] = {}

    @property
    def selected_tool(self) -> Tool:
        return self.tools[self.selected_index]

    @property
    def tool_count(self) -> int:
        return len(self.tools)

    # Gesture callbacks

    def on_interaction_start(self):
        if self.squeak is not None:
            self.squeak.play()
        if self.session_logger:
            self.session_logger.log_interaction_start()

    def on_interaction_stop(self):
        if self.squeak is not None:
            self.squeak.pause()
        if self.strokes:
            # Pointers still owning a stroke were ended by a cancel.
            self.strokes.clear()
        if self.session_logger:
            self.session_logger.log_interaction_stop()

    def on_touch_start(self, pointer_id: int, position: Point):
        start = GeometryUtils.clamp_left(position, self.gutter_width)
        self.strokes[pointer_id] = Stroke(pointer_id, [start])

    def on_touch_stop(self, pointer_id: int):
        stroke = self.strokes.pop(pointer_id, None)
        if stroke is not None:
            logger.debug(f"Pointer {pointer_id} lifted after {len(stroke.points)} points, "
                         f"{GeometryUtils.calculate_path_length(stroke.points):.0f}px")

    def on_drag(self, pointer_id: int, current: Point, previous: Point):
        if self.gutter_width > 0 and current.x <= self.gutter_width:
            self.select_tool_at(current.y)
            return

        stroke = self.strokes.get(pointer_id)
        if stroke is None:
            return
        end = GeometryUtils.clamp_left(current, self.gutter_width)
        start = stroke.extend(end)
        tool = self.selected_tool
        self.raster.draw_segment(start, end, tool.color, tool.width)

    # Tools

    def tool_index_at(self, y: float) -> int:
        """Palette slot under a gutter y-coordinate; may be out of range."""
        if self.tool_height <= 0:
            return 0
        return math.floor((y - self.top_offset) / self.tool_height)

    def select_tool_at(self, y: float) -> bool:
        """Select the tool under y. Returns False if y is outside the palette."""
        if not math.isfinite(y):
            return False
        index = self.tool_index_at(y)
        if not 0 <= index < self.tool_count:
            return False
        if index != self.selected_index:
            self.selected_index = index
            if self.session_logger:
                self.session_logger.log_tool_selected(index, self.selected_tool)
        return True

    # Shake erase

    def erase_region(self, seed: Optional[int] = None) -> Tuple[Point, int]:
        """Erase one random blot. Returns its center and radius."""
        rng = random.Random(seed) if seed is not None else self.rng
        width = self.raster.width
        height = self.raster.height
        x = rng.randrange(width)
        y = rng.randrange(height)
        radius = rng.randrange(max(1, width // 2)) + width // 4

        center = Point(x, y)
        self.raster.erase_disc(center, radius)
        if self.session_logger:
            self.session_logger.log_blot((x, y), radius)
        return center, radius
