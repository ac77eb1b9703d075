"""
Crayon gutter rendering.
"""

from typing import List, Optional

import pygame

from ..config.settings import DrawConfig, Tool


def draw_gutter_line(target: pygame.Surface, gutter_width: float, config: DrawConfig):
    x = int(gutter_width)
    pygame.draw.line(target, config.GUTTER_LINE_COLOR, (x, 0), (x, target.get_height()),
                     config.GUTTER_LINE_WIDTH)


def draw_tool_strip(target: pygame.Surface, tools: List[Tool], selected_index: int,
                    config: DrawConfig, gutter_width: Optional[float] = None,
                    tool_height: Optional[float] = None):
    """Draw the palette down the gutter; unselected crayons sit indented to the left."""
    gutter_width = config.GUTTER_WIDTH if gutter_width is None else gutter_width
    tool_height = config.TOOL_HEIGHT if tool_height is None else tool_height
    indent = config.CRAYON_UNSELECTED_INDENT

    draw_gutter_line(target, gutter_width, config)
    if gutter_width <= 0 or tool_height <= 0:
        return

    body_height = max(1, int(tool_height * 0.6))
    for i, tool in enumerate(tools):
        left = 0 if i == selected_index else -indent
        top = int(config.CRAYON_IMAGE_TOP_OFFSET + i * tool_height + (tool_height - body_height) / 2)
        swatch = config.ERASER_SWATCH_COLOR if tool.is_eraser else tool.color
        body = pygame.Rect(left, top, int(gutter_width) - indent, body_height)
        pygame.draw.rect(target, swatch, body)
        pygame.draw.rect(target, (0, 0, 0), body, 1)

        if not tool.is_eraser:
            # Crayon tip
            tip_x = body.right
            mid_y = body.centery
            pygame.draw.polygon(target, swatch, [
                (tip_x, body.top), (tip_x + indent - 2, mid_y), (tip_x, body.bottom - 1)])
