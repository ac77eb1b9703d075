"""
Logging utilities for drawing sessions and shake erasing.
"""

import datetime
import logging
import time
from typing import Optional, Tuple

from ..config.settings import Tool

logger = logging.getLogger(__name__)


class SessionLogger:
    """Prints drawing session events and mirrors them to a debug file."""

    def __init__(self, debug_file: Optional[str] = 'drawgame_debug.log'):
        self.debug_file = None
        self.session_start = 0.0
        self.blot_count = 0
        if debug_file:
            try:
                self.debug_file = open(debug_file, 'w')
                self.debug_file.write(f"Debug logging started at {datetime.datetime.now()}\n")
                self.debug_file.flush()
            except OSError as e:
                logger.warning(f"Could not open debug file {debug_file}: {e}")

    def _emit(self, message: str):
        timestamp = datetime.datetime.now().strftime("%H:%M:%S.%f")[:-3]
        line = f"[{timestamp}] {message}"
        print(line)

        if self.debug_file:
            try:
                self.debug_file.write(line + "\n")
                self.debug_file.flush()
            except (OSError, ValueError) as e:
                logger.warning(f"Debug file write failed: {e}")

    def log_interaction_start(self):
        """Log the first finger touching down."""
        self.session_start = time.time()
        self.blot_count = 0
        self._emit("🖍️ DRAWING STARTED")

    def log_interaction_stop(self):
        """Log the last finger lifting."""
        duration = time.time() - self.session_start if self.session_start else 0.0
        self._emit(f"✋ DRAWING STOPPED after {duration:.1f}s")
        self.session_start = 0.0

    def log_tool_selected(self, index: int, tool: Tool):
        """Log a new crayon pick."""
        kind = 'ERASER' if tool.is_eraser else 'CRAYON'
        self._emit(f"🎨 {kind} {index}: {tool.name} (width {tool.width:g})")

    def log_blot(self, center: Tuple[int, int], radius: int):
        """Log one shake-erase blot."""
        self.blot_count += 1
        self._emit(f"🫨 SHAKE BLOT #{self.blot_count}: center={center} radius={radius}px")

    def close(self):
        """Close the debug file."""
        if self.debug_file:
            self.debug_file.close()
            self.debug_file = None
