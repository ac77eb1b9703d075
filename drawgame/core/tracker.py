"""
Multi-pointer touch tracking.

Normalizes raw pointer events (several simultaneous contacts per event) into
an ordered stream of gesture callbacks:

    on_interaction_start
        on_touch_start(id) -> on_drag(id)* -> on_touch_stop(id)   (per pointer)
    on_interaction_stop
"""

import enum
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Protocol

from ..utils.gesture_utils import Point

logger = logging.getLogger(__name__)


class PointerAction(enum.Enum):
    """Kinds of raw pointer events produced by an input source."""
    DOWN = 'down'
    POINTER_DOWN = 'pointer_down'
    UP = 'up'
    POINTER_UP = 'pointer_up'
    MOVE = 'move'
    CANCEL = 'cancel'
    HOVER_MOVE = 'hover_move'
    OUTSIDE = 'outside'


@dataclass
class PointerSample:
    """One contact reported in a raw event."""
    pointer_id: int
    x: float
    y: float

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)


@dataclass
class RawPointerEvent:
    """A raw event: its kind, which contact changed, and every contact touching."""
    action: PointerAction
    action_index: int = 0
    pointers: List[PointerSample] = field(default_factory=list)

    def changed_pointer(self) -> Optional[PointerSample]:
        """The contact that went down or up, if the index is valid."""
        if 0 <= self.action_index < len(self.pointers):
            return self.pointers[self.action_index]
        return None


class GestureHandler(Protocol):
    """Callbacks emitted by PointerTracker."""

    def on_interaction_start(self) -> None: ...

    def on_interaction_stop(self) -> None: ...

    def on_touch_start(self, pointer_id: int, position: Point) -> None: ...

    def on_touch_stop(self, pointer_id: int) -> None: ...

    def on_drag(self, pointer_id: int, current: Point, previous: Point) -> None: ...


class PointerTracker:
    """Tracks active pointers and dispatches gesture callbacks to a handler."""

    def __init__(self, handler: GestureHandler):
        self.handler = handler
        # pointer id -> last known position
        self.touches: Dict[int, Point] = {}

    @property
    def active_count(self) -> int:
        return len(self.touches)

    def is_interacting(self) -> bool:
        return bool(self.touches)

    def handle(self, event: RawPointerEvent) -> bool:
        """Handle an incoming raw event. Returns True if the kind was handled."""
        action = event.action

        if action in (PointerAction.DOWN, PointerAction.POINTER_DOWN):
            sample = event.changed_pointer()
            if sample is not None:
                self._touch_down(sample.pointer_id, sample.position)
            return True

        if action in (PointerAction.UP, PointerAction.POINTER_UP):
            sample = event.changed_pointer()
            if sample is not None:
                self._touch_up(sample.pointer_id, sample.position)
            return True

        if action == PointerAction.MOVE:
            for sample in event.pointers:
                if sample.pointer_id in self.touches:
                    self._drag(sample.pointer_id, sample.position)
            return True

        if action == PointerAction.CANCEL:
            if self.touches:
                # Aggregate stop only; consumers drop per-pointer state on it.
                logger.debug(f"Cancel with {len(self.touches)} active pointer(s)")
                self.touches.clear()
                self.handler.on_interaction_stop()
            return True

        return False

    def _touch_down(self, pointer_id: int, position: Point):
        if pointer_id in self.touches:
            # Repeated down for a live pointer: keep one start per lifetime.
            self._drag(pointer_id, position)
            return

        if not self.touches:
            self.handler.on_interaction_start()
        self.handler.on_touch_start(pointer_id, position)
        self._drag(pointer_id, position)

    def _touch_up(self, pointer_id: int, position: Point):
        if pointer_id not in self.touches:
            logger.debug(f"Ignoring up for unknown pointer {pointer_id}")
            return

        self._drag(pointer_id, position)
        self.handler.on_touch_stop(pointer_id)
        del self.touches[pointer_id]
        if not self.touches:
            self.handler.on_interaction_stop()

    def _drag(self, pointer_id: int, position: Point):
        """Report a drag against the stored position, or register a new pointer."""
        previous = self.touches.get(pointer_id)
        if previous is not None:
            self.handler.on_drag(pointer_id, position, previous)
        self.touches[pointer_id] = position
