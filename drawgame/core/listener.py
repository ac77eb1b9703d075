"""
Touchscreen listener that turns evdev multitouch reports into raw pointer events.

Reading happens on a daemon thread; translated events are queued and the
host drains them from its own loop, so every tracker call stays on one thread.
"""

import threading
import queue
import logging
from typing import Dict, List, Optional, Tuple
from evdev import ecodes

from ..device.device_manager import DeviceManager
from .tracker import PointerAction, PointerSample, RawPointerEvent

logger = logging.getLogger(__name__)


class TouchListener:
    """Reads a protocol-B multitouch device and queues RawPointerEvents."""

    def __init__(self, target_size: Optional[Tuple[int, int]] = None,
                 device_manager: Optional[DeviceManager] = None):
        self.device_manager = device_manager or DeviceManager()
        self.target_size = target_size
        self.events: "queue.Queue[RawPointerEvent]" = queue.Queue()

        # Slot state
        self.current_slot = 0
        self.slot_data: Dict[int, Dict[str, float]] = {}
        self.active_slots: Dict[int, int] = {}  # slot -> tracking id, in touch order

        # Per-report changes
        self._placed: List[int] = []
        self._lifted: List[Tuple[int, int, float, float]] = []
        self._moved = False

        self.running = False
        self.thread = None

    def start(self) -> bool:
        """Start the touchscreen listener."""
        device = self.device_manager.find_device()
        if not device:
            logger.warning("No touchscreen found, touch input limited to the window")
            return False

        self.running = True
        self.thread = threading.Thread(target=self._event_loop)
        self.thread.daemon = True
        self.thread.start()
        return True

    def stop(self):
        """Stop the touchscreen listener."""
        self.running = False
        if self.thread:
            self.thread.join(timeout=1)

    def poll(self) -> List[RawPointerEvent]:
        """Drain every event queued since the last poll."""
        drained = []
        while True:
            try:
                drained.append(self.events.get_nowait())
            except queue.Empty:
                return drained

    def _event_loop(self):
        """Main event processing loop."""
        try:
            event_batch = []
            for event in self.device_manager.device.read_loop():
                if not self.running:
                    break

                event_batch.append(event)

                if event.type == ecodes.EV_SYN and event.code == ecodes.SYN_REPORT:
                    for raw in self.process_event_batch(event_batch):
                        self.events.put(raw)
                    event_batch = []

        except OSError as e:
            logger.error(f"Touchscreen read failed: {e}")
        except Exception as e:
            logging.error(f"Error in event loop: {e}")

    def process_event_batch(self, event_batch) -> List[RawPointerEvent]:
        """Translate one SYN_REPORT batch into raw pointer events."""
        for ev in event_batch:
            if ev.type == ecodes.EV_ABS:
                self._handle_abs_event(ev)
        return self._flush()

    def _handle_abs_event(self, ev):
        """Handle absolute coordinate events."""
        if ev.code == ecodes.ABS_MT_SLOT:
            self.current_slot = ev.value
        elif ev.code == ecodes.ABS_MT_TRACKING_ID:
            self._handle_tracking_id(ev.value)
        elif ev.code == ecodes.ABS_MT_POSITION_X:
            self._handle_position('x', ev.value)
        elif ev.code == ecodes.ABS_MT_POSITION_Y:
            self._handle_position('y', ev.value)

    def _handle_tracking_id(self, value: int):
        """Handle finger tracking ID changes."""
        slot = self.current_slot

        if value == -1:
            # Finger lifted
            if slot in self.active_slots:
                data = self.slot_data[slot]
                self._lifted.append((slot, self.active_slots[slot], data['x'], data['y']))
            elif slot in self._placed:
                # Placed and lifted within one report; never announced.
                self._placed.remove(slot)
        else:
            # Finger placed
            previous = self.slot_data.get(slot, {'x': 0.0, 'y': 0.0})
            self.slot_data[slot] = {'id': value, 'x': previous['x'], 'y': previous['y']}
            self._placed.append(slot)

    def _handle_position(self, axis: str, value: int):
        slot = self.current_slot
        if slot not in self.slot_data:
            self.slot_data[slot] = {'id': -1, 'x': 0.0, 'y': 0.0}
        self.slot_data[slot][axis] = float(value)
        if slot in self.active_slots and slot not in self._placed:
            self._moved = True

    def _scale(self, x: float, y: float) -> Tuple[float, float]:
        if not self.target_size:
            return x, y
        width, height = self.target_size
        return (x * width / self.device_manager.screen_width,
                y * height / self.device_manager.screen_height)

    def _sample(self, slot: int, pointer_id: int) -> PointerSample:
        data = self.slot_data[slot]
        x, y = self._scale(data['x'], data['y'])
        return PointerSample(pointer_id, x, y)

    def _touching(self) -> List[PointerSample]:
        return [self._sample(slot, pid) for slot, pid in self.active_slots.items()]

    def _flush(self) -> List[RawPointerEvent]:
        out = []

        for slot in self._placed:
            pointer_id = int(self.slot_data[slot]['id'])
            first = not self.active_slots
            if slot in self.active_slots:
                # Slot reused within the report; its previous contact lifts below.
                self.active_slots.pop(slot)
            self.active_slots[slot] = pointer_id
            pointers = self._touching()
            index = list(self.active_slots).index(slot)
            action = PointerAction.DOWN if first else PointerAction.POINTER_DOWN
            out.append(RawPointerEvent(action, index, pointers))

        if self._moved and self.active_slots:
            out.append(RawPointerEvent(PointerAction.MOVE, 0, self._touching()))

        for slot, pointer_id, last_x, last_y in self._lifted:
            still_here = self.active_slots.get(slot) == pointer_id
            pointers = self._touching()
            if still_here:
                index = list(self.active_slots).index(slot)
                del self.active_slots[slot]
            else:
                pointers.append(PointerSample(pointer_id, *self._scale(last_x, last_y)))
                index = len(pointers) - 1
            action = PointerAction.UP if not self.active_slots else PointerAction.POINTER_UP
            out.append(RawPointerEvent(action, index, pointers))

        self._placed = []
        self._lifted = []
        self._moved = False
        return out
