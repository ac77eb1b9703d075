"""
Accelerometer listener that queues motion samples from an evdev device.
"""

import threading
import queue
import logging
import time
from dataclasses import dataclass
from typing import List, Optional
from evdev import ecodes

from ..config.settings import DrawConfig
from ..device.device_manager import DeviceManager

logger = logging.getLogger(__name__)


@dataclass
class MotionSample:
    """One accelerometer reading in m/s^2, stamped with monotonic milliseconds."""
    timestamp_ms: int
    x: float
    y: float
    z: float

    def axis(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]


def monotonic_ms() -> int:
    return int(time.monotonic() * 1000)


class MotionListener:
    """Reads an accelerometer on a daemon thread and queues MotionSamples."""

    AXES = {ecodes.ABS_X: 'x', ecodes.ABS_Y: 'y', ecodes.ABS_Z: 'z'}

    def __init__(self, device_manager: Optional[DeviceManager] = None, config: Optional[DrawConfig] = None):
        self.device_manager = device_manager or DeviceManager()
        self.config = config or DrawConfig()
        self.samples: "queue.Queue[MotionSample]" = queue.Queue()
        self.current = {'x': 0.0, 'y': 0.0, 'z': 0.0}
        self.running = False
        self.thread = None

    def start(self) -> bool:
        """Start reading; returns False when there is no accelerometer."""
        device = self.device_manager.find_accelerometer()
        if not device:
            return False

        self.running = True
        self.thread = threading.Thread(target=self._event_loop)
        self.thread.daemon = True
        self.thread.start()
        return True

    def stop(self):
        self.running = False
        if self.thread:
            self.thread.join(timeout=1)

    def poll(self) -> List[MotionSample]:
        """Drain every sample queued since the last poll."""
        drained = []
        while True:
            try:
                drained.append(self.samples.get_nowait())
            except queue.Empty:
                return drained

    def _event_loop(self):
        try:
            for event in self.device_manager.accelerometer.read_loop():
                if not self.running:
                    break
                sample = self.process_event(event)
                if sample is not None:
                    self.samples.put(sample)
        except OSError as e:
            logger.error(f"Accelerometer read failed: {e}")
        except Exception as e:
            logging.error(f"Error in motion loop: {e}")

    def to_ms2(self, code: int, value: int) -> float:
        """Convert a raw axis value to m/s^2 using the device resolution."""
        resolution = self.device_manager.accel_resolution.get(code, 0)
        if not resolution:
            return float(value)
        return value / resolution * self.config.STANDARD_GRAVITY

    def process_event(self, event, now: Optional[int] = None) -> Optional[MotionSample]:
        """Fold one evdev event into the current reading; emit a sample on SYN_REPORT."""
        if event.type == ecodes.EV_ABS and event.code in self.AXES:
            self.current[self.AXES[event.code]] = self.to_ms2(event.code, event.value)
        elif event.type == ecodes.EV_SYN and event.code == ecodes.SYN_REPORT:
            stamp = monotonic_ms() if now is None else now
            return MotionSample(stamp, self.current['x'], self.current['y'], self.current['z'])
        return None
