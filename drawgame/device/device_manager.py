"""
Device management for touchscreen and accelerometer discovery.
"""

import evdev
from evdev import ecodes
import logging

logger = logging.getLogger(__name__)


class DeviceManager:
    """Finds the multitouch screen and the accelerometer, if present."""

    def __init__(self):
        self.device = None
        self.accelerometer = None
        self.screen_width = 1920  # Default
        self.screen_height = 1080   # Default
        self.accel_resolution = {}

    def _list_devices(self):
        devices = []
        for path in evdev.list_devices():
            try:
                devices.append(evdev.InputDevice(path))
            except OSError as e:
                logger.warning(f"Cannot open {path}: {e}")
        return devices

    def find_device(self):
        """Find and configure the touchscreen device."""
        for device in self._list_devices():
            if ecodes.INPUT_PROP_ACCELEROMETER in device.input_props():
                continue
            caps = device.capabilities()
            if ecodes.EV_ABS in caps:
                abs_caps = caps.get(ecodes.EV_ABS, [])
                abs_info = {code: info for code, info in abs_caps}

                # Look for multitouch slots
                if ecodes.ABS_MT_SLOT in abs_info:
                    if ecodes.ABS_MT_POSITION_X in abs_info:
                        self.screen_width = abs_info[ecodes.ABS_MT_POSITION_X].max + 1
                    if ecodes.ABS_MT_POSITION_Y in abs_info:
                        self.screen_height = abs_info[ecodes.ABS_MT_POSITION_Y].max + 1

                    self.device = device
                    logger.info(f"Found touchscreen: {device.name}")
                    logger.info(f"Screen resolution: {self.screen_width}x{self.screen_height}")
                    return device

        logger.error("No touchscreen device found")
        return None

    def find_accelerometer(self):
        """Find the first device that reports itself as an accelerometer."""
        for device in self._list_devices():
            if ecodes.INPUT_PROP_ACCELEROMETER not in device.input_props():
                continue
            abs_caps = device.capabilities().get(ecodes.EV_ABS, [])
            abs_info = {code: info for code, info in abs_caps}
            if not all(code in abs_info for code in (ecodes.ABS_X, ecodes.ABS_Y, ecodes.ABS_Z)):
                continue

            # Resolution is units per g; 0 means the driver does not say.
            self.accel_resolution = {
                code: abs_info[code].resolution
                for code in (ecodes.ABS_X, ecodes.ABS_Y, ecodes.ABS_Z)
            }
            self.accelerometer = device
            logger.info(f"Found accelerometer: {device.name}")
            return device

        logger.info("No accelerometer found, shake erase disabled")
        return None

    def get_device_info(self):
        """Get device and screen information."""
        return {
            'device': self.device,
            'accelerometer': self.accelerometer,
            'screen_width': self.screen_width,
            'screen_height': self.screen_height,
        }
