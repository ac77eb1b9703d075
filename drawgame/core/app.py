"""
Drawing game host: pygame window, input sources and the redraw tick.

Every tracker, gate and surface call happens on the pygame thread. The evdev
readers only queue events; they are drained once per tick.
"""

import logging
import random
from typing import Dict, List, Optional, Tuple

import pygame

from ..audio.random_sound import RandomSound, SilentSound
from ..config.settings import DrawConfig
from ..drawing.palette import draw_tool_strip
from ..drawing.raster import Raster
from ..drawing.surface import DrawingSurface
from ..motion.motion_listener import MotionListener, MotionSample, monotonic_ms
from ..motion.orientation import FaceDownSensor
from ..motion.oscillation import DisabledOscillationDetector, OscillationDetector
from ..motion.shake_gate import ShakeGate
from ..utils.logger import SessionLogger
from .listener import TouchListener
from .tracker import PointerAction, PointerSample, PointerTracker, RawPointerEvent

logger = logging.getLogger(__name__)

MOUSE_POINTER_ID = 1 << 20


class WindowPointerSource:
    """Translates pygame finger and mouse events into RawPointerEvents."""

    def __init__(self, size: Tuple[int, int], accept_fingers: bool = True):
        self.size = size
        self.accept_fingers = accept_fingers
        self.pointers: Dict[int, Tuple[float, float]] = {}

    def _samples(self) -> List[PointerSample]:
        return [PointerSample(pid, x, y) for pid, (x, y) in self.pointers.items()]

    def _down(self, pointer_id: int, x: float, y: float) -> RawPointerEvent:
        first = not self.pointers
        self.pointers.pop(pointer_id, None)
        self.pointers[pointer_id] = (x, y)
        index = list(self.pointers).index(pointer_id)
        action = PointerAction.DOWN if first else PointerAction.POINTER_DOWN
        return RawPointerEvent(action, index, self._samples())

    def _move(self, pointer_id: int, x: float, y: float) -> Optional[RawPointerEvent]:
        if pointer_id not in self.pointers:
            return None
        self.pointers[pointer_id] = (x, y)
        return RawPointerEvent(PointerAction.MOVE, 0, self._samples())

    def _up(self, pointer_id: int, x: float, y: float) -> Optional[RawPointerEvent]:
        if pointer_id not in self.pointers:
            return None
        self.pointers[pointer_id] = (x, y)
        samples = self._samples()
        index = list(self.pointers).index(pointer_id)
        del self.pointers[pointer_id]
        action = PointerAction.UP if not self.pointers else PointerAction.POINTER_UP
        return RawPointerEvent(action, index, samples)

    def translate(self, event) -> Optional[RawPointerEvent]:
        width, height = self.size

        if event.type in (pygame.FINGERDOWN, pygame.FINGERMOTION, pygame.FINGERUP):
            if not self.accept_fingers:
                return None
            x, y = event.x * width, event.y * height
            if event.type == pygame.FINGERDOWN:
                return self._down(event.finger_id, x, y)
            if event.type == pygame.FINGERMOTION:
                return self._move(event.finger_id, x, y)
            return self._up(event.finger_id, x, y)

        # Touches also arrive as synthesized mouse events; skip those.
        if event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEMOTION, pygame.MOUSEBUTTONUP):
            if getattr(event, 'touch', False):
                return None
            x, y = event.pos
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                return self._down(MOUSE_POINTER_ID, x, y)
            if event.type == pygame.MOUSEMOTION:
                return self._move(MOUSE_POINTER_ID, x, y)
            if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                return self._up(MOUSE_POINTER_ID, x, y)
            return None

        if event.type == pygame.WINDOWFOCUSLOST and self.pointers:
            self.pointers.clear()
            return RawPointerEvent(PointerAction.CANCEL)

        return None


class DrawApp:
    """Wires input, motion, audio and the drawing surface into one loop."""

    def __init__(self, config: Optional[DrawConfig] = None, use_touchscreen: bool = True,
                 use_sensors: bool = True, debug_file: Optional[str] = None):
        self.config = config or DrawConfig()
        self.use_touchscreen = use_touchscreen
        self.use_sensors = use_sensors
        self.rng = random.Random()
        self.session_logger = SessionLogger(debug_file or self.config.DEBUG_LOG_FILE)
        self.running = False

        self.screen = None
        self.clock = None
        self.touch_listener = None
        self.motion_listener = None

        # Shake erase is off until an accelerometer shows up.
        self.detector_x = DisabledOscillationDetector(0)
        self.detector_y = DisabledOscillationDetector(1)
        self.face_down = FaceDownSensor.disabled()
        self.squeak_sounds = SilentSound()
        self.shake_sounds = SilentSound()

        size = (self.config.WINDOW_WIDTH, self.config.WINDOW_HEIGHT)
        self.raster = Raster(size[0], size[1], self.config.BACKGROUND_COLOR)
        self.surface = DrawingSurface(self.raster, self.config, squeak=self.squeak_sounds,
                                      rng=self.rng, session_logger=self.session_logger)
        self.tracker = PointerTracker(self.surface)
        self.shake_gate = ShakeGate.disabled(sound=self.shake_sounds)
        self.window_pointers = WindowPointerSource(size)

    def start(self):
        pygame.init()
        self.screen = pygame.display.set_mode((self.config.WINDOW_WIDTH, self.config.WINDOW_HEIGHT))
        pygame.display.set_caption("Drawgame")
        self.clock = pygame.time.Clock()
        self._start_audio()

        if self.use_touchscreen:
            self.touch_listener = TouchListener((self.raster.width, self.raster.height))
            if self.touch_listener.start():
                # SDL sees the same screen; let evdev be the only finger source.
                self.window_pointers.accept_fingers = False
            else:
                self.touch_listener = None

        if self.use_sensors:
            self.enable_motion(MotionListener(config=self.config))

        self.running = True

    def _start_audio(self):
        try:
            pygame.mixer.init()
        except pygame.error as e:
            logger.warning(f"Audio unavailable: {e}")
            return
        self.squeak_sounds = RandomSound.from_directory(self.config.SQUEAK_SOUND_DIR, random.Random())
        self.shake_sounds = RandomSound.from_directory(self.config.SHAKE_SOUND_DIR, random.Random())
        self.surface.squeak = self.squeak_sounds
        self.shake_gate.sound = self.shake_sounds

    def enable_motion(self, motion_listener: MotionListener) -> bool:
        """Switch shake erase on if the listener finds an accelerometer."""
        if not motion_listener.start():
            return False
        self.motion_listener = motion_listener
        threshold = self.config.OSCILLATION_THRESHOLD
        self.detector_x = OscillationDetector(threshold, axis=0)
        self.detector_y = OscillationDetector(threshold, axis=1)
        self.face_down = FaceDownSensor()
        self.shake_gate = ShakeGate(self.detector_x, self.detector_y,
                                    self.config.SHAKE_WINDOW_MS, sound=self.shake_sounds)
        return True

    def feed_motion(self, samples: List[MotionSample]):
        for sample in samples:
            self.detector_x.observe(sample.axis(self.detector_x.axis), sample.timestamp_ms)
            self.detector_y.observe(sample.axis(self.detector_y.axis), sample.timestamp_ms)
            self.face_down.observe(sample.z)

    def handle_event(self, event) -> bool:
        if event.type == pygame.QUIT or (event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE):
            self.running = False
            return True
        raw = self.window_pointers.translate(event)
        if raw is None:
            return False
        return self.tracker.handle(raw)

    def tick(self, now: int) -> bool:
        """One redraw tick: drain input, evaluate shake, advance audio. Returns shaking."""
        if self.touch_listener:
            for raw in self.touch_listener.poll():
                self.tracker.handle(raw)
        if self.motion_listener:
            self.feed_motion(self.motion_listener.poll())

        shaking = self.shake_gate.is_shaking(now, self.face_down.is_face_down())
        if shaking:
            self.surface.erase_region()

        self.squeak_sounds.update()
        self.shake_sounds.update()
        return shaking

    def render(self):
        self.raster.present(self.screen)
        draw_tool_strip(self.screen, self.surface.tools, self.surface.selected_index, self.config,
                        self.surface.gutter_width, self.surface.tool_height)
        pygame.display.flip()

    def run(self):
        """Run the loop until the window closes."""
        self.start()
        try:
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                self.tick(monotonic_ms())
                self.render()
                self.clock.tick(self.config.TICK_HZ)
        finally:
            self.stop()

    def stop(self):
        self.running = False
        if self.touch_listener:
            self.touch_listener.stop()
        if self.motion_listener:
            self.motion_listener.stop()
        self.session_logger.close()
        pygame.quit()
