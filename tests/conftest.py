"""Shared fixtures for the drawgame tests."""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from drawgame.utils.gesture_utils import Point


class Recorder:
    """Gesture handler that records every callback in order."""

    def __init__(self):
        self.calls = []

    def on_interaction_start(self):
        self.calls.append(("interaction_start",))

    def on_interaction_stop(self):
        self.calls.append(("interaction_stop",))

    def on_touch_start(self, pointer_id, position):
        self.calls.append(("touch_start", pointer_id, position))

    def on_touch_stop(self, pointer_id):
        self.calls.append(("touch_stop", pointer_id))

    def on_drag(self, pointer_id, current, previous):
        self.calls.append(("drag", pointer_id, current, previous))

    def names(self):
        return [call[0] for call in self.calls]


class FakeRaster:
    """Raster stand-in that records draw and erase calls."""

    def __init__(self, width=640, height=480):
        self.width = width
        self.height = height
        self.background = (255, 255, 255)
        self.segments = []
        self.discs = []

    def draw_segment(self, start, end, color, width):
        self.segments.append((start, end, color, width))

    def erase_disc(self, center, radius):
        self.discs.append((center, radius))

    def present(self, target):
        pass


class FakeCue:
    """Audio cue that counts play/pause calls."""

    def __init__(self):
        self.playing = False
        self.plays = 0
        self.pauses = 0

    def play(self):
        self.plays += 1
        self.playing = True

    def pause(self):
        self.pauses += 1
        self.playing = False


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def fake_raster():
    return FakeRaster()


@pytest.fixture
def fake_cue():
    return FakeCue()


def pt(x, y):
    return Point(x, y)
