"""Tests for multi-pointer tracking and gesture callback ordering."""

import random

import pytest

from drawgame.core.tracker import PointerAction, PointerSample, PointerTracker, RawPointerEvent
from drawgame.utils.gesture_utils import Point


def down(pointer_id, x, y, others=(), first=True):
    pointers = list(others) + [PointerSample(pointer_id, x, y)]
    action = PointerAction.DOWN if first else PointerAction.POINTER_DOWN
    return RawPointerEvent(action, len(pointers) - 1, pointers)


def up(pointer_id, x, y, others=(), last=True):
    pointers = list(others) + [PointerSample(pointer_id, x, y)]
    action = PointerAction.UP if last else PointerAction.POINTER_UP
    return RawPointerEvent(action, len(pointers) - 1, pointers)


def move(*samples):
    return RawPointerEvent(PointerAction.MOVE, 0, [PointerSample(*s) for s in samples])


def test_single_pointer_lifecycle(recorder):
    """Down, move, up produce start, drag, stop inside one interaction."""
    tracker = PointerTracker(recorder)

    assert tracker.handle(down(7, 10, 20))
    assert tracker.handle(move((7, 15, 25)))
    assert tracker.handle(up(7, 18, 30))

    assert recorder.calls == [
        ("interaction_start",),
        ("touch_start", 7, Point(10, 20)),
        ("drag", 7, Point(15, 25), Point(10, 20)),
        ("drag", 7, Point(18, 30), Point(15, 25)),
        ("touch_stop", 7),
        ("interaction_stop",),
    ]
    assert not tracker.is_interacting()


def test_first_sample_reports_no_drag(recorder):
    tracker = PointerTracker(recorder)
    tracker.handle(down(1, 5, 5))

    assert "drag" not in recorder.names()
    assert tracker.touches == {1: Point(5, 5)}


def test_second_pointer_does_not_restart_interaction(recorder):
    tracker = PointerTracker(recorder)
    first = PointerSample(1, 100, 100)

    tracker.handle(down(1, 100, 100))
    tracker.handle(down(2, 300, 100, others=[first], first=False))
    tracker.handle(up(1, 100, 100, others=[PointerSample(2, 300, 100)], last=False))

    assert recorder.names().count("interaction_start") == 1
    assert "interaction_stop" not in recorder.names()
    assert tracker.active_count == 1

    tracker.handle(up(2, 300, 100))
    assert recorder.names()[-1] == "interaction_stop"


def test_move_reports_every_pointer(recorder):
    tracker = PointerTracker(recorder)
    tracker.handle(down(1, 0, 0))
    tracker.handle(down(2, 50, 50, others=[PointerSample(1, 0, 0)], first=False))
    recorder.calls.clear()

    tracker.handle(move((1, 1, 1), (2, 51, 52)))

    assert recorder.calls == [
        ("drag", 1, Point(1, 1), Point(0, 0)),
        ("drag", 2, Point(51, 52), Point(50, 50)),
    ]
    assert tracker.touches[2] == Point(51, 52)


def test_up_draws_to_the_lift_point(recorder):
    tracker = PointerTracker(recorder)
    tracker.handle(down(3, 10, 10))
    tracker.handle(up(3, 40, 10))

    assert ("drag", 3, Point(40, 10), Point(10, 10)) in recorder.calls
    assert recorder.names().index("drag") < recorder.names().index("touch_stop")


def test_cancel_stops_interaction_once_without_touch_stops(recorder):
    tracker = PointerTracker(recorder)
    tracker.handle(down(1, 0, 0))
    tracker.handle(down(2, 5, 5, others=[PointerSample(1, 0, 0)], first=False))

    assert tracker.handle(RawPointerEvent(PointerAction.CANCEL))
    assert tracker.handle(RawPointerEvent(PointerAction.CANCEL))

    assert recorder.names().count("interaction_stop") == 1
    assert "touch_stop" not in recorder.names()
    assert tracker.touches == {}


def test_cancel_with_no_pointers_is_silent(recorder):
    tracker = PointerTracker(recorder)
    assert tracker.handle(RawPointerEvent(PointerAction.CANCEL))
    assert recorder.calls == []


@pytest.mark.parametrize("action", [PointerAction.HOVER_MOVE, PointerAction.OUTSIDE])
def test_unrecognized_kinds_are_not_handled(recorder, action):
    tracker = PointerTracker(recorder)
    tracker.handle(down(1, 0, 0))
    recorder.calls.clear()

    assert tracker.handle(RawPointerEvent(action, 0, [PointerSample(1, 9, 9)])) is False
    assert recorder.calls == []
    assert tracker.touches == {1: Point(0, 0)}


def test_up_for_unknown_pointer_is_ignored(recorder):
    tracker = PointerTracker(recorder)
    assert tracker.handle(up(99, 1, 1))
    assert recorder.calls == []


def test_move_after_cancel_does_not_resurrect_pointers(recorder):
    tracker = PointerTracker(recorder)
    tracker.handle(down(1, 0, 0))
    tracker.handle(RawPointerEvent(PointerAction.CANCEL))
    recorder.calls.clear()

    tracker.handle(move((1, 10, 10)))

    assert recorder.calls == []
    assert not tracker.is_interacting()


def test_repeated_down_is_a_drag(recorder):
    tracker = PointerTracker(recorder)
    tracker.handle(down(1, 0, 0))
    tracker.handle(down(1, 4, 4, first=False))

    assert recorder.names().count("touch_start") == 1
    assert recorder.calls[-1] == ("drag", 1, Point(4, 4), Point(0, 0))


def _random_session(rng, steps):
    """Generate raw events the way an input source would report them."""
    touching = {}
    next_id = 0
    for _ in range(steps):
        roll = rng.random()
        if roll < 0.3 or not touching:
            pid = next_id
            next_id += 1
            others = [PointerSample(p, x, y) for p, (x, y) in touching.items()]
            x, y = rng.uniform(0, 500), rng.uniform(0, 500)
            yield down(pid, x, y, others=others, first=not touching), len(touching) + 1
            touching[pid] = (x, y)
        elif roll < 0.65:
            for pid in touching:
                touching[pid] = (rng.uniform(0, 500), rng.uniform(0, 500))
            yield move(*[(p, x, y) for p, (x, y) in touching.items()]), len(touching)
        elif roll < 0.95:
            pid = rng.choice(list(touching))
            x, y = touching.pop(pid)
            others = [PointerSample(p, ox, oy) for p, (ox, oy) in touching.items()]
            yield up(pid, x, y, others=others, last=not touching), len(touching)
        elif roll < 0.97:
            touching.clear()
            yield RawPointerEvent(PointerAction.CANCEL), 0
        else:
            yield RawPointerEvent(PointerAction.HOVER_MOVE, 0, []), len(touching)


@pytest.mark.parametrize("seed", range(8))
def test_interaction_brackets_every_span_of_active_pointers(recorder, seed):
    """Start fires once when the count leaves zero, stop once when it returns."""
    tracker = PointerTracker(recorder)
    rng = random.Random(seed)
    expected_starts = expected_stops = 0
    previous_count = 0

    for event, count in _random_session(rng, 300):
        tracker.handle(event)
        assert tracker.active_count == count
        if previous_count == 0 and count > 0:
            expected_starts += 1
        if previous_count > 0 and count == 0:
            expected_stops += 1
        previous_count = count

    names = [n for n in recorder.names() if n.startswith("interaction")]
    assert names.count("interaction_start") == expected_starts
    assert names.count("interaction_stop") == expected_stops
    # Strictly alternating, beginning with a start
    for i, name in enumerate(names):
        assert name == ("interaction_start" if i % 2 == 0 else "interaction_stop")


@pytest.mark.parametrize("seed", range(8))
def test_per_pointer_callbacks_are_ordered(recorder, seed):
    """Each id sees one start, then drags, then one stop unless a cancel ended it."""
    tracker = PointerTracker(recorder)
    for event, _ in _random_session(random.Random(seed), 300):
        tracker.handle(event)

    per_pointer = {}
    for call in recorder.calls:
        if call[0] in ("touch_start", "drag", "touch_stop"):
            per_pointer.setdefault(call[1], []).append(call[0])

    for pid, names in per_pointer.items():
        assert names[0] == "touch_start", pid
        assert names.count("touch_start") == 1
        assert names.count("touch_stop") <= 1
        if "touch_stop" in names:
            assert names[-1] == "touch_stop"
        assert set(names[1:-1]) <= {"drag"}
