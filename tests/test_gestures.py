import pytest

from bitboard.gestures import (
    LIST_SIZE,
    Gesture,
    GestureTracker,
    gesture_from_name,
    strength,
)


def make_tracker(current=Gesture.NONE):
    state = {"now": current}
    return GestureTracker(lambda: state["now"]), state


@pytest.mark.parametrize(
    "name",
    ["", "up", "down", "left", "right", "face up", "face down", "freefall",
     "2g", "3g", "6g", "8g", "shake"],
)
def test_name_round_trip(name):
    assert gesture_from_name(name).label == name


def test_known_names():
    assert gesture_from_name("shake") is Gesture.SHAKE
    assert gesture_from_name("face up") is Gesture.FACE_UP


@pytest.mark.parametrize("name", ["jump", "Up", "face_up", 3])
def test_invalid_gesture_name(name):
    with pytest.raises(ValueError, match="invalid gesture"):
        gesture_from_name(name)


def test_strength_worked_example():
    assert strength(3, 4, 0) == 5


def test_strength_truncates():
    assert strength(1, 1, 1) == 1


def test_strength_symmetric_in_sign():
    assert strength(-300, 400, -1200) == strength(300, -400, 1200)


def test_current_gesture_follows_source():
    tracker, state = make_tracker(Gesture.FACE_DOWN)
    assert tracker.current_gesture() == "face down"
    state["now"] = Gesture.UP
    assert tracker.current_gesture() == "up"
    state["now"] = 0
    assert tracker.current_gesture() == ""


def test_is_gesture():
    tracker, _ = make_tracker(Gesture.LEFT)
    assert tracker.is_gesture("left") is True
    assert tracker.is_gesture("right") is False


def test_is_gesture_rejects_unknown_name():
    tracker, _ = make_tracker()
    with pytest.raises(ValueError):
        tracker.is_gesture("wobble")


def test_was_gesture_reports_and_clears():
    tracker, _ = make_tracker()
    tracker.on_event(Gesture.SHAKE)
    assert tracker.was_gesture("shake") is True
    assert tracker.was_gesture("shake") is False


def test_was_gesture_clears_history_only_for_that_flag():
    tracker, _ = make_tracker()
    tracker.on_event(Gesture.UP)
    tracker.on_event(Gesture.DOWN)
    assert tracker.was_gesture("up") is True
    assert tracker.get_gestures() == ()
    assert tracker.was_gesture("down") is True


def test_get_gestures_in_order_and_cleared():
    tracker, _ = make_tracker()
    for g in (Gesture.UP, Gesture.SHAKE, Gesture.FREEFALL):
        tracker.on_event(g)
    assert tracker.get_gestures() == ("up", "shake", "freefall")
    assert tracker.get_gestures() == ()


def test_history_is_bounded():
    tracker, _ = make_tracker()
    for _ in range(LIST_SIZE + 5):
        tracker.on_event(Gesture.G2)
    assert len(tracker.get_gestures()) == LIST_SIZE


def test_unknown_events_ignored():
    tracker, _ = make_tracker()
    tracker.on_event(0)
    tracker.on_event(max(Gesture) + 1)
    tracker.on_event(-1)
    assert tracker.get_gestures() == ()
    assert tracker.was_gesture("") is False


def test_integer_events_accepted():
    tracker, _ = make_tracker()
    tracker.on_event(int(Gesture.G8))
    assert tracker.get_gestures() == ("8g",)


def test_invalidate_and_update():
    tracker, _ = make_tracker()
    assert tracker.up_to_date is False
    tracker.current_gesture()
    assert tracker.up_to_date is True
    tracker.invalidate()
    assert tracker.up_to_date is False
    tracker.get_gestures()
    assert tracker.up_to_date is True