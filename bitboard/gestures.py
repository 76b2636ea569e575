"""Accelerometer gesture names, detection history and acceleration strength."""

from __future__ import annotations

import enum
import math
from typing import Callable

LIST_SIZE = 16
"""Number of gestures kept in the history between reads."""


class Gesture(enum.IntEnum):
    """Gestures reported by the accelerometer, with their event numbers."""

    NONE = 0
    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4
    FACE_UP = 5
    FACE_DOWN = 6
    FREEFALL = 7
    G3 = 8
    G6 = 9
    G8 = 10
    SHAKE = 11
    G2 = 12

    @property
    def label(self) -> str:
        """The name used for this gesture in user code."""
        return _NAMES[self]


_NAMES: dict[Gesture, str] = {
    Gesture.NONE: "",
    Gesture.UP: "up",
    Gesture.DOWN: "down",
    Gesture.LEFT: "left",
    Gesture.RIGHT: "right",
    Gesture.FACE_UP: "face up",
    Gesture.FACE_DOWN: "face down",
    Gesture.FREEFALL: "freefall",
    Gesture.G2: "2g",
    Gesture.G3: "3g",
    Gesture.G6: "6g",
    Gesture.G8: "8g",
    Gesture.SHAKE: "shake",
}

_BY_NAME: dict[str, Gesture] = {name: gesture for gesture, name in _NAMES.items()}


def gesture_from_name(name: str) -> Gesture:
    """Return the gesture with the given name; raise ValueError for an unknown one."""
    try:
        return _BY_NAME[name]
    except (KeyError, TypeError):
        raise ValueError("invalid gesture") from None


def strength(x: int, y: int, z: int) -> int:
    """Magnitude of an acceleration sample, truncated to an integer."""
    return int(math.sqrt(x * x + y * y + z * z))


class GestureTracker:
    """Records gesture events and answers questions about them.

    current is called to learn the gesture the accelerometer sees right now;
    it returns a Gesture or its event number.
    """

    def __init__(self, current: Callable[[], int]) -> None:
        self._current = current
        self._seen: set[Gesture] = set()
        self._history: list[Gesture] = []
        self._up_to_date = False

    @property
    def up_to_date(self) -> bool:
        """Whether a sample has been taken since the last invalidation."""
        return self._up_to_date

    def invalidate(self) -> None:
        """Mark the sample as stale so the next query takes a new one."""
        self._up_to_date = False

    def _update(self) -> None:
        self._up_to_date = True

    def _now(self) -> Gesture:
        self._update()
        try:
            return Gesture(int(self._current()))
        except ValueError:
            return Gesture.NONE

    def on_event(self, value: int) -> None:
        """Record a gesture event; values outside the known gestures are ignored."""
        if not Gesture.NONE < value <= max(Gesture):
            return
        gesture = Gesture(int(value))
        self._seen.add(gesture)
        if len(self._history) < LIST_SIZE:
            self._history.append(gesture)

    def current_gesture(self) -> str:
        """Name of the gesture seen right now."""
        return self._now().label

    def is_gesture(self, name: str) -> bool:
        """Whether the named gesture is the one seen right now."""
        gesture = gesture_from_name(name)
        return self._now() == gesture

    def was_gesture(self, name: str) -> bool:
        """Whether the named gesture occurred since last asked; clears it and the history."""
        gesture = gesture_from_name(name)
        self._update()
        result = gesture in self._seen
        self._seen.discard(gesture)
        self._history.clear()
        return result

    def get_gestures(self) -> tuple[str, ...]:
        """Names of the gestures recorded since the last read, oldest first; clears them."""
        self._update()
        names = tuple(gesture.label for gesture in self._history)
        self._history.clear()
        return names