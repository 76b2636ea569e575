"""Millisecond software timers driven by a periodic handler."""

from __future__ import annotations

import enum
import heapq
import itertools
import time
from dataclasses import dataclass, field
from typing import Callable

TICKS_PERIOD = 0x80000000
NO_EXPIRY = 0xFFFFFFFF
"""Returned by ms_to_next_expiry when no timer is pending."""

_U32 = 0xFFFFFFFF


def ticks_diff(t1: int, t0: int) -> int:
    """Signed difference t1 - t0 of two wrapping millisecond tick counts."""
    half = TICKS_PERIOD // 2
    return ((t1 - t0 + half) & (TICKS_PERIOD - 1)) - half


class TimerMode(enum.IntEnum):
    ONE_SHOT = 1
    PERIODIC = 2


@dataclass(eq=False)
class SoftTimerEntry:
    """A timer: its callback is called with the entry itself when it expires."""

    callback: Callable[["SoftTimerEntry"], object]
    mode: TimerMode = TimerMode.ONE_SHOT
    delta_ms: int = 0
    expiry_ms: int = field(default=0)


class _Node:
    __slots__ = ("entry", "seq")

    def __init__(self, entry: SoftTimerEntry, seq: int) -> None:
        self.entry = entry
        self.seq = seq

    def __lt__(self, other: _Node) -> bool:
        diff = ticks_diff(self.entry.expiry_ms, other.entry.expiry_ms)
        if diff != 0:
            return diff < 0
        return self.seq < other.seq


def _monotonic_ms() -> int:
    return time.monotonic_ns() // 1_000_000


class SoftTimer:
    """A queue of timers ordered by expiry time."""

    def __init__(self, clock: Callable[[], int] | None = None) -> None:
        self._clock = clock or _monotonic_ms
        self._heap: list[_Node] = []
        self._counter = itertools.count()
        self._paused = False

    @property
    def paused(self) -> bool:
        return self._paused

    def __len__(self) -> int:
        return len(self._heap)

    def _now(self) -> int:
        return self._clock() & _U32

    def _push(self, entry: SoftTimerEntry) -> None:
        heapq.heappush(self._heap, _Node(entry, next(self._counter)))

    def insert(self, entry: SoftTimerEntry, initial_delta_ms: int) -> None:
        """Schedule entry to expire initial_delta_ms from now."""
        entry.expiry_ms = (self._now() + initial_delta_ms) & _U32
        self._push(entry)

    def _run(self, run_callbacks: bool) -> None:
        now = self._now()
        while self._heap and ticks_diff(self._heap[0].entry.expiry_ms, now) <= 0:
            entry = heapq.heappop(self._heap).entry
            if run_callbacks:
                entry.callback(entry)
            if entry.mode == TimerMode.PERIODIC:
                entry.expiry_ms = (entry.expiry_ms + entry.delta_ms) & _U32
                self._push(entry)

    def handle(self) -> None:
        """Fire every expired timer unless the timer is paused."""
        if not self._paused:
            self._run(True)

    def set_pause(self, paused: bool, run_callbacks: bool = True) -> None:
        """Pause or resume; on resume, catch up on timers that expired meanwhile."""
        if self._paused and not paused:
            self._run(run_callbacks)
        self._paused = paused

    def ms_to_next_expiry(self) -> int:
        if not self._heap:
            return NO_EXPIRY
        return max(ticks_diff(self._heap[0].entry.expiry_ms, self._now()), 0)

    def deinit(self) -> None:
        """Drop every pending timer and unpause."""
        self._heap.clear()
        self._paused = False