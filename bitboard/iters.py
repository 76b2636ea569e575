"""Endless iteration over an indexable sequence."""

from __future__ import annotations

from typing import Generic, Sequence, TypeVar

T = TypeVar("T")


class RepeatIterator(Generic[T]):
    """Yield the items of a sequence in order, starting over after the last.

    The length is looked up on every step, so the sequence may change size
    while it is being iterated.
    """

    def __init__(self, sequence: Sequence[T]) -> None:
        self._sequence = sequence
        self._index = -1

    def __iter__(self) -> RepeatIterator[T]:
        return self

    def __next__(self) -> T:
        self._index += 1
        if self._index >= len(self._sequence):
            self._index = 0
        return self._sequence[self._index]