from itertools import islice

import pytest

from bitboard.iters import RepeatIterator


def test_repeats_in_order():
    it = RepeatIterator([1, 2, 3])
    assert list(islice(it, 7)) == [1, 2, 3, 1, 2, 3, 1]


def test_iter_returns_self():
    it = RepeatIterator("ab")
    assert iter(it) is it


def test_single_item_repeats():
    assert list(islice(RepeatIterator(["x"]), 3)) == ["x", "x", "x"]


def test_empty_sequence_raises():
    with pytest.raises(IndexError):
        next(RepeatIterator([]))


def test_length_checked_each_step():
    items = [1, 2, 3]
    it = RepeatIterator(items)
    assert next(it) == 1
    assert next(it) == 2
    items.pop()
    assert next(it) == 1
    items.append(9)
    assert next(it) == 2
    assert next(it) == 9