"""Pixel buffers for small LED-matrix images and the operations shared by them."""

from __future__ import annotations

from typing import Iterable, Protocol, Sequence

MAX_BRIGHTNESS = 9
"""Brightest level a display pixel can show."""

MAX_LEVEL = 15
"""Largest level a greyscale buffer can store (four bits per pixel)."""


class PixelSource(Protocol):
    """Anything with a size and readable pixels."""

    def width(self) -> int: ...

    def height(self) -> int: ...

    def get_pixel(self, x: int, y: int) -> int: ...


class Greyscale:
    """A mutable image of any size with one brightness level per pixel."""

    __slots__ = ("_width", "_height", "_data")

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("image size cannot be negative")
        self._width = width
        self._height = height
        self._data = bytearray(width * height)

    def width(self) -> int:
        return self._width

    def height(self) -> int:
        return self._height

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"pixel ({x}, {y}) out of range")
        return y * self._width + x

    def get_pixel(self, x: int, y: int) -> int:
        return self._data[self._index(x, y)]

    def set_pixel(self, x: int, y: int, value: int) -> None:
        self._data[self._index(x, y)] = _check_level(value)

    def fill(self, value: int) -> None:
        level = _check_level(value)
        self._data[:] = bytes([level]) * len(self._data)

    def clear(self) -> None:
        self._data[:] = bytes(len(self._data))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Greyscale):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._data == other._data
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Greyscale({self._width}, {self._height})"


class Monochrome5x5:
    """An immutable 5x5 image whose pixels are either off or fully on."""

    __slots__ = ("_bits",)

    SIZE = 5

    def __init__(self, rows: Sequence[Iterable[int]]) -> None:
        rows = [list(row) for row in rows]
        if len(rows) != self.SIZE or any(len(row) != self.SIZE for row in rows):
            raise ValueError("a monochrome image needs 5 rows of 5 pixels")
        bits = 0
        for index, value in enumerate(v for row in rows for v in row):
            if int(value):
                bits |= 1 << index
        self._bits = bits

    def width(self) -> int:
        return self.SIZE

    def height(self) -> int:
        return self.SIZE

    def get_pixel(self, x: int, y: int) -> int:
        if not (0 <= x < self.SIZE and 0 <= y < self.SIZE):
            raise IndexError(f"pixel ({x}, {y}) out of range")
        return ((self._bits >> (y * self.SIZE + x)) & 1) * MAX_BRIGHTNESS

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Monochrome5x5):
            return NotImplemented
        return self._bits == other._bits

    def __hash__(self) -> int:
        return hash(self._bits)

    def __repr__(self) -> str:
        return f"Monochrome5x5(bits={self._bits:#09x})"


def _check_level(value: int) -> int:
    if not 0 <= value <= MAX_LEVEL:
        raise ValueError(f"pixel level {value} out of range 0..{MAX_LEVEL}")
    return value


def _clear_rect(dest: Greyscale, x0: int, y0: int, x1: int, y1: int) -> None:
    for i in range(max(x0, 0), min(x1, dest.width())):
        for j in range(max(y0, 0), min(y1, dest.height())):
            dest.set_pixel(i, j, 0)


def blit(
    src: PixelSource,
    dest: Greyscale,
    x: int,
    y: int,
    w: int,
    h: int,
    xdest: int,
    ydest: int,
) -> None:
    """Copy the w*h rectangle of src at (x, y) into dest at (xdest, ydest).

    Parts of the target rectangle that fall outside src are cleared. The copy
    is ordered so that src and dest may be the same buffer.
    """
    w = max(w, 0)
    h = max(h, 0)
    ix0 = max(0, x, -xdest, x - xdest)
    iy0 = max(0, y, -ydest, y - ydest)
    ix1 = min(dest.width() + x - xdest, src.width(), x + w)
    iy1 = min(dest.height() + y - ydest, src.height(), y + h)
    cx0 = max(0, xdest)
    cy0 = max(0, ydest)
    cx1 = min(dest.width(), xdest + w)
    cy1 = min(dest.height(), ydest + h)

    if ix0 >= ix1 or iy0 >= iy1:
        _clear_rect(dest, cx0, cy0, cx1, cy1)
        return

    xs = range(ix0, ix1) if x > xdest else range(ix1 - 1, ix0 - 1, -1)
    ys = range(iy0, iy1) if y > ydest else range(iy1 - 1, iy0 - 1, -1)
    dx = xdest - x
    dy = ydest - y
    for i in xs:
        for j in ys:
            dest.set_pixel(i + dx, j + dy, src.get_pixel(i, j))

    ix0 += dx
    iy0 += dy
    ix1 += dx
    iy1 += dy
    _clear_rect(dest, cx0, cy0, ix0, iy1)
    _clear_rect(dest, cx0, iy1, ix1, cy1)
    _clear_rect(dest, ix1, iy0, cx1, cy1)
    _clear_rect(dest, ix0, cy0, cx1, iy0)


def copy_image(src: PixelSource) -> Greyscale:
    """Return a mutable copy of any image."""
    result = Greyscale(src.width(), src.height())
    for y in range(src.height()):
        for x in range(src.width()):
            result.set_pixel(x, y, src.get_pixel(x, y))
    return result


def invert_image(src: PixelSource) -> Greyscale:
    """Return a copy with every brightness mirrored around MAX_BRIGHTNESS."""
    result = Greyscale(src.width(), src.height())
    for y in range(src.height()):
        for x in range(src.width()):
            result.set_pixel(x, y, MAX_BRIGHTNESS - src.get_pixel(x, y))
    return result