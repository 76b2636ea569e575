"""Images for a 5x5 LED matrix: construction, pixel access and arithmetic."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from numbers import Real

from .pixels import (
    MAX_BRIGHTNESS,
    Greyscale,
    Monochrome5x5,
    blit,
    copy_image,
    invert_image,
)

DISPLAY_WIDTH = 5
DISPLAY_HEIGHT = 5
FALLBACK_CHAR = "?"


class Font:
    """A 5x5 bitmap font.

    Each glyph is five row bytes; bit 4 of a row is the leftmost column.
    """

    def __init__(self, glyphs: Mapping[str, Sequence[int]]) -> None:
        self._glyphs: dict[str, tuple[int, ...]] = {}
        for char, rows in glyphs.items():
            rows = tuple(int(row) for row in rows)
            if len(rows) != DISPLAY_HEIGHT:
                raise ValueError(f"glyph for {char!r} needs {DISPLAY_HEIGHT} rows")
            self._glyphs[char] = rows

    def glyph(self, char: str) -> tuple[int, ...]:
        """Return the rows for char, or those of '?' if the font lacks it."""
        rows = self._glyphs.get(char)
        if rows is None:
            rows = self._glyphs.get(FALLBACK_CHAR)
        if rows is None:
            raise KeyError(char)
        return rows

    def pixel(self, char: str, x: int, y: int) -> int:
        """Return 1 if the glyph of char is lit at (x, y), else 0."""
        return (self.glyph(char)[y] >> (4 - x)) & 1


def _glyph_buffer(char: str, font: Font | None) -> Greyscale:
    if font is None:
        raise TypeError("a font is needed to make an image from a character")
    result = Greyscale(DISPLAY_WIDTH, DISPLAY_HEIGHT)
    for x in range(DISPLAY_WIDTH):
        for y in range(DISPLAY_HEIGHT):
            result.set_pixel(x, y, font.pixel(char, x, y) * MAX_BRIGHTNESS)
    return result


def _parse(text: str) -> Greyscale:
    rows: list[list[int]] = [[]]
    for c in text:
        if c in "\n:":
            rows.append([])
        elif c == " ":
            rows[-1].append(0)
        elif "0" <= c <= "9":
            rows[-1].append(ord(c) - ord("0"))
        else:
            raise ValueError("unexpected character in Image definition")
    if not rows[-1]:
        # The last line was terminated (or the text is empty).
        rows.pop()
    width = max((len(row) for row in rows), default=0)
    result = Greyscale(width, len(rows))
    for y, row in enumerate(rows):
        for x, value in enumerate(row):
            result.set_pixel(x, y, value)
    return result


class Image:
    """A rectangular image with brightness levels 0 to 9.

    Image() is a blank 5x5 image; Image("09:90") parses rows of digits
    separated by ':' or newlines; Image("A") is the font glyph for one
    character; Image(w, h) is blank and Image(w, h, data) takes w*h bytes.
    A pixel buffer may also be wrapped directly; a Monochrome5x5 buffer
    gives a read-only image.
    """

    __slots__ = ("_pixels",)

    def __init__(self, *args, font: Font | None = None) -> None:
        if len(args) == 0:
            self._pixels = Greyscale(DISPLAY_WIDTH, DISPLAY_HEIGHT)
        elif len(args) == 1:
            arg = args[0]
            if isinstance(arg, (Greyscale, Monochrome5x5)):
                self._pixels = arg
            elif isinstance(arg, str):
                if len(arg) == 1:
                    self._pixels = _glyph_buffer(arg, font)
                else:
                    self._pixels = _parse(arg)
            else:
                raise TypeError("Image(s) takes a string")
        elif len(args) in (2, 3):
            w, h = int(args[0]), int(args[1])
            if len(args) == 2:
                self._pixels = Greyscale(w, h)
            else:
                data = memoryview(args[2]).cast("B")
                if w < 0 or h < 0 or w * h != len(data):
                    raise ValueError("image data is incorrect size")
                pixels = Greyscale(w, h)
                values = iter(data)
                for y in range(h):
                    for x in range(w):
                        pixels.set_pixel(x, y, min(next(values), MAX_BRIGHTNESS))
                self._pixels = pixels
        else:
            raise TypeError("Image() takes 0 to 3 arguments")

    @classmethod
    def _wrap(cls, pixels: Greyscale | Monochrome5x5) -> Image:
        image = cls.__new__(cls)
        image._pixels = pixels
        return image

    def _mutable(self) -> Greyscale:
        if not isinstance(self._pixels, Greyscale):
            raise TypeError("image cannot be modified (try copying first)")
        return self._pixels

    def width(self) -> int:
        return self._pixels.width()

    def height(self) -> int:
        return self._pixels.height()

    def get_pixel(self, x: int, y: int) -> int:
        if x < 0 or y < 0:
            raise ValueError("index cannot be negative")
        if x < self.width() and y < self.height():
            return self._pixels.get_pixel(x, y)
        raise ValueError("index too large")

    def set_pixel(self, x: int, y: int, value: int) -> None:
        pixels = self._mutable()
        if x < 0 or y < 0:
            raise ValueError("index cannot be negative")
        if not 0 <= value <= MAX_BRIGHTNESS:
            raise ValueError("brightness out of bounds")
        if x < self.width() and y < self.height():
            pixels.set_pixel(x, y, value)
            return
        raise ValueError("index too large")

    def fill(self, value: int) -> None:
        pixels = self._mutable()
        if not 0 <= value <= MAX_BRIGHTNESS:
            raise ValueError("brightness out of bounds")
        pixels.fill(value)

    def blit(
        self,
        src: Image,
        x: int,
        y: int,
        w: int,
        h: int,
        xdest: int | None = None,
        ydest: int | None = None,
    ) -> None:
        """Copy the w*h area of src at (x, y) into this image at (xdest, ydest)."""
        pixels = self._mutable()
        if not isinstance(src, Image):
            raise TypeError("expecting an image")
        if (xdest is None) != (ydest is None):
            raise TypeError("must specify both offsets")
        if w < 0 or h < 0:
            raise ValueError("size cannot be negative")
        if xdest is None:
            xdest = ydest = 0
        blit(src._pixels, pixels, x, y, w, h, xdest, ydest)

    def crop(self, x: int, y: int, w: int, h: int) -> Image:
        w = max(w, 0)
        h = max(h, 0)
        result = Greyscale(w, h)
        blit(self._pixels, result, x, y, w, h, 0, 0)
        return Image._wrap(result)

    def _shift(self, x: int, y: int) -> Image:
        w, h = self.width(), self.height()
        result = Greyscale(w, h)
        blit(self._pixels, result, x, y, w, h, 0, 0)
        return Image._wrap(result)

    def shift_left(self, n: int) -> Image:
        return self._shift(n, 0)

    def shift_right(self, n: int) -> Image:
        return self._shift(-n, 0)

    def shift_up(self, n: int) -> Image:
        return self._shift(0, n)

    def shift_down(self, n: int) -> Image:
        return self._shift(0, -n)

    def copy(self) -> Image:
        return Image._wrap(copy_image(self._pixels))

    def invert(self) -> Image:
        return Image._wrap(invert_image(self._pixels))

    def _sum(self, other: Image, add: bool) -> Image:
        w, h = self.width(), self.height()
        if other.width() != w or other.height() != h:
            raise ValueError("images must be the same size")
        result = Greyscale(w, h)
        for x in range(w):
            for y in range(h):
                lval = self._pixels.get_pixel(x, y)
                rval = other._pixels.get_pixel(x, y)
                if add:
                    value = min(lval + rval, MAX_BRIGHTNESS)
                else:
                    value = max(0, lval - rval)
                result.set_pixel(x, y, value)
        return Image._wrap(result)

    def _dim(self, factor: float) -> Image:
        if factor < 0:
            raise ValueError("brightness multiplier must not be negative")
        w, h = self.width(), self.height()
        result = Greyscale(w, h)
        for x in range(w):
            for y in range(h):
                value = int(min(self._pixels.get_pixel(x, y) * factor + 0.5, MAX_BRIGHTNESS))
                result.set_pixel(x, y, value)
        return Image._wrap(result)

    def __add__(self, other: object) -> Image:
        if not isinstance(other, Image):
            return NotImplemented
        return self._sum(other, True)

    def __sub__(self, other: object) -> Image:
        if not isinstance(other, Image):
            return NotImplemented
        return self._sum(other, False)

    def __mul__(self, factor: object) -> Image:
        if not isinstance(factor, Real):
            return NotImplemented
        return self._dim(float(factor))

    def __truediv__(self, divisor: object) -> Image:
        if not isinstance(divisor, Real):
            return NotImplemented
        return self._dim(1.0 / float(divisor))

    def _rows(self) -> list[str]:
        return [
            "".join(
                "0123456789"[self._pixels.get_pixel(x, y)] for x in range(self.width())
            )
            + ":"
            for y in range(self.height())
        ]

    def __repr__(self) -> str:
        return "Image('" + "".join(self._rows()) + "')"

    def __str__(self) -> str:
        body = "'\n    '".join(self._rows())
        return "Image(\n    '" + body + "'\n)"


def image_for_char(char: str, font: Font) -> Image:
    """Return a new 5x5 image showing the glyph of char."""
    return Image._wrap(_glyph_buffer(char, font))