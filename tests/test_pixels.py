import pytest

from bitboard.pixels import (
    MAX_BRIGHTNESS,
    MAX_LEVEL,
    Greyscale,
    Monochrome5x5,
    blit,
    copy_image,
    invert_image,
)

HEART = [
    [0, 1, 0, 1, 0],
    [1, 1, 1, 1, 1],
    [1, 1, 1, 1, 1],
    [0, 1, 1, 1, 0],
    [0, 0, 1, 0, 0],
]


def _grid(img):
    return [[img.get_pixel(x, y) for x in range(img.width())] for y in range(img.height())]


def _numbered(w, h):
    img = Greyscale(w, h)
    for y in range(h):
        for x in range(w):
            img.set_pixel(x, y, (x + y * w) % (MAX_BRIGHTNESS + 1))
    return img


def test_new_greyscale_is_blank():
    img = Greyscale(3, 2)
    assert (img.width(), img.height()) == (3, 2)
    assert _grid(img) == [[0, 0, 0], [0, 0, 0]]


@pytest.mark.parametrize("value", range(MAX_LEVEL + 1))
def test_set_get_round_trip(value):
    img = Greyscale(3, 3)
    img.set_pixel(1, 2, value)
    assert img.get_pixel(1, 2) == value
    assert img.get_pixel(0, 2) == 0
    assert img.get_pixel(2, 2) == 0


def test_fill_and_clear():
    img = Greyscale(4, 3)
    img.fill(MAX_BRIGHTNESS)
    assert all(v == MAX_BRIGHTNESS for row in _grid(img) for v in row)
    img.clear()
    assert all(v == 0 for row in _grid(img) for v in row)


def test_out_of_range_index():
    img = Greyscale(2, 2)
    with pytest.raises(IndexError):
        img.get_pixel(2, 0)
    with pytest.raises(IndexError):
        img.set_pixel(0, -1, 1)


@pytest.mark.parametrize("value", [-1, MAX_LEVEL + 1])
def test_bad_level(value):
    img = Greyscale(2, 2)
    with pytest.raises(ValueError):
        img.set_pixel(0, 0, value)
    with pytest.raises(ValueError):
        img.fill(value)


def test_negative_size():
    with pytest.raises(ValueError):
        Greyscale(-1, 2)


def test_monochrome_pixels():
    heart = Monochrome5x5(HEART)
    assert (heart.width(), heart.height()) == (5, 5)
    assert _grid(heart) == [[v * MAX_BRIGHTNESS for v in row] for row in HEART]


def test_monochrome_bad_shape():
    with pytest.raises(ValueError):
        Monochrome5x5(HEART[:4])
    with pytest.raises(ValueError):
        Monochrome5x5([row[:4] for row in HEART])


def test_monochrome_index_error():
    with pytest.raises(IndexError):
        Monochrome5x5(HEART).get_pixel(5, 0)


def test_copy_is_independent():
    heart = Monochrome5x5(HEART)
    copy = copy_image(heart)
    assert _grid(copy) == _grid(heart)
    copy.set_pixel(0, 0, 3)
    assert heart.get_pixel(0, 0) == 0
    assert copy.get_pixel(0, 0) == 3


def test_invert_mirrors_brightness():
    src = _numbered(4, 3)
    inv = invert_image(src)
    for y in range(3):
        for x in range(4):
            assert inv.get_pixel(x, y) + src.get_pixel(x, y) == MAX_BRIGHTNESS
    assert invert_image(inv) == copy_image(src)


def test_blit_shift_left():
    src = _numbered(5, 4)
    dest = Greyscale(5, 4)
    dest.fill(7)
    blit(src, dest, 1, 0, 5, 4, 0, 0)
    for y in range(4):
        for x in range(4):
            assert dest.get_pixel(x, y) == src.get_pixel(x + 1, y)
        assert dest.get_pixel(4, y) == 0


def test_blit_shift_down():
    src = _numbered(3, 3)
    dest = Greyscale(3, 3)
    blit(src, dest, 0, -1, 3, 3, 0, 0)
    assert [dest.get_pixel(x, 0) for x in range(3)] == [0, 0, 0]
    for y in range(1, 3):
        for x in range(3):
            assert dest.get_pixel(x, y) == src.get_pixel(x, y - 1)


def test_blit_to_offset_keeps_outside():
    src = _numbered(2, 2)
    dest = Greyscale(5, 5)
    dest.fill(5)
    blit(src, dest, 0, 0, 2, 2, 3, 3)
    assert dest.get_pixel(3, 3) == src.get_pixel(0, 0)
    assert dest.get_pixel(4, 4) == src.get_pixel(1, 1)
    assert dest.get_pixel(0, 0) == 5
    assert dest.get_pixel(2, 3) == 5


def test_blit_without_overlap_clears_target():
    src = _numbered(2, 2)
    dest = Greyscale(4, 4)
    dest.fill(5)
    blit(src, dest, 10, 10, 2, 2, 1, 1)
    assert dest.get_pixel(1, 1) == 0
    assert dest.get_pixel(2, 2) == 0
    assert dest.get_pixel(0, 0) == 5
    assert dest.get_pixel(3, 3) == 5


def test_blit_negative_destination():
    src = _numbered(5, 1)
    dest = Greyscale(5, 1)
    dest.fill(6)
    blit(src, dest, 2, 0, 3, 1, -1, 0)
    assert dest.get_pixel(0, 0) == src.get_pixel(3, 0)
    assert dest.get_pixel(1, 0) == src.get_pixel(4, 0)
    assert [dest.get_pixel(x, 0) for x in range(2, 5)] == [6, 6, 6]


@pytest.mark.parametrize("x,y", [(1, 0), (-1, 0), (0, 1), (0, -1), (2, -1)])
def test_blit_in_place_matches_copy(x, y):
    img = _numbered(5, 5)
    expected = Greyscale(5, 5)
    blit(copy_image(img), expected, x, y, 5, 5, 0, 0)
    blit(img, img, x, y, 5, 5, 0, 0)
    assert img == expected