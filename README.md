# bitboard

Pure-Python building blocks for a board with a 5x5 LED matrix. The package
models parts of the board's software in plain Python, so that code using them
can be written and tested without the hardware. It has no dependencies beyond
the standard library.

## Modules

- `bitboard.pixels` holds the pixel buffers. `Greyscale` is a mutable buffer
  of any size that stores levels 0 to 15. `Monochrome5x5` is an immutable 5x5
  on/off buffer whose lit pixels read as 9. The module also has the `blit`,
  `copy_image` and `invert_image` helpers, plus `MAX_BRIGHTNESS` (9).
- `bitboard.image` holds the user-facing `Image` class:
  - `Image()` gives a blank 5x5 image.
  - `Image("09090:90909")` parses rows of digits separated by `:` or
    newlines. A space counts as 0.
  - `Image(w, h)` and `Image(w, h, data)` build an image from its size, and
    optionally `w*h` bytes, each capped at 9.
  - `Image("A", font=font)` gives the glyph of one character.

  Methods include `get_pixel`, `set_pixel`, `fill`, `blit`, `crop`,
  `shift_left`, `shift_right`, `shift_up`, `shift_down`, `copy` and `invert`.
  The operators `+`, `-`, `*` and `/` work on brightness. An image that wraps
  a `Monochrome5x5` is read-only, and changing it raises `TypeError`. The
  module also has `Font`, a 5x5 bitmap font that falls back to `'?'`, and
  `image_for_char`.
- `bitboard.iters` holds `RepeatIterator`, which cycles through a sequence
  forever.
- `bitboard.softtimer` holds `SoftTimer`, a queue of one-shot and periodic
  timers (`SoftTimerEntry`, `TimerMode`). It runs against a millisecond clock
  you supply and handles tick wrap-around. `ticks_diff` gives the signed
  difference of two tick counts.
- `bitboard.radio` holds `RadioQueue`, a receive queue of fixed byte capacity
  that holds `Packet`s with RSSI and microsecond timestamps. It also frames
  packets for sending, cut to `max_payload`. `RadioConfig` checks its
  settings on construction.
- `bitboard.gestures` holds `GestureTracker`, which records accelerometer
  gesture events and answers `current_gesture`, `is_gesture`, `was_gesture`
  and `get_gestures`. The module also has `Gesture`, `gesture_from_name` and
  `strength`.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Examples

```python
from bitboard.image import Font, Image

img = Image("09090:90909:09090:00000:00900")
print(img.width(), img.height())   # 5 5
print(img.get_pixel(1, 0))         # 9

dimmer = img * 0.5
shifted = img.shift_left(1)
print(repr(img.invert()))

font = Font({"?": [0b01110, 0b10001, 0b00110, 0b00000, 0b00100]})
print(repr(Image("x", font=font)))  # unknown characters show the '?' glyph
```

Soft timers run against any millisecond clock:

```python
from bitboard.softtimer import SoftTimer, SoftTimerEntry, TimerMode

now = 0
timer = SoftTimer(lambda: now)
fired = []
entry = SoftTimerEntry(mode=TimerMode.PERIODIC, delta_ms=100,
                       callback=lambda e: fired.append(now))
timer.insert(entry, 100)

now = 250
timer.handle()
print(fired)   # [250, 250]: the entry was due at 100 and 200
```

Radio packets and gestures:

```python
from bitboard.gestures import Gesture, GestureTracker
from bitboard.radio import RadioQueue

queue = RadioQueue(clock=lambda: 1234)
queue.receive(b"hi", rssi=40)
print(queue.peek())          # Packet(payload=b'hi', rssi=-40, timestamp_us=1234)
print(queue.send(b"hello"))  # b'\x05hello'

tracker = GestureTracker(lambda: Gesture.FACE_UP)
tracker.on_event(Gesture.SHAKE)
print(tracker.current_gesture())     # face up
print(tracker.was_gesture("shake"))  # True
```

## What the package does not do

- It does not talk to hardware. There is no display driver, radio
  transceiver, accelerometer or microphone access. Clocks and sensor readings
  come from callables you pass in.
- It has no built-in set of named pictures, no scrolling-text animation and
  no sound-event tracking.
- It ships no font data. A `Font` must be given its glyphs.
- It has no command-line tool.

## Running the tests

```
pytest
```