"""Pixel buffers, images and fonts, soft timers, a radio packet queue and gesture tracking for a 5x5 LED board."""

__version__ = "0.1.0"

__all__ = [
    "gestures",
    "image",
    "iters",
    "pixels",
    "radio",
    "softtimer",
]