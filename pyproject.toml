[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bitboard"
version = "0.1.0"
description = "Board-side building blocks for a 5x5 LED micro-controller: pixel buffers, images and fonts, soft timers, a radio packet queue and gesture tracking."
requires-python = ">=3.10"
dependencies = []
keywords = ["led-matrix", "image", "soft-timer", "radio", "gestures", "embedded"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bitboard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
