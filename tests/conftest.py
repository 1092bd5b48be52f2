from __future__ import annotations

import pytest

from picfilter.picture import Color, Picture


def filled(width: int, height: int, color) -> Picture:
    picture = Picture(width, height)
    for x in range(width):
        for y in range(height):
            picture.set_pixel(x, y, color)
    return picture


def gradient(width: int, height: int) -> Picture:
    """Every pixel distinct, so mirrored or rotated output is detectable."""
    picture = Picture(width, height)
    for x in range(width):
        for y in range(height):
            picture.set_pixel(x, y, Color((x * 37) % 256, (y * 53) % 256, (x * 11 + y * 7) % 256))
    return picture


@pytest.fixture
def sample() -> Picture:
    return gradient(5, 3)
