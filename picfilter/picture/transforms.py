from __future__ import annotations

from typing import List, Optional, Sequence

from ..errors import InvalidArgument
from .raster import Picture
from .types import Color, FlipAxis, Rotation


def invert(picture: Picture) -> None:
    """Replace every channel c with 255 - c, in place."""
    for x, y, (red, green, blue) in picture.iter_pixels():
        picture.set_pixel(x, y, Color(255 - red, 255 - green, 255 - blue))


def grayscale(picture: Picture) -> None:
    """Set every channel to the truncated mean of the pixel's channels, in place."""
    for x, y, (red, green, blue) in picture.iter_pixels():
        avg = (red + green + blue) // 3
        picture.set_pixel(x, y, Color(avg, avg, avg))


def rotate90(picture: Picture) -> Picture:
    """Return a new picture rotated a quarter turn clockwise."""
    width, height = picture.size
    out = Picture(height, width)
    for i, j, color in picture.iter_pixels():
        out.set_pixel(height - 1 - j, i, color)
    return out


def rotate(picture: Picture, rotation: Rotation) -> Picture:
    out = picture
    for _ in range(rotation.quarter_turns):
        out = rotate90(out)
    return out


def flip_horizontal(picture: Picture) -> Picture:
    """Mirror across the vertical axis."""
    width, height = picture.size
    out = Picture(width, height)
    for i, j, color in picture.iter_pixels():
        out.set_pixel(width - 1 - i, j, color)
    return out


def flip_vertical(picture: Picture) -> Picture:
    """Mirror across the horizontal axis."""
    width, height = picture.size
    out = Picture(width, height)
    for i, j, color in picture.iter_pixels():
        out.set_pixel(i, height - 1 - j, color)
    return out


def flip(picture: Picture, axis: FlipAxis) -> Picture:
    if axis is FlipAxis.HORIZONTAL:
        return flip_horizontal(picture)
    return flip_vertical(picture)


def blend(pictures: Sequence[Picture]) -> Picture:
    """Average pictures channel by channel over their common top-left region.

    The result is as wide as the narrowest input and as tall as the shortest.
    Each channel is the truncated mean across all inputs.
    """
    if not pictures:
        raise InvalidArgument("blend needs at least one picture")
    n = len(pictures)
    width = min(p.width for p in pictures)
    height = min(p.height for p in pictures)
    out = Picture(width, height)
    for i in range(width):
        for j in range(height):
            red = green = blue = 0
            for p in pictures:
                color = p.get_pixel(i, j)
                red += color.red
                green += color.green
                blue += color.blue
            out.set_pixel(i, j, Color(red // n, green // n, blue // n))
    return out


def blur(picture: Picture) -> Picture:
    """3x3 box blur; pixels whose neighborhood leaves the picture are copied as-is."""
    out = Picture(picture.width, picture.height)
    for i, j, color in picture.iter_pixels():
        neighbors = _neighborhood(picture, i, j)
        if neighbors is None:
            out.set_pixel(i, j, color)
            continue
        red = sum(c.red for c in neighbors)
        green = sum(c.green for c in neighbors)
        blue = sum(c.blue for c in neighbors)
        out.set_pixel(i, j, Color(red // 9, green // 9, blue // 9))
    return out


def _neighborhood(picture: Picture, i: int, j: int) -> Optional[List[Color]]:
    # Stops at the first position outside the picture.
    neighbors: List[Color] = []
    for dx in (-1, 0, 1):
        for dy in (-1, 0, 1):
            if not picture.contains(i + dx, j + dy):
                return None
            neighbors.append(picture.get_pixel(i + dx, j + dy))
    return neighbors
