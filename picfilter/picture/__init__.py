from .raster import Picture
from .transforms import (
    blend,
    blur,
    flip,
    flip_horizontal,
    flip_vertical,
    grayscale,
    invert,
    rotate,
    rotate90,
)
from .types import Color, FlipAxis, Rotation, parse_flip_axis, parse_rotation

__all__ = [
    "blend",
    "blur",
    "Color",
    "flip",
    "flip_horizontal",
    "flip_vertical",
    "FlipAxis",
    "grayscale",
    "invert",
    "parse_flip_axis",
    "parse_rotation",
    "Picture",
    "rotate",
    "rotate90",
    "Rotation",
]
