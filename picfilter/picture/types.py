from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Sequence, Union

from ..errors import InvalidArgument


class Color(NamedTuple):
    """Opaque RGB pixel value, each channel in [0, 255]."""

    red: int
    green: int
    blue: int

    @classmethod
    def from_channels(cls, channels: Sequence[int]) -> "Color":
        """Build a color from an RGB or RGBA sequence, dropping alpha."""
        if len(channels) not in (3, 4):
            raise InvalidArgument("Color needs 3 (RGB) or 4 (RGBA) channels")
        return cls(channels[0] & 0xFF, channels[1] & 0xFF, channels[2] & 0xFF)


class Rotation(Enum):
    R90 = 90
    R180 = 180
    R270 = 270

    @property
    def quarter_turns(self) -> int:
        return self.value // 90


class FlipAxis(Enum):
    HORIZONTAL = "H"
    VERTICAL = "V"


def parse_rotation(value: Union[str, int]) -> Rotation:
    try:
        degrees = int(value)
    except (TypeError, ValueError):
        raise InvalidArgument(f"Rotation must be a whole number of degrees, got {value!r}") from None
    try:
        return Rotation(degrees)
    except ValueError:
        raise InvalidArgument(f"Unsupported rotation angle: {degrees}") from None


def parse_flip_axis(value: str) -> FlipAxis:
    try:
        return FlipAxis(value)
    except ValueError:
        raise InvalidArgument(f"Flip direction must be 'H' or 'V', got {value!r}") from None
