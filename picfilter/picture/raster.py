from __future__ import annotations

from typing import Iterator, Sequence, Tuple

from PIL import Image

from ..errors import InvalidArgument, OutOfBounds
from .types import Color

MODE = "RGB"


class Picture:
    """Owned width x height grid of opaque RGB pixels.

    Pixels are addressed by (x, y) with (0, 0) at the top-left corner. The
    backing store is a Pillow "RGB" image that never leaves this object;
    ``to_image`` and ``from_image`` always copy.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise InvalidArgument(f"Picture dimensions must be non-negative, got {width}x{height}")
        self._image = Image.new(MODE, (width, height))

    @classmethod
    def from_image(cls, img: Image.Image) -> "Picture":
        picture = cls.__new__(cls)
        if img.mode != MODE:
            picture._image = img.convert(MODE)
        else:
            picture._image = img.copy()
        return picture

    def to_image(self) -> Image.Image:
        return self._image.copy()

    def copy(self) -> "Picture":
        return Picture.from_image(self._image)

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    @property
    def size(self) -> Tuple[int, int]:
        return self._image.size

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_pixel(self, x: int, y: int) -> Color:
        self._check_bounds(x, y)
        return Color(*self._image.getpixel((x, y)))

    def set_pixel(self, x: int, y: int, color: Sequence[int]) -> None:
        """Overwrite (x, y); an alpha channel, if given, is discarded."""
        self._check_bounds(x, y)
        self._image.putpixel((x, y), tuple(Color.from_channels(color)))

    def iter_pixels(self) -> Iterator[Tuple[int, int, Color]]:
        """Yield ``(x, y, color)`` column by column.

        Each pixel is read just before it is yielded, so callers may write the
        current pixel while iterating.
        """
        if self.width == 0 or self.height == 0:
            return
        access = self._image.load()
        for x in range(self.width):
            for y in range(self.height):
                yield x, y, Color(*access[x, y])

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.contains(x, y):
            raise OutOfBounds(x, y, self.width, self.height)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Picture):
            return NotImplemented
        if self.size != other.size:
            return False
        return self._image.tobytes() == other._image.tobytes()

    def __hash__(self) -> int:
        return hash((self.size, self._image.tobytes()))

    def __repr__(self) -> str:
        return f"Picture(width={self.width}, height={self.height})"

    def __str__(self) -> str:
        rows = []
        for y in range(self.height):
            cells = []
            for x in range(self.width):
                red, green, blue = self.get_pixel(x, y)
                cells.append(f"({red},{green},{blue})")
            rows.append("".join(cells) + "\n")
        return "".join(rows) + "\n"
