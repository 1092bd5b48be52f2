from __future__ import annotations


class PictureError(Exception):
    """Base class for all picfilter errors."""


class DecodeError(PictureError):
    """Input image is missing, unreadable or in an unsupported format."""


class EncodeError(PictureError):
    """Output image could not be written."""


class OutOfBounds(PictureError, IndexError):
    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"Pixel ({x}, {y}) outside {width}x{height} picture")
        self.x = x
        self.y = y


class InvalidArgument(PictureError, ValueError):
    pass
