from .errors import DecodeError, EncodeError, InvalidArgument, OutOfBounds, PictureError
from .picture import Color, FlipAxis, Picture, Rotation

__version__ = "1.0.0"

__all__ = [
    "Color",
    "DecodeError",
    "EncodeError",
    "FlipAxis",
    "InvalidArgument",
    "OutOfBounds",
    "Picture",
    "PictureError",
    "Rotation",
]
