from __future__ import annotations

from typing import Set

from ..picture import Picture
from .base import PictureReader, PictureWriter

# Decoding goes by file content; this list is only shown in help text.
SUPPORTED_EXTENSIONS: Set[str] = {".png", ".jpg", ".jpeg", ".gif", ".bmp", ".tif", ".tiff", ".webp"}


def load_picture(path: str) -> Picture:
    return PictureReader().load(path)


def save_picture(picture: Picture, path: str, image_format: str = "PNG") -> None:
    PictureWriter(image_format).save(picture, path)


__all__ = ["PictureReader", "PictureWriter", "SUPPORTED_EXTENSIONS", "load_picture", "save_picture"]
