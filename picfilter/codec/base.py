from __future__ import annotations

import os
import tempfile

from PIL import Image, UnidentifiedImageError

from ..errors import DecodeError, EncodeError
from ..picture import Picture


def _current_umask() -> int:
    # os.umask can only be read by setting it.
    mask = os.umask(0)
    os.umask(mask)
    return mask


class PictureReader:
    def load(self, path: str) -> Picture:
        self._validate_input_path(path)
        img = self._load_image(path)
        return Picture.from_image(self._normalize_image(img))

    @staticmethod
    def _load_image(path: str) -> Image.Image:
        try:
            with Image.open(path) as img:
                img.load()
                return img.copy()
        except UnidentifiedImageError as exc:
            raise DecodeError(f"Unsupported image format: {path}") from exc
        except (OSError, ValueError) as exc:
            raise DecodeError(f"Cannot read image {path}: {exc}") from exc

    @staticmethod
    def _normalize_image(img: Image.Image) -> Image.Image:
        if img.mode != "RGB":
            return img.convert("RGB")
        return img

    @staticmethod
    def _validate_input_path(path: str) -> None:
        if not os.path.exists(path):
            raise DecodeError(f"File not found: {path}")
        if not os.path.isfile(path):
            raise DecodeError(f"Not a file: {path}")


class PictureWriter:
    """Writes pictures in a single fixed format, replacing the target atomically."""

    def __init__(self, image_format: str = "PNG") -> None:
        self.image_format = image_format

    def save(self, picture: Picture, path: str) -> None:
        directory = os.path.dirname(os.path.abspath(path))
        temp_path = None
        try:
            with tempfile.NamedTemporaryFile(
                "wb", dir=directory, prefix=".picfilter-", suffix=".tmp", delete=False
            ) as handle:
                temp_path = handle.name
                picture.to_image().save(handle, format=self.image_format)
            os.chmod(temp_path, 0o666 & ~_current_umask())
            os.replace(temp_path, path)
            temp_path = None
        except (OSError, ValueError, SystemError) as exc:
            raise EncodeError(f"Cannot write image {path}: {exc}") from exc
        finally:
            if temp_path and os.path.exists(temp_path):
                os.remove(temp_path)
