from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .codec import load_picture, save_picture
from .errors import InvalidArgument
from .picture import FlipAxis, Picture, Rotation, transforms

DEFAULT_OUTPUT_FORMAT = "PNG"

logger = logging.getLogger(__name__)


@dataclass
class ProcessSettings:
    output_format: str = DEFAULT_OUTPUT_FORMAT


class PictureProcessor:
    """Loads input files, applies one transform and writes the result.

    Every command either writes the whole output file or raises before
    anything is written.
    """

    def __init__(self, settings: Optional[ProcessSettings] = None) -> None:
        self.settings = settings or ProcessSettings()

    def invert(self, input_path: str, output_path: str) -> Picture:
        picture = self._load(input_path)
        transforms.invert(picture)
        return self._save(picture, output_path, "invert")

    def grayscale(self, input_path: str, output_path: str) -> Picture:
        picture = self._load(input_path)
        transforms.grayscale(picture)
        return self._save(picture, output_path, "grayscale")

    def rotate(self, rotation: Rotation, input_path: str, output_path: str) -> Picture:
        picture = self._load(input_path)
        return self._save(transforms.rotate(picture, rotation), output_path, f"rotate {rotation.value}")

    def flip(self, axis: FlipAxis, input_path: str, output_path: str) -> Picture:
        picture = self._load(input_path)
        return self._save(transforms.flip(picture, axis), output_path, f"flip {axis.value}")

    def blend(self, input_paths: Sequence[str], output_path: str) -> Picture:
        if not input_paths:
            raise InvalidArgument("blend needs at least one input file")
        pictures: List[Picture] = [self._load(path) for path in input_paths]
        return self._save(transforms.blend(pictures), output_path, f"blend x{len(pictures)}")

    def blur(self, input_path: str, output_path: str) -> Picture:
        picture = self._load(input_path)
        return self._save(transforms.blur(picture), output_path, "blur")

    @staticmethod
    def _load(path: str) -> Picture:
        picture = load_picture(path)
        logger.debug("Loaded %s (%dx%d)", path, picture.width, picture.height)
        return picture

    def _save(self, picture: Picture, path: str, command: str) -> Picture:
        save_picture(picture, path, self.settings.output_format)
        logger.debug("Applied %s, wrote %s (%dx%d)", command, path, picture.width, picture.height)
        return picture
