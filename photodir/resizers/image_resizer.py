"""
Image Resizer

Re-encodes photos to bounded dimensions with Pillow, then copies the original
metadata onto the result with exiftool.
"""

import os
import logging
from pathlib import Path
from typing import Any, Dict, Tuple

from PIL import Image, UnidentifiedImageError

from photodir.exceptions import ConflictingOptions, InvalidImageFormat
from photodir.models import ResizeTarget
from photodir.resizers.resize_planner import ResizePlanner

logger = logging.getLogger(__name__)

# Encoders that take a quality setting
QUALITY_FORMATS = ('JPEG', 'WEBP')

# Multi-picture JPEGs (MPO) are written back as plain JPEG, first frame only
ENCODE_AS = {'MPO': 'JPEG'}


def prepare_destination(source_dir: str, destination_dir: str) -> str:
    """
    Create the destination directory for resized photos.

    Args:
        source_dir: Album directory the photos live in
        destination_dir: Directory resized photos are written to

    Returns:
        Absolute destination path

    Raises:
        ConflictingOptions: Destination is the source directory
    """
    source = Path(source_dir).resolve()
    destination = Path(destination_dir).resolve()
    if source == destination:
        raise ConflictingOptions(
            f"Resize destination {destination} is the album directory itself")
    destination.mkdir(parents=True, exist_ok=True)
    return str(destination)


class ImageResizer:
    """
    Scales photos down to fit a ResizeTarget.

    Attributes:
        extractor: ExifExtractor used to copy tags onto the resized file
    """

    def __init__(self, extractor):
        self.extractor = extractor

    def resize(self, source_path: str, destination_path: str, target: ResizeTarget,
               quality: int) -> Tuple[int, int]:
        """
        Write a resized copy of source_path to destination_path.

        The image is scaled to fit inside target, keeping its aspect ratio and
        never enlarging it, and re-encoded in its own format.

        Returns:
            Actual (width, height) of the written image

        Raises:
            InvalidImageFormat: Pillow cannot decode the source
        """
        try:
            img = Image.open(source_path)
        except UnidentifiedImageError as e:
            raise InvalidImageFormat(source_path, str(e)) from e

        with img:
            image_format = ENCODE_AS.get(img.format, img.format)
            expected = ResizePlanner.fit(img.width, img.height, target)
            save_kwargs: Dict[str, Any] = {}
            if image_format in QUALITY_FORMATS:
                save_kwargs['quality'] = quality
            if img.info.get('exif'):
                save_kwargs['exif'] = img.info['exif']
            if img.info.get('icc_profile'):
                save_kwargs['icc_profile'] = img.info['icc_profile']

            img.thumbnail((target.width, target.height), Image.Resampling.LANCZOS)
            img.save(destination_path, format=image_format, **save_kwargs)
            size = img.size

        if size != expected:
            logger.warning(f"Resized {os.path.basename(source_path)} to {size[0]}x{size[1]}, "
                           f"expected {expected[0]}x{expected[1]}")

        self.extractor.copy_metadata(source_path, destination_path)
        logger.info(f"Resized {os.path.basename(source_path)} to {size[0]}x{size[1]}")
        return size
