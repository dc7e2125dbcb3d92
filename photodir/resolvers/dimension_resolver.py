"""
Dimension Resolver

Reads pixel width and height from the file-header namespace of a TagBag.
"""

import logging
from typing import Optional, Tuple

from photodir.exceptions import DimensionUnavailable
from photodir.models import TagBag, TagValue

logger = logging.getLogger(__name__)


def _positive_int(tag: Optional[TagValue]) -> Optional[int]:
    if tag is None or isinstance(tag.value, bool):
        return None
    try:
        number = int(tag.value)
    except (TypeError, ValueError):
        return None
    if number != tag.value and str(number) != tag.text:
        return None
    return number if number > 0 else None


class DimensionResolver:
    """
    Resolves the pixel size of a photo.

    The family recorded in the header slot decides which namespace the
    dimensions come from; the decoder fills the slot with the first family
    (RIFF, then PNG, then generic) that carries any dimension tag.
    """

    def resolve(self, tags: TagBag, file_name: str = '') -> Tuple[int, int]:
        """
        Args:
            tags: Decoded metadata of the photo
            file_name: Photo path used in the error message

        Returns:
            (width, height) in pixels

        Raises:
            DimensionUnavailable: No header, or width/height missing or not a
                positive integer
        """
        header = tags.header
        if header is None:
            raise DimensionUnavailable(file_name, "no file header tags")

        width = _positive_int(header.image_width)
        height = _positive_int(header.image_height)
        if width is None or height is None:
            raise DimensionUnavailable(
                file_name, f"{header.family.value} header lacks a positive width and height")

        logger.debug(f"{file_name}: {width}x{height} from {header.family.value} header")
        return width, height
