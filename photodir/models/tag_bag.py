"""
Tag Bag Model

Read-only view of the embedded metadata of one image, partitioned by the
standard that defines each field.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


@dataclass(frozen=True)
class TagValue:
    """
    A single decoded tag.

    Attributes:
        value: Decoded value in the defining standard's native form, e.g.
            ``"2023:01:01 00:00:01"`` for EXIF, an ISO-8601 string for XMP,
            ``"20220101"`` for IPTC dates, an int for pixel dimensions
        description: Human-readable rendering of the value
    """

    value: Any
    description: str

    @property
    def text(self) -> str:
        """The value as a stripped string."""
        return str(self.value).strip()


@dataclass(frozen=True)
class CameraTags:
    """Camera-native (EXIF) fields consulted by the resolvers."""

    date_time_original: Optional[TagValue] = None
    sub_sec_time_original: Optional[TagValue] = None
    offset_time_original: Optional[TagValue] = None
    image_unique_id: Optional[TagValue] = None
    image_description: Optional[TagValue] = None


@dataclass(frozen=True)
class PublishingTags:
    """Publishing-namespace (XMP) fields."""

    create_date: Optional[TagValue] = None
    identifier: Optional[TagValue] = None
    description: Optional[TagValue] = None


@dataclass(frozen=True)
class WireServiceTags:
    """Wire-service (IPTC) fields."""

    date_created: Optional[TagValue] = None
    time_created: Optional[TagValue] = None
    caption_abstract: Optional[TagValue] = None


class HeaderFamily(Enum):
    """Container family whose header supplied the pixel dimensions."""

    RIFF = 'RIFF'
    PNG = 'PNG'
    GENERIC = 'File'


@dataclass(frozen=True)
class FileHeader:
    """Dimensions read from the container header of one family."""

    family: HeaderFamily
    image_width: Optional[TagValue] = None
    image_height: Optional[TagValue] = None


@dataclass(frozen=True)
class TagBag:
    """
    Decoded, immutable metadata container for a single image.

    Only the fields enumerated by the namespace classes exist; anything else
    the decoder saw is dropped. There is a single header slot, so at most one
    file-header family can ever be populated.

    Example:
        >>> tags = TagBag(
        ...     camera=CameraTags(date_time_original=TagValue(
        ...         '2023:01:01 00:00:01', '2023:01:01 00:00:01')),
        ...     header=FileHeader(HeaderFamily.GENERIC,
        ...                       TagValue(1600, '1600'), TagValue(1064, '1064')),
        ... )
    """

    camera: CameraTags = field(default_factory=CameraTags)
    publishing: PublishingTags = field(default_factory=PublishingTags)
    wire: WireServiceTags = field(default_factory=WireServiceTags)
    header: Optional[FileHeader] = None
