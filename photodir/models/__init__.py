"""
Domain models for photodir.

This package contains the immutable records passed between the decoder, the
resolvers and the album aggregators.
"""

from .tag_bag import (
    TagValue,
    CameraTags,
    PublishingTags,
    WireServiceTags,
    HeaderFamily,
    FileHeader,
    TagBag,
)
from .photo_record import PhotoRecord, format_timestamp
from .resize import ResizeTarget

__all__ = [
    'TagValue',
    'CameraTags',
    'PublishingTags',
    'WireServiceTags',
    'HeaderFamily',
    'FileHeader',
    'TagBag',
    'PhotoRecord',
    'format_timestamp',
    'ResizeTarget',
]
