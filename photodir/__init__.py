"""
photodir

Turns directories of photos into presentation-ready JSON documents: capture
date, pixel dimensions and orientation resolved from EXIF, XMP, IPTC and file
header metadata, aggregated per album and per portfolio.
"""

from .albums import Album, AlbumOptions, Photo, Portfolio, PortfolioOptions, ProcessingContext
from .exceptions import (
    PhotoDirError,
    DimensionUnavailable,
    InvalidImageFormat,
    MetadataValidationError,
    ConflictingOptions,
    ReferencedFileNotFound,
)
from .models import PhotoRecord, TagBag
from .schemas import AlbumMetadata, AlbumSchema, PhotoSchema, ResizeOptions

__version__ = '1.0.0'

__all__ = [
    'Album',
    'AlbumOptions',
    'Photo',
    'Portfolio',
    'PortfolioOptions',
    'ProcessingContext',
    'PhotoDirError',
    'DimensionUnavailable',
    'InvalidImageFormat',
    'MetadataValidationError',
    'ConflictingOptions',
    'ReferencedFileNotFound',
    'PhotoRecord',
    'TagBag',
    'AlbumMetadata',
    'AlbumSchema',
    'PhotoSchema',
    'ResizeOptions',
]
