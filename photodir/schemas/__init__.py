"""
Schemas for the JSON documents read and written by photodir.
"""

from .metadata import AlbumMetadata
from .output import PhotoSchema, AlbumSchema
from .resize import ResizeOptions, DEFAULT_QUALITY

__all__ = [
    'AlbumMetadata',
    'PhotoSchema',
    'AlbumSchema',
    'ResizeOptions',
    'DEFAULT_QUALITY',
]
