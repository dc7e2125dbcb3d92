"""
Extractors package for photodir: decoding embedded photo metadata.
"""

from .exif_extractor import ExifExtractor

__all__ = ['ExifExtractor']
