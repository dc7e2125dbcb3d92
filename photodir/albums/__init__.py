"""
Albums package: photos, albums and portfolios.
"""

from .context import ProcessingContext
from .photo import Photo
from .album import Album, AlbumOptions, DEFAULT_ALLOWED_EXTENSIONS, DEFAULT_SKIPPED_EXTENSIONS
from .portfolio import Portfolio, PortfolioOptions

__all__ = [
    'ProcessingContext',
    'Photo',
    'Album',
    'AlbumOptions',
    'DEFAULT_ALLOWED_EXTENSIONS',
    'DEFAULT_SKIPPED_EXTENSIONS',
    'Portfolio',
    'PortfolioOptions',
]
