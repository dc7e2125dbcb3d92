"""
Portfolio

A directory whose subdirectories are albums.
"""

import os
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from photodir.albums.album import Album, AlbumOptions
from photodir.albums.context import ProcessingContext
from photodir.config import section

logger = logging.getLogger(__name__)


@dataclass
class PortfolioOptions(AlbumOptions):
    """
    AlbumOptions passed to every album, plus:

    Attributes:
        skip_album_names: Subdirectory names that are not albums
    """

    skip_album_names: Tuple[str, ...] = ()

    @classmethod
    def from_config(cls, config: Dict[str, Any], **overrides: Any) -> 'PortfolioOptions':
        """Build options from the ``album:`` and ``portfolio:`` config sections."""
        values = cls._config_values(config)
        skip = section(config, 'portfolio').get('skip_album_names')
        if skip is not None:
            values['skip_album_names'] = tuple(skip)
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


class Portfolio:
    """
    One Album per subdirectory of a path.

    Subdirectories named in skip_album_names are ignored, as is metadata_dir
    when it lives inside the portfolio.

    Example:
        >>> portfolio = Portfolio('/Volumes/Photos/Portfolio',
        ...                       PortfolioOptions(metadata_file='_metadata.json'))
        >>> portfolio.save_all_metadata(
        ...     lambda album: os.path.join('/srv/site', f"{album.name.lower()}.json"))
    """

    def __init__(self, path: str, options: Optional[PortfolioOptions] = None,
                 context: Optional[ProcessingContext] = None):
        self.options = options if options is not None else PortfolioOptions()
        self.options.check()
        self.context = context if context is not None else ProcessingContext.create()
        self.path = self.context.storage.resolve(path)

        excluded = [os.path.join(self.path, name) for name in self.options.skip_album_names]
        if self.options.metadata_dir:
            excluded.append(os.path.abspath(self.options.metadata_dir))

        directories = self.context.storage.list_directories(self.path, exclude=excluded)
        self.albums: List[Album] = [
            Album(directory, self.options, self.context) for directory in directories
        ]
        logger.info(f"Portfolio {self.path}: {len(self.albums)} albums")

    def __repr__(self) -> str:
        return f"Portfolio(path='{self.path}', albums={len(self.albums)})"

    def save_all_metadata(self, compute_path: Callable[[Album], str],
                          indent: Optional[int] = None,
                          skip_failed: bool = False) -> List[str]:
        """
        Write every album's document to the path compute_path returns for it.

        Returns:
            Paths of the written files, in album order
        """
        return [
            album.save_metadata(compute_path(album), indent=indent, skip_failed=skip_failed)
            for album in self.albums
        ]
