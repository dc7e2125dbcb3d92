"""
Album

A directory of photos plus optional user-authored metadata, aggregated into a
single album document.
"""

import os
import json
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from pydantic import ValidationError

from photodir.albums.context import ProcessingContext
from photodir.albums.photo import Photo
from photodir.config import section
from photodir.exceptions import (
    ConflictingOptions,
    MetadataValidationError,
    PhotoDirError,
    ReferencedFileNotFound,
)
from photodir.reporters import write_json
from photodir.resizers import prepare_destination
from photodir.schemas import AlbumMetadata, AlbumSchema, ResizeOptions

logger = logging.getLogger(__name__)

DEFAULT_ALLOWED_EXTENSIONS = ('jpg', 'jpeg', 'png', 'webp')
DEFAULT_SKIPPED_EXTENSIONS = ('json', 'ds_store')


def _extension(filename: str) -> str:
    """Lower-cased text after the last dot, e.g. ``ds_store`` for ``.DS_Store``."""
    return filename.rsplit('.', 1)[-1].lower() if '.' in filename else ''


@dataclass
class AlbumOptions:
    """
    Optional album configuration.

    Attributes:
        metadata_dir: Directory holding ``<album dir name>.json`` metadata
            files; cannot be combined with metadata_file
        metadata_file: Name of the metadata file inside the album, e.g.
            ``_metadata.json``; cannot be combined with metadata_dir
        allowed_extensions: Case-insensitive extensions of photo files
        skipped_extensions: Case-insensitive extensions ignored without a
            warning
        max_workers: Thread pool size for metadata and resize work
    """

    metadata_dir: Optional[str] = None
    metadata_file: Optional[str] = None
    allowed_extensions: Tuple[str, ...] = DEFAULT_ALLOWED_EXTENSIONS
    skipped_extensions: Tuple[str, ...] = DEFAULT_SKIPPED_EXTENSIONS
    max_workers: Optional[int] = None

    def check(self) -> None:
        """Raise ConflictingOptions for mutually exclusive settings."""
        if self.metadata_dir and self.metadata_file:
            raise ConflictingOptions(
                "Cannot specify both metadata_dir and metadata_file in AlbumOptions")

    @staticmethod
    def _config_values(config: Dict[str, Any]) -> Dict[str, Any]:
        album_config = section(config, 'album')
        values: Dict[str, Any] = {
            'metadata_dir': album_config.get('metadata_dir'),
            'metadata_file': album_config.get('metadata_file'),
            'max_workers': album_config.get('max_workers'),
        }
        for name in ('allowed_extensions', 'skipped_extensions'):
            if album_config.get(name) is not None:
                values[name] = tuple(album_config[name])
        return values

    @classmethod
    def from_config(cls, config: Dict[str, Any], **overrides: Any) -> 'AlbumOptions':
        """
        Build options from the ``album:`` section of a loaded config.

        Keyword overrides that are not None win over the config values.
        """
        values = cls._config_values(config)
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


class Album:
    """
    An on-disk directory of photos.

    Option conflicts, the metadata document and the files it references are
    all checked on construction, before any photo is decoded.

    Attributes:
        name: Directory name, e.g. ``Album1`` for ``/Volume/Photos/Album1``
        path: Absolute path of the directory
        options: AlbumOptions in effect
        context: Collaborators shared by every photo in the album

    Example:
        >>> album = Album('/Volume/Photos/Album1',
        ...               AlbumOptions(metadata_file='_metadata.json'))
        >>> album.save_metadata('/srv/site/album1.json')
    """

    def __init__(self, path: str, options: Optional[AlbumOptions] = None,
                 context: Optional[ProcessingContext] = None):
        self.options = options if options is not None else AlbumOptions()
        self.options.check()

        self.context = context if context is not None else ProcessingContext.create()
        self.path = self.context.storage.resolve(path)
        self.name = os.path.basename(self.path)

        self._allowed = {e.lower() for e in self.options.allowed_extensions}
        self._skipped = {e.lower() for e in self.options.skipped_extensions}
        self._photos: Optional[List[Photo]] = None

        self._metadata = self._load_metadata()
        self._check_references()

    def __repr__(self) -> str:
        return f"Album(path='{self.path}')"

    @property
    def metadata_path(self) -> Optional[str]:
        """Path of the input metadata document, None when not configured."""
        if self.options.metadata_dir:
            return os.path.join(self.options.metadata_dir, f"{self.name}.json")
        if self.options.metadata_file:
            return os.path.join(self.path, self.options.metadata_file)
        return None

    def _load_metadata(self) -> AlbumMetadata:
        source = self.metadata_path
        if source is None:
            return AlbumMetadata(title=self.name)

        with open(source, 'r', encoding='utf-8') as f:
            try:
                contents = json.load(f)
            except json.JSONDecodeError as e:
                raise MetadataValidationError(source, [], str(e)) from e
        try:
            return AlbumMetadata.model_validate(contents)
        except ValidationError as e:
            raise MetadataValidationError(source, e.errors(), str(e)) from e

    def _check_references(self) -> None:
        names = {photo.name for photo in self.photos}
        if self._metadata.thumb and self._metadata.thumb not in names:
            raise ReferencedFileNotFound('thumb', self._metadata.thumb, self.name)
        for filename in self._metadata.order or []:
            if filename not in names:
                raise ReferencedFileNotFound('order entry', filename, self.name)

    def _select_only_photos(self, filename: str) -> bool:
        extension = _extension(filename)
        if extension in self._allowed:
            return True
        if extension not in self._skipped:
            self.context.warn(f"WARNING: skipping file {filename} in album {self.name}")
        return False

    @property
    def photos(self) -> List[Photo]:
        """
        Photos in the album directory, sorted by file name.

        Only files with an allowed extension are included. Any other file
        whose extension is not in skipped_extensions produces a warning.
        """
        if self._photos is None:
            filenames = sorted(set(self.context.storage.list_files(self.path)))
            self._photos = [
                Photo(os.path.join(self.path, f), f, self.context)
                for f in filenames
                if self._select_only_photos(f)
            ]
        return self._photos

    @property
    def title(self) -> str:
        return self._metadata.title

    @property
    def slug(self) -> str:
        """Metadata slug, defaulting to the directory name lower cased."""
        return self._metadata.slug or self.name.lower()

    @property
    def unlisted(self) -> bool:
        return self._metadata.unlisted is True

    def _collect(self, work, items: list, skip_failed: bool = False) -> list:
        """Run work over items on a thread pool, keeping input order."""
        with ThreadPoolExecutor(max_workers=self.options.max_workers) as pool:
            futures = [pool.submit(work, item) for item in items]

        results = []
        for item, future in zip(items, futures):
            try:
                results.append(future.result())
            except PhotoDirError as e:
                if not skip_failed:
                    raise
                logger.error(f"Skipping {item.name} in album {self.name}: {e}")
        return results

    def metadata(self, skip_failed: bool = False) -> Dict[str, Any]:
        """
        Full album document including every photo.

        Args:
            skip_failed: Log and omit photos that cannot be decoded instead
                of raising

        Returns:
            Album document that validates against AlbumSchema
        """
        records = self._collect(lambda photo: photo.metadata(), self.photos, skip_failed)
        logger.info(f"Album {self.name}: {len(records)} photos")

        document = {
            **self._metadata.model_dump(exclude_none=True),
            'title': self.title,
            'slug': self.slug,
            'unlisted': self.unlisted,
            'photos': [record.to_dict() for record in records],
        }
        return AlbumSchema.model_validate(document).model_dump(exclude_none=True)

    def save_metadata(self, file: str, indent: Optional[int] = None,
                      skip_failed: bool = False) -> str:
        """
        Write the album document to a JSON file, overwriting it if present.

        Returns:
            Path of the written file
        """
        return write_json(file, self.metadata(skip_failed=skip_failed), indent)

    def resize(self, options: ResizeOptions) -> List[Photo]:
        """
        Write resized copies of every photo into ``options.dir``.

        Returns:
            Photos for the resized files, in album order
        """
        prepare_destination(self.path, options.dir)
        resized = self._collect(lambda photo: photo.resize(options, prepare=False), self.photos)
        logger.info(f"Resized {len(resized)} photos from album {self.name} into {options.dir}")
        return resized

    @classmethod
    def from_config(cls, path: str, config: Dict[str, Any],
                    context: Optional[ProcessingContext] = None, **overrides: Any) -> 'Album':
        """Create an Album using the ``album:`` section of a loaded config."""
        return cls(path, AlbumOptions.from_config(config, **overrides), context)
