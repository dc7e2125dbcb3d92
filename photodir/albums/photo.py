"""
Photo

A single image file on disk and its lazily computed PhotoRecord.
"""

import os
import logging
import threading
from concurrent.futures import Future
from typing import Optional

from photodir.albums.context import ProcessingContext
from photodir.models import PhotoRecord
from photodir.resizers import prepare_destination
from photodir.resolvers import resolve_description, resolve_identifier
from photodir.schemas import ResizeOptions

logger = logging.getLogger(__name__)


class Photo:
    """
    One photo in an album.

    ``metadata()`` decodes the file at most once per Photo: the first caller
    does the work and concurrent callers wait for its result. A failed decode
    is not cached, so a later call retries.

    Attributes:
        name: On-disk leaf name, e.g. ``IMG_1234.jpg``
        path: Absolute path to the file
        context: Collaborators used to decode, resolve and resize

    Example:
        >>> photo = Photo('/photos/album/IMG_1234.jpg')
        >>> photo.metadata().to_dict()
        {'filename': 'IMG_1234.jpg', 'date': '2023-01-01T08:00:01.000Z', ...}
    """

    def __init__(self, path: str, name: Optional[str] = None,
                 context: Optional[ProcessingContext] = None):
        self.path = os.path.abspath(path)
        self.name = name or os.path.basename(self.path)
        self.context = context if context is not None else ProcessingContext.create()
        self._lock = threading.Lock()
        self._record: Optional[Future] = None

    def __repr__(self) -> str:
        return f"Photo(path='{self.path}')"

    def metadata(self) -> PhotoRecord:
        """
        Resolve the photo's normalized metadata.

        Returns:
            The cached PhotoRecord, computing it on first use

        Raises:
            InvalidImageFormat: The file could not be decoded
            DimensionUnavailable: No usable width and height in the header
        """
        with self._lock:
            pending = self._record
            if pending is None:
                pending = self._record = Future()
                owner = True
            else:
                owner = False

        if not owner:
            return pending.result()

        try:
            record = self._compute()
        except BaseException as e:
            with self._lock:
                self._record = None
            pending.set_exception(e)
            raise
        pending.set_result(record)
        return record

    def _compute(self) -> PhotoRecord:
        ctx = self.context
        tags = ctx.extractor.load_tags(self.path)
        width, height = ctx.dimension_resolver.resolve(tags, self.path)
        date = ctx.date_resolver.resolve(
            tags,
            fallback=lambda: ctx.storage.get_created_time(self.path),
            file_name=self.path,
        )
        record = PhotoRecord(
            filename=self.name,
            date=date,
            width=width,
            height=height,
            id=resolve_identifier(tags),
            alt=resolve_description(tags),
        )
        logger.debug(f"Resolved {record!r}")
        return record

    def _seed(self, record: PhotoRecord) -> None:
        """Install an already known record, skipping the decode."""
        done: Future = Future()
        done.set_result(record)
        with self._lock:
            self._record = done

    def resize(self, options: ResizeOptions, prepare: bool = True) -> 'Photo':
        """
        Write a resized copy of this photo into ``options.dir``.

        Args:
            options: Destination and size limits
            prepare: Create (and check) the destination directory first;
                albums do this once and pass False

        Returns:
            Photo for the resized file, whose record is this photo's record
            with the new width and height
        """
        record = self.metadata()
        ctx = self.context
        target = ctx.planner.plan(
            record.width, record.height, record.landscape,
            options.large_side_max, options.small_side_max, file_name=self.path,
        )

        if prepare:
            destination_dir = prepare_destination(os.path.dirname(self.path), options.dir)
        else:
            destination_dir = os.path.abspath(options.dir)
        destination = os.path.join(destination_dir, self.name)

        width, height = ctx.resizer.resize(self.path, destination, target, options.quality)
        resized = Photo(destination, self.name, ctx)
        resized._seed(record.with_dimensions(width, height))
        return resized
