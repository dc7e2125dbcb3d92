"""
Test helpers: TagBag builders, a fake decoder and a fixed-clock storage.
"""

import os
import threading
from datetime import datetime, timezone, timedelta
from typing import Dict, List, Optional, Union

from photodir.exceptions import InvalidImageFormat
from photodir.models import (
    CameraTags,
    FileHeader,
    HeaderFamily,
    PublishingTags,
    TagBag,
    TagValue,
    WireServiceTags,
)
from photodir.storage import LocalStorageProvider

UTC_MINUS_8 = timezone(timedelta(hours=-8))
FIXED_CREATED_TIME = datetime(2020, 6, 1, 12, 0, 0, 250000, tzinfo=timezone.utc)


class RecordingSink:
    """Warning sink that keeps every message."""

    def __init__(self):
        self.messages: List[str] = []

    def __call__(self, message: str) -> None:
        self.messages.append(message)


def tv(value, description=None) -> TagValue:
    return TagValue(value, str(value) if description is None else description)


def make_tags(width: Optional[int] = 1600, height: Optional[int] = 1064,
              family: HeaderFamily = HeaderFamily.GENERIC,
              camera_date: Optional[str] = None, subsec: Optional[str] = None,
              offset: Optional[str] = None, xmp_date: Optional[str] = None,
              iptc_date: Optional[str] = None, iptc_time: Optional[str] = None,
              identifier: Optional[str] = None, description: Optional[str] = None) -> TagBag:
    """Build a TagBag from plain values, leaving out whatever is None."""

    def opt(value):
        return tv(value) if value is not None else None

    header = None
    if width is not None or height is not None:
        header = FileHeader(family, opt(width), opt(height))

    return TagBag(
        camera=CameraTags(
            date_time_original=opt(camera_date),
            sub_sec_time_original=opt(subsec),
            offset_time_original=opt(offset),
        ),
        publishing=PublishingTags(
            create_date=opt(xmp_date),
            identifier=opt(identifier),
            description=opt(description),
        ),
        wire=WireServiceTags(date_created=opt(iptc_date), time_created=opt(iptc_time)),
        header=header,
    )


class FakeExtractor:
    """
    Stands in for ExifExtractor.

    Tags are looked up by file name; an exception instance in the table is
    raised instead. ``gate`` (when set up) blocks every decode until released.
    """

    def __init__(self, tags: Optional[Dict[str, Union[TagBag, Exception]]] = None,
                 default: Optional[TagBag] = None):
        self.tags = dict(tags or {})
        self.default = default
        self.calls: List[str] = []
        self.copies: List[tuple] = []
        self.gate: Optional[threading.Event] = None
        self._lock = threading.Lock()

    def load_tags(self, file_path: str) -> TagBag:
        with self._lock:
            self.calls.append(file_path)
        if self.gate is not None:
            self.gate.wait(timeout=5)
        entry = self.tags.get(os.path.basename(file_path), self.default)
        if entry is None:
            raise InvalidImageFormat(file_path, "no fake tags")
        if isinstance(entry, Exception):
            raise entry
        return entry

    def copy_metadata(self, source_path: str, destination_path: str) -> None:
        with self._lock:
            self.copies.append((source_path, destination_path))


class FixedTimeStorage(LocalStorageProvider):
    """Local storage whose creation times are a fixed instant."""

    def get_created_time(self, path: str) -> datetime:
        return FIXED_CREATED_TIME
