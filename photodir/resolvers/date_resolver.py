"""
Date Resolver

Derives the capture instant of a photo from its TagBag.

Sources are tried in a fixed order and the first one whose primary tag is
present is used exclusively:

1. camera-native ``DateTimeOriginal`` (plus sub-second and offset tags)
2. publishing ``CreateDate`` (ISO-8601)
3. wire-service ``DateCreated`` (plus ``TimeCreated``)
4. the file's on-disk creation time, with a warning

Offset-less timestamps are interpreted in the resolver's local timezone,
which defaults to the host's timezone at parse time.
"""

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo
from enum import Enum
from typing import Callable, Optional, Tuple, Union

from photodir.diagnostics import WarningSink, resolve_sink
from photodir.models import CameraTags, PublishingTags, TagBag, TagValue, WireServiceTags
from photodir.models.photo_record import truncate_to_millis

logger = logging.getLogger(__name__)

CAMERA_FORMAT = '%Y:%m:%d %H:%M:%S.%f'
SUBSECOND_DIGITS = 3

Fallback = Union[datetime, Callable[[], datetime]]


class DateSource(Enum):
    """Where a resolved date came from."""

    CAMERA = 'camera-native'
    PUBLISHING = 'publishing'
    WIRE_SERVICE = 'wire-service'
    FILESYSTEM = 'on-disk creation time'


@dataclass(frozen=True)
class ResolvedDate:
    instant: datetime
    source: DateSource


def _subsecond(tag: Optional[TagValue]) -> str:
    """Exactly three sub-second digits, right-padded with zeros or truncated."""
    digits = re.sub(r'\D', '', tag.text) if tag is not None else ''
    return digits.ljust(SUBSECOND_DIGITS, '0')[:SUBSECOND_DIGITS]


def _expand_partial_iso_date(value: str) -> str:
    """Pad year-only and year-month ISO dates to a full calendar date."""
    if re.fullmatch(r'\d{4}', value):
        return f"{value}-01-01"
    if re.fullmatch(r'\d{4}-\d{2}', value):
        return f"{value}-01"
    return value


class DateResolver:
    """
    Resolves the capture date of a photo.

    Attributes:
        local_timezone: Timezone for offset-less timestamps, None for the host's

    Example:
        >>> resolver = DateResolver()
        >>> resolver.resolve(tags, fallback=lambda: created, file_name='IMG_1234.jpg')
        datetime.datetime(2023, 1, 1, 8, 0, 1, tzinfo=datetime.timezone.utc)
    """

    def __init__(self, local_timezone: Optional[tzinfo] = None,
                 warn: Optional[WarningSink] = None):
        self.local_timezone = local_timezone
        self._warn = resolve_sink(warn)

    def resolve(self, tags: TagBag, fallback: Fallback, file_name: str = '') -> datetime:
        """
        Resolve the capture instant.

        Args:
            tags: Decoded metadata of the photo
            fallback: On-disk creation time, or a callable producing it
            file_name: Photo path used in diagnostics

        Returns:
            Aware datetime in UTC, truncated to milliseconds
        """
        return self.resolve_with_source(tags, fallback, file_name).instant

    def resolve_with_source(self, tags: TagBag, fallback: Fallback,
                            file_name: str = '') -> ResolvedDate:
        """Like :meth:`resolve`, also reporting which source was used."""
        sources: Tuple[Tuple[DateSource, Optional[TagValue], Callable[[], datetime]], ...] = (
            (DateSource.CAMERA, tags.camera.date_time_original,
             lambda: self._from_camera(tags.camera)),
            (DateSource.PUBLISHING, tags.publishing.create_date,
             lambda: self._from_publishing(tags.publishing)),
            (DateSource.WIRE_SERVICE, tags.wire.date_created,
             lambda: self._from_wire_service(tags.wire)),
        )

        reason = "Cannot read create date from metadata"
        for source, primary, parse in sources:
            if primary is None:
                continue
            try:
                instant = parse()
            except ValueError as e:
                reason = f"Cannot parse {source.value} date {primary.description!r} ({e})"
                break
            logger.debug(f"Date for {file_name} from {source.value} tags")
            return ResolvedDate(self._normalize(instant), source)

        self._warn(f"WARNING: {reason} in {file_name}, using file creation time instead")
        created = fallback() if callable(fallback) else fallback
        return ResolvedDate(self._normalize(created), DateSource.FILESYSTEM)

    def _localize(self, naive: datetime) -> datetime:
        if naive.tzinfo is not None:
            return naive
        if self.local_timezone is not None:
            return naive.replace(tzinfo=self.local_timezone)
        # astimezone() on a naive datetime assumes host local time
        return naive.astimezone()

    def _normalize(self, instant: datetime) -> datetime:
        return truncate_to_millis(self._localize(instant).astimezone(timezone.utc))

    def _from_camera(self, camera: CameraTags) -> datetime:
        """``yyyy:MM:dd HH:mm:ss`` + ``.SSS`` + optional ``±HH:MM``."""
        timestamp = f"{camera.date_time_original.text}.{_subsecond(camera.sub_sec_time_original)}"
        grammar = CAMERA_FORMAT

        if camera.offset_time_original is not None:
            timestamp = f"{timestamp}{camera.offset_time_original.text}"
            grammar = f"{grammar}%z"

        return datetime.strptime(timestamp, grammar)

    def _from_publishing(self, publishing: PublishingTags) -> datetime:
        """Full or partial ISO-8601, parsed as is."""
        value = publishing.create_date.text
        return datetime.fromisoformat(_expand_partial_iso_date(value))

    def _from_wire_service(self, wire: WireServiceTags) -> datetime:
        """``CCYYMMDD`` with an optional ``T`` + ``HHMMSS±HHMM``."""
        timestamp = wire.date_created.text
        if wire.time_created is not None:
            timestamp = f"{timestamp}T{wire.time_created.text}"
        if not re.fullmatch(r'\d{8}(T\d{6}([+-]\d{4})?)?', timestamp):
            raise ValueError(f"expected CCYYMMDD[THHMMSS[+HHMM]], got {timestamp!r}")
        return datetime.fromisoformat(timestamp)
