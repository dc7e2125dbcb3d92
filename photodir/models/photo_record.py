"""
Photo Record Model

The normalized, presentation-ready metadata of a single photo.
"""

import os
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Optional


def format_timestamp(instant: datetime) -> str:
    """
    Render an aware datetime as an ISO-8601 UTC string with milliseconds.

    Example:
        >>> format_timestamp(datetime(2024, 1, 1, 10, tzinfo=timezone.utc))
        '2024-01-01T10:00:00.000Z'
    """
    utc = instant.astimezone(timezone.utc)
    return f"{utc.strftime('%Y-%m-%dT%H:%M:%S')}.{utc.microsecond // 1000:03d}Z"


def truncate_to_millis(instant: datetime) -> datetime:
    return instant.replace(microsecond=instant.microsecond // 1000 * 1000)


@dataclass(frozen=True)
class PhotoRecord:
    """
    Normalized metadata for one photo.

    Computed once per Photo and cached; never mutated afterwards. ``landscape``
    is derived from width and height on every access and cannot be set.

    Attributes:
        filename: On-disk leaf name of the photo, e.g. ``IMG_1234.jpg``
        date: Capture instant, normalized to UTC with millisecond precision
        width: Width in pixels
        height: Height in pixels
        id: Optional opaque identifier
        alt: Optional opaque description

    Example:
        >>> record = PhotoRecord(
        ...     filename='IMG_2851.jpg',
        ...     date=datetime(2009, 12, 9, 0, 33, 19, tzinfo=timezone.utc),
        ...     width=1064,
        ...     height=1600,
        ... )
        >>> record.landscape
        False
    """

    filename: str
    date: datetime
    width: int
    height: int
    id: Optional[str] = None
    alt: Optional[str] = None

    def __post_init__(self):
        """Validate fields and normalize the date to UTC milliseconds."""
        if not self.filename or os.path.basename(self.filename) != self.filename:
            raise ValueError(f"filename must be a leaf name, got {self.filename!r}")
        for name in ('width', 'height'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
        if self.date.tzinfo is None:
            raise ValueError("date must be timezone-aware")

        normalized = truncate_to_millis(self.date.astimezone(timezone.utc))
        object.__setattr__(self, 'date', normalized)

    @property
    def landscape(self) -> bool:
        return self.width > self.height

    @property
    def iso_date(self) -> str:
        return format_timestamp(self.date)

    def with_dimensions(self, width: int, height: int) -> 'PhotoRecord':
        """Copy of this record with only width and height replaced."""
        return replace(self, width=width, height=height)

    def to_dict(self) -> dict:
        """
        Convert to the output photo document.

        Optional fields are omitted when unset.
        """
        data = {
            'filename': self.filename,
            'date': self.iso_date,
            'width': self.width,
            'height': self.height,
            'landscape': self.landscape,
        }
        if self.id is not None:
            data['id'] = self.id
        if self.alt is not None:
            data['alt'] = self.alt
        return data

    def __repr__(self) -> str:
        return (
            f"PhotoRecord(filename='{self.filename}', date='{self.iso_date}', "
            f"width={self.width}, height={self.height})"
        )
