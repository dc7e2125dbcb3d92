"""
EXIF Extractor

Decodes the embedded metadata of photo files into TagBags.
Uses exiftool to read camera-native (EXIF), publishing (XMP), wire-service
(IPTC) and container header tags from JPEG, PNG and WebP files.
"""

import os
import logging
import re
from typing import Any, Dict, List, Mapping, Optional, Tuple

try:
    from exiftool import ExifToolHelper  # type: ignore
    from exiftool.exceptions import ExifToolExecuteError  # type: ignore
except ImportError:
    raise ImportError("exiftool is required. Install with: pip install pyexiftool")

from photodir.config import load_config, section
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

logger = logging.getLogger(__name__)

# exiftool "-G" group:tag name -> field name on the namespace dataclass
CAMERA_TAGS = {
    'EXIF:DateTimeOriginal': 'date_time_original',
    'EXIF:SubSecTimeOriginal': 'sub_sec_time_original',
    'EXIF:OffsetTimeOriginal': 'offset_time_original',
    'EXIF:ImageUniqueID': 'image_unique_id',
    'EXIF:ImageDescription': 'image_description',
}

PUBLISHING_TAGS = {
    'XMP:CreateDate': 'create_date',
    'XMP:Identifier': 'identifier',
    'XMP:Description': 'description',
}

WIRE_SERVICE_TAGS = {
    'IPTC:DateCreated': 'date_created',
    'IPTC:TimeCreated': 'time_created',
    'IPTC:Caption-Abstract': 'caption_abstract',
}

# Checked in order, first family with any dimension tag wins
HEADER_FAMILIES = (HeaderFamily.RIFF, HeaderFamily.PNG, HeaderFamily.GENERIC)

# exiftool renders XMP dates EXIF-style ("2021:01:01 12:00:01+02:00")
_EXIF_STYLE_DATE = re.compile(r'^(\d{4})(?::(\d{2}))?(?::(\d{2}))?(?: (.+))?$')


def _xmp_date_to_iso(value: str) -> str:
    """
    Convert exiftool's rendering of an XMP date back to ISO-8601.

    Values already in ISO form are returned unchanged.

    Example:
        >>> _xmp_date_to_iso('2021:01:01 12:00:01.002+02:00')
        '2021-01-01T12:00:01.002+02:00'
    """
    match = _EXIF_STYLE_DATE.match(value.strip())
    if not match:
        return value.strip()
    year, month, day, time_part = match.groups()
    date_part = '-'.join(p for p in (year, month, day) if p)
    return f"{date_part}T{time_part}" if time_part else date_part


def _iptc_digits(value: str) -> str:
    """
    Strip the colons exiftool adds to IPTC dates and times.

    Example:
        >>> _iptc_digits('2022:01:01')
        '20220101'
        >>> _iptc_digits('00:00:01+00:00')
        '000001+0000'
    """
    return value.strip().replace(':', '')


def _tag_value(raw: Mapping[str, Any], described: Mapping[str, Any], key: str,
               value: Any = None) -> TagValue:
    return TagValue(
        value=raw[key] if value is None else value,
        description=str(described.get(key, raw[key])),
    )


class ExifExtractor:
    """
    Reads embedded metadata from photos.

    Runs exiftool twice per file inside one session: once for the numeric
    values and once for the printed descriptions, then keeps only the tags the
    resolvers know about.

    Attributes:
        executable: Path to the exiftool binary (None uses the one on PATH)

    Example:
        >>> extractor = ExifExtractor()
        >>> tags = extractor.load_tags('/photos/album/IMG_1234.jpg')
        >>> tags.camera.date_time_original.value
        '2023:01:01 00:00:01'
    """

    def __init__(self, executable: Optional[str] = None):
        """
        Initialize EXIF extractor.

        Args:
            executable: Path to exiftool, defaults to the binary on PATH
        """
        self.executable = executable

    @classmethod
    def from_config(cls, config_path: Optional[str] = None) -> 'ExifExtractor':
        """
        Create ExifExtractor from configuration file.

        Args:
            config_path: Path to YAML configuration file

        Returns:
            Configured ExifExtractor instance
        """
        config = load_config(config_path)
        extraction_config = section(config, 'extraction')
        return cls(executable=extraction_config.get('exiftool_path'))

    def _helper(self) -> ExifToolHelper:
        kwargs: Dict[str, Any] = {'common_args': ['-G']}
        if self.executable:
            kwargs['executable'] = self.executable
        return ExifToolHelper(**kwargs)

    def load_tags(self, file_path: str) -> TagBag:
        """
        Decode the metadata of a single image file.

        Args:
            file_path: Path to image file

        Returns:
            TagBag with every recognized tag

        Raises:
            InvalidImageFormat: exiftool could not parse the file
        """
        try:
            with self._helper() as et:
                values = et.get_metadata(file_path, params=['-n'])
                descriptions = et.get_metadata(file_path)
        except ExifToolExecuteError as e:
            detail = (e.stderr or '').strip() or f"exiftool exited with status {e.returncode}"
            raise InvalidImageFormat(file_path, detail) from e

        if not values:
            raise InvalidImageFormat(file_path, "no metadata returned")

        raw, described = values[0], descriptions[0] if descriptions else {}
        error = raw.get('ExifTool:Error')
        if error:
            raise InvalidImageFormat(file_path, str(error))

        tags = self.tag_bag_from_metadata(raw, described)
        logger.debug(f"Loaded tags from {os.path.basename(file_path)}: "
                     f"header={tags.header.family.value if tags.header else None}")
        return tags

    @classmethod
    def tag_bag_from_metadata(cls, raw: Mapping[str, Any],
                              described: Optional[Mapping[str, Any]] = None) -> TagBag:
        """
        Build a TagBag from grouped exiftool JSON output.

        Args:
            raw: Tag values as printed by ``exiftool -j -G -n``
            described: Tag descriptions as printed by ``exiftool -j -G``

        Returns:
            TagBag holding the recognized tags
        """
        described = described or {}

        def pick(mapping: Dict[str, str], convert=None) -> Dict[str, TagValue]:
            fields = {}
            for key, field_name in mapping.items():
                if key not in raw or raw[key] in (None, ''):
                    continue
                value = convert(field_name, str(raw[key])) if convert is not None else None
                fields[field_name] = _tag_value(raw, described, key, value)
            return fields

        def publishing(field_name: str, value: str) -> str:
            return _xmp_date_to_iso(value) if field_name == 'create_date' else value

        def wire(field_name: str, value: str) -> str:
            return _iptc_digits(value) if field_name in ('date_created', 'time_created') else value

        return TagBag(
            camera=CameraTags(**pick(CAMERA_TAGS)),
            publishing=PublishingTags(**pick(PUBLISHING_TAGS, publishing)),
            wire=WireServiceTags(**pick(WIRE_SERVICE_TAGS, wire)),
            header=cls._file_header(raw, described),
        )

    @staticmethod
    def _file_header(raw: Mapping[str, Any], described: Mapping[str, Any]) -> Optional[FileHeader]:
        """Pick the first header family that reports any dimension."""
        for family in HEADER_FAMILIES:
            candidates: List[Tuple[str, str]] = [(f"{family.value}:ImageWidth", f"{family.value}:ImageHeight")]
            if family is HeaderFamily.GENERIC:
                # TIFF-like containers keep their header dimensions in IFD0
                candidates.append(('EXIF:ImageWidth', 'EXIF:ImageHeight'))

            for width_key, height_key in candidates:
                if width_key in raw or height_key in raw:
                    return FileHeader(
                        family=family,
                        image_width=_tag_value(raw, described, width_key) if width_key in raw else None,
                        image_height=_tag_value(raw, described, height_key) if height_key in raw else None,
                    )
        return None

    def copy_metadata(self, source_path: str, destination_path: str) -> None:
        """
        Copy every tag group from one file onto another, in place.

        Used after re-encoding so the resized copy keeps the EXIF, XMP, IPTC
        and ICC profile of the original verbatim.

        Args:
            source_path: File to copy tags from
            destination_path: File to write tags to
        """
        with self._helper() as et:
            et.execute('-TagsFromFile', source_path, '-all:all', '-icc_profile',
                       '-overwrite_original', destination_path)
        logger.debug(f"Copied metadata {source_path} -> {destination_path}")
