"""
Exceptions

Errors raised while turning a directory of photos into album documents.
Construction-time errors (metadata validation, conflicting options, missing
references) are raised before any photo is decoded. Per-photo errors carry the
path of the offending file so callers can decide whether to skip or abort.
"""

from typing import Optional


class PhotoDirError(Exception):
    """Base class for all photodir errors."""


class DimensionUnavailable(PhotoDirError):
    """No recognized header namespace yielded both width and height."""

    def __init__(self, path: str, detail: Optional[str] = None):
        self.path = path
        self.detail = detail
        message = f"Cannot determine size of {path}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class InvalidImageFormat(PhotoDirError):
    """The decoder could not parse the file at all."""

    def __init__(self, path: str, detail: Optional[str] = None):
        self.path = path
        self.detail = detail
        message = f"Invalid image format: {path}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class MetadataValidationError(PhotoDirError):
    """
    User-authored album metadata failed schema validation.

    Attributes:
        source: Path of the metadata file (or a description of the input)
        errors: List of error dicts as reported by pydantic
    """

    def __init__(self, source: str, errors: list, summary: str):
        self.source = source
        self.errors = errors
        super().__init__(f"Invalid album metadata in {source}:\n{summary}")


class ConflictingOptions(PhotoDirError):
    """Two mutually exclusive options were supplied together."""


class ReferencedFileNotFound(PhotoDirError):
    """A thumbnail or ordering entry names a file that is not in the album."""

    def __init__(self, kind: str, filename: str, album: str):
        self.kind = kind
        self.filename = filename
        self.album = album
        super().__init__(f"{kind.capitalize()} {filename} not found in album {album}")


class ConfigurationError(PhotoDirError, ValueError):
    """The YAML configuration is malformed or names an unsupported setting."""
