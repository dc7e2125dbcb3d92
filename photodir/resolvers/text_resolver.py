"""Optional identifier and description of a photo."""

from typing import Optional

from photodir.models import TagBag, TagValue


def _first_text(*candidates: Optional[TagValue]) -> Optional[str]:
    for tag in candidates:
        if tag is not None and tag.text:
            return tag.text
    return None


def resolve_identifier(tags: TagBag) -> Optional[str]:
    """XMP Identifier, then EXIF ImageUniqueID."""
    return _first_text(tags.publishing.identifier, tags.camera.image_unique_id)


def resolve_description(tags: TagBag) -> Optional[str]:
    """XMP Description, then IPTC Caption-Abstract, then EXIF ImageDescription."""
    return _first_text(
        tags.publishing.description,
        tags.wire.caption_abstract,
        tags.camera.image_description,
    )
