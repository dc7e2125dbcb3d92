"""Input album metadata schema."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AlbumMetadata(BaseModel):
    """
    User-authored metadata stored alongside (or near) an album on disk.

    Only ``title`` is required. ``thumb`` and every entry of ``order`` must
    name a photo inside the album; the album checks this when it is built.
    Unknown fields and wrong types are rejected.

    Example:
        {
          "title": "My Album",
          "description": "An album of photos",
          "thumb": "IMG_1234.jpg",
          "slug": "my-album",
          "unlisted": false,
          "keywords": ["landscapes", "art"],
          "order": ["IMG_7890.jpg", "IMG_1234.jpg"]
        }
    """

    model_config = ConfigDict(extra='forbid', strict=True)

    title: str = Field(..., description="Album title")
    description: Optional[str] = Field(None, description="Album description")
    thumb: Optional[str] = Field(None, description="Preferred album thumb image filename in the album")
    slug: Optional[str] = Field(None, description="URL path of the album, like /photos/album1")
    unlisted: Optional[bool] = Field(None, description="An unlisted album is published but not linked to")
    keywords: Optional[list[str]] = Field(None, description="Album-wide keywords for SEO")
    order: Optional[list[str]] = Field(None, description="Image filenames for custom ordering")
