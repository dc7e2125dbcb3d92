"""Output photo and album document schemas."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from photodir.schemas.metadata import AlbumMetadata


class PhotoSchema(BaseModel):
    """
    Metadata emitted for a single photo: just enough to sort, display and size
    the photo and its thumbnails on a website.

    Example:
        {
          "filename": "IMG_2851.jpg",
          "date": "2009-12-09T00:33:19.000Z",
          "width": 1064,
          "height": 1600,
          "landscape": false
        }
    """

    model_config = ConfigDict(extra='forbid', strict=True)

    filename: str = Field(..., description="On-disk file name", examples=["IMG_2851.jpg"])
    date: str = Field(
        ...,
        description="Capture time, ISO-8601 UTC with millisecond precision",
        pattern=r'^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$',
        examples=["2009-12-09T00:33:19.000Z"],
    )
    width: int = Field(..., description="Photo width in pixels", gt=0)
    height: int = Field(..., description="Photo height in pixels", gt=0)
    landscape: bool = Field(..., description="True if width is greater than height")
    id: Optional[str] = Field(None, description="Opaque photo identifier")
    alt: Optional[str] = Field(None, description="Photo description")

    @model_validator(mode='after')
    def _landscape_matches_dimensions(self) -> 'PhotoSchema':
        if self.landscape != (self.width > self.height):
            raise ValueError("landscape must equal width > height")
        return self


class AlbumSchema(AlbumMetadata):
    """
    Output album document: the passed-through input metadata plus the photos.

    ``title`` defaults to the album directory name, ``slug`` to the directory
    name lower cased and ``unlisted`` to false.
    """

    unlisted: bool = Field(..., description="An unlisted album is published but not linked to")
    slug: str = Field(..., description="URL path of the album")
    photos: list[PhotoSchema] = Field(..., description="Photos in directory order")
