"""Resize request schema."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from photodir.config import section

DEFAULT_QUALITY = 80


class ResizeOptions(BaseModel):
    """
    Parameters for re-encoding photos to bounded dimensions.

    Accepts both the Python field names and the camelCase document names
    (``largeSideMax``, ``smallSideMax``).

    Example:
        >>> ResizeOptions(dir='/srv/photos/large', largeSideMax=2048)
    """

    model_config = ConfigDict(extra='forbid', populate_by_name=True, frozen=True)

    dir: str = Field(..., description="Destination directory for resized photos")
    large_side_max: int = Field(..., alias='largeSideMax', gt=0,
                                description="Maximum length of the long side in pixels")
    small_side_max: Optional[int] = Field(None, alias='smallSideMax', gt=0,
                                          description="Maximum length of the short side in pixels")
    quality: int = Field(DEFAULT_QUALITY, ge=1, le=100, description="Encoder quality, 1-100")

    @classmethod
    def from_config(cls, config: Dict[str, Any], **overrides: Any) -> 'ResizeOptions':
        """
        Build options from the ``resize:`` section of a loaded config.

        Keyword overrides that are not None win over the config values.
        """
        resize_config = section(config, 'resize')
        values = {
            'dir': resize_config.get('dir'),
            'large_side_max': resize_config.get('large_side_max'),
            'small_side_max': resize_config.get('small_side_max'),
            'quality': resize_config.get('quality', DEFAULT_QUALITY),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        values = {k: v for k, v in values.items() if v is not None}
        return cls(**values)
