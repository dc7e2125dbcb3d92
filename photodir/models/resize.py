"""
Resize Target Model
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ResizeTarget:
    """Bounding rectangle an image is scaled down to fit inside."""

    width: int
    height: int

    def contains(self, width: int, height: int) -> bool:
        """True if an image of the given size already fits on both axes."""
        return self.width >= width and self.height >= height
