"""
Resize Planner

Computes the bounding rectangle a photo is scaled into.
"""

import logging
from typing import Optional, Tuple

from photodir.diagnostics import WarningSink, resolve_sink
from photodir.models import ResizeTarget

logger = logging.getLogger(__name__)


class ResizePlanner:
    """
    Plans resize targets from long/short side limits.

    The short-side limit defaults to the long-side limit and never exceeds
    it. A plan that would not shrink the source on either axis is still
    returned, with a warning.

    Example:
        >>> ResizePlanner().plan(1600, 1064, True, 800, 600)
        ResizeTarget(width=800, height=600)
    """

    def __init__(self, warn: Optional[WarningSink] = None):
        self._warn = resolve_sink(warn)

    def plan(self, source_width: int, source_height: int, landscape: bool,
             long_side_max: int, short_side_max: Optional[int] = None,
             file_name: str = '') -> ResizeTarget:
        short = min(short_side_max if short_side_max is not None else long_side_max,
                    long_side_max)
        if landscape:
            target = ResizeTarget(width=long_side_max, height=short)
        else:
            target = ResizeTarget(width=short, height=long_side_max)

        if target.contains(source_width, source_height):
            self._warn(
                f"WARNING: Resizing {file_name} ({source_width}x{source_height}) to "
                f"{target.width}x{target.height} will not make it smaller")
        return target

    @staticmethod
    def fit(source_width: int, source_height: int, target: ResizeTarget) -> Tuple[int, int]:
        """
        Size of the source scaled to fit inside target, aspect ratio kept,
        never enlarged. Rounds like ``PIL.Image.thumbnail``.

        Example:
            >>> ResizePlanner.fit(1600, 1064, ResizeTarget(800, 600))
            (800, 532)
        """
        scale = min(target.width / source_width, target.height / source_height, 1.0)
        if scale >= 1.0:
            return source_width, source_height
        return (max(1, round(source_width * scale)), max(1, round(source_height * scale)))
