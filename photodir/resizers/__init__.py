"""
Resizing: target planning and Pillow re-encoding.
"""

from .resize_planner import ResizePlanner
from .image_resizer import ImageResizer, prepare_destination

__all__ = ['ResizePlanner', 'ImageResizer', 'prepare_destination']
