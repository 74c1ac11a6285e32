"""
Image processing utilities.

This package provides focused image processing utilities:
- converters: Format conversions (NumPy, PIL, base64)
- processors: Image operations (rotate, crop, scale, rectangle overlay)
"""

from core.image.converters import ImageConverters
from core.image.processors import crop, draw_rect, rotate, scale_image

__all__ = ["ImageConverters", "crop", "draw_rect", "rotate", "scale_image"]
