"""
Enumerations shared across the Slip Scanner layers.
"""

from enum import Enum


class HueMode(str, Enum):
    """
    How negative hues from the red-max branch are normalized.

    ABSOLUTE reproduces the original heuristic (absolute value), which is a
    known approximation: a magenta-leaning red at -20 degrees reads as 20.
    WRAPPED is the conventional correction (add 360).
    """

    ABSOLUTE = "absolute"
    WRAPPED = "wrapped"


class ImageFormat(str, Enum):
    """Encoded image formats accepted at the API boundary."""

    PNG = "PNG"
    JPEG = "JPEG"
