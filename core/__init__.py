"""
Core modules for Slip Scanner
"""

from .exceptions import CropError, DecodeError, ProcessingError
from .pixel_sampler import PixelBuffer, RGBSample, decode, decoded, read_pixel

__all__ = [
    "ProcessingError",
    "DecodeError",
    "CropError",
    "PixelBuffer",
    "RGBSample",
    "decode",
    "decoded",
    "read_pixel",
]
