"""
Vision algorithms for boundary marker detection.
"""

from .boundary_locator import BoundaryLocator, candidate_offsets, first_hit
from .color_classifier import ColorClassifier, HSVSample, is_boundary_color, to_hsv

__all__ = [
    "BoundaryLocator",
    "candidate_offsets",
    "first_hit",
    "ColorClassifier",
    "HSVSample",
    "is_boundary_color",
    "to_hsv",
]
