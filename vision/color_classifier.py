"""
Color classification for boundary markers.

Converts sampled RGB pixels to HSV and decides whether a pixel belongs to
the orange boundary marker printed on the payment slip.

HSV conventions used here (not OpenCV's):
- hue in degrees
- saturation as a ratio in [0, 1]
- value as the raw channel maximum in [0, 255]
"""

import math
from typing import NamedTuple, Optional

from core.enums import HueMode
from core.pixel_sampler import RGBSample
from schemas.detection import BoundaryDetectionParams


class HSVSample(NamedTuple):
    """Hue (degrees), saturation (0-1) and value (0-255) of one pixel."""

    hue: float
    saturation: float
    value: float


def to_hsv(sample: RGBSample, hue_mode: HueMode = HueMode.ABSOLUTE) -> HSVSample:
    """
    Convert an RGB sample to HSV.

    The red-max branch can produce a negative hue. In ABSOLUTE mode the sign
    is dropped, reproducing the original heuristic; this is an approximation,
    not the standard formula. WRAPPED mode adds 360 instead.

    Args:
        sample: RGB channel values (0-255)
        hue_mode: Negative hue normalization

    Returns:
        HSVSample
    """
    red, green, blue = (float(c) for c in sample)

    rgb_max = max(red, green, blue)
    rgb_min = min(red, green, blue)
    diff = rgb_max - rgb_min

    if rgb_max == rgb_min:
        hue = 0.0
    elif rgb_max == red:
        # fmod keeps the sign of the dividend, unlike Python's %
        hue = math.fmod(60.0 * ((green - blue) / diff), 360.0)
    elif rgb_max == green:
        hue = 60.0 * ((blue - red) / diff) + 120.0
    else:
        hue = 60.0 * ((red - green) / diff) + 240.0

    if hue_mode == HueMode.WRAPPED:
        if hue < 0:
            hue += 360.0
    else:
        hue = abs(hue)

    value = rgb_max
    saturation = 0.0 if rgb_max == 0 else diff / value

    return HSVSample(hue=hue, saturation=saturation, value=value)


def is_boundary_color(hsv: HSVSample, params: Optional[BoundaryDetectionParams] = None) -> bool:
    """Check if an HSV sample falls inside the boundary marker color range."""
    if params is None:
        params = BoundaryDetectionParams()

    return (
        params.hue_min <= hsv.hue <= params.hue_max
        and hsv.value >= params.value_min
        and hsv.saturation >= params.saturation_min
    )


class ColorClassifier:
    """Classifies RGB samples as boundary marker pixels for one parameter set."""

    def __init__(self, params: Optional[BoundaryDetectionParams] = None):
        self.params = params or BoundaryDetectionParams()

    def to_hsv(self, sample: RGBSample) -> HSVSample:
        return to_hsv(sample, hue_mode=self.params.hue_mode)

    def is_boundary_color(self, hsv: HSVSample) -> bool:
        return is_boundary_color(hsv, self.params)

    def classify(self, sample: RGBSample) -> bool:
        """Convert and classify in one step."""
        return self.is_boundary_color(self.to_hsv(sample))
