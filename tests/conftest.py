"""
Pytest configuration and fixtures for Slip Scanner tests
"""

from types import SimpleNamespace

import numpy as np
import pytest

from core.image.converters import ImageConverters
from services.preprocess_service import PreprocessService

# Marker color: RGB (200, 133, 100) -> hue ~19.8, saturation 0.5, value 200
ORANGE_BGR = (100, 133, 200)
# Background: RGB (140, 160, 180) -> blue-ish gray, never a marker
BACKGROUND_BGR = (180, 160, 140)


@pytest.fixture
def layout():
    """
    Geometry of the synthetic test images.

    With the default scan (step 5, near third skipped) on a 450x300 image,
    rows 199, 194, ... and columns 150, 145, ... are sampled; the marker
    positions lie on that grid.
    """
    return SimpleNamespace(
        height=300,
        width=450,
        marker_row=149,
        marker_column=100,
        orange=ORANGE_BGR,
        background=BACKGROUND_BGR,
    )


@pytest.fixture
def make_flat_image(layout):
    """Factory for single-color images"""

    def _make(height=layout.height, width=layout.width, color=BACKGROUND_BGR):
        image = np.zeros((height, width, 3), dtype=np.uint8)
        image[:, :] = color
        return image

    return _make


@pytest.fixture
def make_marked_image(layout, make_flat_image):
    """Factory for flat images with a one pixel orange line at a row and/or column"""

    def _make(row=layout.marker_row, column=layout.marker_column, height=layout.height,
              width=layout.width):
        image = make_flat_image(height, width)
        if row is not None:
            image[row, :] = ORANGE_BGR
        if column is not None:
            image[:, column] = ORANGE_BGR
        return image

    return _make


@pytest.fixture
def flat_image(make_flat_image):
    """Landscape image without any boundary marker"""
    return make_flat_image()


@pytest.fixture
def marked_image(make_marked_image):
    """Landscape image with markers at the layout's row and column"""
    return make_marked_image()


@pytest.fixture
def portrait_marked_image(marked_image):
    """Marked image turned clockwise into portrait orientation"""
    return np.ascontiguousarray(np.rot90(marked_image, k=-1))


@pytest.fixture
def preprocess_service():
    """Create PreprocessService instance with default parameters"""
    return PreprocessService()


@pytest.fixture
def encode():
    """Encode an image as base64 PNG"""
    return lambda image: ImageConverters.to_base64(image, format="PNG")


@pytest.fixture
def decode():
    """Decode a base64 image back to a NumPy array"""
    return ImageConverters.from_base64
