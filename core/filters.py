"""
Image filter backends.

The preprocessing pipeline only depends on the ImageFilter protocol, so the
backend can be swapped (e.g. for a GPU implementation) without touching the
core. Both operations are deterministic and preserve the image's dimensions
and channel count.
"""

import logging
from typing import Protocol

import cv2
import numpy as np

from core.constants import PreprocessDefaults

logger = logging.getLogger(__name__)


class ImageFilter(Protocol):
    """Filter capability consumed by the preprocessing pipeline."""

    def invert_colors(self, image: np.ndarray) -> np.ndarray: ...

    def adaptive_threshold(self, image: np.ndarray, blur_radius: float) -> np.ndarray: ...


class OpenCVImageFilter:
    """ImageFilter implementation on top of OpenCV."""

    def invert_colors(self, image: np.ndarray) -> np.ndarray:
        """
        Invert color channels; an alpha channel is left untouched.

        Args:
            image: Grayscale, BGR or BGRA image

        Returns:
            Inverted image of the same shape
        """
        if image.ndim == 3 and image.shape[2] == 4:
            result = image.copy()
            result[:, :, :3] = cv2.bitwise_not(image[:, :, :3])
            return result
        return cv2.bitwise_not(image)

    def adaptive_threshold(
        self, image: np.ndarray, blur_radius: float = PreprocessDefaults.THRESHOLD_BLUR_RADIUS
    ) -> np.ndarray:
        """
        Binarize against the local mean luminance.

        A pixel turns white when its luminance is above the mean of its
        neighbourhood minus a small offset, black otherwise.

        Args:
            image: Grayscale, BGR or BGRA image
            blur_radius: Radius of the averaging window in pixels

        Returns:
            Binary image with the input's shape
        """
        if blur_radius <= 0:
            raise ValueError(f"Blur radius must be positive, got {blur_radius}")

        if image.ndim == 2:
            gray = image
        elif image.shape[2] == 4:
            gray = cv2.cvtColor(image, cv2.COLOR_BGRA2GRAY)
        else:
            gray = cv2.cvtColor(image, cv2.COLOR_BGR2GRAY)

        block_size = max(3, 2 * int(round(blur_radius)) + 1)
        offset = PreprocessDefaults.THRESHOLD_OFFSET * PreprocessDefaults.THRESHOLD_MAX_VALUE

        binary = cv2.adaptiveThreshold(
            gray,
            PreprocessDefaults.THRESHOLD_MAX_VALUE,
            cv2.ADAPTIVE_THRESH_MEAN_C,
            cv2.THRESH_BINARY,
            block_size,
            offset,
        )
        logger.debug(f"Adaptive threshold with block size {block_size}")

        if image.ndim == 2:
            return binary
        if image.shape[2] == 4:
            result = cv2.cvtColor(binary, cv2.COLOR_GRAY2BGRA)
            result[:, :, 3] = image[:, :, 3]
            return result
        return cv2.cvtColor(binary, cv2.COLOR_GRAY2BGR)
