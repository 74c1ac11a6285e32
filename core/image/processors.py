"""
Image processing operations.

Handles geometric image manipulation:
- Rotation into landscape orientation
- Cropping to a boundary rectangle
- Uniform scaling
- Debug overlay of a rectangle outline
"""

import logging
from typing import Tuple

import cv2
import numpy as np

from core.constants import Colors, DrawingConstants, ErrorMessages
from core.exceptions import CropError
from schemas.common import BoundaryRect

logger = logging.getLogger(__name__)


def rotate(image: np.ndarray) -> np.ndarray:
    """
    Rotate portrait images by -90 degrees (counter-clockwise, no flip).

    The capture device delivers portrait frames while the slip is laid out
    in landscape. Images that are at least as wide as tall are returned
    unchanged.

    Args:
        image: Input image

    Returns:
        Landscape image
    """
    height, width = image.shape[:2]
    if height > width:
        logger.debug(f"Rotating portrait image {width}x{height}")
        return cv2.rotate(image, cv2.ROTATE_90_COUNTERCLOCKWISE)
    return image


def crop(image: np.ndarray, rect: BoundaryRect) -> np.ndarray:
    """
    Crop image to rectangle.

    Args:
        image: Input image
        rect: Region to keep

    Returns:
        New image containing only the rectangle

    Raises:
        CropError: If the rectangle is empty or not fully inside the image
    """
    height, width = image.shape[:2]
    if not rect.is_within(width, height):
        raise CropError(
            ErrorMessages.CROP_OUT_OF_BOUNDS.format(
                rect=rect.to_dict(), width=width, height=height
            ),
            rect=rect,
            image_size=(width, height),
        )

    return image[rect.y : rect.y2, rect.x : rect.x2].copy()


def scaled_size(width: int, height: int, max_dimension: int) -> Tuple[int, int]:
    """Size with the longer side equal to max_dimension, aspect ratio preserved."""
    if width > height:
        new_width = max_dimension
        new_height = max(1, int(round(max_dimension * height / width)))
    else:
        new_height = max_dimension
        new_width = max(1, int(round(max_dimension * width / height)))
    return new_width, new_height


def scale_image(image: np.ndarray, max_dimension: int) -> np.ndarray:
    """
    Scale image uniformly so its longer side equals max_dimension.

    Args:
        image: Input image
        max_dimension: Target length of the longer side in pixels

    Returns:
        Scaled image
    """
    if max_dimension <= 0:
        raise ValueError(f"max_dimension must be positive, got {max_dimension}")

    h, w = image.shape[:2]
    new_w, new_h = scaled_size(w, h, max_dimension)
    if (new_w, new_h) == (w, h):
        return image.copy()

    # INTER_AREA for shrinking, INTER_CUBIC for enlarging
    interpolation = cv2.INTER_AREA if new_w < w else cv2.INTER_CUBIC
    return cv2.resize(image, (new_w, new_h), interpolation=interpolation)


def draw_rect(
    image: np.ndarray,
    rect: BoundaryRect,
    color: Tuple[int, int, int] = Colors.BOUNDARY,
    thickness: int = DrawingConstants.DEFAULT_LINE_THICKNESS,
) -> np.ndarray:
    """
    Draw rectangle outline on a copy of the image (debug visualization).

    Args:
        image: Input image (grayscale is converted to BGR)
        rect: Rectangle to outline
        color: Stroke color (BGR)
        thickness: Line thickness

    Returns:
        Annotated copy of the image
    """
    if image.ndim == 2:
        result = cv2.cvtColor(image, cv2.COLOR_GRAY2BGR)
    else:
        result = image.copy()

    if result.shape[2] == 4:
        color = (*color, 255)

    cv2.rectangle(result, (rect.x, rect.y), (rect.x2, rect.y2), color, thickness)
    return result
