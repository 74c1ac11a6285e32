"""
Image format conversion utilities.

Handles conversions at the API boundary:
- NumPy arrays (OpenCV BGR / BGRA / grayscale)
- PIL Images (RGB / RGBA / L)
- Base64 encoded strings
"""

import base64
import binascii
import io
import logging
from typing import Union

import cv2
import numpy as np
from PIL import Image, UnidentifiedImageError

from core.constants import ErrorMessages, ImageConstants
from core.exceptions import DecodeError

logger = logging.getLogger(__name__)


class ImageConverters:
    """Utilities for converting between image formats."""

    @staticmethod
    def numpy_to_pil(image: np.ndarray) -> Image.Image:
        """
        Convert NumPy array (OpenCV format) to PIL Image.

        Args:
            image: NumPy array in BGR, BGRA or grayscale format (OpenCV)

        Returns:
            PIL Image in RGB, RGBA or L mode
        """
        if image.ndim == 3 and image.shape[2] == 3:
            image_rgb = cv2.cvtColor(image, cv2.COLOR_BGR2RGB)
        elif image.ndim == 3 and image.shape[2] == 4:
            image_rgb = cv2.cvtColor(image, cv2.COLOR_BGRA2RGBA)
        else:
            image_rgb = image

        return Image.fromarray(image_rgb)

    @staticmethod
    def pil_to_numpy(image: Image.Image) -> np.ndarray:
        """
        Convert PIL Image to NumPy array in OpenCV channel order.

        Palette and other exotic modes are converted to RGB (or RGBA when the
        image carries transparency) first.

        Args:
            image: PIL Image

        Returns:
            NumPy array in BGR, BGRA or grayscale format
        """
        if image.mode not in ("L", "RGB", "RGBA"):
            has_alpha = "A" in image.mode or "transparency" in image.info
            image = image.convert("RGBA" if has_alpha else "RGB")

        array = np.array(image)

        if array.ndim == 3:
            code = cv2.COLOR_RGB2BGR if array.shape[2] == 3 else cv2.COLOR_RGBA2BGRA
            array = cv2.cvtColor(array, code)

        return array

    @staticmethod
    def to_base64(
        image: Union[np.ndarray, Image.Image],
        format: str = ImageConstants.DEFAULT_ENCODE_FORMAT,
        quality: int = ImageConstants.JPEG_QUALITY,
    ) -> str:
        """
        Convert image to base64 string.

        Args:
            image: Input image (NumPy array or PIL Image)
            format: Image format (PNG, JPEG)
            quality: JPEG quality (1-100, ignored for PNG)

        Returns:
            Base64 encoded string
        """
        try:
            if isinstance(image, np.ndarray):
                image = ImageConverters.numpy_to_pil(image)

            buffer = io.BytesIO()
            save_kwargs = {"format": format}

            if format.upper() == "JPEG":
                if image.mode == "RGBA":
                    image = image.convert("RGB")
                save_kwargs["quality"] = quality
                save_kwargs["optimize"] = True

            image.save(buffer, **save_kwargs)
            return base64.b64encode(buffer.getvalue()).decode("utf-8")

        except Exception as e:
            logger.error(f"Failed to convert image to base64: {e}")
            raise

    @staticmethod
    def from_base64(base64_string: str) -> np.ndarray:
        """
        Convert base64 string to NumPy array.

        Args:
            base64_string: Base64 encoded image (an optional data URL prefix is stripped)

        Returns:
            NumPy array in BGR(A) or grayscale format (OpenCV)

        Raises:
            DecodeError: If the string is not a decodable image
        """
        if "," in base64_string and base64_string.lstrip().startswith("data:"):
            base64_string = base64_string.split(",", 1)[1]

        try:
            image_bytes = base64.b64decode(base64_string, validate=True)
            image = Image.open(io.BytesIO(image_bytes))
            image.load()
        except (binascii.Error, ValueError, UnidentifiedImageError, OSError) as e:
            logger.error(f"Failed to decode base64 image: {e}")
            raise DecodeError(ErrorMessages.INVALID_ENCODED_IMAGE.format(error=e)) from e

        return ImageConverters.pil_to_numpy(image)
