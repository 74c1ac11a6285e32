"""
Pixel sampling over decoded RGBA buffers.

Decodes an OpenCV image (grayscale, BGR or BGRA NumPy array) into an owned,
linearly addressable RGBA byte buffer and provides coordinate-indexed reads.

Buffer layout:
- 4 bytes per pixel (R, G, B, A), 8 bits per component, premultiplied alpha last
- Rows are ``stride`` bytes apart; ``stride`` may exceed ``width * 4`` when
  rows are padded to an alignment
- Padding and undrawn regions are zero
"""

import logging
from contextlib import contextmanager
from typing import Iterator, NamedTuple, Optional

import cv2
import numpy as np

from core.constants import ErrorMessages, ImageConstants
from core.exceptions import DecodeError

logger = logging.getLogger(__name__)

BYTES_PER_PIXEL = ImageConstants.BYTES_PER_PIXEL


class RGBSample(NamedTuple):
    """Red, green, blue channel values (0-255) read from a pixel buffer."""

    red: int
    green: int
    blue: int


class PixelBuffer:
    """
    Owned RGBA pixel buffer with bounds-checked reads.

    The buffer is allocated once per source image and released exactly once,
    either explicitly via ``release()`` or by the ``decoded()`` context manager.
    """

    def __init__(self, data: np.ndarray, width: int, height: int, stride: int):
        if stride < width * BYTES_PER_PIXEL:
            raise ValueError(f"Stride {stride} is smaller than row size {width * BYTES_PER_PIXEL}")
        if data.size < stride * height:
            raise ValueError(f"Buffer of {data.size} bytes cannot hold {height} rows of {stride}")

        self._data: Optional[np.ndarray] = data
        self.width = width
        self.height = height
        self.stride = stride

    @property
    def released(self) -> bool:
        return self._data is None

    @property
    def data(self) -> np.ndarray:
        """Raw byte array (read-only access expected)."""
        if self._data is None:
            raise ValueError(ErrorMessages.BUFFER_RELEASED)
        return self._data

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def read_pixel(self, x: int, y: int, checked: bool = True) -> RGBSample:
        """
        Read the RGB triple at (x, y); alpha is ignored.

        Args:
            x: Column (0 <= x < width)
            y: Row (0 <= y < height)
            checked: Validate coordinates. Only pass False for coordinates
                already proven to be in range.

        Returns:
            RGBSample

        Raises:
            IndexError: If checked and the coordinate is outside the buffer
        """
        data = self.data
        if checked and not self.contains(x, y):
            raise IndexError(
                ErrorMessages.PIXEL_OUT_OF_BOUNDS.format(
                    x=x, y=y, width=self.width, height=self.height
                )
            )

        offset = self.stride * y + x * BYTES_PER_PIXEL
        return RGBSample(int(data[offset]), int(data[offset + 1]), int(data[offset + 2]))

    def release(self) -> None:
        """Release the underlying storage. Safe to call once; later reads fail."""
        if self._data is None:
            logger.warning("Pixel buffer released twice")
            return
        self._data = None

    def __repr__(self) -> str:
        state = "released" if self.released else "live"
        return f"PixelBuffer({self.width}x{self.height}, stride={self.stride}, {state})"


def _allocate(size: int) -> np.ndarray:
    return np.zeros(size, dtype=np.uint8)


def _aligned_stride(width: int, row_alignment: int) -> int:
    row_bytes = width * BYTES_PER_PIXEL
    if row_alignment <= 1:
        return row_bytes
    return ((row_bytes + row_alignment - 1) // row_alignment) * row_alignment


def _to_rgba(image: np.ndarray) -> np.ndarray:
    """Convert an OpenCV image to premultiplied RGBA."""
    if image.ndim == 2:
        return cv2.cvtColor(image, cv2.COLOR_GRAY2RGBA)

    channels = image.shape[2]
    if channels == 1:
        return cv2.cvtColor(image[:, :, 0], cv2.COLOR_GRAY2RGBA)
    if channels == 3:
        return cv2.cvtColor(image, cv2.COLOR_BGR2RGBA)
    if channels == 4:
        rgba = cv2.cvtColor(image, cv2.COLOR_BGRA2RGBA)
        alpha = rgba[:, :, 3]
        if not np.all(alpha == 255):
            # Premultiply color channels by alpha
            scaled = rgba[:, :, :3].astype(np.uint16) * alpha[:, :, None].astype(np.uint16)
            rgba[:, :, :3] = ((scaled + 127) // 255).astype(np.uint8)
        return rgba

    raise DecodeError(ErrorMessages.UNSUPPORTED_SHAPE.format(shape=image.shape))


def decode(
    image: np.ndarray, row_alignment: int = ImageConstants.DEFAULT_ROW_ALIGNMENT
) -> PixelBuffer:
    """
    Render an image into a freshly allocated, zero-initialized RGBA buffer.

    Args:
        image: OpenCV image (HxW grayscale, HxWx3 BGR or HxWx4 BGRA, uint8)
        row_alignment: Pad each row to a multiple of this many bytes

    Returns:
        PixelBuffer owning the decoded pixels

    Raises:
        DecodeError: Invalid image, zero dimensions or allocation failure
    """
    if image is None or not isinstance(image, np.ndarray):
        raise DecodeError(ErrorMessages.INVALID_IMAGE.format(reason="not an image array"))
    if image.ndim not in (2, 3):
        raise DecodeError(ErrorMessages.UNSUPPORTED_SHAPE.format(shape=image.shape))
    if image.dtype != np.uint8:
        raise DecodeError(ErrorMessages.UNSUPPORTED_DTYPE.format(dtype=image.dtype))

    height, width = image.shape[:2]
    if width == 0 or height == 0:
        raise DecodeError(ErrorMessages.EMPTY_IMAGE.format(width=width, height=height))

    stride = _aligned_stride(width, row_alignment)
    size = stride * height

    try:
        data = _allocate(size)
    except MemoryError as e:
        logger.error(f"Pixel buffer allocation failed: {e}")
        raise DecodeError(ErrorMessages.ALLOCATION_FAILED.format(size=size)) from e

    rgba = _to_rgba(image)
    rows = data.reshape(height, stride)
    rows[:, : width * BYTES_PER_PIXEL] = rgba.reshape(height, width * BYTES_PER_PIXEL)

    logger.debug(f"Decoded {width}x{height} image into buffer with stride {stride}")
    return PixelBuffer(data, width, height, stride)


def read_pixel(buffer: PixelBuffer, x: int, y: int) -> RGBSample:
    """Checked pixel read; see PixelBuffer.read_pixel."""
    return buffer.read_pixel(x, y)


@contextmanager
def decoded(
    image: np.ndarray, row_alignment: int = ImageConstants.DEFAULT_ROW_ALIGNMENT
) -> Iterator[PixelBuffer]:
    """Decode an image and release its buffer on every exit path."""
    buffer = decode(image, row_alignment=row_alignment)
    try:
        yield buffer
    finally:
        buffer.release()
