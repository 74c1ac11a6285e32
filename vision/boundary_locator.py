"""
Boundary marker location.

Scans a decoded pixel buffer inward from the bottom-right (anchor) corner
along two independent lines and derives the crop rectangle of the slip:

- vertical scan along the right edge (x = width - 1), moving up
- horizontal scan along the bottom edge (y = height - 1), moving left

The first marker pixel on each line, moved ``inward_margin`` pixels toward
the origin, becomes the rectangle's origin on that axis. The bottom and right
edges are fixed anchors: the slip's far corner is assumed to already sit at
the image edge.
"""

import logging
from typing import Callable, Iterable, Optional

from core.pixel_sampler import PixelBuffer
from schemas.common import BoundaryRect, BoundaryScanResult
from schemas.detection import BoundaryDetectionParams
from vision.color_classifier import ColorClassifier


def candidate_offsets(start: int, step: int) -> range:
    """
    Offsets ``start, start - step, ...`` down to, but excluding, 0.

    A range is lazy and can be iterated again from the beginning.
    """
    if step < 1:
        raise ValueError(f"Scan step must be positive, got {step}")
    return range(start, 0, -step)


def first_hit(offsets: Iterable[int], predicate: Callable[[int], bool]) -> Optional[int]:
    """Return the first offset satisfying predicate, or None."""
    return next((offset for offset in offsets if predicate(offset)), None)


class BoundaryLocator:
    """Finds the slip's orange boundary markers in a pixel buffer."""

    def __init__(self, params: Optional[BoundaryDetectionParams] = None):
        """
        Initialize boundary locator.

        Args:
            params: Color and scan parameters (defaults to the calibrated set)
        """
        self.params = params or BoundaryDetectionParams()
        self.classifier = ColorClassifier(self.params)
        self.logger = logging.getLogger(__name__)

    def scan_vertical(self, buffer: PixelBuffer) -> Optional[int]:
        """Row of the first marker pixel on the right edge, or None."""
        x2 = buffer.width - 1
        y2 = buffer.height - 1
        start = y2 - buffer.height // self.params.start_divisor

        # Offsets stay within 1..y2, so reads skip bounds checks
        return first_hit(
            candidate_offsets(start, self.params.scan_step),
            lambda y: self.classifier.classify(buffer.read_pixel(x2, y, checked=False)),
        )

    def scan_horizontal(self, buffer: PixelBuffer) -> Optional[int]:
        """Column of the first marker pixel on the bottom edge, or None."""
        y2 = buffer.height - 1
        start = buffer.width // self.params.start_divisor

        # start < width whenever start_divisor >= 2; guard the divisor-1 case
        start = min(start, buffer.width - 1)
        return first_hit(
            candidate_offsets(start, self.params.scan_step),
            lambda x: self.classifier.classify(buffer.read_pixel(x, y2, checked=False)),
        )

    def locate(self, buffer: PixelBuffer) -> BoundaryScanResult:
        """
        Scan both axes and derive the crop rectangle.

        Args:
            buffer: Decoded RGBA pixel buffer

        Returns:
            BoundaryScanResult with the hits (None if not found) and the rectangle.
            Without hits the rectangle's origin is (0, 0).
        """
        x2 = buffer.width - 1
        y2 = buffer.height - 1
        margin = self.params.inward_margin

        vertical_hit = self.scan_vertical(buffer)
        horizontal_hit = self.scan_horizontal(buffer)

        y1 = vertical_hit - margin if vertical_hit is not None else 0
        x1 = horizontal_hit - margin if horizontal_hit is not None else 0

        self.logger.debug(
            f"Boundary scan on {buffer.width}x{buffer.height}: "
            f"vertical_hit={vertical_hit}, horizontal_hit={horizontal_hit}"
        )

        return BoundaryScanResult(
            vertical_hit=vertical_hit,
            horizontal_hit=horizontal_hit,
            rect=BoundaryRect.from_points(x1, y1, x2, y2),
        )

    def find_boundary(self, buffer: PixelBuffer) -> BoundaryRect:
        """Crop rectangle for the buffer (origin (0, 0) if no marker found)."""
        return self.locate(buffer).rect
