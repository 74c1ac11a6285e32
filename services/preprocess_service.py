"""
Preprocess Service - Business logic for slip image preprocessing.

This service orchestrates the preprocessing pipeline:
rotate -> locate boundary markers -> crop, optionally followed by
scaling, color inversion and adaptive thresholding for OCR.
"""

import logging
from typing import Optional

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from core.constants import ImageConstants, PreprocessDefaults
from core.exceptions import CropError
from core.filters import ImageFilter, OpenCVImageFilter
from core.image import processors
from core.pixel_sampler import decoded
from schemas.common import BoundaryRect, BoundaryScanResult
from schemas.detection import BoundaryDetectionParams
from vision.boundary_locator import BoundaryLocator

logger = logging.getLogger(__name__)


class PreprocessOptions(BaseModel):
    """Options for a full preprocessing run."""

    model_config = ConfigDict(extra="forbid")

    auto_crop: bool = Field(default=PreprocessDefaults.AUTO_CROP)
    max_dimension: Optional[int] = Field(
        default=None, gt=0, description="Scale so the longer side has this length"
    )
    invert: bool = Field(default=False, description="Invert colors after cropping")
    threshold: bool = Field(default=False, description="Apply adaptive threshold last")
    blur_radius: float = Field(
        default=PreprocessDefaults.THRESHOLD_BLUR_RADIUS,
        gt=0,
        description="Adaptive threshold blur radius in pixels",
    )


class PreprocessResult(BaseModel):
    """Image produced by a preprocessing run, with what happened to it."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    image: np.ndarray
    rotated: bool = False
    cropped: bool = False
    boundary: Optional[BoundaryScanResult] = None


class PreprocessService:
    """
    Service for slip preprocessing operations.

    Holds no per-image state; one instance can serve concurrent calls on
    different images.
    """

    def __init__(
        self,
        params: Optional[BoundaryDetectionParams] = None,
        image_filter: Optional[ImageFilter] = None,
        row_alignment: int = ImageConstants.DEFAULT_ROW_ALIGNMENT,
    ):
        """
        Initialize preprocess service.

        Args:
            params: Boundary detection parameters
            image_filter: Filter backend for invert/threshold (OpenCV by default)
            row_alignment: Row alignment of decoded pixel buffers
        """
        self.params = params or BoundaryDetectionParams()
        self.locator = BoundaryLocator(self.params)
        self.image_filter = image_filter or OpenCVImageFilter()
        self.row_alignment = row_alignment

    # === Standalone utilities ===

    def rotate(self, image: np.ndarray) -> np.ndarray:
        return processors.rotate(image)

    def crop(self, image: np.ndarray, rect: BoundaryRect) -> np.ndarray:
        return processors.crop(image, rect)

    def scale_image(self, image: np.ndarray, max_dimension: int) -> np.ndarray:
        return processors.scale_image(image, max_dimension)

    def invert(self, image: np.ndarray) -> np.ndarray:
        return self.image_filter.invert_colors(image)

    def adaptive_threshold(
        self, image: np.ndarray, blur_radius: float = PreprocessDefaults.THRESHOLD_BLUR_RADIUS
    ) -> np.ndarray:
        return self.image_filter.adaptive_threshold(image, blur_radius)

    def draw_boundary(self, image: np.ndarray, rect: BoundaryRect) -> np.ndarray:
        """Outline rect on a copy of image for visual verification."""
        return processors.draw_rect(image, rect)

    # === Boundary detection ===

    def locate_boundary(self, image: np.ndarray) -> BoundaryScanResult:
        """
        Decode image and scan it for boundary markers.

        Raises:
            DecodeError: If the image cannot be decoded
        """
        with decoded(image, row_alignment=self.row_alignment) as buffer:
            return self.locator.locate(buffer)

    def find_boundary(self, image: np.ndarray) -> BoundaryRect:
        return self.locate_boundary(image).rect

    # === Pipeline ===

    def _auto_crop(self, image: np.ndarray, scan: BoundaryScanResult) -> Optional[np.ndarray]:
        """Crop to the scanned rectangle, or None when no crop applies."""
        rect = scan.rect
        if not rect.has_offset_origin:
            logger.info("No boundary marker found, keeping full image")
            return None

        try:
            cropped = processors.crop(image, rect)
        except CropError as e:
            logger.warning(f"Boundary rectangle not usable, keeping full image: {e}")
            return None

        logger.info(f"Cropped to boundary {rect.to_dict()}")
        return cropped

    def preprocess_with_details(
        self, image: np.ndarray, auto_crop: bool = PreprocessDefaults.AUTO_CROP
    ) -> PreprocessResult:
        """
        Rotate and optionally crop to the detected boundary.

        Args:
            image: Input image
            auto_crop: Locate boundary markers and crop to them

        Returns:
            PreprocessResult

        Raises:
            DecodeError: If auto_crop is set and the image cannot be decoded
        """
        rotated = processors.rotate(image)
        result = PreprocessResult(image=rotated, rotated=rotated is not image)

        if not auto_crop:
            return result

        scan = self.locate_boundary(rotated)
        result.boundary = scan

        cropped = self._auto_crop(rotated, scan)
        if cropped is not None:
            result.image = cropped
            result.cropped = True

        return result

    def preprocess(
        self, image: np.ndarray, auto_crop: bool = PreprocessDefaults.AUTO_CROP
    ) -> np.ndarray:
        """Rotate and optionally crop to the detected boundary."""
        return self.preprocess_with_details(image, auto_crop=auto_crop).image

    def process(
        self, image: np.ndarray, options: Optional[PreprocessOptions] = None
    ) -> PreprocessResult:
        """
        Full preprocessing run for OCR.

        Steps, in order: rotate, auto crop, scale, invert, adaptive threshold.

        Args:
            image: Input image
            options: Pipeline options (defaults: auto crop only)

        Returns:
            PreprocessResult with the final image
        """
        options = options or PreprocessOptions()

        result = self.preprocess_with_details(image, auto_crop=options.auto_crop)
        output = result.image

        if options.max_dimension is not None:
            output = self.scale_image(output, options.max_dimension)
        if options.invert:
            output = self.invert(output)
        if options.threshold:
            output = self.adaptive_threshold(output, options.blur_radius)

        result.image = output
        h, w = output.shape[:2]
        logger.info(
            f"Preprocessed image to {w}x{h} "
            f"(rotated={result.rotated}, cropped={result.cropped})"
        )
        return result
