"""
Image processing API models.

This module contains models for the standalone image operations:
- rotate, crop, scale, invert, adaptive threshold
"""

from typing import Optional

from pydantic import BaseModel, Field

from core.constants import PreprocessDefaults

from .common import BoundaryRect


class ImageRequest(BaseModel):
    """Request carrying a single image"""

    image_base64: str = Field(..., min_length=1, description="Base64 encoded PNG/JPEG image")


class CropRequest(ImageRequest):
    """Request to crop an image"""

    rect: BoundaryRect = Field(..., description="Region to keep")


class ScaleRequest(ImageRequest):
    """Request to scale an image"""

    max_dimension: int = Field(..., gt=0, description="Length of the longer side")


class ThresholdRequest(ImageRequest):
    """Request to binarize an image"""

    blur_radius: float = Field(default=PreprocessDefaults.THRESHOLD_BLUR_RADIUS, gt=0)


class ImageResponse(BaseModel):
    """Response with a transformed image"""

    image_base64: str
    width: int
    height: int
    processing_time_ms: Optional[int] = None
