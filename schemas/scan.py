"""
Scan API models.

This module contains request and response models for slip scanning:
- Full preprocessing
- Boundary detection
- Single pixel classification
"""

from typing import Optional

from pydantic import BaseModel, Field

from core.enums import HueMode

from .common import BoundaryScanResult


class PreprocessRequest(BaseModel):
    """Request to preprocess a photographed slip"""

    image_base64: str = Field(..., min_length=1, description="Base64 encoded PNG/JPEG image")
    auto_crop: Optional[bool] = Field(
        default=None, description="Crop to boundary markers (server default if omitted)"
    )
    max_dimension: Optional[int] = Field(default=None, gt=0)
    invert: bool = False
    threshold: bool = False
    blur_radius: Optional[float] = Field(default=None, gt=0)


class PreprocessResponse(BaseModel):
    """Response from preprocessing"""

    image_base64: str
    width: int
    height: int
    rotated: bool
    cropped: bool
    boundary: Optional[BoundaryScanResult] = None
    processing_time_ms: int


class BoundaryRequest(BaseModel):
    """Request to locate boundary markers (no rotation applied)"""

    image_base64: str = Field(..., min_length=1)
    include_overlay: bool = Field(
        default=False, description="Return the image with the rectangle outlined"
    )


class BoundaryResponse(BaseModel):
    """Response from boundary detection"""

    found: bool
    boundary: BoundaryScanResult
    overlay_base64: Optional[str] = None


class ClassifyRequest(BaseModel):
    """Request to classify a single RGB color"""

    red: int = Field(..., ge=0, le=255)
    green: int = Field(..., ge=0, le=255)
    blue: int = Field(..., ge=0, le=255)
    hue_mode: Optional[HueMode] = None


class ClassifyResponse(BaseModel):
    """HSV conversion and marker classification of one color"""

    hue: float
    saturation: float
    value: float
    is_boundary_color: bool

