"""
Schemas Package

This package contains all Pydantic schemas for data validation and serialization,
organized by domain:
- common: Boundary rectangle and scan result
- detection: Boundary detection parameters
- scan / image: API request and response models
"""

from .base import BaseDetectionParams
from .common import BoundaryRect, BoundaryScanResult
from .detection import BoundaryDetectionParams
from .image import CropRequest, ImageRequest, ImageResponse, ScaleRequest, ThresholdRequest
from .scan import (
    BoundaryRequest,
    BoundaryResponse,
    ClassifyRequest,
    ClassifyResponse,
    PreprocessRequest,
    PreprocessResponse,
)

__all__ = [
    # Common models
    "BoundaryRect",
    "BoundaryScanResult",
    # Params
    "BaseDetectionParams",
    "BoundaryDetectionParams",
    # Scan models
    "PreprocessRequest",
    "PreprocessResponse",
    "BoundaryRequest",
    "BoundaryResponse",
    "ClassifyRequest",
    "ClassifyResponse",
    # Image models
    "ImageRequest",
    "CropRequest",
    "ScaleRequest",
    "ThresholdRequest",
    "ImageResponse",
]
