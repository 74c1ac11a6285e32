"""
Image API Router - Standalone image operations
"""

import logging
from typing import Callable

import numpy as np
from fastapi import APIRouter, Depends

from api.dependencies import get_encode_format, get_preprocess_service
from api.exceptions import safe_endpoint
from core.image.converters import ImageConverters
from core.utils.decorators import timer
from schemas import CropRequest, ImageRequest, ImageResponse, ScaleRequest, ThresholdRequest

logger = logging.getLogger(__name__)

router = APIRouter()


def execute_image_operation(
    image_base64: str, operation: Callable[[np.ndarray], np.ndarray], encode_format: str
) -> ImageResponse:
    """
    Decode, transform and re-encode an image.

    Args:
        image_base64: Base64 encoded input image
        operation: Transformation to apply
        encode_format: Output image format

    Returns:
        ImageResponse with the transformed image
    """
    with timer() as t:
        image = ImageConverters.from_base64(image_base64)
        result = operation(image)
        encoded = ImageConverters.to_base64(result, format=encode_format)

    height, width = result.shape[:2]
    return ImageResponse(
        image_base64=encoded, width=width, height=height, processing_time_ms=t["ms"]
    )


@router.post("/rotate")
@safe_endpoint
async def rotate_image(
    request: ImageRequest,
    preprocess_service=Depends(get_preprocess_service),
    encode_format: str = Depends(get_encode_format),
) -> ImageResponse:
    """Rotate portrait images into landscape; landscape images pass through."""
    return execute_image_operation(request.image_base64, preprocess_service.rotate, encode_format)


@router.post("/crop")
@safe_endpoint
async def crop_image(
    request: CropRequest,
    preprocess_service=Depends(get_preprocess_service),
    encode_format: str = Depends(get_encode_format),
) -> ImageResponse:
    """Crop to a rectangle; rectangles outside the image are rejected, not clipped."""
    return execute_image_operation(
        request.image_base64,
        lambda image: preprocess_service.crop(image, request.rect),
        encode_format,
    )


@router.post("/scale")
@safe_endpoint
async def scale_image(
    request: ScaleRequest,
    preprocess_service=Depends(get_preprocess_service),
    encode_format: str = Depends(get_encode_format),
) -> ImageResponse:
    """Scale uniformly so the longer side equals max_dimension."""
    return execute_image_operation(
        request.image_base64,
        lambda image: preprocess_service.scale_image(image, request.max_dimension),
        encode_format,
    )


@router.post("/invert")
@safe_endpoint
async def invert_image(
    request: ImageRequest,
    preprocess_service=Depends(get_preprocess_service),
    encode_format: str = Depends(get_encode_format),
) -> ImageResponse:
    """Invert image colors."""
    return execute_image_operation(request.image_base64, preprocess_service.invert, encode_format)


@router.post("/threshold")
@safe_endpoint
async def threshold_image(
    request: ThresholdRequest,
    preprocess_service=Depends(get_preprocess_service),
    encode_format: str = Depends(get_encode_format),
) -> ImageResponse:
    """Binarize against the local mean luminance."""
    return execute_image_operation(
        request.image_base64,
        lambda image: preprocess_service.adaptive_threshold(image, request.blur_radius),
        encode_format,
    )
