"""
Scan API Router - Slip preprocessing and boundary detection endpoints
"""

import logging

from fastapi import APIRouter, Depends

from api.dependencies import get_app_settings, get_encode_format, get_preprocess_service
from api.exceptions import safe_endpoint
from core.image.converters import ImageConverters
from core.pixel_sampler import RGBSample
from core.utils.decorators import timer
from schemas import (
    BoundaryRequest,
    BoundaryResponse,
    ClassifyRequest,
    ClassifyResponse,
    PreprocessRequest,
    PreprocessResponse,
)
from services.preprocess_service import PreprocessOptions
from vision.color_classifier import is_boundary_color, to_hsv

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/preprocess")
@safe_endpoint
async def preprocess(
    request: PreprocessRequest,
    preprocess_service=Depends(get_preprocess_service),
    settings=Depends(get_app_settings),
    encode_format: str = Depends(get_encode_format),
) -> PreprocessResponse:
    """
    Rotate, crop to the slip's boundary markers and optionally prepare for OCR.

    Omitted options fall back to the server's preprocess settings. An image
    without boundary markers is returned uncropped, not rejected.
    """
    defaults = settings.preprocess
    options = PreprocessOptions(
        auto_crop=defaults.auto_crop if request.auto_crop is None else request.auto_crop,
        max_dimension=request.max_dimension or defaults.max_dimension,
        invert=request.invert,
        threshold=request.threshold,
        blur_radius=request.blur_radius or defaults.threshold_blur_radius,
    )

    with timer() as t:
        image = ImageConverters.from_base64(request.image_base64)
        result = preprocess_service.process(image, options)
        image_base64 = ImageConverters.to_base64(result.image, format=encode_format)

    height, width = result.image.shape[:2]
    return PreprocessResponse(
        image_base64=image_base64,
        width=width,
        height=height,
        rotated=result.rotated,
        cropped=result.cropped,
        boundary=result.boundary,
        processing_time_ms=t["ms"],
    )


@router.post("/boundary")
@safe_endpoint
async def locate_boundary(
    request: BoundaryRequest,
    preprocess_service=Depends(get_preprocess_service),
    encode_format: str = Depends(get_encode_format),
) -> BoundaryResponse:
    """
    Locate boundary markers on the image as given (no rotation).

    OUTPUT results:
    - boundary: hits per axis (null if not found) and the crop rectangle
    - overlay_base64: image with the rectangle outlined, if requested
    """
    image = ImageConverters.from_base64(request.image_base64)
    scan = preprocess_service.locate_boundary(image)

    overlay = None
    if request.include_overlay:
        overlay = ImageConverters.to_base64(
            preprocess_service.draw_boundary(image, scan.rect), format=encode_format
        )

    logger.info(f"Boundary scan found={scan.found} rect={scan.rect.to_dict()}")
    return BoundaryResponse(found=scan.found, boundary=scan, overlay_base64=overlay)


@router.post("/classify")
@safe_endpoint
async def classify_color(
    request: ClassifyRequest, preprocess_service=Depends(get_preprocess_service)
) -> ClassifyResponse:
    """Convert one RGB color to HSV and classify it against the marker range."""
    params = preprocess_service.params
    hue_mode = request.hue_mode or params.hue_mode

    hsv = to_hsv(RGBSample(request.red, request.green, request.blue), hue_mode=hue_mode)
    return ClassifyResponse(
        hue=hsv.hue,
        saturation=hsv.saturation,
        value=hsv.value,
        is_boundary_color=is_boundary_color(hsv, params),
    )
