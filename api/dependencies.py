"""
Shared FastAPI dependencies for the Slip Scanner system.
"""

import logging

from fastapi import Depends, HTTPException, Request

from config import Settings, get_settings
from services.preprocess_service import PreprocessService

logger = logging.getLogger(__name__)


def get_app_settings(request: Request) -> Settings:
    """
    Get settings from app state, falling back to the cached global settings.

    Args:
        request: FastAPI request object

    Returns:
        Settings instance
    """
    settings = getattr(request.app.state, "settings", None)
    if settings is None:
        return get_settings()
    return settings


def get_preprocess_service(request: Request) -> PreprocessService:
    """
    Get PreprocessService instance from app state.

    Raises:
        HTTPException: If the service is not initialized
    """
    try:
        return request.app.state.preprocess_service
    except AttributeError as e:
        logger.error(f"Preprocess service not initialized in app state: {e}")
        raise HTTPException(
            status_code=500, detail="Internal server error: Preprocess service not initialized"
        )


def get_encode_format(settings: Settings = Depends(get_app_settings)) -> str:
    """Image format used for encoded responses."""
    return settings.preprocess.encode_format.value
