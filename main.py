"""
Slip Scanner - Main FastAPI Application
"""

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Add project directory to path
sys.path.append(str(Path(__file__).parent))

from api.exceptions import register_exception_handlers  # noqa: E402
from api.routers import image, scan  # noqa: E402
from config import get_settings  # noqa: E402
from core.constants import ErrorMessages, SystemConstants  # noqa: E402
from services.preprocess_service import PreprocessService  # noqa: E402

# Get configuration
settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.system.log_level),
    format=SystemConstants.LOG_FORMAT,
)
logger = logging.getLogger(__name__)


def create_preprocess_service(app_settings=settings) -> PreprocessService:
    """Build the preprocess service from settings."""
    return PreprocessService(
        params=app_settings.boundary,
        row_alignment=app_settings.preprocess.row_alignment,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle"""
    # Startup
    logger.info("Starting Slip Scanner server...")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Debug mode: {settings.system.debug}")
    logger.info(f"Boundary parameters: {settings.boundary.model_dump(mode='json')}")

    app.state.settings = settings
    app.state.preprocess_service = create_preprocess_service(settings)

    yield

    # Shutdown
    logger.info("Slip Scanner server shutdown complete")


# Create FastAPI app
app = FastAPI(
    title="Slip Scanner",
    description="Locates and crops payment slips in photographed documents",
    version="1.0.0",
    lifespan=lifespan,
)

if settings.api.cors_enabled:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# Register exception handlers
register_exception_handlers(app)

# Include routers
app.include_router(scan.router, prefix="/api/scan", tags=["Scan"])
app.include_router(image.router, prefix="/api/image", tags=["Image"])


# Root endpoint
@app.get("/")
async def root():
    return {
        "name": "Slip Scanner",
        "status": "running",
        "version": "1.0.0",
        "endpoints": {
            "scan": "/api/scan",
            "image": "/api/image",
            "docs": "/docs",
        },
    }


# Health check endpoint
@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "services": {
            "preprocess_service": getattr(app.state, "preprocess_service", None) is not None,
        },
    }


# Error handler
@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    logger.error(f"Global exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": ErrorMessages.PROCESSING_FAILED.format(error="internal error")},
    )


if __name__ == "__main__":
    server_config = uvicorn.Config(
        "main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.system.debug,
        log_level=settings.system.log_level.lower(),
        loop="asyncio",
    )

    server = uvicorn.Server(server_config)

    try:
        server.run()
    except KeyboardInterrupt:
        logger.info("Received keyboard interrupt, shutting down...")
    finally:
        logger.info("Server exiting...")
