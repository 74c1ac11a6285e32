"""
Constants and configuration values for the Slip Scanner system.
Centralizes all magic numbers and configuration constants.
"""


# Image Buffer Constants
class ImageConstants:
    """Constants related to decoded image buffers."""

    # RGBA, one byte per component
    BYTES_PER_PIXEL = 4

    # Row alignment (bytes) for decoded pixel buffers
    DEFAULT_ROW_ALIGNMENT = 1
    MAX_ROW_ALIGNMENT = 256

    # Encoding at the API boundary
    DEFAULT_ENCODE_FORMAT = "PNG"
    JPEG_QUALITY = 90


# Boundary Detection Default Parameters
class BoundaryDefaults:
    """
    Default parameters for the orange boundary marker scan.

    Calibrated for the printed slip under typical indoor lighting.
    Hue is in degrees, value is a raw channel magnitude (0-255),
    saturation is a ratio (0-1).
    """

    HUE_MIN = 0.0
    HUE_MAX = 35.0
    VALUE_MIN = 150.0
    SATURATION_MIN = 0.25

    # Scan geometry
    SCAN_STEP = 5
    INWARD_MARGIN = 10
    START_DIVISOR = 3  # skip the near third of each axis


# Preprocessing Default Parameters
class PreprocessDefaults:
    """Default parameters for the preprocessing pipeline."""

    AUTO_CROP = True

    # Adaptive threshold
    THRESHOLD_BLUR_RADIUS = 4.0
    THRESHOLD_OFFSET = 0.05  # fraction of full scale below the local mean
    THRESHOLD_MAX_VALUE = 255


# System Constants
class SystemConstants:
    """Constants for system operations."""

    # Logging
    LOG_LEVEL_DEFAULT = "INFO"
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Environment overrides (SLIPSCAN_<SECTION>__<FIELD>)
    ENV_PREFIX = "SLIPSCAN_"
    ENV_NESTED_DELIMITER = "__"

    # Server
    DEFAULT_HOST = "0.0.0.0"
    DEFAULT_PORT = 8000


# Color Constants (BGR format for OpenCV)
class Colors:
    """Standard colors for drawing operations (BGR format)."""

    RED = (0, 0, 255)

    # Semantic colors
    BOUNDARY = RED


# Drawing Constants
class DrawingConstants:
    """Constants for drawing operations."""

    DEFAULT_LINE_THICKNESS = 1


# Error Messages
class ErrorMessages:
    """Standard error messages."""

    # Decode errors
    EMPTY_IMAGE = "Image has zero width or height: {width}x{height}"
    INVALID_IMAGE = "Invalid image: {reason}"
    UNSUPPORTED_DTYPE = "Unsupported pixel type {dtype}, expected uint8"
    UNSUPPORTED_SHAPE = "Unsupported image shape {shape}"
    ALLOCATION_FAILED = "Failed to allocate {size} byte pixel buffer"
    INVALID_ENCODED_IMAGE = "Could not decode encoded image: {error}"

    # Buffer errors
    PIXEL_OUT_OF_BOUNDS = "Pixel ({x}, {y}) is outside buffer bounds {width}x{height}"
    BUFFER_RELEASED = "Pixel buffer has already been released"

    # Crop errors
    CROP_OUT_OF_BOUNDS = "Crop rectangle {rect} is outside image bounds {width}x{height}"

    # User-facing
    PROCESSING_FAILED = "Could not process this image: {error}"
