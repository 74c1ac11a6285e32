"""
Domain exceptions for image preprocessing.

All errors raised by the core derive from ProcessingError so callers can
report "could not process this image" without knowing the specific cause.
A missing boundary marker is not an error and has no exception here.
"""


class ProcessingError(Exception):
    """Base class for image preprocessing failures."""


class DecodeError(ProcessingError):
    """Image has invalid dimensions or could not be decoded into a pixel buffer."""


class CropError(ProcessingError):
    """Requested crop rectangle lies outside the image bounds."""

    def __init__(self, message: str, rect=None, image_size=None):
        super().__init__(message)
        self.rect = rect
        self.image_size = image_size
