"""
Service layer for Slip Scanner.
"""

from .preprocess_service import PreprocessOptions, PreprocessResult, PreprocessService

__all__ = ["PreprocessOptions", "PreprocessResult", "PreprocessService"]
