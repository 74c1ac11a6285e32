"""
API Routers for Slip Scanner
"""

from . import image, scan

__all__ = ["image", "scan"]
