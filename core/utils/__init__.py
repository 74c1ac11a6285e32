"""
Utility modules for core functionality.

Modules:
- decorators: Timing helpers
"""

from .decorators import timer

__all__ = ["timer"]
