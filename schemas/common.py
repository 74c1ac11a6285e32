"""
Common data structures shared across layers.
"""

from typing import Dict, Optional

from pydantic import BaseModel, Field


class BoundaryRect(BaseModel):
    """
    Axis-aligned crop rectangle in image pixel coordinates.

    Coordinates are not constrained to be non-negative: a marker hit closer
    to the origin than the inward margin yields a negative origin, which
    ``is_within`` reports as outside the image.
    """

    x: int = Field(..., description="X coordinate of the top-left corner")
    y: int = Field(..., description="Y coordinate of the top-left corner")
    width: int = Field(..., description="Width")
    height: int = Field(..., description="Height")

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary for service layer compatibility."""
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}

    @classmethod
    def from_points(cls, x1: int, y1: int, x2: int, y2: int) -> "BoundaryRect":
        """Create rectangle spanning from (x1, y1) to (x2, y2)."""
        return cls(x=x1, y=y1, width=x2 - x1, height=y2 - y1)

    @property
    def x2(self) -> int:
        """Get right edge coordinate (exclusive)."""
        return self.x + self.width

    @property
    def y2(self) -> int:
        """Get bottom edge coordinate (exclusive)."""
        return self.y + self.height

    @property
    def has_offset_origin(self) -> bool:
        """True if the origin moved away from (0, 0) on either axis."""
        return self.x > 0 or self.y > 0

    def is_within(self, image_width: int, image_height: int) -> bool:
        """
        Check if the rectangle is non-empty and fully inside the image.

        Args:
            image_width: Image width in pixels
            image_height: Image height in pixels

        Returns:
            True if the rectangle can be cropped without clipping
        """
        if self.width <= 0 or self.height <= 0:
            return False
        if self.x < 0 or self.y < 0:
            return False
        return self.x2 <= image_width and self.y2 <= image_height


class BoundaryScanResult(BaseModel):
    """Outcome of a boundary scan: optional hits per axis plus the derived rectangle."""

    vertical_hit: Optional[int] = Field(
        default=None, description="Row of the first marker pixel on the right edge"
    )
    horizontal_hit: Optional[int] = Field(
        default=None, description="Column of the first marker pixel on the bottom edge"
    )
    rect: BoundaryRect

    @property
    def found(self) -> bool:
        """True if a marker was hit on at least one axis."""
        return self.vertical_hit is not None or self.horizontal_hit is not None
