"""
Boundary detection parameters.
"""

from pydantic import Field, model_validator

from core.constants import BoundaryDefaults
from core.enums import HueMode
from schemas.base import BaseDetectionParams


class BoundaryDetectionParams(BaseDetectionParams):
    """
    Tunable constants for the boundary marker scan.

    Defaults encode "orange" under the lighting and print conditions of the
    payment slip. Recalibrating for another marker color only touches these
    values, never the scan itself.
    """

    # === Color membership ===
    hue_min: float = Field(
        default=BoundaryDefaults.HUE_MIN, ge=0, le=360, description="Minimum hue (degrees)"
    )
    hue_max: float = Field(
        default=BoundaryDefaults.HUE_MAX, ge=0, le=360, description="Maximum hue (degrees)"
    )
    value_min: float = Field(
        default=BoundaryDefaults.VALUE_MIN,
        ge=0,
        le=255,
        description="Minimum value as raw channel magnitude (0-255)",
    )
    saturation_min: float = Field(
        default=BoundaryDefaults.SATURATION_MIN, ge=0, le=1, description="Minimum saturation"
    )
    hue_mode: HueMode = Field(
        default=HueMode.ABSOLUTE,
        description="Negative hue normalization (absolute reproduces the original heuristic)",
    )

    # === Scan geometry ===
    scan_step: int = Field(
        default=BoundaryDefaults.SCAN_STEP, ge=1, description="Pixels between samples"
    )
    inward_margin: int = Field(
        default=BoundaryDefaults.INWARD_MARGIN,
        ge=0,
        description="Pixels moved past the first hit toward the origin",
    )
    start_divisor: int = Field(
        default=BoundaryDefaults.START_DIVISOR,
        ge=1,
        description=(
            "Skip dimension // start_divisor pixels next to the anchor corner. "
            "Only valid for slip layouts whose marker sits in the outer part of the image."
        ),
    )

    @model_validator(mode="after")
    def check_hue_range(self) -> "BoundaryDetectionParams":
        if self.hue_min > self.hue_max:
            raise ValueError(f"hue_min ({self.hue_min}) must not exceed hue_max ({self.hue_max})")
        return self
