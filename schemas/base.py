"""
Base schema for detection parameter sets.
"""

from pydantic import BaseModel, ConfigDict


class BaseDetectionParams(BaseModel):
    """
    Common base for detection parameters.

    Unknown fields are rejected so calibration typos fail loudly instead of
    silently falling back to defaults.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)
