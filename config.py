"""
Application configuration.

Settings are grouped into sections and can be overridden from the
environment with ``SLIPSCAN_<SECTION>__<FIELD>`` variables, e.g.
``SLIPSCAN_SYSTEM__LOG_LEVEL=DEBUG`` or ``SLIPSCAN_BOUNDARY__HUE_MODE=wrapped``.
``SLIPSCAN_ENVIRONMENT`` sets the top-level environment name.
"""

from functools import lru_cache
from typing import Annotated, Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from core.constants import ImageConstants, PreprocessDefaults, SystemConstants
from core.enums import ImageFormat
from schemas.detection import BoundaryDetectionParams


class SystemSettings(BaseModel):
    """Logging and debug settings."""

    log_level: str = SystemConstants.LOG_LEVEL_DEFAULT
    debug: bool = False

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {v}")
        return level


class APISettings(BaseModel):
    """HTTP server settings."""

    host: str = SystemConstants.DEFAULT_HOST
    port: int = Field(default=SystemConstants.DEFAULT_PORT, ge=1, le=65535)
    cors_enabled: bool = True
    # Comma separated in the environment
    cors_origins: Annotated[List[str], NoDecode] = Field(default_factory=lambda: ["*"])

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_origins(cls, v: Any) -> Any:
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v


class PreprocessSettings(BaseModel):
    """Pipeline defaults."""

    auto_crop: bool = PreprocessDefaults.AUTO_CROP
    max_dimension: Optional[int] = Field(default=None, gt=0)
    threshold_blur_radius: float = Field(default=PreprocessDefaults.THRESHOLD_BLUR_RADIUS, gt=0)
    row_alignment: int = Field(
        default=ImageConstants.DEFAULT_ROW_ALIGNMENT, ge=1, le=ImageConstants.MAX_ROW_ALIGNMENT
    )
    encode_format: ImageFormat = ImageFormat.PNG


class Settings(BaseSettings):
    """Top-level application settings."""

    model_config = SettingsConfigDict(
        env_prefix=SystemConstants.ENV_PREFIX,
        env_nested_delimiter=SystemConstants.ENV_NESTED_DELIMITER,
    )

    environment: str = "development"
    system: SystemSettings = Field(default_factory=SystemSettings)
    api: APISettings = Field(default_factory=APISettings)
    preprocess: PreprocessSettings = Field(default_factory=PreprocessSettings)
    boundary: BoundaryDetectionParams = Field(default_factory=BoundaryDetectionParams)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


@lru_cache
def get_settings() -> Settings:
    """Cached application settings."""
    return Settings()
