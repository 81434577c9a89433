"""
Configuration for the Image Manipulation Service.

Settings are grouped per concern and read from ``IMS_*`` environment
variables, falling back to the defaults in core.constants.
"""

import os
from functools import lru_cache
from typing import Any, Dict, List

from pydantic import BaseModel, Field, field_validator

from core.constants import (
    APIConstants,
    ImageConstants,
    MetricsConstants,
    SystemConstants,
)

ENV_PREFIX = "IMS_"


def _env(name: str, default: Any) -> Any:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(f"{ENV_PREFIX}{name}")
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class SystemSettings(BaseModel):
    """Logging and runtime settings"""

    log_level: str = SystemConstants.LOG_LEVEL_DEFAULT
    debug: bool = False
    grayscale_workers: int = Field(default=SystemConstants.THREAD_POOL_SIZE, ge=1)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {v}")
        return level


class APISettings(BaseModel):
    """HTTP server settings"""

    host: str = APIConstants.DEFAULT_HOST
    port: int = Field(default=APIConstants.DEFAULT_PORT, ge=1, le=65535)
    cors_enabled: bool = True
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])


class ImageSettings(BaseModel):
    """Encoding and upload settings"""

    jpeg_quality: int = Field(default=ImageConstants.DEFAULT_JPEG_QUALITY, ge=1, le=95)
    png_compress_level: int = Field(default=ImageConstants.PNG_BEST_COMPRESSION, ge=0, le=9)
    max_upload_mb: int = Field(default=ImageConstants.MAX_UPLOAD_SIZE_MB, ge=1)


class MetricsSettings(BaseModel):
    """Metrics buffer settings"""

    buffer_size: int = Field(
        default=MetricsConstants.DEFAULT_BUFFER_SIZE, ge=MetricsConstants.MIN_BUFFER_SIZE
    )
    default_scope: str = MetricsConstants.DEFAULT_SCOPE


class Settings(BaseModel):
    """Application settings"""

    environment: str = "development"
    system: SystemSettings = Field(default_factory=SystemSettings)
    api: APISettings = Field(default_factory=APISettings)
    image: ImageSettings = Field(default_factory=ImageSettings)
    metrics: MetricsSettings = Field(default_factory=MetricsSettings)

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from IMS_* environment variables"""
        origins = _env("CORS_ORIGINS", "*")
        return cls(
            environment=_env("ENVIRONMENT", "development"),
            system=SystemSettings(
                log_level=_env("LOG_LEVEL", SystemConstants.LOG_LEVEL_DEFAULT),
                debug=_env_bool("DEBUG", False),
                grayscale_workers=_env("GRAYSCALE_WORKERS", SystemConstants.THREAD_POOL_SIZE),
            ),
            api=APISettings(
                host=_env("HOST", APIConstants.DEFAULT_HOST),
                port=_env("PORT", APIConstants.DEFAULT_PORT),
                cors_enabled=_env_bool("CORS_ENABLED", True),
                cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
            ),
            image=ImageSettings(
                jpeg_quality=_env("JPEG_QUALITY", ImageConstants.DEFAULT_JPEG_QUALITY),
                png_compress_level=_env(
                    "PNG_COMPRESS_LEVEL", ImageConstants.PNG_BEST_COMPRESSION
                ),
                max_upload_mb=_env("MAX_UPLOAD_MB", ImageConstants.MAX_UPLOAD_SIZE_MB),
            ),
            metrics=MetricsSettings(
                buffer_size=_env("METRICS_BUFFER_SIZE", MetricsConstants.DEFAULT_BUFFER_SIZE),
                default_scope=_env("METRICS_DEFAULT_SCOPE", MetricsConstants.DEFAULT_SCOPE),
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings"""
    return Settings.from_env()
