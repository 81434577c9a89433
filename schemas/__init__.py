"""
Schemas Package

This package contains the Pydantic schemas for data validation and
serialization shared across the API, service and core layers.
"""

# Re-export enums from centralized location for convenience
from core.enums import CropPoint, FitMode, ImageFormat

from .process import ProcessOptions, ProcessSpec, WatermarkRequest

__all__ = [
    "CropPoint",
    "FitMode",
    "ImageFormat",
    "ProcessOptions",
    "ProcessSpec",
    "WatermarkRequest",
]
