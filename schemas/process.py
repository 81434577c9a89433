"""
Image processing job models.

This module contains models for manipulation jobs:
- ProcessSpec: raw job as received from the calling layer
- ProcessOptions: typed view of the job parameters, built once
- WatermarkRequest: watermark job submitted over the API
"""

from typing import Dict, Mapping

from pydantic import BaseModel, ConfigDict, Field

from core.constants import ImageConstants, ParamKeys
from core.enums import CropPoint, FitMode
from core.utils.params_processor import clean_int, get_crop_point, get_fit_mode, is_grayscale


class ProcessSpec(BaseModel):
    """Specification for an image manipulation job"""

    scope: str = Field(default="", description="Telemetry tag attached to duration metrics")
    image_data: bytes = Field(..., description="Encoded image to process")
    params: Dict[str, str] = Field(
        default_factory=dict, description="Key-value pairs telling the manipulator what to do"
    )


class ProcessOptions(BaseModel):
    """Normalized process parameters"""

    model_config = ConfigDict(frozen=True)

    width: int = Field(default=0, ge=0, le=ImageConstants.MAX_DIMENSION)
    height: int = Field(default=0, ge=0, le=ImageConstants.MAX_DIMENSION)
    fit_mode: FitMode = FitMode.NONE
    crop_point: CropPoint = CropPoint.CENTER
    grayscale: bool = False

    @classmethod
    def from_params(cls, params: Mapping[str, str]) -> "ProcessOptions":
        """Build options from a parameter bag; missing keys behave like empty strings."""
        return cls(
            width=clean_int(params.get(ParamKeys.WIDTH, "")),
            height=clean_int(params.get(ParamKeys.HEIGHT, "")),
            fit_mode=get_fit_mode(params.get(ParamKeys.FIT, "")),
            crop_point=get_crop_point(params.get(ParamKeys.CROP, "")),
            grayscale=is_grayscale(params.get(ParamKeys.MONO, "")),
        )

    @property
    def has_dimensions(self) -> bool:
        return self.width != 0 or self.height != 0


class WatermarkRequest(BaseModel):
    """Request to watermark a base image with an overlay"""

    base_image: str = Field(..., description="Base64 encoded base image")
    overlay_image: str = Field(..., description="Base64 encoded overlay image")
    opacity: int = Field(
        default=ImageConstants.DEFAULT_WATERMARK_OPACITY,
        ge=ImageConstants.MIN_OPACITY,
        le=ImageConstants.MAX_OPACITY,
        description="Overlay mask value (0 transparent, 255 opaque)",
    )
