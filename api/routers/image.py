"""
Image API Router - Image manipulation operations
"""

import base64
import binascii
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Request
from fastapi.responses import Response

from api.dependencies import get_config, get_manipulator, get_processor
from api.exceptions import safe_endpoint
from core.constants import ErrorMessages, ImageConstants, MetricsConstants
from core.image.converters import detect_media_type
from schemas import ProcessSpec, WatermarkRequest

logger = logging.getLogger(__name__)

router = APIRouter()


def _decode_base64(value: str, field: str) -> bytes:
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError):
        raise HTTPException(status_code=400, detail=ErrorMessages.INVALID_BASE64.format(field=field))


@router.post("/process")
@safe_endpoint
async def process_image(
    request: Request,
    scope: Optional[str] = Header(None, alias=MetricsConstants.SCOPE_HEADER),
    manipulator=Depends(get_manipulator),
    config: Dict[str, Any] = Depends(get_config),
) -> Response:
    """
    Crop, resize and/or grayscale the image sent as the request body.

    Query parameters:
        w, h: Target dimensions (0 or missing = derive from aspect ratio)
        fit: "crop" to cover-resize and crop, empty to resize
        crop: Crop anchor ("top", "top,left", ..., default centre)
        mono: "000000" to convert to grayscale

    Other query parameters are ignored.
    """
    data = await request.body()
    if not data:
        raise HTTPException(status_code=400, detail=ErrorMessages.EMPTY_IMAGE)

    max_upload_mb = config.get("image", {}).get("max_upload_mb", ImageConstants.MAX_UPLOAD_SIZE_MB)
    if len(data) > max_upload_mb * 1024 * 1024:
        raise HTTPException(
            status_code=413, detail=ErrorMessages.UPLOAD_TOO_LARGE.format(limit_mb=max_upload_mb)
        )

    if scope is None:
        scope = config.get("metrics", {}).get("default_scope", MetricsConstants.DEFAULT_SCOPE)

    spec = ProcessSpec(scope=scope, image_data=data, params=dict(request.query_params))
    result = manipulator.process(spec)

    logger.info(f"Processed image [{scope}] {dict(request.query_params)}: {len(result)} bytes")

    return Response(content=result, media_type=detect_media_type(result))


@router.post("/watermark")
@safe_endpoint
async def watermark_image(request: WatermarkRequest, processor=Depends(get_processor)) -> Response:
    """
    Blend an overlay at the centre of a base image.

    The overlay is scaled to half the base width (aspect ratio kept) and
    blended with a uniform mask of the requested opacity.
    """
    base = _decode_base64(request.base_image, "base_image")
    overlay = _decode_base64(request.overlay_image, "overlay_image")

    result = processor.watermark(base, overlay, request.opacity)

    logger.info(f"Watermarked image with opacity {request.opacity}: {len(result)} bytes")

    return Response(content=result, media_type=detect_media_type(result))
