"""
Image processing utilities - modular architecture.

This package provides focused image processing utilities:
- converters: Decoding, encoding and output format selection
- processors: Pixel operations (resize, region extraction, grayscale, compositing)
- geometry: Size and anchor calculations for resize and crop
"""

from core.image.converters import (
    DecodedImage,
    decode_image,
    detect_media_type,
    encode_image,
    is_opaque,
    select_output_format,
)
from core.image.geometry import (
    centered_offset,
    contain_size,
    cover_size,
    crop_origin,
    watermark_size,
)
from core.image.processors import composite_over, extract_region, grayscale, resize_image

__all__ = [
    "DecodedImage",
    "decode_image",
    "detect_media_type",
    "encode_image",
    "is_opaque",
    "select_output_format",
    "centered_offset",
    "contain_size",
    "cover_size",
    "crop_origin",
    "watermark_size",
    "composite_over",
    "extract_region",
    "grayscale",
    "resize_image",
]
