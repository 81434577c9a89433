"""
Geometric calculations for resizing and cropping.

Pure functions, no pixel access:
- contain_size: aspect-preserving size fitting the requested bounds
- cover_size: aspect-preserving size fully covering the requested box
- crop_origin: top-left corner of the crop box for a given anchor
- watermark_size / centered_offset: overlay placement

All derived dimensions are rounded half-up and never drop below one pixel.
"""

import math
from typing import Tuple

from core.constants import ImageConstants
from core.enums import CropPoint


def _round_dimension(value: float) -> int:
    """Round half-up, keeping at least one pixel."""
    return max(ImageConstants.MIN_DERIVED_DIMENSION, int(math.floor(value + 0.5)))


def contain_size(width: int, height: int, orig_width: int, orig_height: int) -> Tuple[int, int]:
    """
    Compute output dimensions for a contain resize.

    Args:
        width: Requested width (0 = derive from aspect ratio)
        height: Requested height (0 = derive from aspect ratio)
        orig_width: Source image width
        orig_height: Source image height

    Returns:
        Tuple of (width, height). Equals the source size when both are 0,
        and exactly (width, height) when both are given.

    Example:
        >>> contain_size(200, 0, 400, 300)
        (200, 150)
    """
    if width == 0 and height == 0:
        return orig_width, orig_height

    if width == 0:
        return _round_dimension(orig_width * height / orig_height), height

    if height == 0:
        return width, _round_dimension(orig_height * width / orig_width)

    return width, height


def cover_size(width: int, height: int, orig_width: int, orig_height: int) -> Tuple[int, int]:
    """
    Compute the intermediate size of a cover resize before cropping.

    The scale factor is the larger of the per-axis ratios, so the result is
    greater than or equal to the target box on both axes. A zero target axis
    follows the other axis's scale.

    Args:
        width: Target box width (0 = unspecified)
        height: Target box height (0 = unspecified)
        orig_width: Source image width
        orig_height: Source image height

    Returns:
        Tuple of (width, height) covering the target box
    """
    if width == 0 and height == 0:
        return orig_width, orig_height

    scale = max(width / orig_width, height / orig_height)

    covered_width = max(width, _round_dimension(orig_width * scale))
    covered_height = max(height, _round_dimension(orig_height * scale))

    return covered_width, covered_height


def crop_origin(
    width: int, height: int, crop_width: int, crop_height: int, point: CropPoint
) -> Tuple[int, int]:
    """
    Compute the top-left corner of a crop box.

    Args:
        width: Width of the (cover-resized) image
        height: Height of the (cover-resized) image
        crop_width: Width of the crop box
        crop_height: Height of the crop box
        point: Anchor to keep

    Returns:
        Tuple of (x0, y0)
    """
    center_x = (width - crop_width) // 2
    center_y = (height - crop_height) // 2
    right = width - crop_width
    bottom = height - crop_height

    origins = {
        CropPoint.TOP: (center_x, 0),
        CropPoint.BOTTOM: (center_x, bottom),
        CropPoint.LEFT: (0, center_y),
        CropPoint.RIGHT: (right, center_y),
        CropPoint.TOP_LEFT: (0, 0),
        CropPoint.TOP_RIGHT: (right, 0),
        CropPoint.BOTTOM_LEFT: (0, bottom),
        CropPoint.BOTTOM_RIGHT: (right, bottom),
    }
    return origins.get(point, (center_x, center_y))


def watermark_size(base_width: int, overlay_width: int, overlay_height: int) -> Tuple[int, int]:
    """Scale an overlay to half the base width, keeping its aspect ratio."""
    ratio = overlay_height / overlay_width
    target_width = base_width // 2
    return target_width, int(target_width * ratio)


def centered_offset(
    outer_width: int, outer_height: int, inner_width: int, inner_height: int
) -> Tuple[int, int]:
    """Offset placing an inner box at the centre of an outer one (may be negative)."""
    return (outer_width - inner_width) // 2, (outer_height - inner_height) // 2
