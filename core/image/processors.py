"""
Pixel operations on RGBA NumPy buffers.

Handles image manipulation tasks:
- Bilinear resizing
- Sub-image extraction
- Grayscale conversion (row bands converted in parallel by OpenCV)
- Masked alpha compositing (Pillow)
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Tuple

import cv2
import numpy as np
from PIL import Image

from core.constants import SystemConstants

logger = logging.getLogger(__name__)


def resize_image(pixels: np.ndarray, width: int, height: int) -> np.ndarray:
    """
    Resize image to exact dimensions using bilinear interpolation.

    Args:
        pixels: Input image as H x W x 4 array
        width: Target width
        height: Target height

    Returns:
        Resized image as NumPy array
    """
    h, w = pixels.shape[:2]
    if (w, h) == (width, height):
        return pixels

    return cv2.resize(pixels, (width, height), interpolation=cv2.INTER_LINEAR)


def extract_region(pixels: np.ndarray, x: int, y: int, width: int, height: int) -> np.ndarray:
    """Copy the width x height region whose top-left corner is (x, y)."""
    return pixels[y : y + height, x : x + width].copy()


def _row_bands(height: int, workers: int) -> List[Tuple[int, int]]:
    """Split [0, height) into at most `workers` contiguous row ranges."""
    workers = max(1, min(workers, height))
    step = -(-height // workers)
    return [(start, min(start + step, height)) for start in range(0, height, step)]


def _grayscale_rows(source: np.ndarray, target: np.ndarray, start: int, end: int) -> None:
    luma = cv2.cvtColor(source[start:end], cv2.COLOR_RGBA2GRAY)

    target[start:end, :, :3] = luma[..., np.newaxis]
    target[start:end, :, 3] = source[start:end, :, 3]


def grayscale(pixels: np.ndarray, workers: int = SystemConstants.THREAD_POOL_SIZE) -> np.ndarray:
    """
    Convert every pixel to its luminance, keeping alpha.

    Rows are split into bands; each band is converted on its own worker and
    writes only its own rows of the output array.

    Args:
        pixels: Input image as H x W x 4 array
        workers: Maximum number of concurrent bands

    Returns:
        New grayscale image as NumPy array
    """
    height = pixels.shape[0]
    result = np.empty_like(pixels)
    if height == 0:
        return result

    bands = _row_bands(height, workers)
    if len(bands) == 1:
        _grayscale_rows(pixels, result, 0, height)
        return result

    with ThreadPoolExecutor(max_workers=len(bands)) as executor:
        futures = [
            executor.submit(_grayscale_rows, pixels, result, start, end) for start, end in bands
        ]
        for future in futures:
            future.result()

    return result


def composite_over(
    base: np.ndarray, overlay: np.ndarray, offset: Tuple[int, int], opacity: int
) -> np.ndarray:
    """
    Blend overlay onto base with a uniform mask using "over" compositing.

    Args:
        base: Base image as H x W x 4 array (modified in place)
        overlay: Overlay image as h x w x 4 array
        offset: (x, y) position of the overlay's top-left corner on the base
        opacity: Mask value in 0-255, 0 (overlay invisible) to 255 (overlay as is)

    Returns:
        The base array
    """
    x, y = offset
    base_h, base_w = base.shape[:2]
    over_h, over_w = overlay.shape[:2]

    # Clip the overlay rectangle to the base bounds
    x0, y0 = max(x, 0), max(y, 0)
    x1, y1 = min(x + over_w, base_w), min(y + over_h, base_h)
    if x0 >= x1 or y0 >= y1:
        return base

    src = overlay[y0 - y : y1 - y, x0 - x : x1 - x].copy()
    src[..., 3] = (src[..., 3].astype(np.uint16) * opacity + 127) // 255

    blended = Image.alpha_composite(
        Image.fromarray(np.ascontiguousarray(base[y0:y1, x0:x1])), Image.fromarray(src)
    )
    base[y0:y1, x0:x1] = np.asarray(blended)

    return base
