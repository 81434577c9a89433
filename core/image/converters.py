"""
Image codec utilities.

Handles conversions between encoded bytes and pixel buffers:
- Decoding PNG/JPEG (and anything else Pillow reads) to RGBA NumPy arrays
- Choosing the output codec from opacity and source format
- Encoding RGBA NumPy arrays back to PNG or JPEG bytes
"""

import io
import logging
from dataclasses import dataclass

import numpy as np
from PIL import Image, UnidentifiedImageError

from core.constants import ErrorMessages, ImageConstants
from core.enums import ImageFormat
from core.exceptions import DecodeError, EncodeError

logger = logging.getLogger(__name__)

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
JPEG_SIGNATURE = b"\xff\xd8\xff"


@dataclass
class DecodedImage:
    """RGBA pixel buffer together with the format it was decoded from"""

    pixels: np.ndarray  # H x W x 4, uint8, straight alpha
    format: str  # lower-case source format tag ("png", "jpeg", "gif", ...)

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]


def decode_image(data: bytes) -> DecodedImage:
    """
    Decode image bytes into an RGBA pixel buffer.

    Args:
        data: Encoded image bytes

    Returns:
        DecodedImage with the source format tag

    Raises:
        DecodeError: If the bytes are empty, malformed or unsupported
    """
    if not data:
        raise DecodeError(ErrorMessages.EMPTY_IMAGE)

    try:
        with Image.open(io.BytesIO(data)) as image:
            image.load()
            source_format = (image.format or "").lower()
            rgba = image.convert("RGBA")
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        ValueError,
        SyntaxError,
    ) as e:
        logger.error(f"Failed to decode image ({len(data)} bytes): {e}")
        raise DecodeError(ErrorMessages.DECODE_FAILED.format(error=e)) from e

    return DecodedImage(pixels=np.array(rgba, dtype=np.uint8), format=source_format)


def is_opaque(pixels: np.ndarray) -> bool:
    """Check whether every pixel has a fully opaque alpha channel."""
    return bool(np.all(pixels[..., 3] == ImageConstants.OPAQUE_ALPHA))


def select_output_format(image: DecodedImage) -> ImageFormat:
    """
    Decide the codec an image is written with.

    PNG sources without any transparency are written as JPEG, other PNG
    sources stay PNG, everything else is written as JPEG.
    """
    if image.format == ImageFormat.PNG.value:
        if is_opaque(image.pixels):
            return ImageFormat.JPEG
        return ImageFormat.PNG
    return ImageFormat.JPEG


def encode_image(
    image: DecodedImage,
    jpeg_quality: int = ImageConstants.DEFAULT_JPEG_QUALITY,
    png_compress_level: int = ImageConstants.PNG_BEST_COMPRESSION,
) -> bytes:
    """
    Encode a pixel buffer with the codec chosen by select_output_format.

    Args:
        image: Decoded image to write
        jpeg_quality: JPEG quality (1-95)
        png_compress_level: zlib compression level for PNG (0-9)

    Returns:
        Encoded image bytes

    Raises:
        EncodeError: If the encoder fails
    """
    output_format = select_output_format(image)
    buffer = io.BytesIO()

    try:
        pil_image = Image.fromarray(np.ascontiguousarray(image.pixels))
        if output_format == ImageFormat.PNG:
            pil_image.save(buffer, format="PNG", compress_level=png_compress_level)
        else:
            # JPEG has no alpha channel
            pil_image.convert("RGB").save(buffer, format="JPEG", quality=jpeg_quality)
    except (OSError, ValueError, TypeError) as e:
        logger.error(f"Failed to encode {image.width}x{image.height} image: {e}")
        raise EncodeError(
            ErrorMessages.ENCODE_FAILED.format(format=output_format.value, error=e)
        ) from e

    return buffer.getvalue()


def detect_media_type(data: bytes) -> str:
    """Return the MIME type of encoded bytes from their signature."""
    if data.startswith(PNG_SIGNATURE):
        return "image/png"
    if data.startswith(JPEG_SIGNATURE):
        return "image/jpeg"
    return "application/octet-stream"
