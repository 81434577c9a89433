"""
Image Processor - decode, transform and encode image bytes.

`Processor` is the capability interface used by the manipulator;
`NativeProcessor` implements it with Pillow (codecs), OpenCV (bilinear
resize) and NumPy (pixel arithmetic). Decode, each transform and encode
are timed independently.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from core.constants import ErrorMessages, ImageConstants, MetricNames, SystemConstants
from core.enums import CropPoint
from core.image import converters, geometry, processors
from core.image.converters import DecodedImage
from core.metrics import MetricsRecorder, NullMetrics, track_duration

logger = logging.getLogger(__name__)


class Processor(ABC):
    """Image transform capabilities working on encoded bytes"""

    @abstractmethod
    def crop(self, data: bytes, width: int, height: int, point: CropPoint) -> bytes:
        """Cover-resize to width x height, then crop around the anchor point"""

    @abstractmethod
    def resize(self, data: bytes, width: int, height: int) -> bytes:
        """Resize within the given bounds, deriving a zero dimension from the aspect ratio"""

    @abstractmethod
    def watermark(self, base: bytes, overlay: bytes, opacity: int) -> bytes:
        """Blend overlay at the centre of base, scaled to half its width"""

    @abstractmethod
    def grayscale(self, data: bytes) -> bytes:
        """Convert to luminance, keeping alpha"""


class NativeProcessor(Processor):
    """Processor backed by Pillow, OpenCV and NumPy"""

    def __init__(
        self,
        metrics: Optional[MetricsRecorder] = None,
        grayscale_workers: int = SystemConstants.THREAD_POOL_SIZE,
        jpeg_quality: int = ImageConstants.DEFAULT_JPEG_QUALITY,
        png_compress_level: int = ImageConstants.PNG_BEST_COMPRESSION,
    ):
        """
        Initialize processor

        Args:
            metrics: Sink for per-step durations (discarded if None)
            grayscale_workers: Maximum row bands converted concurrently
            jpeg_quality: Quality used when writing JPEG
            png_compress_level: zlib level used when writing PNG
        """
        self.metrics = metrics or NullMetrics()
        self.grayscale_workers = grayscale_workers
        self.jpeg_quality = jpeg_quality
        self.png_compress_level = png_compress_level

    def crop(self, data: bytes, width: int, height: int, point: CropPoint) -> bytes:
        image = self._decode(data)

        with track_duration(self.metrics, MetricNames.CROP):
            w, h = geometry.cover_size(width, height, image.width, image.height)
            pixels = processors.resize_image(image.pixels, w, h)

            # A zero target axis keeps the whole covered extent
            crop_width = width or w
            crop_height = height or h
            x0, y0 = geometry.crop_origin(w, h, crop_width, crop_height, point)
            pixels = processors.extract_region(pixels, x0, y0, crop_width, crop_height)

        logger.debug(
            f"Cropped {image.width}x{image.height} -> {w}x{h} -> "
            f"{crop_width}x{crop_height} at ({x0},{y0}) [{point.value}]"
        )
        return self._encode(DecodedImage(pixels=pixels, format=image.format))

    def resize(self, data: bytes, width: int, height: int) -> bytes:
        image = self._decode(data)

        w, h = geometry.contain_size(width, height, image.width, image.height)
        if (w, h) != (image.width, image.height):
            with track_duration(self.metrics, MetricNames.RESIZE):
                image = DecodedImage(
                    pixels=processors.resize_image(image.pixels, w, h), format=image.format
                )
            logger.debug(f"Resized to {w}x{h}")

        return self._encode(image)

    def watermark(self, base: bytes, overlay: bytes, opacity: int) -> bytes:
        if not ImageConstants.MIN_OPACITY <= opacity <= ImageConstants.MAX_OPACITY:
            raise ValueError(
                ErrorMessages.INVALID_OPACITY.format(
                    min=ImageConstants.MIN_OPACITY, max=ImageConstants.MAX_OPACITY, value=opacity
                )
            )

        base_image = self._decode(base)
        overlay_image = self._decode(overlay)

        with track_duration(self.metrics, MetricNames.WATERMARK):
            w, h = geometry.watermark_size(
                base_image.width, overlay_image.width, overlay_image.height
            )
            if w > 0 and h > 0:
                scaled = processors.resize_image(overlay_image.pixels, w, h)
                offset = geometry.centered_offset(base_image.width, base_image.height, w, h)
                processors.composite_over(base_image.pixels, scaled, offset, opacity)
            else:
                logger.debug(f"Overlay collapses to {w}x{h} on a {base_image.width}px base")

        return self._encode(base_image)

    def grayscale(self, data: bytes) -> bytes:
        image = self._decode(data)

        with track_duration(self.metrics, MetricNames.GRAYSCALE):
            pixels = processors.grayscale(image.pixels, workers=self.grayscale_workers)

        return self._encode(DecodedImage(pixels=pixels, format=image.format))

    def _decode(self, data: bytes) -> DecodedImage:
        with track_duration(self.metrics, MetricNames.DECODE):
            return converters.decode_image(data)

    def _encode(self, image: DecodedImage) -> bytes:
        with track_duration(self.metrics, MetricNames.ENCODE):
            return converters.encode_image(
                image,
                jpeg_quality=self.jpeg_quality,
                png_compress_level=self.png_compress_level,
            )
