"""
Pytest configuration and fixtures for Image Manipulation Service tests
"""

import io
from unittest.mock import MagicMock

import numpy as np
import pytest
from PIL import Image

from core.metrics import MetricsBuffer
from core.processor import NativeProcessor
from services.manipulator import Manipulator


def _encode(pixels: np.ndarray, format: str) -> bytes:
    image = Image.fromarray(pixels)
    if format == "JPEG":
        image = image.convert("RGB")
    buffer = io.BytesIO()
    image.save(buffer, format=format)
    return buffer.getvalue()


def _gradient(width: int, height: int, alpha: int = 255) -> np.ndarray:
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    pixels[..., 0] = np.linspace(0, 255, width, dtype=np.uint8)[np.newaxis, :]
    pixels[..., 1] = np.linspace(0, 255, height, dtype=np.uint8)[:, np.newaxis]
    pixels[..., 2] = 128
    pixels[..., 3] = alpha
    return pixels


@pytest.fixture
def make_image():
    """Factory building encoded test images from a colour gradient"""

    def factory(width=64, height=48, format="PNG", alpha=255, transparent_pixel=False):
        pixels = _gradient(width, height, alpha)
        if transparent_pixel:
            pixels[0, 0, 3] = 0
        return _encode(pixels, format)

    return factory


@pytest.fixture
def encode_pixels():
    """Encode an RGBA array as PNG or JPEG bytes"""
    return _encode


@pytest.fixture
def decode_bytes():
    """Decode bytes to (format, RGBA array)"""

    def decode(data: bytes):
        with Image.open(io.BytesIO(data)) as image:
            return image.format, np.array(image.convert("RGBA"))

    return decode


@pytest.fixture
def opaque_png(make_image):
    """Fully opaque 64x48 PNG"""
    return make_image(64, 48, "PNG")


@pytest.fixture
def transparent_png(make_image):
    """64x48 PNG with a single transparent pixel"""
    return make_image(64, 48, "PNG", transparent_pixel=True)


@pytest.fixture
def jpeg_image(make_image):
    """64x48 JPEG"""
    return make_image(64, 48, "JPEG")


@pytest.fixture
def metrics_buffer():
    """Create MetricsBuffer instance for testing"""
    return MetricsBuffer(max_size=100)


@pytest.fixture
def processor(metrics_buffer):
    """Create NativeProcessor recording into the test metrics buffer"""
    return NativeProcessor(metrics=metrics_buffer, grayscale_workers=3)


@pytest.fixture
def manipulator(processor, metrics_buffer):
    """Create Manipulator backed by a real processor"""
    return Manipulator(processor=processor, metrics=metrics_buffer)


@pytest.fixture
def mock_processor():
    """Create mock Processor for unit testing"""
    mock = MagicMock()
    mock.crop.return_value = b"cropped"
    mock.resize.return_value = b"resized"
    mock.grayscale.return_value = b"gray"
    mock.watermark.return_value = b"watermarked"
    return mock
