"""
Constants and configuration values for the Image Manipulation Service.
Centralizes all magic numbers and configuration constants.
"""


# Image Processing Constants
class ImageConstants:
    """Constants related to image decoding, sizing and encoding."""

    # Dimension bounds (request parameters are reduced modulo DIMENSION_MODULO)
    DIMENSION_MODULO = 10000
    MAX_INT64 = 2**63 - 1
    MAX_DIMENSION = 9999
    MIN_DERIVED_DIMENSION = 1

    # Encoding
    DEFAULT_JPEG_QUALITY = 75
    PNG_BEST_COMPRESSION = 9
    OPAQUE_ALPHA = 255

    # Watermark
    DEFAULT_WATERMARK_OPACITY = 100
    MIN_OPACITY = 0
    MAX_OPACITY = 255

    # Uploads
    MAX_UPLOAD_SIZE_MB = 20


# Request parameter keys and literal values
class ParamKeys:
    """Keys recognized in a process request's parameter bag."""

    WIDTH = "w"
    HEIGHT = "h"
    FIT = "fit"
    CROP = "crop"
    MONO = "mono"

    FIT_CROP = "crop"
    BLACK_HEX_CODE = "000000"


# Metric names
class MetricNames:
    """Duration metric names recorded by the dispatcher and the processor."""

    CROP = "crop_duration"
    RESIZE = "resize_duration"
    WATERMARK = "watermark_duration"
    GRAYSCALE = "grayscale_duration"
    DECODE = "decode_duration"
    ENCODE = "encode_duration"


# Metrics Constants
class MetricsConstants:
    """Constants for the in-memory metrics buffer."""

    DEFAULT_BUFFER_SIZE = 1000
    MIN_BUFFER_SIZE = 1
    DEFAULT_SCOPE = "api"
    SCOPE_HEADER = "X-Metrics-Scope"
    DEFAULT_RECENT_LIMIT = 50


# API Constants
class APIConstants:
    """Constants for API endpoints."""

    DEFAULT_HOST = "0.0.0.0"
    DEFAULT_PORT = 8000
    API_VERSION = "v1"

    # Pagination
    MAX_LIMIT = 1000
    MIN_LIMIT = 1


# System Constants
class SystemConstants:
    """Constants for system operations."""

    # Logging
    LOG_LEVEL_DEFAULT = "INFO"
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Threading
    THREAD_POOL_SIZE = 4


# Error Messages
class ErrorMessages:
    """Standard error messages."""

    DECODE_FAILED = "Failed to decode image: {error}"
    ENCODE_FAILED = "Failed to encode image as {format}: {error}"
    EMPTY_IMAGE = "Image data is empty"
    UPLOAD_TOO_LARGE = "Image exceeds upload limit of {limit_mb} MB"
    INVALID_BASE64 = "Invalid base64 image data for {field}"
    INVALID_OPACITY = "Opacity must be between {min} and {max}, got {value}"
