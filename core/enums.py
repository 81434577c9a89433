"""
Centralized enumerations for the Image Manipulation Service.
"""

from enum import Enum


class CropPoint(str, Enum):
    """Anchor deciding which region of a cover-resized image is kept."""

    CENTER = "center"
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"
    TOP_LEFT = "top,left"
    TOP_RIGHT = "top,right"
    BOTTOM_LEFT = "bottom,left"
    BOTTOM_RIGHT = "bottom,right"


class FitMode(str, Enum):
    """Whole-pipeline sizing behaviour selected by the ``fit`` parameter."""

    NONE = ""
    CROP = "crop"
    # Any other non-empty value: neither crop nor resize runs
    UNSUPPORTED = "unsupported"


class ImageFormat(str, Enum):
    """Encodings the processor writes."""

    PNG = "png"
    JPEG = "jpeg"


class MetricKind(str, Enum):
    """Kinds of values accepted by the metrics sink."""

    DURATION = "duration"
