"""
Core modules for the Image Manipulation Service
"""

from .exceptions import DecodeError, EncodeError, ImageProcessingError
from .metrics import MetricsBuffer, MetricsRecorder, MetricUpdate, NullMetrics, track_duration
from .processor import NativeProcessor, Processor

__all__ = [
    "DecodeError",
    "EncodeError",
    "ImageProcessingError",
    "MetricsBuffer",
    "MetricsRecorder",
    "MetricUpdate",
    "NullMetrics",
    "track_duration",
    "NativeProcessor",
    "Processor",
]
