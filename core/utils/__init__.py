"""
Utility modules for core functionality.

Modules:
- decorators: Utility context managers (timer)
- enum_converter: Enum parsing and conversion
- params_processor: Process request parameter normalization
"""

from .decorators import timer
from .enum_converter import convert_enums_to_strings, enum_to_string, parse_enum
from .params_processor import clean_int, get_crop_point, get_fit_mode, is_grayscale

__all__ = [
    "timer",
    "convert_enums_to_strings",
    "enum_to_string",
    "parse_enum",
    "clean_int",
    "get_crop_point",
    "get_fit_mode",
    "is_grayscale",
]
