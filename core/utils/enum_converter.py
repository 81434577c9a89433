"""
Enum conversion utilities.

Provides standardized methods for converting between enums and strings,
with fallback defaults instead of errors.
"""

from typing import Any, Dict, Type, TypeVar

T = TypeVar("T")


def parse_enum(value: Any, enum_class: Type[T], default: T) -> T:
    """
    Parse value to enum with fallback to default.

    Args:
        value: Value to parse (string, enum, or None)
        enum_class: Enum class to parse to
        default: Default enum value if parsing fails

    Returns:
        Parsed enum value or default

    Example:
        >>> parse_enum("top,left", CropPoint, CropPoint.CENTER)
        >>> # Returns CropPoint.TOP_LEFT; "TOP,LEFT" returns CropPoint.CENTER
    """
    # Already an enum instance
    if isinstance(value, enum_class):
        return value

    # None or missing value
    if value is None:
        return default

    # String value - try to parse, case-sensitively
    try:
        return enum_class(value)
    except ValueError:
        return default


def enum_to_string(value: Any) -> str:
    """
    Convert enum to string value, or pass through if already string.

    Example:
        >>> enum_to_string(CropPoint.TOP_LEFT)
        >>> # Returns "top,left"
    """
    return value.value if hasattr(value, "value") else value


def convert_enums_to_strings(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Convert all enum values in a dictionary to strings.

    Example:
        >>> convert_enums_to_strings({"crop_point": CropPoint.TOP, "width": 100})
        >>> # Returns {"crop_point": "top", "width": 100}
    """
    return {key: enum_to_string(value) for key, value in data.items()}
