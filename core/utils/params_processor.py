"""
Parameter processing utilities.

Normalizes the loosely-typed string parameters of a process request.
Every function here is total: malformed input maps to a safe default
(0, CropPoint.CENTER, FitMode.UNSUPPORTED) and nothing is raised.
"""

import re
from typing import Optional

from core.constants import ImageConstants, ParamKeys
from core.enums import CropPoint, FitMode
from core.utils.enum_converter import parse_enum

# Optional sign and ASCII digits only, nothing around them
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def clean_int(value: Optional[str]) -> int:
    """
    Parse a dimension parameter.

    Args:
        value: Base-10 integer string (None behaves like "")

    Returns:
        0 for unparsable, zero or negative input, otherwise the value
        modulo 10000 (never greater than 9999). Whitespace, digit
        separators and non-ASCII digits make the input unparsable; values
        beyond the 64-bit range saturate before the modulo.

    Example:
        >>> clean_int("10005")
        5
        >>> clean_int(" 200")
        0
    """
    if not isinstance(value, str) or _INTEGER_PATTERN.fullmatch(value) is None:
        return 0

    try:
        parsed = min(int(value, 10), ImageConstants.MAX_INT64)
    except ValueError:
        # Longer than the interpreter's int conversion limit
        return 0

    if parsed <= 0:
        return 0
    return parsed % ImageConstants.DIMENSION_MODULO


def get_crop_point(value: Optional[str]) -> CropPoint:
    """
    Map a crop anchor string to a CropPoint.

    Matching is exact ("top", "top,left", "bottom,right", ...); anything
    else, including "" and "center", yields CropPoint.CENTER.
    """
    return parse_enum(value, CropPoint, CropPoint.CENTER)


def get_fit_mode(value: Optional[str]) -> FitMode:
    """Map the fit parameter: "" -> NONE, "crop" -> CROP, anything else -> UNSUPPORTED."""
    if not value:
        return FitMode.NONE
    if value == ParamKeys.FIT_CROP:
        return FitMode.CROP
    return FitMode.UNSUPPORTED


def is_grayscale(value: Optional[str]) -> bool:
    """Grayscale is requested with the literal black hex code."""
    return value == ParamKeys.BLACK_HEX_CODE
