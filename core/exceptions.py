"""
Exceptions raised by the image processing core.
"""


class ImageProcessingError(Exception):
    """Base class for failures while transforming an image."""

    error_type = "processing_error"


class DecodeError(ImageProcessingError):
    """Image bytes are malformed or in an unsupported format."""

    error_type = "decode_error"


class EncodeError(ImageProcessingError):
    """The encoder could not write the pixel buffer."""

    error_type = "encode_error"
