"""
API Routers for the Image Manipulation Service
"""

from . import image, system

__all__ = ["image", "system"]
