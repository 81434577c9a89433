"""
Service layer for the Image Manipulation Service
"""

from .manipulator import Manipulator

__all__ = ["Manipulator"]
