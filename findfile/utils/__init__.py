"""Utility functions and helpers"""
from .helpers import generate_id, has_supported_extension, clamp_unit

__all__ = [
    "generate_id",
    "has_supported_extension",
    "clamp_unit",
]
