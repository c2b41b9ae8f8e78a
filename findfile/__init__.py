"""Spatial text search over OCR-indexed bucket images"""

__version__ = "1.0.0"
