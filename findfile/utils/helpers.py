"""Helper utility functions"""
import os
import uuid
from typing import Iterable


def generate_id() -> str:
    """Generate an opaque, globally unique identifier (UUID4)"""
    return str(uuid.uuid4())


def has_supported_extension(key: str, extensions: Iterable[str]) -> bool:
    """
    Check an object key's extension against the accepted list
    
    The comparison is case-sensitive, as keys are stored.
    
    Args:
        key: Object key, e.g. ``scans/p.jpg``
        extensions: Accepted extensions including the dot, e.g. ``.jpg``
        
    Returns:
        True if the key ends in one of the extensions
    """
    return os.path.splitext(key)[1] in set(extensions)


def clamp_unit(value: float) -> float:
    """Clamp a normalized coordinate into [0, 1]"""
    return min(1.0, max(0.0, value))
