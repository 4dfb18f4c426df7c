"""Relational storage bindings."""

from image_sizes.storage.types import OrientationType
from image_sizes.storage.types import ScaleType
from image_sizes.storage.types import SizeType
from image_sizes.storage.types import strip_format_marker

__all__ = [
    "OrientationType",
    "ScaleType",
    "SizeType",
    "strip_format_marker",
]
