"""Image size value types."""

from __future__ import annotations

from importlib import metadata

from image_sizes.schemas import Orientation
from image_sizes.schemas import Scale
from image_sizes.schemas import Size

try:
    __version__ = metadata.version("image-sizes")
except metadata.PackageNotFoundError:
    __version__ = "unknown"


def new_thumbnail(size: int, scale: Scale) -> Size:
    """Shortcut for :meth:`Size.new_thumbnail`."""
    return Size.new_thumbnail(size, scale)


def new_landscape(width: int, height: int, scale: Scale) -> Size:
    """Shortcut for :meth:`Size.new_landscape`."""
    return Size.new_landscape(width, height, scale)


def new_portrait(width: int, height: int, scale: Scale) -> Size:
    """Shortcut for :meth:`Size.new_portrait`."""
    return Size.new_portrait(width, height, scale)


__all__ = [
    "__version__",
    "Orientation",
    "Scale",
    "Size",
    "new_thumbnail",
    "new_landscape",
    "new_portrait",
]
