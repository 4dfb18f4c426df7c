"""Core functionality for image sizes."""

from image_sizes.core.serialization import SizeSerializer
from image_sizes.core.settings import ImageSizesSettings

__all__ = [
    "ImageSizesSettings",
    "SizeSerializer",
]
