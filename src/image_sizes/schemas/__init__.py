"""Schemas for image sizes."""

from image_sizes.schemas.core import CamelCaseStrictModel
from image_sizes.schemas.core import TokenEnum
from image_sizes.schemas.orientation import Orientation
from image_sizes.schemas.orientation import StrictOrientation
from image_sizes.schemas.scale import Scale
from image_sizes.schemas.scale import StrictScale
from image_sizes.schemas.size import Size

__all__ = [
    "CamelCaseStrictModel",
    "TokenEnum",
    "Orientation",
    "StrictOrientation",
    "Scale",
    "StrictScale",
    "Size",
]
