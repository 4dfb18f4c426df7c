"""Image size record."""

from __future__ import annotations

from typing import Self

from pydantic import Field

from image_sizes.schemas.core import CamelCaseStrictModel
from image_sizes.schemas.orientation import Orientation
from image_sizes.schemas.orientation import StrictOrientation
from image_sizes.schemas.scale import Scale
from image_sizes.schemas.scale import StrictScale


class Size(CamelCaseStrictModel):
    """Image size with scale, orientation, and dimensions.

    The orientation is asserted by whoever builds the size; it is not checked
    against ``width`` and ``height``.

    Example:
        >>> from image_sizes import Scale, Size
        >>> Size.new_landscape(1920, 1080, Scale.LG).orientation
        <Orientation.LANDSCAPE: 'LANDSCAPE'>
        >>> Size().is_empty()
        True
    """

    scale: StrictScale = Field(default=Scale.XXSM, description="Size tier.")
    orientation: StrictOrientation = Field(default=Orientation.THUMBNAIL, description="Image orientation.")
    width: int = Field(default=0, description="Width in pixels.")
    height: int = Field(default=0, description="Height in pixels.")

    @classmethod
    def new_thumbnail(cls, size: int, scale: Scale) -> Self:
        """Square thumbnail with side ``size``."""
        return cls(scale=scale, orientation=Orientation.THUMBNAIL, width=size, height=size)

    @classmethod
    def new_landscape(cls, width: int, height: int, scale: Scale) -> Self:
        """Landscape-oriented size."""
        return cls(scale=scale, orientation=Orientation.LANDSCAPE, width=width, height=height)

    @classmethod
    def new_portrait(cls, width: int, height: int, scale: Scale) -> Self:
        """Portrait-oriented size."""
        return cls(scale=scale, orientation=Orientation.PORTRAIT, width=width, height=height)

    def is_empty(self) -> bool:
        """Check if this is the default (uninitialized) size."""
        return self == type(self)()
