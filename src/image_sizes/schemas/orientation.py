"""Image orientation."""

from __future__ import annotations

from typing import Annotated

from pydantic import BeforeValidator

from image_sizes.schemas.core import TokenEnum


class Orientation(TokenEnum):
    """Orientation of an image.

    - ``THUMBNAIL``: Square aspect ratio (default).
    - ``LANDSCAPE``: Width greater than height.
    - ``PORTRAIT``: Height greater than width.

    Example:
        >>> from image_sizes import Orientation
        >>> Orientation.parse_lenient("landscape")
        <Orientation.LANDSCAPE: 'LANDSCAPE'>
        >>> str(Orientation.LANDSCAPE)
        'LANDSCAPE'
    """

    THUMBNAIL = "THUMBNAIL"
    LANDSCAPE = "LANDSCAPE"
    PORTRAIT = "PORTRAIT"


StrictOrientation = Annotated[Orientation, BeforeValidator(Orientation.parse_strict)]
