"""Image size tiers."""

from __future__ import annotations

from typing import Annotated

from pydantic import BeforeValidator

from image_sizes.schemas.core import TokenEnum


class Scale(TokenEnum):
    """Size scale of an image, from smallest to largest.

    Members compare by tier, so ``min``, ``max`` and ``sorted`` pick scales
    by size rather than alphabetically.

    Example:
        >>> from image_sizes import Scale
        >>> Scale.parse_lenient("lg")
        <Scale.LG: 'LG'>
        >>> Scale.SM < Scale.MD < Scale.XXLG
        True
    """

    XXSM = "XXSM"
    XSM = "XSM"
    SM = "SM"
    MD = "MD"
    LG = "LG"
    XLG = "XLG"
    XXLG = "XXLG"


StrictScale = Annotated[Scale, BeforeValidator(Scale.parse_strict)]
