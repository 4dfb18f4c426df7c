"""SQLAlchemy column types for image sizes.

Orientations and scales are stored as text tokens. Sizes are stored as a single
JSON text value. Sizes written by older clients may carry a one character
format marker in front of the JSON payload, which is dropped on read.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from typing import Any

from pydantic import ValidationError
from sqlalchemy import String
from sqlalchemy import Text
from sqlalchemy.types import TypeDecorator

from image_sizes.core.settings import ImageSizesSettings
from image_sizes.exceptions import SizeDecodeError
from image_sizes.schemas.orientation import Orientation
from image_sizes.schemas.scale import Scale
from image_sizes.schemas.size import Size

if TYPE_CHECKING:
    from sqlalchemy.engine import Dialect

    from image_sizes.schemas.core import TokenEnum

logger = logging.getLogger(__name__)


def strip_format_marker(raw: str | bytes) -> str:
    """Drop a single leading control character, if there is one.

    Args:
        raw: Stored value, as text or UTF-8 bytes.

    Returns:
        The payload without its marker.
    """
    text = raw.decode("utf-8") if isinstance(raw, bytes) else raw

    if text and (ord(text[0]) < 0x20 or text[0] == "\x7f"):  # noqa: PLR2004
        logger.debug("Stripping format marker %r", text[0])
        return text[1:]

    return text


class _TokenEnumType(TypeDecorator):
    """Text column holding the uppercase token of a :class:`TokenEnum`."""

    impl = String
    cache_ok = True
    enum_type: type[TokenEnum]

    def __init__(self, *args: Any, lenient: bool | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        if lenient is None:
            lenient = ImageSizesSettings().lenient_columns
        self.lenient = lenient

    def process_bind_param(self, value: TokenEnum | str | None, dialect: Dialect) -> str | None:
        """Write the uppercase token."""
        if value is None:
            return None
        return str(self.enum_type.parse_strict(value))

    def process_result_value(self, value: str | None, dialect: Dialect) -> TokenEnum | None:
        """Read a member from its stored token."""
        if value is None:
            return None
        if self.lenient:
            return self.enum_type.parse_lenient(value)
        return self.enum_type.parse_strict(value)


class OrientationType(_TokenEnumType):
    """Column type for :class:`Orientation`."""

    enum_type = Orientation


class ScaleType(_TokenEnumType):
    """Column type for :class:`Scale`."""

    enum_type = Scale


class SizeType(TypeDecorator):
    """Column type storing a :class:`Size` as JSON text.

    Args:
        strip_marker: Whether to strip a leading format marker on read.
            Defaults to the ``IMAGE_SIZES__STORAGE__STRIP_FORMAT_MARKER`` setting.
    """

    impl = Text
    cache_ok = True

    def __init__(self, *args: Any, strip_marker: bool | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        if strip_marker is None:
            strip_marker = ImageSizesSettings().strip_format_marker
        self.strip_marker = strip_marker

    def process_bind_param(self, value: Size | None, dialect: Dialect) -> str | None:
        """Write plain JSON."""
        if value is None:
            return None
        return value.model_dump_json()

    def process_result_value(self, value: str | bytes | None, dialect: Dialect) -> Size | None:
        """Read JSON, dropping any format marker first."""
        if value is None:
            return None

        try:
            if self.strip_marker:
                value = strip_format_marker(value)
            return Size.model_validate_json(value)
        except (UnicodeDecodeError, ValidationError) as exc:
            msg = f"Can't decode stored size {value!r}"
            raise SizeDecodeError(msg) from exc
