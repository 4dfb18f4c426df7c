"""This module implements the core components of the image size schemas."""

from __future__ import annotations

import logging
from enum import Enum
from enum import StrEnum
from typing import Self

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic.alias_generators import to_camel

from image_sizes.exceptions import UnknownVariantError

logger = logging.getLogger(__name__)


class CamelCaseStrictModel(BaseModel):
    """A model with forbidden extras and camel case aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        validate_by_name=True,
        serialize_by_alias=True,
        validate_assignment=True,
        extra="forbid",
    )


class TokenEnum(StrEnum):
    """Closed set of uppercase tokens, ordered by declaration.

    The first declared member is the default. There are two ways to parse a token:

    * :meth:`parse_lenient` never fails and falls back to the default member.
    * :meth:`parse_strict` raises :class:`UnknownVariantError` for unknown tokens.

    Both are case-insensitive.
    """

    @classmethod
    def default(cls) -> Self:
        """First declared member."""
        return next(iter(cls))

    @classmethod
    def tokens(cls) -> tuple[str, ...]:
        """Valid tokens, in declaration order."""
        return tuple(member.value for member in cls)

    @classmethod
    def _lookup(cls, token: str) -> Self | None:
        lowered = token.lower()
        for member in cls:
            if member.value.lower() == lowered:
                return member
        return None

    @classmethod
    def _missing_(cls, value: object) -> Self | None:
        if isinstance(value, str):
            return cls._lookup(value)
        return None

    @classmethod
    def parse_lenient(cls, text: str | None) -> Self:
        """Parse loosely-sourced text, defaulting on anything unrecognized."""
        if text is None:
            return cls.default()

        member = cls._lookup(text)
        if member is None:
            logger.debug("Unrecognized %s %r, using %s", cls.__name__, text, cls.default())
            return cls.default()

        return member

    @classmethod
    def parse_strict(cls, token: object) -> Self:
        """Parse a canonical token.

        Args:
            token: Token to parse, or a member of this enum.

        Returns:
            The matching member.

        Raises:
            UnknownVariantError: If the token is not one of :meth:`tokens`.
        """
        if isinstance(token, cls):
            return token

        member = cls._lookup(token) if isinstance(token, str) else None
        if member is None:
            raise UnknownVariantError(token, cls.tokens())

        return member

    @property
    def rank(self) -> int:
        """Position in declaration order."""
        return self._member_names_.index(self.name)

    def _coerce(self, other: object) -> Self | None:
        """Member to compare against; tokens go through the strict parser."""
        if isinstance(other, type(self)):
            return other
        if isinstance(other, str) and not isinstance(other, Enum):
            return self.parse_strict(other)
        return None

    def __lt__(self, other: object) -> bool:
        """Compare by declaration order."""
        member = self._coerce(other)
        if member is None:
            return NotImplemented
        return self.rank < member.rank

    def __le__(self, other: object) -> bool:
        """Compare by declaration order."""
        member = self._coerce(other)
        if member is None:
            return NotImplemented
        return self.rank <= member.rank

    def __gt__(self, other: object) -> bool:
        """Compare by declaration order."""
        member = self._coerce(other)
        if member is None:
            return NotImplemented
        return self.rank > member.rank

    def __ge__(self, other: object) -> bool:
        """Compare by declaration order."""
        member = self._coerce(other)
        if member is None:
            return NotImplemented
        return self.rank >= member.rank
