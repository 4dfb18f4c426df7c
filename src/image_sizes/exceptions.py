"""Custom exceptions related to image size handling."""

from __future__ import annotations

from collections.abc import Iterable


class ImageSizesError(Exception):
    """Base exceptions class."""


class UnknownVariantError(ImageSizesError, ValueError):
    """Raised when a token doesn't name any member of a closed enumeration.

    Args:
        variant: The offending token, as received.
        expected: Valid tokens for the `message`.
    """

    def __init__(self, variant: object, expected: Iterable[str]):
        self.variant = variant
        self.expected = tuple(expected)

        valid = ", ".join(f"'{token}'" for token in self.expected)
        message = f"unknown variant {variant!r}, expected one of {valid}"

        super().__init__(message)


class SizeDecodeError(ImageSizesError):
    """Raised when a stored size value can't be decoded."""
