"""Tests for the environment settings."""

import os
from unittest.mock import patch

import pytest

from image_sizes.core import ImageSizesSettings


class TestSettings:
    """Test environment variable handling."""

    def test_defaults(self) -> None:
        """Marker stripping is on and lenient columns are off by default."""
        with patch.dict(os.environ, {}, clear=True):
            settings = ImageSizesSettings()
            assert settings.strip_format_marker is True
            assert settings.lenient_columns is False

    @pytest.mark.parametrize(
        ("env_var", "value", "property_name", "expected"),
        [
            ("IMAGE_SIZES__STORAGE__STRIP_FORMAT_MARKER", "false", "strip_format_marker", False),
            ("IMAGE_SIZES__STORAGE__STRIP_FORMAT_MARKER", "0", "strip_format_marker", False),
            ("IMAGE_SIZES__STORAGE__LENIENT_COLUMNS", "yes", "lenient_columns", True),
            ("IMAGE_SIZES__STORAGE__LENIENT_COLUMNS", "On", "lenient_columns", True),
            ("IMAGE_SIZES__STORAGE__LENIENT_COLUMNS", "nope", "lenient_columns", False),
        ],
    )
    def test_env_var_overrides(self, env_var: str, value: str, property_name: str, expected: bool) -> None:
        """Environment variables override defaults."""
        with patch.dict(os.environ, {env_var: value}):
            assert getattr(ImageSizesSettings(), property_name) is expected

    def test_case_sensitive(self) -> None:
        """Lowercase variable names are ignored."""
        with patch.dict(os.environ, {"image_sizes__storage__lenient_columns": "true"}, clear=True):
            assert ImageSizesSettings().lenient_columns is False
