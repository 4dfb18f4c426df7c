"""Test configuration before everything runs."""

from __future__ import annotations

import os

import pytest

SETTINGS_PREFIX = "IMAGE_SIZES__"


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove image size settings from the environment for every test."""
    for name in list(os.environ):
        if name.startswith(SETTINGS_PREFIX):
            monkeypatch.delenv(name)
