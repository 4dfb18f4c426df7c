"""Environment variable management for image size handling."""

from pydantic import Field
from pydantic import field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


class ImageSizesSettings(BaseSettings):
    """Image sizes environment configuration settings."""

    # Storage configuration
    strip_format_marker: bool = Field(
        default=True,
        description="Whether to strip a leading format marker from stored sizes before parsing",
        alias="IMAGE_SIZES__STORAGE__STRIP_FORMAT_MARKER",
    )
    lenient_columns: bool = Field(
        default=False,
        description="Whether stored orientations and scales default unknown tokens instead of failing",
        alias="IMAGE_SIZES__STORAGE__LENIENT_COLUMNS",
    )

    model_config = SettingsConfigDict(case_sensitive=True)

    @field_validator("strip_format_marker", "lenient_columns", mode="before")
    @classmethod
    def parse_bool_fields(cls, v: object) -> bool:
        """Parse boolean fields leniently."""
        if v is None:
            return False
        if isinstance(v, str):
            return v.lower() in ("1", "true", "yes", "on")
        return bool(v)
