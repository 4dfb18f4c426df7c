"""Tests for the image size record."""

import json

import pytest
from pydantic import ValidationError

import image_sizes
from image_sizes import Orientation
from image_sizes import Scale
from image_sizes import Size


class TestConstructors:
    """Named constructors fill orientation and copy dimensions."""

    def test_new_thumbnail(self) -> None:
        """Thumbnails are square."""
        size = Size.new_thumbnail(64, Scale.SM)
        assert size.scale is Scale.SM
        assert size.orientation is Orientation.THUMBNAIL
        assert size.width == 64
        assert size.height == 64

    def test_new_landscape(self) -> None:
        """Landscape keeps width and height as given."""
        size = Size.new_landscape(1920, 1080, Scale.LG)
        assert size == Size(scale=Scale.LG, orientation=Orientation.LANDSCAPE, width=1920, height=1080)

    def test_new_portrait(self) -> None:
        """Portrait keeps width and height as given."""
        size = Size.new_portrait(800, 1200, Scale.MD)
        assert size == Size(scale=Scale.MD, orientation=Orientation.PORTRAIT, width=800, height=1200)

    def test_orientation_not_checked(self) -> None:
        """Dimensions that contradict the orientation are accepted."""
        size = Size.new_landscape(100, 400, Scale.XSM)
        assert size.orientation is Orientation.LANDSCAPE
        assert size.height > size.width

    def test_negative_dimensions(self) -> None:
        """Dimensions are not bounds checked."""
        assert Size.new_thumbnail(-5, Scale.XXSM).width == -5

    def test_package_shortcuts(self) -> None:
        """Package level constructors delegate to the classmethods."""
        assert image_sizes.new_thumbnail(32, Scale.XSM) == Size.new_thumbnail(32, Scale.XSM)
        assert image_sizes.new_landscape(300, 200, Scale.SM) == Size.new_landscape(300, 200, Scale.SM)
        assert image_sizes.new_portrait(200, 300, Scale.SM) == Size.new_portrait(200, 300, Scale.SM)


class TestEmpty:
    """Empty means equal to the all-defaults size."""

    def test_default_is_empty(self) -> None:
        """Default size is empty."""
        size = Size()
        assert size == Size(scale=Scale.XXSM, orientation=Orientation.THUMBNAIL, width=0, height=0)
        assert size.is_empty()

    def test_zero_thumbnail_is_empty(self) -> None:
        """A zero-sized XXSM thumbnail equals the default."""
        assert Size.new_thumbnail(0, Scale.XXSM).is_empty()

    @pytest.mark.parametrize(
        "size",
        [
            Size.new_portrait(800, 1200, Scale.MD),
            Size.new_thumbnail(0, Scale.SM),
            Size.new_landscape(0, 0, Scale.XXSM),
            Size(width=1),
        ],
    )
    def test_not_empty(self, size: Size) -> None:
        """Any differing field makes a size non-empty."""
        assert not size.is_empty()


class TestJSON:
    """Structured serialization uses camelCase keys and uppercase tokens."""

    @pytest.mark.parametrize(
        "size",
        [
            Size.new_thumbnail(64, Scale.SM),
            Size.new_landscape(1920, 1080, Scale.LG),
            Size.new_portrait(800, 1200, Scale.MD),
        ],
    )
    def test_round_trip(self, size: Size) -> None:
        """Dumping then validating reproduces an equal size."""
        assert Size.model_validate_json(size.model_dump_json()) == size

    def test_dump_shape(self) -> None:
        """Enums dump as uppercase token strings."""
        parsed = json.loads(Size.new_landscape(1920, 1080, Scale.XLG).model_dump_json())
        assert parsed == {"scale": "XLG", "orientation": "LANDSCAPE", "width": 1920, "height": 1080}

    def test_key_order_and_case(self) -> None:
        """Key order is irrelevant and tokens match in any case."""
        stream = '{"height": 10, "width": 20, "orientation": "landscape", "scale": "xsm"}'
        assert Size.model_validate_json(stream) == Size.new_landscape(20, 10, Scale.XSM)

    @pytest.mark.parametrize(
        "payload",
        [
            {"scale": "bogus", "orientation": "THUMBNAIL", "width": 1, "height": 1},
            {"scale": "SM", "orientation": "square", "width": 1, "height": 1},
        ],
    )
    def test_unknown_variant(self, payload: dict) -> None:
        """Unknown tokens fail validation instead of defaulting."""
        with pytest.raises(ValidationError, match="unknown variant"):
            Size.model_validate(payload)

    def test_extra_keys_rejected(self) -> None:
        """Unknown keys are forbidden."""
        with pytest.raises(ValidationError):
            Size.model_validate({"scale": "SM", "depth": 3})

    def test_json_schema(self) -> None:
        """Schema exposes the four camelCase properties."""
        schema = Size.model_json_schema()
        assert set(schema["properties"]) == {"scale", "orientation", "width", "height"}


class TestAssignment:
    """Fields are public and re-validated on assignment."""

    def test_assign_token(self) -> None:
        """Assigning a token string stores the member."""
        size = Size.new_thumbnail(64, Scale.SM)
        size.scale = "lg"
        assert size.scale is Scale.LG

    def test_assign_unknown_token(self) -> None:
        """Assigning an unknown token fails."""
        size = Size()
        with pytest.raises(ValidationError, match="unknown variant"):
            size.orientation = "diagonal"
