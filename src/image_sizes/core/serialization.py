"""(De)serialization factory design pattern.

Current support for JSON and YAML.
"""

from __future__ import annotations

import json
import logging
from abc import ABC
from abc import abstractmethod
from inspect import Parameter
from inspect import Signature
from typing import Callable

import yaml

from image_sizes.schemas.size import Size

logger = logging.getLogger(__name__)


class Serializer(ABC):
    """Serializer base class.

    Here we define the interface for any serializer implementation.

    Args:
        stream_format: Format of the stream for serialization.
    """

    def __init__(self, stream_format: str) -> None:
        """Initialize serializer.

        Args:
            stream_format: Stream format. Must be in {"JSON", "YAML"}.
        """
        self.format = stream_format
        self.serialize_func = get_serializer(stream_format)
        self.deserialize_func = get_deserializer(stream_format)

    @abstractmethod
    def serialize(self, payload: Size) -> str:
        """Abstract method for serialize."""

    @abstractmethod
    def deserialize(self, stream: str) -> Size:
        """Abstract method for deserialize."""

    @staticmethod
    def validate_payload(payload: dict, signature: Signature) -> dict:
        """Validate if required keys exist in the payload for a function signature."""
        if not isinstance(payload, dict):
            msg = f"Expected a mapping payload, got {type(payload).__name__}"
            raise TypeError(msg)

        observed = set(payload)
        expected = set(signature.parameters)

        if not expected.issubset(observed):
            raise KeyError(f"Key mismatch: {observed}, expected {expected}")

        if len(observed) != len(expected):
            logger.debug("Ignoring extra key: %s", observed - expected)
            payload = {key: payload[key] for key in expected}

        return payload


SIZE_SIGNATURE = Signature(
    [Parameter(name, Parameter.KEYWORD_ONLY) for name in ("scale", "orientation", "width", "height")]
)


class SizeSerializer(Serializer):
    """Serializer implementation for image sizes.

    Example:
        >>> from image_sizes import Scale, Size
        >>> from image_sizes.core import SizeSerializer
        >>> serializer = SizeSerializer("JSON")
        >>> serializer.serialize(Size.new_thumbnail(64, Scale.SM))
        '{"scale": "SM", "orientation": "THUMBNAIL", "width": 64, "height": 64}'
    """

    def serialize(self, payload: Size) -> str:
        """Serialize size to a JSON or YAML string."""
        return self.serialize_func(payload.model_dump(mode="json"))

    def deserialize(self, stream: str) -> Size:
        """Deserialize a JSON or YAML string to a size."""
        payload = self.deserialize_func(stream)
        payload = self.validate_payload(payload, SIZE_SIGNATURE)

        return Size.model_validate(payload)


def get_serializer(stream_format: str) -> Callable:
    """Get serializer based on format."""
    stream_format = stream_format.upper()
    if stream_format == "JSON":
        return _serialize_to_json
    elif stream_format == "YAML":
        return _serialize_to_yaml
    else:
        raise ValueError(stream_format)


def get_deserializer(stream_format: str) -> Callable:
    """Get deserializer based on format."""
    stream_format = stream_format.upper()
    if stream_format == "JSON":
        return _deserialize_json
    elif stream_format == "YAML":
        return _deserialize_yaml
    else:
        raise ValueError(stream_format)


def _serialize_to_json(payload: dict) -> str:
    """Convert dictionary to JSON string."""
    return json.dumps(payload)


def _serialize_to_yaml(payload: dict) -> str:
    """Convert dictionary to YAML string."""
    return yaml.dump(payload, sort_keys=False)


def _deserialize_json(stream: str) -> dict:
    """Convert JSON string to dictionary."""
    return json.loads(stream)


def _deserialize_yaml(stream: str) -> dict:
    """Convert YAML string to dictionary."""
    return yaml.safe_load(stream)
