"""External format serialization (JSON, etc.) for VCO API documents.

This module provides a pluggable serialization API for converting request
and response documents, including the wire value types they embed, to and
from interchange formats.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

__all__ = ["Serializer", "deserialize", "deserialize_list", "get_serializer", "serialize"]


@runtime_checkable
class Serializer(Protocol):
    """Interface for format-specific serialization backends."""

    def encode(self, data: dict[str, Any] | list[Any]) -> bytes:
        """Encode a document to the target format."""
        ...

    def decode(self, raw: bytes | str) -> dict[str, Any]:
        """Decode an object document in the target format to a dict."""
        ...

    def decode_list(self, raw: bytes | str) -> list[Any]:
        """Decode an array document in the target format to a list."""
        ...

    @property
    def content_type(self) -> str:
        """MIME type for the output format (e.g. 'application/json')."""
        ...


def get_serializer(format: str = "json", **kwargs: Any) -> Serializer:
    """Get a serializer instance for the given format.

    :param format: Output format.  Currently supported: ``"json"``.
    :param kwargs: Format-specific options passed to the serializer constructor.
    :returns: A :class:`Serializer` instance.
    :raises ValueError: If the format is not supported.
    """
    if format == "json":
        from vco_api.serialization.json import JsonSerializer

        return JsonSerializer(**kwargs)
    msg = f"Unsupported serialization format: {format}"
    raise ValueError(msg)


def serialize(obj: Any, format: str = "json", **kwargs: Any) -> bytes:
    """Serialize a record, dict or list to the specified format.

    Accepts any object with a ``to_dict()`` method, or a plain dict/list.

    :param obj: Object to serialize.
    :param format: Output format (default ``"json"``).
    :param kwargs: Format-specific options.
    :returns: Serialized bytes.
    """
    serializer = get_serializer(format, **kwargs)
    data = obj.to_dict() if hasattr(obj, "to_dict") else obj
    return serializer.encode(data)


def deserialize(raw: bytes | str, format: str = "json") -> dict[str, Any]:
    """Deserialize an object document to a dict."""
    serializer = get_serializer(format)
    return serializer.decode(raw)


def deserialize_list(raw: bytes | str, format: str = "json") -> list[Any]:
    """Deserialize an array document, as returned by list endpoints."""
    serializer = get_serializer(format)
    return serializer.decode_list(raw)
