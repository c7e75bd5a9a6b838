"""JSON serializer backed by orjson."""

from __future__ import annotations

import enum
import logging
from typing import Any

import orjson

from vco_api.types.date_time import DateTime
from vco_api.types.network_address import Address
from vco_api.types.tinyint import TinyInt

logger = logging.getLogger(__name__)

_WIRE_VALUE_TYPES = (DateTime, Address, TinyInt)


def json_default(obj: object) -> object:
    """Default handler for serializing VCO types to JSON.

    Use as the *default* argument to :func:`json.dumps` or
    :func:`orjson.dumps` so that records and wire values serialize
    automatically.

    Handles:

    * :class:`~vco_api.types.date_time.DateTime`,
      :class:`~vco_api.types.network_address.Address` and
      :class:`~vco_api.types.tinyint.TinyInt` via their ``encode()``.
    * Objects with a ``to_dict()`` method (records, ``Interval``).
    * ``set`` and ``frozenset`` -> sorted list.
    * ``Enum`` members -> their value.

    Example::

        import json
        from vco_api.serialization.json import json_default

        print(json.dumps({"created": DateTime.from_unix_timestamp(0)}, default=json_default))

    :param obj: The object to convert.
    :returns: A JSON-serializable representation.
    :raises TypeError: If *obj* is not a recognised type.
    """
    if isinstance(obj, _WIRE_VALUE_TYPES):
        return obj.encode()
    if hasattr(obj, "to_dict"):
        return obj.to_dict()
    if isinstance(obj, set | frozenset):
        return sorted(obj, key=str)
    if isinstance(obj, enum.Enum):
        return obj.value
    msg = f"Cannot serialize {type(obj).__name__}"
    logger.warning("serialize failed: %s", msg)
    raise TypeError(msg)


class JsonSerializer:
    """JSON serializer using orjson for high-performance encoding.

    Dataclasses are passed through to :func:`json_default` rather than
    being dumped field by field, so wire values always take their
    canonical encoded form.

    :param pretty: Indent output with 2 spaces.
    :param sort_keys: Sort dict keys alphabetically.
    """

    def __init__(
        self,
        *,
        pretty: bool = False,
        sort_keys: bool = False,
    ) -> None:
        self._options = orjson.OPT_NON_STR_KEYS | orjson.OPT_PASSTHROUGH_DATACLASS
        if pretty:
            self._options |= orjson.OPT_INDENT_2
        if sort_keys:
            self._options |= orjson.OPT_SORT_KEYS

    def encode(self, data: dict[str, Any] | list[Any]) -> bytes:
        """Encode a dict or list to JSON bytes."""
        return orjson.dumps(data, default=self._default, option=self._options)

    def decode(self, raw: bytes | str) -> dict[str, Any]:
        """Decode JSON bytes holding an object to a dict."""
        result = orjson.loads(raw)
        if not isinstance(result, dict):
            msg = f"Expected JSON object, got {type(result).__name__}"
            logger.warning("deserialize failed: %s", msg)
            raise TypeError(msg)
        return result

    def decode_list(self, raw: bytes | str) -> list[Any]:
        """Decode JSON bytes holding an array to a list."""
        result = orjson.loads(raw)
        if not isinstance(result, list):
            msg = f"Expected JSON array, got {type(result).__name__}"
            logger.warning("deserialize failed: %s", msg)
            raise TypeError(msg)
        return result

    @property
    def content_type(self) -> str:
        """MIME content type for JSON."""
        return "application/json"

    def _default(self, obj: Any) -> Any:
        """Handle VCO types that orjson cannot serialize natively."""
        return json_default(obj)
