"""Helpers for decoding fields out of JSON objects.

Record ``from_dict`` methods pull every field through :func:`decode_field`
so that the first failure aborts the whole document and names the field
it came from.
"""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Any, TypeVar

from vco_api.errors import FieldDecodeError, MissingFieldError, WireDecodeError, WireTypeError

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")
E = TypeVar("E", bound=enum.Enum)


def require_object(data: Any) -> dict[str, Any]:
    """Return *data* if it is a JSON object, else raise :class:`WireTypeError`."""
    if not isinstance(data, dict):
        raise WireTypeError("a JSON object", data)
    return data


def decode_field(
    data: dict[str, Any],
    key: str,
    decoder: Callable[[Any], T],
    *,
    optional: bool = False,
) -> T | None:
    """Decode ``data[key]`` with *decoder*, attributing failures to *key*.

    :param data: The JSON object holding the field.
    :param key: Wire name of the field.
    :param decoder: Callable turning the raw token into a typed value.
    :param optional: If true, a missing key or a JSON ``null`` yields
        ``None`` instead of being passed to *decoder*.
    :returns: The decoded value, or ``None`` for an absent optional field.
    :raises MissingFieldError: If a required key is missing.
    :raises FieldDecodeError: If *decoder* rejects the token.
    """
    if key not in data:
        if optional:
            return None
        raise MissingFieldError(key)
    token = data[key]
    if optional and token is None:
        return None
    try:
        return decoder(token)
    except FieldDecodeError as exc:
        raise FieldDecodeError(f"{key}.{exc.field}", exc.cause) from exc.cause
    except WireDecodeError as exc:
        raise FieldDecodeError(key, exc) from exc


def as_str(token: Any) -> str:
    if not isinstance(token, str):
        raise WireTypeError("a string", token)
    return token


def as_int(token: Any) -> int:
    if isinstance(token, bool) or not isinstance(token, int):
        raise WireTypeError("an integer", token)
    return token


def as_float(token: Any) -> float:
    """Accept JSON integers and floats alike; the API mixes them freely."""
    if isinstance(token, bool) or not isinstance(token, int | float):
        raise WireTypeError("a number", token)
    return float(token)


def as_enum(enum_cls: type[E]) -> Callable[[Any], E]:
    """Build a decoder mapping a wire string onto a member of *enum_cls*."""

    def _decode(token: Any) -> E:
        try:
            return enum_cls(token)
        except ValueError:
            allowed = ", ".join(repr(m.value) for m in enum_cls)
            raise WireTypeError(f"one of {allowed}", token) from None

    return _decode


def as_list(item_decoder: Callable[[Any], T]) -> Callable[[Any], list[T]]:
    """Build a decoder for a JSON array, attributing failures to the index."""

    def _decode(token: Any) -> list[T]:
        if not isinstance(token, list):
            raise WireTypeError("a JSON array", token)
        items = {str(i): item for i, item in enumerate(token)}
        return [decode_field(items, key, item_decoder) for key in items]  # type: ignore[misc]

    return _decode
