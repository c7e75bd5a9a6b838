"""Exception types for VCO wire decoding, encoding and API responses."""

from __future__ import annotations

from typing import Any


class VcoBaseError(Exception):
    """Base exception for all vco-api errors."""


class WireDecodeError(VcoBaseError, ValueError):
    """A wire token could not be decoded into a typed value.

    Also a :class:`ValueError`, so callers that only care about bad data
    can catch that instead.
    """


class BadTimestampStringError(WireDecodeError):
    """String is not ``"null"``, not the never sentinel and not RFC3339."""

    def __init__(self, text: str, reason: str = "") -> None:
        self.text = text
        self.reason = reason
        msg = f"Bad date/time string format: {text!r}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


class BadEpochError(WireDecodeError):
    """Epoch seconds value is outside the representable instant range."""

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"Bad unix timestamp: {value!r}")


class InvalidAddressError(WireDecodeError):
    """String does not parse under an address family and is not a sentinel."""

    def __init__(self, family: str, text: str) -> None:
        self.family = family
        self.text = text
        super().__init__(f"Invalid value for {family} address: {text!r}")


class InvalidBooleanIntError(WireDecodeError):
    """Integer is neither 0 nor 1."""

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"Invalid value for TinyInt: {value!r}")


class WireTypeError(WireDecodeError):
    """The JSON kind of a wire token is not accepted by the target type."""

    def __init__(self, expected: str, token: Any) -> None:
        self.expected = expected
        self.token = token
        super().__init__(f"Expected {expected}, got {type(token).__name__} {token!r}")


class MissingFieldError(WireDecodeError):
    """A required key is missing from a JSON object."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Missing required field {field!r}")


class FieldDecodeError(WireDecodeError):
    """Decoding a named field of a document failed.

    Nested records prefix their own field name, so :attr:`field` ends up
    as a dotted path from the document root (e.g. ``"interval.start"``).
    The original error is kept in :attr:`cause` and chained.
    """

    def __init__(self, field: str, cause: WireDecodeError) -> None:
        self.field = field
        self.cause = cause
        super().__init__(f"Field {field!r}: {cause}")


class NoCanonicalFormError(VcoBaseError):
    """The value has no RFC3339 rendering (``Absent`` or ``Indefinite``)."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Cannot convert {value} to RFC3339")


class ConfigError(VcoBaseError, ValueError):
    """Invalid client configuration."""


class ApiError(VcoBaseError):
    """Error body returned by the API instead of a result."""

    def __init__(self, code: int, message: str, details: dict[str, Any] | None = None) -> None:
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(f"{message} ({code})")
