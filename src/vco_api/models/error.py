"""Recognising API error bodies.

A failed call still returns a JSON document.  It is an error when the top
level is an object whose ``"error"`` member is itself an object with an
integer ``code`` and a string ``message``; anything else is a result.
"""

from __future__ import annotations

from typing import Any

from vco_api.errors import ApiError


def _error_member(document: Any) -> dict[str, Any] | None:
    if not isinstance(document, dict):
        return None
    error = document.get("error")
    if not isinstance(error, dict):
        return None
    code = error.get("code")
    if isinstance(code, bool) or not isinstance(code, int):
        return None
    if not isinstance(error.get("message"), str):
        return None
    return error


def identify_error_body(document: Any) -> str | None:
    """Classify a decoded response body.

    :param document: The decoded JSON response.
    :returns: ``"{message} ({code})"`` if *document* is an API error body,
        otherwise ``None``.
    """
    error = _error_member(document)
    if error is None:
        return None
    return f"{error['message']} ({error['code']})"


def api_error_from_body(document: Any) -> ApiError | None:
    """Build an :class:`~vco_api.errors.ApiError` from an error body.

    Keys other than ``code`` and ``message`` (e.g. validation ``data``)
    are kept in :attr:`ApiError.details`.
    """
    error = _error_member(document)
    if error is None:
        return None
    details = {k: v for k, v in error.items() if k not in ("code", "message")}
    return ApiError(error["code"], error["message"], details)


def raise_for_error_body(document: Any) -> None:
    """Raise :class:`~vco_api.errors.ApiError` if *document* is an error body."""
    exc = api_error_from_body(document)
    if exc is not None:
        raise exc
