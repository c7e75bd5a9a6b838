"""Booleans sent as the integers 0 and 1."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from vco_api.errors import InvalidBooleanIntError, WireTypeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TinyInt:
    """A boolean whose wire form is exactly ``0`` or ``1``.

    Decoding is strict: any other integer is an error rather than being
    read as truthy, so corrupted upstream data is not silently accepted.
    """

    value: bool

    def __post_init__(self) -> None:
        if type(self.value) is not bool:
            msg = f"TinyInt value must be a bool, got {self.value!r}"
            raise ValueError(msg)

    @classmethod
    def from_bool(cls, value: bool) -> TinyInt:
        return TRUE if value else FALSE

    @classmethod
    def decode(cls, token: Any) -> TinyInt:
        """Decode a wire integer.

        :raises InvalidBooleanIntError: If *token* is an integer other than 0 or 1.
        :raises WireTypeError: If *token* is not an integer (JSON ``true`` and
            ``false`` included).
        """
        if isinstance(token, bool) or not isinstance(token, int):
            raise WireTypeError("the integer 0 or 1", token)
        if token == 0:
            return FALSE
        if token == 1:
            return TRUE
        logger.debug("rejected TinyInt value %r", token)
        raise InvalidBooleanIntError(token)

    def encode(self) -> int:
        return 1 if self.value else 0

    def __bool__(self) -> bool:
        return self.value

    def __str__(self) -> str:
        return "true" if self.value else "false"


TRUE = TinyInt(True)
FALSE = TinyInt(False)
