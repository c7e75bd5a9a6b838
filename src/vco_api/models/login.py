"""Request bodies for login."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

REDACTED = "****"


@dataclass(frozen=True, slots=True)
class AuthObject:
    """Username/password body for cookie-based operator login.

    ``repr()`` never shows the password.
    """

    username: str
    password: str
    password2: str | None = None
    email: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the wire object, leaving unset optional keys out."""
        result: dict[str, Any] = {"username": self.username, "password": self.password}
        if self.password2 is not None:
            result["password2"] = self.password2
        if self.email is not None:
            result["email"] = self.email
        return result

    def __repr__(self) -> str:
        return f"AuthObject({self.username!r}, {REDACTED})"
