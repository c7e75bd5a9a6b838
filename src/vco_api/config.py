"""Client configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from vco_api.errors import ConfigError
from vco_api.models.login import REDACTED

logger = logging.getLogger(__name__)

API_BASE = "portal/rest"
"""URL path from the host to the REST API."""

USER_AGENT = "vco-py"


def split_fqdn(fqdn: str) -> tuple[str, str]:
    """Split an orchestrator FQDN into lower-cased host name and domain.

    :param fqdn: Name such as ``"vco123.example.net"``.
    :returns: ``(hostname, domain)``.
    :raises ConfigError: If there is no dot, either part is empty, or the
        host name does not start with ``"vco"``.
    """
    hostname, sep, domain = fqdn.strip().partition(".")
    if not sep or not hostname or not domain:
        msg = f"Bad FQDN format, expected at least one dot in name, not {fqdn!r}"
        raise ConfigError(msg)
    hostname, domain = hostname.lower(), domain.lower()
    if not hostname.startswith("vco"):
        msg = f'VCO name must start with "vco"; got {fqdn!r}'
        raise ConfigError(msg)
    return hostname, domain


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings for one orchestrator."""

    fqdn: str
    token: str | None = None
    user_agent: str = USER_AGENT
    api_base: str = API_BASE
    timeout: float = 30.0  # seconds
    hostname: str = field(init=False)
    domain: str = field(init=False)

    def __post_init__(self) -> None:
        hostname, domain = split_fqdn(self.fqdn)
        object.__setattr__(self, "hostname", hostname)
        object.__setattr__(self, "domain", domain)
        if self.timeout <= 0:
            msg = f"Timeout must be positive, got {self.timeout}"
            raise ConfigError(msg)
        logger.debug("configured %s.%s auth=%s", hostname, domain, "token" if self.token else "none")

    @property
    def host(self) -> str:
        """Normalised FQDN."""
        return f"{self.hostname}.{self.domain}"

    def rest_api_url(self, path: str) -> str:
        """Build the URL for an API method such as ``"network/getNetworkGateways"``."""
        return f"https://{self.host}/{self.api_base.strip('/')}/{path.lstrip('/')}"

    def headers(self) -> dict[str, str]:
        """Default headers for every request."""
        headers = {
            "Host": self.host,
            "Content-Type": "application/json",
            "User-Agent": self.user_agent,
        }
        if self.token is not None:
            headers["Authorization"] = f"Token {self.token}"
        return headers

    def __repr__(self) -> str:
        token = REDACTED if self.token is not None else None
        return (
            f"ClientConfig(fqdn={self.host!r}, token={token!r}, "
            f"user_agent={self.user_agent!r}, api_base={self.api_base!r}, timeout={self.timeout})"
        )
