"""Network address values with the API's ``""`` and ``"UNKNOWN"`` sentinels.

:class:`Address` is one wrapper shared by every address family.  A family
is any object with a ``name`` and ``parse``/``format`` primitives (see
:class:`AddressFamily`); :data:`IPV4`, :data:`IPV6` and :data:`MAC` are
provided.  The wrapper never looks inside an address itself.
"""

from __future__ import annotations

import enum
import ipaddress
import logging
import re
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, Protocol, TypeVar, runtime_checkable

from vco_api.errors import InvalidAddressError, WireTypeError

logger = logging.getLogger(__name__)

UNDEFINED_TOKEN = ""
"""Wire string for an address that was never set."""

UNKNOWN_TOKEN = "UNKNOWN"
"""Wire string for an address the API could not determine."""

UNSET_DISPLAY = "unset"
"""Human-readable form of an undefined address.  Not a wire token."""

A = TypeVar("A")


@runtime_checkable
class AddressFamily(Protocol[A]):
    """Parse/format primitives for one kind of address."""

    name: str

    def parse(self, text: str) -> A:
        """Parse *text*, raising :class:`ValueError` if it is not an address."""
        ...

    def format(self, addr: A) -> str:
        """Render *addr* in its canonical wire form."""
        ...


@dataclass(frozen=True, slots=True)
class IPv4Family:
    """Dotted-quad IPv4 addresses."""

    name: ClassVar[str] = "IPv4"

    def parse(self, text: str) -> ipaddress.IPv4Address:
        return ipaddress.IPv4Address(text)

    def format(self, addr: ipaddress.IPv4Address) -> str:
        return str(addr)


@dataclass(frozen=True, slots=True)
class IPv6Family:
    """IPv6 addresses, formatted in RFC 5952 compressed form."""

    name: ClassVar[str] = "IPv6"

    def parse(self, text: str) -> ipaddress.IPv6Address:
        # ipaddress accepts "fe80::1%eth0"; a zone index is not an address.
        if "%" in text:
            msg = f"Scoped IPv6 address not allowed: {text!r}"
            raise ValueError(msg)
        return ipaddress.IPv6Address(text)

    def format(self, addr: ipaddress.IPv6Address) -> str:
        # .compressed renders IPv4-mapped addresses differently across
        # Python versions; always use the RFC 5952 dotted-quad tail.
        if addr.ipv4_mapped is not None:
            return f"::ffff:{addr.ipv4_mapped}"
        return addr.compressed


_MAC_RE = re.compile(r"[0-9A-Fa-f]{2}(?P<sep>[:-])[0-9A-Fa-f]{2}(?:(?P=sep)[0-9A-Fa-f]{2}){4}")


@dataclass(frozen=True, slots=True)
class MacAddress:
    """A 6-octet hardware address."""

    octets: bytes

    def __post_init__(self) -> None:
        if len(self.octets) != 6:
            msg = f"MAC address must be 6 octets, got {len(self.octets)}"
            raise ValueError(msg)

    @classmethod
    def parse(cls, text: str) -> MacAddress:
        """Parse ``"aa:bb:cc:dd:ee:ff"`` or ``"AA-BB-CC-DD-EE-FF"``.

        Hex digits may be either case; the separator must be the same
        throughout.
        """
        m = _MAC_RE.fullmatch(text)
        if not m:
            msg = f"Cannot parse MAC address: {text!r}"
            raise ValueError(msg)
        return cls(bytes.fromhex(text.replace(m.group("sep"), "")))

    def __str__(self) -> str:
        return ":".join(f"{b:02X}" for b in self.octets)


@dataclass(frozen=True, slots=True)
class MacFamily:
    """Hardware addresses, formatted as upper-case colon-hex."""

    name: ClassVar[str] = "MAC"

    def parse(self, text: str) -> MacAddress:
        return MacAddress.parse(text)

    def format(self, addr: MacAddress) -> str:
        return str(addr)


IPV4 = IPv4Family()
IPV6 = IPv6Family()
MAC = MacFamily()


class AddressKind(enum.Enum):
    """Which of the three address variants an :class:`Address` holds."""

    UNDEFINED = "undefined"
    UNKNOWN = "unknown"
    CONCRETE = "concrete"


@dataclass(frozen=True)
class Address(Generic[A]):
    """An address of one family, or one of the two sentinels.

    Equality and hashing use the family, the variant and the parsed
    address, never the original text, so ``"aa:bb:cc:dd:ee:ff"`` and
    ``"AA-BB-CC-DD-EE-FF"`` decode to equal values.

    ``"UNKNOWN"`` decodes for every family.  It has only been seen in
    MAC address fields.
    """

    family: AddressFamily[A]
    kind: AddressKind
    value: A | None = None

    def __post_init__(self) -> None:
        if (self.kind is AddressKind.CONCRETE) != (self.value is not None):
            msg = f"{self.kind.name} address with value {self.value!r}"
            raise ValueError(msg)

    @classmethod
    def undefined(cls, family: AddressFamily[A]) -> Address[A]:
        return cls(family, AddressKind.UNDEFINED)

    @classmethod
    def unknown(cls, family: AddressFamily[A]) -> Address[A]:
        return cls(family, AddressKind.UNKNOWN)

    @classmethod
    def of(cls, family: AddressFamily[A], addr: A) -> Address[A]:
        return cls(family, AddressKind.CONCRETE, addr)

    @classmethod
    def decode(cls, family: AddressFamily[A], token: Any) -> Address[A]:
        """Decode an address wire string under *family*.

        :param family: Address family used for non-sentinel strings.
        :param token: ``""``, ``"UNKNOWN"`` or an address literal.
        :returns: The decoded address value.
        :raises InvalidAddressError: If *token* does not parse under *family*.
        :raises WireTypeError: If *token* is not a string.
        """
        if not isinstance(token, str):
            raise WireTypeError(f"an {family.name} address string", token)
        if token == UNDEFINED_TOKEN:
            return cls.undefined(family)
        if token == UNKNOWN_TOKEN:
            return cls.unknown(family)
        try:
            addr = family.parse(token)
        except ValueError:
            logger.debug("rejected %s address %r", family.name, token)
            raise InvalidAddressError(family.name, token) from None
        return cls.of(family, addr)

    @property
    def is_undefined(self) -> bool:
        return self.kind is AddressKind.UNDEFINED

    @property
    def is_unknown(self) -> bool:
        return self.kind is AddressKind.UNKNOWN

    def encode(self) -> str:
        """Encode to the canonical wire string.  Never fails."""
        if self.kind is AddressKind.UNDEFINED:
            return UNDEFINED_TOKEN
        if self.kind is AddressKind.UNKNOWN:
            return UNKNOWN_TOKEN
        return self.family.format(self.value)  # type: ignore[arg-type]

    def __str__(self) -> str:
        """Human-readable form; an undefined address shows as ``"unset"``.

        Use :meth:`encode` for anything sent back to the API.
        """
        if self.kind is AddressKind.UNDEFINED:
            return UNSET_DISPLAY
        return self.encode()


def ipv4_address(token: Any) -> Address[ipaddress.IPv4Address]:
    """Decode an IPv4 address field."""
    return Address.decode(IPV4, token)


def ipv6_address(token: Any) -> Address[ipaddress.IPv6Address]:
    """Decode an IPv6 address field."""
    return Address.decode(IPV6, token)


def mac_address(token: Any) -> Address[MacAddress]:
    """Decode a MAC address field."""
    return Address.decode(MAC, token)
