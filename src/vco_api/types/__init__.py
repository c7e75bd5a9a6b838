"""Wire value types for the VCO API."""

from vco_api.types.date_time import ABSENT, NEVER, DateTime, DateTimeKind, Interval
from vco_api.types.network_address import (
    IPV4,
    IPV6,
    MAC,
    Address,
    AddressFamily,
    AddressKind,
    MacAddress,
)
from vco_api.types.tinyint import TinyInt

__all__ = [
    "ABSENT",
    "IPV4",
    "IPV6",
    "MAC",
    "NEVER",
    "Address",
    "AddressFamily",
    "AddressKind",
    "DateTime",
    "DateTimeKind",
    "Interval",
    "MacAddress",
    "TinyInt",
]
