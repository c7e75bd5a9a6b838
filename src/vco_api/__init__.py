"""vco-api: typed wire values and records for the VCO REST API.

Typical usage::

    from vco_api import DateTime, TinyInt, ipv4_address

    created = DateTime.decode(1686489749)
    print(created.encode())  # "2023-06-11T13:22:29Z"
"""

__version__ = "0.1.0"

from vco_api.config import ClientConfig
from vco_api.errors import (
    ApiError,
    BadEpochError,
    BadTimestampStringError,
    ConfigError,
    FieldDecodeError,
    InvalidAddressError,
    InvalidBooleanIntError,
    MissingFieldError,
    NoCanonicalFormError,
    VcoBaseError,
    WireDecodeError,
    WireTypeError,
)
from vco_api.serialization import deserialize, deserialize_list, serialize
from vco_api.types.date_time import ABSENT, NEVER, DateTime, Interval
from vco_api.types.network_address import (
    IPV4,
    IPV6,
    MAC,
    Address,
    MacAddress,
    ipv4_address,
    ipv6_address,
    mac_address,
)
from vco_api.types.tinyint import TinyInt

__all__ = [
    "ABSENT",
    "IPV4",
    "IPV6",
    "MAC",
    "NEVER",
    "Address",
    "ApiError",
    "BadEpochError",
    "BadTimestampStringError",
    "ClientConfig",
    "ConfigError",
    "DateTime",
    "FieldDecodeError",
    "Interval",
    "InvalidAddressError",
    "InvalidBooleanIntError",
    "MacAddress",
    "MissingFieldError",
    "NoCanonicalFormError",
    "TinyInt",
    "VcoBaseError",
    "WireDecodeError",
    "WireTypeError",
    "__version__",
    "deserialize",
    "deserialize_list",
    "ipv4_address",
    "ipv6_address",
    "mac_address",
    "serialize",
]
