"""Enterprise (customer) records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from vco_api.models.common import BastionState, EndpointPkiMode
from vco_api.types.date_time import DateTime
from vco_api.types.fields import as_enum, as_float, as_int, as_str, decode_field, require_object
from vco_api.types.tinyint import TinyInt

# Optional free-text keys, written as null when unset.
_OPTIONAL_TEXT = {
    "domain": "domain",
    "prefix": "prefix",
    "description": "description",
    "contactName": "contact_name",
    "contactPhone": "contact_phone",
    "contactMobile": "contact_mobile",
    "contactEmail": "contact_email",
    "streetAddress": "street_address",
    "streetAddress2": "street_address2",
    "city": "city",
    "state": "state",
    "postalCode": "postal_code",
    "country": "country",
}

_ENTERPRISE_KEYS = frozenset(
    {
        "id",
        "created",
        "modified",
        "networkId",
        "gatewayPoolId",
        "alertsEnabled",
        "operatorAlertsEnabled",
        "endpointPkiMode",
        "name",
        "logicalId",
        "accountNumber",
        "lat",
        "lon",
        "timezone",
        "locale",
        "bastionState",
        *_OPTIONAL_TEXT,
    }
)


@dataclass(frozen=True)
class Enterprise:
    """An enterprise as returned by ``enterprise/getEnterprise``.

    Keys this record does not model are preserved in :attr:`extra`.
    """

    id: int
    created: DateTime
    modified: DateTime
    network_id: int
    gateway_pool_id: int
    alerts_enabled: TinyInt
    operator_alerts_enabled: TinyInt
    endpoint_pki_mode: EndpointPkiMode
    name: str
    logical_id: str
    account_number: str
    lat: float
    lon: float
    timezone: str
    locale: str
    bastion_state: BastionState
    domain: str | None = None
    prefix: str | None = None
    description: str | None = None
    contact_name: str | None = None
    contact_phone: str | None = None
    contact_mobile: str | None = None
    contact_email: str | None = None
    street_address: str | None = None
    street_address2: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None
    extra: dict[str, Any] = field(default_factory=dict, compare=False)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = dict(self.extra)
        result.update(
            {
                "id": self.id,
                "created": self.created.encode(),
                "modified": self.modified.encode(),
                "networkId": self.network_id,
                "gatewayPoolId": self.gateway_pool_id,
                "alertsEnabled": self.alerts_enabled.encode(),
                "operatorAlertsEnabled": self.operator_alerts_enabled.encode(),
                "endpointPkiMode": self.endpoint_pki_mode.value,
                "name": self.name,
                "logicalId": self.logical_id,
                "accountNumber": self.account_number,
                "lat": self.lat,
                "lon": self.lon,
                "timezone": self.timezone,
                "locale": self.locale,
                "bastionState": self.bastion_state.value,
            }
        )
        for key, attr in _OPTIONAL_TEXT.items():
            result[key] = getattr(self, attr)
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Enterprise:
        data = require_object(data)
        optional = {
            attr: decode_field(data, key, as_str, optional=True)
            for key, attr in _OPTIONAL_TEXT.items()
        }
        return cls(
            id=decode_field(data, "id", as_int),
            created=decode_field(data, "created", DateTime.decode),
            modified=decode_field(data, "modified", DateTime.decode),
            network_id=decode_field(data, "networkId", as_int),
            gateway_pool_id=decode_field(data, "gatewayPoolId", as_int),
            alerts_enabled=decode_field(data, "alertsEnabled", TinyInt.decode),
            operator_alerts_enabled=decode_field(data, "operatorAlertsEnabled", TinyInt.decode),
            endpoint_pki_mode=decode_field(data, "endpointPkiMode", as_enum(EndpointPkiMode)),
            name=decode_field(data, "name", as_str),
            logical_id=decode_field(data, "logicalId", as_str),
            account_number=decode_field(data, "accountNumber", as_str),
            lat=decode_field(data, "lat", as_float),
            lon=decode_field(data, "lon", as_float),
            timezone=decode_field(data, "timezone", as_str),
            locale=decode_field(data, "locale", as_str),
            bastion_state=decode_field(data, "bastionState", as_enum(BastionState)),
            extra={k: v for k, v in data.items() if k not in _ENTERPRISE_KEYS},
            **optional,
        )
