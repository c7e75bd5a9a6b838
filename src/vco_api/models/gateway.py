"""Gateway (VCG) records."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from vco_api.models.common import ActivationState, BastionState, EndpointPkiMode, ServiceState
from vco_api.types.date_time import DateTime, Interval
from vco_api.types.fields import (
    as_enum,
    as_float,
    as_int,
    as_list,
    as_str,
    decode_field,
    require_object,
)
from vco_api.types.network_address import ipv4_address, ipv6_address
from vco_api.types.tinyint import TinyInt

if TYPE_CHECKING:
    import ipaddress
    from collections.abc import Iterable

    from vco_api.types.network_address import Address


class GatewayMetric(enum.StrEnum):
    """Metrics available from ``metrics/getGatewayStatusMetrics``."""

    TUNNEL_COUNT = "tunnelCount"
    MEMORY_PCT = "memoryPct"
    FLOW_COUNT = "flowCount"
    CPU_PCT = "cpuPct"
    HANDOFF_QUEUE_DROPS = "handoffQueueDrops"
    CONNECTED_EDGES = "connectedEdges"
    TUNNEL_COUNT_V6 = "tunnelCountV6"


class GatewayState(enum.StrEnum):
    NEVER_ACTIVATED = "NEVER_ACTIVATED"
    DEGRADED = "DEGRADED"
    QUIESCED = "QUIESCED"
    DISABLED = "DISABLED"
    OUT_OF_SERVICE = "OUT_OF_SERVICE"
    CONNECTED = "CONNECTED"
    OFFLINE = "OFFLINE"


@dataclass(frozen=True, slots=True)
class GetGatewayStatusMetrics:
    """Request body for ``metrics/getGatewayStatusMetrics``."""

    gateway_id: int
    interval: Interval
    metrics: frozenset[GatewayMetric] = frozenset()

    @classmethod
    def build(
        cls,
        gateway_id: int,
        start: DateTime,
        end: DateTime | None = None,
        metrics: Iterable[GatewayMetric] = (),
    ) -> GetGatewayStatusMetrics:
        """Build a request for *gateway_id* covering ``start`` to ``end``."""
        return cls(gateway_id, Interval(start, end), frozenset(metrics))

    def to_dict(self) -> dict[str, Any]:
        """Convert to the wire object; metrics are written in sorted order."""
        return {
            "gatewayId": self.gateway_id,
            "interval": self.interval.to_dict(),
            "metrics": sorted(m.value for m in self.metrics),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GetGatewayStatusMetrics:
        data = require_object(data)
        return cls(
            gateway_id=decode_field(data, "gatewayId", as_int),
            interval=decode_field(data, "interval", Interval.from_dict),
            metrics=frozenset(decode_field(data, "metrics", as_list(as_enum(GatewayMetric)))),
        )


@dataclass(frozen=True, slots=True)
class GatewayCertificate:
    id: int
    gateway_id: int
    csr_id: int
    network_id: int
    certificate: str
    serial_number: str
    subject_key_id: str
    finger_print: str
    finger_print_256: str
    created: DateTime
    valid_from: DateTime
    valid_to: DateTime

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "created": self.created.encode(),
            "csrId": self.csr_id,
            "gatewayId": self.gateway_id,
            "networkId": self.network_id,
            "certificate": self.certificate,
            "serialNumber": self.serial_number,
            "subjectKeyId": self.subject_key_id,
            "fingerPrint": self.finger_print,
            "fingerPrint256": self.finger_print_256,
            "validFrom": self.valid_from.encode(),
            "validTo": self.valid_to.encode(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GatewayCertificate:
        data = require_object(data)
        return cls(
            id=decode_field(data, "id", as_int),
            gateway_id=decode_field(data, "gatewayId", as_int),
            csr_id=decode_field(data, "csrId", as_int),
            network_id=decode_field(data, "networkId", as_int),
            certificate=decode_field(data, "certificate", as_str),
            serial_number=decode_field(data, "serialNumber", as_str),
            subject_key_id=decode_field(data, "subjectKeyId", as_str),
            finger_print=decode_field(data, "fingerPrint", as_str),
            finger_print_256=decode_field(data, "fingerPrint256", as_str),
            created=decode_field(data, "created", DateTime.decode),
            valid_from=decode_field(data, "validFrom", DateTime.decode),
            valid_to=decode_field(data, "validTo", DateTime.decode),
        )


# Wire keys decoded into NetworkGateway attributes; everything else is kept
# verbatim in NetworkGateway.extra.
_NETWORK_GATEWAY_KEYS = frozenset(
    {
        "id",
        "name",
        "description",
        "dnsName",
        "logicalId",
        "siteId",
        "networkId",
        "softwareVersion",
        "buildNumber",
        "deviceId",
        "ipAddress",
        "ipV6Address",
        "privateIpAddress",
        "created",
        "modified",
        "lastContact",
        "serviceUpSince",
        "systemUpSince",
        "activationTime",
        "activationState",
        "gatewayState",
        "bastionState",
        "serviceState",
        "endpointPkiMode",
        "isLoadBalanced",
        "alertsEnabled",
        "utilization",
        "connectedEdges",
        "certificates",
    }
)


@dataclass(frozen=True)
class NetworkGateway:
    """One item of the array returned by ``network/getNetworkGateways``.

    Keys this record does not model are preserved in :attr:`extra` and
    written back by :meth:`to_dict`.
    """

    id: int
    name: str
    logical_id: str
    site_id: int
    software_version: str
    build_number: str
    created: DateTime
    modified: DateTime
    last_contact: DateTime
    service_up_since: DateTime
    system_up_since: DateTime
    activation_time: DateTime
    activation_state: ActivationState
    gateway_state: GatewayState
    bastion_state: BastionState
    service_state: ServiceState
    endpoint_pki_mode: EndpointPkiMode
    is_load_balanced: TinyInt
    utilization: float
    connected_edges: int
    description: str | None = None
    dns_name: str | None = None
    network_id: int | None = None
    device_id: str | None = None
    ip_address: Address[ipaddress.IPv4Address] | None = None
    ip_v6_address: Address[ipaddress.IPv6Address] | None = None
    private_ip_address: Address[ipaddress.IPv4Address] | None = None
    alerts_enabled: TinyInt | None = None
    certificates: tuple[GatewayCertificate, ...] | None = None
    extra: dict[str, Any] = field(default_factory=dict, compare=False)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the wire object.

        Unset optional values are written as ``null``, except
        ``certificates``, which is only present when requested with
        ``with: ["certificates"]`` and is left out otherwise.
        """
        result: dict[str, Any] = dict(self.extra)
        result.update(
            {
                "id": self.id,
                "name": self.name,
                "description": self.description,
                "dnsName": self.dns_name,
                "logicalId": self.logical_id,
                "siteId": self.site_id,
                "networkId": self.network_id,
                "softwareVersion": self.software_version,
                "buildNumber": self.build_number,
                "deviceId": self.device_id,
                "ipAddress": _encode_optional(self.ip_address),
                "ipV6Address": _encode_optional(self.ip_v6_address),
                "privateIpAddress": _encode_optional(self.private_ip_address),
                "created": self.created.encode(),
                "modified": self.modified.encode(),
                "lastContact": self.last_contact.encode(),
                "serviceUpSince": self.service_up_since.encode(),
                "systemUpSince": self.system_up_since.encode(),
                "activationTime": self.activation_time.encode(),
                "activationState": self.activation_state.value,
                "gatewayState": self.gateway_state.value,
                "bastionState": self.bastion_state.value,
                "serviceState": self.service_state.value,
                "endpointPkiMode": self.endpoint_pki_mode.value,
                "isLoadBalanced": self.is_load_balanced.encode(),
                "alertsEnabled": _encode_optional(self.alerts_enabled),
                "utilization": self.utilization,
                "connectedEdges": self.connected_edges,
            }
        )
        if self.certificates is not None:
            result["certificates"] = [c.to_dict() for c in self.certificates]
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> NetworkGateway:
        """Decode one gateway object.  The first bad field aborts decoding."""
        data = require_object(data)
        certificates = decode_field(
            data, "certificates", as_list(GatewayCertificate.from_dict), optional=True
        )
        return cls(
            id=decode_field(data, "id", as_int),
            name=decode_field(data, "name", as_str),
            logical_id=decode_field(data, "logicalId", as_str),
            site_id=decode_field(data, "siteId", as_int),
            software_version=decode_field(data, "softwareVersion", as_str),
            build_number=decode_field(data, "buildNumber", as_str),
            created=decode_field(data, "created", DateTime.decode),
            modified=decode_field(data, "modified", DateTime.decode),
            last_contact=decode_field(data, "lastContact", DateTime.decode),
            service_up_since=decode_field(data, "serviceUpSince", DateTime.decode),
            system_up_since=decode_field(data, "systemUpSince", DateTime.decode),
            activation_time=decode_field(data, "activationTime", DateTime.decode),
            activation_state=decode_field(data, "activationState", as_enum(ActivationState)),
            gateway_state=decode_field(data, "gatewayState", as_enum(GatewayState)),
            bastion_state=decode_field(data, "bastionState", as_enum(BastionState)),
            service_state=decode_field(data, "serviceState", as_enum(ServiceState)),
            endpoint_pki_mode=decode_field(data, "endpointPkiMode", as_enum(EndpointPkiMode)),
            is_load_balanced=decode_field(data, "isLoadBalanced", TinyInt.decode),
            utilization=decode_field(data, "utilization", as_float),
            connected_edges=decode_field(data, "connectedEdges", as_int),
            description=decode_field(data, "description", as_str, optional=True),
            dns_name=decode_field(data, "dnsName", as_str, optional=True),
            network_id=decode_field(data, "networkId", as_int, optional=True),
            device_id=decode_field(data, "deviceId", as_str, optional=True),
            ip_address=decode_field(data, "ipAddress", ipv4_address, optional=True),
            ip_v6_address=decode_field(data, "ipV6Address", ipv6_address, optional=True),
            private_ip_address=decode_field(data, "privateIpAddress", ipv4_address, optional=True),
            alerts_enabled=decode_field(data, "alertsEnabled", TinyInt.decode, optional=True),
            certificates=tuple(certificates) if certificates is not None else None,
            extra={k: v for k, v in data.items() if k not in _NETWORK_GATEWAY_KEYS},
        )


def _encode_optional(value: Any) -> Any:
    return None if value is None else value.encode()
