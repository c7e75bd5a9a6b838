"""Tests for gateway records."""

from __future__ import annotations

import ipaddress

import pytest

from vco_api.errors import (
    BadTimestampStringError,
    FieldDecodeError,
    InvalidAddressError,
    InvalidBooleanIntError,
    MissingFieldError,
    WireTypeError,
)
from vco_api.models.common import ActivationState, EndpointPkiMode, ServiceState
from vco_api.models.gateway import (
    GatewayCertificate,
    GatewayMetric,
    GatewayState,
    GetGatewayStatusMetrics,
    NetworkGateway,
)
from vco_api.serialization import deserialize, deserialize_list, serialize
from vco_api.types.date_time import ABSENT, NEVER, DateTime, Interval
from vco_api.types.network_address import IPV6, Address
from vco_api.types.tinyint import FALSE, TRUE


class TestGetGatewayStatusMetrics:
    def test_to_dict(self):
        body = GetGatewayStatusMetrics.build(
            gateway_id=1,
            start=DateTime.from_rfc3339("2023-01-02T03:04:05+05:30"),
            metrics=[GatewayMetric.TUNNEL_COUNT, GatewayMetric.FLOW_COUNT],
        )
        assert body.to_dict() == {
            "gatewayId": 1,
            "interval": {"start": "2023-01-01T21:34:05Z"},
            "metrics": ["flowCount", "tunnelCount"],
        }

    def test_round_trip(self):
        body = GetGatewayStatusMetrics(
            gateway_id=1,
            interval=Interval(start=DateTime.from_rfc3339("2023-01-02T03:04:05+05:30")),
            metrics=frozenset({GatewayMetric.TUNNEL_COUNT, GatewayMetric.FLOW_COUNT}),
        )
        restored = GetGatewayStatusMetrics.from_dict(deserialize(serialize(body)))
        assert restored == body
        assert restored.interval.end is None

    def test_duplicate_metrics_collapse(self):
        body = GetGatewayStatusMetrics.from_dict(
            {"gatewayId": 1, "interval": {"start": 0}, "metrics": ["cpuPct", "cpuPct"]}
        )
        assert body.metrics == frozenset({GatewayMetric.CPU_PCT})

    def test_bad_interval_reports_path(self):
        with pytest.raises(FieldDecodeError) as exc_info:
            GetGatewayStatusMetrics.from_dict(
                {"gatewayId": 1, "interval": {"start": "nope"}, "metrics": []}
            )
        assert exc_info.value.field == "interval.start"

    def test_unknown_metric(self):
        with pytest.raises(FieldDecodeError) as exc_info:
            GetGatewayStatusMetrics.from_dict(
                {"gatewayId": 1, "interval": {"start": 0}, "metrics": ["diskPct"]}
            )
        assert exc_info.value.field == "metrics.0"
        assert isinstance(exc_info.value.cause, WireTypeError)


class TestGatewayCertificate:
    def test_decode(self, certificate_doc):
        cert = GatewayCertificate.from_dict(certificate_doc)
        assert cert.created.to_rfc3339() == "2023-01-02T03:04:05Z"
        assert cert.valid_from == DateTime.from_unix_timestamp(1686489749)
        assert cert.valid_to == NEVER

    def test_encode_normalises_temporals(self, certificate_doc):
        out = GatewayCertificate.from_dict(certificate_doc).to_dict()
        assert out["created"] == "2023-01-02T03:04:05Z"
        assert out["validFrom"] == "2023-06-11T13:22:29Z"
        assert out["validTo"] == "0000-00-00 00:00:00"


class TestNetworkGateway:
    def test_decode(self, gateway_doc):
        gw = NetworkGateway.from_dict(gateway_doc)
        assert gw.id == 1
        assert gw.created.to_rfc3339() == "2023-01-01T21:34:05Z"
        assert gw.modified == ABSENT
        assert gw.activation_time == NEVER
        assert gw.last_contact == DateTime.from_unix_timestamp(1686489749)
        assert gw.ip_address.value == ipaddress.IPv4Address("203.0.113.10")
        assert gw.ip_v6_address == Address.undefined(IPV6)
        assert gw.private_ip_address is None
        assert gw.alerts_enabled == TRUE
        assert gw.is_load_balanced == FALSE
        assert gw.activation_state is ActivationState.ACTIVATED
        assert gw.gateway_state is GatewayState.CONNECTED
        assert gw.service_state is ServiceState.IN_SERVICE
        assert gw.endpoint_pki_mode is EndpointPkiMode.CERTIFICATE_OPTIONAL
        assert gw.utilization == 0.0
        assert gw.certificates is None

    def test_unmodelled_keys_kept(self, gateway_doc):
        gw = NetworkGateway.from_dict(gateway_doc)
        assert gw.extra["activationKey"] == "AAAA-BBBB-CCCC-DDDD"
        assert gw.extra["utilizationDetail"]["cpu"] == 0.3
        assert "id" not in gw.extra

    def test_round_trip(self, gateway_doc):
        gw = NetworkGateway.from_dict(gateway_doc)
        out = gw.to_dict()
        assert out["created"] == "2023-01-01T21:34:05Z"
        assert out["modified"] == "null"
        assert out["activationTime"] == "0000-00-00 00:00:00"
        assert out["lastContact"] == "2023-06-11T13:22:29Z"
        assert out["ipAddress"] == "203.0.113.10"
        assert out["ipV6Address"] == ""
        assert out["privateIpAddress"] is None
        assert out["activationKey"] == "AAAA-BBBB-CCCC-DDDD"
        assert "certificates" not in out
        assert NetworkGateway.from_dict(out) == gw

    def test_with_certificates(self, gateway_doc, certificate_doc):
        gateway_doc["certificates"] = [certificate_doc]
        gw = NetworkGateway.from_dict(gateway_doc)
        assert len(gw.certificates) == 1
        assert gw.to_dict()["certificates"][0]["validTo"] == "0000-00-00 00:00:00"

    def test_list_document(self, gateway_doc):
        raw = serialize([gateway_doc, gateway_doc])
        gateways = [NetworkGateway.from_dict(item) for item in deserialize_list(raw)]
        assert [gw.name for gw in gateways] == ["vcg-1", "vcg-1"]


class TestNetworkGatewayFailFast:
    def test_bad_address(self, gateway_doc):
        gateway_doc["ipAddress"] = "not-an-ip"
        with pytest.raises(FieldDecodeError) as exc_info:
            NetworkGateway.from_dict(gateway_doc)
        err = exc_info.value
        assert err.field == "ipAddress"
        assert isinstance(err.cause, InvalidAddressError)
        assert err.cause.family == "IPv4"
        assert "not-an-ip" in str(err)

    def test_bad_tinyint(self, gateway_doc):
        gateway_doc["isLoadBalanced"] = 2
        with pytest.raises(FieldDecodeError) as exc_info:
            NetworkGateway.from_dict(gateway_doc)
        assert exc_info.value.field == "isLoadBalanced"
        assert isinstance(exc_info.value.cause, InvalidBooleanIntError)

    def test_bad_timestamp(self, gateway_doc):
        gateway_doc["lastContact"] = "2023-06-11 13:22:29"
        with pytest.raises(FieldDecodeError) as exc_info:
            NetworkGateway.from_dict(gateway_doc)
        assert exc_info.value.field == "lastContact"
        assert isinstance(exc_info.value.cause, BadTimestampStringError)

    def test_bad_nested_certificate(self, gateway_doc, certificate_doc):
        certificate_doc["validFrom"] = True
        gateway_doc["certificates"] = [certificate_doc]
        with pytest.raises(FieldDecodeError) as exc_info:
            NetworkGateway.from_dict(gateway_doc)
        assert exc_info.value.field == "certificates.0.validFrom"

    def test_unknown_state(self, gateway_doc):
        gateway_doc["gatewayState"] = "EXPLODED"
        with pytest.raises(FieldDecodeError) as exc_info:
            NetworkGateway.from_dict(gateway_doc)
        assert exc_info.value.field == "gatewayState"

    def test_missing_required(self, gateway_doc):
        del gateway_doc["name"]
        with pytest.raises(MissingFieldError, match="name"):
            NetworkGateway.from_dict(gateway_doc)

    def test_catchable_as_value_error(self, gateway_doc):
        gateway_doc["ipAddress"] = "999.0.0.1"
        with pytest.raises(ValueError):
            NetworkGateway.from_dict(gateway_doc)
