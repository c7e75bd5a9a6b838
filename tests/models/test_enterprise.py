"""Tests for enterprise records."""

from __future__ import annotations

import pytest

from vco_api.errors import FieldDecodeError, InvalidBooleanIntError, MissingFieldError
from vco_api.models.common import BastionState, EndpointPkiMode
from vco_api.models.enterprise import Enterprise
from vco_api.serialization import deserialize, serialize
from vco_api.types.date_time import NEVER, DateTime
from vco_api.types.tinyint import FALSE, TRUE


class TestEnterprise:
    def test_decode(self, enterprise_doc):
        ent = Enterprise.from_dict(enterprise_doc)
        assert ent.id == 3
        assert ent.created == DateTime.from_rfc3339("2022-05-04T08:00:00Z")
        assert ent.modified == NEVER
        assert ent.alerts_enabled == TRUE
        assert ent.operator_alerts_enabled == FALSE
        assert ent.endpoint_pki_mode is EndpointPkiMode.CERTIFICATE_DISABLED
        assert ent.bastion_state is BastionState.UNCONFIGURED
        assert ent.domain == "example.com"
        assert ent.prefix is None
        assert ent.contact_email == "ops@example.com"
        assert ent.lon == -122.0

    def test_missing_optional_text(self, enterprise_doc):
        del enterprise_doc["streetAddress2"]
        assert Enterprise.from_dict(enterprise_doc).street_address2 is None

    def test_unmodelled_keys_kept(self, enterprise_doc):
        ent = Enterprise.from_dict(enterprise_doc)
        assert ent.extra == {"enterpriseProxyId": None}

    def test_round_trip(self, enterprise_doc):
        ent = Enterprise.from_dict(enterprise_doc)
        out = deserialize(serialize(ent))
        assert out["created"] == "2022-05-04T08:00:00Z"
        assert out["modified"] == "0000-00-00 00:00:00"
        assert out["alertsEnabled"] == 1
        assert out["operatorAlertsEnabled"] == 0
        assert out["prefix"] is None
        assert "enterpriseProxyId" in out
        assert Enterprise.from_dict(out) == ent

    def test_bad_tinyint(self, enterprise_doc):
        enterprise_doc["operatorAlertsEnabled"] = 5
        with pytest.raises(FieldDecodeError) as exc_info:
            Enterprise.from_dict(enterprise_doc)
        assert exc_info.value.field == "operatorAlertsEnabled"
        assert isinstance(exc_info.value.cause, InvalidBooleanIntError)

    def test_bad_optional_text(self, enterprise_doc):
        enterprise_doc["city"] = 42
        with pytest.raises(FieldDecodeError) as exc_info:
            Enterprise.from_dict(enterprise_doc)
        assert exc_info.value.field == "city"

    def test_missing_required(self, enterprise_doc):
        del enterprise_doc["logicalId"]
        with pytest.raises(MissingFieldError, match="logicalId"):
            Enterprise.from_dict(enterprise_doc)
