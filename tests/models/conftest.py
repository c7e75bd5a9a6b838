"""Sample API documents for record tests."""

from __future__ import annotations

import copy

import pytest

_CERTIFICATE = {
    "id": 7,
    "created": "2023-01-02T03:04:05.000Z",
    "csrId": 3,
    "gatewayId": 1,
    "networkId": 1,
    "certificate": "-----BEGIN CERTIFICATE-----",
    "serialNumber": "0A1B",
    "subjectKeyId": "ab:cd",
    "fingerPrint": "11:22",
    "fingerPrint256": "33:44",
    "validFrom": 1686489749,
    "validTo": "0000-00-00 00:00:00",
}

_GATEWAY = {
    "id": 1,
    "name": "vcg-1",
    "description": None,
    "dnsName": "vcg-1.example.net",
    "created": "2023-01-02T03:04:05.000+05:30",
    "logicalId": "gateway01234567-89ab-cdef-0123-456789abcdef",
    "networkId": 1,
    "enterpriseProxyId": None,
    "siteId": 12,
    "softwareVersion": "5.2.0",
    "buildNumber": "R520-20230101",
    "deviceId": None,
    "ipAddress": "203.0.113.10",
    "ipV6Address": "",
    "lastContact": 1686489749,
    "modified": "null",
    "serviceUpSince": "2023-06-01T00:00:00Z",
    "systemUpSince": "2023-06-01T00:00:00Z",
    "activationKey": "AAAA-BBBB-CCCC-DDDD",
    "activationState": "ACTIVATED",
    "activationTime": "0000-00-00 00:00:00",
    "gatewayState": "CONNECTED",
    "bastionState": "UNCONFIGURED",
    "serviceState": "IN_SERVICE",
    "utilization": 0,
    "utilizationDetail": {"load": 0.1, "overall": 0.2, "cpu": 0.3, "memory": 0.4},
    "endpointPkiMode": "CERTIFICATE_OPTIONAL",
    "connectedEdges": 4,
    "alertsEnabled": 1,
    "isLoadBalanced": 0,
    "privateIpAddress": None,
}

_PROPERTY_ITEM = {
    "id": 42,
    "created": "2022-11-30T10:00:00.000Z",
    "name": "vco.notification.enable",
    "value": "true",
    "defaultValue": None,
    "isReadOnly": 0,
    "isPassword": 0,
    "dataType": "BOOLEAN",
    "description": "Enable notifications",
    "modified": "0000-00-00 00:00:00",
}

_ENTERPRISE = {
    "id": 3,
    "created": "2022-05-04T08:00:00.000Z",
    "networkId": 1,
    "gatewayPoolId": 2,
    "alertsEnabled": 1,
    "operatorAlertsEnabled": 0,
    "endpointPkiMode": "CERTIFICATE_DISABLED",
    "name": "Example Corp",
    "domain": "example.com",
    "prefix": None,
    "logicalId": "0123abcd-4567-89ab-cdef-0123456789ab",
    "accountNumber": "ACCT-0001",
    "description": None,
    "contactName": "Ops",
    "contactPhone": None,
    "contactMobile": None,
    "contactEmail": "ops@example.com",
    "streetAddress": None,
    "streetAddress2": None,
    "city": "Springfield",
    "state": None,
    "postalCode": None,
    "country": "US",
    "lat": 37.402866,
    "lon": -122,
    "timezone": "America/Los_Angeles",
    "locale": "en-US",
    "modified": "0000-00-00 00:00:00",
    "bastionState": "UNCONFIGURED",
    "enterpriseProxyId": None,
}


@pytest.fixture
def certificate_doc():
    return copy.deepcopy(_CERTIFICATE)


@pytest.fixture
def gateway_doc():
    return copy.deepcopy(_GATEWAY)


@pytest.fixture
def property_item_doc():
    return copy.deepcopy(_PROPERTY_ITEM)


@pytest.fixture
def enterprise_doc():
    return copy.deepcopy(_ENTERPRISE)
