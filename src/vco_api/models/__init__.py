"""Resource records built from the wire value types."""

from vco_api.models.enterprise import Enterprise
from vco_api.models.error import api_error_from_body, identify_error_body, raise_for_error_body
from vco_api.models.gateway import (
    GatewayCertificate,
    GatewayMetric,
    GatewayState,
    GetGatewayStatusMetrics,
    NetworkGateway,
)
from vco_api.models.login import AuthObject
from vco_api.models.property import (
    PropertyDataType,
    SystemProperty,
    SystemPropertyItem,
    properties_by_name,
)

__all__ = [
    "AuthObject",
    "Enterprise",
    "GatewayCertificate",
    "GatewayMetric",
    "GatewayState",
    "GetGatewayStatusMetrics",
    "NetworkGateway",
    "PropertyDataType",
    "SystemProperty",
    "SystemPropertyItem",
    "api_error_from_body",
    "identify_error_body",
    "properties_by_name",
    "raise_for_error_body",
]
