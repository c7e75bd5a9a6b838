"""Enumerations shared by several VCO resource records."""

from __future__ import annotations

import enum


class ServiceState(enum.StrEnum):
    """Service state of an edge or gateway."""

    IN_SERVICE = "IN_SERVICE"
    OUT_OF_SERVICE = "OUT_OF_SERVICE"
    PENDING_SERVICE = "PENDING_SERVICE"
    QUIESCED = "QUIESCED"


class ActivationState(enum.StrEnum):
    """Activation state of an edge or gateway."""

    UNASSIGNED = "UNASSIGNED"
    PENDING = "PENDING"
    ACTIVATED = "ACTIVATED"
    REACTIVATION_PENDING = "REACTIVATION_PENDING"


class BastionState(enum.StrEnum):
    """Bastion staging state of an enterprise or gateway."""

    UNCONFIGURED = "UNCONFIGURED"
    STAGE_REQUESTED = "STAGE_REQUESTED"
    UNSTAGE_REQUESTED = "UNSTAGE_REQUESTED"
    STAGED = "STAGED"
    UNSTAGED = "UNSTAGED"


class EndpointPkiMode(enum.StrEnum):
    CERTIFICATE_DISABLED = "CERTIFICATE_DISABLED"
    CERTIFICATE_OPTIONAL = "CERTIFICATE_OPTIONAL"
    CERTIFICATE_REQUIRED = "CERTIFICATE_REQUIRED"
