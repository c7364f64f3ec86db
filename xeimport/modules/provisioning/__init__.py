"""
Provisioning Module - Black Box Interface

Purpose: Create one session on one server from one template
Interface: ProvisioningEngine.provision()
Hidden: Load/validate order, name derivation, collision check, error capture

Never raises for per-template failures; every attempt yields an outcome.
"""

from .engine import ProvisioningEngine
from .models import (
    CONNECTION_FAILED,
    INVALID_TEMPLATE,
    LOAD_ERROR,
    SESSION_EXISTS,
    UNKNOWN_TEMPLATE,
    OutcomeStatus,
    ProvisioningOutcome,
)

__all__ = [
    "ProvisioningEngine",
    "ProvisioningOutcome",
    "OutcomeStatus",
    "CONNECTION_FAILED",
    "INVALID_TEMPLATE",
    "LOAD_ERROR",
    "SESSION_EXISTS",
    "UNKNOWN_TEMPLATE",
]
