"""Phases of ``azwi serviceaccount create``."""
from .federated_identity import (
    FEDERATED_IDENTITY_PHASE_NAME,
    FederatedIdentityPhase,
    new_federated_identity_phase,
)

__all__ = [
    "FEDERATED_IDENTITY_PHASE_NAME",
    "FederatedIdentityPhase",
    "new_federated_identity_phase",
]
