"""
azwi exceptions module.

This module provides a centralized location for all custom exceptions.
Phases raise these instead of bare exceptions so the workflow engine can
surface a consistent message and error code.

Usage:
    from azwi.exceptions import MissingFlagError

    if not namespace:
        raise MissingFlagError("service-account-namespace")

Exception Hierarchy:
    AppError (base)
    ├── ConflictError
    ├── ValidationError
    │   ├── MissingFlagError
    │   └── InvalidRunDataError
    └── ServiceError
        └── AzureServiceError
            └── EntraIDServiceError
                ├── EntraIDAuthorizationError
                ├── FederatedCredentialExistsError (also ConflictError)
                └── FederatedCredentialError
"""

from .base import (
    AppError,
    ConflictError,
    ValidationError,
    ServiceError,
)

from .azure import (
    AzureServiceError,
    EntraIDServiceError,
    EntraIDAuthorizationError,
    FederatedCredentialExistsError,
    FederatedCredentialError,
)

from .validation import (
    MissingFlagError,
    InvalidRunDataError,
)

__all__ = [
    "AppError",
    "ConflictError",
    "ValidationError",
    "ServiceError",
    "AzureServiceError",
    "EntraIDServiceError",
    "EntraIDAuthorizationError",
    "FederatedCredentialExistsError",
    "FederatedCredentialError",
    "MissingFlagError",
    "InvalidRunDataError",
]
