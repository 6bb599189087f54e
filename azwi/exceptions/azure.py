"""
Azure-specific exception classes.

These exceptions wrap Azure SDK and Microsoft Graph errors raised while
provisioning federated identity credentials.
"""
from .base import AppError, ConflictError, ServiceError


class AzureServiceError(ServiceError):
    """Base exception for all Azure service errors"""

    def __init__(self, message: str = "Azure service error", service_name: str = "Azure"):
        super().__init__(message, service_name)
        self.code = "AZURE_SERVICE_ERROR"


class EntraIDServiceError(AzureServiceError):
    """Base exception for Microsoft Entra ID (Graph) errors"""

    def __init__(self, message: str = "Entra ID service error"):
        super().__init__(message, "EntraIDService")
        self.code = "ENTRA_ID_SERVICE_ERROR"


class EntraIDAuthorizationError(EntraIDServiceError):
    """
    Entra ID authorization failed - insufficient permissions (403).

    Typically occurs when:
    - The caller is not an owner of the AAD application
    - Missing Application.ReadWrite.All or Application.ReadWrite.OwnedBy
    """

    def __init__(self, message: str = "Insufficient permissions for Entra ID operation"):
        AppError.__init__(self, message, "ENTRA_ID_AUTHORIZATION_ERROR", {"service": "EntraIDService"})


class FederatedCredentialExistsError(EntraIDServiceError, ConflictError):
    """A federated identity credential with the same name or subject already exists"""

    def __init__(
        self,
        message: str = "Federated credential already exists",
        object_id: str = None,
        subject: str = None,
    ):
        AppError.__init__(
            self, message, "FEDERATED_CREDENTIAL_EXISTS",
            {"resource_type": "FederatedIdentityCredential", "object_id": object_id, "subject": subject}
        )


class FederatedCredentialError(EntraIDServiceError):
    """Failed to add a federated identity credential"""

    def __init__(self, cause: Exception, object_id: str = None):
        super().__init__(f"failed to add federated credential: {cause}")
        self.code = "FEDERATED_CREDENTIAL_ERROR"
        self.details["cause"] = str(cause)
        if isinstance(cause, AppError):
            self.details["cause_code"] = cause.code
        if object_id:
            self.details["object_id"] = object_id
