"""Test doubles for Microsoft Graph and the azwi Azure client."""

from typing import Optional
from unittest.mock import AsyncMock, MagicMock

from azwi.services.graph import AzureClient
from azwi.workflow import CreateOptions, StaticCreateData


class GraphError(Exception):
    """Mimics msgraph ODataError: ``error.code``, ``error.message`` and ``response_status_code``."""

    def __init__(self, code: Optional[str], message: str, status: Optional[int]):
        super().__init__(message)
        self.error = MagicMock(code=code, message=message)
        self.response_status_code = status


def make_graph_service_client(post_side_effect=None) -> MagicMock:
    """GraphServiceClient mock exposing applications/{id}/federatedIdentityCredentials.post."""
    graph = MagicMock()
    fic = graph.applications.by_application_id.return_value.federated_identity_credentials
    fic.post = AsyncMock(side_effect=post_side_effect)
    return graph


def make_azure_client(side_effect=None) -> MagicMock:
    client = MagicMock(spec=AzureClient)
    client.add_federated_credential = AsyncMock(side_effect=side_effect)
    return client


def make_create_data(
    client=None,
    namespace: str = "default",
    name: str = "my-sa",
    issuer_url: str = "https://issuer.example/",
    object_id: str = "obj-123",
    application_name: str = "my-app",
) -> StaticCreateData:
    return StaticCreateData(
        CreateOptions(
            service_account_namespace=namespace,
            service_account_name=name,
            service_account_issuer_url=issuer_url,
            aad_application_name=application_name,
            aad_application_object_id=object_id,
        ),
        client=client if client is not None else make_azure_client(),
    )
