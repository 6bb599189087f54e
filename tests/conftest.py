"""
Shared test fixtures and configuration.

Environment variables are set BEFORE any azwi imports so the settings
singleton never picks up real Azure credentials.
"""

import os
import sys

# Ensure the azwi package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

os.environ["AZURE_TENANT_ID"] = ""
os.environ["AZURE_CLIENT_ID"] = ""
os.environ["AZURE_CLIENT_SECRET"] = ""
os.environ["AZURE_FEDERATED_TOKEN_FILE"] = ""
os.environ["AZURE_AUTHORITY_HOST"] = ""
os.environ["USE_AZURE_CLI_CREDENTIAL"] = "false"

import pytest  # noqa: E402

from tests.mocks.graph import make_azure_client, make_create_data  # noqa: E402


@pytest.fixture
def azure_client():
    """AzureClient whose add_federated_credential is an AsyncMock."""
    return make_azure_client()


@pytest.fixture
def create_data(azure_client):
    """Fully populated run data for the default/my-sa service account."""
    return make_create_data(client=azure_client)
