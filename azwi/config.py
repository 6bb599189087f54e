"""
Configuration settings for azwi
"""
import os

from pydantic_settings import BaseSettings

# Token audience the workload identity webhook projects into pods.
DEFAULT_AUDIENCE = "api://AzureADTokenExchange"

SERVICE_ACCOUNT_SUBJECT_PREFIX = "system:serviceaccount"


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Identity used to call Microsoft Graph
    azure_tenant_id: str = os.getenv("AZURE_TENANT_ID", "")
    azure_client_id: str = os.getenv("AZURE_CLIENT_ID", "")
    azure_client_secret: str = os.getenv("AZURE_CLIENT_SECRET", "")

    # Projected service account token (Azure Workload Identity webhook)
    azure_federated_token_file: str = os.getenv("AZURE_FEDERATED_TOKEN_FILE", "")
    azure_authority_host: str = os.getenv("AZURE_AUTHORITY_HOST", "")

    use_azure_cli_credential: bool = os.getenv("USE_AZURE_CLI_CREDENTIAL", "false").lower() == "true"

    graph_scope: str = "https://graph.microsoft.com/.default"

    # Logging: "json" for CI pipelines, "text" for interactive use
    log_format: str = "text"
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "case_sensitive": False, "extra": "ignore"}

    @property
    def has_workload_identity(self) -> bool:
        """Whether a federated token file and the app it belongs to are configured."""
        return bool(
            self.azure_federated_token_file
            and self.azure_tenant_id
            and self.azure_client_id
        )

    @property
    def has_service_principal(self) -> bool:
        """Whether all three service principal settings are present."""
        return bool(
            self.azure_tenant_id
            and self.azure_client_id
            and self.azure_client_secret
        )


settings = Settings()
