"""Microsoft Graph 호출용 Azure credential 선택.

azwi는 클러스터 안(CI Job, operator pod)과 운영자 PC 양쪽에서 실행된다.
환경에 따라 다음 순서로 credential을 고른다:
1. AZURE_FEDERATED_TOKEN_FILE + 테넌트/클라이언트 ID → WorkloadIdentityCredential
2. Service Principal 환경변수 → ClientSecretCredential
3. USE_AZURE_CLI_CREDENTIAL=true → AzureCliCredential (``az login``)
4. 그 외 → DefaultAzureCredential (Managed Identity 등)
"""
import logging

from azure.core.credentials import TokenCredential
from azure.identity import (
    AzureCliCredential,
    ClientSecretCredential,
    DefaultAzureCredential,
    WorkloadIdentityCredential,
)

from azwi.config import Settings, settings

logger = logging.getLogger(__name__)


def _authority_kwargs(config: Settings) -> dict:
    """AZURE_AUTHORITY_HOST가 지정된 경우에만 authority_host 인자를 만든다."""
    if config.azure_authority_host:
        return {"authority_host": config.azure_authority_host}
    return {}


def _workload_identity_credential(config: Settings) -> WorkloadIdentityCredential:
    logger.debug(
        "Using WorkloadIdentityCredential (token file %s)",
        config.azure_federated_token_file,
    )
    return WorkloadIdentityCredential(
        tenant_id=config.azure_tenant_id,
        client_id=config.azure_client_id,
        token_file_path=config.azure_federated_token_file,
        **_authority_kwargs(config),
    )


def _service_principal_credential(config: Settings) -> ClientSecretCredential:
    logger.debug("Using ClientSecretCredential (client %s)", config.azure_client_id)
    return ClientSecretCredential(
        tenant_id=config.azure_tenant_id,
        client_id=config.azure_client_id,
        client_secret=config.azure_client_secret,
        **_authority_kwargs(config),
    )


def get_azure_credential(config: Settings = settings) -> TokenCredential:
    """설정에 맞는 Azure credential을 새로 만든다.

    Args:
        config: 사용할 설정 (기본값은 환경변수에서 읽은 전역 설정).

    Returns:
        Microsoft Graph 토큰 발급에 사용할 credential.
    """
    if config.has_workload_identity:
        return _workload_identity_credential(config)
    if config.has_service_principal:
        return _service_principal_credential(config)
    if config.use_azure_cli_credential:
        logger.debug("Using AzureCliCredential")
        return AzureCliCredential()

    logger.debug("Using DefaultAzureCredential")
    return DefaultAzureCredential(exclude_interactive_browser_credential=True)
