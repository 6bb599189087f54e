"""Microsoft Graph 기반 federated identity credential 클라이언트.

Authentication: azwi.services.credential.get_azure_credential
"""
import logging
from functools import lru_cache
from typing import Optional

from azure.core.exceptions import ResourceExistsError
from msgraph import GraphServiceClient

from azwi.config import settings
from azwi.exceptions import (
    ConflictError,
    EntraIDAuthorizationError,
    FederatedCredentialExistsError,
)
from azwi.models import FederatedCredential
from azwi.services.credential import get_azure_credential

logger = logging.getLogger(__name__)

# MS Graph 에러 코드 상수
_ERROR_CODE_AUTHORIZATION_DENIED = "Authorization_RequestDenied"
_ERROR_CODE_MULTIPLE_OBJECTS_WITH_SAME_KEY = "Request_MultipleObjectsWithSameKeyValue"
_HTTP_BAD_REQUEST = 400
_HTTP_FORBIDDEN = 403
_HTTP_CONFLICT = 409
_ALREADY_EXISTS_MESSAGE = "already exists"


def _extract_graph_error(exc: BaseException) -> tuple[Optional[str], Optional[int], str]:
    """MS Graph SDK 예외에서 에러 코드, HTTP 상태, 메시지를 추출한다.

    Args:
        exc: MS Graph SDK 예외 (ODataError 등).

    Returns:
        (error_code, response_status_code, error_message) 튜플.
    """
    error = getattr(exc, "error", None)
    error_code = getattr(error, "code", None)
    error_message = getattr(error, "message", None) or str(exc)
    response_code = getattr(exc, "response_status_code", None)
    if response_code is None:
        response_code = getattr(exc, "status_code", None)
    return error_code, response_code, error_message


def is_already_exists(exc: Optional[BaseException]) -> bool:
    """리소스가 이미 존재한다는 에러인지 판별한다.

    azwi 자체 ConflictError, azure-core ResourceExistsError,
    그리고 중복 키/409 응답을 담은 Graph ODataError를 인식한다.
    """
    if exc is None:
        return False
    if isinstance(exc, (ConflictError, ResourceExistsError)):
        return True

    error_code, response_code, error_message = _extract_graph_error(exc)
    if error_code == _ERROR_CODE_MULTIPLE_OBJECTS_WITH_SAME_KEY:
        return True
    if response_code == _HTTP_CONFLICT:
        return True
    # 중복 credential 이름은 400 + "already exists" 메시지로 응답된다.
    return (
        response_code == _HTTP_BAD_REQUEST
        and _ALREADY_EXISTS_MESSAGE in error_message.lower()
    )


def _is_authorization_error(exc: BaseException) -> bool:
    """권한 거부 에러인지 판별한다."""
    error_code, response_code, error_message = _extract_graph_error(exc)
    return (
        error_code == _ERROR_CODE_AUTHORIZATION_DENIED
        or response_code == _HTTP_FORBIDDEN
        or "Insufficient privileges" in error_message
    )


class AzureClient:
    """AAD 애플리케이션의 federated identity credential을 관리하는 클라이언트."""

    def __init__(self, client: Optional[GraphServiceClient] = None) -> None:
        """Microsoft Graph 클라이언트를 초기화한다.

        Args:
            client: 미리 구성된 GraphServiceClient (미지정 시 새로 생성).
        """
        if client is not None:
            self.client = client
            return

        try:
            credential = get_azure_credential()
            self.client = GraphServiceClient(
                credentials=credential,
                scopes=[settings.graph_scope],
            )
            logger.info("Initialized Microsoft Graph client")
        except Exception as e:
            logger.error("Failed to initialize Microsoft Graph client: %s", e)
            raise

    async def add_federated_credential(
        self, object_id: str, credential: FederatedCredential
    ) -> None:
        """AAD 애플리케이션에 federated identity credential을 추가한다.

        Args:
            object_id: AAD 애플리케이션 object ID.
            credential: 추가할 federated credential.

        Raises:
            FederatedCredentialExistsError: 같은 credential이 이미 존재하는 경우.
            EntraIDAuthorizationError: 애플리케이션 수정 권한이 없는 경우.
            Exception: 그 외 Graph SDK/전송 에러는 그대로 전파된다.
        """
        try:
            await (
                self.client.applications.by_application_id(object_id)
                .federated_identity_credentials.post(credential.to_graph())
            )
        except Exception as e:
            if is_already_exists(e):
                raise FederatedCredentialExistsError(
                    f"Federated credential '{credential.name}' already exists "
                    f"on application '{object_id}'",
                    object_id=object_id,
                    subject=credential.subject,
                ) from e

            logger.error(
                "Failed to add federated credential to application %s: %s",
                object_id,
                e,
            )
            if _is_authorization_error(e):
                raise EntraIDAuthorizationError(
                    f"애플리케이션 '{object_id}'에 federated credential을 추가할 권한이 없습니다. "
                    "애플리케이션 소유자이거나 Application.ReadWrite.All 권한이 필요합니다."
                ) from e
            raise

        logger.debug(
            "Posted federated credential %s to application %s",
            credential.name,
            object_id,
        )


@lru_cache(maxsize=1)
def get_azure_client() -> AzureClient:
    """Get the AzureClient singleton instance."""
    return AzureClient()
