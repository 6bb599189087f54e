"""Federated identity credential 생성 phase.

AAD 애플리케이션과 Kubernetes service account 사이에 federated identity
credential을 등록한다. 이미 존재하는 credential은 성공으로 취급한다.
"""
import logging
from typing import Optional

from azwi.config import DEFAULT_AUDIENCE
from azwi.exceptions import (
    FederatedCredentialError,
    InvalidRunDataError,
    MissingFlagError,
)
from azwi.models import get_federated_credential_subject, new_federated_credential
from azwi.services.graph import is_already_exists
from azwi.workflow import (
    FLAG_AAD_APPLICATION_NAME,
    FLAG_AAD_APPLICATION_OBJECT_ID,
    FLAG_SERVICE_ACCOUNT_ISSUER_URL,
    FLAG_SERVICE_ACCOUNT_NAME,
    FLAG_SERVICE_ACCOUNT_NAMESPACE,
    CreateData,
    Phase,
    RunData,
)

FEDERATED_IDENTITY_PHASE_NAME = "federated-identity"

_DESCRIPTION = (
    "Create federated identity credential between the AAD application "
    "and the Kubernetes service account"
)


class FederatedIdentityPhase:
    """federated identity credential을 등록하는 phase 구현."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or logging.getLogger(__name__)

    def prerun(self, data: RunData) -> None:
        """필수 flag 값을 검증한다.

        Raises:
            InvalidRunDataError: data가 CreateData가 아닌 경우.
            MissingFlagError: namespace, name, issuer URL 순으로 처음 비어 있는 flag.
        """
        if not isinstance(data, CreateData):
            raise InvalidRunDataError(data)

        if not data.service_account_namespace:
            raise MissingFlagError(FLAG_SERVICE_ACCOUNT_NAMESPACE)
        if not data.service_account_name:
            raise MissingFlagError(FLAG_SERVICE_ACCOUNT_NAME)
        if not data.service_account_issuer_url:
            raise MissingFlagError(FLAG_SERVICE_ACCOUNT_ISSUER_URL)

    async def run(self, data: CreateData) -> None:
        """federated identity credential을 추가한다.

        Raises:
            FederatedCredentialError: 이미 존재하는 경우를 제외한 모든 추가 실패.
        """
        namespace, name = data.service_account_namespace, data.service_account_name
        subject = get_federated_credential_subject(namespace, name)
        description = f"Federated Service Account for {namespace}/{name}"
        audiences = [DEFAULT_AUDIENCE]

        # 이전 phase가 채운 값이므로 여기서는 검증하지 않는다.
        object_id = data.aad_application_object_id
        fc = new_federated_credential(
            object_id,
            data.service_account_issuer_url,
            subject,
            description,
            audiences,
        )
        fields = {
            "phase": FEDERATED_IDENTITY_PHASE_NAME,
            "object_id": object_id,
            "subject": subject,
        }

        try:
            await data.azure_client().add_federated_credential(object_id, fc)
        except Exception as e:
            if not is_already_exists(e):
                raise FederatedCredentialError(e, object_id=object_id) from e
            self.logger.debug(
                "[%s] federated credential has been previously created",
                FEDERATED_IDENTITY_PHASE_NAME,
                extra=fields,
            )

        self.logger.info(
            "[%s] added federated credential",
            FEDERATED_IDENTITY_PHASE_NAME,
            extra=fields,
        )


def new_federated_identity_phase(logger: Optional[logging.Logger] = None) -> Phase:
    """federated identity credential 생성 phase를 반환한다."""
    p = FederatedIdentityPhase(logger)
    return Phase(
        name=FEDERATED_IDENTITY_PHASE_NAME,
        aliases=["fi"],
        description=_DESCRIPTION,
        pre_run=p.prerun,
        run=p.run,
        flags=[
            FLAG_SERVICE_ACCOUNT_NAMESPACE,
            FLAG_SERVICE_ACCOUNT_NAME,
            FLAG_SERVICE_ACCOUNT_ISSUER_URL,
            FLAG_AAD_APPLICATION_NAME,
            FLAG_AAD_APPLICATION_OBJECT_ID,
        ],
    )
