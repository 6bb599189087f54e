"""Federated identity credential 모델."""
import hashlib
import re

from msgraph.generated.models.federated_identity_credential import (
    FederatedIdentityCredential,
)
from pydantic import BaseModel, ConfigDict, Field, computed_field

from azwi.config import SERVICE_ACCOUNT_SUBJECT_PREFIX

# Graph는 credential 이름에 영숫자와 '-'만 허용하며 최대 120자이다.
_CREDENTIAL_NAME_MAX_LENGTH = 120
_SUBJECT_DIGEST_LENGTH = 16
_INVALID_NAME_CHARS = re.compile(r"[^a-zA-Z0-9-]")


def get_federated_credential_subject(namespace: str, name: str) -> str:
    """Kubernetes service account의 OIDC subject를 반환한다.

    Args:
        namespace: service account 네임스페이스.
        name: service account 이름.

    Returns:
        ``system:serviceaccount:<namespace>:<name>`` 형식의 문자열.
    """
    return f"{SERVICE_ACCOUNT_SUBJECT_PREFIX}:{namespace}:{name}"


class FederatedCredential(BaseModel):
    """AAD 애플리케이션에 등록할 federated identity credential."""

    model_config = ConfigDict(frozen=True)

    object_id: str
    issuer: str
    subject: str
    description: str
    audiences: list[str] = Field(..., min_length=1)

    @computed_field
    @property
    def name(self) -> str:
        """subject에서 파생한 Graph credential 이름.

        치환한 subject 접두어 뒤에 전체 subject의 sha256 digest 16자리를 붙인다.
        """
        digest = hashlib.sha256(self.subject.encode("utf-8")).hexdigest()
        digest = digest[:_SUBJECT_DIGEST_LENGTH]
        prefix_length = _CREDENTIAL_NAME_MAX_LENGTH - _SUBJECT_DIGEST_LENGTH - 1
        prefix = _INVALID_NAME_CHARS.sub("-", self.subject)[:prefix_length]
        return f"{prefix}-{digest}"

    def to_graph(self) -> FederatedIdentityCredential:
        """msgraph SDK 요청 본문으로 변환한다."""
        return FederatedIdentityCredential(
            name=self.name,
            issuer=self.issuer,
            subject=self.subject,
            description=self.description,
            audiences=list(self.audiences),
        )


def new_federated_credential(
    object_id: str,
    issuer: str,
    subject: str,
    description: str,
    audiences: list[str],
) -> FederatedCredential:
    """FederatedCredential을 생성한다."""
    return FederatedCredential(
        object_id=object_id,
        issuer=issuer,
        subject=subject,
        description=description,
        audiences=audiences,
    )
