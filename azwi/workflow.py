"""workflow 엔진과 phase 사이의 계약.

phase 순서 실행과 flag 파싱은 엔진이 담당한다. 이 모듈은 phase가 엔진에
등록하는 descriptor와 phase가 읽는 run data 인터페이스만 정의한다.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Optional

from pydantic import BaseModel

from azwi.services.graph import AzureClient, get_azure_client

FLAG_SERVICE_ACCOUNT_NAMESPACE = "service-account-namespace"
FLAG_SERVICE_ACCOUNT_NAME = "service-account-name"
FLAG_SERVICE_ACCOUNT_ISSUER_URL = "service-account-issuer-url"
FLAG_AAD_APPLICATION_NAME = "aad-application-name"
FLAG_AAD_APPLICATION_OBJECT_ID = "aad-application-object-id"


class RunData(ABC):
    """엔진이 모든 phase에 넘기는 run data."""


@dataclass
class Phase:
    """엔진에 등록되는 workflow의 한 단계."""

    name: str
    run: Callable[[RunData], Awaitable[None]]
    aliases: list[str] = field(default_factory=list)
    description: str = ""
    pre_run: Optional[Callable[[RunData], None]] = None
    flags: list[str] = field(default_factory=list)


class CreateData(RunData):
    """service account ``create`` phase들이 요구하는 run data."""

    @property
    @abstractmethod
    def service_account_namespace(self) -> str: ...

    @property
    @abstractmethod
    def service_account_name(self) -> str: ...

    @property
    @abstractmethod
    def service_account_issuer_url(self) -> str: ...

    @property
    @abstractmethod
    def aad_application_name(self) -> str: ...

    @property
    @abstractmethod
    def aad_application_object_id(self) -> str: ...

    @abstractmethod
    def azure_client(self) -> AzureClient: ...


class CreateOptions(BaseModel):
    """``serviceaccount create`` flag 값."""

    service_account_namespace: str = ""
    service_account_name: str = ""
    service_account_issuer_url: str = ""
    aad_application_name: str = ""
    aad_application_object_id: str = ""


class StaticCreateData(CreateData):
    """파싱된 flag 값으로 구성한 CreateData."""

    def __init__(
        self,
        options: CreateOptions,
        client: Optional[AzureClient] = None,
    ) -> None:
        self._options = options
        self._client = client

    @property
    def service_account_namespace(self) -> str:
        return self._options.service_account_namespace

    @property
    def service_account_name(self) -> str:
        return self._options.service_account_name

    @property
    def service_account_issuer_url(self) -> str:
        return self._options.service_account_issuer_url

    @property
    def aad_application_name(self) -> str:
        return self._options.aad_application_name

    @property
    def aad_application_object_id(self) -> str:
        return self._options.aad_application_object_id

    def azure_client(self) -> AzureClient:
        # 주입된 클라이언트가 없으면 공유 Graph 클라이언트를 사용한다.
        if self._client is None:
            self._client = get_azure_client()
        return self._client
