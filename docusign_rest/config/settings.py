import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field  # type: ignore

from docusign_rest.client.docusign.context import ServiceContext, SimpleCallLogger
from docusign_rest.client.docusign.credentials import (
    Credential,
    OAuthCredential,
    PasswordCredential,
)
from docusign_rest.client.http.http_client import HTTPClient
from docusign_rest.config.constants.service import DocuSignHosts

ENV_PREFIX = "DOCUSIGN_"


class DocuSignSettings(BaseModel):
    """Connection settings, usually read from ``DOCUSIGN_*`` variables.

    Attributes:
        base_url: API root; overrides ``demo`` when set
        demo: Use the demo environment
        timeout: Transport timeout in seconds
        log_raw_request: Log JSON request bodies (pretty printed)
        log_raw_response: Log response bodies
        integrator_key: Integrator key (OAuth client id)
        user_name: Login user name
        password: Login password
        account_id: Account the calls belong to
        host: Replaces the host of the API root, e.g. ``na2.docusign.net``
        access_token: OAuth token; preferred over the password when set
    """

    base_url: str = ""
    demo: bool = False
    timeout: float = Field(default=30.0, gt=0)
    log_raw_request: bool = False
    log_raw_response: bool = False
    integrator_key: str = ""
    user_name: str = ""
    password: str = ""
    account_id: str = ""
    host: str = ""
    access_token: str = ""

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DocuSignSettings":
        """Read the settings from the environment.

        Args:
            environ: Mapping to read instead of ``os.environ``
        Returns:
            The settings; unset variables keep their defaults
        """
        env = os.environ if environ is None else environ
        values = {
            name: env[ENV_PREFIX + name.upper()]
            for name in cls.model_fields
            if ENV_PREFIX + name.upper() in env
        }
        return cls.model_validate(values)

    def resolved_base_url(self) -> str:
        if self.base_url:
            return self.base_url if self.base_url.endswith("/") else self.base_url + "/"
        return DocuSignHosts.DEMO.value if self.demo else DocuSignHosts.LIVE.value

    def build_context(self, http_client: Optional[HTTPClient] = None) -> ServiceContext:
        """ServiceContext for these settings"""
        log_raw = self.log_raw_request or self.log_raw_response
        http_client = http_client or HTTPClient(timeout=self.timeout)
        options = {
            "call_logger": SimpleCallLogger(
                log_requests=self.log_raw_request,
                log_responses=self.log_raw_response,
            ) if log_raw else None,
            "pretty_print": self.log_raw_request,
        }
        if self.base_url:
            return ServiceContext(http_client=http_client, base_url=self.resolved_base_url(), **options)
        if self.demo:
            return ServiceContext.demo(http_client, **options)
        return ServiceContext.production(http_client, **options)

    def build_credential(self) -> Credential:
        """Credential for these settings, the access token winning over the password.

        Raises:
            ValueError: when neither an access token nor a complete password
                login is configured
        """
        if self.access_token:
            return OAuthCredential(
                access_token=self.access_token,
                account_id=self.account_id,
                host=self.host,
            )
        if self.integrator_key and self.user_name and self.password:
            return PasswordCredential(
                integrator_key=self.integrator_key,
                user_name=self.user_name,
                password=self.password,
                account_id=self.account_id,
                host=self.host,
            )
        raise ValueError(
            "DocuSign credentials not configured: set DOCUSIGN_ACCESS_TOKEN or "
            "DOCUSIGN_INTEGRATOR_KEY, DOCUSIGN_USER_NAME and DOCUSIGN_PASSWORD"
        )
