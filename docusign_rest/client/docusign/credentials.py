"""Credentials authorizing DocuSign calls.

Two schemes are supported: an OAuth bearer token and the legacy
``X-DocuSign-Authentication`` header carrying user name, password and
integrator key. A password credential can also be exchanged for a token.
"""

import logging
from abc import ABC, abstractmethod
from urllib.parse import urlsplit, urlunsplit
from xml.sax.saxutils import escape

import httpx  # type: ignore
from pydantic import BaseModel, ConfigDict, ValidationError  # type: ignore

from docusign_rest.client.docusign.context import ServiceContext
from docusign_rest.client.docusign.errors import AuthenticationError, ResponseError
from docusign_rest.client.http.http_request import HTTPRequest
from docusign_rest.config.constants.http_status_code import SUCCESS_STATUSES
from docusign_rest.config.constants.service import DocuSignHeaders, OAuthPaths

logger = logging.getLogger(__name__)

_FORM_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/x-www-form-urlencoded",
}


def resolve_url(base_url: str, path: str, account_id: str = "", host: str = "") -> str:
    """Turn a call path into an absolute URL.

    Args:
        base_url: API root, ending with ``/``
        path: Account relative path, or API root relative when it starts with ``/``.
            Absolute URLs are returned untouched
        account_id: Account the relative paths belong to
        host: Replaces the host of ``base_url`` when set
    Returns:
        The absolute URL
    Raises:
        ValueError: when an account relative path is resolved without an account id
    """
    if urlsplit(path).scheme:
        return path

    if host:
        parts = urlsplit(base_url)
        base_url = urlunsplit((parts.scheme, host, parts.path, parts.query, parts.fragment))
    if not base_url.endswith("/"):
        base_url += "/"

    if path.startswith("/"):
        return base_url + path.lstrip("/")
    if not account_id:
        raise ValueError("Account ID not set")
    return f"{base_url}accounts/{account_id}/{path}"


class Credential(ABC):
    """Adds authentication to a request and resolves its URL"""

    @abstractmethod
    def authorize(self, request: HTTPRequest, on_behalf_of: str, base_url: str) -> None:
        """Set the auth headers and make ``request.url`` absolute.

        Args:
            request: Request about to be sent
            on_behalf_of: Email or user id the call acts for, empty for none
            base_url: API root of the service context
        """


async def _exchange(context: ServiceContext, request: HTTPRequest) -> bytes:
    """Send a form request to an OAuth endpoint and return the body"""
    try:
        response = await context.http_client.execute(request)
    except httpx.HTTPError as e:
        raise AuthenticationError(f"{request.url}: {e}") from e

    body = await response.bytes()
    if response.status not in SUCCESS_STATUSES:
        error = ResponseError.from_body(response.status, body)
        logger.warning("OAuth request to %s failed: %s", request.url, error)
        raise AuthenticationError(str(error)) from error
    return body


class OAuthCredential(BaseModel, Credential):
    """Bearer token, as returned by the token endpoint.

    ``account_id`` and ``host`` are not part of the token answer; they are
    filled in by the caller or by ``PasswordCredential.oauth_credential``.
    """

    model_config = ConfigDict(extra="ignore")

    access_token: str
    scope: str = ""
    token_type: str = ""
    account_id: str = ""
    host: str = ""

    def authorize(self, request: HTTPRequest, on_behalf_of: str = "", base_url: str = "") -> None:
        request.headers["Authorization"] = f"{self.token_type or 'bearer'} {self.access_token}"
        if on_behalf_of:
            request.headers[DocuSignHeaders.ACT_AS_USER.value] = on_behalf_of
        request.url = resolve_url(base_url, request.url, self.account_id, self.host)

    async def revoke(self, context: ServiceContext) -> None:
        """Invalidate the token.

        Raises:
            AuthenticationError: when the request fails or is refused
        """
        request = HTTPRequest(
            method="POST",
            url=resolve_url(context.base_url, "/" + OAuthPaths.REVOKE.value, host=self.host),
            headers=dict(_FORM_HEADERS),
            body={"token": self.access_token},
        )
        await _exchange(context, request)
        logger.info("Revoked OAuth token for account %s", self.account_id or "-")


class PasswordCredential(BaseModel, Credential):
    """Legacy header authentication with user name, password and integrator key"""

    integrator_key: str
    user_name: str
    password: str
    account_id: str = ""
    host: str = ""

    def authentication_header(self, on_behalf_of: str = "") -> str:
        on_behalf = f"<SendOnBehalfOf>{escape(on_behalf_of)}</SendOnBehalfOf>" if on_behalf_of else ""
        return (
            "<DocuSignCredentials>"
            f"{on_behalf}"
            f"<Username>{escape(self.user_name)}</Username>"
            f"<Password>{escape(self.password)}</Password>"
            f"<IntegratorKey>{escape(self.integrator_key)}</IntegratorKey>"
            "</DocuSignCredentials>"
        )

    def authorize(self, request: HTTPRequest, on_behalf_of: str = "", base_url: str = "") -> None:
        request.headers[DocuSignHeaders.AUTHENTICATION.value] = self.authentication_header(on_behalf_of)
        request.url = resolve_url(base_url, request.url, self.account_id, self.host)

    async def oauth_credential(self, context: ServiceContext, scope: str = "api") -> OAuthCredential:
        """Exchange the password for a bearer token.

        Args:
            context: Service context giving the transport and API root
            scope: OAuth scope requested (default: ``api``)
        Returns:
            An OAuthCredential bound to this credential's account and host
        Raises:
            AuthenticationError: when the request fails, is refused or the
                answer cannot be decoded
        """
        request = HTTPRequest(
            method="POST",
            url=resolve_url(context.base_url, "/" + OAuthPaths.TOKEN.value, host=self.host),
            headers=dict(_FORM_HEADERS),
            body={
                "grant_type": "password",
                "client_id": self.integrator_key,
                "username": self.user_name,
                "password": self.password,
                "scope": scope,
            },
        )
        body = await _exchange(context, request)
        try:
            credential = OAuthCredential.model_validate_json(body)
        except ValidationError as e:
            raise AuthenticationError(f"Invalid token response: {e}") from e

        credential.account_id = self.account_id
        credential.host = self.host
        logger.info("Obtained OAuth token for %s", self.user_name)
        return credential

    def __repr__(self) -> str:
        return (
            f"PasswordCredential(integrator_key={self.integrator_key!r}, "
            f"user_name={self.user_name!r}, account_id={self.account_id!r})"
        )
