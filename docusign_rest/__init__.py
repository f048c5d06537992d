"""Asynchronous client for the DocuSign REST v2 API."""
from docusign_rest.client.docusign import (
    AuthenticationError,
    Call,
    CallCancelledError,
    CancelScope,
    DeadlineExceededError,
    DocuSignClient,
    DocuSignClientError,
    MultipartError,
    OAuthCredential,
    PasswordCredential,
    QueryParam,
    ResponseError,
    ServiceContext,
    SimpleCallLogger,
    UploadFile,
)
from docusign_rest.config.constants.service import VERSION as __version__
from docusign_rest.config.settings import DocuSignSettings
from docusign_rest.external.docusign import DocuSignDataSource, SearchFolder

__all__ = [
    "AuthenticationError",
    "Call",
    "CallCancelledError",
    "CancelScope",
    "DeadlineExceededError",
    "DocuSignClient",
    "DocuSignClientError",
    "DocuSignDataSource",
    "DocuSignSettings",
    "MultipartError",
    "OAuthCredential",
    "PasswordCredential",
    "QueryParam",
    "ResponseError",
    "SearchFolder",
    "ServiceContext",
    "SimpleCallLogger",
    "UploadFile",
    "__version__",
]
