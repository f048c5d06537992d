"""DocuSign call executor, credentials and service context."""
from docusign_rest.client.docusign.call import Call, CancelScope, QueryParam
from docusign_rest.client.docusign.context import CallLogger, ServiceContext, SimpleCallLogger
from docusign_rest.client.docusign.credentials import Credential, OAuthCredential, PasswordCredential
from docusign_rest.client.docusign.docusign import DocuSignClient
from docusign_rest.client.docusign.errors import (
    AuthenticationError,
    CallCancelledError,
    DeadlineExceededError,
    DocuSignClientError,
    MultipartError,
    ResponseError,
)
from docusign_rest.client.docusign.multipart import MultipartBody, UploadFile

__all__ = [
    "AuthenticationError",
    "Call",
    "CallCancelledError",
    "CallLogger",
    "CancelScope",
    "Credential",
    "DeadlineExceededError",
    "DocuSignClient",
    "DocuSignClientError",
    "MultipartBody",
    "MultipartError",
    "OAuthCredential",
    "PasswordCredential",
    "QueryParam",
    "ResponseError",
    "ServiceContext",
    "SimpleCallLogger",
    "UploadFile",
]
