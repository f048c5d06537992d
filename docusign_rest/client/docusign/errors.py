"""Exceptions raised by the DocuSign client."""

from typing import Optional

from pydantic import ValidationError  # type: ignore

from docusign_rest.models.common import ErrorDetails


class DocuSignClientError(Exception):
    """Base exception for DocuSign client errors."""


class ResponseError(DocuSignClientError):
    """A non 200/201 answer from the API.

    Attributes:
        status: HTTP status code of the response
        error_code: Vendor error code, e.g. ``INVALID_REQUEST``
        description: Vendor description of the failure
    """

    def __init__(self, status: int, error_code: str = "", description: str = "") -> None:
        self.status = status
        self.error_code = error_code
        self.description = description
        super().__init__(str(self))

    @classmethod
    def from_body(cls, status: int, body: Optional[bytes]) -> "ResponseError":
        """Build the error from a response body.

        An empty body yields the status alone. A body that cannot be decoded
        keeps the status and uses the decode failure text as description.
        """
        if not body:
            return cls(status)
        try:
            details = ErrorDetails.model_validate_json(body)
        except ValidationError as e:
            return cls(status, description=_decode_failure(e))
        return cls(status, details.error_code, details.message)

    def __str__(self) -> str:
        return f"Status: {self.status}  {self.error_code}: {self.description}"

    def __repr__(self) -> str:
        return (
            f"ResponseError(status={self.status!r}, error_code={self.error_code!r}, "
            f"description={self.description!r})"
        )


class AuthenticationError(DocuSignClientError):
    """Token acquisition or revocation failed."""


class CallCancelledError(DocuSignClientError):
    """The call was cancelled before a response was received."""


class DeadlineExceededError(CallCancelledError):
    """The call's deadline passed before a response was received."""


class MultipartError(DocuSignClientError):
    """Writing the multipart request body failed."""


def _decode_failure(error: ValidationError) -> str:
    errors = error.errors()
    return str(errors[0]["msg"]) if errors else str(error)
