from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, model_validator  # type: ignore
from pydantic.alias_generators import to_camel  # type: ignore


class DocuSignModel(BaseModel):
    """Base for API payloads.

    Fields are snake_case in Python and camelCase on the wire. Unknown
    fields in responses are ignored.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_payload(self) -> Dict[str, Any]:
        """Dump for a request body, leaving out fields still at their default"""
        return self.model_dump(mode="json", by_alias=True, exclude_defaults=True)


class NameValue(DocuSignModel):
    """Generic name/value pair used throughout the API"""

    name: str = ""
    value: str = ""


class ErrorDetails(DocuSignModel):
    """Vendor error payload.

    The API reports errors either as ``{"errorCode", "message"}`` or, on the
    OAuth endpoints, as ``{"error", "error_description"}``. Both decode to
    the same ``error_code``/``message`` pair.
    """

    error_code: str = ""
    message: str = ""

    @model_validator(mode="before")
    @classmethod
    def normalize_shape(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        code = data.get("errorCode", data.get("error_code"))
        if code is None:
            code = data.get("error")
        message = data.get("message")
        if message is None:
            message = data.get("error_description")
        return {
            "errorCode": "" if code is None else str(code),
            "message": "" if message is None else str(message),
        }

