from enum import Enum

from docusign_rest.models.common import DocuSignModel


class ReturnUrlType(str, Enum):
    """Events reported back on the return URL of an embedded view"""

    SEND = "send"
    SAVE = "save"
    CANCEL = "cancel"
    ERROR = "error"
    SESSION_END = "sessionEnd"
    DECLINE = "decline"
    EXCEPTION = "exception"
    FAX_PENDING = "fax_pending"
    ID_CHECK_FAILED = "id_check_failed"
    SESSION_TIMEOUT = "session_timeout"
    SIGNING_COMPLETE = "signing_complete"
    TTL_EXPIRED = "ttl_expired"
    VIEW_COMPLETE = "view_complete"


class EnvelopeUrl(DocuSignModel):
    """URL of an embedded view"""

    url: str = ""


class ReturnUrlRequest(DocuSignModel):
    return_url: str = ""


class CorrectionViewRequest(ReturnUrlRequest):
    suppress_navigation: str = ""


class RecipientViewRequest(DocuSignModel):
    """Identifies the embedded recipient a signing view is created for"""

    client_user_id: str = ""
    authentication_method: str = ""
    assertion_id: str = ""
    authentication_instant: str = ""
    security_domain: str = ""
    email: str = ""
    user_id: str = ""
    user_name: str = ""
    return_url: str = ""
