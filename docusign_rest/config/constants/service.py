from enum import Enum

VERSION = "0.5.0"
USER_AGENT = f"docusign-rest-client/{VERSION}"


class DocuSignHosts(str, Enum):
    """Base endpoints of the REST v2 API"""

    LIVE = "https://www.docusign.net/restapi/v2/"
    DEMO = "https://demo.docusign.net/restapi/v2/"


class DocuSignHeaders(str, Enum):
    """Vendor specific request headers"""

    AUTHENTICATION = "X-DocuSign-Authentication"
    ACT_AS_USER = "X-DocuSign-Act-As-User"


class OAuthPaths(str, Enum):
    """OAuth endpoints relative to the API root"""

    TOKEN = "oauth2/token"
    REVOKE = "oauth2/revoke"
