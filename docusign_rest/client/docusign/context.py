import logging
from dataclasses import dataclass, field
from typing import Optional, Protocol

from docusign_rest.client.http.http_client import HTTPClient
from docusign_rest.client.http.http_request import HTTPRequest
from docusign_rest.client.http.http_response import HTTPResponse
from docusign_rest.config.constants.service import DocuSignHosts


class CallLogger(Protocol):
    """Receives the raw traffic of every call, for diagnostics"""

    def log_request(self, request: HTTPRequest, payload: Optional[bytes]) -> None:
        ...

    def log_response(self, response: HTTPResponse, body: bytes) -> None:
        ...


class SimpleCallLogger:
    """CallLogger writing to a standard logger.

    Args:
        logger: Logger to write to, the module logger by default
        level: Level of the records (default: DEBUG)
        log_requests: Write request payloads
        log_responses: Write response bodies
    """

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
        log_requests: bool = True,
        log_responses: bool = True,
    ) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self.level = level
        self.log_requests = log_requests
        self.log_responses = log_responses

    def log_request(self, request: HTTPRequest, payload: Optional[bytes]) -> None:
        if not self.log_requests:
            return
        self.logger.log(
            self.level,
            "Request %s %s\n%s",
            request.method,
            request.url,
            (payload or b"").decode("utf-8", errors="replace"),
        )

    def log_response(self, response: HTTPResponse, body: bytes) -> None:
        if not self.log_responses:
            return
        self.logger.log(
            self.level,
            "Response %s %s\n%s",
            response.status,
            response.url,
            body.decode("utf-8", errors="replace"),
        )


@dataclass(frozen=True)
class ServiceContext:
    """Configuration shared by every call of a service. Never mutated.

    Attributes:
        http_client: Transport performing the requests
        base_url: API root, production by default
        call_logger: Optional hook receiving raw payloads and response bodies
        pretty_print: Indent JSON request bodies
    """

    http_client: HTTPClient = field(default_factory=HTTPClient)
    base_url: str = DocuSignHosts.LIVE.value
    call_logger: Optional[CallLogger] = None
    pretty_print: bool = False

    @classmethod
    def production(cls, http_client: Optional[HTTPClient] = None, **kwargs) -> "ServiceContext":
        return cls(http_client=http_client or HTTPClient(), base_url=DocuSignHosts.LIVE.value, **kwargs)

    @classmethod
    def demo(cls, http_client: Optional[HTTPClient] = None, **kwargs) -> "ServiceContext":
        return cls(http_client=http_client or HTTPClient(), base_url=DocuSignHosts.DEMO.value, **kwargs)
