import logging
from collections.abc import AsyncIterable
from typing import Dict, Optional

import httpx  # type: ignore

from docusign_rest.client.http.http_request import HTTPRequest
from docusign_rest.client.http.http_response import HTTPResponse
from docusign_rest.client.iclient import IClient


class HTTPClient(IClient):
    """
    Thin asynchronous HTTP client shared by every call of a service.

    Authentication is not handled here; credentials add their own headers
    to each request before it is executed. There is no retry policy.

    Args:
        timeout: Request timeout in seconds (default: 30.0)
        follow_redirects: Whether to follow HTTP redirects (default: True)
        transport: Optional httpx transport performing the socket I/O,
            e.g. ``httpx.MockTransport`` in tests
        headers: Default headers sent with every request
        logger: Optional logger instance
    """
    def __init__(
        self,
        timeout: float = 30.0,
        follow_redirects: bool = True,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        headers: Optional[Dict[str, str]] = None,
        logger: Optional[logging.Logger] = None
    ) -> None:
        self.headers = dict(headers or {})
        self.timeout = timeout
        self.follow_redirects = follow_redirects
        self.transport = transport
        self.logger = logger or logging.getLogger(__name__)
        self.client: Optional[httpx.AsyncClient] = None

    def get_client(self) -> "HTTPClient":
        """Get the client"""
        return self

    async def _ensure_client(self) -> httpx.AsyncClient:
        """Ensure client is created and available."""
        if self.client is None:
            self.client = httpx.AsyncClient(
                transport=self.transport,
                timeout=self.timeout,
                follow_redirects=self.follow_redirects
            )
        return self.client

    async def execute(self, request: HTTPRequest, stream: bool = False, **kwargs) -> HTTPResponse:
        """Execute an HTTP request
        Args:
            request: The HTTP request to execute
            stream: Leave the response body unread so it can be streamed;
                the caller must close the response
            kwargs: Additional keyword arguments to pass to the request
        Returns:
            A HTTPResponse object containing the response from the server
        """
        client = await self._ensure_client()

        # Request headers take precedence over the client defaults
        merged_headers = {**self.headers, **request.headers}
        request_kwargs = {
            "params": request.query_params or None,
            "headers": merged_headers,
            **kwargs
        }

        if isinstance(request.body, dict):
            content_type = merged_headers.get("Content-Type", "").lower()
            if "application/x-www-form-urlencoded" in content_type:
                request_kwargs["data"] = request.body
            else:
                request_kwargs["json"] = request.body
        elif isinstance(request.body, list):
            request_kwargs["json"] = request.body
        elif isinstance(request.body, (bytes, str, AsyncIterable)):
            request_kwargs["content"] = request.body

        http_request = client.build_request(request.method, request.url, **request_kwargs)
        self.logger.debug("HTTP %s %s", http_request.method, http_request.url)
        response = await client.send(http_request, stream=stream)
        return HTTPResponse(response)

    async def close(self) -> None:
        """Close the client"""
        if self.client:
            await self.client.aclose()
            self.client = None

    async def __aenter__(self) -> "HTTPClient":
        """Async context manager entry"""
        await self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit"""
        await self.close()
