from typing import AsyncIterator, Optional

import httpx  # type: ignore


class HTTPResponse:
    """Wrapper around an httpx response.

    The body may still be unread when the response was sent with
    ``stream=True``; the readers below load it on first use.

    Args:
        response: The httpx response
    """

    def __init__(self, response: httpx.Response) -> None:
        self.response = response

    @property
    def status(self) -> int:
        return self.response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self.response.headers

    @property
    def url(self) -> str:
        return str(self.response.url)

    @property
    def content_type(self) -> str:
        return self.response.headers.get("Content-Type", "")

    @property
    def is_closed(self) -> bool:
        return self.response.is_closed

    async def bytes(self) -> bytes:
        """Read the whole body"""
        return await self.response.aread()

    def aiter_bytes(self, chunk_size: Optional[int] = None) -> AsyncIterator[bytes]:
        """Stream the body without loading it into memory"""
        return self.response.aiter_bytes(chunk_size)

    async def aclose(self) -> None:
        await self.response.aclose()

    async def __aenter__(self) -> "HTTPResponse":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
