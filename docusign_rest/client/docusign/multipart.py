"""Streaming multipart/form-data bodies for requests carrying documents.

The first part holds the JSON request payload, every file follows in its own
part. A single writer task produces the body into a queue of size one that
the HTTP layer drains, so no more than one chunk is held in memory.
"""

import asyncio
import inspect
import json
import logging
import uuid
from collections.abc import AsyncIterable
from dataclasses import dataclass, field
from typing import Any, AsyncIterator, BinaryIO, List, Optional, Sequence, Union

from docusign_rest.client.docusign.errors import MultipartError

DEFAULT_CHUNK_SIZE = 64 * 1024

FileSource = Union[bytes, bytearray, BinaryIO, AsyncIterable]

_END = object()


@dataclass
class UploadFile:
    """A document sent as a file part.

    Args:
        content_type: MIME type of the content, e.g. ``application/pdf``
        file_name: Display name of the file
        id: Document id matching a ``Document.document_id`` of the payload
        data: Bytes, a binary file object or an async iterable of bytes; read once
        order: Optional document order
    """

    content_type: str
    file_name: str
    id: str
    data: FileSource
    order: str = ""
    closed: bool = field(default=False, init=False)

    async def iter_chunks(self, chunk_size: int = DEFAULT_CHUNK_SIZE) -> AsyncIterator[bytes]:
        data = self.data
        if isinstance(data, (bytes, bytearray, memoryview)):
            if data:
                yield bytes(data)
            return

        read = getattr(data, "read", None)
        if read is not None:
            while True:
                if inspect.iscoroutinefunction(read):
                    chunk = await read(chunk_size)
                else:
                    chunk = await asyncio.to_thread(read, chunk_size)
                if not chunk:
                    return
                yield chunk

        async for chunk in data:
            yield chunk

    async def aclose(self, logger: Optional[logging.Logger] = None) -> None:
        """Close the underlying source. Only the first call has an effect.

        Close failures are logged, not raised.
        """
        if self.closed:
            return
        self.closed = True
        close = getattr(self.data, "aclose", None) or getattr(self.data, "close", None)
        if close is None:
            return
        try:
            result = close()
            if inspect.isawaitable(result):
                await result
        except Exception as e:
            (logger or logging.getLogger(__name__)).debug(
                "Failed to close upload %s: %s", self.file_name, e
            )


class MultipartBody:
    """Async iterable multipart body.

    Args:
        payload: JSON serializable metadata sent as the first part, or None
        files: Files sent after the metadata, in order
        boundary: Part boundary, random when omitted
        chunk_size: Read size used on file sources
        logger: Optional logger instance
    """

    def __init__(
        self,
        payload: Any,
        files: Sequence[UploadFile],
        boundary: Optional[str] = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.payload = payload
        self.files: List[UploadFile] = list(files)
        self.boundary = boundary or uuid.uuid4().hex
        self.chunk_size = chunk_size
        self.logger = logger or logging.getLogger(__name__)
        self._queue: "asyncio.Queue[Any]" = asyncio.Queue(maxsize=1)
        self._writer: Optional[asyncio.Task] = None
        self._started = False

    @property
    def content_type(self) -> str:
        return f"multipart/form-data; boundary={self.boundary}"

    def __aiter__(self) -> AsyncIterator[bytes]:
        if self._started:
            raise MultipartError("multipart body can only be read once")
        self._started = True
        self._writer = asyncio.ensure_future(self._write())
        return self._read()

    async def _read(self) -> AsyncIterator[bytes]:
        while True:
            item = await self._queue.get()
            if item is _END:
                return
            if isinstance(item, BaseException):
                raise MultipartError(f"multipart error: {item}") from item
            yield item

    async def _write(self) -> None:
        error: Optional[Exception] = None
        try:
            first = True
            if self.payload is not None:
                encoded = json.dumps(self.payload, separators=(",", ":")).encode("utf-8") + b"\n"
                await self._queue.put(self._part_header(first, "form-data", "application/json"))
                await self._queue.put(encoded)
                first = False
            for upload in self.files:
                disposition = f'file; filename="{upload.file_name}";documentid={upload.id}'
                await self._queue.put(self._part_header(first, disposition, upload.content_type))
                first = False
                async for chunk in upload.iter_chunks(self.chunk_size):
                    await self._queue.put(chunk)
                await upload.aclose(self.logger)
            await self._queue.put(f"\r\n--{self.boundary}--\r\n".encode("ascii"))
        except Exception as e:
            error = e
        finally:
            await self._close_files()
        await self._queue.put(error if error is not None else _END)

    def _part_header(self, first: bool, disposition: str, content_type: str) -> bytes:
        lead = "" if first else "\r\n"
        return (
            f"{lead}--{self.boundary}\r\n"
            f"Content-Disposition: {disposition}\r\n"
            f"Content-Type: {content_type}\r\n\r\n"
        ).encode("utf-8")

    async def _close_files(self) -> None:
        for upload in self.files:
            await upload.aclose(self.logger)

    async def aclose(self) -> None:
        """Stop the writer and close every file not closed yet.

        Safe to call whether or not the body was read.
        """
        if self._writer is not None and not self._writer.done():
            self._writer.cancel()
            await asyncio.wait({self._writer})
        await self._close_files()

