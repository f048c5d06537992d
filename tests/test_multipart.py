"""
Tests for the streaming multipart body.
"""
import io
import json

import pytest

from docusign_rest.client.docusign.errors import MultipartError
from docusign_rest.client.docusign.multipart import MultipartBody, UploadFile
from tests.fixtures.mock_docusign import TrackingStream, split_multipart


async def read_body(body: MultipartBody) -> bytes:
    return b"".join([chunk async for chunk in body])


class TestMultipartLayout:
    @pytest.mark.asyncio
    async def test_json_part_then_files_in_order(self):
        files = [
            UploadFile("application/pdf", "contract.pdf", "1", b"%PDF-contract"),
            UploadFile("text/plain", "notes.txt", "2", io.BytesIO(b"some notes")),
            UploadFile("application/octet-stream", "blob.bin", "3", TrackingStream([b"ab", b"cd"])),
        ]
        body = MultipartBody({"a": "A", "b": 999}, files)

        parts = split_multipart(await read_body(body), body.content_type)

        assert len(parts) == 4
        headers, content = parts[0]
        assert headers["Content-Disposition"] == "form-data"
        assert headers["Content-Type"] == "application/json"
        assert json.loads(content) == {"a": "A", "b": 999}

        expected = [
            ('file; filename="contract.pdf";documentid=1', "application/pdf", b"%PDF-contract"),
            ('file; filename="notes.txt";documentid=2', "text/plain", b"some notes"),
            ('file; filename="blob.bin";documentid=3', "application/octet-stream", b"abcd"),
        ]
        for (headers, content), (disposition, content_type, data) in zip(parts[1:], expected):
            assert headers["Content-Disposition"] == disposition
            assert headers["Content-Type"] == content_type
            assert content == data

    @pytest.mark.asyncio
    async def test_content_type_carries_boundary(self):
        body = MultipartBody(None, [], boundary="xyz")
        assert body.content_type == "multipart/form-data; boundary=xyz"
        assert await read_body(body) == b"\r\n--xyz--\r\n"

    @pytest.mark.asyncio
    async def test_body_can_only_be_read_once(self):
        body = MultipartBody({"a": 1}, [])
        await read_body(body)
        with pytest.raises(MultipartError):
            await read_body(body)


class TestMultipartClose:
    """Every source is closed exactly once, whatever happens."""

    @pytest.mark.asyncio
    async def test_sources_closed_once_after_success(self):
        streams = [TrackingStream([b"one"]), TrackingStream([b"two", b"three"])]
        files = [UploadFile("text/plain", f"f{i}.txt", str(i), s) for i, s in enumerate(streams)]
        body = MultipartBody({"x": 1}, files)

        await read_body(body)
        await body.aclose()

        assert [s.close_count for s in streams] == [1, 1]

    @pytest.mark.asyncio
    async def test_failure_mid_stream_closes_every_source(self):
        streams = [
            TrackingStream([b"fine"]),
            TrackingStream([b"first", b"second"], fail_after=1),
            TrackingStream([b"never read"]),
        ]
        files = [UploadFile("text/plain", f"f{i}.txt", str(i), s) for i, s in enumerate(streams)]
        body = MultipartBody({"x": 1}, files)

        with pytest.raises(MultipartError) as exc_info:
            await read_body(body)
        await body.aclose()

        assert isinstance(exc_info.value.__cause__, OSError)
        assert [s.close_count for s in streams] == [1, 1, 1]

    @pytest.mark.asyncio
    async def test_close_without_reading(self):
        stream = TrackingStream([b"unused"])
        body = MultipartBody({"x": 1}, [UploadFile("text/plain", "f.txt", "1", stream)])

        await body.aclose()
        await body.aclose()

        assert stream.close_count == 1

    @pytest.mark.asyncio
    async def test_close_while_writer_is_blocked(self):
        stream = TrackingStream([b"a", b"b", b"c"])
        body = MultipartBody({"x": 1}, [UploadFile("text/plain", "f.txt", "1", stream)])

        reader = body.__aiter__()
        await reader.__anext__()
        await body.aclose()

        assert stream.close_count == 1
