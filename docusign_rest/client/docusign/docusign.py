import asyncio
import json
import logging
from functools import lru_cache
from typing import Any, Dict, Optional

from pydantic import BaseModel, TypeAdapter  # type: ignore

from docusign_rest.client.docusign.call import Call, CancelScope
from docusign_rest.client.docusign.context import ServiceContext
from docusign_rest.client.docusign.credentials import Credential
from docusign_rest.client.docusign.errors import (
    CallCancelledError,
    DeadlineExceededError,
    ResponseError,
)
from docusign_rest.client.docusign.multipart import MultipartBody
from docusign_rest.client.http.http_request import HTTPRequest
from docusign_rest.client.http.http_response import HTTPResponse
from docusign_rest.client.iclient import IClient
from docusign_rest.config.constants.http_status_code import SUCCESS_STATUSES
from docusign_rest.config.constants.service import USER_AGENT
from docusign_rest.models.common import DocuSignModel


@lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


def to_jsonable(payload: Any) -> Any:
    """Convert models (or lists of models) into JSON ready values"""
    if isinstance(payload, DocuSignModel):
        return payload.to_payload()
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(payload, (list, tuple)):
        return [to_jsonable(item) for item in payload]
    return payload


class DocuSignClient(IClient):
    """
    Executes Calls against the DocuSign REST API.

    The client is immutable once built; ``on_behalf_of`` returns a copy
    acting for another user. Calls run concurrently on one client.

    Args:
        credential: Credential authorizing every request
        context: Service context (transport, API root, call logger);
            production defaults when omitted
        on_behalf_of: Email or user id the calls act for
        logger: Optional logger instance
    """

    def __init__(
        self,
        credential: Credential,
        context: Optional[ServiceContext] = None,
        on_behalf_of: str = "",
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.credential = credential
        self.context = context or ServiceContext()
        self.act_as = on_behalf_of
        self.logger = logger or logging.getLogger(__name__)

    def get_client(self) -> "DocuSignClient":
        return self

    def on_behalf_of(self, user: str) -> "DocuSignClient":
        """Copy of this client whose calls act for ``user``"""
        return DocuSignClient(self.credential, self.context, user, self.logger)

    async def execute(self, call: Call, scope: Optional[CancelScope] = None) -> Any:
        """Run a call and decode its answer.

        Args:
            call: The call to run
            scope: Cancellation signal and deadline; the call is not
                cancellable without one
        Returns:
            The decoded ``call.result_type``, the open HTTPResponse for raw
            calls (the caller closes it), or None when no result is expected
        Raises:
            ResponseError: when the API answers with a status other than 200/201
            CallCancelledError: when the scope is cancelled before the answer
            DeadlineExceededError: when the scope's deadline passes first
            httpx.HTTPError: on transport failures
        """
        scope = scope or CancelScope()
        multipart: Optional[MultipartBody] = None
        headers: Dict[str, str] = {"User-Agent": USER_AGENT}
        body: Any = None

        if call.files:
            multipart = MultipartBody(to_jsonable(call.payload), call.files, logger=self.logger)
            headers["Content-Type"] = multipart.content_type
            body = multipart
        elif call.payload is not None:
            body = self._encode(call.payload)
            headers["Content-Type"] = "application/json"

        if not call.raw and multipart is None:
            headers["Accept"] = "application/json"

        try:
            self._check_scope(scope)
            request = HTTPRequest(
                url=call.resolved_path(),
                method=call.method,
                headers=headers,
                body=body,
                query_params=call.query_pairs(),
            )
            self.credential.authorize(request, self.act_as, self.context.base_url)
            if self.context.call_logger is not None:
                self.context.call_logger.log_request(request, body if isinstance(body, bytes) else None)

            self.logger.debug("DocuSign %s %s", request.method, request.url)
            return await self._dispatch(call, request, scope)
        finally:
            if multipart is not None:
                await multipart.aclose()

    def _encode(self, payload: Any) -> bytes:
        data = to_jsonable(payload)
        if self.context.pretty_print:
            return json.dumps(data, indent=4).encode("utf-8")
        return json.dumps(data, separators=(",", ":")).encode("utf-8")

    @staticmethod
    def _check_scope(scope: CancelScope) -> None:
        if scope.cancelled:
            raise CallCancelledError("call cancelled")
        if scope.expired:
            raise DeadlineExceededError("deadline exceeded")

    async def _dispatch(self, call: Call, request: HTTPRequest, scope: CancelScope) -> Any:
        """Race the round trip against the scope; cancellation wins ties"""
        task = asyncio.ensure_future(self._roundtrip(call, request))
        waiter = asyncio.ensure_future(scope.wait())
        try:
            done, _ = await asyncio.wait(
                {task, waiter},
                timeout=scope.remaining(),
                return_when=asyncio.FIRST_COMPLETED,
            )
        except asyncio.CancelledError:
            waiter.cancel()
            await asyncio.shield(self._abandon(task))
            raise
        waiter.cancel()

        if scope.cancelled:
            await self._abandon(task)
            raise CallCancelledError(f"{request.method} {request.url} cancelled")
        if task not in done or scope.expired:
            await self._abandon(task)
            raise DeadlineExceededError(f"{request.method} {request.url} deadline exceeded")
        return task.result()

    async def _abandon(self, task: "asyncio.Future[Any]") -> None:
        """Stop a round trip whose outcome is discarded, closing any response"""
        task.cancel()
        await asyncio.wait({task})
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            self.logger.debug("Discarded failure of a cancelled call: %s", error)
            return
        result = task.result()
        if isinstance(result, HTTPResponse):
            await result.aclose()

    async def _roundtrip(self, call: Call, request: HTTPRequest) -> Any:
        response = await self.context.http_client.execute(request, stream=True)
        if call.raw and response.status in SUCCESS_STATUSES:
            return response

        try:
            body = await response.bytes()
        finally:
            await response.aclose()

        if self.context.call_logger is not None:
            self.context.call_logger.log_response(response, body)

        if response.status not in SUCCESS_STATUSES:
            error = ResponseError.from_body(response.status, body)
            self.logger.warning("DocuSign %s %s failed: %s", request.method, request.url, error)
            raise error

        if call.result_type is None:
            return None
        return _adapter(call.result_type).validate_json(body)

    async def close(self) -> None:
        """Close the underlying transport"""
        await self.context.http_client.close()

    async def __aenter__(self) -> "DocuSignClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
