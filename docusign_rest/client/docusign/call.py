import asyncio
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence
from urllib.parse import quote

from docusign_rest.client.docusign.multipart import UploadFile


@dataclass(frozen=True)
class QueryParam:
    """One query string option. Repeating a name adds another value."""

    name: str
    value: str


@dataclass
class Call:
    """One API invocation.

    Attributes:
        method: HTTP method
        path: URL relative to the account (``envelopes/{envelopeId}``) or, when
            it starts with ``/``, to the API root
        path_params: Values substituted into ``path``
        query: Query options in the order they are sent
        payload: Request body, a pydantic model or JSON serializable value
        files: Attachments; their presence makes the body multipart
        result_type: Type the JSON response decodes into
        raw: Hand back the open response instead of decoding it
    """

    method: str
    path: str
    path_params: Dict[str, str] = field(default_factory=dict)
    query: Sequence[QueryParam] = ()
    payload: Any = None
    files: Sequence[UploadFile] = ()
    result_type: Optional[Any] = None
    raw: bool = False

    def __post_init__(self) -> None:
        if self.raw and self.result_type is not None:
            raise ValueError("A call returns either a typed result or the raw response, not both")

    def resolved_path(self) -> str:
        """``path`` with each path parameter percent-encoded and substituted"""
        if not self.path_params:
            return self.path
        return self.path.format(**{key: quote(str(value), safe="") for key, value in self.path_params.items()})

    def query_pairs(self) -> List[tuple]:
        return [(param.name, param.value) for param in self.query]


@dataclass
class CancelScope:
    """Cancellation signal and optional deadline shared by one or more calls.

    ``cancel()`` aborts every call currently running under the scope; a
    ``timeout`` fixes a deadline measured from the scope's creation.
    """

    timeout: Optional[float] = None
    deadline: Optional[float] = field(default=None, init=False)
    _event: asyncio.Event = field(default_factory=asyncio.Event, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.timeout is not None:
            self.deadline = time.monotonic() + self.timeout

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    @property
    def expired(self) -> bool:
        return self.deadline is not None and time.monotonic() >= self.deadline

    def remaining(self) -> Optional[float]:
        """Seconds left before the deadline, None without one"""
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - time.monotonic())

    async def wait(self) -> None:
        await self._event.wait()
