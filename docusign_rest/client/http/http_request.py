from typing import Any, Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field  # type: ignore


class HTTPRequest(BaseModel):
    """HTTP request
    Args:
        url: The URL of the request, absolute once a credential has resolved it
        method: The HTTP method to use
        headers: The headers to send with the request
        body: The body of the request. A dict is sent as JSON (or as a form when
            the Content-Type says so), bytes and async byte iterables are sent as is
        query_params: Ordered name/value pairs, repeated names are kept
    """
    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    url: str = Field(alias="uri")
    method: str = Field(default="GET")
    headers: Dict[str, str] = Field(default_factory=dict)
    body: Any = None
    query_params: List[Tuple[str, str]] = Field(default_factory=list, alias="query")
