from enum import Enum


class HttpStatusCode(Enum):
    """Constants for HTTP status codes returned by the eSignature API"""

    # 2xx Success
    OK = 200
    SUCCESS = 200  # Alias for OK
    CREATED = 201
    NO_CONTENT = 204

    # 4xx Client Errors
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    TOO_MANY_REQUESTS = 429

    # 5xx Server Errors
    INTERNAL_SERVER_ERROR = 500
    SERVICE_UNAVAILABLE = 503


# Any other status, 204 included, is answered with a ResponseError.
SUCCESS_STATUSES = frozenset({HttpStatusCode.OK.value, HttpStatusCode.CREATED.value})
