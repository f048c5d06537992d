"""Tolerant decoders for values the API encodes inconsistently.

Booleans arrive as ``true``, ``"true"`` or ``"True"`` depending on the
endpoint, and Connect timestamps come either zoned (``...Z``) or as a local
time without zone. The annotated types below plug the decoders into pydantic
models.
"""

import re
from datetime import datetime, timezone
from typing import Annotated, Any, Optional

from pydantic import BeforeValidator, PlainSerializer  # type: ignore

_ZONED_TIME = re.compile(r"^(\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})(?:\.(\d+))?Z$")
_LOCAL_TIME = re.compile(r"^(\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})(?:\.(\d+))?$")
_SECONDS_FORMAT = "%Y-%m-%dT%H:%M:%S"


def decode_ds_bool(value: Any) -> bool:
    """Decode a vendor boolean.

    Only the string ``"true"`` (any case) is true. Every other string, a
    missing value or a value of another type is false; this never raises.
    Native booleans are kept as is.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.lower() == "true"
    return False


def decode_ds_time(value: Any) -> Optional[datetime]:
    """Decode a Connect timestamp.

    Values ending in ``Z`` are read as RFC 3339 UTC times, anything else as
    ``YYYY-MM-DDTHH:MM:SS[.fraction]`` without a zone. Fractions beyond
    microseconds are truncated. Empty values decode to None.

    Raises:
        ValueError: when the value matches neither format
    """
    if value is None or isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise ValueError(f"unsupported time value {value!r}")

    text = value.strip()
    if not text:
        return None

    zoned = text.endswith("Z")
    match = (_ZONED_TIME if zoned else _LOCAL_TIME).match(text)
    if match is None:
        raise ValueError(f"invalid time {value!r}")

    stamp = datetime.strptime(match.group(1), _SECONDS_FORMAT)
    fraction = match.group(2)
    if fraction:
        stamp = stamp.replace(microsecond=int(fraction[:6].ljust(6, "0")))
    if zoned:
        stamp = stamp.replace(tzinfo=timezone.utc)
    return stamp


def encode_ds_time(value: datetime) -> str:
    """Inverse of decode_ds_time, precise to the microsecond"""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    text = value.strftime(_SECONDS_FORMAT)
    if value.microsecond:
        text += f".{value.microsecond:06d}".rstrip("0")
    if value.tzinfo is not None:
        text += "Z"
    return text


def ds_query_time_format(value: datetime) -> str:
    """Format a datetime for date query parameters (MM/DD/YYYY HH:MM)"""
    return value.strftime("%m/%d/%Y %H:%M")


DSBool = Annotated[bool, BeforeValidator(decode_ds_bool)]

DSTime = Annotated[
    Optional[datetime],
    BeforeValidator(decode_ds_time),
    PlainSerializer(lambda value: encode_ds_time(value) if value is not None else None),
]
