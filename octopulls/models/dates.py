"""RFC 3339 timestamps as used on the wire by the GitHub API."""

import re
from datetime import datetime, timedelta
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

_RFC3339_RE = re.compile(
    r"^(\d{4}-\d{2}-\d{2})[Tt](\d{2}:\d{2}:\d{2})(?:\.(\d+))?([Zz]|[+-]\d{2}:\d{2})$"
)


def parse_rfc3339(value: Any) -> datetime:
    """Parse an RFC 3339 string into an aware datetime.

    Fractional seconds beyond microseconds are truncated.

    Raises:
        ValueError: value is not a string, has no UTC offset, or is malformed.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            raise ValueError("datetime must be timezone-aware")
        return value
    if not isinstance(value, str):
        raise ValueError(f"expected RFC 3339 string, got {type(value).__name__}")
    m = _RFC3339_RE.match(value)
    if not m:
        raise ValueError(f"not an RFC 3339 timestamp: {value!r}")
    date, time, fraction, offset = m.groups()
    if fraction:
        time = f"{time}.{fraction[:6].ljust(6, '0')}"
    if offset in ("Z", "z"):
        offset = "+00:00"
    return datetime.fromisoformat(f"{date}T{time}{offset}")


def format_rfc3339(value: datetime) -> str:
    """Render an aware datetime as RFC 3339, using Z for UTC."""
    s = value.isoformat()
    if value.utcoffset() == timedelta(0):
        s = s[: -len("+00:00")] + "Z"
    return s


RFC3339DateTime = Annotated[
    datetime,
    BeforeValidator(parse_rfc3339),
    PlainSerializer(format_rfc3339, return_type=str, when_used="json"),
]
