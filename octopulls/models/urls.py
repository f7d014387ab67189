"""Absolute http(s) URLs kept as plain strings."""

from typing import Annotated
from urllib.parse import urlsplit

from pydantic import AfterValidator


def check_absolute_url(value: str) -> str:
    parts = urlsplit(value)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise ValueError(f"not an absolute URL: {value!r}")
    return value


AbsoluteURL = Annotated[str, AfterValidator(check_absolute_url)]
