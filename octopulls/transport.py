"""HTTP transports: send an HTTPRequest, return status and body."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

import requests

from octopulls.errors import TransportError
from octopulls.router import Encoding, HTTPRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HTTPResponse:
    """Raw response as returned by a transport."""

    status_code: int
    text: str = ""
    reason: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class Transport(ABC):
    """Pluggable HTTP stack used by PullRequestClient."""

    @abstractmethod
    def send(self, request: HTTPRequest) -> HTTPResponse:
        """Issue the request and return the raw response.

        Raises:
            TransportError: the request could not be completed (connection
                refused, DNS, timeout). HTTP error statuses are NOT raised here.
        """
        ...

    def close(self) -> None:
        """Release pooled connections. Override if needed."""
        return None


class RequestsTransport(Transport):
    """Transport backed by a requests.Session."""

    def __init__(self, session: requests.Session | None = None) -> None:
        self._session = session or requests.Session()

    def send(self, request: HTTPRequest) -> HTTPResponse:
        kwargs: dict = {"headers": request.headers, "timeout": request.timeout}
        if request.params:
            if request.encoding == Encoding.JSON:
                kwargs["json"] = request.params
            else:
                kwargs["params"] = request.form_params()
        logger.debug("%s %s params=%s", request.method.value, request.url, request.params)
        try:
            resp = self._session.request(request.method.value, request.url, **kwargs)
        except requests.RequestException as e:
            raise TransportError(f"{request.method.value} {request.path} failed: {e}") from e
        logger.debug("%s %s -> %s", request.method.value, request.path, resp.status_code)
        return HTTPResponse(status_code=resp.status_code, text=resp.text or "", reason=resp.reason or "")

    def close(self) -> None:
        self._session.close()
