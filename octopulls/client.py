"""Pull request client: read one, list, and create pull requests."""

import json
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, List, TypeVar

from pydantic import TypeAdapter, ValidationError

from octopulls.config import GitHubConfig
from octopulls.errors import ClientClosed, DecodeError, HTTPStatusError, NotFoundError
from octopulls.models import Openness, PullRequest, PullRequestList, SortDirection, SortType
from octopulls.response import Completion, RequestHandle
from octopulls.router import PullRequestRouter, ReadPullRequest, ReadPullRequests, WritePullRequest
from octopulls.transport import HTTPResponse, RequestsTransport, Transport

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _require_text(name: str, value: Any) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{name} must be a non-empty string")


def _optional_text(name: str, value: Any) -> None:
    if value is not None:
        _require_text(name, value)


def _raise_for_status(resp: HTTPResponse, path: str) -> None:
    if resp.ok:
        return
    msg = None
    try:
        data = json.loads(resp.text)
        if isinstance(data, dict) and "message" in data:
            msg = str(data["message"])
    except ValueError:
        pass
    logger.warning("GitHub API %s returned %s", path, resp.status_code)
    if resp.status_code == 404:
        raise NotFoundError(404, resp.text, msg or f"Not found: {path}")
    raise HTTPStatusError(resp.status_code, resp.text, msg or resp.reason or None)


def _decode(adapter: TypeAdapter, resp: HTTPResponse, path: str) -> Any:
    try:
        return adapter.validate_json(resp.text)
    except ValidationError as e:
        logger.warning("Cannot decode response of %s: %s", path, e)
        raise DecodeError(f"Unexpected response shape from {path}: {e}") from e


_single = TypeAdapter(PullRequest)


class PullRequestClient:
    """GitHub pull request API.

    Each operation is one stateless round-trip through the transport.
    Errors are raised; use dispatch() to get a completion callback instead.
    """

    def __init__(
        self,
        configuration: GitHubConfig | None = None,
        transport: Transport | None = None,
        max_workers: int = 4,
    ) -> None:
        self.configuration = configuration or GitHubConfig()
        self._transport = transport or RequestsTransport()
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="octopulls")
        self._closed = False

    def _load(self, route: PullRequestRouter, adapter: TypeAdapter) -> Any:
        request = route.request()
        resp = self._transport.send(request)
        _raise_for_status(resp, request.path)
        return _decode(adapter, resp, request.path)

    def pull_request(self, owner: str, repository: str, number: int) -> PullRequest:
        """Fetch a single pull request.

        Args:
            owner: User or organization that owns the repository
            repository: Repository name
            number: Pull request number

        Raises:
            NotFoundError: No such pull request (404)
            HTTPStatusError: Any other non-2xx response
            DecodeError: Body is not a pull request
            TransportError: Connection failure
        """
        _require_text("owner", owner)
        _require_text("repository", repository)
        if isinstance(number, bool) or not isinstance(number, int) or number < 0:
            raise ValueError("number must be a non-negative integer")
        route = ReadPullRequest(
            configuration=self.configuration, owner=owner, repository=repository, number=number
        )
        return self._load(route, _single)

    def pull_requests(
        self,
        owner: str,
        repository: str,
        base: str | None = None,
        state: Openness = Openness.OPEN,
        sort: SortType = SortType.CREATED,
        direction: SortDirection = SortDirection.DESC,
    ) -> List[PullRequest]:
        """List pull requests in the order the API returns them.

        Args:
            base: Only pull requests into this base branch
            state: open (default), closed or all
            sort: created (default), updated, popularity or long-running
            direction: desc (default) or asc
        """
        _require_text("owner", owner)
        _require_text("repository", repository)
        _optional_text("base", base)
        route = ReadPullRequests(
            configuration=self.configuration,
            owner=owner,
            repository=repository,
            base=base,
            state=Openness(state),
            sort=SortType(sort),
            direction=SortDirection(direction),
        )
        return self._load(route, PullRequestList)

    def create_pull_request(
        self,
        owner: str,
        repository: str,
        title: str,
        head: str,
        base: str,
        body: str | None = None,
        maintainer_can_modify: bool | None = None,
    ) -> PullRequest:
        """Open a pull request from head into base; returns the created one."""
        _require_text("owner", owner)
        _require_text("repository", repository)
        _require_text("title", title)
        _require_text("head", head)
        _require_text("base", base)
        _optional_text("body", body)
        route = WritePullRequest(
            configuration=self.configuration,
            owner=owner,
            repository=repository,
            title=title,
            head=head,
            base=base,
            body=body,
            maintainer_can_modify=maintainer_can_modify,
        )
        return self._load(route, _single)

    def dispatch(
        self,
        call: Callable[..., T],
        *args: Any,
        completion: Completion | None = None,
        **kwargs: Any,
    ) -> RequestHandle:
        """Run one of this client's operations on a worker thread.

        completion receives exactly one Success or Failure; after close()
        that is Failure(ClientClosed).
        Example: client.dispatch(client.pull_request, "octo", "hello-world", 42, completion=cb)
        """
        if self._closed:
            future: Future = Future()
            future.set_exception(ClientClosed("client is closed"))
        else:
            future = self._executor.submit(call, *args, **kwargs)
        return RequestHandle(future, completion)

    def close(self) -> None:
        self._closed = True
        self._executor.shutdown(wait=True)
        self._transport.close()

    def __enter__(self) -> "PullRequestClient":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
