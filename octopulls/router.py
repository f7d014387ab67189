"""Pull request routes: each logical operation mapped to one HTTP request.

Reads send their parameters as a query string; creating a pull request
sends a JSON body.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, Union
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field

from octopulls.config import GitHubConfig
from octopulls.models import Openness, SortDirection, SortType


class HTTPMethod(str, Enum):
    GET = "GET"
    POST = "POST"


class Encoding(str, Enum):
    """Where request parameters go."""

    QUERY = "query"
    JSON = "json"


class HTTPRequest(BaseModel):
    """Fully specified request, ready for a Transport."""

    model_config = ConfigDict(frozen=True)

    method: HTTPMethod
    url: str
    path: str
    params: Dict[str, Any] = Field(default_factory=dict)
    encoding: Encoding = Encoding.QUERY
    headers: Dict[str, str] = Field(default_factory=dict)
    timeout: float = 30

    def form_params(self) -> Dict[str, str]:
        """Parameters as flat strings; booleans in their text form."""
        out: Dict[str, str] = {}
        for key, value in self.params.items():
            if isinstance(value, bool):
                out[key] = "true" if value else "false"
            elif isinstance(value, Enum):
                out[key] = str(value.value)
            else:
                out[key] = str(value)
        return out


def _segment(value: object) -> str:
    return quote(str(value), safe="")


class PullRequestRoute(BaseModel, ABC):
    """Common part of every route: the connection config and target repo."""

    model_config = ConfigDict(frozen=True)

    configuration: GitHubConfig
    owner: str
    repository: str

    @property
    @abstractmethod
    def method(self) -> HTTPMethod: ...

    @property
    @abstractmethod
    def path(self) -> str: ...

    @property
    def params(self) -> Dict[str, Any]:
        return {}

    @property
    def encoding(self) -> Encoding:
        return Encoding.QUERY

    @property
    def repo_path(self) -> str:
        return f"repos/{_segment(self.owner)}/{_segment(self.repository)}"

    def headers(self) -> Dict[str, str]:
        config = self.configuration
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": config.api_version,
            "User-Agent": config.user_agent,
        }
        if config.token:
            headers["Authorization"] = f"Bearer {config.token}"
        return headers

    def request(self) -> HTTPRequest:
        """Build the request descriptor. Pure: no I/O."""
        path = self.path
        return HTTPRequest(
            method=self.method,
            url=f"{self.configuration.api_url.rstrip('/')}/{path}",
            path=path,
            params=self.params,
            encoding=self.encoding,
            headers=self.headers(),
            timeout=self.configuration.timeout,
        )


class ReadPullRequest(PullRequestRoute):
    """GET repos/{owner}/{repo}/pulls/{number}"""

    number: int

    @property
    def method(self) -> HTTPMethod:
        return HTTPMethod.GET

    @property
    def path(self) -> str:
        return f"{self.repo_path}/pulls/{_segment(self.number)}"


class ReadPullRequests(PullRequestRoute):
    """GET repos/{owner}/{repo}/pulls with state/sort/direction (and base)."""

    base: str | None = None
    state: Openness = Openness.OPEN
    sort: SortType = SortType.CREATED
    direction: SortDirection = SortDirection.DESC

    @property
    def method(self) -> HTTPMethod:
        return HTTPMethod.GET

    @property
    def path(self) -> str:
        return f"{self.repo_path}/pulls"

    @property
    def params(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {
            "state": self.state.value,
            "sort": self.sort.value,
            "direction": self.direction.value,
        }
        if self.base is not None:
            params["base"] = self.base
        return params


class WritePullRequest(PullRequestRoute):
    """POST repos/{owner}/{repo}/pulls with a JSON body."""

    title: str
    head: str
    base: str
    body: str | None = None
    maintainer_can_modify: bool | None = None

    @property
    def method(self) -> HTTPMethod:
        return HTTPMethod.POST

    @property
    def path(self) -> str:
        return f"{self.repo_path}/pulls"

    @property
    def encoding(self) -> Encoding:
        return Encoding.JSON

    @property
    def params(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {"title": self.title, "head": self.head, "base": self.base}
        if self.body is not None:
            params["body"] = self.body
        if self.maintainer_can_modify is not None:
            params["maintainer_can_modify"] = self.maintainer_can_modify
        return params


PullRequestRouter = Union[ReadPullRequest, ReadPullRequests, WritePullRequest]
