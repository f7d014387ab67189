"""Typed client for the GitHub pull requests REST API."""

from octopulls.client import PullRequestClient
from octopulls.config import GitHubConfig
from octopulls.errors import (
    ClientClosed,
    DecodeError,
    GitHubError,
    HTTPStatusError,
    NotFoundError,
    RequestCancelled,
    TransportError,
)
from octopulls.models import Milestone, Openness, PullRequest, SortDirection, SortType, User
from octopulls.response import Failure, RequestHandle, Response, Success

__all__ = [
    "ClientClosed",
    "DecodeError",
    "Failure",
    "GitHubConfig",
    "GitHubError",
    "HTTPStatusError",
    "Milestone",
    "NotFoundError",
    "Openness",
    "PullRequest",
    "PullRequestClient",
    "RequestCancelled",
    "RequestHandle",
    "Response",
    "SortDirection",
    "SortType",
    "Success",
    "TransportError",
    "User",
]
