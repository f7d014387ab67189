"""Data models for pull requests and their nested entities (Pydantic)."""

from octopulls.models.dates import RFC3339DateTime, format_rfc3339, parse_rfc3339
from octopulls.models.enums import Openness, SortDirection, SortType
from octopulls.models.milestone import Milestone
from octopulls.models.pull_request import PullRequest, PullRequestList
from octopulls.models.user import User

__all__ = [
    "Milestone",
    "Openness",
    "PullRequest",
    "PullRequestList",
    "RFC3339DateTime",
    "SortDirection",
    "SortType",
    "User",
    "format_rfc3339",
    "parse_rfc3339",
]
