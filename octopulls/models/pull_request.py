"""Pull request record decoded from the GitHub REST API."""

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, TypeAdapter

from octopulls.models.dates import RFC3339DateTime
from octopulls.models.enums import Openness
from octopulls.models.milestone import Milestone
from octopulls.models.urls import AbsoluteURL
from octopulls.models.user import User


class PullRequest(BaseModel):
    """Pull request.

    Only ``id`` is required; every other field is None when the payload
    omits it. Instances are frozen: each decode yields a fresh value.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: StrictInt = Field(ge=0)
    url: AbsoluteURL | None = None
    html_url: AbsoluteURL | None = None
    diff_url: AbsoluteURL | None = None
    patch_url: AbsoluteURL | None = None
    issue_url: AbsoluteURL | None = None
    commits_url: AbsoluteURL | None = None
    review_comments_url: AbsoluteURL | None = None
    # URI template, e.g. ".../pulls/comments{/number}"
    review_comment_url: str | None = None
    comments_url: AbsoluteURL | None = None
    statuses_url: AbsoluteURL | None = None

    number: StrictInt | None = None
    state: Openness | None = None
    title: str | None = None
    body: str | None = None

    assignee: User | None = None
    milestone: Milestone | None = None
    user: User | None = None

    locked: StrictBool | None = None
    created_at: RFC3339DateTime | None = None
    updated_at: RFC3339DateTime | None = None
    closed_at: RFC3339DateTime | None = None
    merged_at: RFC3339DateTime | None = None

    def to_api(self) -> dict[str, Any]:
        """Encode back to the wire shape (absent fields omitted)."""
        return self.model_dump(mode="json", exclude_none=True)


PullRequestList = TypeAdapter(List[PullRequest])
