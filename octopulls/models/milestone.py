"""Repository milestone."""

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from octopulls.models.dates import RFC3339DateTime
from octopulls.models.enums import Openness
from octopulls.models.urls import AbsoluteURL
from octopulls.models.user import User


class Milestone(BaseModel):
    """Milestone a pull request is attached to."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: StrictInt = Field(ge=0)
    number: StrictInt | None = None
    state: Openness | None = None
    title: str | None = None
    description: str | None = None
    creator: User | None = None
    open_issues: StrictInt | None = None
    closed_issues: StrictInt | None = None
    url: AbsoluteURL | None = None
    html_url: AbsoluteURL | None = None
    labels_url: AbsoluteURL | None = None
    created_at: RFC3339DateTime | None = None
    updated_at: RFC3339DateTime | None = None
    closed_at: RFC3339DateTime | None = None
    due_on: RFC3339DateTime | None = None
