"""GitHub user (author, assignee, milestone creator)."""

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt

from octopulls.models.urls import AbsoluteURL


class User(BaseModel):
    """GitHub user as embedded in pull request payloads."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: StrictInt = Field(ge=0)
    login: str | None = None
    name: str | None = None
    email: str | None = None
    type: str | None = None
    site_admin: StrictBool | None = None
    avatar_url: AbsoluteURL | None = None
    gravatar_id: str | None = None
    html_url: AbsoluteURL | None = None
