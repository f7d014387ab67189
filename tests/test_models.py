"""Tests for octopulls.models (PullRequest decode, enums, RFC 3339 dates)."""

import json
from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from octopulls.models import (
    Milestone,
    Openness,
    PullRequest,
    PullRequestList,
    SortDirection,
    SortType,
    User,
    format_rfc3339,
    parse_rfc3339,
)

API = "https://api.github.com/repos/octo/hello-world"

FULL_PAYLOAD = {
    "id": 1,
    "url": f"{API}/pulls/42",
    "html_url": "https://github.com/octo/hello-world/pull/42",
    "diff_url": "https://github.com/octo/hello-world/pull/42.diff",
    "patch_url": "https://github.com/octo/hello-world/pull/42.patch",
    "issue_url": f"{API}/issues/42",
    "commits_url": f"{API}/pulls/42/commits",
    "review_comments_url": f"{API}/pulls/42/comments",
    "review_comment_url": f"{API}/pulls/comments{{/number}}",
    "comments_url": f"{API}/issues/42/comments",
    "statuses_url": f"{API}/statuses/6dcb09b5b57875f334f61aebed695e2e4193db5e",
    "number": 42,
    "state": "closed",
    "title": "Amazing new feature",
    "body": "Please pull these awesome changes in!",
    "assignee": {"id": 7, "login": "hubot", "type": "User", "site_admin": False},
    "milestone": {
        "id": 1002604,
        "number": 1,
        "state": "open",
        "title": "v1.0",
        "creator": {"id": 1, "login": "octocat"},
        "open_issues": 4,
        "closed_issues": 8,
        "created_at": "2011-04-10T20:09:31Z",
        "due_on": "2012-10-09T23:39:01Z",
    },
    "user": {"id": 1, "login": "octocat", "avatar_url": "https://github.com/images/octocat.gif"},
    "locked": False,
    "created_at": "2011-01-26T19:01:12Z",
    "updated_at": "2011-01-26T19:01:12Z",
    "closed_at": "2011-01-26T19:01:12Z",
    "merged_at": "2011-01-26T19:01:12Z",
    "head": {"ref": "new-topic"},
    "base": {"ref": "main"},
}


class TestPullRequestDecode:
    """PullRequest.model_validate on API payloads."""

    def test_minimal_payload(self) -> None:
        """id/number/state only: every other field is None."""
        pr = PullRequest.model_validate({"id": 1, "number": 42, "state": "open"})
        assert pr.id == 1
        assert pr.number == 42
        assert pr.state is Openness.OPEN
        for name in (
            "url",
            "html_url",
            "diff_url",
            "patch_url",
            "issue_url",
            "commits_url",
            "review_comments_url",
            "comments_url",
            "statuses_url",
            "created_at",
            "updated_at",
            "closed_at",
            "merged_at",
            "assignee",
            "milestone",
            "user",
            "locked",
            "title",
            "body",
        ):
            assert getattr(pr, name) is None, name

    def test_only_id(self) -> None:
        """A payload with just id decodes."""
        pr = PullRequest.model_validate({"id": 0})
        assert pr.id == 0
        assert pr.number is None
        assert pr.state is None

    def test_full_payload(self) -> None:
        """All known fields decode; unknown keys (head, base) are ignored."""
        pr = PullRequest.model_validate(FULL_PAYLOAD)
        assert pr.id == 1
        assert pr.state is Openness.CLOSED
        assert pr.html_url == "https://github.com/octo/hello-world/pull/42"
        assert pr.review_comment_url.endswith("{/number}")
        assert pr.created_at == datetime(2011, 1, 26, 19, 1, 12, tzinfo=timezone.utc)
        assert pr.merged_at == pr.closed_at
        assert pr.locked is False
        assert isinstance(pr.user, User)
        assert pr.user.login == "octocat"
        assert pr.assignee.login == "hubot"
        assert isinstance(pr.milestone, Milestone)
        assert pr.milestone.creator.login == "octocat"
        assert pr.milestone.due_on == datetime(2012, 10, 9, 23, 39, 1, tzinfo=timezone.utc)
        assert not hasattr(pr, "head")

    def test_null_values_are_absent(self) -> None:
        """JSON null decodes the same as a missing key."""
        pr = PullRequest.model_validate({"id": 5, "closed_at": None, "merged_at": None, "assignee": None})
        assert pr.closed_at is None
        assert pr.merged_at is None
        assert pr.assignee is None

    def test_missing_id_fails(self) -> None:
        with pytest.raises(ValidationError):
            PullRequest.model_validate({"number": 42, "state": "open"})

    def test_negative_id_fails(self) -> None:
        with pytest.raises(ValidationError):
            PullRequest.model_validate({"id": -1})

    def test_unknown_state_fails(self) -> None:
        """Enum values outside the wire mapping are rejected."""
        with pytest.raises(ValidationError):
            PullRequest.model_validate({"id": 1, "state": "merged"})

    def test_malformed_date_fails(self) -> None:
        with pytest.raises(ValidationError):
            PullRequest.model_validate({"id": 1, "created_at": "26/01/2011"})

    def test_numeric_date_fails(self) -> None:
        """Unix timestamps are not RFC 3339."""
        with pytest.raises(ValidationError):
            PullRequest.model_validate({"id": 1, "created_at": 1296068472})

    def test_date_without_offset_fails(self) -> None:
        with pytest.raises(ValidationError):
            PullRequest.model_validate({"id": 1, "created_at": "2011-01-26T19:01:12"})

    def test_relative_url_fails(self) -> None:
        with pytest.raises(ValidationError):
            PullRequest.model_validate({"id": 1, "html_url": "/octo/hello-world/pull/42"})

    def test_wrong_json_type_fails(self) -> None:
        with pytest.raises(ValidationError):
            PullRequest.model_validate({"id": 1, "user": "octocat"})

    @pytest.mark.parametrize(
        "payload",
        [
            {"id": "1"},
            {"id": 1.0},
            {"id": True},
            {"id": 1, "number": "42"},
            {"id": 1, "locked": "yes"},
            {"id": 1, "user": {"id": "7"}},
            {"id": 1, "milestone": {"id": 2, "open_issues": "4"}},
        ],
    )
    def test_wrong_scalar_type_fails(self, payload: dict) -> None:
        """Numbers and booleans are not coerced from other JSON types."""
        with pytest.raises(ValidationError):
            PullRequest.model_validate_json(json.dumps(payload))

    def test_frozen(self) -> None:
        """Decoded records cannot be mutated."""
        pr = PullRequest.model_validate({"id": 1, "title": "a"})
        with pytest.raises(ValidationError):
            pr.title = "b"

    def test_list_keeps_order(self) -> None:
        prs = PullRequestList.validate_python([{"id": 3}, {"id": 1}, {"id": 2}])
        assert [pr.id for pr in prs] == [3, 1, 2]


class TestPullRequestEncode:
    """to_api re-encodes a record in wire shape."""

    def test_to_api_omits_absent_fields(self) -> None:
        pr = PullRequest.model_validate({"id": 1, "number": 42, "state": "open"})
        assert pr.to_api() == {"id": 1, "number": 42, "state": "open"}

    def test_dates_rendered_rfc3339(self) -> None:
        pr = PullRequest.model_validate({"id": 1, "created_at": "2021-05-01T12:00:00Z"})
        assert pr.to_api()["created_at"] == "2021-05-01T12:00:00Z"

    def test_round_trip(self) -> None:
        """Decoding the encoded form yields an equal record."""
        pr = PullRequest.model_validate(FULL_PAYLOAD)
        assert PullRequest.model_validate(pr.to_api()) == pr

    def test_round_trip_json(self) -> None:
        pr = PullRequest.model_validate(FULL_PAYLOAD)
        assert PullRequest.model_validate_json(pr.model_dump_json(exclude_none=True)) == pr


class TestEnums:
    """Wire values of the enumerations."""

    def test_openness(self) -> None:
        assert [o.value for o in Openness] == ["open", "closed", "all"]

    def test_sort_type(self) -> None:
        assert SortType("long-running") is SortType.LONG_RUNNING
        assert SortType.POPULARITY.value == "popularity"

    def test_sort_direction(self) -> None:
        assert SortDirection.DESC.value == "desc"
        assert SortDirection.ASC.value == "asc"


class TestRFC3339:
    """parse_rfc3339 / format_rfc3339."""

    def test_parse_utc(self) -> None:
        assert parse_rfc3339("2021-05-01T12:00:00Z") == datetime(2021, 5, 1, 12, tzinfo=timezone.utc)

    def test_parse_offset(self) -> None:
        dt = parse_rfc3339("2021-05-01T14:00:00+02:00")
        assert dt.utcoffset() == timedelta(hours=2)
        assert dt == datetime(2021, 5, 1, 12, tzinfo=timezone.utc)

    def test_parse_fraction(self) -> None:
        """Fractions of any length are accepted (truncated to microseconds)."""
        assert parse_rfc3339("2021-05-01T12:00:00.5Z").microsecond == 500000
        assert parse_rfc3339("2021-05-01T12:00:00.123456789Z").microsecond == 123456

    def test_parse_rejects_garbage(self) -> None:
        for value in ("", "yesterday", "2021-05-01", "2021-05-01 12:00:00Z", 0, None):
            with pytest.raises(ValueError):
                parse_rfc3339(value)

    def test_format_utc_uses_z(self) -> None:
        assert format_rfc3339(datetime(2021, 5, 1, 12, tzinfo=timezone.utc)) == "2021-05-01T12:00:00Z"

    def test_format_keeps_offset(self) -> None:
        tz = timezone(timedelta(hours=-5))
        assert format_rfc3339(datetime(2021, 5, 1, 7, tzinfo=tz)) == "2021-05-01T07:00:00-05:00"
