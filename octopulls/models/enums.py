"""Wire enumerations for pull request state and list ordering."""

from enum import Enum


class Openness(str, Enum):
    """Issue / pull request state. ALL is only meaningful as a list filter."""

    OPEN = "open"
    CLOSED = "closed"
    ALL = "all"


class SortType(str, Enum):
    """Sort key for listing pull requests."""

    CREATED = "created"
    UPDATED = "updated"
    POPULARITY = "popularity"
    LONG_RUNNING = "long-running"


class SortDirection(str, Enum):
    """Sort direction for listing pull requests."""

    ASC = "asc"
    DESC = "desc"
