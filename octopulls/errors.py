"""Errors raised by pull request API calls."""


class GitHubError(Exception):
    """Raised when a GitHub API call fails."""

    pass


class TransportError(GitHubError):
    """Network or connection failure; the transport's exception is the
    __cause__."""

    pass


class RequestCancelled(TransportError):
    """A dispatched call was cancelled before it was sent."""

    pass


class HTTPStatusError(GitHubError):
    """Non-2xx response."""

    def __init__(self, status_code: int, body: str = "", message: str | None = None) -> None:
        self.status_code = status_code
        self.body = body
        self.message = message or body or str(status_code)
        super().__init__(f"GitHub API error {status_code}: {self.message}")


class NotFoundError(HTTPStatusError):
    """404 response."""

    pass


class DecodeError(GitHubError):
    """Response body does not match the expected shape."""

    pass


class ClientClosed(GitHubError):
    """dispatch() was called after the client was closed."""

    pass
