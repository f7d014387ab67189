"""Completion contract: one Success or Failure per dispatched call."""

import logging
from concurrent.futures import CancelledError, Future
from dataclasses import dataclass
from typing import Callable, Generic, NoReturn, TypeVar, Union

from octopulls.errors import RequestCancelled

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    error: Exception

    def unwrap(self) -> NoReturn:
        raise self.error


Response = Union[Success[T], Failure]
Completion = Callable[[Response], None]


def response_from_future(future: Future) -> Response:
    """Turn a finished (or cancelled) future into a Response."""
    try:
        return Success(future.result())
    except CancelledError:
        return Failure(RequestCancelled("request cancelled before it was sent"))
    except Exception as e:
        return Failure(e)


class RequestHandle:
    """Handle for a call started by PullRequestClient.dispatch.

    The completion (if any) runs exactly once, on the worker thread, or
    on the cancelling thread when the call is cancelled before it starts.
    """

    def __init__(self, future: Future, completion: Completion | None = None) -> None:
        self._future = future
        if completion is not None:
            future.add_done_callback(lambda f: self._deliver(f, completion))

    @staticmethod
    def _deliver(future: Future, completion: Completion) -> None:
        try:
            completion(response_from_future(future))
        except Exception:
            logger.exception("Completion callback raised")

    def cancel(self) -> bool:
        """Cancel if not started yet. A request already on the wire is not
        interrupted."""
        return self._future.cancel()

    def cancelled(self) -> bool:
        return self._future.cancelled()

    def done(self) -> bool:
        return self._future.done()

    def result(self, timeout: float | None = None) -> Response:
        """Wait for the call and return its Response."""
        try:
            self._future.exception(timeout=timeout)
        except CancelledError:
            pass
        return response_from_future(self._future)
