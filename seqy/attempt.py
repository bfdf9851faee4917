"""
deferred computations that capture failures.

attempt(thunk) does not run the thunk; the first read of the outcome does,
exactly once. chaining on a failure skips the chained function and keeps
the original error.
"""
from __future__ import annotations

import logging
import typing
from dataclasses import dataclass

from .errors import NoSuchElementError
from .option import Option, Nothing, option
from .types import *

if typing.TYPE_CHECKING:
    from .sequence import Seq

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failure:
    error: Exception


Outcome = Union[Success[T], Failure]


class Try(Flattenable, Generic[T]):
    def __init__(self, thunk: Callable[[], T]):
        self._thunk = thunk
        self._outcome: Optional[Outcome] = None

    @classmethod
    def success(cls, value: T) -> 'Try[T]':
        return cls(lambda: value)

    @classmethod
    def failure(cls, error: Exception) -> 'Try[Any]':
        def fail():
            raise error
        return cls(fail)

    @property
    def outcome(self) -> Outcome:
        """run the computation on first access and keep its result"""
        if self._outcome is None:
            try:
                self._outcome = Success(self._thunk())
            except Exception as e:
                logger.debug(f"deferred computation failed: {type(e).__name__}: {e}")
                self._outcome = Failure(e)
        return self._outcome

    def is_success(self) -> bool:
        return isinstance(self.outcome, Success)

    def is_failure(self) -> bool:
        return isinstance(self.outcome, Failure)

    def get(self) -> T:
        """the value, or re-raise the captured error"""
        outcome = self.outcome
        if isinstance(outcome, Failure):
            raise outcome.error
        return outcome.value

    def get_or_else(self, default: T) -> T:
        outcome = self.outcome
        return outcome.value if isinstance(outcome, Success) else default

    def error(self) -> Exception:
        outcome = self.outcome
        if isinstance(outcome, Success):
            raise NoSuchElementError("a successful computation has no error")
        return outcome.error

    # --- chaining ---

    def map(self, selector: Selector[T, U]) -> 'Try[U]':
        return Try(lambda: selector(self.get()))

    def flat_map(self, selector: Selector[T, 'Try[U]']) -> 'Try[U]':
        return Try(lambda: selector(self.get()).get())

    def recover(self, handler: Callable[[Exception], T]) -> 'Try[T]':
        """replace a failure with a value computed from its error"""
        def recovered():
            outcome = self.outcome
            if isinstance(outcome, Failure):
                return handler(outcome.error)
            return outcome.value
        return Try(recovered)

    # --- conversions ---

    def to_option(self) -> Option[T]:
        outcome = self.outcome
        return option(outcome.value) if isinstance(outcome, Success) else Nothing()

    def to_seq(self) -> 'Seq[T]':
        from .factories import from_iterable
        return from_iterable(self)

    def __iter__(self) -> Iterator[T]:
        outcome = self.outcome
        if isinstance(outcome, Success):
            yield outcome.value

    def __repr__(self) -> str:
        if self._outcome is None:
            return "Try(<pending>)"
        return f"Try({self._outcome!r})"


def attempt(thunk: Callable[[], T]) -> Try[T]:
    """wrap a computation without running it"""
    return Try(thunk)
