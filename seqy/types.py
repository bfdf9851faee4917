from abc import ABC, abstractmethod
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, NamedTuple
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
IndexedSelector = Callable[[T, int], U]
KeySelector = Callable[[T], K]
Accumulator = Callable[[U, T], U]
IteratorFactory = Callable[[], Iterator[T]]


class Step(NamedTuple):
    """one result of the suspension protocol: a value, or completion"""
    done: bool
    value: Any = None


DONE = Step(True)


def emit(value: Any) -> Step:
    return Step(False, value)


def pull(iterator: Iterator[T]) -> Step:
    """ask an iterator for its next step"""
    try:
        return Step(False, next(iterator))
    except StopIteration:
        return DONE


class Flattenable(ABC):
    """
    marker for containers that flatten() drains in place.
    sequences, options and deferred computations carry it.
    """

    @abstractmethod
    def __iter__(self) -> Iterator[Any]:
        pass
