"""
state machines that drive derived sequences.

every machine implements step() and is adapted to the python iterator
protocol by Suspension. once a machine reports completion it is never
stepped again.
"""
from enum import Enum

from .config import config
from .types import *


class Suspension(Iterator[T]):
    """python iterator over a step() state machine"""

    def __init__(self):
        self._completed = False

    def step(self) -> Step:
        raise NotImplementedError

    def __iter__(self) -> 'Suspension[T]':
        return self

    def __next__(self) -> T:
        if self._completed:
            raise StopIteration
        result = self.step()
        if result.done:
            self._completed = True
            raise StopIteration
        return result.value


class Deferred(Iterable[T]):
    """an iterable that builds a fresh iterator from a factory on every pass"""

    def __init__(self, factory: IteratorFactory[T]):
        self._factory = factory

    def __iter__(self) -> Iterator[T]:
        return self._factory()


def is_nested(value: Any) -> bool:
    """whether flatten() should drain this value in place"""
    if isinstance(value, Flattenable):
        return True
    if isinstance(value, config.atomic_types):
        return False
    return hasattr(value, '__iter__')


# --- one-source machines ---

class MapSuspension(Suspension[U]):
    def __init__(self, source: Iterator[T], selector: IndexedSelector[T, U]):
        super().__init__()
        self._source = source
        self._selector = selector
        self._index = -1

    def step(self) -> Step:
        n = pull(self._source)
        if n.done:
            return DONE
        self._index += 1
        return emit(self._selector(n.value, self._index))


class FilterSuspension(Suspension[T]):
    def __init__(self, source: Iterator[T], predicate: Predicate[T]):
        super().__init__()
        self._source = source
        self._predicate = predicate

    def step(self) -> Step:
        while True:
            n = pull(self._source)
            if n.done or self._predicate(n.value):
                return n


class TakeSuspension(Suspension[T]):
    def __init__(self, source: Iterator[T], count: int):
        super().__init__()
        self._source = source
        self._remaining = max(count, 0)

    def step(self) -> Step:
        if self._remaining <= 0:
            return DONE
        n = pull(self._source)
        if n.done:
            return DONE
        self._remaining -= 1
        return n


class DropSuspension(Suspension[T]):
    def __init__(self, source: Iterator[T], count: int):
        super().__init__()
        self._source = source
        self._to_skip = max(count, 0)

    def step(self) -> Step:
        while self._to_skip > 0:
            self._to_skip -= 1
            if pull(self._source).done:
                return DONE
        return pull(self._source)


class TakeWhileSuspension(Suspension[T]):
    def __init__(self, source: Iterator[T], predicate: Predicate[T]):
        super().__init__()
        self._source = source
        self._predicate = predicate

    def step(self) -> Step:
        n = pull(self._source)
        if n.done or not self._predicate(n.value):
            return DONE
        return n


class DropWhileSuspension(Suspension[T]):
    def __init__(self, source: Iterator[T], predicate: Predicate[T]):
        super().__init__()
        self._source = source
        self._predicate = predicate
        self._dropping = True

    def step(self) -> Step:
        n = pull(self._source)
        while self._dropping and not n.done and self._predicate(n.value):
            n = pull(self._source)
        self._dropping = False
        return n


# --- two-source machines ---

class FlattenState(Enum):
    IN_MAIN = 'in_main'
    IN_SUB = 'in_sub'


class FlattenSuspension(Suspension[Any]):
    """drains each nested value in place before advancing the outer source"""

    def __init__(self, source: Iterator[Any]):
        super().__init__()
        self._source = source
        self._sub: Optional[Iterator[Any]] = None
        self.state = FlattenState.IN_MAIN

    def step(self) -> Step:
        while True:
            if self.state is FlattenState.IN_MAIN:
                n = pull(self._source)
                if n.done:
                    return DONE
                if not is_nested(n.value):
                    return n
                self._sub = iter(n.value)
                self.state = FlattenState.IN_SUB
                continue

            n = pull(self._sub)
            if not n.done:
                return n
            self._sub = None
            self.state = FlattenState.IN_MAIN


class ConcatState(Enum):
    FIRST = 'first'
    SECOND = 'second'


class ConcatSuspension(Suspension[T]):
    """all of the first source, then all of the second"""

    def __init__(self, first: Iterator[T], second_factory: IteratorFactory[T]):
        super().__init__()
        self._first = first
        self._second_factory = second_factory
        self._second: Optional[Iterator[T]] = None
        self.state = ConcatState.FIRST

    def step(self) -> Step:
        if self.state is ConcatState.FIRST:
            n = pull(self._first)
            if not n.done:
                return n
            self.state = ConcatState.SECOND
            self._second = self._second_factory()
        return pull(self._second)


class ZipSuspension(Suspension[Tuple[T, U]]):
    """pairs elements until either source completes"""

    def __init__(self, left: Iterator[T], right: Iterator[U]):
        super().__init__()
        self._left = left
        self._right = right

    def step(self) -> Step:
        a = pull(self._left)
        if a.done:
            return DONE
        b = pull(self._right)
        if b.done:
            return DONE
        return emit((a.value, b.value))
