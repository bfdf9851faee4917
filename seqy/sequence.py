from __future__ import annotations

import logging
from collections.abc import Sized

from .config import config
from .equality import eq
from .errors import NotIterableError
from .suspension import Deferred
from .types import *

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor

logger = logging.getLogger(__name__)


# --- base sequence implementation ---

class _BaseSequence(Flattenable, Generic[T]):
    def __init__(self, source: Iterable[T], length: Optional[int] = None):
        """wrap a source; 'length' is given only when it is known up front"""
        self._source = source
        self._cached_length = length

    def __iter__(self) -> Iterator[T]:
        return iter(self._source)

    # --- construction ---

    @classmethod
    def _from_factory(cls, factory: IteratorFactory[U]) -> 'Seq[U]':
        """build a sequence of this class over a deferred iterator factory"""
        return cls(Deferred(factory))

    def _builder(self) -> Callable[[IteratorFactory[U]], 'Seq[U]']:
        """the factory combinators use to build their results"""
        return self._from_factory

    def _derive(self, factory: IteratorFactory[U]) -> 'Seq[U]':
        return self._builder()(factory)

    # --- terminal operations ---

    @property
    def size(self) -> int:
        """
        number of elements. sized sources answer in constant time, anything
        else is counted by a full traversal, which exhausts one-shot sources.
        """
        if self._cached_length is not None:
            return self._cached_length
        if isinstance(self._source, Sized):
            return len(self._source)

        count = 0
        for _ in self:
            count += 1
        logger.debug(f"counted {count} elements of {type(self._source).__name__} by traversal")
        if config.memoize_size:
            self._cached_length = count
        return count

    def contains(self, element: Any) -> bool:
        """whether some element equals 'element' (nan equals nan)"""
        for item in self:
            if eq(item, element):
                return True
        return False

    def exists(self, predicate: Predicate[T]) -> bool:
        """whether some element satisfies the predicate"""
        return self.filter(predicate).take(1).size == 1

    def equals(self, other: Iterable[Any]) -> bool:
        """
        element-wise equality, walking both sequences in lockstep.
        false as soon as a pair differs or one side ends first.
        """
        if not hasattr(other, '__iter__'):
            raise NotIterableError(other)
        if other is self:
            return True
        mine, theirs = iter(self), iter(other)
        while True:
            a, b = pull(mine), pull(theirs)
            if a.done or b.done:
                return a.done and b.done
            if not eq(a.value, b.value):
                return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}(source={type(self._source).__name__})"


# --- main sequence class ---

class Seq(
    _BaseSequence[T],
    _CoreOperations[T]
):
    """a lazy, chainable sequence over any iterable."""
    def __init__(self, source: Iterable[T], length: Optional[int] = None):
        super().__init__(source, length)
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)
