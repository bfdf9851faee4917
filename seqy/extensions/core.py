from __future__ import annotations
import inspect
import typing
from ..errors import NotIterableError
from ..suspension import (
    MapSuspension, FilterSuspension, TakeSuspension, DropSuspension,
    TakeWhileSuspension, DropWhileSuspension, FlattenSuspension,
    ConcatSuspension, ZipSuspension
)
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Seq

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def _takes_index(selector: Callable[..., Any]) -> bool:
    """whether the selector wants (value, index). builtins without a signature get the value only."""
    try:
        params = inspect.signature(selector).parameters.values()
    except (TypeError, ValueError):
        return False
    required = [p for p in params if p.kind in _POSITIONAL and p.default is inspect.Parameter.empty]
    return len(required) >= 2


class _CoreOperations(Generic[T]):
    """
    lazy combinators. each one returns a new sequence built by the receiver's
    builder; nothing is pulled until a terminal operation runs.
    """

    def map(self: 'Seq[T]', selector: Union[Selector[T, U], IndexedSelector[T, U]]) -> 'Seq[U]':
        """
        project each element to a new form.
        a selector with two required positional parameters also receives the
        zero-based position, so map(lambda v, i: ...) behaves like map_with_index.
        """
        if _takes_index(selector):
            return self.map_with_index(selector)
        return self.map_with_index(lambda item, _: selector(item))

    def map_with_index(self: 'Seq[T]', selector: IndexedSelector[T, U]) -> 'Seq[U]':
        """project each element using its zero-based position"""
        return self._derive(lambda: MapSuspension(iter(self), selector))

    def filter(self: 'Seq[T]', predicate: Predicate[T]) -> 'Seq[T]':
        """keep elements that satisfy the predicate"""
        return self._derive(lambda: FilterSuspension(iter(self), predicate))

    def filter_not(self: 'Seq[T]', predicate: Predicate[T]) -> 'Seq[T]':
        """keep elements that fail the predicate"""
        return self.filter(lambda item: not predicate(item))

    def collect(self: 'Seq[T]', predicate: Predicate[T]) -> Callable[[Selector[T, U]], 'Seq[U]']:
        """
        curried filter-then-map.
        seq(1, 'a', 2).collect(is_int)(double) -> seq(2, 4)
        """
        def with_selector(selector: Selector[T, U]) -> 'Seq[U]':
            return self.filter(predicate).map(selector)
        return with_selector

    def flat_map(self: 'Seq[T]', selector: Selector[T, Iterable[U]]) -> 'Seq[U]':
        """project each element to a sequence and flatten the results"""
        return self.map(selector).flatten()

    def flatten(self: 'Seq[T]') -> 'Seq[Any]':
        """drain nested sequences in place, one level deep"""
        return self._derive(lambda: FlattenSuspension(iter(self)))

    def concat(self: 'Seq[T]', other: Iterable[T]) -> 'Seq[T]':
        """all elements of this sequence followed by all elements of other"""
        if not hasattr(other, '__iter__'):
            raise NotIterableError(other)
        return self._derive(lambda: ConcatSuspension(iter(self), lambda: iter(other)))

    def take(self: 'Seq[T]', count: int) -> 'Seq[T]':
        """at most the first 'count' elements"""
        return self._derive(lambda: TakeSuspension(iter(self), count))

    def drop(self: 'Seq[T]', count: int) -> 'Seq[T]':
        """skip the first 'count' elements"""
        return self._derive(lambda: DropSuspension(iter(self), count))

    def take_while(self: 'Seq[T]', predicate: Predicate[T]) -> 'Seq[T]':
        """longest prefix whose elements satisfy the predicate"""
        return self._derive(lambda: TakeWhileSuspension(iter(self), predicate))

    def drop_while(self: 'Seq[T]', predicate: Predicate[T]) -> 'Seq[T]':
        """skip the longest prefix whose elements satisfy the predicate"""
        return self._derive(lambda: DropWhileSuspension(iter(self), predicate))

    def zip(self: 'Seq[T]', other: Iterable[U]) -> 'Seq[Tuple[T, U]]':
        """pair elements with another iterable, stopping at the shorter one"""
        if not hasattr(other, '__iter__'):
            raise NotIterableError(other)
        return self._derive(lambda: ZipSuspension(iter(self), iter(other)))

    def zip_with_index(self: 'Seq[T]') -> 'Seq[Tuple[T, int]]':
        return self.map_with_index(lambda item, index: (item, index))
