"""optional values: Some(value) or Nothing()."""
from __future__ import annotations

import typing
from dataclasses import dataclass

from .equality import eq, is_nan
from .errors import NoSuchElementError
from .types import *

if typing.TYPE_CHECKING:
    from .sequence import Seq


class Option(Flattenable, Generic[T]):
    """a value that may be absent. iterating yields zero or one element."""

    def is_some(self) -> bool:
        return isinstance(self, Some)

    def is_empty(self) -> bool:
        return not self.is_some()

    @abstractmethod
    def get(self) -> T:
        pass

    @abstractmethod
    def get_or_else(self, default: T) -> T:
        pass

    @abstractmethod
    def map(self, selector: Selector[T, U]) -> 'Option[U]':
        pass

    @abstractmethod
    def flat_map(self, selector: Selector[T, 'Option[U]']) -> 'Option[U]':
        pass

    @abstractmethod
    def filter(self, predicate: Predicate[T]) -> 'Option[T]':
        pass

    @abstractmethod
    def or_else(self, alternative: 'Option[T]') -> 'Option[T]':
        pass

    def to_optional(self) -> Optional[T]:
        return self.get_or_else(None)

    def to_seq(self) -> 'Seq[T]':
        from .factories import from_iterable
        return from_iterable(self)


@dataclass(frozen=True, eq=False)
class Some(Option[T]):
    value: T

    def get(self) -> T:
        return self.value

    def get_or_else(self, default: T) -> T:
        return self.value

    def map(self, selector: Selector[T, U]) -> Option[U]:
        # a None or nan result means no value
        return option(selector(self.value))

    def flat_map(self, selector: Selector[T, Option[U]]) -> Option[U]:
        return selector(self.value)

    def filter(self, predicate: Predicate[T]) -> Option[T]:
        return self if predicate(self.value) else Nothing()

    def or_else(self, alternative: Option[T]) -> Option[T]:
        return self

    def __iter__(self) -> Iterator[T]:
        yield self.value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Some) and eq(self.value, other.value)

    def __hash__(self) -> int:
        # equal options must hash alike, so nan and unhashable values fall back to coarser keys
        if is_nan(self.value):
            return hash(('Some', 'nan'))
        try:
            return hash(('Some', self.value))
        except TypeError:
            return hash(('Some', type(self.value)))


class Nothing(Option[Any]):
    def get(self) -> Any:
        raise NoSuchElementError("Nothing has no value")

    def get_or_else(self, default: T) -> T:
        return default

    def map(self, selector: Selector[Any, U]) -> Option[U]:
        return self

    def flat_map(self, selector: Selector[Any, Option[U]]) -> Option[U]:
        return self

    def filter(self, predicate: Predicate[Any]) -> Option[Any]:
        return self

    def or_else(self, alternative: Option[T]) -> Option[T]:
        return alternative

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Nothing)

    def __hash__(self) -> int:
        return hash('Nothing')

    def __repr__(self) -> str:
        return "Nothing()"


def option(value: Optional[T]) -> Option[T]:
    """Some(value), or Nothing() for None and nan"""
    if value is None or is_nan(value):
        return Nothing()
    return Some(value)
