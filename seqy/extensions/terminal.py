from __future__ import annotations
import math
import typing
import numpy as np
import pandas as pd
from functools import reduce
from ..errors import NoSuchElementError, UnboundedSequenceError
from ..option import Option, Some, Nothing, option
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Seq


class TerminalAccessor(Generic[T]):
    """
    operations that drive the sequence. every call pulls from the source,
    so a sequence over a one-shot iterator can only be drained once.
    """

    def __init__(self, seq_instance: 'Seq[T]'):
        self._seq = seq_instance

    # --- conversions ---

    def list(self) -> List[T]:
        """materialize into a new list (never returns for unbounded sequences)"""
        return [item for item in self._seq]

    def tuple(self) -> Tuple[T, ...]:
        return tuple(self.list())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self.list())

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._seq}

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self.list())

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self.list())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self.list())

    # --- aggregates ---

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements, or the elements satisfying a predicate"""
        if predicate is None:
            size = self._seq.size
            if math.isinf(size):
                raise UnboundedSequenceError("cannot count an unbounded sequence")
            return size
        return sum(1 for x in self._seq if predicate(x))

    def is_empty(self) -> bool:
        return pull(iter(self._seq)).done

    def forall(self, predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition"""
        return not self._seq.exists(lambda item: not predicate(item))

    def foreach(self, action: Callable[[T], Any]) -> 'Seq[T]':
        """
        run an action on every element for its side-effects.
        this is EAGER. returns the original sequence.
        """
        for item in self._seq:
            action(item)
        return self._seq

    def fold_left(self, seed: U, accumulator: Accumulator[U, T]) -> U:
        return reduce(accumulator, self._seq, seed)

    def reduce(self, accumulator: Accumulator[T, T]) -> T:
        """fold without a seed; the sequence must not be empty"""
        iterator = iter(self._seq)
        first = pull(iterator)
        if first.done:
            raise NoSuchElementError("cannot reduce an empty sequence")
        return reduce(accumulator, iterator, first.value)

    def mk_string(self, separator: str = '', start: str = '', end: str = '') -> str:
        return start + separator.join(str(item) for item in self._seq) + end

    # --- lookups ---

    def head_option(self) -> Option[T]:
        """first element, if any"""
        n = pull(iter(self._seq))
        return Nothing() if n.done else Some(n.value)

    def find(self, predicate: Predicate[T]) -> Option[T]:
        """first element satisfying the predicate, if any"""
        return self._seq.filter(predicate).to.head_option()

    def collect_first(self, predicate: Predicate[T]) -> Callable[[Selector[T, U]], Option[U]]:
        """
        curried lookup: the selector applied to the first element satisfying
        the predicate. a None or nan result is treated as no value.
        """
        def with_selector(selector: Selector[T, U]) -> Option[U]:
            return self.find(predicate).flat_map(lambda item: option(selector(item)))
        return with_selector
