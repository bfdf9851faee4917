from __future__ import annotations

import logging
import math

from .equality import eq, is_number, is_finite
from .errors import InvalidRangeError
from .sequence import Seq
from .suspension import Suspension, Deferred
from .types import *

logger = logging.getLogger(__name__)

Number = Union[int, float]


def _within(value: Number, end: Number, step: Number) -> bool:
    return value < end if step > 0 else value > end


def _range_length(start: Number, end: Number, step: Number) -> Number:
    """number of values start + i * step still inside the bound; inf when unbounded"""
    if not _within(start, end, step):
        return 0
    if math.isinf(end):
        return math.inf
    if all(isinstance(x, int) for x in (start, end, step)):
        return -((start - end) // step)

    length = math.ceil((end - start) / step)
    # float rounding can put the estimate one off either way
    while length > 0 and not _within(start + (length - 1) * step, end, step):
        length -= 1
    while _within(start + length * step, end, step):
        length += 1
    return length


class _RangeSuspension(Suspension[Number]):
    def __init__(self, start: Number, step: Number, length: Number):
        super().__init__()
        self._start = start
        self._increment = step
        self._length = length
        self._index = 0

    def step(self) -> Step:
        if self._index >= self._length:
            return DONE
        value = self._start + self._index * self._increment
        self._index += 1
        return emit(value)


class RangeSeq(Seq[Number]):
    """
    an arithmetic progression generated from its bounds. 'end' is exclusive
    and may be unbounded (None or +/-inf in the direction of 'step').
    """

    def __init__(self, start: Number, end: Optional[Number] = None, step: Number = 1):
        if not is_number(step) or step == 0 or math.isinf(step):
            raise InvalidRangeError(f"range step must be a finite non-zero number, got {step!r}")
        if not is_finite(start):
            raise InvalidRangeError(f"range start must be a finite number, got {start!r}")
        if end is None:
            end = math.inf if step > 0 else -math.inf
        if not is_number(end):
            raise InvalidRangeError(f"range end must be a number or None, got {end!r}")

        self.start = start
        self.end = end
        self.step = step
        length = _range_length(start, end, step)
        super().__init__(Deferred(lambda: _RangeSuspension(start, step, length)), length)
        logger.debug(f"created {self!r} with {length} values")

    @property
    def is_bounded(self) -> bool:
        return not math.isinf(self._cached_length)

    def _builder(self) -> Callable[[IteratorFactory[U]], Seq[U]]:
        # mapped or filtered progressions are plain sequences
        return Seq._from_factory

    def take(self, count: int) -> 'RangeSeq':
        """first 'count' values, still as a range"""
        count = max(count, 0)
        if count >= self._cached_length:
            return RangeSeq(self.start, self.end, self.step)
        return RangeSeq(self.start, self.start + count * self.step, self.step)

    def contains(self, element: Any) -> bool:
        """arithmetic membership test; terminates on unbounded ranges"""
        if not is_finite(element):
            return False
        offset = element - self.start
        if all(isinstance(x, int) for x in (element, self.start, self.step)):
            index, remainder = divmod(offset, self.step)
            return remainder == 0 and 0 <= index < self._cached_length
        index = round(offset / self.step)
        if index < 0 or index >= self._cached_length:
            return False
        return eq(self.start + index * self.step, element)

    def __repr__(self) -> str:
        return f"RangeSeq(start={self.start}, end={self.end}, step={self.step})"
