import logging
from itertools import repeat as itertools_repeat
from .errors import NotIterableError, InvalidRangeError
from .range import RangeSeq
from .sequence import Seq
from .types import *

logger = logging.getLogger(__name__)


def from_iterable(source: Iterable[T]) -> Seq[T]:
    """wrap an iterable; sequences are returned as they are"""
    if isinstance(source, Seq):
        return source
    if not hasattr(source, '__iter__'):
        logger.debug(f"refusing to wrap non-iterable {type(source).__name__}")
        raise NotIterableError(source)
    return Seq(source)


def seq(*items: T) -> Seq[T]:
    """create sequence from the given elements"""
    return Seq(items)


def defer(factory: IteratorFactory[T]) -> Seq[T]:
    """
    create sequence from a function returning a fresh iterator.
    the function runs once per traversal, so the sequence is restartable
    whenever the iterators it returns are independent.
    """
    return Seq._from_factory(factory)


def from_range(*args: Any) -> RangeSeq:
    """
    create an arithmetic progression, like the builtin range:
    from_range(length), from_range(start, end), from_range(start, end, step).
    an end of None or inf never stops.
    """
    if len(args) == 1:
        return RangeSeq(0, args[0], 1)
    if len(args) in (2, 3):
        return RangeSeq(*args)
    raise InvalidRangeError(f"from_range takes 1 to 3 arguments, got {len(args)}")


def empty() -> Seq[Any]:
    """create empty sequence"""
    return Seq(())


def repeat(item: T, count: Optional[int] = None) -> Seq[T]:
    """the same item 'count' times, or forever when count is None"""
    if count is None:
        return defer(lambda: itertools_repeat(item))
    return defer(lambda: itertools_repeat(item, max(count, 0)))


def generate(generator_func: Callable[[], T], count: Optional[int] = None) -> Seq[T]:
    """call a function once per pulled element, forever when count is None"""
    def generated():
        produced = 0
        while count is None or produced < count:
            yield generator_func()
            produced += 1
    return defer(generated)


# --- aliases ---
wrap = from_iterable
S = from_iterable
