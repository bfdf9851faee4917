r"""
'    ______________________  __
'   /   _____/\_   _____/  \/  \  ___.__.
'   \_____  \  |    __)_ \     / <   |  |
'   /        \ |        \/     \  \___  |
'  /_______  //_______  /\__/\  \ / ____|
'          \/         \/      \_/ \/
"""

# expose the main classes
from .sequence import Seq
from .range import RangeSeq

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    seq,
    defer,
    repeat,
    empty,
    generate,
    wrap,
    S
)

# expose the peer monads
from .option import Option, Some, Nothing, option
from .attempt import Try, Success, Failure, attempt

# expose supporting pieces
from .config import SeqConfig, configure, reset_config
from .equality import eq, is_nan
from .errors import (
    SeqError,
    NotIterableError,
    InvalidRangeError,
    UnboundedSequenceError,
    NoSuchElementError
)
from .types import Step, DONE, Flattenable

# define what `import *` does
__all__ = [
    "Seq",
    "RangeSeq",
    "from_iterable",
    "from_range",
    "seq",
    "defer",
    "repeat",
    "empty",
    "generate",
    "wrap",
    "S",
    "Option",
    "Some",
    "Nothing",
    "option",
    "Try",
    "Success",
    "Failure",
    "attempt",
    "SeqConfig",
    "configure",
    "reset_config",
    "eq",
    "is_nan",
    "SeqError",
    "NotIterableError",
    "InvalidRangeError",
    "UnboundedSequenceError",
    "NoSuchElementError",
    "Step",
    "DONE",
    "Flattenable"
]
