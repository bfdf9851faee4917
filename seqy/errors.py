class SeqError(Exception):
    """base class for every error raised by seqy"""
    pass


class NotIterableError(SeqError, TypeError):
    """raised when wrapping a value that cannot be iterated"""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"value of type {type(value).__name__} cannot be iterated")


class InvalidRangeError(SeqError, ValueError):
    """raised for a zero step or non-numeric range bounds"""
    pass


class UnboundedSequenceError(SeqError, OverflowError):
    """raised when a finite count is required from an unbounded sequence"""
    pass


class NoSuchElementError(SeqError, LookupError):
    """raised when reading a value that is not there"""
    pass
