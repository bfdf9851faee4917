import math
from typing import Any

import numpy as np


def is_nan(value: Any) -> bool:
    """true for python and numpy floating nan values"""
    if isinstance(value, (float, np.floating)):
        return bool(np.isnan(value))
    return False


def eq(a: Any, b: Any) -> bool:
    """
    value equality where nan equals nan.
    nested sequences are compared structurally.
    """
    if is_nan(a) and is_nan(b):
        return True
    from .sequence import Seq
    if isinstance(a, Seq) and isinstance(b, Seq):
        return a.equals(b)
    # numpy arrays compare element-wise
    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        return bool(np.array_equal(a, b))
    return bool(a == b)


def is_number(value: Any) -> bool:
    """real and not nan (infinities count)"""
    if isinstance(value, (int, float, np.integer, np.floating)):
        return not is_nan(value)
    return False


def is_finite(value: Any) -> bool:
    return is_number(value) and math.isfinite(value)
