from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from typing import Any, Tuple


@dataclass
class SeqConfig:
    """library-wide behaviour switches"""
    # size is cached after a full counting traversal
    memoize_size: bool = True
    # iterables flatten() never treats as nested
    atomic_types: Tuple[type, ...] = field(default=(str, bytes, bytearray, Mapping))


config = SeqConfig()


def configure(**changes: Any) -> SeqConfig:
    """update the shared config in place and return it"""
    known = {f.name for f in fields(SeqConfig)}
    unknown = set(changes) - known
    if unknown:
        raise ValueError(f"unknown config option(s): {', '.join(sorted(unknown))}")
    updated = replace(config, **changes)
    for name in known:
        setattr(config, name, getattr(updated, name))
    return config


def reset_config() -> SeqConfig:
    """restore defaults"""
    defaults = SeqConfig()
    for f in fields(SeqConfig):
        setattr(config, f.name, getattr(defaults, f.name))
    return config
