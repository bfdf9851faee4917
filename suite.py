"""
minimal test harness for the seqy test modules.

each module registers its cases with @test and calls run() under __main__;
pytest collects the same functions directly, so the harness only has to
report and never has to discover anything.
"""
import time
from contextlib import contextmanager
from functools import wraps
from typing import List, Dict, Any, Callable, Iterator, Type

_registered: List[Dict[str, Any]] = []

PASS_FACE = '(^ ω ^)'
FAIL_FACE = '(ﾉಥДಥ)ﾉ'

GREEN = '\033[92m'
RED = '\033[91m'
GREY = '\033[90m'
RESET = '\033[0m'


class TestAssertionError(AssertionError):
    """raised by assert_that and assert_raises so failures read apart from crashes."""


def test(description: str) -> Callable:
    """register a function as a test case under a readable description."""

    def decorator(func: Callable) -> Callable:
        _registered.append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise TestAssertionError(message)


@contextmanager
def assert_raises(error_type: Type[BaseException], message: str = "") -> Iterator[Dict[str, Any]]:
    """
    context manager asserting the block raises 'error_type'.
    the yielded dict receives the caught error under 'error'.
    """
    caught: Dict[str, Any] = {}
    try:
        yield caught
    except error_type as e:
        caught['error'] = e
        return
    raise TestAssertionError(message or f"expected {error_type.__name__} to be raised")


def run(title: str = "seqy tests") -> int:
    """run every registered case once, print a report and return the failure count."""
    print(f"\n--- {title} ---")
    start = time.perf_counter()
    failures = 0

    for case in _registered:
        try:
            case['func']()
        except TestAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"
        else:
            print(f"  {GREEN}✔ pass{RESET}  {PASS_FACE}  {case['description']}")
            continue
        failures += 1
        print(f"  {RED}✖ fail{RESET}  {FAIL_FACE}  {case['description']}")
        print(f"    {GREY}└─> {error}{RESET}")

    elapsed = (time.perf_counter() - start) * 1000
    colour = GREEN if failures == 0 else RED
    print(f"{colour}--- {len(_registered)} run, {failures} failed in {elapsed:.2f}ms ---{RESET}\n")

    # a script may import several test modules; each run reports only what was registered since
    _registered.clear()
    return failures
