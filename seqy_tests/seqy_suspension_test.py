import numpy as np
import suite
from seqy import S, eq, is_nan, Step, DONE, configure, reset_config
from seqy.suspension import (
    Suspension, FlattenSuspension, FlattenState, ConcatSuspension, ConcatState, TakeSuspension, is_nested
)
from seqy.types import pull

test = suite.test
assert_that = suite.assert_that


class Countdown(Suspension):
    """counts down to one, recording how often it was stepped"""

    def __init__(self, start):
        super().__init__()
        self.current = start
        self.steps = 0

    def step(self):
        self.steps += 1
        if self.current == 0:
            return DONE
        self.current -= 1
        return Step(False, self.current + 1)


@test("suspensions adapt step() to the iterator protocol")
def test_suspension_protocol():
    countdown = Countdown(3)
    assert_that(list(countdown) == [3, 2, 1], "should yield then stop")
    assert_that(pull(countdown) == DONE, "completed suspensions stay completed")
    assert_that(countdown.steps == 4, f"no step after completion, got {countdown.steps}")


@test("pull wraps values and completion as steps")
def test_pull():
    it = iter([None])
    first = pull(it)
    assert_that(first == Step(False, None) and not first.done, "None is a real value")
    assert_that(pull(it).done, "then completion")


@test("flatten moves between main and sub states")
def test_flatten_states():
    machine = FlattenSuspension(iter([[1, 2], 3]))
    assert_that(machine.state is FlattenState.IN_MAIN, "starts in main")
    assert_that(next(machine) == 1 and machine.state is FlattenState.IN_SUB, "enters sub on a nested value")
    assert_that(next(machine) == 2 and machine.state is FlattenState.IN_SUB, "stays in sub while it has values")
    assert_that(next(machine) == 3 and machine.state is FlattenState.IN_MAIN, "returns to main when sub ends")
    assert_that(pull(machine).done, "completes with the outer source")


@test("flatten skips long runs of empty nested values without recursion")
def test_flatten_many_empties():
    data = [[]] * 5000 + [[7]]
    assert_that(S(data).flatten().to.list() == [7], "deep recursion would overflow here")


@test("concat switches source exactly once")
def test_concat_states():
    opened = []
    def second():
        opened.append(True)
        return iter(['b'])
    machine = ConcatSuspension(iter(['a']), second)
    assert_that(next(machine) == 'a' and machine.state is ConcatState.FIRST, "drains the first source")
    assert_that(opened == [], "second source not opened yet")
    assert_that(next(machine) == 'b' and machine.state is ConcatState.SECOND, "switches on completion")
    assert_that(pull(machine).done and opened == [True], "second opened once and drained")


@test("take stops without pulling its source")
def test_take_machine():
    countdown = Countdown(10)
    assert_that(list(TakeSuspension(countdown, 2)) == [10, 9], "two values")
    assert_that(countdown.steps == 2, f"source stepped {countdown.steps} times")


@test("nested values are detected by capability")
def test_is_nested():
    assert_that(is_nested([1]) and is_nested((1,)) and is_nested({1}), "builtin containers nest")
    assert_that(is_nested(S([])), "sequences nest")
    assert_that(not is_nested('ab') and not is_nested(b'ab') and not is_nested({'a': 1}), "atomic types do not nest")
    assert_that(not is_nested(5) and not is_nested(None), "scalars do not nest")
    configure(atomic_types=(str, tuple))
    try:
        assert_that(not is_nested((1, 2)), "configured atomic types are respected")
        assert_that(S([(1, 2), [3]]).flatten().to.list() == [(1, 2), 3], "tuples stay whole")
    finally:
        reset_config()


@test("equality helper treats nan as equal to nan")
def test_eq_helper():
    assert_that(eq(float('nan'), float('nan')), "python nan")
    assert_that(eq(np.float32('nan'), float('nan')), "numpy nan")
    assert_that(not eq(float('nan'), 1.0), "nan differs from numbers")
    assert_that(eq(1, 1.0) and not eq('1', 1), "ordinary value equality")
    assert_that(eq(np.array([1, 2]), np.array([1, 2])), "arrays compare element-wise")
    assert_that(not eq(np.array([1, 2]), np.array([1, 2, 3])), "differently shaped arrays differ")
    assert_that(is_nan(np.float64('nan')) and not is_nan('nan'), "is_nan only accepts floats")


if __name__ == "__main__":
    raise SystemExit(1 if suite.run(title="seqy suspension protocol test suite") else 0)
