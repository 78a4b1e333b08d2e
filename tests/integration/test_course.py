import pytest

from sub_pilot.models import AIM_MODEL, SIMPLE_MODEL
from sub_pilot.state import AimState, Report, SimpleState
from sub_pilot.step import pilot, run_course, trace
from tests.test_utils import make_course, make_example_course


def test_example_course_reports() -> None:
    simple, aim = run_course(make_example_course())
    assert simple == Report(15, 10)
    assert simple.product == 150
    assert aim == Report(15, 60)
    assert aim.product == 900


def test_example_course_final_states() -> None:
    course = make_example_course()
    assert pilot(SIMPLE_MODEL, course) == SimpleState(x=15, y=10)
    assert pilot(AIM_MODEL, course) == AimState(aim=10, depth=60, pos=15)


def test_empty_course() -> None:
    reports = run_course(make_course())
    assert reports == [Report(0, 0), Report(0, 0)]
    assert [r.product for r in reports] == [0, 0]


def test_single_forward() -> None:
    simple, aim = run_course(make_course(("forward", 7)))
    assert simple == Report(7, 0)
    assert aim == Report(7, 0)
    assert pilot(AIM_MODEL, make_course(("forward", 7))).aim == 0


def test_down_then_forward() -> None:
    simple, aim = run_course(make_course(("down", 4), ("forward", 6)))
    assert simple.depth == 4
    assert aim.depth == 24


def test_run_course_is_idempotent() -> None:
    course = make_example_course()
    assert run_course(course) == run_course(course)
    assert pilot(AIM_MODEL, course) == pilot(AIM_MODEL, course)


def test_order_matters_for_aim_only() -> None:
    dive_first = make_course(("down", 5), ("forward", 3))
    dive_last = make_course(("forward", 3), ("down", 5))
    simple_first, aim_first = run_course(dive_first)
    simple_last, aim_last = run_course(dive_last)
    assert simple_first == simple_last
    assert aim_first.depth == 15
    assert aim_last.depth == 0


def test_unknown_directions_are_ignored() -> None:
    course = make_course(("forward", 2), ("reverse", 9), ("down", 1), ("forward", 3))
    simple, aim = run_course(course)
    assert simple == Report(5, 1)
    assert aim == Report(5, 3)


def test_run_course_selects_models_in_order() -> None:
    reports = run_course(make_example_course(), models=("aim", "simple"))
    assert reports == [Report(15, 60), Report(15, 10)]


def test_run_course_unknown_model() -> None:
    with pytest.raises(ValueError, match="Unknown model"):
        run_course(make_example_course(), models=("ballistic",))


def test_trace_yields_every_state() -> None:
    course = make_course(("down", 2), ("forward", 3), ("up", 1))
    states = list(trace(AIM_MODEL, course))
    assert states == [
        AimState(0, 0, 0),
        AimState(aim=2, depth=0, pos=0),
        AimState(aim=2, depth=6, pos=3),
        AimState(aim=1, depth=6, pos=3),
    ]
    assert states[-1] == pilot(AIM_MODEL, course)


def test_trace_empty_course_yields_initial_state() -> None:
    assert list(trace(SIMPLE_MODEL, make_course())) == [SimpleState()]
