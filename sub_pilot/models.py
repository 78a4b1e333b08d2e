"""Trajectory models and registry.

A :class:`Model` bundles everything the fold needs: an initial state, the
per-command update rule and the function that reads the final state as a
:class:`Report`. ``MODEL_REGISTRY`` maps model names to models so callers and
the CLI can select them by name.
"""

from dataclasses import dataclass
from typing import Any

from pyrsistent import pmap
from pyrsistent.typing import PMap

from sub_pilot.state import AimState, Report, SimpleState
from sub_pilot.systems import aim_system, simple_system
from sub_pilot.types import ReportFn, UpdateFn


@dataclass(frozen=True)
class Model:
    """Named trajectory model.

    Attributes:
        name (str): Registry key.
        initial (Any): State before any command is applied.
        update (UpdateFn): Pure ``(state, command) -> state`` rule.
        report (ReportFn): Converts a final state to a ``Report``.
    """

    name: str
    initial: Any
    update: UpdateFn[Any]
    report: ReportFn[Any]


def simple_report(state: SimpleState) -> Report:
    return Report(distance=state.x, depth=state.y)


def aim_report(state: AimState) -> Report:
    return Report(distance=state.pos, depth=state.depth)


SIMPLE_MODEL = Model(
    name="simple",
    initial=SimpleState(),
    update=simple_system,
    report=simple_report,
)

AIM_MODEL = Model(
    name="aim",
    initial=AimState(),
    update=aim_system,
    report=aim_report,
)

MODEL_REGISTRY: PMap[str, Model] = pmap(
    {
        SIMPLE_MODEL.name: SIMPLE_MODEL,
        AIM_MODEL.name: AIM_MODEL,
    }
)
"""Name → model mapping used by :func:`sub_pilot.step.run_course`."""

DEFAULT_MODELS = ("simple", "aim")
