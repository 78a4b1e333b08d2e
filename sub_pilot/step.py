"""Course fold.

Piloting a course is a left fold of a model's update rule over the commands,
starting from the model's initial state. :func:`pilot` returns only the final
state, :func:`trace` yields every intermediate state and :func:`run_course`
reports several registered models over the same course.

All functions are pure: the same course always yields the same result and no
state is carried between calls.
"""

from functools import reduce
from itertools import accumulate
from typing import Any, Iterable, Iterator, List, Sequence

import structlog

from sub_pilot.commands import Command
from sub_pilot.models import DEFAULT_MODELS, MODEL_REGISTRY, Model
from sub_pilot.state import Report

logger = structlog.get_logger(__name__)


def pilot(model: Model, commands: Iterable[Command]) -> Any:
    """Fold ``commands`` into ``model``'s final state."""
    return reduce(model.update, commands, model.initial)


def trace(model: Model, commands: Iterable[Command]) -> Iterator[Any]:
    """Yield the initial state followed by the state after each command."""
    return accumulate(commands, model.update, initial=model.initial)


def run_course(
    commands: Sequence[Command], models: Sequence[str] = DEFAULT_MODELS
) -> List[Report]:
    """Report each named model over the same course.

    Args:
        commands (Sequence[Command]): Parsed course, applied in order.
        models (Sequence[str]): Registry names, in the order reports are wanted.

    Returns:
        List[Report]: One report per requested model.

    Raises:
        ValueError: If a model name is not in ``MODEL_REGISTRY``.
    """
    reports: List[Report] = []
    for name in models:
        model = MODEL_REGISTRY.get(name)
        if model is None:
            raise ValueError(f"Unknown model: {name}")
        state = model.initial
        for index, state in enumerate(trace(model, commands)):
            logger.debug("model_state", model=name, index=index, state=state)
        report = model.report(state)
        logger.info(
            "model_finished",
            model=name,
            distance=report.distance,
            depth=report.depth,
            product=report.product,
        )
        reports.append(report)
    return reports
