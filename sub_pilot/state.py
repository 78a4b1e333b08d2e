"""Immutable model states and reports.

Every model keeps its own frozen state dataclass. Update rules are pure
functions that take the previous state plus a :class:`Command` and return a
*new* state via :func:`dataclasses.replace`; nothing is mutated in place. The
two models never share a state object, so folding one cannot affect the other.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SimpleState:
    """State of the simple model.

    Attributes:
        x (int): Horizontal distance travelled.
        y (int): Depth; ``down`` and ``up`` change it directly.
    """

    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class AimState:
    """State of the aim model.

    Attributes:
        aim (int): Steering angle; changed by ``down`` and ``up``.
        depth (int): Depth; grows by ``aim * magnitude`` on each ``forward``.
        pos (int): Horizontal distance travelled.
    """

    aim: int = 0
    depth: int = 0
    pos: int = 0


@dataclass(frozen=True)
class Report:
    """Final figures of one model.

    Attributes:
        distance (int): Horizontal distance.
        depth (int): Final depth.
    """

    distance: int
    depth: int

    @property
    def product(self) -> int:
        return self.distance * self.depth
