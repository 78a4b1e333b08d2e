"""Command primitives.

A course is an ordered sequence of :class:`Command` values. Each command pairs
a direction token with a non-negative magnitude. :class:`Direction` is the
string enum of the directions the models understand; because it is a
``StrEnum`` its members compare equal to the raw tokens read from input.

Unrecognized direction tokens are kept verbatim on the command instead of
being rejected at parse time. Both update rules treat them as no-ops.
"""

from dataclasses import dataclass
from enum import StrEnum, auto

from sub_pilot.types import Magnitude


class Direction(StrEnum):
    """String enum of known course directions.

    Members:
        FORWARD: Advance horizontally.
        DOWN: Dive (simple model) or pitch down (aim model).
        UP: Rise (simple model) or pitch up (aim model).
    """

    FORWARD = auto()
    DOWN = auto()
    UP = auto()


@dataclass(frozen=True)
class Command:
    """Single course instruction.

    Attributes:
        direction: Direction token, usually a :class:`Direction` member.
        magnitude: Non-negative amount to move or pitch.
    """

    direction: str
    magnitude: Magnitude
