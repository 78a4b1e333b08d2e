"""Model update rules.

Each system is a pure ``(state, command) -> state`` function suitable for a
left fold over a course. See :mod:`sub_pilot.step` for the fold itself.
"""

from .aim import aim_system
from .simple import simple_system

__all__ = ["aim_system", "simple_system"]
