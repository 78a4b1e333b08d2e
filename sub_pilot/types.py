"""Common type aliases.

``UpdateFn`` and ``ReportFn`` are the two extension points of a
:class:`sub_pilot.models.Model`: how a state absorbs one command and how a
final state turns into a :class:`sub_pilot.state.Report`.
"""

from typing import Callable, TypeVar, TYPE_CHECKING


# Forward declarations to avoid circular imports:
if TYPE_CHECKING:
    from sub_pilot.commands import Command
    from sub_pilot.state import Report

Magnitude = int

StateT = TypeVar("StateT")

UpdateFn = Callable[[StateT, "Command"], StateT]
ReportFn = Callable[[StateT], "Report"]
