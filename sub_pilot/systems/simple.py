"""Simple model system.

``forward`` adds to the horizontal distance; ``down`` and ``up`` change the
depth directly. Unknown directions leave the state untouched.
"""

from dataclasses import replace

from sub_pilot.commands import Command, Direction
from sub_pilot.state import SimpleState


def simple_system(state: SimpleState, command: Command) -> SimpleState:
    """Apply one command to the simple model.

    Args:
        state (SimpleState): Previous state.
        command (Command): Command to apply.

    Returns:
        SimpleState: New state; the same object for unknown directions.
    """
    if command.direction == Direction.FORWARD:
        return replace(state, x=state.x + command.magnitude)
    if command.direction == Direction.DOWN:
        return replace(state, y=state.y + command.magnitude)
    if command.direction == Direction.UP:
        return replace(state, y=state.y - command.magnitude)
    return state
