"""Aim model system.

``down`` and ``up`` only pitch the vessel by changing ``aim``. Depth changes
solely on ``forward``, by ``aim * magnitude``, so the order of commands
matters: pitching after the last ``forward`` has no effect on depth.
"""

from dataclasses import replace

from sub_pilot.commands import Command, Direction
from sub_pilot.state import AimState


def aim_system(state: AimState, command: Command) -> AimState:
    """Apply one command to the aim model.

    Args:
        state (AimState): Previous state.
        command (Command): Command to apply.

    Returns:
        AimState: New state; the same object for unknown directions.
    """
    if command.direction == Direction.FORWARD:
        return replace(
            state,
            pos=state.pos + command.magnitude,
            depth=state.depth + state.aim * command.magnitude,
        )
    if command.direction == Direction.DOWN:
        return replace(state, aim=state.aim + command.magnitude)
    if command.direction == Direction.UP:
        return replace(state, aim=state.aim - command.magnitude)
    return state
