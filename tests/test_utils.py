from typing import Sequence, Tuple

from pyrsistent import pvector
from pyrsistent.typing import PVector

from sub_pilot.commands import Command


EXAMPLE_LINES = [
    "forward 5",
    "down 5",
    "forward 8",
    "up 3",
    "down 8",
    "forward 2",
]


def make_course(*steps: Tuple[str, int]) -> PVector[Command]:
    """Build an in-memory course from ``(direction, magnitude)`` pairs."""
    return pvector(Command(direction, magnitude) for direction, magnitude in steps)


def make_example_course() -> PVector[Command]:
    """The six-command example course."""
    return make_course(
        ("forward", 5),
        ("down", 5),
        ("forward", 8),
        ("up", 3),
        ("down", 8),
        ("forward", 2),
    )


def write_course(path, lines: Sequence[str]) -> str:
    """Write ``lines`` newline-terminated to ``path`` and return it as str."""
    path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    return str(path)
