"""Course parsing.

Turns ``"<direction> <magnitude>"`` text lines into :class:`Command` values.
Blank lines are skipped so a trailing newline never produces a command. Any
other line that is not exactly two tokens with a non-negative ASCII decimal
magnitude raises :class:`CourseParseError` immediately.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import structlog
from pyrsistent import pvector
from pyrsistent.typing import PVector

from sub_pilot.commands import Command

logger = structlog.get_logger(__name__)


class CourseParseError(ValueError):
    """Raised for a course line that is not ``"<direction> <magnitude>"``."""

    def __init__(self, line_number: int, line: str, reason: str) -> None:
        super().__init__(f"Line {line_number}: {reason}: {line!r}")
        self.line_number = line_number
        self.line = line


def parse_command(line: str, line_number: int = 1) -> Command:
    """Parse a single non-blank course line.

    Raises:
        CourseParseError: If the line is malformed.
    """
    tokens = line.split()
    if len(tokens) != 2:
        raise CourseParseError(line_number, line, "expected direction and magnitude")
    direction, magnitude = tokens
    if not (magnitude.isascii() and magnitude.isdecimal()):
        raise CourseParseError(line_number, line, "magnitude is not a whole number")
    return Command(direction=direction, magnitude=int(magnitude))


def parse_course(lines: Iterable[str]) -> PVector[Command]:
    """Parse course lines in order, skipping blank ones."""
    return pvector(
        parse_command(line, line_number)
        for line_number, line in enumerate(lines, start=1)
        if line.strip()
    )


def read_course(path: str | Path) -> PVector[Command]:
    """Read and parse a course file."""
    with open(path, encoding="utf-8") as f:
        commands = parse_course(f)
    logger.info("course_read", path=str(path), count=len(commands))
    return commands
