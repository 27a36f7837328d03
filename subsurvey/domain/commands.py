"""Movement command vocabulary and the text parser for ``"<direction> <value>"``."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Recognized movement verbs."""

    FORWARD = "forward"
    DOWN = "down"
    UP = "up"


@dataclass(frozen=True)
class Command:
    """One parsed movement command."""

    direction: Direction
    value: int


class ParseError(ValueError):
    """Raised when command text is not ``"<direction> <integer>"``."""

    def __init__(self, message: str, text: str, line_number: int | None = None) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.text = text
        self.line_number = line_number


def _parse_value(token: str, text: str) -> int:
    # int() also accepts "1_000" and " 5"; commands only allow a plain signed integer.
    digits = token[1:] if token[:1] in ("-", "+") else token
    if not digits.isdigit() or not digits.isascii():
        raise ParseError(f'Invalid value: "{token}". Expected a number', text)
    return int(token)


def parse_command(text: str) -> Command:
    """Parse ``"<direction> <integer>"`` into a :class:`Command`.

    Surrounding whitespace is ignored. Exactly two tokens separated by a single
    space are required; the value may be negative. Raises :exc:`ParseError`
    on a wrong token count, a non-integer value, or an unknown direction.
    """
    parts = text.strip().split(" ")
    if len(parts) != 2:
        raise ParseError(
            f'Invalid command format: "{text}". Expected "direction value"', text
        )
    direction_raw, value_raw = parts
    value = _parse_value(value_raw, text)
    try:
        direction = Direction(direction_raw)
    except ValueError as exc:
        valid = ", ".join(d.value for d in Direction)
        raise ParseError(
            f'Invalid direction: "{direction_raw}". Expected one of {valid}', text
        ) from exc
    return Command(direction=direction, value=value)


def parse_script(lines: Iterable[str]) -> list[Command]:
    """Parse a newline-delimited command script, skipping blank lines.

    A malformed line raises :exc:`ParseError` annotated with its 1-based
    line number; nothing after it is parsed.
    """
    commands: list[Command] = []
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            commands.append(parse_command(line))
        except ParseError as exc:
            raise ParseError(str(exc), line, line_number=line_number) from exc
    return commands
