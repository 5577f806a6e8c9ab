"""
Parsing of interactive game commands.

Each line is a one-letter command followed by its arguments:
    c <n>            top (n > 0) or bottom (n < 0) centers by average separation
    d <low> <high>   actors by degree, with degree in [low, high]
    e <n>            n best-connected actors
    i                actors with infinite separation from the center
    l <n>            n worst-connected actors
    p <name>         path from <name> to the center
    s <low> <high>   actors by separation, with separation in [low, high]
    u <name>         make <name> the center of the universe
    w <steps>        random walk from the center
    h                list commands
    q                quit
"""

from __future__ import annotations

from dataclasses import dataclass


class InvalidQueryInput(ValueError):
    """A command line could not be parsed."""


@dataclass
class Command:
    """
    A parsed command.

    Attributes:
        name: One-letter command, lower case
        args: Parsed arguments (ints for numeric commands, a name string
            for p/u, empty for i/h/q)
    """

    name: str
    args: tuple[int | str, ...] = ()


HELP_LINES = [
    "c <#>: list top (positive number) or bottom (negative) <#> centers of the universe, sorted by average separation",
    "d <low> <high>: list actors sorted by degree, with degree between low and high",
    "e <#>: list the <#> best-connected actors",
    "i: list actors with infinite separation from the current center",
    "l <#>: list the <#> worst-connected actors",
    "p <name>: find path from <name> to current center of the universe",
    "s <low> <high>: list actors sorted by non-infinite separation from the current center, with separation between low and high",
    "u <name>: make <name> the center of the universe",
    "w <#>: take a random walk of up to <#> steps from the current center",
    "h: show this list of commands",
    "q: quit game",
]

_NO_ARGS = {"i", "h", "q"}
_NAME_ARG = {"p", "u"}
_ONE_INT = {"c", "e", "l", "w"}
_RANGE = {"d", "s"}


def _parse_int(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise InvalidQueryInput(f"Expected a number, got {value!r}") from None


def parse_command(line: str | None) -> Command:
    """
    Parse one line of input.

    Raises:
        InvalidQueryInput: If the command is unknown or its arguments
            are missing, extra, or not numeric where required
    """
    if line is None or not line.strip():
        raise InvalidQueryInput("Empty command")

    name, _, rest = line.strip().partition(" ")
    name = name.lower()
    rest = rest.strip()

    if name in _NO_ARGS:
        if rest:
            raise InvalidQueryInput(f"'{name}' takes no arguments")
        return Command(name)

    if name in _NAME_ARG:
        if not rest:
            raise InvalidQueryInput(f"'{name}' needs an actor name")
        return Command(name, (" ".join(rest.split()),))

    parts = rest.split()
    if name in _ONE_INT:
        if len(parts) != 1:
            raise InvalidQueryInput(f"'{name}' needs exactly one number")
        return Command(name, (_parse_int(parts[0]),))

    if name in _RANGE:
        if len(parts) != 2:
            raise InvalidQueryInput(f"'{name}' needs <low> <high>")
        low, high = _parse_int(parts[0]), _parse_int(parts[1])
        if low > high:
            raise InvalidQueryInput(f"Low {low} is greater than high {high}")
        return Command(name, (low, high))

    raise InvalidQueryInput(f"Unknown command '{name}'")
