"""
Interactive text console for the Kevin Bacon game.

Turns parsed commands into session queries and renders the results as
text. Malformed input and unknown actors are reported and the console
keeps going; nothing here mutates the main graph.
"""

from __future__ import annotations

import logging
import random
import sys
from collections.abc import Callable
from typing import TextIO

from bacon_game.config import PROMPT_SUFFIX
from bacon_game.game.commands import HELP_LINES, Command, InvalidQueryInput, parse_command
from bacon_game.game.session import UniverseSession
from bacon_game.game.state import ActorPath, CenterSummary
from bacon_game.graph import UnknownVertexError

logger = logging.getLogger(__name__)


def format_names(names: list[str]) -> str:
    return "[" + ", ".join(names) + "]"


def format_summary(summary: CenterSummary) -> str:
    average = "n/a" if summary.average_separation is None else f"{summary.average_separation:.3f}"
    return (
        f"{summary.center} is now the center of the acting universe, connected to "
        f"{summary.connected}/{summary.total} actors with average separation {average}"
    )


def format_actor_path(result: ActorPath) -> list[str]:
    if not result.is_reachable:
        return [f"{result.actor}'s number is ∞ (infinity)"]
    lines = [f"{result.actor}'s number is {result.separation}"]
    for hop in result.hops:
        movies = format_names(sorted(hop.movies))
        lines.append(f"{hop.actor} appeared in {movies} with {hop.co_star}")
    return lines


class GameConsole:
    """
    Read-eval-print loop over a UniverseSession.

    handle() processes a single line and returns False when the game
    should stop, which makes the console easy to drive from tests.
    """

    def __init__(
        self,
        session: UniverseSession,
        out: TextIO | None = None,
        err: TextIO | None = None,
        rng: random.Random | None = None,
        title: str = "Kevin Bacon",
    ) -> None:
        """
        Initialize the console.

        Args:
            session: Session to query
            out: Stream for results (default: stdout)
            err: Stream for error lines (default: stderr)
            rng: Random source for the w command
            title: Name shown in the first prompt, before any re-centering
        """
        self._session = session
        self._out = out or sys.stdout
        self._err = err or sys.stderr
        self._rng = rng or random.Random()
        self._title = title

    def _print(self, text: str = "") -> None:
        print(text, file=self._out)

    def _error(self, text: str) -> None:
        print(text, file=self._err)

    def intro(self) -> None:
        """Print the command list and the starting center."""
        self._print("Commands:")
        for line in HELP_LINES:
            self._print(line)
        self._print()
        self._print(format_summary(self._session.summary()))

    def prompt(self, first: bool = False) -> str:
        name = self._title if first else self._session.center
        return f"{name} {PROMPT_SUFFIX}"

    def handle(self, line: str | None) -> bool:
        """
        Run one command line.

        Returns:
            False if the user quit, True otherwise
        """
        try:
            command = parse_command(line)
        except InvalidQueryInput as e:
            logger.debug(f"Rejected input {line!r}: {e}")
            self._error(f"Invalid Input: {e}")
            return True

        if command.name == "q":
            return False

        try:
            self._dispatch(command)
        except UnknownVertexError as e:
            self._error(f"No Actor Found: {e.vertex}")
        return True

    def _dispatch(self, command: Command) -> None:
        session = self._session
        name, args = command.name, command.args

        if name == "h":
            for line in HELP_LINES:
                self._print(line)
        elif name == "i":
            self._print(format_names(session.infinitely_separated()))
        elif name == "p":
            for line in format_actor_path(session.actor_path(args[0])):
                self._print(line)
        elif name == "u":
            self._print(format_summary(session.set_center(args[0])))
        elif name == "d":
            self._print(format_names(session.rank_by_degree(*args)))
        elif name == "s":
            self._print(format_names(session.rank_by_separation(*args)))
        elif name == "e":
            self._print(format_names(session.best_connected(args[0])))
        elif name == "l":
            self._print(format_names(session.worst_connected(args[0])))
        elif name == "c":
            n = args[0]
            ranked = session.top_centers(n) if n >= 0 else session.bottom_centers(-n)
            for actor, average in ranked:
                self._print(f"{actor}: {average:.3f}")
        elif name == "w":
            if args[0] < 0:
                self._error("Invalid Input: steps must be non-negative")
                return
            self._print(" -> ".join(session.random_walk(args[0], self._rng)))

    def run(self, read_line: Callable[[str], str] = input) -> None:
        """
        Loop until q or end of input.

        Args:
            read_line: Prompt-and-read function (default: builtin input)
        """
        self.intro()
        first = True
        while True:
            self._print()
            try:
                line = read_line(self.prompt(first) + " ")
            except EOFError:
                break
            first = False
            if not self.handle(line):
                break
