"""
Game module.

Provides the interactive Kevin Bacon game:
- UniverseSession: Main graph + current center's path tree, named queries
- CenterSummary / ActorPath / PathHop: Query results
- parse_command / Command: Command-line parsing
- GameConsole: Text front end over a session
"""

from bacon_game.game.commands import Command, InvalidQueryInput, parse_command
from bacon_game.game.console import GameConsole
from bacon_game.game.session import UniverseSession
from bacon_game.game.state import INFINITE_SEPARATION, ActorPath, CenterSummary, PathHop

__all__ = [
    "UniverseSession",
    "CenterSummary",
    "ActorPath",
    "PathHop",
    "INFINITE_SEPARATION",
    "Command",
    "InvalidQueryInput",
    "parse_command",
    "GameConsole",
]
