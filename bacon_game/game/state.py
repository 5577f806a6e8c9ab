"""
Result dataclasses returned by the universe session.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

# Separation of an actor who cannot reach the current center
INFINITE_SEPARATION = math.inf


@dataclass
class CenterSummary:
    """
    Snapshot of the current center of the universe.

    Attributes:
        center: The actor at the root of the path tree
        connected: Number of actors reachable from the center (center included)
        total: Number of actors in the main graph
        average_separation: Mean separation of the other reachable actors,
            or None if the center has no co-stars
    """

    center: str
    connected: int
    total: int
    average_separation: float | None


@dataclass
class PathHop:
    """
    One edge along a path to the center.

    Attributes:
        actor: Actor at this end of the hop
        co_star: Next actor, one step closer to the center
        movies: Titles the two appeared in together
    """

    actor: str
    co_star: str
    movies: set[str]


@dataclass
class ActorPath:
    """
    An actor's connection to the current center.

    Attributes:
        actor: The actor queried
        center: Center of the universe at query time
        separation: Number of hops to the center, or INFINITE_SEPARATION
        hops: Edges from actor to center (empty if unreachable or actor is center)
    """

    actor: str
    center: str
    separation: int | float
    hops: list[PathHop] = field(default_factory=list)

    @property
    def is_reachable(self) -> bool:
        return self.separation != INFINITE_SEPARATION
