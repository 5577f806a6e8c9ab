"""
Kevin Bacon Game.

Degrees-of-separation explorer over an actor/movie co-appearance
network, built on a generic labeled graph and BFS path trees.
"""

__version__ = "0.1.0"
