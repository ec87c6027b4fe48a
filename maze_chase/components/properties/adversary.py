"""Adversary marker component.

Adversaries wander the maze under the session's ``policy_fn`` and end the game
when they share a cell with the player. Their order in ``State.roster``
decides who moves first.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Adversary:
    pass
