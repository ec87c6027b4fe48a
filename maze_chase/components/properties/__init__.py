"""Property component aggregates.

Re-exports the components attached to session entities. All of them are
immutable dataclasses; a changed entity is expressed by storing a new
instance in the matching ``State`` map.
"""

from .adversary import Adversary
from .appearance import Appearance, AppearanceName
from .player import Player
from .position import Position

__all__ = [
    "Adversary",
    "Appearance",
    "AppearanceName",
    "Player",
    "Position",
]
