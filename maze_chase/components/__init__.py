"""maze_chase.components
=========================

Aggregate import surface for the ECS component dataclasses attached to session
entities, e.g.::

    from maze_chase.components import Position, Player

Components are plain frozen ``@dataclass`` value objects; systems in
:mod:`maze_chase.systems` transform the maps that hold them.
"""

from .properties import Adversary, Appearance, AppearanceName, Player, Position

__all__ = [
    "Adversary",
    "Appearance",
    "AppearanceName",
    "Player",
    "Position",
]
