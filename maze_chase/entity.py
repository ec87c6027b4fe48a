"""Entity primitives & ID generation.

The session models the player and every adversary as an ``EntityID`` (an
integer) plus component dataclasses stored in persistent maps on
:class:`maze_chase.state.State`.

IDs are allocated per session by :class:`EntityIDAllocator` so a restarted
game gets the same ids for the same roster. That keeps seeded runs
reproducible across restarts.
"""

from dataclasses import dataclass
from typing import Iterator

from maze_chase.types import EntityID


@dataclass(frozen=True)
class Entity:
    """Marker registered for every live entity of a session."""


def entity_id_generator(start: int = 0) -> Iterator[EntityID]:
    """Yield an infinite sequence of monotonically increasing entity IDs."""
    eid = start
    while True:
        yield eid
        eid += 1


class EntityIDAllocator:
    """Hands out fresh ids for one session."""

    def __init__(self, start: int = 0) -> None:
        self._gen = entity_id_generator(start)

    def new_entity_id(self) -> EntityID:
        return next(self._gen)
