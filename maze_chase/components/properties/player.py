"""Player marker component."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Player:
    """Marks the input-controlled entity. A session holds exactly one."""

    pass
