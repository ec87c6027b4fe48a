"""Rendering appearance component.

``Appearance`` is purely cosmetic: the simulation never reads it. ``tag``
distinguishes individual adversaries (the renderer derives a tint from it).
"""

from dataclasses import dataclass
from enum import StrEnum, auto


class AppearanceName(StrEnum):
    """Enumeration of built-in appearance categories."""

    NONE = auto()
    PLAYER = auto()
    ADVERSARY = auto()


@dataclass(frozen=True)
class Appearance:
    """Visual rendering metadata.

    Attributes:
        name: Symbolic appearance identifier.
        tag: Free-form identity label (e.g. ``"lotus"``).
    """

    name: AppearanceName
    tag: str = ""
