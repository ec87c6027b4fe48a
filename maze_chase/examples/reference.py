"""Reference maze and roster.

The classic single-screen layout: 19 columns by 21 rows, four power pellets
near the corners, side tunnels on rows 8, 10 and 12, and a central pen. The
player starts at ``(9, 15)`` facing left; six adversaries start in the four
corners and the pen.
"""

from typing import Optional, Tuple

from maze_chase.actions import Direction
from maze_chase.components import Position
from maze_chase.levels.config import AdversarySpec, GameConfig
from maze_chase.levels.factories import new_state
from maze_chase.moves import default_move_fn
from maze_chase.policies import wander_policy
from maze_chase.state import State
from maze_chase.types import GameStatus, MoveFn, PolicyFn


REFERENCE_LAYOUT: Tuple[str, ...] = (
    "###################",
    "#........#........#",
    "#.##.###.#.###.##.#",
    "#o##.###.#.###.##o#",
    "#.................#",
    "#.##.#.#####.#.##.#",
    "#....#...#...#....#",
    "####.### # ###.####",
    "   #.#       #.#   ",
    "####.# ##### #.####",
    "    .  #   #  .    ",
    "####.# ##### #.####",
    "   #.#       #.#   ",
    "####.# ##### #.####",
    "#........#........#",
    "#.##.###.#.###.##.#",
    "#o.#.....#.....#.o#",
    "##.#.#.#####.#.#.##",
    "#....#...#...#....#",
    "#.######.#.######.#",
    "#.................#",
)

PLAYER_SPAWN = Position(9, 15)
PLAYER_FACING = Direction.LEFT

REFERENCE_ADVERSARIES: Tuple[AdversarySpec, ...] = (
    AdversarySpec(Position(1, 1), Direction.RIGHT, "lotus"),
    AdversarySpec(Position(17, 1), Direction.LEFT, "tree"),
    AdversarySpec(Position(1, 19), Direction.RIGHT, "warrior"),
    AdversarySpec(Position(17, 19), Direction.LEFT, "cobra"),
    AdversarySpec(Position(9, 9), Direction.UP, "crow"),
    AdversarySpec(Position(9, 11), Direction.DOWN, "bridge"),
)


def reference_config(
    seed: Optional[int] = None,
    move_fn: MoveFn = default_move_fn,
    policy_fn: PolicyFn = wander_policy,
) -> GameConfig:
    """Config for the reference maze with the six-strong roster."""
    return GameConfig(
        layout=REFERENCE_LAYOUT,
        player_spawn=PLAYER_SPAWN,
        player_facing=PLAYER_FACING,
        adversaries=REFERENCE_ADVERSARIES,
        move_fn=move_fn,
        policy_fn=policy_fn,
        seed=seed,
    )


def generate(seed: Optional[int] = None) -> State:
    """Fresh, already started session on the reference maze."""
    return new_state(reference_config(seed=seed), status=GameStatus.PLAYING)
