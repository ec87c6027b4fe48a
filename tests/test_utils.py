import random
from typing import List, Optional, Sequence, Tuple

from maze_chase.actions import Direction
from maze_chase.components import Position
from maze_chase.levels.config import AdversarySpec, GameConfig
from maze_chase.levels.factories import new_state
from maze_chase.moves import default_move_fn
from maze_chase.policies import wander_policy
from maze_chase.state import State
from maze_chase.types import EntityID, GameStatus, MoveFn, PolicyFn

CORRIDOR: Tuple[str, ...] = (
    "#######",
    "#.....#",
    "#######",
)

ROOM: Tuple[str, ...] = (
    "#####",
    "#. o#",
    "#.#.#",
    "#...#",
    "#####",
)


class FixedChoiceRandom(random.Random):
    """Random source whose ``choice`` always returns ``value``."""

    def __init__(self, value: Direction) -> None:
        super().__init__(0)
        self.value = value
        self.calls = 0

    def choice(self, seq):  # type: ignore[override]
        self.calls += 1
        assert self.value in seq
        return self.value


def make_config(
    layout: Sequence[str],
    player_pos: Tuple[int, int],
    adversaries: Sequence[Tuple[int, int, Direction]] = (),
    player_facing: Direction = Direction.LEFT,
    move_fn: MoveFn = default_move_fn,
    policy_fn: PolicyFn = wander_policy,
    seed: Optional[int] = 0,
) -> GameConfig:
    return GameConfig(
        layout=tuple(layout),
        player_spawn=Position(*player_pos),
        player_facing=player_facing,
        adversaries=tuple(
            AdversarySpec(Position(x, y), facing, tag=f"adv{i}")
            for i, (x, y, facing) in enumerate(adversaries)
        ),
        move_fn=move_fn,
        policy_fn=policy_fn,
        seed=seed,
    )


def make_state(
    layout: Sequence[str],
    player_pos: Tuple[int, int],
    adversaries: Sequence[Tuple[int, int, Direction]] = (),
    player_facing: Direction = Direction.LEFT,
    move_fn: MoveFn = default_move_fn,
    policy_fn: PolicyFn = wander_policy,
    status: GameStatus = GameStatus.PLAYING,
    seed: Optional[int] = 0,
) -> Tuple[State, EntityID, List[EntityID]]:
    """Build a session state; returns (state, player_id, adversary_ids)."""
    config = make_config(
        layout,
        player_pos,
        adversaries,
        player_facing=player_facing,
        move_fn=move_fn,
        policy_fn=policy_fn,
        seed=seed,
    )
    state = new_state(config, status=status)
    return state, state.player_id, list(state.roster)


def pos_of(state: State, eid: EntityID) -> Tuple[int, int]:
    pos = state.position[eid]
    return pos.x, pos.y
