import random

import pytest

from maze_chase.actions import MOVE_DIRECTIONS, Direction
from maze_chase.examples.reference import generate
from maze_chase.grid import PICKUP_VALUES, cell_at, layout_rows
from maze_chase.step import step, tick_rng
from maze_chase.types import GameStatus
from tests.test_utils import CORRIDOR, ROOM, FixedChoiceRandom, make_state, pos_of


def test_reference_spawn_moving_up_hits_wall() -> None:
    state = generate(seed=0)
    player_id = state.player_id
    assert pos_of(state, player_id) == (9, 15)
    assert state.facing[player_id] == Direction.LEFT

    state = step(state, Direction.UP)
    assert pos_of(state, player_id) == (9, 15)
    assert state.facing[player_id] == Direction.UP
    assert state.score == 0
    assert state.turn == 1


def test_reference_spawn_moving_left_eats_pellet() -> None:
    state = generate(seed=0)
    player_id = state.player_id
    state = step(state, Direction.LEFT)
    assert pos_of(state, player_id) == (8, 15)
    assert state.facing[player_id] == Direction.LEFT
    assert state.score == 10
    assert layout_rows(state.grid)[15][8] == " "


def test_reference_roster() -> None:
    state = generate(seed=0)
    spawns = [(pos_of(state, eid), state.facing[eid]) for eid in state.roster]
    assert spawns == [
        ((1, 1), Direction.RIGHT),
        ((17, 1), Direction.LEFT),
        ((1, 19), Direction.RIGHT),
        ((17, 19), Direction.LEFT),
        ((9, 9), Direction.UP),
        ((9, 11), Direction.DOWN),
    ]
    assert len({state.appearance[eid].tag for eid in state.roster}) == 6


@pytest.mark.parametrize("status", [GameStatus.NOT_STARTED, GameStatus.OVER])
def test_input_ignored_unless_playing(status: GameStatus) -> None:
    state, _, _ = make_state(ROOM, (1, 1), [(3, 3, Direction.UP)], status=status)
    assert step(state, Direction.DOWN) is state


def test_invalid_direction_raises() -> None:
    state, _, _ = make_state(ROOM, (1, 1))
    with pytest.raises(ValueError):
        step(state, "diagonal")  # type: ignore[arg-type]


def test_string_direction_is_accepted() -> None:
    state, player_id, _ = make_state(ROOM, (1, 1))
    state = step(state, "down")  # type: ignore[arg-type]
    assert pos_of(state, player_id) == (1, 2)


def test_player_then_adversaries_then_collision() -> None:
    state, player_id, (adv,) = make_state(CORRIDOR, (1, 1), [(3, 1, Direction.LEFT)])
    state = step(state, Direction.RIGHT)
    assert pos_of(state, player_id) == (2, 1)
    assert pos_of(state, adv) == (2, 1)
    assert state.score == 10
    assert state.status == GameStatus.OVER


def test_walking_into_stalled_adversary_ends_game() -> None:
    state, player_id, (adv,) = make_state(CORRIDOR, (4, 1), [(5, 1, Direction.RIGHT)])
    state = step(state, Direction.RIGHT, rng=FixedChoiceRandom(Direction.UP))
    assert pos_of(state, adv) == (5, 1)
    assert pos_of(state, player_id) == (5, 1)
    assert state.status == GameStatus.OVER


def test_swapping_cells_is_not_a_collision() -> None:
    state, player_id, (adv,) = make_state(CORRIDOR, (2, 1), [(3, 1, Direction.LEFT)])
    state = step(state, Direction.RIGHT)
    assert pos_of(state, player_id) == (3, 1)
    assert pos_of(state, adv) == (2, 1)
    assert state.status == GameStatus.PLAYING


def test_game_over_is_terminal() -> None:
    state, player_id, _ = make_state(CORRIDOR, (1, 1), [(3, 1, Direction.LEFT)])
    over = step(state, Direction.RIGHT)
    assert over.status == GameStatus.OVER
    assert step(over, Direction.RIGHT) is over


@pytest.mark.parametrize("seed", range(5))
def test_score_is_monotonic_and_counts_each_pickup_once(seed: int) -> None:
    state = generate(seed=seed)
    player_id = state.player_id
    original = state.grid
    moves = random.Random(seed)
    previous = 0
    for _ in range(300):
        state = step(state, moves.choice(MOVE_DIRECTIONS))
        assert state.score >= previous
        previous = state.score
        if state.status != GameStatus.PLAYING:
            break

    expected = sum(PICKUP_VALUES[cell_at(original, pos)] for pos in state.grid.consumed)
    assert state.score == expected


def test_seeded_sessions_replay_identically() -> None:
    inputs = [Direction.LEFT, Direction.LEFT, Direction.UP, Direction.UP] * 5
    a = generate(seed=42)
    b = generate(seed=42)
    for direction in inputs:
        a = step(a, direction)
        b = step(b, direction)
    assert a == b


def test_tick_rng_is_keyed_on_seed_and_turn() -> None:
    state = generate(seed=7)
    assert tick_rng(state).random() == random.Random("7:0").random()
    later = step(state, Direction.LEFT)
    assert tick_rng(later).random() == random.Random("7:1").random()
    unseeded = generate(seed=None)
    assert tick_rng(unseeded).random() == random.Random("0:0").random()
