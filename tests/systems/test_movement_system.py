from dataclasses import replace

import pytest

from maze_chase.actions import MOVE_DIRECTIONS, Direction
from maze_chase.components import Position
from maze_chase.examples.reference import generate
from maze_chase.grid import cell_at, is_passable
from maze_chase.systems.movement import MoveResult, attempt_step, movement_system
from maze_chase.types import CellKind
from tests.test_utils import CORRIDOR, ROOM, make_state, pos_of


def test_player_steps_into_open_cell() -> None:
    state, player_id, _ = make_state(ROOM, (1, 1))
    result = attempt_step(state, player_id, Direction.DOWN)
    assert result == MoveResult(Position(1, 2), Direction.DOWN, blocked=False)

    moved = movement_system(state, player_id, Direction.DOWN)
    assert pos_of(moved, player_id) == (1, 2)
    assert moved.facing[player_id] == Direction.DOWN


def test_player_blocked_by_wall_still_turns() -> None:
    state, player_id, _ = make_state(ROOM, (1, 1), player_facing=Direction.RIGHT)
    result = attempt_step(state, player_id, Direction.UP)
    assert result == MoveResult(Position(1, 1), Direction.UP, blocked=True)

    moved = movement_system(state, player_id, Direction.UP)
    assert pos_of(moved, player_id) == (1, 1)
    assert moved.facing[player_id] == Direction.UP


def test_adversary_blocked_by_wall_keeps_facing() -> None:
    state, _, (adv,) = make_state(ROOM, (3, 3), [(1, 1, Direction.RIGHT)])
    result = attempt_step(state, adv, Direction.LEFT)
    assert result == MoveResult(Position(1, 1), Direction.RIGHT, blocked=True)
    assert movement_system(state, adv, Direction.LEFT) is state


def test_edge_clamp_is_a_noop_not_a_block() -> None:
    open_rows = ("   ",) * 3
    state, player_id, (adv,) = make_state(
        open_rows, (0, 0), [(2, 2, Direction.DOWN)], player_facing=Direction.RIGHT
    )
    result = attempt_step(state, player_id, Direction.LEFT)
    assert result == MoveResult(Position(0, 0), Direction.LEFT, blocked=False)

    adv_result = attempt_step(state, adv, Direction.DOWN)
    assert adv_result == MoveResult(Position(2, 2), Direction.DOWN, blocked=False)


def test_steps_onto_pickups_and_void() -> None:
    state, player_id, _ = make_state(["#. ", "#"], (2, 0))
    moved = movement_system(state, player_id, Direction.LEFT)
    assert pos_of(moved, player_id) == (1, 0)
    moved = movement_system(moved, player_id, Direction.DOWN)
    assert pos_of(moved, player_id) == (1, 1)
    assert cell_at(moved.grid, Position(1, 1)) == CellKind.VOID


def test_movement_does_not_consume_pickups() -> None:
    state, player_id, _ = make_state(CORRIDOR, (2, 1))
    moved = movement_system(state, player_id, Direction.RIGHT)
    assert moved.grid is state.grid
    assert moved.score == 0


@pytest.mark.parametrize("direction", MOVE_DIRECTIONS)
def test_moves_from_open_cells_never_end_on_walls(direction: Direction) -> None:
    """Covers every non-wall start cell of the reference maze.

    Wall spawn cells are excluded: a blocked move from one leaves the entity
    where it spawned, on the wall.
    """
    state = generate(seed=0)
    player_id = state.player_id
    for y in range(state.height):
        for x in range(state.width):
            start = Position(x, y)
            if not is_passable(state.grid, start):
                continue
            placed = replace(state, position=state.position.set(player_id, start))
            result = attempt_step(placed, player_id, direction)
            assert cell_at(placed.grid, result.position) != CellKind.WALL
            assert 0 <= result.position.x < state.width
            assert 0 <= result.position.y < state.height
            if result.blocked:
                assert result.position == start


def test_blocked_non_adversary_entity_turns() -> None:
    state, player_id, _ = make_state(CORRIDOR, (1, 1))
    state = replace(state, player=state.player.remove(player_id))
    result = attempt_step(state, player_id, Direction.UP)
    assert result == MoveResult(position=Position(1, 1), facing=Direction.UP, blocked=True)
