from dataclasses import replace

from maze_chase.components import Position
from maze_chase.grid import cell_at
from maze_chase.systems.collectible import collectible_system
from maze_chase.types import CellKind
from tests.test_utils import ROOM, make_state


def test_collects_pellet() -> None:
    state, player_id, _ = make_state(ROOM, (1, 1))
    state = collectible_system(state, player_id)
    assert state.score == 10
    assert cell_at(state.grid, Position(1, 1)) == CellKind.EMPTY


def test_collects_power_pellet() -> None:
    state, player_id, _ = make_state(ROOM, (3, 1))
    state = collectible_system(state, player_id)
    assert state.score == 50


def test_collects_only_once() -> None:
    state, player_id, _ = make_state(ROOM, (1, 1))
    once = collectible_system(state, player_id)
    twice = collectible_system(once, player_id)
    assert twice is once
    assert twice.score == 10


def test_empty_cell_is_noop() -> None:
    state, player_id, _ = make_state(ROOM, (2, 1))
    assert collectible_system(state, player_id) is state


def test_missing_position_is_noop() -> None:
    state, player_id, _ = make_state(ROOM, (1, 1))
    state = replace(state, position=state.position.remove(player_id))
    assert collectible_system(state, player_id) is state
