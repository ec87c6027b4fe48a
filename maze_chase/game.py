"""Stateful game controller.

:class:`MazeChaseGame` owns the current immutable ``State`` and exposes the
input / output contract front-ends talk to:

* input: :meth:`~MazeChaseGame.start_game` / :meth:`~MazeChaseGame.restart`
  and :meth:`~MazeChaseGame.move`;
* output: ``score``, ``status``, ``player``, ``adversaries``,
  :meth:`~MazeChaseGame.cell_at` and :meth:`~MazeChaseGame.snapshot`.

Front-ends only read; every change goes through one of the input methods.
A new game builds a complete fresh ``State`` and swaps it in with a single
assignment, so no half-reset session is ever observable.
"""

import logging
import random
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from maze_chase.actions import Direction
from maze_chase.components import Position
from maze_chase.examples.reference import reference_config
from maze_chase.grid import cell_at, remaining_pickups
from maze_chase.levels.config import GameConfig
from maze_chase.levels.factories import new_state
from maze_chase.state import State
from maze_chase.step import step
from maze_chase.types import CellKind, EntityID, GameStatus
from maze_chase.utils.terminal import is_playing, is_terminal_state

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntityView:
    """Read-only snapshot of an entity for presentation layers."""

    x: int
    y: int
    facing: Direction
    tag: str = ""

    def as_dict(self) -> Dict[str, Any]:
        return {"x": self.x, "y": self.y, "facing": str(self.facing), "tag": self.tag}


def _entity_view(state: State, eid: EntityID) -> EntityView:
    pos = state.position[eid]
    appearance = state.appearance.get(eid)
    return EntityView(
        x=pos.x,
        y=pos.y,
        facing=state.facing[eid],
        tag=appearance.tag if appearance is not None else "",
    )


class MazeChaseGame:
    """Turn-based controller for one maze.

    Parameters:
        config: Session configuration; the reference maze when omitted.
        rng: Random source for adversary decisions. When omitted each tick
            derives its RNG from the session seed (see
            :func:`maze_chase.step.tick_rng`).
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config: GameConfig = config or reference_config()
        self._rng = rng
        self._state: State = new_state(self.config, status=GameStatus.NOT_STARTED)

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def start_game(self, seed: Optional[int] = None) -> State:
        """Begin a new game from any status.

        Score, maze, player and roster all return to their initial values.

        Args:
            seed: Session seed; falls back to ``config.seed`` and then to a
                random one so unseeded games differ.
        """
        if seed is None:
            seed = self.config.seed
        if seed is None:
            seed = random.randrange(2**31)
        self._state = new_state(self.config, seed=seed, status=GameStatus.PLAYING)
        logger.info("Game started (seed=%s)", seed)
        return self._state

    def restart(self, seed: Optional[int] = None) -> State:
        """Alias of :meth:`start_game` for the game-over screen."""
        return self.start_game(seed=seed)

    def move(self, direction: Direction) -> State:
        """Apply one tick for the player input ``direction``.

        Ignored (state returned unchanged) unless the game is ``PLAYING``.
        """
        if not is_playing(self._state):
            logger.debug("Ignoring move %s while %s", direction, self._state.status)
            return self._state
        self._state = step(self._state, direction, rng=self._rng)
        if is_terminal_state(self._state):
            logger.info(
                "Game over after %d turns with score %d",
                self._state.turn,
                self._state.score,
            )
        return self._state

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    @property
    def state(self) -> State:
        return self._state

    @property
    def score(self) -> int:
        return self._state.score

    @property
    def status(self) -> GameStatus:
        return self._state.status

    @property
    def turn(self) -> int:
        return self._state.turn

    @property
    def size(self) -> Tuple[int, int]:
        return self._state.width, self._state.height

    @property
    def player(self) -> EntityView:
        return _entity_view(self._state, self._state.player_id)

    @property
    def adversaries(self) -> List[EntityView]:
        return [_entity_view(self._state, eid) for eid in self._state.roster]

    def cell_at(self, x: int, y: int) -> CellKind:
        """Current cell kind (raises ``OutOfBoundsError`` off-grid)."""
        return cell_at(self._state.grid, Position(x, y))

    def snapshot(self) -> Dict[str, Any]:
        """Plain-data view of the session for renderers and serializers."""
        state = self._state
        return {
            "score": state.score,
            "status": str(state.status),
            "turn": state.turn,
            "player": self.player.as_dict(),
            "adversaries": [view.as_dict() for view in self.adversaries],
            "pickups_left": remaining_pickups(state.grid),
            "width": state.width,
            "height": state.height,
        }
