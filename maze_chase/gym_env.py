"""Gymnasium environment wrapper for the maze chase game.

Provides a structured observation that pairs a rendered RGBA image with an
info dictionary (player, adversaries, status, config). Reward is the delta of
``state.score`` per step. ``terminated`` is ``True`` once an adversary catches
the player; there is no truncation.

Observation schema:

``{"image": np.ndarray(H,W,4), "info": {"player": {...}, "adversaries": [...],
"status": {...}, "config": {...}}}``

Usage:

``env = MazeChaseEnv(seed=7)``

Customization hooks:
    * ``config``: Any :class:`maze_chase.levels.config.GameConfig`.
    * ``render_resolution``: Width in pixels of the rendered frame.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

import gymnasium as gym
import numpy as np
from PIL.Image import Image as PILImage

from maze_chase.actions import GymAction, to_direction
from maze_chase.examples.reference import reference_config
from maze_chase.grid import remaining_pickups
from maze_chase.levels.config import GameConfig
from maze_chase.levels.factories import new_state
from maze_chase.renderer.texture import DEFAULT_RESOLUTION, TextureRenderer
from maze_chase.state import State
from maze_chase.step import step
from maze_chase.types import EntityID, GameStatus

logger = logging.getLogger(__name__)

ObsType = Dict[str, Any]

MAX_SESSION_SEED = 1_000_000_000


def _entity_dict(state: State, eid: EntityID) -> Dict[str, Any]:
    pos = state.position[eid]
    appearance = state.appearance.get(eid)
    return {
        "x": int(pos.x),
        "y": int(pos.y),
        "facing": str(state.facing[eid]),
        "tag": appearance.tag if appearance is not None else "",
    }


def player_observation_dict(state: State) -> Dict[str, Any]:
    return _entity_dict(state, state.player_id)


def adversaries_observation_dict(state: State) -> List[Dict[str, Any]]:
    return [_entity_dict(state, eid) for eid in state.roster]


def env_status_observation_dict(state: State) -> Dict[str, Any]:
    """Status portion of observation (score, phase, turn, pickups left)."""
    return {
        "score": int(state.score),
        "phase": str(state.status),
        "turn": int(state.turn),
        "pickups_left": remaining_pickups(state.grid),
    }


def env_config_observation_dict(state: State) -> Dict[str, Any]:
    """Config portion of observation (function names, seed, dimensions)."""
    move_fn_name = getattr(state.move_fn, "__name__", str(state.move_fn))
    policy_fn_name = getattr(state.policy_fn, "__name__", str(state.policy_fn))
    return {
        "move_fn": move_fn_name,
        "policy_fn": policy_fn_name,
        "seed": state.seed,
        "width": state.width,
        "height": state.height,
    }


class MazeChaseEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` over the maze chase game.

    The action space is ``Discrete(len(GymAction))``; see
    :mod:`maze_chase.actions`.
    """

    metadata = {"render_modes": ["human", "texture"]}

    def __init__(
        self,
        render_mode: str = "texture",
        render_resolution: int = DEFAULT_RESOLUTION,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
    ):
        """Create a new environment instance.

        Arguments:
            render_mode: "texture" to return PIL image frames, "human" to open window.
            render_resolution: Width (pixels) of rendered image; height is scaled.
            config: Session configuration (reference maze if omitted).
            seed: Session seed used by the first ``reset``.
        """
        from gymnasium import spaces

        self._config = config or reference_config()
        self._render_mode = render_mode
        self._renderer = TextureRenderer(resolution=render_resolution)

        self.state: Optional[State] = None

        sample = new_state(self._config)
        cell_size = max(1, render_resolution // sample.width)
        render_width = cell_size * sample.width
        render_height = cell_size * sample.height

        text_space = spaces.Text(max_length=32)

        def int_box(low: int, high: int) -> spaces.Box:
            return spaces.Box(
                low=np.array(low, dtype=np.int64),
                high=np.array(high, dtype=np.int64),
                shape=(),
                dtype=np.int64,
            )

        entity_space = spaces.Dict(
            {
                "x": int_box(0, sample.width - 1),
                "y": int_box(0, sample.height - 1),
                "facing": text_space,
                "tag": text_space,
            }
        )

        self.observation_space = spaces.Dict(
            {
                "image": spaces.Box(
                    low=0,
                    high=255,
                    shape=(render_height, render_width, 4),
                    dtype=np.uint8,
                ),
                "info": spaces.Dict(
                    {
                        "player": entity_space,
                        "adversaries": spaces.Sequence(entity_space),
                        "status": spaces.Dict(
                            {
                                "score": int_box(0, 1_000_000_000),
                                "phase": text_space,
                                "turn": int_box(0, 1_000_000_000),
                                "pickups_left": int_box(0, 1_000_000),
                            }
                        ),
                        "config": spaces.Dict(
                            {
                                "move_fn": text_space,
                                "policy_fn": text_space,
                                "seed": int_box(0, MAX_SESSION_SEED),
                                "width": int_box(1, 10_000),
                                "height": int_box(1, 10_000),
                            }
                        ),
                    }
                ),
            }
        )

        self.action_space = spaces.Discrete(len(GymAction))

        # Initialize first episode
        self.reset(seed=seed)

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, object]]:
        """Start a new episode (equivalent to the game's new-game action).

        Arguments:
            seed: Session seed. When omitted a fresh one is drawn from the env
                RNG, so unseeded episodes differ and a seeded env replays its
                whole episode sequence.
            options: Gymnasium options (unused).
        """
        super().reset(seed=seed)
        if seed is None:
            seed = int(self.np_random.integers(MAX_SESSION_SEED))
        self.state = new_state(self._config, seed=seed, status=GameStatus.PLAYING)
        logger.debug("Episode reset (seed=%s)", self.state.seed)
        return self._get_obs(), self._get_info()

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, object]]:
        """Apply one tick.

        Arguments:
            action: Integer index into the ``GymAction`` enum.

        Returns:
            (observation, reward, terminated, truncated, info)
        """
        assert self.state is not None

        direction = to_direction(int(action))
        prev_score = self.state.score
        self.state = step(self.state, direction)
        reward = float(self.state.score - prev_score)
        terminated = self.state.status == GameStatus.OVER
        return self._get_obs(), reward, terminated, False, self._get_info()

    def render(self, mode: Optional[str] = None) -> Optional[PILImage]:  # type: ignore
        """Render the current state.

        Args:
            mode: "human" to display, "texture" to return PIL image. Defaults to
                instance's configured render mode.
        """
        render_mode = mode or self._render_mode
        assert self.state is not None
        img = self._renderer.render(self.state)
        if render_mode == "human":
            img.show()
            return None
        elif render_mode == "texture":
            return img
        else:
            raise NotImplementedError(f"Render mode '{render_mode}' not supported.")

    def state_info(self) -> Dict[str, Any]:
        """Return structured ``info`` sub-dict used in observations."""
        assert self.state is not None
        return {
            "player": player_observation_dict(self.state),
            "adversaries": adversaries_observation_dict(self.state),
            "status": env_status_observation_dict(self.state),
            "config": env_config_observation_dict(self.state),
        }

    def _get_obs(self) -> ObsType:
        assert self.state is not None
        img_np = np.array(self._renderer.render(self.state))
        return {"image": img_np, "info": self.state_info()}

    def _get_info(self) -> Dict[str, object]:
        return {}
