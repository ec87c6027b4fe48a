import numpy as np
import pytest

from maze_chase.actions import Direction, GymAction
from maze_chase.gym_env import MazeChaseEnv
from tests.test_utils import CORRIDOR, make_config


def test_reset_observation_shape() -> None:
    env = MazeChaseEnv(render_resolution=190, seed=0)
    obs, info = env.reset(seed=0)
    assert obs["image"].shape == env.observation_space["image"].shape
    assert obs["image"].shape == (210, 190, 4)
    assert obs["info"]["status"]["phase"] == "playing"
    assert obs["info"]["player"] == {"x": 9, "y": 15, "facing": "left", "tag": ""}
    assert len(obs["info"]["adversaries"]) == 6
    assert obs["info"]["config"]["policy_fn"] == "wander_policy"
    assert info == {}


def test_step_reward_is_score_delta() -> None:
    env = MazeChaseEnv(render_resolution=190, seed=0)
    _, reward, terminated, truncated, _ = env.step(np.int64(GymAction.LEFT))
    assert reward == 10.0
    assert not terminated and not truncated
    # (7, 15) is a wall
    _, reward, _, _, _ = env.step(np.int64(GymAction.LEFT))
    assert reward == 0.0


def test_termination_on_catch() -> None:
    config = make_config(CORRIDOR, (1, 1), [(3, 1, Direction.LEFT)])
    env = MazeChaseEnv(render_resolution=70, config=config, seed=0)
    _, _, terminated, _, _ = env.step(np.int64(GymAction.RIGHT))
    assert terminated


def test_invalid_action() -> None:
    env = MazeChaseEnv(render_resolution=190, seed=0)
    with pytest.raises(ValueError):
        env.step(np.int64(len(GymAction)))


def test_render_texture_mode() -> None:
    env = MazeChaseEnv(render_resolution=190, seed=0)
    img = env.render()
    assert img is not None
    assert img.size == (190, 210)
    with pytest.raises(NotImplementedError):
        env.render(mode="ascii")


def _roll_adversaries(env: MazeChaseEnv, steps: int = 40) -> list[tuple]:
    trajectory: list[tuple] = []
    for _ in range(steps):
        obs, _, terminated, _, _ = env.step(np.int64(GymAction.LEFT))
        trajectory.append(
            tuple((a["x"], a["y"], a["facing"]) for a in obs["info"]["adversaries"])
        )
        if terminated:
            break
    return trajectory


def test_unseeded_episodes_differ() -> None:
    env = MazeChaseEnv(render_resolution=190)
    trajectories = [_roll_adversaries(env)]
    seeds = {env.state.seed}
    for _ in range(3):
        env.reset()
        seeds.add(env.state.seed)
        trajectories.append(_roll_adversaries(env))
    assert len(seeds) > 1
    assert len(set(map(tuple, trajectories))) > 1


def test_seeded_env_replays_episode_sequence() -> None:
    first = MazeChaseEnv(render_resolution=190, seed=11)
    second = MazeChaseEnv(render_resolution=190, seed=11)
    for env in (first, second):
        env.reset()
    assert first.state.seed == second.state.seed
    assert _roll_adversaries(first) == _roll_adversaries(second)


def test_explicit_reset_seed_is_kept() -> None:
    env = MazeChaseEnv(render_resolution=190)
    env.reset(seed=5)
    assert env.state.seed == 5
    first = _roll_adversaries(env)
    env.reset(seed=5)
    assert _roll_adversaries(env) == first
