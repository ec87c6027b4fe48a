from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import streamlit as st

from maze_chase.examples.reference import reference_config
from maze_chase.game import MazeChaseGame
from maze_chase.moves import MOVE_FN_REGISTRY
from maze_chase.policies import POLICY_REGISTRY
from maze_chase.renderer.texture import DEFAULT_RESOLUTION


@dataclass(frozen=True)
class AppConfig:
    move_fn_name: str
    policy_name: str
    seed: Optional[int]
    resolution: int


def set_default_config() -> None:
    if "config" not in st.session_state:
        st.session_state["config"] = AppConfig(
            move_fn_name="default",
            policy_name="wander",
            seed=None,
            resolution=DEFAULT_RESOLUTION,
        )


def _select(label: str, options: List[str], current: str, key: str) -> str:
    index = options.index(current) if current in options else 0
    return st.selectbox(label, options, index=index, key=key)


def get_config_from_widgets() -> AppConfig:
    current: AppConfig = st.session_state["config"]

    st.subheader("Rules")
    move_fn_name = _select(
        "Movement", list(MOVE_FN_REGISTRY.keys()), current.move_fn_name, "move_fn"
    )
    policy_name = _select(
        "Adversary policy", list(POLICY_REGISTRY.keys()), current.policy_name, "policy"
    )

    st.subheader("Random seed")
    fixed_seed = st.checkbox("Fixed seed", value=current.seed is not None, key="fixed")
    seed: Optional[int] = None
    if fixed_seed:
        seed = int(
            st.number_input(
                "Seed", min_value=0, value=current.seed or 0, key="seed_input"
            )
        )

    st.subheader("Display")
    resolution: int = st.slider(
        "Resolution", 190, 1140, current.resolution, step=19, key="resolution"
    )
    return AppConfig(
        move_fn_name=move_fn_name,
        policy_name=policy_name,
        seed=seed,
        resolution=resolution,
    )


def make_game(config: AppConfig) -> None:
    """Create a fresh (not yet started) game for ``config`` in session_state."""
    game_config = reference_config(
        seed=config.seed,
        move_fn=MOVE_FN_REGISTRY[config.move_fn_name],
        policy_fn=POLICY_REGISTRY[config.policy_name],
    )
    st.session_state["game"] = MazeChaseGame(game_config)
