import logging
from typing import Optional

import streamlit as st
from pyrsistent import thaw
from st_keyup import st_keyup  # type: ignore

from config import (
    AppConfig,
    get_config_from_widgets,
    make_game,
    set_default_config,
)
from maze_chase.actions import Direction, typed_direction
from maze_chase.game import MazeChaseGame
from maze_chase.renderer.texture import render
from maze_chase.types import GameStatus

logging.basicConfig(level=logging.INFO)

st.set_page_config(layout="wide", page_title="Maze Chase")


def get_keyboard_direction() -> Optional[Direction]:
    value: str = (
        st_keyup(
            "control",
            label_visibility="collapsed",
            key="maze_key_input",
            placeholder="Type: WASD to move",
        )
        or ""
    )
    prev_value: str = st.session_state.get("maze_key_input_prev", "")
    st.session_state["maze_key_input_prev"] = value
    return typed_direction(value, prev_value)


# --------- Main App ---------

set_default_config()
tab_game, tab_config, tab_state = st.tabs(["Game", "Config", "State"])

with tab_config:
    config: AppConfig = get_config_from_widgets()
    if st.button("Save", key="save_config_btn", use_container_width=True):
        st.session_state["config"] = config
        make_game(config)
    st.divider()

with tab_game:
    if "game" not in st.session_state:
        make_game(st.session_state["config"])
    game: MazeChaseGame = st.session_state["game"]

    left_col, middle_col, right_col = st.columns([0.25, 0.5, 0.25])

    with right_col:
        label = "▶️ New Game" if game.status == GameStatus.NOT_STARTED else "🔁 Restart"
        if st.button(label, key="start_btn", use_container_width=True):
            game.start_game()

        st.divider()

        # Consumed on every rerun, applied only while playing.
        direction = get_keyboard_direction()

        if game.status == GameStatus.PLAYING:
            _, up_col, _ = st.columns([1, 1, 1])
            with up_col:
                if st.button("⬆️", key="up_btn", use_container_width=True):
                    game.move(Direction.UP)
            left_btn, down_btn, right_btn = st.columns([1, 1, 1])
            with left_btn:
                if st.button("⬅️", key="left_btn", use_container_width=True):
                    game.move(Direction.LEFT)
            with down_btn:
                if st.button("⬇️", key="down_btn", use_container_width=True):
                    game.move(Direction.DOWN)
            with right_btn:
                if st.button("➡️", key="right_btn", use_container_width=True):
                    game.move(Direction.RIGHT)

            if direction is not None:
                game.move(direction)

    with left_col:
        st.info(f"**Score:** {game.score}", icon="🥐")
        st.info(f"**Turn:** {game.turn}", icon="⏱️")

    with middle_col:
        if game.status == GameStatus.NOT_STARTED:
            st.info("Eat every pellet, but keep away from the wanderers!")
        if game.status == GameStatus.OVER:
            st.error(f"💀 **Game over!** Final score: {game.score}")
        img = render(game.state, resolution=st.session_state["config"].resolution)
        st.image(img.convert("P"), use_container_width=True)
        st.json(game.snapshot(), expanded=1)

with tab_state:
    st.json(thaw(game.state.description), expanded=1)
