import logging
from typing import Optional

import streamlit as st
from pyrsistent import thaw
from st_keyup import st_keyup  # type: ignore

from grid_snake.actions import Action, new_keystroke
from grid_snake.config import (
    MAX_BOARD_SIZE,
    MIN_BOARD_SIZE,
    BoardSizeError,
    GameConfig,
    parse_board_dimension,
)
from grid_snake.game import Game, GameContext
from grid_snake.renderer.texture import (
    COLOR_MAP_REGISTRY,
    DEFAULT_RESOLUTION,
    TextureRenderer,
    draw_banner,
)
from grid_snake.ui import UIState

logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")

# Ticks are as short as 50 ms; the fragment polls the scheduler at that rate.
POLL_SECONDS = 0.05

st.set_page_config(layout="wide", page_title="Grid Snake")
st.markdown(
    """
    <style>
        header, footer, #MainMenu { visibility: hidden; }
        .stMainBlockContainer {
            padding-top: 0;
            padding-bottom: 0;
        }
    </style>
""",
    unsafe_allow_html=True,
)


def set_default_config() -> None:
    if "config" not in st.session_state:
        st.session_state["config"] = GameConfig.fixed()
        st.session_state["color_map"] = "classic"


def get_config_from_widgets() -> Optional[GameConfig]:
    """Render the config form; ``None`` while a dimension is invalid."""
    current: GameConfig = st.session_state["config"]

    st.subheader("Board")
    variant = st.radio(
        "Board variant",
        ["Classic 12x12", "Custom size"],
        index=1 if current.prompt_size else 0,
        key="variant",
    )
    seed = st.number_input(
        "Random seed (0 = random)", min_value=0, value=current.seed or 0
    )
    st.subheader("Colors")
    names = list(COLOR_MAP_REGISTRY.keys())
    st.session_state["color_map"] = st.selectbox(
        "Color map",
        names,
        index=names.index(st.session_state["color_map"]),
        key="color_map_select",
    )

    if variant == "Classic 12x12":
        return GameConfig.fixed(seed=seed or None)

    raw_rows = st.text_input(
        f"Rows ({MIN_BOARD_SIZE}-{MAX_BOARD_SIZE})", value=str(current.rows)
    )
    raw_cols = st.text_input(
        f"Columns ({MIN_BOARD_SIZE}-{MAX_BOARD_SIZE})", value=str(current.cols)
    )
    try:
        rows = parse_board_dimension(raw_rows)
        cols = parse_board_dimension(raw_cols)
    except BoardSizeError as e:
        st.error(f"{e}")
        return None
    return GameConfig.sized(rows, cols, seed=seed or None)


def make_game_and_start(config: GameConfig) -> None:
    """Build a fresh context for ``config`` and start playing.

    A game left over from a previous config is stopped first so its timer can
    never fire into the new session.
    """
    previous: Optional[Game] = st.session_state.get("game")
    if previous is not None:
        previous.stop()
    context = GameContext.create(
        config,
        ui=UIState(),
        renderer=TextureRenderer(
            color_map=COLOR_MAP_REGISTRY[st.session_state["color_map"]]
        ),
        ask_board_size=lambda: (config.rows, config.cols),
    )
    game = Game(context)
    game.start()
    st.session_state["game"] = game


def get_keyboard_key() -> Optional[str]:
    """Return the key typed into the control box since the last rerun."""
    value: str = (
        st_keyup(
            "control",
            label_visibility="collapsed",
            key="snake_key_input",
            placeholder="Type here: WASD to steer, r to retry",
        )
        or ""
    )
    prev_value: str = st.session_state.get("snake_key_input_prev", "")
    st.session_state["snake_key_input_prev"] = value
    return new_keystroke(prev_value, value)


@st.fragment(run_every=POLL_SECONDS)
def board_view() -> None:
    game: Game = st.session_state["game"]
    game.context.scheduler.run_due()
    ui = game.context.ui
    assert isinstance(ui, UIState)

    st.info(f"**Score:** {ui.score}", icon="🍎")
    if ui.won_visible:
        st.success("🎉 **The snake fills the board!** 🎉")
    elif ui.lost_visible:
        st.error("💀 **You lost!** Press Retry to play again. 💀")

    frame = game.context.board.frame
    if frame is not None:
        if ui.lost_visible:
            frame = draw_banner(frame, "GAME OVER")
        st.image(frame, width=DEFAULT_RESOLUTION)


# --------- Main App ---------

set_default_config()
tab_game, tab_config, tab_state = st.tabs(["Game", "Config", "State"])

with tab_config:
    config = get_config_from_widgets()
    if st.button("Save", key="save_config_btn", disabled=config is None):
        assert config is not None
        st.session_state["config"] = config
        make_game_and_start(config)
    st.divider()

with tab_game:
    if "game" not in st.session_state:
        make_game_and_start(st.session_state["config"])
    game: Game = st.session_state["game"]

    middle_col, right_col = st.columns([0.7, 0.3])

    with right_col:
        key = get_keyboard_key()
        if key is not None:
            game.handle_key(key)

        _, up_col, _ = st.columns([1, 1, 1])
        with up_col:
            if st.button("⬆️", key="up_btn"):
                game.handle_action(Action.UP)
        left_btn, down_btn, right_btn = st.columns([1, 1, 1])
        with left_btn:
            if st.button("⬅️", key="left_btn"):
                game.handle_action(Action.LEFT)
        with down_btn:
            if st.button("⬇️", key="down_btn"):
                game.handle_action(Action.DOWN)
        with right_btn:
            if st.button("➡️", key="right_btn"):
                game.handle_action(Action.RIGHT)

        st.divider()
        if st.button("🔁 Retry", key="retry_btn"):
            game.handle_action(Action.RESTART)

    with middle_col:
        board_view()

with tab_state:
    if game.state is not None:
        st.json(thaw(game.state.description), expanded=1)
