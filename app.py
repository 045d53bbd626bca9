import logging
import random
import time
from dataclasses import replace
from typing import List

import streamlit as st

from grid_life.config import LifeConfig
from grid_life.renderer.canvas import GridCanvas
from grid_life.seeding import SEED_FN_REGISTRY
from grid_life.simulation import Simulation

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

st.set_page_config(layout="wide", page_title="Game of Life")
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
        st.session_state["config"] = LifeConfig(grid_size=60, seed=0)
        st.session_state["running"] = False


def get_config_from_widgets() -> LifeConfig:
    config: LifeConfig = st.session_state["config"]

    st.subheader("Board")
    grid_size: int = st.slider(
        "Grid size (cells)", 10, 200, config.grid_size, key="grid_size"
    )
    cell_size: int = st.slider(
        "Cell size (pixels)", 2, 20, config.cell_size, key="cell_size"
    )

    st.subheader("Seeding")
    seed_fn_names: List[str] = list(SEED_FN_REGISTRY.keys())
    seed_fn_name: str = st.selectbox(
        "Initial pattern",
        seed_fn_names,
        index=seed_fn_names.index(config.seed_fn_name),
        key="seed_fn_name",
    )
    seed: int = st.number_input(
        "Random seed", min_value=0, value=config.seed or 0, key="seed"
    )

    st.subheader("Timing")
    interval_ms: int = st.slider(
        "Turn period (ms)", 50, 2000, config.interval_ms, step=50, key="interval_ms"
    )

    return replace(
        config,
        grid_size=grid_size,
        cell_size=cell_size,
        seed_fn_name=seed_fn_name,
        seed=seed,
        interval_ms=interval_ms,
    )


def make_simulation_and_restart(config: LifeConfig) -> None:
    canvas = GridCanvas.for_grid(config.grid_size, config.cell_size)
    simulation = Simulation(
        config.grid_size,
        seed_fn=config.seed_fn,
        render_fn=canvas.paint_grid,
        rng=random.Random(config.seed),
    )
    simulation.restart()
    st.session_state["canvas"] = canvas
    st.session_state["simulation"] = simulation


# --------- Main App ---------

set_default_config()
tab_game, tab_config, tab_state = st.tabs(["Game", "Config", "State"])

with tab_config:
    try:
        config: LifeConfig = get_config_from_widgets()
    except ValueError as e:
        st.error(f"Invalid configuration: {e}")
        config = st.session_state["config"]

    if st.button("Save", key="save_config_btn", use_container_width=True):
        st.session_state["config"] = config
        make_simulation_and_restart(config)
    st.divider()

with tab_game:
    if "simulation" not in st.session_state:
        make_simulation_and_restart(st.session_state["config"])

    simulation: Simulation = st.session_state["simulation"]
    canvas: GridCanvas = st.session_state["canvas"]

    left_col, middle_col, right_col = st.columns([0.25, 0.5, 0.25])

    with right_col:
        if st.button("🔁 Restart", key="restart_btn", use_container_width=True):
            simulation.restart()
        if st.button("⏭️ Next turn", key="next_btn", use_container_width=True):
            simulation.next()
        st.toggle("Run", key="running")

    with left_col:
        st.info(f"**Turn:** {simulation.turn}", icon="⏱️")
        st.info(f"**Population:** {simulation.grid.population}", icon="🧫")

    with middle_col:
        st.image(canvas.image, use_container_width=True)

with tab_state:
    st.json(
        {
            "turn": simulation.turn,
            "size": simulation.grid.size,
            "alive": sorted(pos.to_key() for pos in simulation.grid.alive),
        },
        expanded=1,
    )

if st.session_state["running"]:
    time.sleep(st.session_state["config"].interval_ms / 1000)
    simulation.next()
    st.rerun()
