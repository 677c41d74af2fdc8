"""Animation node: runs the train across the terminal."""

from loguru import logger

from gittrain.animation.display import run_on_terminal
from gittrain.animation.engine import play
from gittrain.models.state import TrainState


def run_animation(carriages, tick_seconds: float) -> int:
    """Play the animation on the real terminal and return the ticks drawn."""
    return run_on_terminal(lambda display: play(display, carriages, tick_seconds))


def animation_node(state: TrainState) -> TrainState:
    """Animate the rendered carriages. Blocks until the train has departed."""
    logger.info("Executing Animation Node")

    carriages = state.get("carriages", [])
    tick_seconds = state.get("tick_seconds", 0.04)

    # Nothing may log while curses owns the terminal
    ticks = run_animation(carriages, tick_seconds)
    logger.debug(f"Train departed after {ticks} ticks")

    return {**state, "ticks": ticks}
