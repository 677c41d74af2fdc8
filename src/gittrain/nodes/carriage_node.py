"""Carriage node: turns each commit into its carriage sprite."""

from loguru import logger

from gittrain.animation.sprites import CARRIAGE_TEMPLATE, FIELD_JUSTIFY, FIELD_WIDTH, Sprite
from gittrain.formatting import CarriageField, fill_template, format_fixed_width
from gittrain.models.base import CommitRecord
from gittrain.models.state import TrainState


def _field(value: str) -> str:
    return format_fixed_width(value, FIELD_WIDTH).ljust(FIELD_JUSTIFY)


def render_carriage(commit: CommitRecord) -> Sprite:
    """Render the carriage template for a single commit."""
    return fill_template(
        CARRIAGE_TEMPLATE,
        {
            CarriageField.HASH: _field(commit.hash),
            CarriageField.MESSAGE: _field(commit.message),
            CarriageField.MODIFICATIONS: _field(commit.modifications or ""),
        },
    )


def carriage_node(state: TrainState) -> TrainState:
    """Render one carriage per discovered commit, keeping commit order."""
    logger.info("Executing Carriage Node")

    carriages = [render_carriage(commit) for commit in state.get("commits", [])]
    logger.debug(f"Rendered {len(carriages)} carriages")

    return {**state, "carriages": carriages}
