"""Push node: sends the branch to its remote once the train has left."""

from datetime import datetime

from loguru import logger

from gittrain.git_backend import GitBackend
from gittrain.models.errors import PushFailedError
from gittrain.models.state import TrainState


def push_node(state: TrainState) -> TrainState:
    """Push the branch. A failed push is recorded in ``errors``, not raised."""
    logger.info("Executing Push Node")

    branch = state["branch"]
    remote = state.get("remote", "origin")

    logger.info(f"Pushing to {remote}/{branch}...")
    try:
        GitBackend(state["repo_path"]).push(branch, remote, force=state.get("force", False))
    except PushFailedError as e:
        logger.error(f"Error in Push Node: {str(e)}")
        errors = list(state.get("errors", []))
        errors.append({"node": "push", "error": str(e), "timestamp": datetime.now()})
        return {**state, "pushed": False, "errors": errors}

    logger.info("Push complete. Your code has left the station!")
    return {**state, "pushed": True}
