"""git-train workflow integration using LangGraph for orchestration."""

import sys
from typing import Optional, Sequence

from langgraph.graph import END, StateGraph
from loguru import logger

from gittrain.config import TrainConfig, load_config
from gittrain.models.errors import GitTrainError
from gittrain.models.state import TrainState
from gittrain.nodes.animation_node import animation_node
from gittrain.nodes.carriage_node import carriage_node
from gittrain.nodes.commit_discovery_node import commit_discovery_node
from gittrain.nodes.push_node import push_node


def _route_after_animation(state: TrainState) -> str:
    return "push" if state.get("push") else "done"


def create_workflow():
    """Create the git-train workflow graph."""
    workflow = StateGraph(TrainState)

    # Add nodes
    workflow.add_node("commit_discovery_node", commit_discovery_node)
    workflow.add_node("carriage_node", carriage_node)
    workflow.add_node("animation_node", animation_node)
    workflow.add_node("push_node", push_node)

    workflow.set_entry_point("commit_discovery_node")

    # Define edges
    workflow.add_edge("commit_discovery_node", "carriage_node")
    workflow.add_edge("carriage_node", "animation_node")
    workflow.add_conditional_edges(
        "animation_node",
        _route_after_animation,
        {"push": "push_node", "done": END},
    )
    workflow.add_edge("push_node", END)

    return workflow.compile()


def run_workflow(config: TrainConfig) -> TrainState:
    """Run the git-train workflow and return the final state."""
    initial_state: TrainState = {
        "repo_path": config.repo_path,
        "branch": config.branch,
        "remote": config.remote,
        "push": config.push,
        "force": config.force,
        "tick_seconds": config.tick_seconds,
        "errors": [],
    }

    app = create_workflow()
    return app.invoke(initial_state)


def main(argv: Optional[Sequence[str]] = None) -> int:
    config = load_config(argv)

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if config.verbose else "INFO")

    logger.info(f"Checking unpushed commits in: {config.repo_path}")
    try:
        final_state = run_workflow(config)
    except GitTrainError as e:
        logger.error(f"Error: {e}")
        return 1
    except KeyboardInterrupt:
        logger.warning("Animation interrupted; nothing was pushed")
        return 130

    logger.info(f"Animated {final_state['commit_count']} commits")

    if final_state.get("errors"):
        logger.error("Errors encountered during processing:")
        for error in final_state["errors"]:
            logger.error(f"- {error['node']}: {error['error']}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
