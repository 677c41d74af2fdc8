"""
git-train run state shared between the pipeline nodes.
"""

from typing import Any, Dict, List, Optional, Tuple, TypedDict

from gittrain.models.base import CommitRecord


class TrainState(TypedDict, total=False):
    """State container for one git-train run.

    Using TypedDict for LangGraph compatibility. total=False means all fields
    are optional.
    """

    # Run configuration
    repo_path: str  # Path to (or inside) the Git repository
    branch: Optional[str]  # Local branch; None means the current branch
    remote: str  # Remote name, e.g. "origin"
    push: bool  # Push once the train has left the screen
    force: bool  # Use --force when pushing
    tick_seconds: float  # Fixed animation period

    # Commit discovery output
    commits: List[CommitRecord]  # Unpushed commits, oldest first
    commit_count: int

    # Carriage output
    carriages: List[Tuple[str, ...]]  # One rendered carriage per commit

    # Animation output
    ticks: int  # Number of frames drawn

    # Push output
    pushed: bool

    # Global state
    errors: List[Dict[str, Any]]
