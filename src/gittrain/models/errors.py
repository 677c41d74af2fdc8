"""Error taxonomy for git-train.

Every error is terminal for the run. Precondition failures and the empty
ahead-only set get their own types so the CLI can print an actionable message
instead of a raw git failure.
"""

from typing import Optional


class GitTrainError(Exception):
    """Base class for all git-train errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}\n{self.details}"
        return self.message


class BranchNotFoundError(GitTrainError):
    """The local branch does not exist."""

    def __init__(self, branch: str, details: Optional[str] = None):
        super().__init__(f"local branch '{branch}' does not exist", details)
        self.branch = branch


class RemoteBranchNotFoundError(GitTrainError):
    """The remote-tracking branch does not exist."""

    def __init__(self, remote: str, branch: str, details: Optional[str] = None):
        super().__init__(f"remote branch '{remote}/{branch}' does not exist", details)
        self.remote = remote
        self.branch = branch


class NoUnpushedCommitsError(GitTrainError):
    """The branch has nothing its remote counterpart lacks."""

    def __init__(self, branch: str):
        super().__init__(f"no unpushed commits found on branch '{branch}'")
        self.branch = branch


class BackendQueryFailedError(GitTrainError):
    """A git command failed; ``details`` carries git's output."""


class PushFailedError(GitTrainError):
    """``git push`` failed; ``details`` carries git's output."""


class InvalidWidthError(GitTrainError, ValueError):
    """A fixed-width field was requested that cannot hold the ellipsis marker."""

    def __init__(self, width: int):
        super().__init__(f"field width must be at least 3, got {width}")
        self.width = width
