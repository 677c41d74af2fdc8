"""
Thin GitPython wrapper for the git commands git-train needs.

GitPython errors are translated into the git-train error taxonomy here, so
nothing above this module has to know about ``GitCommandError``.
"""

from git import Repo
from git.exc import GitCommandError, InvalidGitRepositoryError, NoSuchPathError
from loguru import logger

from gittrain.models.errors import BackendQueryFailedError, BranchNotFoundError, PushFailedError

# Marks the start of every entry in the ahead-only log
LOG_SENTINEL = "---"
# tformat terminates every entry, so an empty subject on the oldest commit survives
LOG_FORMAT = f"--pretty=tformat:{LOG_SENTINEL}%n%H%n%s"


def _error_text(error: GitCommandError) -> str:
    return (error.stderr or error.stdout or str(error)).strip()


class GitBackend:
    """Runs git queries and pushes against one repository."""

    def __init__(self, repo_path: str = "."):
        """Open the repository containing ``repo_path``."""
        try:
            self.repo = Repo(repo_path, search_parent_directories=True)
        except (InvalidGitRepositoryError, NoSuchPathError) as e:
            raise BackendQueryFailedError(f"'{repo_path}' is not inside a Git repository", str(e)) from e

    def current_branch(self) -> str:
        """Name of the checked out branch."""
        try:
            branch = self.repo.git.rev_parse("--abbrev-ref", "HEAD").strip()
        except GitCommandError as e:
            raise BackendQueryFailedError("failed to get current branch", _error_text(e)) from e

        if branch == "HEAD":
            raise BranchNotFoundError(branch, "HEAD is detached; pass a branch name explicitly")
        return branch

    def has_local_ref(self, ref: str) -> bool:
        """Whether ``ref`` resolves to an object in the local repository."""
        try:
            self.repo.git.rev_parse("--verify", "--quiet", ref)
        except GitCommandError:
            return False
        return True

    def has_remote_branch(self, remote: str, branch: str) -> bool:
        """Whether the remote-tracking ref ``refs/remotes/<remote>/<branch>`` exists."""
        try:
            self.repo.git.show_ref("--verify", "--quiet", f"refs/remotes/{remote}/{branch}")
        except GitCommandError:
            return False
        return True

    def log_ahead(self, branch: str, remote: str) -> str:
        """Raw log of commits on ``branch`` missing from ``remote/branch``, newest first."""
        rev_range = f"{remote}/{branch}..{branch}"
        logger.debug(f"Querying git log {rev_range}")
        try:
            return self.repo.git.log(rev_range, "--shortstat", LOG_FORMAT, strip_newline_in_stdout=False)
        except GitCommandError as e:
            raise BackendQueryFailedError("git log failed", _error_text(e)) from e

    def push(self, branch: str, remote: str, force: bool = False) -> None:
        """Push ``branch`` to ``remote``."""
        args = [remote, branch]
        if force:
            args.append("--force")

        try:
            self.repo.git.push(*args)
        except GitCommandError as e:
            raise PushFailedError("push failed", _error_text(e)) from e
