"""
git-train commit discovery node: finds the commits a push would publish.
"""

import re
from typing import List

from loguru import logger

from gittrain.git_backend import LOG_SENTINEL, GitBackend
from gittrain.models.base import CommitRecord
from gittrain.models.errors import (
    BranchNotFoundError,
    NoUnpushedCommitsError,
    RemoteBranchNotFoundError,
)
from gittrain.models.state import TrainState

INSERTIONS_PATTERN = re.compile(r"(\d+)\s+insertions?\(\+\)")
DELETIONS_PATTERN = re.compile(r"(\d+)\s+deletions?\(-\)")
# Only a line holding nothing but the sentinel starts a new entry
SENTINEL_LINE_PATTERN = re.compile(rf"^{re.escape(LOG_SENTINEL)}\n", re.MULTILINE)


def parse_change_summary(line: str) -> str:
    """Convert a git shortstat line into the '<files>, +X -Y' form."""
    if not line:
        return ""

    result = line.split(",")[0].strip()

    insertions = INSERTIONS_PATTERN.search(line)
    if insertions:
        result += f", +{insertions.group(1)}"

    deletions = DELETIONS_PATTERN.search(line)
    if deletions:
        result += f" -{deletions.group(1)}"

    return result


def parse_log_output(output: str) -> List[CommitRecord]:
    """Parse sentinel-delimited ``git log`` output, keeping git's order.

    Entries with fewer than a hash and a subject line are skipped; an empty
    subject still counts as a line.
    """
    if not output.strip():
        return []

    commits = []
    for block in SENTINEL_LINE_PATTERN.split(output.lstrip("\n")):
        lines = block.split("\n")
        if len(lines) < 2 or not lines[0].strip():
            continue

        # The shortstat line is absent for commits that touch no files
        stat_lines = [line.strip() for line in lines[2:] if line.strip()]
        commits.append(
            CommitRecord(
                hash=lines[0].strip(),
                message=lines[1].strip(),
                modifications=parse_change_summary(stat_lines[0]) if stat_lines else "",
            )
        )

    return commits


def extract_commits(backend: GitBackend, branch: str, remote: str) -> List[CommitRecord]:
    """Return the commits on ``branch`` that ``remote`` lacks, oldest first.

    Raises:
        BranchNotFoundError: If ``branch`` does not exist locally.
        RemoteBranchNotFoundError: If ``remote/branch`` is not a known remote-tracking ref.
        NoUnpushedCommitsError: If there is nothing to push.
        BackendQueryFailedError: If the log query itself fails.
    """
    if not backend.has_local_ref(branch):
        raise BranchNotFoundError(branch)
    if not backend.has_remote_branch(remote, branch):
        raise RemoteBranchNotFoundError(remote, branch)

    commits = parse_log_output(backend.log_ahead(branch, remote))
    if not commits:
        raise NoUnpushedCommitsError(branch)

    # Earliest commit first: later commits build on it, so it couples to the locomotive
    commits.reverse()
    return commits


def commit_discovery_node(state: TrainState) -> TrainState:
    """Resolve the branch and attach its unpushed commits to the state."""
    if "repo_path" not in state:
        raise ValueError("repo_path is required in TrainState")

    logger.info("Executing Commit Discovery Node")

    backend = GitBackend(state["repo_path"])
    branch = state.get("branch") or backend.current_branch()
    remote = state.get("remote") or "origin"

    commits = extract_commits(backend, branch, remote)
    logger.info(f"Discovered {len(commits)} unpushed commits on {branch}")
    for commit in commits:
        logger.debug(f"{commit.hash[:8]} {commit.message} ({commit.modifications or 'no changes'})")

    new_state: TrainState = {
        **state,
        "branch": branch,
        "remote": remote,
        "commits": commits,
        "commit_count": len(commits),
    }

    return new_state
