"""Tests for the push node and the backend push call."""

import pytest
from git import Repo
from pathlib import Path
from unittest.mock import Mock

from gittrain.git_backend import GitBackend
from gittrain.nodes.push_node import push_node


@pytest.fixture
def ahead_repo(tmp_path):
    """A repository one commit ahead of its bare 'origin'."""
    remote_path = tmp_path / "remote.git"
    Repo.init(remote_path, bare=True)

    repo_path = tmp_path / "local"
    repo_path.mkdir()
    repo = Repo.init(repo_path)
    (repo_path / "README.md").write_text("hello\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")

    repo.create_remote("origin", str(remote_path))
    repo.git.push("origin", repo.active_branch.name)

    (repo_path / "README.md").write_text("hello again\n")
    repo.index.add(["README.md"])
    repo.index.commit("Update readme")
    return repo


def test_push_node_pushes_branch(ahead_repo):
    branch = ahead_repo.active_branch.name
    state = push_node(
        {"repo_path": ahead_repo.working_dir, "branch": branch, "remote": "origin", "errors": []}
    )

    assert state["pushed"] is True
    assert state["errors"] == []
    remote = Repo(Path(ahead_repo.working_dir).parent / "remote.git")
    assert remote.commit(branch).hexsha == ahead_repo.head.commit.hexsha


def test_push_failure_is_recorded(ahead_repo):
    state = push_node(
        {
            "repo_path": ahead_repo.working_dir,
            "branch": ahead_repo.active_branch.name,
            "remote": "nowhere",
            "errors": [],
        }
    )

    assert state["pushed"] is False
    assert len(state["errors"]) == 1
    assert state["errors"][0]["node"] == "push"
    assert "push failed" in state["errors"][0]["error"]


def test_force_flag_is_passed(ahead_repo):
    backend = GitBackend(ahead_repo.working_dir)
    backend.repo = Mock()

    backend.push("main", "origin", force=True)
    backend.repo.git.push.assert_called_once_with("origin", "main", "--force")


def test_plain_push_has_no_force(ahead_repo):
    backend = GitBackend(ahead_repo.working_dir)
    backend.repo = Mock()

    backend.push("main", "origin")
    backend.repo.git.push.assert_called_once_with("origin", "main")
