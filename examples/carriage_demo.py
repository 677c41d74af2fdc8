#!/usr/bin/env python3
"""
Example program printing the train git-train would animate, as a still image.

Useful for checking how commit messages fit the carriages without taking over
the terminal.
"""

import argparse
import sys

from gittrain.animation.sprites import D51_BODY, D51_COAL, D51_WHEELS
from gittrain.git_backend import GitBackend
from gittrain.models.errors import GitTrainError
from gittrain.nodes.carriage_node import render_carriage
from gittrain.nodes.commit_discovery_node import extract_commits


def stitch(*sprites) -> str:
    """Join sprites side by side, top aligned."""
    height = max(len(sprite) for sprite in sprites)
    rows = []
    for i in range(height):
        rows.append("".join(sprite[i] if i < len(sprite) else " " * len(sprite[0]) for sprite in sprites))
    return "\n".join(rows)


def main():
    parser = argparse.ArgumentParser(description="Print the commit train for a Git repository")
    parser.add_argument("repo_path", nargs="?", default=".", help="Path to the Git repository")
    parser.add_argument("--branch", help="Local branch (default: current branch)")
    parser.add_argument("--remote", default="origin", help="Remote name (default: origin)")
    args = parser.parse_args()

    try:
        backend = GitBackend(args.repo_path)
        branch = args.branch or backend.current_branch()
        commits = extract_commits(backend, branch, args.remote)
    except GitTrainError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # The coal car overlaps the last column of the locomotive
    locomotive = tuple(line[:-1] for line in D51_BODY + D51_WHEELS[0])
    print(stitch(locomotive, D51_COAL, *[render_carriage(commit) for commit in commits]))
    return 0


if __name__ == "__main__":
    sys.exit(main())
