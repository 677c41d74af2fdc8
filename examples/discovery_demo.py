#!/usr/bin/env python3
"""
examples/discovery_demo.py

Demonstrates the git-train discovery step by listing the commits a push of the
current (or given) branch would publish, oldest first, without animating or
pushing anything.
"""

import argparse
import os
import sys

from gittrain.git_backend import GitBackend
from gittrain.models.errors import GitTrainError
from gittrain.nodes.commit_discovery_node import extract_commits


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Demonstrate git-train's commit discovery")
    parser.add_argument(
        "--repo-path",
        type=str,
        default=os.getcwd(),
        help="Path to Git repository (default: current directory)",
    )
    parser.add_argument("--branch", type=str, help="Local branch (default: current branch)")
    parser.add_argument("--remote", type=str, default="origin", help="Remote name (default: origin)")
    return parser.parse_args()


def format_commit_info(commit) -> str:
    """Format a single commit's information for display."""
    return f"""
Commit: {commit.hash[:8]}
Message: {commit.message}
Changes: {commit.modifications or 'No files changed'}
{'=' * 80}
"""


def main():
    """Run the discovery demo."""
    args = parse_args()

    try:
        backend = GitBackend(args.repo_path)
        branch = args.branch or backend.current_branch()
        print(f"Looking for commits on {branch} missing from {args.remote}/{branch}")

        commits = extract_commits(backend, branch, args.remote)

        print(f"\nDiscovered {len(commits)} unpushed commits")
        for commit in commits:
            print(format_commit_info(commit))

    except GitTrainError as e:
        print(f"Error running discovery: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
