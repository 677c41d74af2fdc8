"""Command line and environment configuration for git-train."""

import argparse
import os
from dataclasses import dataclass
from typing import Optional, Sequence

from dotenv import find_dotenv, load_dotenv

DEFAULT_REMOTE = "origin"
DEFAULT_SPEED = 40
MIN_SPEED = 1
# Slower than this and a long train keeps the terminal for ages
MAX_SPEED = 120


def clamp_speed(speed: int) -> int:
    """Clamp a tick period in milliseconds to [MIN_SPEED, MAX_SPEED]."""
    return max(MIN_SPEED, min(MAX_SPEED, speed))


@dataclass(frozen=True)
class TrainConfig:
    """Resolved settings for one run."""

    repo_path: str
    branch: Optional[str]
    remote: str
    push: bool
    force: bool
    speed: int
    verbose: bool = False

    @property
    def tick_seconds(self) -> float:
        return self.speed / 1000


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="git-train", description="Watch your unpushed commits leave the station, then push them"
    )
    parser.add_argument("--repo-path", type=str, help="Path to the Git repository", default=".")
    parser.add_argument("--branch", type=str, help="Local branch (default: current working branch)", default=None)
    parser.add_argument(
        "--remote",
        type=str,
        help=f"Remote name (default: $GIT_TRAIN_REMOTE or {DEFAULT_REMOTE})",
        default=os.getenv("GIT_TRAIN_REMOTE", DEFAULT_REMOTE),
    )
    parser.add_argument(
        "--push",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Push the branch after the animation finishes (default: push)",
    )
    parser.add_argument("--force", action="store_true", help="Force push the branch. USE WITH CAUTION")
    parser.add_argument(
        "--speed",
        type=int,
        help=f"Animation tick in milliseconds, lower is faster, clamped to {MIN_SPEED}-{MAX_SPEED} "
        f"(default: $GIT_TRAIN_SPEED or {DEFAULT_SPEED})",
        default=os.getenv("GIT_TRAIN_SPEED", str(DEFAULT_SPEED)),
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return parser


def load_config(argv: Optional[Sequence[str]] = None) -> TrainConfig:
    """Read ``.env``, the environment and ``argv`` into a ``TrainConfig``."""
    load_dotenv(find_dotenv(usecwd=True))
    args = build_parser().parse_args(argv)

    return TrainConfig(
        repo_path=os.path.abspath(args.repo_path),
        branch=args.branch or None,
        remote=args.remote,
        push=args.push,
        force=args.force,
        speed=clamp_speed(args.speed),
        verbose=args.verbose,
    )
