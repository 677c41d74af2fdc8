"""Tests for configuration loading."""

import os

import pytest

from gittrain.config import DEFAULT_SPEED, MAX_SPEED, MIN_SPEED, clamp_speed, load_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Keep the developer's environment and .env files out of the tests."""
    monkeypatch.delenv("GIT_TRAIN_REMOTE", raising=False)
    monkeypatch.delenv("GIT_TRAIN_SPEED", raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    # load_dotenv writes straight into os.environ
    os.environ.pop("GIT_TRAIN_SPEED", None)


@pytest.mark.parametrize(
    "requested,expected",
    [(-5, 1), (0, 1), (1, 1), (40, 40), (120, 120), (121, 120), (10_000, 120)],
)
def test_clamp_speed(requested, expected):
    assert clamp_speed(requested) == expected


def test_defaults():
    config = load_config([])

    assert config.branch is None
    assert config.remote == "origin"
    assert config.push is True
    assert config.force is False
    assert config.speed == DEFAULT_SPEED
    assert config.tick_seconds == pytest.approx(0.04)
    assert os.path.isabs(config.repo_path)


def test_flags():
    config = load_config(
        ["--branch", "feature", "--remote", "upstream", "--no-push", "--force", "--speed", "10", "--verbose"]
    )

    assert config.branch == "feature"
    assert config.remote == "upstream"
    assert config.push is False
    assert config.force is True
    assert config.speed == 10
    assert config.verbose is True


@pytest.mark.parametrize("speed,expected", [("0", MIN_SPEED), ("500", MAX_SPEED)])
def test_speed_flag_is_clamped(speed, expected):
    assert load_config(["--speed", speed]).speed == expected


def test_environment_defaults(monkeypatch):
    monkeypatch.setenv("GIT_TRAIN_REMOTE", "fork")
    monkeypatch.setenv("GIT_TRAIN_SPEED", "80")

    config = load_config([])

    assert config.remote == "fork"
    assert config.speed == 80


def test_flags_override_environment(monkeypatch):
    monkeypatch.setenv("GIT_TRAIN_REMOTE", "fork")
    assert load_config(["--remote", "origin"]).remote == "origin"


def test_dotenv_file_is_read(tmp_path):
    (tmp_path / ".env").write_text("GIT_TRAIN_SPEED=99\n")

    assert load_config([]).speed == 99
