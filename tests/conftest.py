"""
Shared test fixtures and configuration.
"""

import os
import subprocess
from collections.abc import Callable
from pathlib import Path

import pytest


class _FakeDescriber:
    """Describer test double returning a configurable value."""

    def __init__(self, version: str | None = None):
        self.version = version
        self.calls = 0

    def __call__(self) -> str | None:
        self.calls += 1
        return self.version


@pytest.fixture
def make_describer() -> Callable[[str | None], _FakeDescriber]:
    """Factory for fake describers: ``make_describer("v1.0")``."""
    return _FakeDescriber


@pytest.fixture
def fake_describer() -> _FakeDescriber:
    """A describer returning ``v1.2.3-4-gabcde12`` until changed."""
    return _FakeDescriber("v1.2.3-4-gabcde12")


@pytest.fixture
def out_dir(tmp_path: Path) -> Path:
    """An existing, empty output directory."""
    path = tmp_path / "out"
    path.mkdir()
    return path


@pytest.fixture
def age_file() -> Callable[[Path], int]:
    """Push a file's mtime into the past; returns the new mtime_ns.

    Lets mtime comparisons work regardless of filesystem timestamp
    granularity.
    """

    def _age(path: Path) -> int:
        old = 1_000_000_000
        os.utime(path, (old, old))
        return path.stat().st_mtime_ns

    return _age


@pytest.fixture
def no_git_repo(tmp_path: Path, monkeypatch) -> Path:
    """A working directory git will never treat as a repository."""
    workdir = tmp_path / "not-a-repo"
    workdir.mkdir()
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    monkeypatch.chdir(workdir)
    return workdir


@pytest.fixture
def run_git() -> Callable[..., str]:
    """Run git in a repository with a throwaway identity: ``run_git(repo, "tag", "v1")``."""

    def _git(repo: Path, *args: str) -> str:
        env = {
            **os.environ,
            "GIT_AUTHOR_NAME": "Test",
            "GIT_AUTHOR_EMAIL": "test@example.com",
            "GIT_COMMITTER_NAME": "Test",
            "GIT_COMMITTER_EMAIL": "test@example.com",
        }
        result = subprocess.run(
            ["git", *args],
            cwd=repo,
            env=env,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.strip()

    return _git


@pytest.fixture
def git_repo(tmp_path: Path, monkeypatch, run_git) -> Path:
    """A git repository with one empty commit; cwd is set to it."""
    repo = tmp_path / "repo"
    repo.mkdir()
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    run_git(repo, "init", "-q")
    run_git(repo, "commit", "-q", "--allow-empty", "-m", "initial")
    monkeypatch.chdir(repo)
    return repo
