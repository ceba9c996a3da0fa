"""Shared fixtures for the find-commit test suite."""

from __future__ import annotations

import shutil
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from findcommit.store import AliasStore


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    return tmp_path / "alias-storage.json"


@pytest.fixture
def store(store_path: Path) -> AliasStore:
    return AliasStore(store_path)


@pytest.fixture
def fake_repo():
    """A stand-in for ``git.Repo`` whose ``git`` commands are scripted per test."""
    repo = MagicMock()
    repo.git.branch.return_value = "  origin/main\n  origin/release-1.2\n"
    repo.git.diff_tree.return_value = "README.md\nsrc/app.py\n"
    return repo


@pytest.fixture
def git_repo(tmp_path: Path):
    """A real repository with two commits and remote-tracking refs pointing at them.

    ``origin/main`` points at the first commit, ``origin/release-1.2`` at the
    second, so the first commit is on both branches and the second only on
    the release branch.
    """
    if shutil.which("git") is None:
        pytest.skip("git executable not available")
    from git import Actor, Repo

    actor = Actor("Test", "test@example.com")
    repo = Repo.init(tmp_path / "repo")
    work = Path(repo.working_dir)

    (work / "README.md").write_text("hello\n")
    repo.index.add(["README.md"])
    first = repo.index.commit("first", author=actor, committer=actor)

    (work / "app.py").write_text("print('hi')\n")
    repo.index.add(["app.py"])
    second = repo.index.commit("second", author=actor, committer=actor)

    repo.git.update_ref("refs/remotes/origin/main", first.hexsha)
    repo.git.update_ref("refs/remotes/origin/release-1.2", second.hexsha)
    return repo, first.hexsha, second.hexsha
