"""List the files a single commit touched."""

from __future__ import annotations

import sys

from git import Repo

from findcommit.repo import open_repo


def changed_files(repo: Repo, commit_ref: str) -> list[str]:
    """Return paths changed by *commit_ref*, as reported by ``git diff-tree``."""
    output = repo.git.diff_tree("--no-commit-id", "--name-only", "-r", "--root", commit_ref)
    return [line.strip() for line in output.splitlines() if line.strip()]


if __name__ == "__main__":
    r = open_repo(".")
    for path in changed_files(r, sys.argv[1]):
        print(path)
