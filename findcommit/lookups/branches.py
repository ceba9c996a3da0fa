"""Find the remote branches that contain a commit."""

from __future__ import annotations

import logging
import sys

from git import Repo

from findcommit.repo import open_repo

logger = logging.getLogger(__name__)


def parse_branch_output(output: str, branch_filter: str | None = None) -> list[str]:
    """Split ``git branch`` output into branch names.

    Blank lines and the symbolic ``origin/HEAD -> origin/main`` pointer are
    dropped.  When *branch_filter* is given only names containing it as a
    plain, case-sensitive substring are kept.
    """
    branches: list[str] = []
    for line in output.splitlines():
        name = line.strip()
        if not name or " -> " in name:
            continue
        if branch_filter and branch_filter not in name:
            continue
        branches.append(name)
    return branches


def branches_containing(
    repo: Repo,
    commit_ref: str,
    branch_filter: str | None = None,
) -> list[str]:
    """Return remote-tracking branches that contain *commit_ref*.

    Parameters
    ----------
    repo:
        Open GitPython Repo object.
    commit_ref:
        Full or abbreviated SHA (or any revision git understands).
    branch_filter:
        Optional substring a branch name must contain to be reported.

    Raises ``git.GitCommandError`` when git rejects the reference; callers
    classify it with :func:`findcommit.repo.classify_git_error`.
    """
    output = repo.git.branch("-r", f"--contains={commit_ref}")
    branches = parse_branch_output(output, branch_filter)
    logger.debug("%d branch(es) contain %s (filter=%r)", len(branches), commit_ref, branch_filter)
    return branches


if __name__ == "__main__":
    ref_arg = sys.argv[1]
    filter_arg = sys.argv[2] if len(sys.argv) > 2 else None

    r = open_repo(".")
    for b in branches_containing(r, ref_arg, filter_arg):
        print(b)
