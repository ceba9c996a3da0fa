"""Thin helpers for opening a repo and classifying git failures."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from git import GitCommandError, InvalidGitRepositoryError, NoSuchPathError, Repo

from findcommit.errors import CommitNotFoundError, ExternalToolError, FindCommitError, NotARepositoryError
from findcommit.models import CommitQuery

logger = logging.getLogger(__name__)

# git exits 129 when an option value (the --contains commit) cannot be parsed.
_BAD_REVISION_STATUS = 129

# Fallback only: git's diagnostic wording is not a stable interface.
_NOT_FOUND_RE = re.compile(
    r"malformed|no such commit|unknown revision|bad revision|bad object|not a valid",
    re.IGNORECASE,
)


def open_repo(path: str | Path = ".") -> Repo:
    """Open a git repository at *path* (or any of its parents)."""
    try:
        repo = Repo(str(path), search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError):
        raise NotARepositoryError(f"No git repository found at or above: {path}")
    logger.debug("opened repository at %s", repo.working_dir)
    return repo


def _stderr_text(exc: GitCommandError) -> str:
    stderr = exc.stderr
    if isinstance(stderr, bytes):
        stderr = stderr.decode("utf-8", errors="replace")
    return stderr or ""


def classify_git_error(exc: GitCommandError, query: CommitQuery) -> FindCommitError:
    """Turn a failed git call about *query* into the matching domain error."""
    stderr = _stderr_text(exc)
    logger.debug("git failed with status %r: %s", exc.status, stderr.strip())
    if exc.status == _BAD_REVISION_STATUS or _NOT_FOUND_RE.search(stderr):
        return CommitNotFoundError(query)
    detail = stderr.strip() or str(exc)
    return ExternalToolError(
        f"git exited with status {exc.status}: {detail}",
        status=exc.status,
        stderr=stderr,
    )
