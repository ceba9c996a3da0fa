"""Exceptions raised by find-commit."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from findcommit.models import CommitQuery


class FindCommitError(Exception):
    """Base exception for find-commit."""

    pass


class UsageError(FindCommitError):
    """Raised when the command line cannot be turned into a single action."""

    pass


class MissingArgumentError(UsageError):
    """Raised when a required flag value or positional argument is absent."""

    pass


class ConflictingFlagsError(UsageError):
    """Raised when more than one of save/list/delete is requested."""

    pass


class InvalidAliasError(FindCommitError):
    """Raised when an alias is empty, reserved, or has characters outside [A-Za-z0-9_-]."""

    pass


class StorageReadError(FindCommitError):
    """Raised when the alias file exists but cannot be read or parsed."""

    pass


class StorageWriteError(FindCommitError):
    """Raised when the alias file cannot be written."""

    pass


class NotARepositoryError(FindCommitError):
    """Raised when no git repository is found at or above the given path."""

    pass


class CommitNotFoundError(FindCommitError):
    """Raised when git cannot resolve the commit reference."""

    def __init__(self, query: CommitQuery) -> None:
        self.query = query
        if query.is_alias:
            msg = f"The {query.alias_name} commit was not found in this repository."
        else:
            msg = f"The commit of {query.commit_ref} was not found in this repository."
        super().__init__(msg)


class ExternalToolError(FindCommitError):
    """Raised for any git failure other than an unresolvable commit."""

    def __init__(self, message: str, status: int | str | None = None, stderr: str = "") -> None:
        self.status = status
        self.stderr = stderr
        super().__init__(message)
