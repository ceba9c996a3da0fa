"""Pick one action from the parsed command line and run it.

Every action returns a small outcome dataclass; rendering is left to the CLI.
Domain failures are raised as :class:`findcommit.errors.FindCommitError`
subclasses and nothing is written to the store before the arguments have
been validated.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Callable

from git import GitCommandError, GitCommandNotFound, Repo

from findcommit.errors import (
    CommitNotFoundError,
    ConflictingFlagsError,
    ExternalToolError,
    MissingArgumentError,
)
from findcommit.lookups import branches_containing, changed_files
from findcommit.models import AliasEntry, FindResult
from findcommit.repo import classify_git_error
from findcommit.store import AliasStore

logger = logging.getLogger(__name__)


class Mode(enum.Enum):
    SAVE = "save"
    LIST = "list"
    DELETE = "delete"
    FIND = "find"


@dataclass
class ParsedArgs:
    save: str | None = None  # alias given to -s
    list_aliases: bool = False
    delete: str | None = None  # alias given to -d
    inputs: list[str] = field(default_factory=list)
    files: bool = False


@dataclass
class Saved:
    alias: str
    commit_ref: str


@dataclass
class Listed:
    entries: list[AliasEntry]


@dataclass
class Deleted:
    alias: str
    found: bool


@dataclass
class Found:
    result: FindResult


Outcome = Saved | Listed | Deleted | Found


def select_mode(args: ParsedArgs) -> Mode:
    """Return the single requested mode; FIND when no mode flag is set."""
    requested = []
    if args.save is not None:
        requested.append(Mode.SAVE)
    if args.list_aliases:
        requested.append(Mode.LIST)
    if args.delete is not None:
        requested.append(Mode.DELETE)
    if len(requested) > 1:
        names = ", ".join(m.value for m in requested)
        raise ConflictingFlagsError(f"Only one of save, list or delete may be used at a time (got {names}).")
    return requested[0] if requested else Mode.FIND


def _save(args: ParsedArgs, store: AliasStore) -> Saved:
    commit_ref = args.inputs[0] if args.inputs else None
    if not commit_ref:
        raise MissingArgumentError("Please specify both an alias and a commit message SHA.")
    store.set(args.save, commit_ref)
    return Saved(alias=args.save, commit_ref=commit_ref)


def _delete(args: ParsedArgs, store: AliasStore) -> Deleted:
    if not args.delete:
        raise MissingArgumentError("Please specify the alias to delete.")
    return Deleted(alias=args.delete, found=store.delete(args.delete))


def _find(args: ParsedArgs, store: AliasStore, repo_factory: Callable[[], Repo]) -> Found:
    if not args.inputs:
        raise MissingArgumentError("Please specify a saved alias or a commit message SHA.")
    query = store.resolve(args.inputs[0])
    branch_filter = args.inputs[1] if len(args.inputs) > 1 else None
    logger.debug("resolved %r to %s (alias=%s)", args.inputs[0], query.commit_ref, query.is_alias)

    # A leading dash would be read by git as an option.
    if query.commit_ref.startswith("-"):
        raise CommitNotFoundError(query)

    repo = repo_factory()
    result = FindResult(query=query, branch_filter=branch_filter)
    try:
        result.branches = branches_containing(repo, query.commit_ref, branch_filter)
        if args.files:
            result.changed_files = changed_files(repo, query.commit_ref)
    except GitCommandNotFound as exc:
        raise ExternalToolError(f"Unable to run git: {exc}") from exc
    except GitCommandError as exc:
        raise classify_git_error(exc, query) from exc
    return Found(result=result)


def dispatch(args: ParsedArgs, store: AliasStore, repo_factory: Callable[[], Repo]) -> Outcome:
    """Run the action selected by *args*.

    *repo_factory* is only called in find mode, so alias management works
    outside a git repository.
    """
    mode = select_mode(args)
    logger.debug("dispatching %s", mode.value)
    if mode is Mode.SAVE:
        return _save(args, store)
    if mode is Mode.LIST:
        return Listed(entries=store.list())
    if mode is Mode.DELETE:
        return _delete(args, store)
    return _find(args, store, repo_factory)
