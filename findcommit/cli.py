"""CLI entrypoint for find-commit.

Usage:
    find-commit [options] <commit-sha-or-alias> [branch-substring]
    find-commit [options] -s <alias> <commit-sha>
    find-commit [options] -l
    find-commit [options] -d <alias>

Examples:
    find-commit 88990a5689f983f461f7934a42d5c689d0d9b4de
    find-commit 88990a release
    find-commit -s hotfix 88990a
    find-commit hotfix

Options:
    --files            Also list the files the commit changed
    --repo PATH        Path to the git repository (default: current directory)
    --storage FILE     Alias file (default: $FINDCOMMIT_STORAGE, else beside the package)
    --json             Print JSON instead of text
    -v, --verbose      Debug logging on stderr
"""

from __future__ import annotations

import argparse
import logging
import sys

from findcommit.config import storage_path
from findcommit.dispatch import Deleted, Found, Listed, Outcome, ParsedArgs, Saved, dispatch
from findcommit.errors import FindCommitError, UsageError
from findcommit.models import to_json
from findcommit.repo import open_repo
from findcommit.store import AliasStore


def _print_found(outcome: Found) -> None:
    result = outcome.result
    query = result.query
    if result.branches:
        print(f"Branches that contain commit {query.commit_ref}:")
        for branch in result.branches:
            print(f"  {branch}")
    else:
        what = f"the {query.alias_name} commit ({query.commit_ref})" if query.is_alias else f"commit {query.commit_ref}"
        suffix = f" matching '{result.branch_filter}'" if result.branch_filter else ""
        print(f"No remote branches{suffix} contain {what}.")

    if result.changed_files is not None:
        print(f"\nFiles changed in commit {query.commit_ref}: {len(result.changed_files)}")
        for path in result.changed_files:
            print(f"  {path}")


def render(outcome: Outcome) -> None:
    if isinstance(outcome, Saved):
        print(f"Successfully saved alias '{outcome.alias}' -> {outcome.commit_ref}.")
    elif isinstance(outcome, Listed):
        if not outcome.entries:
            print("No aliases have been saved.")
            return
        print(f"Saved aliases ({len(outcome.entries)}):")
        width = max(len(e.alias) for e in outcome.entries)
        for e in outcome.entries:
            print(f"  {e.alias:<{width}}  {e.commit_ref}")
    elif isinstance(outcome, Deleted):
        if outcome.found:
            print(f"Deleted alias '{outcome.alias}'.")
        else:
            print(f"No alias named '{outcome.alias}' was found.")
    else:
        _print_found(outcome)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="find-commit",
        description="Find the remote branches that contain a commit, with saved aliases for SHAs.",
    )
    parser.add_argument("-s", "--save", metavar="ALIAS", default=None, help="Save <commit-sha> under ALIAS")
    parser.add_argument("-l", "--list", dest="list_aliases", action="store_true", help="List saved aliases")
    parser.add_argument("-d", "--delete", metavar="ALIAS", default=None, help="Delete a saved alias")
    parser.add_argument(
        "inputs",
        nargs="*",
        metavar="ARG",
        help="Commit SHA or alias, then an optional branch-name substring (or the SHA when saving)",
    )
    parser.add_argument("--files", action="store_true", help="Also list files changed by the commit")
    parser.add_argument("--repo", default=".", metavar="PATH", help="Path to the git repo (default: .)")
    parser.add_argument("--storage", default=None, metavar="FILE", help="Alias storage file")
    parser.add_argument("--json", action="store_true", help="Print JSON output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_intermixed_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if ns.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    args = ParsedArgs(
        save=ns.save,
        list_aliases=ns.list_aliases,
        delete=ns.delete,
        inputs=ns.inputs,
        files=ns.files,
    )
    store = AliasStore(storage_path(ns.storage))

    try:
        outcome = dispatch(args, store, lambda: open_repo(ns.repo))
    except UsageError as exc:
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: {exc}", file=sys.stderr)
        return 2
    except FindCommitError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if ns.json:
        print(to_json(outcome))
    else:
        render(outcome)
    return 0


if __name__ == "__main__":
    sys.exit(main())
