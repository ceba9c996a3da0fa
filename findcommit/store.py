"""Alias-to-commit lookup table persisted as a single JSON object.

The file is read in full, changed in memory and written back in full.  Writes
go to a temporary file in the same directory which is then moved over the
original, so a crash mid-write leaves the previous contents intact.

There is no locking: two concurrent ``set``/``delete`` runs race and the last
writer wins.  The tool is a single-user utility and accepts that.
"""

from __future__ import annotations

import json
import logging
import os
import re
import stat
import tempfile
from pathlib import Path

from findcommit.errors import InvalidAliasError, MissingArgumentError, StorageReadError, StorageWriteError
from findcommit.models import AliasEntry, CommitQuery

logger = logging.getLogger(__name__)

# Reserved guard entry; kept on disk but never shown or handed out.
SENTINEL_KEY = "d6f3a0b4-3c1e-4b7a-9f25-8e0c7a1d5b42"

_ALIAS_RE = re.compile(r"^[A-Za-z0-9_-]+$")


def validate_alias(alias: str | None) -> str:
    """Return *alias* unchanged or raise :class:`InvalidAliasError`."""
    if not alias:
        raise InvalidAliasError("Aliases must not be empty.")
    if not _ALIAS_RE.fullmatch(alias):
        raise InvalidAliasError(
            f"Invalid alias {alias!r}: aliases may only contain letters, digits, '-' and '_'."
        )
    if alias == SENTINEL_KEY:
        raise InvalidAliasError(f"{alias!r} is reserved.")
    return alias


class AliasStore:
    """Flat ``{alias: commit_ref}`` map backed by a JSON file."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    # -- core I/O -------------------------------------------------------------

    def load(self) -> dict[str, str]:
        """Read the whole store.  A missing file is an empty store; a corrupt one is an error."""
        if not self.path.exists():
            logger.debug("alias store %s does not exist, starting empty", self.path)
            return {}
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise StorageReadError(f"Unable to read alias store {self.path}: {exc}") from exc
        if not text.strip():
            return {}
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise StorageReadError(f"Alias store {self.path} is not valid JSON: {exc}") from exc
        if not isinstance(data, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in data.items()
        ):
            raise StorageReadError(f"Alias store {self.path} must be a JSON object of strings.")
        return data

    def save(self, aliases: dict[str, str]) -> None:
        """Replace the store with *aliases*, creating parent directories as needed."""
        payload = json.dumps(aliases, indent=2, ensure_ascii=False, sort_keys=True)
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=str(self.path.parent),
                prefix=f".{self.path.name}.",
                suffix=".tmp",
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.write("\n")
            # mkstemp creates 0600; keep the permissions the store already had.
            os.chmod(tmp_name, self._file_mode())
            os.replace(tmp_name, self.path)
        except OSError as exc:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageWriteError(f"Unable to save alias store {self.path}: {exc}") from exc
        logger.debug("wrote %d entries to %s", len(aliases), self.path)

    def _file_mode(self) -> int:
        try:
            return stat.S_IMODE(self.path.stat().st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask

    # -- operations -----------------------------------------------------------

    def set(self, alias: str, commit_ref: str) -> None:
        validate_alias(alias)
        if not commit_ref:
            raise MissingArgumentError("Please specify both an alias and a commit message SHA.")
        aliases = self.load()
        aliases[alias] = commit_ref
        self.save(aliases)

    def get(self, alias: str) -> str | None:
        if alias == SENTINEL_KEY:
            return None
        return self.load().get(alias)

    def delete(self, alias: str) -> bool:
        """Remove *alias*; return False (and leave the file untouched) if it was not there."""
        if alias == SENTINEL_KEY:
            return False
        aliases = self.load()
        if alias not in aliases:
            return False
        del aliases[alias]
        self.save(aliases)
        return True

    def list(self) -> list[AliasEntry]:
        """Return every user-visible entry, sorted by alias for display only."""
        return [
            AliasEntry(alias=k, commit_ref=v)
            for k, v in sorted(self.load().items())
            if k != SENTINEL_KEY
        ]

    def resolve(self, raw: str) -> CommitQuery:
        """Map user input to a commit ref, looking it up as an alias first."""
        ref = self.get(raw)
        if ref is not None:
            return CommitQuery(is_alias=True, alias_name=raw, commit_ref=ref)
        return CommitQuery(is_alias=False, alias_name=None, commit_ref=raw)
