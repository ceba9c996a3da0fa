"""Shared dataclasses for store and lookup results."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import Any


def to_json(data: Any, indent: int = 2) -> str:
    if isinstance(data, list):
        serializable = [asdict(item) if hasattr(item, "__dataclass_fields__") else item for item in data]
    elif hasattr(data, "__dataclass_fields__"):
        serializable = asdict(data)
    else:
        serializable = data
    return json.dumps(serializable, indent=indent)


@dataclass
class AliasEntry:
    alias: str
    commit_ref: str


@dataclass
class CommitQuery:
    is_alias: bool
    alias_name: str | None  # set only when the input matched a saved alias
    commit_ref: str  # stored value for aliases, raw input otherwise


@dataclass
class FindResult:
    query: CommitQuery
    branches: list[str] = field(default_factory=list)
    branch_filter: str | None = None
    changed_files: list[str] | None = None  # None unless --files was requested
