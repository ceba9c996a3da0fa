"""find-commit: which remote branches contain a commit, with saved SHA aliases."""

__version__ = "0.4.0"
