"""Git lookups for a resolved commit reference."""

# Lazy re-exports: import only when the package itself is imported (not when
# individual modules are run via `python -m`), which prevents a harmless but
# noisy RuntimeWarning from runpy.
from importlib import import_module as _im


def __getattr__(name: str):  # noqa: N807
    _map = {
        "branches_containing": ("branches", "branches_containing"),
        "parse_branch_output": ("branches", "parse_branch_output"),
        "changed_files": ("files", "changed_files"),
    }
    if name in _map:
        mod_name, attr = _map[name]
        mod = _im(f"findcommit.lookups.{mod_name}")
        return getattr(mod, attr)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

__all__ = [
    "branches_containing",
    "parse_branch_output",
    "changed_files",
]
