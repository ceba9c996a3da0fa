"""Run find-commit from a source checkout: ``python main.py <sha-or-alias> [branch-substring]``."""

import sys

from findcommit.cli import main

if __name__ == "__main__":
    sys.exit(main())
