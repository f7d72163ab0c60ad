"""Allow ``python -m lintnames`` invocation."""

from __future__ import annotations

from lintnames.cli import main

if __name__ == "__main__":
    main()
