"""``python -m greeter``: the console script's entry, run as a module."""

from __future__ import annotations

from .entry import main

if __name__ == "__main__":
    raise SystemExit(main())
