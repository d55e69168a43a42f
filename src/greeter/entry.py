"""Console script ``greeter``: the command line wired to production services.

Kept beside ``adapters`` rather than inside it, so the adapters never
import the composition root.
"""

from __future__ import annotations

from collections.abc import Sequence

from .adapters.cli.main import main as run_cli
from .composition import build_production


def main(argv: Sequence[str] | None = None) -> int:
    """Run ``greeter`` with ``argv`` (``sys.argv`` when None) and return the exit code."""
    return run_cli(argv, services_factory=build_production)


__all__ = ["main"]
