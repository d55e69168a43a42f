"""``greeter`` command line.

Contents:
    * :data:`cli` - rich-click group with ``hello``, ``info``, ``fail`` and ``config``.
    * :func:`main` - run the group and return an exit code.
    * :class:`ExitCode` - codes the commands exit with.
"""

from __future__ import annotations

from .exit_codes import ExitCode
from .main import main
from .root import cli

__all__ = ["ExitCode", "cli", "main"]
