"""Traceback preferences shared with lib_cli_exit_tools.

``--traceback`` flips two process-wide flags on ``lib_cli_exit_tools.config``.
:class:`TracebackSettings` reads and writes both as one value, so
:func:`greeter.adapters.cli.main.main` can put them back after a run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

import lib_cli_exit_tools

#: Characters of the error report printed without ``--traceback``.
SUMMARY_LIMIT: Final[int] = 500

#: Characters of the error report printed with ``--traceback``.
VERBOSE_LIMIT: Final[int] = 10_000


@dataclass(frozen=True, slots=True)
class TracebackSettings:
    """The lib_cli_exit_tools flags that shape a crash report.

    Example:
        >>> TracebackSettings.verbose(True)
        TracebackSettings(show=True, force_color=True)
        >>> TracebackSettings().length_limit
        500
    """

    show: bool = False
    force_color: bool = False

    @classmethod
    def verbose(cls, enabled: bool) -> TracebackSettings:
        """Settings for ``--traceback`` (``True``) or its absence."""
        return cls(show=enabled, force_color=enabled)

    @classmethod
    def current(cls) -> TracebackSettings:
        """Read the flags lib_cli_exit_tools holds right now."""
        config = lib_cli_exit_tools.config
        return cls(
            show=bool(getattr(config, "traceback", False)),
            force_color=bool(getattr(config, "traceback_force_color", False)),
        )

    @property
    def length_limit(self) -> int:
        return VERBOSE_LIMIT if self.show else SUMMARY_LIMIT

    def apply(self) -> None:
        """Write both flags back to lib_cli_exit_tools."""
        lib_cli_exit_tools.config.traceback = self.show
        lib_cli_exit_tools.config.traceback_force_color = self.force_color


__all__ = ["SUMMARY_LIMIT", "VERBOSE_LIMIT", "TracebackSettings"]
